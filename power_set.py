from typing import List


def ordered_power_set(n: int) -> List[int]:
    """
    Ordered power set of an n-element ground set, excluding the full set.

    Subsets are bitmasks (bit i set <=> element i is a member), sorted by
    cardinality and then by numeric value. Every subset appears after all of
    its proper subsets, which is what the bottom-up Held-Karp pass relies on.

    Returns 2**n - 1 masks.
    """
    if n < 0:
        raise ValueError("ground set size must be non-negative")
    full_mask = (1 << n) - 1
    subsets = sorted(range(full_mask + 1), key=lambda mask: (bin(mask).count("1"), mask))
    # full set is the unique largest subset, hence last
    subsets.pop()
    return subsets


def subset_members(mask: int) -> List[int]:
    """Indices of the set bits of mask, ascending."""
    members = []
    idx = 0
    while mask:
        if mask & 1:
            members.append(idx)
        mask >>= 1
        idx += 1
    return members
