"""
Day three – Rucksack Reorganization.

Each line lists the items of one rucksack; the first half of the line is
the first compartment, the second half the second compartment.

- Part one: sum the priority of the item found in both compartments.
- Part two: sum the priority of the badge, the only item carried by all
  three rucksacks of each consecutive group of three.

Priorities: a-z -> 1-26, A-Z -> 27-52.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

import string


GROUP_SIZE: int = 3


def priority_from_char(code: str) -> Optional[int]:
    """Priority of an item, or None for characters that are not ASCII letters."""
    if code in string.ascii_lowercase:
        return ord(code) - ord("a") + 1
    if code in string.ascii_uppercase:
        return ord(code) - ord("A") + 27
    return None


@dataclass(frozen=True)
class Rucksack:
    first_compartment: str
    second_compartment: str

    @classmethod
    def from_line(cls, code: str) -> "Rucksack":
        half = len(code) // 2
        return cls(first_compartment=code[:half], second_compartment=code[half:])

    @property
    def items(self) -> str:
        return self.first_compartment + self.second_compartment

    def first_shared_item(self) -> Optional[str]:
        """First item of the first compartment also present in the second."""
        for item in self.first_compartment:
            if item in self.second_compartment:
                return item
        return None

    def priority(self) -> Optional[int]:
        shared = self.first_shared_item()
        if shared is None:
            return None
        return priority_from_char(shared)


def find_badge(group: Sequence[Rucksack]) -> str:
    """
    Return the single item common to every rucksack in `group`.

    Raises
    ------
    ValueError
        If the group does not share exactly one item type.
    """
    common = set(group[0].items)
    for rucksack in group[1:]:
        common &= set(rucksack.items)
    if len(common) != 1:
        raise ValueError(
            f"Expected exactly one common item in group, found {sorted(common)}"
        )
    return common.pop()


def parse_rucksacks(lines: Sequence[str]) -> List[Rucksack]:
    return [Rucksack.from_line(line.strip()) for line in lines if line.strip()]


def shared_item_total(rucksacks: Sequence[Rucksack]) -> int:
    """
    Part one: sum of the shared-item priority of every rucksack.

    Defined for any number of rucksacks; those without a shared item add 0.
    """
    total = 0
    for rucksack in rucksacks:
        priority = rucksack.priority()
        if priority is not None:
            total += priority
    return total


def badge_total(rucksacks: Sequence[Rucksack]) -> int:
    """
    Part two: sum of the badge priority of each group of three rucksacks.

    Raises
    ------
    ValueError
        If the rucksacks cannot be split into whole groups, or a group does
        not share exactly one item.
    """
    if len(rucksacks) % GROUP_SIZE:
        raise ValueError(
            f"Rucksack count {len(rucksacks)} is not a multiple of {GROUP_SIZE}."
        )
    total = 0
    for start in range(0, len(rucksacks), GROUP_SIZE):
        badge = find_badge(rucksacks[start:start + GROUP_SIZE])
        total += priority_from_char(badge) or 0
    return total


def solve(lines: Sequence[str]) -> Tuple[int, int]:
    rucksacks = parse_rucksacks(lines)
    return shared_item_total(rucksacks), badge_total(rucksacks)


__all__ = [
    "GROUP_SIZE",
    "priority_from_char",
    "Rucksack",
    "find_badge",
    "parse_rucksacks",
    "shared_item_total",
    "badge_total",
    "solve",
]
