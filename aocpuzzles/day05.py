"""Print Queue: checking and repairing page orderings."""

from __future__ import annotations

from functools import cmp_to_key

_Ordering = dict[tuple[int, int], bool]


def _parse(text: str) -> tuple[_Ordering, list[list[int]]]:
    sections = text.split("\n\n")
    if len(sections) < 2:
        raise ValueError("expected rules and updates separated by a blank line")
    ordering: _Ordering = {}
    for line in sections[0].splitlines():
        first, second = line.split("|")[:2]
        before, after = int(first), int(second)
        ordering[before, after] = True
        ordering[after, before] = False
    updates = [
        [int(page) for page in line.split(",")] for line in sections[1].splitlines()
    ]
    return ordering, updates


def _is_ordered(ordering: _Ordering, pages: list[int]) -> bool:
    return all(
        ordering.get((page, later)) is True
        for i, page in enumerate(pages)
        for later in pages[i + 1 :]
    )


def _middle(pages: list[int]) -> int:
    return pages[len(pages) // 2]


def part1(text: str) -> int:
    """Sum of middle pages of updates that are already in order."""
    ordering, updates = _parse(text)
    return sum(_middle(pages) for pages in updates if _is_ordered(ordering, pages))


def part2(text: str) -> int:
    """Sum of middle pages of out-of-order updates after reordering them."""
    ordering, updates = _parse(text)

    def compare(a: int, b: int) -> int:
        rule = ordering.get((a, b))
        if rule is None:
            return 0
        return -1 if rule else 1

    key = cmp_to_key(compare)
    return sum(
        _middle(sorted(pages, key=key))
        for pages in updates
        if not _is_ordered(ordering, pages)
    )