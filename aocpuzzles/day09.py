"""Disk Fragmenter: compacting files on a disk map."""

from __future__ import annotations

from collections.abc import Sequence

Block = int | None
_Span = tuple[int, int]


def checksum(blocks: Sequence[Block]) -> int:
    """Sum of position times file id over every occupied block."""
    return sum(i * file_id for i, file_id in enumerate(blocks) if file_id is not None)


def _layout(text: str) -> tuple[list[Block], list[_Span], list[_Span]]:
    blocks: list[Block] = []
    files: list[_Span] = []
    spaces: list[_Span] = []
    for i, ch in enumerate(text.strip()):
        if ch not in "0123456789":
            raise ValueError(f"invalid digit {ch!r} in disk map")
        length = int(ch)
        start = len(blocks)
        if i % 2 == 0:
            files.append((start, length))
            blocks.extend([i // 2] * length)
        else:
            if length:
                spaces.append((start, length))
            blocks.extend([None] * length)
    return blocks, files, spaces


def part1(text: str) -> int:
    """Checksum after moving blocks one at a time into the leftmost free space."""
    blocks, _, _ = _layout(text)
    left, right = 0, len(blocks) - 1
    while left < right:
        if blocks[left] is None and blocks[right] is not None:
            blocks[left], blocks[right] = blocks[right], blocks[left]
            left += 1
            right -= 1
            continue
        if blocks[left] is not None:
            left += 1
        if blocks[right] is None:
            right -= 1
    return checksum(blocks)


def part2(text: str) -> int:
    """Checksum after moving whole files into the leftmost span that fits."""
    blocks, files, spaces = _layout(text)
    for start, length in reversed(files):
        for idx, (space_start, space_len) in enumerate(spaces):
            if length > space_len:
                continue
            if space_start > start:
                break
            target = slice(space_start, space_start + length)
            source = slice(start, start + length)
            blocks[target], blocks[source] = blocks[source], blocks[target]
            if space_len == length:
                del spaces[idx]
            else:
                spaces[idx] = (space_start + length, space_len - length)
            break
    return checksum(blocks)