"""Disk fragmenter: compact a dense disk map and compute its checksum."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass

_DIGITS = frozenset("0123456789")

Disk = list[int | None]


@dataclass(frozen=True)
class DiskFile:
    """A file's id, its length in blocks and the free blocks after it."""

    file_id: int
    file_size: int
    empty_space: int


def _digit(char: str | None) -> int:
    return int(char) if char is not None and char in _DIGITS else 0


def parse_disk_map(text: str) -> list[DiskFile]:
    """Read alternating file and free-space digits; missing or non-digit entries are 0.

    One file is made for every two bytes of the text, rounding up.
    """
    chars = iter(text)
    count = (len(text.encode()) + 1) // 2
    return [
        DiskFile(file_id, _digit(next(chars, None)), _digit(next(chars, None)))
        for file_id in range(count)
    ]


def files_to_disk(files: Iterable[DiskFile]) -> Disk:
    """Lay the files out block by block, None marking a free block."""
    disk: Disk = []
    for file in files:
        disk.extend([file.file_id] * file.file_size)
        disk.extend([None] * file.empty_space)
    return disk


def compact_blocks(disk: Sequence[int | None]) -> list[int]:
    """Fill free blocks from the left with file blocks taken from the right end."""
    if not disk:
        raise ValueError("the disk is empty")
    compacted: list[int] = []
    last = len(disk) - 1
    for i, block in enumerate(disk):
        if block is not None:
            compacted.append(block)
        else:
            while (moved := disk[last]) is None:
                if last == 0:
                    raise ValueError("the disk holds no file blocks")
                last -= 1
            if last <= i:
                break
            compacted.append(moved)
            last -= 1
        if last == i:
            break
    return compacted


def compact_files(disk: Sequence[int | None]) -> Disk:
    """Move whole files, highest position first, into the leftmost free run that fits.

    A file's length counts its blocks leftwards from its last block, passing
    over free blocks, until a block of another file.
    """
    blocks = list(disk)
    i = len(blocks)
    while i > 0:
        i -= 1
        file_id = blocks[i]
        if file_id is None:
            continue

        length = 0
        for block in reversed(blocks[:i + 1]):
            if block is None:
                continue
            if block != file_id:
                break
            length += 1

        free = 0
        start = 0
        for j, block in enumerate(blocks[:i]):
            free = free + 1 if block is None else 0
            if free == length:
                start = j - free + 1
                break

        if free != 0:
            for offset in range(length):
                blocks[start + offset] = file_id
                blocks[i - offset] = None

        if length > 1:
            i = max(0, i - (length - 1))
    return blocks


def checksum(disk: Iterable[int | None]) -> int:
    """Sum each block's position times its file id, skipping free blocks."""
    return sum(pos * block for pos, block in enumerate(disk) if block is not None)