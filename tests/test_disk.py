from collections import Counter

import pytest

from aocsolutions.disk import (
    DiskFile,
    checksum,
    compact_blocks,
    compact_files,
    files_to_disk,
    parse_disk_map,
)

EXAMPLE = "2333133121414131402"


def render(disk):
    return "".join("." if block is None else str(block) for block in disk)


def test_parse_disk_map():
    assert parse_disk_map("12345") == [
        DiskFile(0, 1, 2),
        DiskFile(1, 3, 4),
        DiskFile(2, 5, 0),
    ]


def test_trailing_newline_is_ignored():
    assert parse_disk_map(EXAMPLE + "\n") == parse_disk_map(EXAMPLE)


def test_files_to_disk():
    assert render(files_to_disk(parse_disk_map("12345"))) == "0..111....22222"


def test_compact_blocks_small():
    disk = files_to_disk(parse_disk_map("12345"))
    assert render(compact_blocks(disk)) == "022111222"


def test_compact_blocks_example_checksum():
    disk = files_to_disk(parse_disk_map(EXAMPLE))
    assert checksum(compact_blocks(disk)) == 1928


def test_compact_files_example():
    disk = files_to_disk(parse_disk_map(EXAMPLE))
    compacted = compact_files(disk)
    assert render(compacted) == "00992111777.44.333....5555.6666.....8888.."
    assert checksum(compacted) == 2858


def test_compaction_preserves_blocks():
    disk = files_to_disk(parse_disk_map(EXAMPLE))
    expected = Counter(block for block in disk if block is not None)
    assert Counter(compact_blocks(disk)) == expected
    moved = compact_files(disk)
    assert len(moved) == len(disk)
    assert Counter(block for block in moved if block is not None) == expected


def test_compact_blocks_has_no_gaps():
    disk = files_to_disk(parse_disk_map(EXAMPLE))
    assert None not in compact_blocks(disk)


def test_checksum_skips_free_blocks():
    assert checksum([None, 3, None, 2]) == checksum([0, 3, 0, 2])


@pytest.mark.parametrize("disk", [[], [None, None]])
def test_compact_blocks_errors(disk):
    with pytest.raises(ValueError):
        compact_blocks(disk)