from collections import Counter

import pytest

from aocdays import day09
from aocdays.day09 import Block

EXAMPLE = "2333133121414131402"


def _file_sizes(blocks):
    sizes = Counter()
    for block in blocks:
        if block.file_id != -1:
            sizes[block.file_id] += block.end - block.start + 1
    return sizes


def test_parse_disk_map_small():
    assert day09.parse_disk_map("12345") == [
        Block(0, 0, 0),
        Block(1, 2, -1),
        Block(3, 5, 1),
        Block(6, 9, -1),
        Block(10, 14, 2),
    ]


def test_parse_disk_map_skips_empty_runs_and_counts_ids():
    blocks = day09.parse_disk_map("10203")
    assert [b.file_id for b in blocks] == [0, 1, 2]
    assert all(a.end + 1 == b.start for a, b in zip(blocks, blocks[1:]))


def test_parse_disk_map_rejects_non_digits():
    with pytest.raises(ValueError):
        day09.parse_disk_map("12a4")


def test_example_checksum():
    assert day09.check_sum(day09.file_compact(day09.parse_disk_map(EXAMPLE))) == 2858


def test_compaction_keeps_file_sizes():
    blocks = day09.parse_disk_map(EXAMPLE)
    assert _file_sizes(day09.file_compact(blocks)) == _file_sizes(blocks)


def test_compaction_does_not_mutate_input():
    blocks = day09.parse_disk_map(EXAMPLE)
    snapshot = [Block(b.start, b.end, b.file_id) for b in blocks]
    day09.file_compact(blocks)
    assert blocks == snapshot


def test_compaction_never_moves_files_right():
    blocks = day09.parse_disk_map(EXAMPLE)
    before = {b.file_id: b.start for b in blocks if b.file_id != -1}
    after = {b.file_id: b.start for b in day09.file_compact(blocks) if b.file_id != -1}
    assert all(after[fid] <= before[fid] for fid in before)


def test_nothing_fits_leaves_layout():
    blocks = day09.parse_disk_map("12345")
    assert day09.file_compact(blocks) == blocks


def test_check_sum_ignores_free_blocks():
    assert day09.check_sum([Block(0, 5, -1)]) == 0