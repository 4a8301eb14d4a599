# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import pytest

from ucdtables.ranges import Range, Ranges

def test_range_bounds():
	with pytest.raises(RuntimeError, match='Malformed range'):
		Range(5, 4)
	with pytest.raises(RuntimeError, match='Malformed range'):
		Range(0, 0x110000)
	assert Range(0x41, 0x43).span() == 3
	assert list(Range(0x41, 0x43).codepoints()) == [0x41, 0x42, 0x43]

def test_from_raw_list_merges_neighbors_of_same_value():
	ranges = Ranges.fromRawList([Range(0x44, 0x44, 'b'), Range(0x42, 0x43, 'a'), Range(0x41, 0x41, 'a')])
	assert ranges == [Range(0x41, 0x43, 'a'), Range(0x44, 0x44, 'b')]

def test_from_raw_list_rejects_conflicting_overlap():
	with pytest.raises(RuntimeError, match='different value'):
		Ranges.fromRawList([Range(0x41, 0x45, 'a'), Range(0x43, 0x43, 'b')])

def test_from_codepoints():
	assert Ranges.fromCodepoints([5, 3, 4, 9, 4]) == [Range(3, 5), Range(9, 9)]

def test_lookup_and_contains():
	ranges = [Range(0x10, 0x1f, 1), Range(0x30, 0x30, 2)]
	assert Ranges.lookup(ranges, 0x0f) is None
	assert Ranges.lookup(ranges, 0x10) == 1
	assert Ranges.lookup(ranges, 0x1f) == 1
	assert Ranges.lookup(ranges, 0x20) is None
	assert Ranges.lookup(ranges, 0x30) == 2
	assert not Ranges.contains(ranges, 0x31)
	assert Ranges.lookup([], 0x10) is None

def test_union_and_difference():
	a = [Range(0x00, 0x0f), Range(0x20, 0x2f)]
	b = [Range(0x08, 0x27)]
	assert Ranges.union(a, b) == [Range(0x00, 0x2f)]
	assert Ranges.difference(a, b) == [Range(0x00, 0x07), Range(0x28, 0x2f)]
	assert Ranges.difference(b, a) == [Range(0x10, 0x1f)]
	assert Ranges.difference(a, []) == a

def test_difference_requires_binary_ranges():
	with pytest.raises(RuntimeError, match='binary'):
		Ranges.difference([Range(0, 4, 'x')], [Range(1, 2)])

def test_ranges_expose_only_the_pipeline_operations():
	operations = sorted(name for name in vars(Ranges) if not name.startswith('_'))
	assert operations == ['contains', 'difference', 'fromCodepoints', 'fromRawList', 'lookup', 'union', 'wellFormed']
