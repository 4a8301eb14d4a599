# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import random

import pytest

from ucdtables.ranges import Range
from ucdtables.tables import CharMap, SparseSet, SparseTable

def _RandomAssociation(seed: int, values: list, size: int) -> dict[int, object]:
	generator = random.Random(seed)
	out, cp = {}, generator.randrange(0, 64)
	while len(out) < size:
		# produce runs of equal values with occasional holes
		value = generator.choice(values)
		for _ in range(generator.randrange(1, 12)):
			out[cp] = value
			cp += 1
		cp += generator.choice([0, 0, 1, 7])
	return out

def test_encode_scenario_two_breakpoints():
	table = SparseTable.encode({0x41: 'Lu', 0x42: 'Lu', 0x43: 'Lu', 0x44: 'Ll'}, 'Cn')
	assert list(table) == [(0x41, 'Lu'), (0x44, 'Ll')]
	assert table.sentinel() == (0x45, 'Cn')
	assert table.lookup(0x42) == 'Lu'
	assert table.lookup(0x44) == 'Ll'
	assert table.lookup(0x45) == 'Cn'
	assert table.lookup(0x40) == 'Cn'

def test_empty_table_returns_default():
	table = SparseTable.encode({}, 7)
	assert len(table) == 0
	assert table.lookup(0) == 7
	assert table.lookup(0x10ffff) == 7

def test_holes_resolve_to_default():
	table = SparseTable.encode({0x10: 1, 0x12: 1}, 0)
	assert list(table) == [(0x10, 1), (0x11, 0), (0x12, 1)]
	assert [table.lookup(cp) for cp in range(0x0f, 0x14)] == [0, 1, 0, 1, 0]

def test_default_valued_keys_are_not_breakpoints():
	table = SparseTable.encode({0x00: 0, 0x01: 0, 0x02: 5}, 0)
	assert list(table) == [(0x02, 5)]

@pytest.mark.parametrize('seed', [1, 2, 3])
def test_encode_query_round_trip(seed):
	association = _RandomAssociation(seed, ['a', 'b', 'c', None], 600)
	table = SparseTable.encode(association, None)
	for cp in range(0, max(association) + 64):
		assert table.lookup(cp) == association.get(cp, None)

@pytest.mark.parametrize('seed', [4, 5])
def test_run_compression_is_minimal(seed):
	association = _RandomAssociation(seed, [1, 2, 3], 400)
	table = SparseTable.encode(association, 0)

	# count the value changes over [0, max key] (the closing change is carried by the sentinel)
	changes, previous = 0, 0
	for cp in range(0, max(association) + 1):
		value = association.get(cp, 0)
		if value != previous:
			changes += 1
		previous = value
	assert len(table) == changes
	assert table.end == max(association) + 1

	# re-encoding an already minimal table must not change it
	again = SparseTable.encode(table.association(), 0)
	assert list(again) == list(table)
	assert again.end == table.end

def test_trailing_default_run_ends_the_table():
	table = SparseTable.fromRanges([Range(0x10, 0x1f, 'W'), Range(0x20, 0x2f, 'N')], 'N')
	assert list(table) == [(0x10, 'W')]
	assert table.sentinel() == (0x20, 'N')
	assert [table.lookup(cp) for cp in [0x0f, 0x10, 0x1f, 0x20, 0x2f, 0x30]] == ['N', 'W', 'W', 'N', 'N', 'N']

	# a table of only default values collapses to the bare sentinel
	table = SparseTable.encode({0x05: 0, 0x06: 0}, 0)
	assert len(table) == 0
	assert table.sentinel() == (0, 0)

def test_from_ranges_matches_encode():
	ranges = [Range(0x41, 0x43, 1), Range(0x44, 0x44, 2), Range(0x50, 0x5f, 1)]
	table = SparseTable.fromRanges(ranges, 0)
	assert list(table) == [(0x41, 1), (0x44, 2), (0x45, 0), (0x50, 1)]
	assert table.end == 0x60
	assert list(table) == list(SparseTable.encode({cp: r.value for r in ranges for cp in r.codepoints()}, 0))

def test_table_rejects_malformed_entries():
	with pytest.raises(RuntimeError, match='strictly increasing'):
		SparseTable([(2, 'a'), (1, 'b')], 3, None)
	with pytest.raises(RuntimeError, match='Uncollapsed'):
		SparseTable([(1, 'a'), (2, 'a')], 3, None)
	with pytest.raises(RuntimeError, match='Malformed'):
		SparseTable([(1, None)], 3, None)
	with pytest.raises(RuntimeError, match='Malformed'):
		SparseTable([(1, 'a'), (2, None)], 3, None)

def test_set_agrees_with_membership_at_interval_edges():
	members = {0x00, 0x01, 0x02, 0x10, 0x20, 0x21, 0x10fffe, 0x10ffff}
	values = SparseSet.encode(members)
	assert list(values.intervals()) == [(0x00, 0x02), (0x10, 0x10), (0x20, 0x21), (0x10fffe, 0x10ffff)]
	for (first, last) in values.intervals():
		for cp in [first - 1, first, last, last + 1]:
			assert (cp in values) == (cp in members)
	assert set(values.codepoints()) == members

def test_set_breakpoints_alternate_open_and_close():
	values = SparseSet.fromRanges([Range(0x41, 0x5a), Range(0x61, 0x7a)])
	assert values.breakpoints() == [0x41, 0x5b, 0x61, 0x7b]
	assert len(values) == 2
	again = SparseSet.fromBreakpoints(values.breakpoints())
	assert list(again.intervals()) == list(values.intervals())
	with pytest.raises(RuntimeError, match='pair up'):
		SparseSet.fromBreakpoints([0x41])

def test_empty_set():
	values = SparseSet.encode([])
	assert len(values) == 0
	assert not values.contains(0)

def test_char_map():
	mapping = CharMap({0x130: (0x69, 0x307), 0xdf: (0x73, 0x73)})
	assert [k for (k, _) in mapping] == [0xdf, 0x130]
	assert mapping[0x130] == (0x69, 0x307)
	assert mapping.get(0x41) is None
	assert mapping.get(0x41, (0x41,)) == (0x41,)
	assert 0xdf in mapping and 0xe0 not in mapping
	with pytest.raises(KeyError):
		mapping[0x41]

def test_round_trip_across_the_whole_codepoint_domain():
	association = {0x00: 'a', 0x01: 'a', 0x7f: 'b', 0xd800: 'c', 0xffff: 'c', 0x10000: 'd', 0x10fffe: 'e', 0x10ffff: 'f'}
	table = SparseTable.encode(association, None)
	assert table.sentinel() == (0x110000, None)
	assert table.lookup(0x00) == 'a'
	assert table.lookup(0x10ffff) == 'f'
	for cp in [0x02, 0x7e, 0x80, 0xd7ff, 0xd801, 0xfffe, 0x10001, 0x10fffd, 0x110000]:
		assert table.lookup(cp) is None
	for (cp, value) in association.items():
		assert table.lookup(cp) == value

@pytest.mark.parametrize('seed', [6, 7])
def test_round_trip_reaching_the_last_codepoint(seed):
	generated = _RandomAssociation(seed, ['a', 'b', 'c'], 600)
	shift = 0x10ffff - max(generated)
	association = {cp + shift: value for (cp, value) in generated.items()}
	association[0x00] = 'a'
	table = SparseTable.encode(association, None)
	assert table.end == 0x110000
	for cp in list(range(0, 64)) + list(range(min(cp for cp in association if cp > 0) - 64, 0x110000)):
		assert table.lookup(cp) == association.get(cp, None)
