# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import bisect

from .ranges import Range

# breakpoint-table: sorted (breakpoint, value) entries, where each value holds up to the next breakpoint
#	codepoints before the first breakpoint, or at/after the closing sentinel, resolve to the default value
class SparseTable:
	def __init__(self, entries: list[tuple[int, object]], end: int, default) -> None:
		for i in range(1, len(entries)):
			if entries[i - 1][0] >= entries[i][0]:
				raise RuntimeError('Breakpoints must be strictly increasing')
			if entries[i - 1][1] == entries[i][1]:
				raise RuntimeError(f'Uncollapsed run encountered at [{entries[i][0]:04x}]')
		if len(entries) > 0 and (entries[0][1] == default or entries[-1][1] == default or entries[-1][0] >= end):
			raise RuntimeError('Malformed breakpoint-table encountered')
		self.entries = tuple(entries)
		self.end = end
		self.default = default
		self._keys = [e[0] for e in entries]
	def __len__(self) -> int:
		return len(self.entries)
	def __iter__(self):
		return iter(self.entries)
	def __repr__(self) -> str:
		return f'SparseTable({len(self.entries)} entries, end={self.end:#x}, default={self.default!r})'

	@staticmethod
	def _collapse(runs, default) -> tuple[list[tuple[int, object]], int]:
		entries, previous, expected = [], default, 0

		# walk the (first, last, value) runs and open a new breakpoint whenever the value changes (holes carry the default)
		for (first, last, value) in runs:
			if first < expected:
				raise RuntimeError(f'Overlapping runs encountered at [{first:04x}]')
			if first > expected and previous != default:
				entries.append((expected, default))
				previous = default
			if value != previous:
				entries.append((first, value))
				previous = value
			expected = last + 1

		# a trailing run of the default value is carried by the sentinel itself
		if previous == default:
			expected = entries.pop()[0] if len(entries) > 0 else 0
		return entries, expected
	@staticmethod
	def encode(association: dict, default) -> 'SparseTable':
		entries, end = SparseTable._collapse(((cp, cp, association[cp]) for cp in sorted(association)), default)
		return SparseTable(entries, end, default)
	@staticmethod
	def fromRanges(ranges: list[Range], default) -> 'SparseTable':
		entries, end = SparseTable._collapse(((r.first, r.last, r.value) for r in ranges), default)
		return SparseTable(entries, end, default)

	def sentinel(self) -> tuple[int, object]:
		return (self.end, self.default)
	def lookup(self, cp: int):
		if cp >= self.end:
			return self.default
		index = bisect.bisect_right(self._keys, cp) - 1
		if index < 0:
			return self.default
		return self.entries[index][1]
	def runs(self):
		for i in range(len(self.entries)):
			last = (self.entries[i + 1][0] if i + 1 < len(self.entries) else self.end) - 1
			yield (self.entries[i][0], last, self.entries[i][1])
	def association(self) -> dict:
		out = {}
		for (first, last, value) in self.runs():
			for cp in range(first, last + 1):
				out[cp] = value
		return out

# inclusion-set: a breakpoint-table specialized to the two states in/out, exposed as closed intervals
class SparseSet:
	def __init__(self, table: SparseTable) -> None:
		if table.default is not False or any(type(v) != bool for (_, v) in table):
			raise RuntimeError('Sparse sets must be built from boolean tables')
		self.table = table
	def __contains__(self, cp: int) -> bool:
		return self.table.lookup(cp)
	def __len__(self) -> int:
		return sum(1 for _ in self.intervals())
	def __iter__(self):
		return self.intervals()

	@staticmethod
	def encode(codepoints) -> 'SparseSet':
		return SparseSet(SparseTable.encode({cp: True for cp in codepoints}, False))
	@staticmethod
	def fromRanges(ranges: list[Range]) -> 'SparseSet':
		return SparseSet(SparseTable.fromRanges([Range(r.first, r.last, True) for r in ranges], False))
	@staticmethod
	def fromBreakpoints(breakpoints: list[int]) -> 'SparseSet':
		if len(breakpoints) % 2 != 0:
			raise RuntimeError('Breakpoints of a set must pair up')
		runs = [(breakpoints[i], breakpoints[i + 1] - 1, True) for i in range(0, len(breakpoints), 2)]
		entries, end = SparseTable._collapse(runs, False)
		return SparseSet(SparseTable(entries, end, False))

	def contains(self, cp: int) -> bool:
		return self.table.lookup(cp)
	def intervals(self):
		for (first, last, value) in self.table.runs():
			if value:
				yield (first, last)
	def breakpoints(self) -> list[int]:
		out: list[int] = []
		for (first, last) in self.intervals():
			out += [first, last + 1]
		return out
	def codepoints(self):
		for (first, last) in self.intervals():
			yield from range(first, last + 1)

# explicit map: sorted key-value entries without run-compression, for values rarely shared by neighbors
class CharMap:
	def __init__(self, association: dict) -> None:
		self.entries = tuple(sorted(association.items(), key=lambda e: e[0]))
		self._keys = [e[0] for e in self.entries]
	def __len__(self) -> int:
		return len(self.entries)
	def __iter__(self):
		return iter(self.entries)
	def __contains__(self, key: int) -> bool:
		return self._find(key) >= 0
	def __getitem__(self, key: int):
		index = self._find(key)
		if index < 0:
			raise KeyError(key)
		return self.entries[index][1]
	def __repr__(self) -> str:
		return f'CharMap({len(self.entries)} entries)'

	def _find(self, key: int) -> int:
		index = bisect.bisect_left(self._keys, key)
		if index < len(self._keys) and self._keys[index] == key:
			return index
		return -1
	def get(self, key: int, default=None):
		index = self._find(key)
		return default if index < 0 else self.entries[index][1]
