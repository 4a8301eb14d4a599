# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import bisect

# ranges are lists of range-objects, which must be sorted and must not overlap/neighbor each other if same value
#	=> use Ranges.fromRawList to sort and merge an arbitrary list of Range objects
# ranges map [first-last] to a single hashable value (True for plain codepoint sets)
# invariant for ranges: (first >= 0) and (first <= last) and (last <= 0x10ffff)

class Range:
	RangeFirst: int = 0
	RangeLast: int = 0x10ffff

	def __init__(self, first: int, last: int, value=True) -> None:
		if first < Range.RangeFirst or last > Range.RangeLast or first > last:
			raise RuntimeError(f'Malformed range encountered [{first:04x}-{last:04x}]')
		if value is None:
			raise RuntimeError(f'Malformed value encountered [{first:04x}-{last:04x}]')
		self.first = first
		self.last = last
		self.value = value
	def __str__(self) -> str:
		return f'[{self.first:05x}-{self.last:05x}/{self.span()}] -> {self.value}'
	def __repr__(self) -> str:
		return self.__str__()
	def __eq__(self, other: object) -> bool:
		if not isinstance(other, Range):
			return NotImplemented
		return (self.first, self.last, self.value) == (other.first, other.last, other.value)
	def merge(self, other: 'Range') -> 'Range':
		if self.value != other.value:
			raise RuntimeError(f'Cannot merge ranges of different value [{self}] and [{other}]')
		return Range(min(self.first, other.first), max(self.last, other.last), self.value)
	def span(self) -> int:
		return (self.last - self.first + 1)
	def neighbors(self, right: 'Range') -> bool:
		return (self.last + 1 == right.first)
	def overlap(self, other: 'Range') -> bool:
		return (self.last >= other.first and self.first <= other.last)
	def codepoints(self) -> range:
		return range(self.first, self.last + 1)

class Ranges:
	@staticmethod
	def _appOrMerge(out: list[Range], other: Range) -> None:
		if len(out) > 0 and (out[-1].overlap(other) or (out[-1].neighbors(other) and out[-1].value == other.value)):
			out[-1] = out[-1].merge(other)
		else:
			out.append(other)
	@staticmethod
	def _setIteration(a: list[Range], b: list[Range], binaryOp: bool, fn) -> list[Range]:
		if binaryOp and (any(_a.value is not True for _a in a) or any(_b.value is not True for _b in b)):
			raise RuntimeError('Set operation is only defined for binary ranges')
		out: list[Range] = []

		# iterate over the two ranges and pass them to the callback
		aOff, bOff, aNext, bNext, nextProcessed = 0, 0, None, None, Range.RangeFirst
		while True:
			# check if the next-values need to be updated
			if aNext is None and aOff < len(a):
				aNext, aOff = a[aOff], aOff + 1
			if bNext is None and bOff < len(b):
				bNext, bOff = b[bOff], bOff + 1

			# check if the end has been reached
			if aNext is None and bNext is None:
				break
			aFirst, aLast = (Range.RangeLast + 1, Range.RangeLast + 1) if aNext is None else (aNext.first, aNext.last)
			bFirst, bLast = (Range.RangeLast + 1, Range.RangeLast + 1) if bNext is None else (bNext.first, bNext.last)

			# find the starting value to be used
			first = max(nextProcessed, min(aFirst, bFirst))

			# find the ending value to be used
			last = min(aLast, bLast)
			if first < aFirst and last >= aFirst and aNext is not None:
				last = aFirst - 1
			if first < bFirst and last >= bFirst and bNext is not None:
				last = bFirst - 1

			# invoke the callback and add the next range to the output
			val = fn(aNext.value if aFirst <= first else None, bNext.value if bFirst <= first else None)
			if val is not None:
				Ranges._appOrMerge(out, Range(first, last, val))
			nextProcessed = last + 1

			# check which of the two range's has been fully consumed
			if aLast == last:
				aNext = None
			if bLast == last:
				bNext = None
		return out
	@staticmethod
	def _unionOperation(a, b):
		if a is None:
			return b
		if b is None:
			return a
		if a != b:
			raise RuntimeError(f'Cannot unite ranges of different value [{a}] and [{b}]')
		return a
	@staticmethod
	def _differenceOperation(a, b):
		if b is None:
			return a
		return None

	@staticmethod
	def fromRawList(ranges: list[Range]) -> list[Range]:
		# sort the ranges
		ranges = sorted(ranges, key=lambda r : r.first)

		# merge any neighboring/overlapping ranges of the same type (overlaps of different values are rejected)
		out: list[Range] = []
		for r in ranges:
			Ranges._appOrMerge(out, r)
		return out
	@staticmethod
	def fromCodepoints(codepoints, value=True) -> list[Range]:
		out: list[Range] = []
		for cp in sorted(set(codepoints)):
			Ranges._appOrMerge(out, Range(cp, cp, value))
		return out
	@staticmethod
	def wellFormed(ranges: list[Range], lookupType) -> None:
		# check if the default-type can be held by the type
		if not lookupType.validValue(lookupType.defValue()):
			raise RuntimeError('Invalid default-value for type encountered')
		for i in range(len(ranges)):
			if i > 0 and ranges[i - 1].first > ranges[i].first:
				raise RuntimeError('Order of ranges violation encountered')
			if i > 0 and ranges[i - 1].last + 1 > ranges[i].first:
				raise RuntimeError('Overlapping ranges encountered')
			if not lookupType.validValue(ranges[i].value):
				raise RuntimeError(f'Invalid value for type encountered [{ranges[i]}]')
	@staticmethod
	def lookup(ranges: list[Range], pos: int):
		index = bisect.bisect_right(ranges, pos, key=lambda r: r.first) - 1
		if index < 0 or ranges[index].last < pos:
			return None
		return ranges[index].value
	@staticmethod
	def contains(ranges: list[Range], pos: int) -> bool:
		return Ranges.lookup(ranges, pos) is not None

	@staticmethod
	def union(a: list[Range], b: list[Range]) -> list[Range]:
		return Ranges._setIteration(a, b, False, Ranges._unionOperation)
	@staticmethod
	def difference(a: list[Range], b: list[Range]) -> list[Range]:
		return Ranges._setIteration(a, b, True, Ranges._differenceOperation)
