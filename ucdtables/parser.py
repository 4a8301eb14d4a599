# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import string

from .ranges import Range, Ranges

CommentMarker: str = '#'
RangeSeparator: str = '..'
MaxCodepoint: int = Range.RangeLast

def SplitRecord(line: str, delimiter: str, minFields: int, arity: int|None = None) -> list[str]|None:
	# remove any comments and split the line and strip all entries
	fields = [s.strip() for s in line.split(CommentMarker)[0].split(delimiter)]

	# records with too few fields are skipped, as many files mix differently shaped records
	if fields == [''] or len(fields) < minFields:
		return None
	if arity is not None:
		fields = fields[:arity]
	return fields

def ParseCodepoint(text: str, where: str) -> int:
	if len(text) == 0 or any(c not in string.hexdigits for c in text):
		raise RuntimeError(f'Invalid hex value [{text}] in [{where}]')
	value = int(text, 16)
	if value > MaxCodepoint:
		raise RuntimeError(f'Codepoint [{text}] out of range in [{where}]')
	return value

def ParseRange(text: str, where: str) -> range:
	if RangeSeparator not in text:
		first = ParseCodepoint(text, where)
		return range(first, first + 1)
	begin, last = text.split(RangeSeparator, 1)
	begin, last = ParseCodepoint(begin.strip(), where), ParseCodepoint(last.strip(), where)
	if begin > last:
		raise RuntimeError(f'Reversed codepoint range [{text}] in [{where}]')
	return range(begin, last + 1)

def ParseSequence(text: str, where: str, bound: int|None = None) -> tuple[int, ...]:
	values = tuple(ParseCodepoint(v, where) for v in text.split())
	if bound is not None and len(values) > bound:
		raise RuntimeError(f'Sequence [{text}] exceeds [{bound}] codepoints in [{where}]')
	return values

def ParseInteger(text: str, where: str) -> int:
	digits = text[1:] if text.startswith('-') else text
	if len(digits) == 0 or any(c not in string.digits for c in digits):
		raise RuntimeError(f'Invalid integer [{text}] in [{where}]')
	return int(text)

# per-file record layout: how the key is written and how each following field is to be converted
#	key: 'scalar' (single codepoint), 'range' (codepoint or first..last), 'none' (no codepoint key)
#	fields: 'text', 'cp', 'seq', 'hex?' (empty or codepoint), 'int', 'words' (space separated text)
class Grammar:
	KeyKinds = ['scalar', 'range', 'none']
	FieldKinds = ['text', 'cp', 'seq', 'hex?', 'int', 'words']

	def __init__(self, name: str, key: str, fields: list[str], minFields: int, arity: int|None = None, delimiter: str = ';') -> None:
		if key not in Grammar.KeyKinds:
			raise RuntimeError(f'Unknown key kind [{key}] for grammar [{name}]')
		if any(f not in Grammar.FieldKinds for f in fields):
			raise RuntimeError(f'Unknown field kind for grammar [{name}]')
		self.name = name
		self.key = key
		self.fields = fields
		self.minFields = minFields
		self.arity = arity if arity is not None else len(fields) + (0 if key == 'none' else 1)
		self.delimiter = delimiter

	def _convert(self, kind: str, text: str, where: str):
		if kind == 'text':
			return text
		if kind == 'cp':
			return ParseCodepoint(text, where)
		if kind == 'seq':
			return ParseSequence(text, where)
		if kind == 'hex?':
			return (None if len(text) == 0 else ParseCodepoint(text, where))
		if kind == 'int':
			return ParseInteger(text, where)
		return tuple(text.split())
	def parseLine(self, line: str, where: str) -> 'Record|None':
		fields = SplitRecord(line, self.delimiter, self.minFields, self.arity)
		if fields is None:
			return None

		# extract the codepoint key
		codepoints = None
		if self.key == 'scalar':
			cp, fields = ParseCodepoint(fields[0], where), fields[1:]
			codepoints = range(cp, cp + 1)
		elif self.key == 'range':
			codepoints, fields = ParseRange(fields[0], where), fields[1:]

		# convert all remaining fields (fields beyond the declared kinds are kept as text)
		values = []
		for i in range(len(fields)):
			kind = self.fields[i] if i < len(self.fields) else 'text'
			values.append(self._convert(kind, fields[i], where))
		return Record(where, codepoints, values)

class Record:
	def __init__(self, where: str, codepoints: range|None, fields: list) -> None:
		self.where = where
		self.codepoints = codepoints
		self.fields = fields
	def __repr__(self) -> str:
		if self.codepoints is None:
			return f'Record({self.where}, {self.fields})'
		return f'Record({self.where}, {self.first:04x}..{self.last:04x}, {self.fields})'
	@property
	def first(self) -> int:
		return self.codepoints.start
	@property
	def last(self) -> int:
		return self.codepoints.stop - 1
	def field(self, index: int, fallback=''):
		return self.fields[index] if index < len(self.fields) else fallback

class ParsedFile:
	def __init__(self, grammar: Grammar, records: list[Record]) -> None:
		self.grammar = grammar
		self.records = records
	def __iter__(self):
		return iter(self.records)
	def __len__(self) -> int:
		return len(self.records)

	@staticmethod
	def fromLines(grammar: Grammar, lines) -> 'ParsedFile':
		records: list[Record] = []
		for (index, line) in enumerate(lines):
			record = grammar.parseLine(line, f'{grammar.name}:{index + 1}')
			if record is not None:
				records.append(record)
		return ParsedFile(grammar, records)
	@staticmethod
	def fromPath(grammar: Grammar, path: str) -> 'ParsedFile':
		print(f'Parsing [{path}]...')
		with open(path, 'r', encoding='utf-8') as file:
			return ParsedFile.fromLines(grammar, file)

	def values(self, assignValue) -> list[Range]:
		if self.grammar.key == 'none':
			raise RuntimeError(f'Grammar [{self.grammar.name}] has no codepoint key')
		ranges: list[Range] = []

		# iterate over the parsed records and match them against the callback
		for record in self.records:
			value = assignValue(record)
			if value is not None:
				ranges.append(Range(record.first, record.last, value))
		return Ranges.fromRawList(ranges)
