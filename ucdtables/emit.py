# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import os
import tempfile

from .config import SystemConfig
from .names import NameBlob
from .ranges import Range, Ranges
from .tables import CharMap, SparseSet, SparseTable
from .values import LookupType

Includes: list[str] = ['cinttypes', 'cstddef', 'utility']

# key written for the placeholder entry of empty sets and maps (never a valid codepoint or packed pair)
DummyKey: int = 0xffffffff

# shared declarations written to the top of every generated file
Prelude: str = '''template <size_t N>
struct Sequence {
	uint8_t size;
	char32_t data[N];
};
struct Rational {
	int64_t numerator;
	int64_t denominator;
};

/* find the last entry with a key less than or equal to the given key (or the first entry) */
template <class Key, class Type, size_t N>
inline constexpr size_t BinarySearch(Key key, const std::pair<Key, Type> (&data)[N]) {
	size_t left = 0, right = N - 1;
	while (left < right) {
		size_t center = (left + right + 1) / 2;
		if (key < data[center].first)
			right = center - 1;
		else
			left = center;
	}
	return left;
}
template <class Type, size_t N>
inline constexpr Type LookupTable(char32_t cp, const std::pair<char32_t, Type> (&data)[N], Type defValue) {
	if (cp < data[0].first)
		return defValue;
	return data[gen::BinarySearch(cp, data)].second;
}
template <size_t N>
inline constexpr bool TestSet(char32_t cp, const std::pair<char32_t, char32_t> (&data)[N]) {
	size_t index = gen::BinarySearch(cp, data);
	return (cp >= data[index].first && cp <= data[index].second);
}
template <class Key, class Type, size_t N>
inline constexpr const Type* LookupMap(Key key, const std::pair<Key, Type> (&data)[N]) {
	size_t index = gen::BinarySearch(key, data);
	if (data[index].first != key)
		return nullptr;
	return &data[index].second;
}'''

def Indent(string: str, level: int = 1, startsAsNewLine: bool = True) -> str:
	out = ('\t' * level) if startsAsNewLine else ''

	# construct the indented string (only indent if the line is non-empty)
	for i in range(len(string)):
		out += string[i]
		if string[i] == '\n' and i + 1 < len(string) and string[i + 1] != '\n':
			out += '\t' * level
	return out

class CodeGen:
	def __init__(self, file: 'GeneratedFile', blockName: str, desc: str) -> None:
		self._file = file
		self._file.beginBlock(desc)
		self._block = blockName

	def _writeEntries(self, declaration: str, entries: list[str], valsPerLine: int) -> None:
		# slightly align the count to get a closer resembles of rectangles
		estimatedLines = max((len(entries) + valsPerLine - 1) // valsPerLine, 1)
		valsPerLine = max((len(entries) + estimatedLines - 1) // estimatedLines, 1)

		# write the header, data, and trailer out
		self._file.write(f'{declaration}[{len(entries)}] = {{\n\t')
		for i in range(len(entries)):
			if i > 0:
				self._file.write(',' + ('\n\t' if (i % valsPerLine) == 0 else ''))
			self._file.write(f' {entries[i]}')
		self._file.writeln('\n};')
	def _key(self, key: int, keyType: str) -> str:
		return f'{key:#014x}' if keyType == 'uint64_t' else f'{key:#08x}'

	def addConstInt(self, type: LookupType, name: str, value: int) -> None:
		self._file.writeln(f'static constexpr {type.typeName()} {name} = {type.staticLookup(value)};')
	def addEnum(self, enum: LookupType) -> None:
		# write the enum out
		self._file.write(f'enum class {enum.typeName(True)} : {enum.bufferType()} {{\n\t')
		self._file.writeln(',\n\t'.join(enum.enumValues()))
		self._file.writeln('};')
	def tableFunction(self, fnName: str, lookupType: LookupType, table: SparseTable) -> None:
		print(f'Encoding table [{fnName}] ({len(table)} breakpoints)...')
		if table.default != lookupType.defValue():
			raise RuntimeError(f'Default of table [{fnName}] does not match type [{lookupType.typeName()}]')

		# write the breakpoints out and close them off with the sentinel
		entries = [f'{{ {cp:#08x}, {lookupType.staticLookup(value)} }}' for (cp, value) in list(table) + [table.sentinel()]]
		self._writeEntries(f'static constexpr std::pair<char32_t, {lookupType.typeName()}> {self._block}Table', entries, 6)

		# generate the actual function
		self._file.writeln(f'inline constexpr {lookupType.typeName()} {fnName}(char32_t cp) {{')
		self._file.writeln(f'\treturn gen::LookupTable<{lookupType.typeName()}>(cp, gen::{self._block}Table, {lookupType.staticLookup(lookupType.defValue())});')
		self._file.writeln('}')
	def rangesFunction(self, fnName: str, lookupType: LookupType, ranges: list[Range]) -> None:
		Ranges.wellFormed(ranges, lookupType)
		self.tableFunction(fnName, lookupType, SparseTable.fromRanges(ranges, lookupType.defValue()))
	def setFunction(self, fnName: str, values: SparseSet) -> None:
		intervals = list(values.intervals())
		print(f'Encoding table [{fnName}] ({len(intervals)} intervals)...')

		# write the closed intervals out (an empty set receives a single unreachable interval)
		entries = [f'{{ {first:#08x}, {last:#08x} }}' for (first, last) in intervals]
		if len(entries) == 0:
			entries = [f'{{ {DummyKey:#08x}, {DummyKey:#08x} }}']
		self._writeEntries(f'static constexpr std::pair<char32_t, char32_t> {self._block}Ranges', entries, 6)

		# generate the actual function
		self._file.writeln(f'inline constexpr bool {fnName}(char32_t cp) {{')
		self._file.writeln(f'\treturn gen::TestSet(cp, gen::{self._block}Ranges);')
		self._file.writeln('}')
	def mapFunction(self, fnName: str, lookupType: LookupType, values: CharMap, keyType: str = 'char32_t') -> None:
		print(f'Encoding table [{fnName}] ({len(values)} entries)...')
		if keyType not in ['char32_t', 'uint64_t']:
			raise RuntimeError(f'Unsupported key type [{keyType}] for map [{fnName}]')

		# write the sorted entries out (an empty map receives a single unreachable entry)
		entries = [f'{{ {self._key(key, keyType)}, {lookupType.staticLookup(value)} }}' for (key, value) in values]
		if len(entries) == 0:
			entries = [f'{{ {self._key(DummyKey, keyType)}, {lookupType.staticLookup(lookupType.defValue())} }}']
		self._writeEntries(f'static constexpr std::pair<{keyType}, {lookupType.typeName()}> {self._block}Map', entries, 4)

		# generate the actual function, which returns a null-pointer for absent keys
		self._file.writeln(f'inline constexpr {lookupType.typeName()} const* {fnName}({keyType} key) {{')
		self._file.writeln(f'\treturn gen::LookupMap(key, gen::{self._block}Map);')
		self._file.writeln('}')
	def blobData(self, name: str, blob: NameBlob) -> None:
		print(f'Encoding blob [{name}] ({blob.compressedSize()} bytes, expands to {blob.originalSize})...')
		entries = [f'{b:#04x}' for b in blob.compressed]
		self._writeEntries(f'static constexpr uint8_t {name}Data', entries, 24)
		self._file.writeln(f'static constexpr size_t {name}CompressedSize = {blob.compressedSize()};')
		self._file.writeln(f'static constexpr size_t {name}OriginalSize = {blob.originalSize};')
	def sequencePool(self, name: str, sequences: list[tuple[int, ...]], dataType: str = 'char32_t') -> None:
		# concatenate all sequences, where sequence [i] spans [offset[i], offset[i + 1])
		data, offsets = [], [0]
		for sequence in sequences:
			data += sequence
			offsets.append(len(data))
		entries = [(f'{c:#07x}' if dataType == 'char32_t' else str(c)) for c in data]
		self._writeEntries(f'static constexpr {dataType} {name}Data', entries if len(entries) > 0 else ['0'], 12)
		self.intArray(f'{name}Offset', LookupType.intType(0, 'uint32_t'), offsets)
	def intArray(self, name: str, type: LookupType, values: list[int]) -> None:
		entries = [type.staticLookup(v) for v in values]
		if len(entries) == 0:
			entries = [type.staticLookup(type.defValue())]
		self._writeEntries(f'static constexpr {type.typeName()} {name}', entries, 16)

def PublishFile(tempPath: str, path: str) -> None:
	# temporary files are created with mode 0600, the published file receives the default mode of the process instead
	umask = os.umask(0)
	os.umask(umask)
	os.chmod(tempPath, 0o666 & ~umask)
	os.replace(tempPath, path)

# collects the finished files of a compilation run, which are only published together once the entire run succeeded
class OutputStage:
	def __init__(self) -> None:
		self._pending: list[tuple[str, str]] = []
	def __enter__(self) -> 'OutputStage':
		return self
	def __exit__(self, excType, excValue, traceback) -> bool:
		if excType is None:
			self.publish()
		else:
			self.discard()
		return False
	def add(self, tempPath: str, path: str) -> None:
		self._pending.append((tempPath, path))
	def publish(self) -> None:
		pending, self._pending = self._pending, []
		for (tempPath, path) in pending:
			PublishFile(tempPath, path)
	def discard(self) -> None:
		pending, self._pending = self._pending, []
		for (tempPath, _) in pending:
			os.remove(tempPath)

class GeneratedFile:
	def __init__(self, path: str, config: SystemConfig) -> None:
		self._path = path
		self._config = config
		self._file = None
		self._tempPath = None
		self._hadFirstBlock = False
		self._atStartOfLine = False
		self._indented = False
	def __enter__(self) -> 'GeneratedFile':
		# write into a temporary sibling, which only replaces the target once the entire file has been written
		dirPath = os.path.dirname(os.path.abspath(self._path))
		handle, self._tempPath = tempfile.mkstemp(prefix=f'.{os.path.basename(self._path)}.', suffix='.tmp', dir=dirPath)
		self._file = os.fdopen(handle, mode='w', encoding='ascii')
		self._atStartOfLine = True
		try:
			self._writeHeader()
		except BaseException as e:
			self.__exit__(type(e), e, e.__traceback__)
			raise
		return self
	def _writeHeader(self) -> None:
		# add the copy-right header
		self.writeln('/* SPDX-License-Identifier: BSD-3-Clause */')
		self.writeln(f'/* Copyright (c) {self._config.date[:4]} Bjoern Boss Henrichsen */')

		# write the file header
		self.writeln('#pragma once')
		self.writeln('')
		for include in Includes:
			self.writeln(f'#include <{include}>')
		self.writeln('')
		self._writeComment('This is an automatically generated file and should not be modified.\n'
				  + 'All data are based on the information provided by the unicode character database.\n'
				  + f'Source URL: {self._config.url}\n'
				  + f'Generated on: {self._config.date}\n'
				  + f'Generated from version: {self._config.version}', False)
		self.writeln(f'namespace {self._config.namespace} {{')
		self._indented = True
		self.beginBlock('Shared lookup primitives')
		self.writeln(Prelude)
	def __exit__(self, excType, excValue, traceback) -> bool:
		if self._file is not None:
			if excType is None:
				self._file.write('}\n')
			self._file.close()
		self._file = None

		# publish the file (or hand it to the stage of the run) or discard the partial output
		if excType is None and self._config.stage is not None:
			self._config.stage.add(self._tempPath, self._path)
		elif excType is None:
			PublishFile(self._tempPath, self._path)
		else:
			os.remove(self._tempPath)
		return False
	def _writeComment(self, msg: str, blockHeader: bool) -> None:
		if blockHeader:
			msg = msg.replace('\n', '\n\t*\t')
			self._file.write(f'\t/* {msg} */\n')
		else:
			msg = msg.replace('\n', '\n*\t')
			self._file.write(f'/*\n*\t{msg}\n*/\n')
	def beginBlock(self, msg: str) -> None:
		# ensure an indentation of two newlines to the last block
		if not self._atStartOfLine:
			self._file.write('\n')
		if self._hadFirstBlock:
			self._file.write('\n\n')
		self._hadFirstBlock = True
		self._writeComment(msg, True)
		self._atStartOfLine = True
	def write(self, msg: str) -> None:
		if len(msg) == 0:
			return

		# check if the last text ended in a new-line and add the indentation (only if the next line is not empty)
		if self._atStartOfLine and msg[0] != '\n' and self._indented:
			self._file.write('\t')

		# construct the indented string
		if self._indented:
			msg = Indent(msg, 1, False)

		# write the indented string out and check if it ended in a newline
		self._file.write(msg)
		self._atStartOfLine = (msg[-1] == '\n')
	def writeln(self, msg: str) -> None:
		self.write(f'{msg}\n')
	def next(self, blockName: str, desc: str) -> CodeGen:
		return CodeGen(self, blockName, desc)
