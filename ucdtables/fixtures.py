# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
from .config import SystemConfig
from .emit import GeneratedFile
from .parser import ParsedFile, ParseCodepoint
from .values import LookupType

BreakMarker: str = '÷'
NoBreakMarker: str = '×'

# separator tests and normalization tests as written by the conformance files
class BreakTest:
	def __init__(self, codepoints: tuple[int, ...], breaks: tuple[int, ...]) -> None:
		self.codepoints = codepoints
		self.breaks = breaks
	def __repr__(self) -> str:
		return f'BreakTest({self.codepoints}, breaks={self.breaks})'

def ParseBreakTest(text: str, where: str) -> BreakTest:
	tokens = text.split()

	# markers and codepoints must alternate, starting and ending with a marker
	if len(tokens) < 3 or len(tokens) % 2 == 0:
		raise RuntimeError(f'Malformed break-test [{text}] in [{where}]')
	codepoints, breaks = [], []
	for (i, token) in enumerate(tokens):
		if i % 2 == 1:
			codepoints.append(ParseCodepoint(token, where))
		elif token == BreakMarker:
			breaks.append(len(codepoints))
		elif token != NoBreakMarker:
			raise RuntimeError(f'Unknown break marker [{token}] in [{where}]')
	return BreakTest(tuple(codepoints), tuple(breaks))

def CollectBreakTests(parsed: ParsedFile) -> list[BreakTest]:
	return [ParseBreakTest(record.fields[0], record.where) for record in parsed]

def CollectNormalizationTests(parsed: ParsedFile) -> list[tuple[tuple[int, ...], ...]]:
	tests = []
	for record in parsed:
		if any(len(f) == 0 for f in record.fields):
			raise RuntimeError(f'Empty normalization sequence in [{record.where}]')
		tests.append(tuple(record.fields[:5]))
	return tests

def CreateSeparatorTestFile(outPath: str, parsed: ParsedFile, name: str, config: SystemConfig) -> None:
	print(f'Creating [{outPath}] for test [{name}]...')
	tests = CollectBreakTests(parsed)

	_type32 = LookupType.intType(0, 'uint32_t')
	with GeneratedFile(outPath, config) as file:
		_gen = file.next(name, f'Test-sequences of [{name}] with the offsets of all permitted breaks')
		_gen.addConstInt(_type32, f'{name}Count', len(tests))
		_gen.sequencePool(f'{name}Strings', [t.codepoints for t in tests])
		_gen.sequencePool(f'{name}Breaks', [t.breaks for t in tests], 'uint32_t')

def CreateNormalizationTestFile(outPath: str, parsed: ParsedFile, config: SystemConfig) -> None:
	print(f'Creating [{outPath}] for test [Normalization]...')
	tests = CollectNormalizationTests(parsed)

	_type32 = LookupType.intType(0, 'uint32_t')
	with GeneratedFile(outPath, config) as file:
		_gen = file.next('Normalization', 'Test-sequences of the normalization forms (source, nfc, nfd, nfkc, nfkd)')
		_gen.addConstInt(_type32, 'NormalizationCount', len(tests))
		for (i, form) in enumerate(['Source', 'NFC', 'NFD', 'NFKC', 'NFKD']):
			_gen.sequencePool(f'Normalization{form}', [t[i] for t in tests])
