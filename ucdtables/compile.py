# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import os

from . import derive, properties
from .config import SystemConfig
from .emit import GeneratedFile, OutputStage
from .fixtures import CreateNormalizationTestFile, CreateSeparatorTestFile
from .grammars import Sources, TestSources
from .names import NameBlob
from .parser import ParsedFile
from .tables import CharMap, SparseSet, SparseTable
from .values import LookupType

# parses every source-file at most once and caches the derivations shared between multiple output groups
class SourceSet:
	def __init__(self, config: SystemConfig) -> None:
		self._config = config
		self._parsed: dict[str, ParsedFile] = {}
		self._character = None
		self._scriptCodes = None
	def get(self, name: str) -> ParsedFile:
		if name not in self._parsed:
			if name in Sources:
				grammar = Sources[name][0]
			elif name in TestSources:
				grammar = TestSources[name][0]
			else:
				raise RuntimeError(f'Unknown source [{name}] requested')
			self._parsed[name] = ParsedFile.fromPath(grammar, self._config.source(name))
		return self._parsed[name]
	def character(self) -> derive.CharacterData:
		if self._character is None:
			self._character = derive.DeriveCharacterData(self.get('UnicodeData'))
		return self._character
	def scriptCodes(self):
		if self._scriptCodes is None:
			self._scriptCodes = derive.DeriveScriptCodes(self.get('PropertyValueAliases'))
		return self._scriptCodes

_codepointType: LookupType = LookupType.intType(0, 'char32_t')
_cccType: LookupType = LookupType.intType(0, 'uint8_t')
_caseType: LookupType = LookupType.sequenceType(properties.CaseMappingBound)

# GetNameCorrection, Names-blob
def MakeNameTables(sources: SourceSet, config: SystemConfig) -> None:
	character = sources.character()
	corrections = derive.DeriveNameCorrections(sources.get('NameAliases'))
	blob = NameBlob.encode(character.names)

	with GeneratedFile(config.output('unicode-names.h'), config) as file:
		_gen = file.next('Names', 'Compressed codepoint names (zlib stream of [hex-codepoint;name;] records in ascending order)')
		_gen.blobData('Names', blob)

		_gen = file.next('NameCorrection', 'Lookup the corrected name of a codepoint (only applies to codepoints with a name)')
		_gen.mapFunction('GetNameCorrection', LookupType.stringType(), CharMap(corrections))

# GetGeneralCategory, GetEastAsianWidth, GetLineBreak, GetGraphemeClusterBreak, GetWordBreak, GetSentenceBreak,
#	GetHangulSyllableType, GetIndicPositionalCategory, GetIndicSyllabicCategory, GetJoiningType, GetJoiningGroup,
#	Test[BinaryProperty], Test[Identifier]
def MakePropertyTables(sources: SourceSet, config: SystemConfig) -> None:
	character = sources.character()
	joining = derive.DeriveJoining(sources.get('ArabicShaping'))
	enumerated = [
		(properties.GeneralCategory, character.category),
		(properties.EastAsianWidth, derive.DeriveEnumProperty(sources.get('EastAsianWidth'), properties.EastAsianWidth)),
		(properties.LineBreak, derive.DeriveEnumProperty(sources.get('LineBreak'), properties.LineBreak)),
		(properties.GraphemeClusterBreak, derive.DeriveEnumProperty(sources.get('GraphemeBreakProperty'), properties.GraphemeClusterBreak)),
		(properties.WordBreak, derive.DeriveEnumProperty(sources.get('WordBreakProperty'), properties.WordBreak)),
		(properties.SentenceBreak, derive.DeriveEnumProperty(sources.get('SentenceBreakProperty'), properties.SentenceBreak)),
		(properties.HangulSyllableType, derive.DeriveEnumProperty(sources.get('HangulSyllableType'), properties.HangulSyllableType)),
		(properties.IndicPositionalCategory, derive.DeriveEnumProperty(sources.get('IndicPositionalCategory'), properties.IndicPositionalCategory)),
		(properties.IndicSyllabicCategory, derive.DeriveEnumProperty(sources.get('IndicSyllabicCategory'), properties.IndicSyllabicCategory)),
		(properties.JoiningType, joining.joiningType),
		(properties.JoiningGroup, joining.joiningGroup)
	]
	identifiers = derive.DeriveIdentifierSets(sources.get('DerivedCoreProperties'))

	with GeneratedFile(config.output('unicode-property.h'), config) as file:
		for (lookupType, ranges) in enumerated:
			name = lookupType.typeName(True)
			_gen = file.next(name, f'Lookup the [{name}] property of a codepoint')
			_gen.addEnum(lookupType)
			_gen.rangesFunction(f'Get{name}', lookupType, ranges)

		# write the binary properties out
		for (source, prop) in properties.BinaryProperties:
			name = prop.replace('_', '')
			_gen = file.next(name, f'Test if a codepoint has the property [{prop}]')
			_gen.setFunction(f'Test{name}', SparseSet.fromRanges(derive.DeriveBinaryProperty(sources.get(source), prop)))

		# write the identifier sets out
		for (name, ranges) in [('IdStart', identifiers.idStart), ('IdContinue', identifiers.idContinue), ('IdNonstart', identifiers.idNonstart),
						('XIdStart', identifiers.xidStart), ('XIdContinue', identifiers.xidContinue), ('XIdNonstart', identifiers.xidNonstart)]:
			_gen = file.next(name, f'Test if a codepoint is part of the identifier set [{name}]')
			_gen.setFunction(f'Test{name}', SparseSet.fromRanges(ranges))

# GetBidiClass, TestBidiMirrored, GetBidiMirroringGlyph
def MakeBidiTables(sources: SourceSet, config: SystemConfig) -> None:
	character = sources.character()
	glyphs = derive.DeriveMirroringGlyphs(sources.get('BidiMirroring'))

	with GeneratedFile(config.output('unicode-bidi.h'), config) as file:
		_gen = file.next('BidiClass', 'Lookup the bidirectional class of a codepoint')
		_gen.addEnum(properties.BidiClass)
		_gen.rangesFunction('GetBidiClass', properties.BidiClass, character.bidi)

		_gen = file.next('BidiMirrored', 'Test if a codepoint is mirrored in bidirectional text')
		_gen.setFunction('TestBidiMirrored', SparseSet.fromRanges(character.mirrored))

		_gen = file.next('BidiMirroringGlyph', 'Lookup the mirrored glyph of a codepoint')
		_gen.mapFunction('GetBidiMirroringGlyph', _codepointType, CharMap(glyphs))

# GetBlock
def MakeBlockTables(sources: SourceSet, config: SystemConfig) -> None:
	blocks = derive.DeriveBlocks(sources.get('Blocks'))

	with GeneratedFile(config.output('unicode-block.h'), config) as file:
		_gen = file.next('Block', 'Lookup the name of the block of a codepoint')
		_gen.rangesFunction('GetBlock', LookupType.stringType('No_Block'), blocks)

# GetSimpleUpper, GetSimpleLower, GetSimpleTitle, GetSimpleFold, GetFullFold, GetFullLower, GetFullTitle, GetFullUpper
def MakeCaseTables(sources: SourceSet, config: SystemConfig) -> None:
	character = sources.character()
	folds = derive.DeriveCaseFolds(sources.get('CaseFolding'), character.lower)
	full = derive.DeriveFullCaseMappings(sources.get('SpecialCasing'), character)

	with GeneratedFile(config.output('unicode-case.h'), config) as file:
		for (name, mapping) in [('Upper', character.upper), ('Lower', character.lower), ('Title', character.title), ('Fold', folds.simple)]:
			_gen = file.next(f'Simple{name}', f'Lookup the simple [{name.lower()}] mapping of a codepoint')
			_gen.mapFunction(f'GetSimple{name}', _codepointType, CharMap(mapping))
		for (name, mapping) in [('Fold', folds.full), ('Lower', full.lower), ('Title', full.title), ('Upper', full.upper)]:
			_gen = file.next(f'Full{name}', f'Lookup the full [{name.lower()}] mapping of a codepoint (only where it differs from the simple mapping)')
			_gen.mapFunction(f'GetFull{name}', _caseType, CharMap(mapping))

# GetCombiningClass, GetCanonical, GetCompatibilityShort, GetCompatibilityLong, TestCompositionExcluded, GetComposition
def MakeDecompositionTables(sources: SourceSet, config: SystemConfig) -> None:
	character = sources.character()
	excluded = derive.DeriveCompositionExclusions(sources.get('CompositionExclusions'), character)
	composition = derive.DeriveComposition(character, excluded)
	pairs = {derive.PackCompositionKey(a, b): cp for ((a, b), cp) in composition.pairs.items()}

	with GeneratedFile(config.output('unicode-decomposition.h'), config) as file:
		_gen = file.next('CombiningClass', 'Lookup the canonical combining class of a codepoint')
		_gen.tableFunction('GetCombiningClass', _cccType, SparseTable.encode(character.combiningClass, 0))

		_gen = file.next('Canonical', 'Lookup the canonical decomposition of a codepoint')
		_gen.mapFunction('GetCanonical', LookupType.sequenceType(properties.CanonicalBound), CharMap(character.canonical))
		_gen = file.next('CompatibilityShort', 'Lookup the compatibility decomposition of a codepoint (short mappings)')
		_gen.mapFunction('GetCompatibilityShort', LookupType.sequenceType(properties.CompatibilityShortBound), CharMap(character.compatShort))
		_gen = file.next('CompatibilityLong', 'Lookup the compatibility decomposition of a codepoint (long mappings)')
		_gen.mapFunction('GetCompatibilityLong', LookupType.sequenceType(properties.CompatibilityLongBound), CharMap(character.compatLong))

		_gen = file.next('CompositionExcluded', 'Test if a codepoint is excluded from composition')
		_gen.setFunction('TestCompositionExcluded', SparseSet.fromRanges(excluded))
		_gen = file.next('Composition', 'Lookup the primary composite of a pair (key: first << 21 | second)')
		_gen.mapFunction('GetComposition', _codepointType, CharMap(pairs), 'uint64_t')

# GetNumericType, GetNumericValue
def MakeNumericTables(sources: SourceSet, config: SystemConfig) -> None:
	character = sources.character()

	with GeneratedFile(config.output('unicode-numeric.h'), config) as file:
		_gen = file.next('NumericType', 'Lookup the numeric type of a codepoint')
		_gen.addEnum(properties.NumericType)
		_gen.rangesFunction('GetNumericType', properties.NumericType, character.numericType)

		_gen = file.next('NumericValue', 'Lookup the numeric value of a codepoint as rational')
		_gen.mapFunction('GetNumericValue', LookupType.rationalType(), CharMap(character.numericValue))

# GetScript, GetScriptExtensions
def MakeScriptTables(sources: SourceSet, config: SystemConfig) -> None:
	codes = sources.scriptCodes()
	scripts = derive.DeriveScripts(sources.get('Scripts'), codes)
	extensions = derive.DeriveScriptExtensions(sources.get('ScriptExtensions'), codes)

	with GeneratedFile(config.output('unicode-script.h'), config) as file:
		_gen = file.next('Script', 'Lookup the packed script tag of a codepoint')
		_gen.rangesFunction('GetScript', LookupType.tagType('zzzz'), scripts)

		_gen = file.next('ScriptExtensions', 'Lookup the space separated script codes of the script extensions of a codepoint')
		_gen.rangesFunction('GetScriptExtensions', LookupType.stringType(), extensions)

def MakeTestFixtures(sources: SourceSet, config: SystemConfig) -> None:
	CreateNormalizationTestFile(config.output('test-normalization.h'), sources.get('NormalizationTest'), config)
	CreateSeparatorTestFile(config.output('test-graphemes.h'), sources.get('GraphemeBreakTest'), 'Grapheme', config)
	CreateSeparatorTestFile(config.output('test-words.h'), sources.get('WordBreakTest'), 'Word', config)
	CreateSeparatorTestFile(config.output('test-sentences.h'), sources.get('SentenceBreakTest'), 'Sentence', config)
	CreateSeparatorTestFile(config.output('test-lines.h'), sources.get('LineBreakTest'), 'Line', config)

Groups: dict[str, object] = {
	'names': MakeNameTables,
	'property': MakePropertyTables,
	'bidi': MakeBidiTables,
	'block': MakeBlockTables,
	'case': MakeCaseTables,
	'decomposition': MakeDecompositionTables,
	'numeric': MakeNumericTables,
	'script': MakeScriptTables
}

def CompileAll(config: SystemConfig, groups: list[str], tests: bool) -> None:
	for group in groups:
		if group not in Groups:
			raise RuntimeError(f'Unknown output group [{group}]')

	# check if the output directory needs to be created
	if not os.path.isdir(config.outDir):
		os.makedirs(config.outDir)

	# generate the actual files (all sources are shared between the groups), which are only published once every group succeeded
	with OutputStage() as stage:
		staged = config.staged(stage)
		sources = SourceSet(staged)
		for group in groups:
			Groups[group](sources, staged)
		if tests:
			MakeTestFixtures(sources, staged)
