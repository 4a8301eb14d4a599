# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
from types import MappingProxyType

from . import properties
from .parser import ParsedFile, ParseInteger, ParseSequence
from .ranges import Range, Ranges
from .tags import ScriptTag
from .values import LookupType

# all derivations are pure: they take parsed source-files (or earlier derivations) and return read-only associations

RangeOpenSuffix: str = ', First>'
RangeCloseSuffix: str = ', Last>'
MaxCombiningClass: int = 254

def _Frozen(mapping: dict) -> MappingProxyType:
	return MappingProxyType(dict(mapping))

class CharacterData:
	def __init__(self, names: dict, category: list[Range], bidi: list[Range], mirrored: list[Range], combiningClass: dict,
			  canonical: dict, compatShort: dict, compatLong: dict, numericType: list[Range], numericValue: dict,
			  upper: dict, lower: dict, title: dict) -> None:
		self.names = _Frozen(names)
		self.category = tuple(category)
		self.bidi = tuple(bidi)
		self.mirrored = tuple(mirrored)
		self.combiningClass = _Frozen(combiningClass)
		self.canonical = _Frozen(canonical)
		self.compatShort = _Frozen(compatShort)
		self.compatLong = _Frozen(compatLong)
		self.numericType = tuple(numericType)
		self.numericValue = _Frozen(numericValue)
		self.upper = _Frozen(upper)
		self.lower = _Frozen(lower)
		self.title = _Frozen(title)

class IdentifierSets:
	def __init__(self, idStart: list[Range], idContinue: list[Range], xidStart: list[Range], xidContinue: list[Range]) -> None:
		self.idStart = tuple(idStart)
		self.idContinue = tuple(idContinue)
		self.idNonstart = tuple(Ranges.difference(idContinue, idStart))
		self.xidStart = tuple(xidStart)
		self.xidContinue = tuple(xidContinue)
		self.xidNonstart = tuple(Ranges.difference(xidContinue, xidStart))

class CaseFolds:
	def __init__(self, simple: dict, full: dict) -> None:
		self.simple = _Frozen(simple)
		self.full = _Frozen(full)

class FullCaseMappings:
	def __init__(self, lower: dict, title: dict, upper: dict) -> None:
		self.lower = _Frozen(lower)
		self.title = _Frozen(title)
		self.upper = _Frozen(upper)

class Composition:
	def __init__(self, pairs: dict, diagnostics: list[str]) -> None:
		self.pairs = _Frozen(pairs)
		self.diagnostics = tuple(diagnostics)

class Joining:
	def __init__(self, joiningType: list[Range], joiningGroup: list[Range]) -> None:
		self.joiningType = tuple(joiningType)
		self.joiningGroup = tuple(joiningGroup)

def _ParseDecomposition(text: str, where: str) -> tuple[str, tuple[int, ...]]|None:
	# check if the record defines any decomposition
	if len(text) == 0:
		return None

	# check if the rule starts with a formatting tag, in which case it is a compatibility-mapping
	if text[0] == '<':
		for tag in properties.DecompositionTags:
			if text.startswith(tag):
				return ('compat', ParseSequence(text[len(tag):], where, properties.CompatibilityLongBound))
		raise RuntimeError(f'Unknown tag in decomposition mapping [{text}] in [{where}]')
	return ('canonical', ParseSequence(text, where, properties.CanonicalBound))

def _ParseRational(text: str, where: str) -> tuple[int, int]:
	numerator, _, denominator = text.partition('/')
	numerator = ParseInteger(numerator, where)
	denominator = (ParseInteger(denominator, where) if len(denominator) > 0 else 1)
	if denominator <= 0:
		raise RuntimeError(f'Invalid rational [{text}] in [{where}]')
	return (numerator, denominator)

def _NumericType(fields: list) -> int|None:
	if fields[5] != '':
		return properties.NumericType.parse('Decimal')
	if fields[6] != '':
		return properties.NumericType.parse('Digit')
	if fields[7] != '':
		return properties.NumericType.parse('Numeric')
	return None

def DeriveCharacterData(unicodeData: ParsedFile) -> CharacterData:
	names, combiningClass, canonical, compatShort, compatLong, numericValue = {}, {}, {}, {}, {}, {}
	upper, lower, title = {}, {}, {}
	category, bidi, mirrored, numericType = [], [], [], []

	# iterate over the records and collect the per-codepoint values and the First/Last range-pairs
	pending, rangePairs = None, []
	for record in unicodeData:
		cp, fs, where = record.first, record.fields, record.where
		name = fs[0]

		# check if a range-pair is opened or closed by this record
		if name.endswith(RangeOpenSuffix):
			if pending is not None:
				raise RuntimeError(f'Nested range [{name}] encountered in [{where}]')
			pending = (cp, name[:-len(RangeOpenSuffix)], fs)
		elif name.endswith(RangeCloseSuffix):
			if pending is None or pending[1] != name[:-len(RangeCloseSuffix)]:
				raise RuntimeError(f'Range [{name}] closed without being opened in [{where}]')
			rangePairs.append((pending[0], cp, pending[2]))
			pending = None
		elif pending is not None:
			raise RuntimeError(f'Range [{pending[1]}>] not closed properly in [{where}]')
		elif not name.startswith('<'):
			names[cp] = name

		# extract the enumerated and binary properties
		category.append(Range(cp, cp, properties.GeneralCategory.parse(fs[1], where)))
		bidi.append(Range(cp, cp, properties.BidiClass.parse(fs[3], where)))
		if fs[8] == 'Y':
			mirrored.append(Range(cp, cp))
		if fs[2] < 0 or fs[2] > MaxCombiningClass:
			raise RuntimeError(f'Combining class [{fs[2]}] out of range in [{where}]')
		if fs[2] != 0:
			combiningClass[cp] = fs[2]

		# classify the decomposition (compatibility-mappings are split by length to keep the common value small)
		decomposition = _ParseDecomposition(fs[4], where)
		if decomposition is not None and decomposition[0] == 'canonical':
			canonical[cp] = decomposition[1]
		elif decomposition is not None and len(decomposition[1]) <= properties.CompatibilityShortBound:
			compatShort[cp] = decomposition[1]
		elif decomposition is not None:
			compatLong[cp] = decomposition[1]

		# extract the numeric values
		numeric = _NumericType(fs)
		if numeric is not None:
			numericType.append(Range(cp, cp, numeric))
			numericValue[cp] = _ParseRational(fs[7], where)

		# extract the simple case mappings
		if fs[11] is not None:
			upper[cp] = fs[11]
		if fs[12] is not None:
			lower[cp] = fs[12]
		if fs[13] is not None:
			title[cp] = fs[13]
	if pending is not None:
		raise RuntimeError(f'Half-open range [{pending[1]}>] at [{pending[0]:04x}] encountered')

	# propagate the properties of the opening record to all codepoints strictly within each range-pair
	for (first, last, fs) in rangePairs:
		if last - first < 2:
			continue
		category.append(Range(first + 1, last - 1, properties.GeneralCategory.parse(fs[1])))
		bidi.append(Range(first + 1, last - 1, properties.BidiClass.parse(fs[3])))
		if fs[8] == 'Y':
			mirrored.append(Range(first + 1, last - 1))

	return CharacterData(names, Ranges.fromRawList(category), Ranges.fromRawList(bidi), Ranges.fromRawList(mirrored),
		combiningClass, canonical, compatShort, compatLong, Ranges.fromRawList(numericType), numericValue, upper, lower, title)

def DeriveBinaryProperty(parsed: ParsedFile, propertyName: str) -> tuple[Range, ...]:
	return tuple(parsed.values(lambda r: True if r.fields[0] == propertyName else None))

def DeriveEnumProperty(parsed: ParsedFile, lookupType: LookupType) -> tuple[Range, ...]:
	return tuple(parsed.values(lambda r: lookupType.parse(r.fields[0], r.where)))

def _JoiningType(record) -> int:
	if record.fields[1] not in properties.JoiningTypeAbbreviations:
		raise RuntimeError(f'Unknown joining type [{record.fields[1]}] in [{record.where}]')
	return properties.JoiningType.parse(properties.JoiningTypeAbbreviations[record.fields[1]], record.where)

def DeriveJoining(arabicShaping: ParsedFile) -> Joining:
	joiningType = arabicShaping.values(_JoiningType)
	joiningGroup = arabicShaping.values(lambda r: properties.JoiningGroup.parse(r.fields[2].replace(' ', '_'), r.where))
	return Joining(joiningType, joiningGroup)

def DeriveIdentifierSets(derivedCore: ParsedFile) -> IdentifierSets:
	return IdentifierSets(
		list(DeriveBinaryProperty(derivedCore, 'ID_Start')), list(DeriveBinaryProperty(derivedCore, 'ID_Continue')),
		list(DeriveBinaryProperty(derivedCore, 'XID_Start')), list(DeriveBinaryProperty(derivedCore, 'XID_Continue')))

def DeriveCaseFolds(caseFolding: ParsedFile, lower: dict) -> CaseFolds:
	# every codepoint with a simple lowercase mapping folds to it, unless explicitly folded differently
	simple = dict(lower)
	full = {}
	for record in caseFolding:
		status, mapping = record.fields[0], record.fields[1]
		if status not in ['C', 'S', 'F', 'T']:
			raise RuntimeError(f'Unknown case-folding status [{status}] in [{record.where}]')
		if len(mapping) == 0 or len(mapping) > properties.CaseMappingBound:
			raise RuntimeError(f'Case-folding of unexpected length in [{record.where}]')
		if status in ['C', 'S']:
			if len(mapping) != 1:
				raise RuntimeError(f'Simple case-folding must be a single codepoint in [{record.where}]')
			simple[record.first] = mapping[0]
		if status in ['C', 'F']:
			full[record.first] = mapping

	# only keep the folds, which diverge from the simple lowercase mapping
	simple = {cp: v for (cp, v) in simple.items() if v != lower.get(cp, cp)}
	full = {cp: v for (cp, v) in full.items() if v != (lower.get(cp, cp),)}
	return CaseFolds(simple, full)

def DeriveFullCaseMappings(specialCasing: ParsedFile, character: CharacterData) -> FullCaseMappings:
	out = ({}, {}, {})
	simple = (character.lower, character.title, character.upper)

	# only unconditional mappings are materialized, and only where they differ from the simple mapping
	for record in specialCasing:
		if record.field(3) != '':
			continue
		cp = record.first
		for i in range(3):
			mapping = record.fields[i]
			if len(mapping) > properties.CaseMappingBound:
				raise RuntimeError(f'Case mapping exceeds [{properties.CaseMappingBound}] codepoints in [{record.where}]')
			if mapping != (simple[i].get(cp, cp),):
				out[i][cp] = mapping
	return FullCaseMappings(out[0], out[1], out[2])

def DeriveCompositionExclusions(exclusions: ParsedFile, character: CharacterData) -> tuple[Range, ...]:
	explicit = exclusions.values(lambda r: True)

	# singletons, non-starter decompositions, and decompositions starting with a non-starter are never recomposed
	inferred: list[int] = []
	for (cp, sequence) in character.canonical.items():
		if len(sequence) == 1 or character.combiningClass.get(sequence[0], 0) != 0 or character.combiningClass.get(cp, 0) != 0:
			inferred.append(cp)
	return tuple(Ranges.union(explicit, Ranges.fromCodepoints(inferred)))

def DeriveComposition(character: CharacterData, excluded: list[Range]) -> Composition:
	pairs, diagnostics = {}, []

	# invert the canonical decompositions in ascending order (the lowest codepoint wins on duplicates)
	for cp in sorted(character.canonical):
		if Ranges.contains(excluded, cp):
			continue
		sequence = character.canonical[cp]
		if len(sequence) != 2:
			raise RuntimeError(f'Primary composite [{cp:04x}] does not decompose into a pair')
		if sequence in pairs:
			message = f'Composition of [{sequence[0]:04x} {sequence[1]:04x}] resolves to [{pairs[sequence]:04x}], dropping [{cp:04x}]'
			print(f'Warning: {message}')
			diagnostics.append(message)
			continue
		pairs[sequence] = cp
	return Composition(pairs, diagnostics)

def PackCompositionKey(first: int, second: int) -> int:
	return (first << 21) | second

def DeriveNameCorrections(nameAliases: ParsedFile) -> MappingProxyType:
	corrections = {}

	# later corrections supersede earlier ones
	for record in nameAliases:
		if record.fields[1] == 'correction':
			corrections[record.first] = record.fields[0]
	return _Frozen(corrections)

def DeriveBlocks(blocks: ParsedFile) -> tuple[Range, ...]:
	return tuple(blocks.values(lambda r: r.fields[0]))

def DeriveScriptCodes(aliases: ParsedFile) -> MappingProxyType:
	codes = {}

	# map all names (short, long, and any further aliases) of a script onto its short code
	for record in aliases:
		if record.fields[0] != 'sc':
			continue
		short = record.fields[1]
		ScriptTag(short)
		for name in record.fields[1:]:
			if name != '':
				codes[name.lower()] = short
	return _Frozen(codes)

def _ResolveScript(codes: dict, name: str, where: str) -> str:
	if name.lower() not in codes:
		raise RuntimeError(f'Unknown script [{name}] in [{where}]')
	return codes[name.lower()]

def DeriveScripts(scripts: ParsedFile, codes: dict) -> tuple[Range, ...]:
	return tuple(scripts.values(lambda r: ScriptTag(_ResolveScript(codes, r.fields[0], r.where))))

def DeriveScriptExtensions(extensions: ParsedFile, codes: dict) -> tuple[Range, ...]:
	return tuple(extensions.values(lambda r: ' '.join(_ResolveScript(codes, c, r.where) for c in r.fields[0])))

def DeriveMirroringGlyphs(bidiMirroring: ParsedFile) -> MappingProxyType:
	return _Frozen({record.first: record.fields[0] for record in bidiMirroring})
