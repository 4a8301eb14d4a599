# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
from .parser import Grammar

# UnicodeData fields (after the codepoint):
#	0 name, 1 general category, 2 combining class, 3 bidi class, 4 decomposition, 5 decimal, 6 digit, 7 numeric,
#	8 mirrored, 9 unicode-1 name, 10 iso comment, 11 simple upper, 12 simple lower, 13 simple title
UnicodeData = Grammar('UnicodeData', 'scalar', ['text', 'text', 'int', 'text', 'text', 'text', 'text', 'text', 'text', 'text', 'text', 'hex?', 'hex?', 'hex?'], 15)

# codepoint-range followed by a single property-name or property-value
PropList = Grammar('PropList', 'range', ['text'], 2)
DerivedCoreProperties = Grammar('DerivedCoreProperties', 'range', ['text'], 2)
EmojiData = Grammar('EmojiData', 'range', ['text'], 2)
Blocks = Grammar('Blocks', 'range', ['text'], 2)
Scripts = Grammar('Scripts', 'range', ['text'], 2)
EastAsianWidth = Grammar('EastAsianWidth', 'range', ['text'], 2)
LineBreak = Grammar('LineBreak', 'range', ['text'], 2)
HangulSyllableType = Grammar('HangulSyllableType', 'range', ['text'], 2)
GraphemeBreakProperty = Grammar('GraphemeBreakProperty', 'range', ['text'], 2)
WordBreakProperty = Grammar('WordBreakProperty', 'range', ['text'], 2)
SentenceBreakProperty = Grammar('SentenceBreakProperty', 'range', ['text'], 2)
IndicPositionalCategory = Grammar('IndicPositionalCategory', 'range', ['text'], 2)
IndicSyllabicCategory = Grammar('IndicSyllabicCategory', 'range', ['text'], 2)
ScriptExtensions = Grammar('ScriptExtensions', 'range', ['words'], 2)
CompositionExclusions = Grammar('CompositionExclusions', 'range', [], 1)

# codepoint-keyed mappings
CaseFolding = Grammar('CaseFolding', 'scalar', ['text', 'seq'], 3)
SpecialCasing = Grammar('SpecialCasing', 'scalar', ['seq', 'seq', 'seq', 'text'], 4)
NameAliases = Grammar('NameAliases', 'scalar', ['text', 'text'], 3)
BidiMirroring = Grammar('BidiMirroring', 'scalar', ['cp'], 2)

# ArabicShaping fields (after the codepoint): 0 name, 1 joining type, 2 joining group
ArabicShaping = Grammar('ArabicShaping', 'scalar', ['text', 'text', 'text'], 4)

# records without a codepoint key
PropertyValueAliases = Grammar('PropertyValueAliases', 'none', ['text', 'text', 'text', 'text', 'text', 'text'], 3)
NormalizationTest = Grammar('NormalizationTest', 'none', ['seq', 'seq', 'seq', 'seq', 'seq'], 5)
GraphemeBreakTest = Grammar('GraphemeBreakTest', 'none', ['text'], 1)
WordBreakTest = Grammar('WordBreakTest', 'none', ['text'], 1)
SentenceBreakTest = Grammar('SentenceBreakTest', 'none', ['text'], 1)
LineBreakTest = Grammar('LineBreakTest', 'none', ['text'], 1)

# logical source-name to grammar and location relative to the ucd-root
Sources: dict[str, tuple[Grammar, str]] = {
	'UnicodeData': (UnicodeData, 'ucd/UnicodeData.txt'),
	'PropList': (PropList, 'ucd/PropList.txt'),
	'DerivedCoreProperties': (DerivedCoreProperties, 'ucd/DerivedCoreProperties.txt'),
	'EmojiData': (EmojiData, 'ucd/emoji/emoji-data.txt'),
	'Blocks': (Blocks, 'ucd/Blocks.txt'),
	'Scripts': (Scripts, 'ucd/Scripts.txt'),
	'ScriptExtensions': (ScriptExtensions, 'ucd/ScriptExtensions.txt'),
	'PropertyValueAliases': (PropertyValueAliases, 'ucd/PropertyValueAliases.txt'),
	'EastAsianWidth': (EastAsianWidth, 'ucd/EastAsianWidth.txt'),
	'LineBreak': (LineBreak, 'ucd/LineBreak.txt'),
	'HangulSyllableType': (HangulSyllableType, 'ucd/HangulSyllableType.txt'),
	'GraphemeBreakProperty': (GraphemeBreakProperty, 'ucd/auxiliary/GraphemeBreakProperty.txt'),
	'WordBreakProperty': (WordBreakProperty, 'ucd/auxiliary/WordBreakProperty.txt'),
	'SentenceBreakProperty': (SentenceBreakProperty, 'ucd/auxiliary/SentenceBreakProperty.txt'),
	'IndicPositionalCategory': (IndicPositionalCategory, 'ucd/IndicPositionalCategory.txt'),
	'IndicSyllabicCategory': (IndicSyllabicCategory, 'ucd/IndicSyllabicCategory.txt'),
	'ArabicShaping': (ArabicShaping, 'ucd/ArabicShaping.txt'),
	'CompositionExclusions': (CompositionExclusions, 'ucd/CompositionExclusions.txt'),
	'CaseFolding': (CaseFolding, 'ucd/CaseFolding.txt'),
	'SpecialCasing': (SpecialCasing, 'ucd/SpecialCasing.txt'),
	'NameAliases': (NameAliases, 'ucd/NameAliases.txt'),
	'BidiMirroring': (BidiMirroring, 'ucd/BidiMirroring.txt')
}
TestSources: dict[str, tuple[Grammar, str]] = {
	'NormalizationTest': (NormalizationTest, 'ucd/NormalizationTest.txt'),
	'GraphemeBreakTest': (GraphemeBreakTest, 'ucd/auxiliary/GraphemeBreakTest.txt'),
	'WordBreakTest': (WordBreakTest, 'ucd/auxiliary/WordBreakTest.txt'),
	'SentenceBreakTest': (SentenceBreakTest, 'ucd/auxiliary/SentenceBreakTest.txt'),
	'LineBreakTest': (LineBreakTest, 'ucd/auxiliary/LineBreakTest.txt')
}
