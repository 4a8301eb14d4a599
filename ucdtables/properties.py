# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
from .values import LookupType

# closed value-sets of the enumerated properties (source text is mapped case-insensitively onto the variants)
GeneralCategory = LookupType.enumType('GeneralCategory', 'Cn', [
	'Lu', 'Ll', 'Lt', 'Lm', 'Lo', 'Mn', 'Mc', 'Me', 'Nd', 'Nl', 'No',
	'Pc', 'Pd', 'Ps', 'Pe', 'Pi', 'Pf', 'Po', 'Sm', 'Sc', 'Sk', 'So',
	'Zs', 'Zl', 'Zp', 'Cc', 'Cf', 'Cs', 'Co', 'Cn'
])

BidiClass = LookupType.enumType('BidiClass', 'Default', [
	'Default', 'AL', 'AN', 'B', 'BN', 'CS', 'EN', 'ES', 'ET', 'FSI', 'L', 'LRE', 'LRI', 'LRO', 'NSM',
	'ON', 'PDF', 'PDI', 'R', 'RLE', 'RLI', 'RLO', 'S', 'WS'
])

EastAsianWidth = LookupType.enumType('EastAsianWidth', 'N', ['N', 'A', 'F', 'H', 'Na', 'W'])

GraphemeClusterBreak = LookupType.enumType('GraphemeClusterBreak', 'Other', [
	'Other', 'Control', 'CR', 'Extend', 'L', 'LF', 'LV', 'LVT', 'Prepend',
	'Regional_Indicator', 'SpacingMark', 'T', 'V', 'ZWJ'
])

HangulSyllableType = LookupType.enumType('HangulSyllableType', 'NA', ['NA', 'L', 'LV', 'LVT', 'T', 'V'])

LineBreak = LookupType.enumType('LineBreak', 'XX', [
	'XX', 'AI', 'AL', 'AP', 'AK', 'AS', 'B2', 'BA', 'BB', 'BK', 'CB', 'CJ',
	'CL', 'CM', 'CP', 'CR', 'EX', 'EB', 'EM', 'GL', 'H2', 'H3', 'HL', 'HY',
	'ID', 'IN', 'IS', 'JL', 'JT', 'JV', 'LF', 'NL', 'NS', 'NU', 'OP', 'PO', 'PR', 'QU', 'RI',
	'SA', 'SG', 'SP', 'SY', 'WJ', 'VF', 'VI', 'ZW', 'ZWJ'
])

NumericType = LookupType.enumType('NumericType', 'None', ['None', 'Decimal', 'Digit', 'Numeric'])

SentenceBreak = LookupType.enumType('SentenceBreak', 'Other', [
	'Other', 'ATerm', 'Close', 'CR', 'Extend', 'Format', 'LF', 'Lower', 'Numeric',
	'OLetter', 'SContinue', 'Sep', 'Sp', 'STerm', 'Upper'
])

WordBreak = LookupType.enumType('WordBreak', 'Other', [
	'Other', 'ALetter', 'CR', 'Double_Quote', 'Extend', 'ExtendNumLet', 'Format',
	'Hebrew_Letter', 'Katakana', 'LF', 'MidLetter', 'MidNum', 'MidNumLet', 'Newline',
	'Numeric', 'Regional_Indicator', 'Single_Quote', 'WSegSpace', 'ZWJ'
])

IndicPositionalCategory = LookupType.enumType('IndicPositionalCategory', 'NA', [
	'NA', 'Bottom', 'Bottom_And_Right', 'Bottom_And_Left', 'Left', 'Left_And_Right', 'Overstruck', 'Right',
	'Top', 'Top_And_Bottom', 'Top_And_Bottom_And_Right', 'Top_And_Left', 'Top_And_Left_And_Right', 'Top_And_Right',
	'Top_And_Bottom_And_Left', 'Visual_Order_Left'
])

IndicSyllabicCategory = LookupType.enumType('IndicSyllabicCategory', 'Other', [
	'Other', 'Avagraha', 'Bindu', 'Brahmi_Joining_Number', 'Cantillation_Mark', 'Consonant', 'Consonant_Dead',
	'Consonant_Final', 'Consonant_Head_Letter', 'Consonant_Initial_Postfixed', 'Consonant_Killer', 'Consonant_Medial',
	'Consonant_Placeholder', 'Consonant_Preceding_Repha', 'Consonant_Prefixed', 'Consonant_Subjoined',
	'Consonant_Succeeding_Repha', 'Consonant_With_Stacker', 'Gemination_Mark', 'Invisible_Stacker', 'Joiner',
	'Modifying_Letter', 'Non_Joiner', 'Nukta', 'Number', 'Number_Joiner', 'Pure_Killer', 'Register_Shifter',
	'Reordering_Killer', 'Syllable_Modifier', 'Tone_Letter', 'Tone_Mark', 'Virama', 'Visarga', 'Vowel',
	'Vowel_Dependent', 'Vowel_Independent'
])

JoiningType = LookupType.enumType('JoiningType', 'Default', [
	'Default', 'Dual_Joining', 'Join_Causing', 'Left_Joining', 'Non_Joining', 'Right_Joining', 'Transparent'
])

# ArabicShaping abbreviates the joining type to a single letter
JoiningTypeAbbreviations: dict[str, str] = {
	'C': 'Join_Causing', 'D': 'Dual_Joining', 'L': 'Left_Joining', 'R': 'Right_Joining', 'T': 'Transparent', 'U': 'Non_Joining'
}

# ArabicShaping spells the joining groups in upper-case with spaces (source text is mapped onto the underscored variants)
JoiningGroup = LookupType.enumType('JoiningGroup', 'No_Joining_Group', [
	'No_Joining_Group', 'Ain', 'Alaph', 'Alef', 'African_Feh', 'African_Qaf', 'African_Noon', 'Beh', 'Beth',
	'Burushaski_Yeh_Barree', 'Dal', 'Dalath_Rish', 'E', 'Farsi_Yeh', 'Fe', 'Feh', 'Final_Semkath', 'Gaf', 'Gamal',
	'Hah', 'He', 'Heh', 'Heh_Goal', 'Heth', 'Hanifi_Rohingya_Pa', 'Hanifi_Rohingya_Kinna_Ya', 'Kaf', 'Kaph',
	'Khaph', 'Knotted_Heh', 'Kashmiri_Yeh', 'Lam', 'Lamadh', 'Manichaean_Aleph', 'Manichaean_Ayin',
	'Manichaean_Beth', 'Manichaean_Daleth', 'Manichaean_Dhamedh', 'Manichaean_Gimel', 'Manichaean_Heth',
	'Manichaean_Kaph', 'Manichaean_Lamedh', 'Manichaean_Mem', 'Manichaean_Nun', 'Manichaean_Pe',
	'Manichaean_Samekh', 'Manichaean_Teth', 'Manichaean_Thamedh', 'Manichaean_Waw', 'Manichaean_Yodh',
	'Manichaean_Zayin', 'Manichaean_Sadhe', 'Manichaean_Qoph', 'Manichaean_Resh', 'Manichaean_Taw',
	'Manichaean_One', 'Manichaean_Five', 'Manichaean_Ten', 'Manichaean_Twenty', 'Manichaean_Hundred',
	'Malayalam_Nga', 'Malayalam_Ja', 'Malayalam_Nya', 'Malayalam_Tta', 'Malayalam_Nna', 'Malayalam_Nnna',
	'Malayalam_Bha', 'Malayalam_Ra', 'Malayalam_Lla', 'Malayalam_Llla', 'Malayalam_Ssa', 'Meem', 'Mim',
	'Noon', 'Nun', 'Nya', 'Pe', 'Qaf', 'Qaph', 'Reh', 'Reversed_Pe', 'Rohingya_Yeh', 'Sad', 'Sadhe',
	'Seen', 'Semkath', 'Shin', 'Straight_Waw', 'Swash_Kaf', 'Syriac_Waw', 'Tah', 'Taw', 'Teh_Marbuta',
	'Teh_Marbuta_Goal', 'Teth', 'Thin_Yeh', 'Waw', 'Yeh', 'Yeh_Barree', 'Yeh_With_Tail', 'Yudh', 'Yudh_He',
	'Vertical_Tail', 'Zain', 'Zhain'
])

# binary properties materialized as codepoint-sets (source-file, property-name)
BinaryProperties: list[tuple[str, str]] = [
	('PropList', 'White_Space'),
	('PropList', 'Dash'),
	('PropList', 'Hyphen'),
	('PropList', 'Quotation_Mark'),
	('PropList', 'Terminal_Punctuation'),
	('PropList', 'Diacritic'),
	('PropList', 'Extender'),
	('PropList', 'Soft_Dotted'),
	('PropList', 'Pattern_Syntax'),
	('PropList', 'Pattern_White_Space'),
	('DerivedCoreProperties', 'Alphabetic'),
	('DerivedCoreProperties', 'Lowercase'),
	('DerivedCoreProperties', 'Uppercase'),
	('DerivedCoreProperties', 'Math'),
	('DerivedCoreProperties', 'Cased'),
	('DerivedCoreProperties', 'Case_Ignorable'),
	('DerivedCoreProperties', 'Default_Ignorable_Code_Point'),
	('DerivedCoreProperties', 'Grapheme_Base'),
	('DerivedCoreProperties', 'Grapheme_Extend'),
	('EmojiData', 'Emoji'),
	('EmojiData', 'Emoji_Presentation'),
	('EmojiData', 'Extended_Pictographic')
]

# compatibility-formatting tags of decomposition mappings
DecompositionTags: list[str] = [
	'<font>', '<noBreak>', '<initial>', '<medial>', '<final>', '<isolated>', '<circle>', '<super>',
	'<sub>', '<vertical>', '<wide>', '<narrow>', '<small>', '<square>', '<fraction>', '<compat>'
]

# size-bounds of the sequence-valued properties
CanonicalBound: int = 2
CompatibilityShortBound: int = 3
CompatibilityLongBound: int = 18
CaseMappingBound: int = 3
