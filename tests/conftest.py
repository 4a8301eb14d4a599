# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import pytest

from ucdtables import grammars
from ucdtables.parser import ParsedFile

def _UnicodeDataLine(cp: int, name: str, gc: str, ccc: int = 0, bidi: str = 'L', decomposition: str = '', decimal: str = '',
				digit: str = '', numeric: str = '', mirrored: str = 'N', upper: str = '', lower: str = '', title: str = '') -> str:
	return f'{cp:04X};{name};{gc};{ccc};{bidi};{decomposition};{decimal};{digit};{numeric};{mirrored};;;{upper};{lower};{title}'

@pytest.fixture
def unicodeDataLine():
	return _UnicodeDataLine

@pytest.fixture
def parse():
	def _parse(grammar, text: str) -> ParsedFile:
		return ParsedFile.fromLines(grammar, text.splitlines())
	return _parse

# miniature database with every file the compiler reads, laid out as the download cache does
MiniFiles: dict[str, str] = {
	'ReadMe': '# Unicode Character Database\n# Version 15.1.0 of the Unicode Standard.\n',
	'UnicodeData': '\n'.join([
		_UnicodeDataLine(0x0020, 'SPACE', 'Zs', bidi='WS'),
		_UnicodeDataLine(0x0028, 'LEFT PARENTHESIS', 'Ps', bidi='ON', mirrored='Y'),
		_UnicodeDataLine(0x0029, 'RIGHT PARENTHESIS', 'Pe', bidi='ON', mirrored='Y'),
		_UnicodeDataLine(0x0031, 'DIGIT ONE', 'Nd', bidi='EN', decimal='1', digit='1', numeric='1'),
		_UnicodeDataLine(0x0041, 'LATIN CAPITAL LETTER A', 'Lu', lower='0061'),
		_UnicodeDataLine(0x0042, 'LATIN CAPITAL LETTER B', 'Lu', lower='0062'),
		_UnicodeDataLine(0x0043, 'LATIN CAPITAL LETTER C', 'Lu', lower='0063'),
		_UnicodeDataLine(0x0044, 'LATIN SMALL LETTER D', 'Ll'),
		_UnicodeDataLine(0x0061, 'LATIN SMALL LETTER A', 'Ll', upper='0041', title='0041'),
		_UnicodeDataLine(0x0069, 'LATIN SMALL LETTER I', 'Ll', upper='0049', title='0049'),
		_UnicodeDataLine(0x00BD, 'VULGAR FRACTION ONE HALF', 'No', bidi='ON', decomposition='<fraction> 0031 2044 0032', numeric='1/2'),
		_UnicodeDataLine(0x00C0, 'LATIN CAPITAL LETTER A WITH GRAVE', 'Lu', decomposition='0041 0300', lower='00E0'),
		_UnicodeDataLine(0x00DF, 'LATIN SMALL LETTER SHARP S', 'Ll'),
		_UnicodeDataLine(0x00E0, 'LATIN SMALL LETTER A WITH GRAVE', 'Ll', decomposition='0061 0300', upper='00C0', title='00C0'),
		_UnicodeDataLine(0x0130, 'LATIN CAPITAL LETTER I WITH DOT ABOVE', 'Lu', decomposition='0049 0307', lower='0069'),
		_UnicodeDataLine(0x0300, 'COMBINING GRAVE ACCENT', 'Mn', ccc=230, bidi='NSM'),
		_UnicodeDataLine(0x0307, 'COMBINING DOT ABOVE', 'Mn', ccc=230, bidi='NSM'),
		_UnicodeDataLine(0x0340, 'COMBINING GRAVE TONE MARK', 'Mn', ccc=230, bidi='NSM', decomposition='0300'),
		_UnicodeDataLine(0x1E9E, 'LATIN CAPITAL LETTER SHARP S', 'Lu', lower='00DF'),
		_UnicodeDataLine(0x2044, 'FRACTION SLASH', 'Sm', bidi='CS'),
		_UnicodeDataLine(0x4E00, '<CJK Ideograph, First>', 'Lo'),
		_UnicodeDataLine(0x9FFF, '<CJK Ideograph, Last>', 'Lo'),
		_UnicodeDataLine(0xFB01, 'LATIN SMALL LIGATURE FI', 'Ll', decomposition='<compat> 0066 0069')
	]) + '\n',
	'PropList': '0020 ; White_Space # Zs SPACE\n0028..0029 ; Pattern_Syntax\n',
	'DerivedCoreProperties': '\n'.join([
		'0041..0044 ; ID_Start', '0061 ; ID_Start', '0031 ; ID_Continue', '0041..0044 ; ID_Continue', '0061 ; ID_Continue',
		'0300 ; ID_Continue', '0041..0044 ; XID_Start', '0061 ; XID_Start', '0031 ; XID_Continue', '0041..0044 ; XID_Continue',
		'0061 ; XID_Continue', '0041..0044 ; Alphabetic', '0300 ; InCB; Extend'
	]) + '\n',
	'EmojiData': '# no emoji in this database\n',
	'Blocks': '0000..007F; Basic Latin\n0080..00FF; Latin-1 Supplement\n4E00..9FFF; CJK Unified Ideographs\n',
	'Scripts': '0020 ; Common # Zs\n0041..0044 ; Latin\n0061 ; Latin\n4E00..9FFF ; Han\n',
	'ScriptExtensions': '0300 ; Latn Grek # Mn\n',
	'PropertyValueAliases': '\n'.join([
		'sc ; Grek ; Greek', 'sc ; Hani ; Han', 'sc ; Latn ; Latin', 'sc ; Zyyy ; Common', 'sc ; Zinh ; Inherited ; Qaai',
		'sc ; Zzzz ; Unknown', 'gc ; Lu ; Uppercase_Letter'
	]) + '\n',
	'EastAsianWidth': '0020;Na\n0041..0044;Na\n4E00..9FFF;W\n',
	'LineBreak': '0020;SP\n0028;OP\n0029;CP\n0041..0044;AL\n',
	'HangulSyllableType': '# no hangul in this database\n',
	'GraphemeBreakProperty': '0300 ; Extend\n',
	'WordBreakProperty': '0041..0044 ; ALetter\n0020 ; WSegSpace\n',
	'SentenceBreakProperty': '0041..0043 ; Upper\n0044 ; Lower\n',
	'IndicPositionalCategory': '0900..0902 ; Top # Mn\n0903 ; Right\n',
	'IndicSyllabicCategory': '0900..0902 ; Bindu\n0905 ; Vowel_Independent\n',
	'ArabicShaping': '0600; ARABIC NUMBER SIGN; U; No_Joining_Group\n0627; ALEF; R; ALEF\n0628; BEH; D; BEH\n06C3; TEH MARBUTA GOAL; R; TEH MARBUTA GOAL\n',
	'CompositionExclusions': '# explicit exclusions\n1E9E\n',
	'CaseFolding': '0041; C; 0061; # LATIN CAPITAL LETTER A\n00DF; F; 0073 0073;\n0130; F; 0069 0307;\n0130; T; 0069;\n1E9E; F; 0073 0073;\n1E9E; S; 00DF;\n',
	'SpecialCasing': '00DF; 00DF; 0053 0073; 0053 0053; # LATIN SMALL LETTER SHARP S\n0130; 0069 0307; 0130; 0130;\n03A3; 03C2; 03A3; 03A3; Final_Sigma;\n',
	'NameAliases': '0041;LATIN LETTER A;correction\n0041;LATIN LETTER CAPITAL A;correction\n0020;SP;abbreviation\n',
	'BidiMirroring': '0028; 0029 # LEFT PARENTHESIS\n0029; 0028 # RIGHT PARENTHESIS\n',
	'NormalizationTest': '@Part0 # Specific cases\n00C0;00C0;0041 0300;00C0;0041 0300; # LATIN CAPITAL LETTER A WITH GRAVE\n',
	'GraphemeBreakTest': '÷ 0041 × 0300 ÷ 0042 ÷\t# comment\n',
	'WordBreakTest': '÷ 0041 × 0042 ÷ 0020 ÷\n',
	'SentenceBreakTest': '÷ 0041 ÷\n',
	'LineBreakTest': '÷ 0041 × 0020 ÷ 0042 ÷\n'
}

@pytest.fixture
def miniUCD(tmp_path):
	dirPath = tmp_path / 'ucd'
	dirPath.mkdir()
	for (name, content) in MiniFiles.items():
		(dirPath / f'{name}.txt').write_text(content, encoding='utf-8')
	return dirPath

@pytest.fixture
def miniMapping(miniUCD) -> dict[str, str]:
	return {name: str(miniUCD / f'{name}.txt') for name in MiniFiles}

@pytest.fixture
def miniSources(parse):
	def _parsed(name: str) -> ParsedFile:
		if name in grammars.Sources:
			return parse(grammars.Sources[name][0], MiniFiles[name])
		return parse(grammars.TestSources[name][0], MiniFiles[name])
	return _parsed
