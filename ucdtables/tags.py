# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen

# script-codes are packed big-endian into an integer (as the multiplier is fixed at 256 and all characters are
#	below 256, codes of different length never collide)
MaxTagLength: int = 4

def PackScriptTag(code: str) -> int:
	if len(code) < 1 or len(code) > MaxTagLength or any(c < 'a' or c > 'z' for c in code):
		raise RuntimeError(f'Malformed script code [{code}] encountered')
	tag = 0
	for c in code:
		tag = tag * 256 + ord(c)
	return tag

def ScriptTag(shortName: str) -> int:
	return PackScriptTag(shortName.lower())
