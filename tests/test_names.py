# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import zlib

import pytest

from ucdtables.names import NameBlob, NameTable
from ucdtables.tables import CharMap

Names: dict[int, str] = {
	0x0041: 'LATIN CAPITAL LETTER A',
	0x0020: 'SPACE',
	0x01A2: 'LATIN CAPITAL LETTER OI',
	0x1F600: 'GRINNING FACE'
}

def test_serialize_is_ascending():
	assert NameBlob.serialize({0x41: 'A', 0x20: 'SPACE'}) == '0020;SPACE;0041;A;'

def test_serialize_rejects_separator_in_name():
	with pytest.raises(RuntimeError, match='cannot be serialized'):
		NameBlob.serialize({0x41: 'A;B'})
	with pytest.raises(RuntimeError, match='cannot be serialized'):
		NameBlob.serialize({0x41: ''})

def test_blob_round_trip():
	blob = NameBlob.encode(Names)
	assert blob.originalSize == len(NameBlob.serialize(Names))
	assert blob.compressedSize() == len(blob.compressed)
	assert zlib.decompress(blob.compressed) == NameBlob.serialize(Names).encode('ascii')
	assert NameBlob.parse(blob.decompress()) == Names

def test_empty_blob():
	blob = NameBlob.encode({})
	assert blob.originalSize == 0
	assert NameBlob.parse(blob.decompress()) == {}

def test_parse_rejects_truncated_stream():
	with pytest.raises(RuntimeError, match='Malformed'):
		NameBlob.parse('0041;A;0042;B')
	with pytest.raises(RuntimeError, match='Invalid hex'):
		NameBlob.parse('XYZ;A;')

def test_decompress_checks_original_size():
	blob = NameBlob.encode(Names)
	with pytest.raises(RuntimeError, match='expanded to'):
		NameBlob(blob.compressed, blob.originalSize + 1).decompress()

def test_overlay_applies_only_to_named_codepoints():
	corrections = CharMap({0x01A2: 'LATIN CAPITAL LETTER GHA', 0xFEFF: 'ZERO WIDTH NO-BREAK SPACE'})
	table = NameTable(NameBlob.encode(Names), corrections)
	assert table.baseName(0x01A2) == 'LATIN CAPITAL LETTER OI'
	assert table.name(0x01A2) == 'LATIN CAPITAL LETTER GHA'
	assert table.name(0x0041) == 'LATIN CAPITAL LETTER A'
	assert table.name(0xFEFF) is None
	for cp in Names:
		assert table.name(cp) == corrections.get(cp, Names[cp])
