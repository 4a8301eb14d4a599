# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import zlib

from .parser import ParseCodepoint
from .tables import CharMap

# name-blob grammar: for every named codepoint in ascending order '<hex-codepoint>;<name>;'
NameSeparator: str = ';'
CompressionLevel: int = 9

class NameBlob:
	def __init__(self, compressed: bytes, originalSize: int) -> None:
		self.compressed = compressed
		self.originalSize = originalSize
	def __repr__(self) -> str:
		return f'NameBlob({self.compressedSize()} bytes, expands to {self.originalSize})'
	def compressedSize(self) -> int:
		return len(self.compressed)

	@staticmethod
	def serialize(names: dict[int, str]) -> str:
		out = []
		for cp in sorted(names):
			name = names[cp]
			if len(name) == 0 or NameSeparator in name or not name.isascii():
				raise RuntimeError(f'Name [{name}] of [{cp:04x}] cannot be serialized')
			out.append(f'{cp:04X}{NameSeparator}{name}{NameSeparator}')
		return ''.join(out)
	@staticmethod
	def parse(text: str) -> dict[int, str]:
		fields = text.split(NameSeparator)

		# the stream must end in a separator, which leaves exactly one empty trailing field
		if fields[-1] != '' or len(fields) % 2 != 1:
			raise RuntimeError('Malformed name-blob encountered')
		out: dict[int, str] = {}
		for i in range(0, len(fields) - 1, 2):
			out[ParseCodepoint(fields[i], 'name-blob')] = fields[i + 1]
		return out
	@staticmethod
	def encode(names: dict[int, str]) -> 'NameBlob':
		raw = NameBlob.serialize(names).encode('ascii')
		return NameBlob(zlib.compress(raw, CompressionLevel), len(raw))

	def decompress(self) -> str:
		raw = zlib.decompress(self.compressed, bufsize=max(self.originalSize, 1))
		if len(raw) != self.originalSize:
			raise RuntimeError(f'Name-blob expanded to [{len(raw)}] instead of [{self.originalSize}] bytes')
		return raw.decode('ascii')

# name lookup against the blob, with the corrected names only substituted for codepoints that have a base name
class NameTable:
	def __init__(self, blob: NameBlob, corrections: CharMap) -> None:
		self._blob = blob
		self._corrections = corrections
		self._names: dict[int, str]|None = None
	def baseName(self, cp: int) -> str|None:
		# decompress the blob only once
		if self._names is None:
			self._names = NameBlob.parse(self._blob.decompress())
		return self._names.get(cp)
	def name(self, cp: int) -> str|None:
		name = self.baseName(cp)
		if name is None:
			return None
		return self._corrections.get(cp, name)
