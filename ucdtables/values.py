# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
from .ranges import Range
from .tags import PackScriptTag

# value-types of the generated tables (each knows its default, its valid values, and how it is written out)
class LookupType:
	def __init__(self) -> None:
		self._kind = ''
		self._typeName = ''
		self._values = []
		self._index = {}
		self._default = None
		self._min = 0
		self._max = 0
		self._size = 0
	@staticmethod
	def boolType() -> 'LookupType':
		out = LookupType()
		out._kind = 'bool'
		out._typeName = 'bool'
		out._default = False
		return out
	@staticmethod
	def selfIntType(defValue: int, intType: str, minValue: int, maxValue: int) -> 'LookupType':
		out = LookupType()
		out._kind = 'int'
		out._typeName = intType
		out._default = defValue
		out._min = minValue
		out._max = maxValue
		return out
	@staticmethod
	def intType(defValue: int, intType: str) -> 'LookupType':
		for i in [8, 16, 32, 64]:
			if intType == f'uint{i}_t':
				return LookupType.selfIntType(defValue, intType, 0, 2**i - 1)
			elif intType == f'int{i}_t':
				return LookupType.selfIntType(defValue, intType, -2**(i - 1), 2**(i - 1) - 1)
		if intType == 'char32_t':
			return LookupType.selfIntType(defValue, intType, Range.RangeFirst, Range.RangeLast)
		raise RuntimeError(f'Unknown integer type [{intType}] encountered')
	@staticmethod
	def enumType(name: str, defValue: str, values: list[str]) -> 'LookupType':
		if len(values) == 0:
			raise RuntimeError(f'Enum [{name}] must not be empty')
		out = LookupType()
		out._kind = 'enum'
		out._typeName = name
		out._values = values
		out._index = {}
		for (i, v) in enumerate(values):
			if v.lower() in out._index:
				raise RuntimeError(f'Duplicate value [{v}] in enum [{name}]')
			out._index[v.lower()] = i
		if defValue.lower() not in out._index:
			raise RuntimeError(f'Default value [{defValue}] is not part of enum [{name}]')
		out._default = out._index[defValue.lower()]
		out._min = 0
		out._max = len(values) - 1
		return out
	@staticmethod
	def sequenceType(size: int) -> 'LookupType':
		out = LookupType()
		out._kind = 'sequence'
		out._typeName = f'Sequence<{size}>'
		out._default = ()
		out._size = size
		return out
	@staticmethod
	def rationalType() -> 'LookupType':
		out = LookupType()
		out._kind = 'rational'
		out._typeName = 'Rational'
		out._default = (0, 1)
		return out
	@staticmethod
	def stringType(defValue: str = '') -> 'LookupType':
		out = LookupType()
		out._kind = 'string'
		out._typeName = 'const char*'
		out._default = defValue
		return out
	@staticmethod
	def tagType(defCode: str) -> 'LookupType':
		out = LookupType()
		out._kind = 'tag'
		out._typeName = 'uint32_t'
		out._default = PackScriptTag(defCode)
		out._min = 0
		out._max = 2**32 - 1
		return out

	def typeName(self, raw: bool = False) -> str:
		if raw or self._kind not in ['enum', 'sequence', 'rational']:
			return self._typeName
		return f'gen::{self._typeName}'
	def defValue(self):
		return self._default
	def enumValues(self) -> list[str]:
		if self._kind == 'enum':
			return self._values
		raise RuntimeError(f'Function undefined for [{self._kind}]')
	def parse(self, text: str, where: str = '') -> int:
		if self._kind != 'enum':
			raise RuntimeError(f'Function undefined for [{self._kind}]')
		key = text.strip().lower()
		if key not in self._index:
			raise RuntimeError(f'Unknown value [{text}] for [{self._typeName}] in [{where}]')
		return self._index[key]
	def name(self, index: int) -> str:
		if self._kind != 'enum':
			raise RuntimeError(f'Function undefined for [{self._kind}]')
		return self._values[index]
	def bufferType(self) -> str:
		if self._kind == 'enum':
			if len(self._values) > 2**16:
				return 'uint32_t'
			elif len(self._values) > 2**8:
				return 'uint16_t'
			return 'uint8_t'
		raise RuntimeError(f'Function undefined for [{self._kind}]')
	def validValue(self, value) -> bool:
		if self._kind == 'bool':
			return isinstance(value, bool)
		if self._kind in ['int', 'enum', 'tag']:
			return isinstance(value, int) and value >= self._min and value <= self._max
		if self._kind == 'sequence':
			return isinstance(value, tuple) and len(value) <= self._size and all(Range.RangeFirst <= v <= Range.RangeLast for v in value)
		if self._kind == 'rational':
			return isinstance(value, tuple) and len(value) == 2 and value[1] > 0
		if self._kind == 'string':
			return isinstance(value, str) and value.isascii()
		raise RuntimeError(f'Unknown kind [{self._kind}] encountered')
	def staticLookup(self, value) -> str:
		if not self.validValue(value):
			raise RuntimeError(f'Invalid value [{value}] for [{self._typeName}]')
		if self._kind == 'bool':
			return 'true' if value else 'false'
		if self._kind == 'int':
			return str(value)
		if self._kind == 'tag':
			return f'{value:#010x}'
		if self._kind == 'enum':
			return f'gen::{self._typeName}::{self._values[value]}'
		if self._kind == 'sequence':
			return f'{{ {len(value)}, {{ {", ".join(f"{v:#06x}" for v in value) if len(value) > 0 else "0"} }} }}'
		if self._kind == 'rational':
			return f'{{ {value[0]}, {value[1]} }}'
		escaped = value.replace('\\', '\\\\').replace('"', '\\"')
		return f'"{escaped}"'
