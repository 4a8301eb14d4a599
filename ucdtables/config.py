# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import copy
import os
import re
import urllib.request

from .grammars import Sources, TestSources

DefaultURL: str = 'https://www.unicode.org/Public/UCD/latest'
DefaultNamespace: str = 'ucd::gen'
ReadMePath: str = 'ReadMe.txt'

class SystemConfig:
	def __init__(self, url: str, version: str, date: str, mapping: dict[str, str], outDir: str, namespace: str = DefaultNamespace) -> None:
		# the generated code qualifies its shared primitives with 'gen::'
		if namespace.split('::')[-1] != 'gen':
			raise RuntimeError(f'Namespace [{namespace}] must end in [gen]')
		self.url = url
		self.version = version
		self.date = date
		self.mapping = mapping
		self.outDir = outDir
		self.namespace = namespace
		self.stage = None
	def source(self, name: str) -> str:
		if name not in self.mapping:
			raise RuntimeError(f'Source [{name}] has not been fetched')
		return self.mapping[name]
	def output(self, fileName: str) -> str:
		return os.path.join(self.outDir, fileName)
	def staged(self, stage) -> 'SystemConfig':
		out = copy.copy(self)
		out.stage = stage
		return out

def ExtractVersion(readMe: str) -> str:
	version = re.findall('Version ([0-9]+(\\.[0-9]+)*) of the Unicode Standard', readMe)
	if len(version) != 1:
		raise RuntimeError('Unable to extract the version')
	return version[0][0]

def DownloadUCDFiles(refreshFiles: bool, includeMain: bool, includeTest: bool, baseUrl: str, dirPath: str, offline: bool = False) -> tuple[str, dict[str, str]]:
	files = {
		'ReadMe': ReadMePath
	}
	if includeMain:
		for name in Sources:
			files[name] = Sources[name][1]
	if includeTest:
		for name in TestSources:
			files[name] = TestSources[name][1]

	# check if the directory needs to be created
	if not os.path.isdir(dirPath):
		if offline:
			raise RuntimeError(f'Cache directory [{dirPath}] does not exist')
		os.makedirs(dirPath)

	# download all of the files (only if they should either be refreshed, or do not exist yet)
	mapping = {}
	for file in files:
		url, path = f'{baseUrl}/{files[file]}', os.path.join(dirPath, f'{file}.txt')
		mapping[file] = path

		if not refreshFiles and os.path.isfile(path):
			continue
		if offline:
			raise RuntimeError(f'File [{path}] is not cached and downloading is disabled')
		print(f'downloading [{url}] to [{path}]...')
		urllib.request.urlretrieve(url, path)

	# fetch the version from the read-me
	with open(mapping['ReadMe'], 'r', encoding='utf-8') as f:
		version = ExtractVersion(f.read())
	return (version, mapping)
