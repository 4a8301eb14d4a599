# SPDX-License-Identifier: BSD-3-Clause
# Copyright (c) 2024 Bjoern Boss Henrichsen
import argparse
import datetime
import sys

from .compile import CompileAll, Groups
from .config import DefaultNamespace, DefaultURL, DownloadUCDFiles, SystemConfig

def _ParseArguments(argv: list[str]|None) -> argparse.Namespace:
	parser = argparse.ArgumentParser(prog='ucd-tables', description='Compile the unicode character database into static C++ lookup tables.')
	parser.add_argument('--ucd', default='./ucd', help='directory of the cached database files')
	parser.add_argument('--out', default='./generated', help='directory to publish the generated headers to')
	parser.add_argument('--url', default=DefaultURL, help='base url of the database to fetch from')
	parser.add_argument('--namespace', default=DefaultNamespace, help='namespace of the generated code (must end in gen)')
	parser.add_argument('--refresh', action='store_true', help='download already cached files again')
	parser.add_argument('--offline', action='store_true', help='never download, only use cached files')
	parser.add_argument('--tests', action='store_true', help='generate the conformance test fixtures')

	# group selectors (all groups are generated if none is selected)
	for group in Groups:
		parser.add_argument(f'--{group}', action='store_true', help=f'generate the [{group}] tables')
	return parser.parse_args(argv)

def Main(argv: list[str]|None = None) -> int:
	args = _ParseArguments(argv)
	groups = [group for group in Groups if getattr(args, group)]
	if len(groups) == 0 and not args.tests:
		groups = list(Groups)

	try:
		# check if the files need to be downloaded and extract the version and date-time
		version, mapping = DownloadUCDFiles(args.refresh, len(groups) > 0, args.tests, args.url, args.ucd, args.offline)
		date = datetime.datetime.today().strftime('%Y-%m-%d %H:%M')
		config = SystemConfig(args.url, version, date, mapping, args.out, args.namespace)
		print(f'Compiling version [{version}] into [{args.out}]...')
		CompileAll(config, groups, args.tests)
	except (RuntimeError, OSError) as e:
		print(f'Error: {e}', file=sys.stderr)
		return 1
	return 0

if __name__ == '__main__':
	sys.exit(Main())
