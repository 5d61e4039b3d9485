#!/usr/bin/env python3
"""
Command-line interface for the xlsx_locales package.
Usage:
  python -m xlsx_locales --to-js [options]      locale.xlsx -> locales/<lang>.json, <lang>.js
  python -m xlsx_locales --to-excel [options]   locales/<lang>.json -> locale.xlsx
"""

import argparse
import platform
import sys
from pathlib import Path
from typing import List, Optional

from .convert import DEFAULT_LOCALES_DIR, DEFAULT_XLSX, locales_to_xlsx, xlsx_to_locales
from .openpyxl_workbook import OpenpyxlWorkbook


def build_parser() -> argparse.ArgumentParser:
	parser = argparse.ArgumentParser(description='Convert between a localization spreadsheet and per-language locale files')
	parser.add_argument('--to-js', action='store_true', help='Spreadsheet -> locale files (.json and .js per language)')
	parser.add_argument('--to-excel', action='store_true', help='Locale files -> spreadsheet')
	parser.add_argument('--xlsx', default=DEFAULT_XLSX, help=f'Spreadsheet path (default: {DEFAULT_XLSX})')
	parser.add_argument('--locales-dir', default=DEFAULT_LOCALES_DIR, help=f'Locale files directory (default: {DEFAULT_LOCALES_DIR})')
	parser.add_argument('--engine', choices=['xlwings', 'openpyxl'], help='Backend engine to use')
	parser.add_argument('--allow-js', action='store_true', help='Also read <lang>.js modules when exporting to the spreadsheet')
	return parser


def workbook_class(engine: Optional[str]):
	# Choose engine: default xlwings on Windows, openpyxl elsewhere
	default_engine = 'xlwings' if platform.system().lower().startswith('win') else 'openpyxl'
	if (engine or default_engine) == 'xlwings':
		from .xlwings_workbook import XlwingsWorkbook
		return XlwingsWorkbook
	return OpenpyxlWorkbook


def main(argv: Optional[List[str]] = None) -> int:
	parser = build_parser()
	try:
		args, _unknown = parser.parse_known_args(argv)
	except SystemExit as e:
		# argparse exits with 2 on bad option values; --help exits with 0
		return 0 if e.code in (0, None) else 1

	if args.to_js == args.to_excel:
		print('Use exactly one of --to-js or --to-excel', file=sys.stderr)
		parser.print_usage(sys.stderr)
		return 1

	try:
		workbook_cls = workbook_class(args.engine)
		if args.to_js:
			xlsx_to_locales(Path(args.xlsx), Path(args.locales_dir), workbook_cls=workbook_cls)
		else:
			locales_to_xlsx(Path(args.locales_dir), Path(args.xlsx), workbook_cls=workbook_cls, allow_js=args.allow_js)
	except Exception as e:
		print(f"Error: {e}", file=sys.stderr)
		return 1
	return 0


if __name__ == "__main__":
	sys.exit(main())
