#!/usr/bin/env python3
"""
The two conversion pipelines:

- xlsx_to_locales: first sheet of locale.xlsx -> <lang>.json / <lang>.js
- locales_to_xlsx: <lang>.json (and optionally <lang>.js) -> single-sheet locale.xlsx

Sheet layout: a `key` column holding flat keys plus one column per language id.
"""

from __future__ import annotations

import json
from datetime import date, datetime, time, timedelta
from pathlib import Path
from typing import Any, Dict, List, Sequence, Tuple

from .errors import MissingKeyColumnError
from .locale_files import read_flat_locales, write_locale_set
from .openpyxl_workbook import OpenpyxlWorkbook
from .tree import Node, unflatten

KEY_COLUMN = "key"
SHEET_NAME = "i18n"
DEFAULT_XLSX = "locale.xlsx"
DEFAULT_LOCALES_DIR = "locales"

KEY_COLUMN_WIDTH = 48
LANG_COLUMN_WIDTH = 32


def _json_safe(value: Any) -> Any:
	if value is None:
		return ""
	if isinstance(value, (datetime, date, time)):
		return value.isoformat()
	if isinstance(value, timedelta):
		return str(value)
	return value


def _is_blank(value: Any) -> bool:
	return value is None or (isinstance(value, str) and value.strip() == "")


def rows_to_records(rows: Sequence[Sequence[Any]]) -> Tuple[List[str], List[Dict[str, Any]]]:
	"""
	Turn raw sheet rows into header names and one dict per data row

	Args:
		rows: Sheet values, header row first

	Returns:
		(headers, records); blank cells become "", dates and times ISO strings,
		and fully blank rows are dropped
	"""
	if not rows:
		return [], []
	columns: List[Tuple[int, str]] = []
	for idx, cell in enumerate(rows[0]):
		if _is_blank(cell):
			continue
		columns.append((idx, str(cell).strip()))
	records: List[Dict[str, Any]] = []
	for row in rows[1:]:
		if all(_is_blank(v) for v in row):
			continue
		record: Dict[str, Any] = {}
		for idx, name in columns:
			value = row[idx] if idx < len(row) else None
			record[name] = _json_safe(value)
		records.append(record)
	return [name for _, name in columns], records


def records_to_locale_set(headers: Sequence[str], records: Sequence[Dict[str, Any]]) -> Dict[str, Node]:
	"""
	Build one locale tree per language column.

	Rows without a key are skipped. Every other column of a kept row is a
	language id whose cell value is stored under the row's key.
	"""
	if KEY_COLUMN not in headers:
		raise MissingKeyColumnError(f"No '{KEY_COLUMN}' column in the header row: {list(headers)}")
	pairs_by_lang: Dict[str, List[Tuple[str, Any]]] = {}
	for record in records:
		key = record.get(KEY_COLUMN)
		if _is_blank(key):
			continue
		key = str(key).strip()
		for lang, value in record.items():
			if lang == KEY_COLUMN:
				continue
			pairs_by_lang.setdefault(lang, []).append((key, value))
	return {lang: unflatten(pairs) for lang, pairs in pairs_by_lang.items()}


def xlsx_to_locales(xlsx_path: Path, locales_dir: Path, workbook_cls=OpenpyxlWorkbook) -> Dict[str, Node]:
	with workbook_cls(str(xlsx_path)) as workbook:
		rows = workbook.read_rows()
	headers, records = rows_to_records(rows)
	locales = records_to_locale_set(headers, records)
	write_locale_set(Path(locales_dir), locales)
	return locales


def cell_value(value: Any) -> Any:
	if value is None:
		return ""
	if isinstance(value, (list, dict)):
		return json.dumps(value, ensure_ascii=False)
	return value


def build_rows(flat_locales: Dict[str, Dict[str, Any]]) -> List[Dict[str, Any]]:
	"""
	Merge per-language flat maps into one row per distinct key

	Args:
		flat_locales: language id -> {flat key: value}, in scan order

	Returns:
		Rows ordered by first appearance of each key; missing values are ""
	"""
	keys: Dict[str, None] = {}
	for flat in flat_locales.values():
		for key in flat:
			keys.setdefault(key, None)
	rows: List[Dict[str, Any]] = []
	for key in keys:
		row: Dict[str, Any] = {KEY_COLUMN: key}
		for lang, flat in flat_locales.items():
			row[lang] = cell_value(flat.get(key))
		rows.append(row)
	return rows


def is_incomplete(row: Dict[str, Any]) -> bool:
	return any(value == "" for column, value in row.items() if column != KEY_COLUMN)


def sort_incomplete_first(rows: List[Dict[str, Any]]) -> List[Dict[str, Any]]:
	# sorted() is stable, so each bucket keeps its order
	return sorted(rows, key=lambda row: 0 if is_incomplete(row) else 1)


def locales_to_xlsx(locales_dir: Path, xlsx_path: Path, workbook_cls=OpenpyxlWorkbook, allow_js: bool = False) -> List[Dict[str, Any]]:
	flat_locales = read_flat_locales(Path(locales_dir), allow_js=allow_js)
	langs = list(flat_locales)
	rows = sort_incomplete_first(build_rows(flat_locales))
	columns = [KEY_COLUMN] + langs
	table: List[List[Any]] = [columns]
	table.extend([row[c] for c in columns] for row in rows)
	widths = [KEY_COLUMN_WIDTH] + [LANG_COLUMN_WIDTH] * len(langs)
	with workbook_cls(str(xlsx_path), create=True) as workbook:
		workbook.write_rows(SHEET_NAME, table, column_widths=widths)
	print(f"Export completed: {xlsx_path}")
	return rows
