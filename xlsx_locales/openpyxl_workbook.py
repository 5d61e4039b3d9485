#!/usr/bin/env python3
"""
OpenPyXL-based workbook access for cross-platform environments without local Excel.
Provides the same API as XlwingsWorkbook.
Limitations:
- Formulas are not evaluated; cached values are read (data_only=True)
- Blank cells and empty strings are indistinguishable once saved
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, List, Optional, Sequence

from openpyxl import Workbook, load_workbook
from openpyxl.utils import get_column_letter
from openpyxl.worksheet.worksheet import Worksheet


class OpenpyxlWorkbook:
	"""Read the first sheet of, or write a single sheet to, an .xlsx file using openpyxl."""

	def __init__(self, excel_file_path: str, create: bool = False):
		self.excel_file_path = Path(excel_file_path)
		self.create = create
		self.workbook = None
		if not create and not self.excel_file_path.exists():
			raise FileNotFoundError(f"Excel file not found: {excel_file_path}")

	def __enter__(self):
		self.open_workbook()
		return self

	def __exit__(self, exc_type, exc_val, exc_tb):
		self.close_workbook()

	def open_workbook(self) -> None:
		if self.create:
			self.workbook = Workbook()
		else:
			# data_only=True returns cached values instead of formula text
			self.workbook = load_workbook(filename=str(self.excel_file_path), data_only=True, read_only=True)

	def close_workbook(self) -> None:
		if self.workbook is not None and not self.create:
			self.workbook.close()
		self.workbook = None

	def _first_sheet(self) -> Worksheet:
		if not self.workbook.worksheets:
			raise ValueError(f"Workbook has no sheets: {self.excel_file_path}")
		return self.workbook.worksheets[0]

	def read_rows(self) -> List[List[Any]]:
		"""Values of the first sheet, by position, one list per row (header row included)."""
		ws = self._first_sheet()
		rows: List[List[Any]] = []
		for values in ws.iter_rows(values_only=True):
			rows.append(list(values))
		return rows

	def write_rows(self, sheet_name: str, rows: Sequence[Sequence[Any]], column_widths: Optional[Sequence[int]] = None) -> None:
		ws = self.workbook.active
		ws.title = sheet_name
		for row in rows:
			ws.append(list(row))
			for cell in ws[ws.max_row]:
				# append() turns "=..." strings into formulas
				if isinstance(cell.value, str) and cell.value.startswith("="):
					cell.data_type = "s"
		if column_widths:
			for idx, width in enumerate(column_widths, start=1):
				ws.column_dimensions[get_column_letter(idx)].width = width
		ws.freeze_panes = "B2"
		self.excel_file_path.parent.mkdir(parents=True, exist_ok=True)
		self.workbook.save(str(self.excel_file_path))
