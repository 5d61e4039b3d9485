#!/usr/bin/env python3
"""
Workbook access through a local Excel installation using xlwings
Reads the first sheet or writes a single sheet, mirroring OpenpyxlWorkbook
"""

import xlwings as xw
from typing import Any, List, Optional, Sequence
from pathlib import Path


class XlwingsWorkbook:
	"""Read and write spreadsheets through Excel using xlwings"""

	def __init__(self, excel_file_path: str, create: bool = False):
		"""
		Initialize with an Excel file path

		Args:
			excel_file_path (str): Path to the Excel file
			create (bool): Start a new workbook instead of opening an existing one
		"""
		self.excel_file_path = Path(excel_file_path)
		self.create = create
		self.app = None
		self.workbook = None

		if not create and not self.excel_file_path.exists():
			raise FileNotFoundError(f"Excel file not found: {excel_file_path}")

	def __enter__(self):
		"""Context manager entry"""
		self.open_workbook()
		return self

	def __exit__(self, exc_type, exc_val, exc_tb):
		"""Context manager exit"""
		self.close_workbook()

	def open_workbook(self):
		"""Start a hidden Excel instance and open (or add) the workbook"""
		self.app = xw.App(visible=False, add_book=False)
		self.app.display_alerts = False
		try:
			if self.create:
				self.workbook = self.app.books.add()
			else:
				self.workbook = self.app.books.open(str(self.excel_file_path.resolve()))
		except Exception:
			self.app.quit()
			self.app = None
			raise

	def close_workbook(self):
		"""Close the workbook and Excel application"""
		try:
			if self.workbook:
				self.workbook.close()
		finally:
			if self.app:
				self.app.quit()
			self.workbook = None
			self.app = None

	def read_rows(self) -> List[List[Any]]:
		"""
		Read the used range of the first sheet

		Returns:
			List of rows, header row first
		"""
		sheet = self.workbook.sheets[0]
		values = sheet.used_range.options(ndim=2).value
		return [list(row) for row in (values or [])]

	def write_rows(self, sheet_name: str, rows: Sequence[Sequence[Any]], column_widths: Optional[Sequence[int]] = None) -> None:
		"""
		Write rows to the first sheet, rename it and save the workbook

		Args:
			sheet_name (str): Title for the sheet
			rows: Header row followed by data rows
			column_widths: Optional width per column, in characters
		"""
		# books.add() creates as many sheets as Excel is configured for
		for extra in list(self.workbook.sheets)[1:]:
			extra.delete()
		sheet = self.workbook.sheets[0]
		sheet.name = sheet_name
		if rows:
			target = sheet.range("A1").resize(len(rows), max(len(row) for row in rows))
			# text format keeps "=..." translations from becoming formulas
			target.number_format = "@"
			target.value = [list(row) for row in rows]
		if column_widths:
			for idx, width in enumerate(column_widths, start=1):
				sheet.range((1, idx)).column_width = width
		self.excel_file_path.parent.mkdir(parents=True, exist_ok=True)
		self.workbook.save(str(self.excel_file_path.resolve()))
