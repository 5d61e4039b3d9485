import json
from pathlib import Path

import pytest
from openpyxl import Workbook, load_workbook


@pytest.fixture
def make_xlsx(tmp_path):
    """Write rows (header first) into the first sheet of a new workbook."""

    def _make(rows, name="locale.xlsx", sheet_title="Translations", extra_sheets=()):
        path = tmp_path / name
        wb = Workbook()
        ws = wb.active
        ws.title = sheet_title
        for row in rows:
            ws.append(list(row))
        for title, extra_rows in extra_sheets:
            extra = wb.create_sheet(title)
            for row in extra_rows:
                extra.append(list(row))
        wb.save(path)
        return path

    return _make


@pytest.fixture
def write_locale(tmp_path):
    def _write(lang, data, directory="locales", raw=None, suffix=".json"):
        locales_dir = tmp_path / directory
        locales_dir.mkdir(parents=True, exist_ok=True)
        path = locales_dir / f"{lang}{suffix}"
        path.write_text(raw if raw is not None else json.dumps(data, ensure_ascii=False), encoding="utf-8")
        return path

    return _write


def read_sheet(path: Path):
    """Return (sheet titles, rows of the first sheet) with blank cells as ""."""
    wb = load_workbook(path)
    try:
        ws = wb.worksheets[0]
        rows = [["" if v is None else v for v in row] for row in ws.iter_rows(values_only=True)]
        return wb.sheetnames, rows
    finally:
        wb.close()
