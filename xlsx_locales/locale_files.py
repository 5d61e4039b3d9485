#!/usr/bin/env python3
"""
Reading and writing per-language locale files.

Each language is stored twice: `<lang>.json` and a `<lang>.js` module that
exports the same object. Only the JSON files are read back by default; the
`.js` modules are read on request by extracting their object literal, never
by executing them.
"""

from __future__ import annotations

import json
import re
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from .errors import LocaleFileError
from .tree import Node, flatten, from_plain, to_plain

JSON_SUFFIX = ".json"
JS_SUFFIX = ".js"

_JS_EXPORT_PATTERNS = [
	# const en = {...};\nmodule.exports = en;
	re.compile(r"^\s*(?:const|let|var)\s+(?P<name>[A-Za-z_$][\w$]*)\s*=\s*(?P<body>\{.*\})\s*;?\s*(?:module\.exports|export\s+default)\s*=?\s*(?P=name)\s*;?\s*$", re.S),
	# module.exports = {...};
	re.compile(r"^\s*module\.exports\s*=\s*(?P<body>\{.*\})\s*;?\s*$", re.S),
	# export default {...};
	re.compile(r"^\s*export\s+default\s+(?P<body>\{.*\})\s*;?\s*$", re.S),
]


def js_variable_name(lang: str) -> str:
	name = re.sub(r"[^0-9A-Za-z]", "", lang)
	if not name or name[0].isdigit():
		name = f"locale_{name}"
	return name


def render_json(data: Dict[str, Any]) -> str:
	return json.dumps(data, ensure_ascii=False, indent=2)


def render_js_module(lang: str, data: Dict[str, Any]) -> str:
	var_name = js_variable_name(lang)
	return f"const {var_name} = {render_json(data)};\nmodule.exports = {var_name};\n"


def write_locale_files(out_dir: Path, lang: str, tree: Node) -> Tuple[Path, Path]:
	"""
	Write `<lang>.json` and `<lang>.js` for one language

	Args:
		out_dir (Path): Destination directory (must exist)
		lang (str): Language id, used for file names and the JS variable
		tree (Node): The language's locale tree

	Returns:
		Paths of the JSON file and the JS module
	"""
	data = to_plain(tree)
	json_file = out_dir / f"{lang}{JSON_SUFFIX}"
	with json_file.open("w", encoding="utf-8") as f:
		f.write(render_json(data))
	js_file = out_dir / f"{lang}{JS_SUFFIX}"
	with js_file.open("w", encoding="utf-8") as f:
		f.write(render_js_module(lang, data))
	return json_file, js_file


def write_locale_set(out_dir: Path, locales: Dict[str, Node]) -> List[Path]:
	out_dir.mkdir(parents=True, exist_ok=True)
	written: List[Path] = []
	for lang, tree in locales.items():
		written.extend(write_locale_files(out_dir, lang, tree))
		print(f"Generated: {lang}{JSON_SUFFIX}, {lang}{JS_SUFFIX}")
	return written


def parse_js_module(text: str) -> Any:
	for pattern in _JS_EXPORT_PATTERNS:
		m = pattern.match(text)
		if m:
			return json.loads(m.group("body"))
	raise LocaleFileError("No exported object literal found")


def load_locale_file(path: Path) -> Node:
	"""Parse one locale file into a tree. Raises LocaleFileError on any failure."""
	try:
		text = path.read_text(encoding="utf-8")
		if path.suffix == JS_SUFFIX:
			data = parse_js_module(text)
		else:
			data = json.loads(text)
	except LocaleFileError:
		raise
	except (OSError, UnicodeDecodeError, ValueError) as e:
		raise LocaleFileError(str(e)) from e
	if not isinstance(data, dict):
		raise LocaleFileError(f"Expected an object at the top level, got {type(data).__name__}")
	return from_plain(data)


def discover_locale_files(locales_dir: Path, allow_js: bool = False) -> Dict[str, Path]:
	"""
	Map language id -> locale file for a directory

	Files are visited in name order. A `<lang>.json` always takes precedence over
	`<lang>.js`; `.js` files are only considered when `allow_js` is set.

	Args:
		locales_dir (Path): Directory holding the locale files
		allow_js (bool): Also pick up `.js` modules

	Returns:
		Dict of language id to file path, in discovery order
	"""
	if not locales_dir.is_dir():
		raise FileNotFoundError(f"Locales directory not found: {locales_dir}")
	suffixes = (JSON_SUFFIX, JS_SUFFIX) if allow_js else (JSON_SUFFIX,)
	found: Dict[str, Path] = {}
	for path in sorted(locales_dir.iterdir(), key=lambda p: p.name):
		if not path.is_file() or path.suffix not in suffixes:
			continue
		lang = path.stem
		existing: Optional[Path] = found.get(lang)
		if existing is not None:
			if existing.suffix == JSON_SUFFIX:
				print(f"Skipping {path.name}: {existing.name} takes precedence")
				continue
			print(f"Skipping {existing.name}: {path.name} takes precedence")
		found[lang] = path
	return found


def read_flat_locales(locales_dir: Path, allow_js: bool = False) -> Dict[str, Dict[str, Any]]:
	"""
	Load every locale file of a directory as a flat key map per language.

	A file that cannot be read or parsed is reported on stderr and contributes
	an empty map; the remaining files are still processed.
	"""
	flat: Dict[str, Dict[str, Any]] = {}
	for lang, path in discover_locale_files(locales_dir, allow_js).items():
		try:
			flat[lang] = flatten(load_locale_file(path))
		except (LocaleFileError, ValueError) as e:
			print(f"Failed to read locale file: {path}: {e}", file=sys.stderr)
			flat[lang] = {}
	return flat
