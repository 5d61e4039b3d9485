#!/usr/bin/env python3
"""Exceptions raised by the locale conversion pipelines."""


class XlsxLocalesError(Exception):
	"""Base class for conversion errors"""


class InvalidKeyError(XlsxLocalesError, ValueError):
	"""A flat key or tree segment that cannot be mapped to a path"""


class MissingKeyColumnError(XlsxLocalesError):
	"""The first sheet has no `key` header"""


class LocaleFileError(XlsxLocalesError):
	"""A locale file could not be read or parsed"""
