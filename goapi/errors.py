from __future__ import annotations


class GoExportsError(Exception):
	"""Base class for failures that end a goexports run."""


class PackageNotFoundError(GoExportsError):
	def __init__(self, import_path: str):
		super().__init__(f"module '{import_path}' not found")
		self.import_path = import_path


class ResolutionError(GoExportsError):
	"""A module cache directory could not be listed during fallback search."""


class ScanError(GoExportsError):
	"""The resolved package directory could not be listed."""


class ParseError(ValueError):
	"""A single Go file could not be parsed; the scanner skips it."""

	def __init__(self, path: str, reason: str):
		super().__init__(f"{path}: {reason}")
		self.path = path
		self.reason = reason
