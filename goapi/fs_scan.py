from __future__ import annotations

import logging
import os
from typing import List

from .ast_parse import parse_go_file
from .errors import ParseError, ScanError
from .model import GoFile


logger = logging.getLogger(__name__)

SOURCE_EXT = ".go"
TEST_SUFFIX = "_test.go"


def is_go_source(filename: str) -> bool:
	return filename.endswith(SOURCE_EXT) and not filename.endswith(TEST_SUFFIX)


def list_sources(pkg_dir: str) -> List[str]:
	"""Return the package's non-test Go files, sorted by file name."""
	try:
		entries = sorted(os.scandir(pkg_dir), key=lambda e: e.name)
	except OSError as e:
		raise ScanError(f"cannot read package directory {pkg_dir}: {e}") from e
	return [e.path for e in entries if not e.is_dir() and is_go_source(e.name)]


def scan_package(pkg_dir: str) -> List[GoFile]:
	files: List[GoFile] = []
	for path in list_sources(pkg_dir):
		try:
			with open(path, "rb") as fh:
				source = fh.read()
			gofile = parse_go_file(path, source)
		except (OSError, ParseError) as e:
			logger.debug("skipping %s: %s", path, e)
			continue
		if gofile.package == "main":
			logger.debug("skipping %s: main package", path)
			continue
		files.append(gofile)
	return files
