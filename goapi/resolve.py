from __future__ import annotations

import logging
import os
import subprocess
from typing import Optional

from .config import ResolverConfig
from .errors import PackageNotFoundError, ResolutionError
from .model import ResolvedPackage


logger = logging.getLogger(__name__)


def find_package_dir(import_path: str, from_dir: str, go_binary: str = "go") -> Optional[str]:
	"""Ask the Go toolchain where ``import_path`` lives, without building it."""
	try:
		proc = subprocess.run(
			[go_binary, "list", "-find", "-f", "{{.Dir}}", import_path],
			cwd=from_dir,
			capture_output=True,
			text=True,
			check=False,
		)
	except OSError as e:
		logger.debug("go list unavailable for %s: %s", import_path, e)
		return None
	if proc.returncode != 0:
		logger.debug("go list failed for %s: %s", import_path, proc.stderr.strip())
		return None
	pkg_dir = proc.stdout.strip()
	return pkg_dir or None


def search_mod_cache(import_path: str, mod_cache: Optional[str]) -> Optional[str]:
	"""Walk the module cache one import-path segment at a time.

	Each segment matches a child directory named exactly like it or
	versioned as ``<segment>@<version>``; the first match in name order wins.
	"""
	if not mod_cache:
		return None
	current = mod_cache
	for segment in import_path.split("/"):
		try:
			children = sorted(os.scandir(current), key=lambda e: e.name)
		except OSError as e:
			raise ResolutionError(f"cannot read module cache directory {current}: {e}") from e
		match = None
		for entry in children:
			if entry.is_dir() and (entry.name == segment or entry.name.startswith(segment + "@")):
				match = entry.name
				break
		if match is None:
			return None
		current = os.path.join(current, match)
	return current


class PackageResolver:
	def __init__(self, config: ResolverConfig, cwd: str):
		self.config = config
		self.cwd = cwd

	def resolve(self, import_path: str) -> ResolvedPackage:
		pkg_dir = find_package_dir(import_path, self.cwd, self.config.go_binary)
		if pkg_dir:
			logger.info("resolved %s to %s", import_path, pkg_dir)
			return ResolvedPackage(import_path=import_path, dir=pkg_dir, source="primary")

		pkg_dir = search_mod_cache(import_path, self.config.mod_cache)
		if not pkg_dir:
			raise PackageNotFoundError(import_path)
		logger.info("resolved %s to %s via module cache", import_path, pkg_dir)
		return ResolvedPackage(import_path=import_path, dir=pkg_dir, source="fallback")
