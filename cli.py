from __future__ import annotations

import argparse
import logging
import os
import sys
from typing import List, Optional

import uvicorn

from goapi.config import LOG_LEVEL_ENV, ResolverConfig
from goapi.errors import GoExportsError
from goapi.resolve import PackageResolver
from goapi.summarize import summarize_package


logger = logging.getLogger("goexports")


def setup_logging() -> None:
	level = os.environ.get(LOG_LEVEL_ENV, "WARNING").upper()
	logging.basicConfig(
		level=getattr(logging, level, logging.WARNING),
		format="%(levelname)s %(name)s: %(message)s",
		handlers=[logging.StreamHandler(sys.stderr)],
	)


def run(import_paths: List[str], resolver: PackageResolver) -> None:
	"""Print the exported API of each package in argument order.

	Each package is printed as soon as it is done, so output for earlier
	arguments survives a fatal error on a later one.
	"""
	for import_path in import_paths:
		pkg = resolver.resolve(import_path)
		for line in summarize_package(pkg):
			print(line)


def main(argv: Optional[List[str]] = None) -> int:
	parser = argparse.ArgumentParser(
		prog="goexports",
		description="List the exported API of Go packages, one declaration per line.",
	)
	parser.add_argument("import_paths", nargs="*", metavar="IMPORT_PATH", help="Go package import path")
	args = parser.parse_args(argv)
	setup_logging()

	try:
		cwd = os.getcwd()
	except OSError as e:
		logger.error("cannot determine working directory: %s", e)
		return 1

	resolver = PackageResolver(ResolverConfig.from_env(), cwd)
	try:
		run(args.import_paths, resolver)
	except GoExportsError as e:
		logger.error("%s", e)
		return 1
	return 0


def serve(argv: Optional[List[str]] = None) -> None:
	parser = argparse.ArgumentParser(prog="goexports-serve")
	parser.add_argument("--host", default="127.0.0.1")
	parser.add_argument("--port", type=int, default=8000)
	parser.add_argument("--reload", action="store_true")
	args = parser.parse_args(argv)
	setup_logging()
	uvicorn.run("api:app", host=args.host, port=args.port, reload=args.reload)


def entrypoint() -> None:
	sys.exit(main())


if __name__ == "__main__":
	entrypoint()
