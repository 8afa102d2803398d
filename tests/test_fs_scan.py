import os

import pytest

from goapi.errors import ScanError
from goapi.fs_scan import is_go_source, list_sources, scan_package


def test_source_filter():
	assert is_go_source("server.go")
	assert not is_go_source("server_test.go")
	assert not is_go_source("README.md")


def test_list_sources_sorted_and_filtered(tmp_path, write_go):
	for name in ("b.go", "a.go", "a_test.go"):
		write_go(name, "package pkg\n")
	(tmp_path / "pkg" / "notes.txt").write_text("")
	(tmp_path / "pkg" / "dir.go").mkdir()
	found = [os.path.basename(p) for p in list_sources(str(tmp_path / "pkg"))]
	assert found == ["a.go", "b.go"]


def test_unreadable_package_dir(tmp_path):
	with pytest.raises(ScanError):
		list_sources(str(tmp_path / "missing"))


def test_broken_and_main_files_are_skipped(tmp_path, write_go):
	write_go("broken.go", "package pkg\n\nfunc Oops( {\n")
	write_go("cmd.go", "package main\n\nfunc Exported() {}\n")
	write_go("good.go", "package pkg\n\nfunc Good() error { return nil }\n")
	files = scan_package(str(tmp_path / "pkg"))
	assert [os.path.basename(f.path) for f in files] == ["good.go"]
