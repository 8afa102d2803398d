from textwrap import dedent

import pytest


@pytest.fixture
def write_go(tmp_path):
	"""Write dedented Go source into a package directory under tmp_path."""

	def _write(name, code, pkg_dir="pkg"):
		d = tmp_path / pkg_dir
		d.mkdir(parents=True, exist_ok=True)
		p = d / name
		p.write_text(dedent(code).lstrip())
		return p

	return _write
