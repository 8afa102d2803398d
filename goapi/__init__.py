"""List the exported API of Go packages.

Modules:
- model.py: Syntax nodes, declarations and resolved packages.
- visibility.py: Exported-identifier check.
- ast_parse.py: tree-sitter parsing of Go files into model nodes.
- render.py: Canonical signature text for type and expression nodes.
- summarize.py: Per-declaration lines and per-file output blocks.
- fs_scan.py: Package directory listing and parsing.
- resolve.py: Import path to source directory lookup.
- config.py: Resolver configuration from the environment.
- errors.py: Exception hierarchy.
"""

__all__ = [
	"ast_parse",
	"config",
	"errors",
	"fs_scan",
	"model",
	"render",
	"resolve",
	"summarize",
	"visibility",
]
