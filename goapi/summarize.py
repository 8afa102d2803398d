from __future__ import annotations

import os
from typing import List

from .fs_scan import scan_package
from .model import Declaration, FuncDecl, GoFile, ResolvedPackage, TypeDecl, ValueDecl
from .render import render, render_fields, render_results
from .visibility import is_exported


def format_func_decl(decl: FuncDecl) -> str:
	"""Format an exported function or method as one line, or return ""."""
	line = "func "
	if decl.receiver is not None:
		if len(decl.receiver.fields) != 1:
			return f"strange receiver for {decl.name}: {decl.receiver!r}"
		field = decl.receiver.fields[0]
		if not (is_exported(render(field.type)) and is_exported(decl.name)):
			return ""
		if not field.names:
			# method specification inside an interface
			return ""
		if len(field.names) != 1:
			return f"strange receiver field for {decl.name}: {field!r}"
		line += f"({field.names[0]} {render(field.type)}) "
	elif not is_exported(decl.name):
		return ""

	line += decl.name
	if decl.type_params is not None:
		line += f"[{render_fields(decl.type_params)}]"
	line += f"({render_fields(decl.params)})"
	line += render_results(decl.results)
	return line


def format_type_decl(decl: TypeDecl) -> str:
	if not is_exported(decl.name):
		return ""
	return f"type {decl.name} {render(decl.type)}"


def format_value_decl(decl: ValueDecl) -> str:
	typ = render(decl.type)
	if typ:
		typ += " "
	lines: List[str] = []
	for i, name in enumerate(decl.names):
		if not is_exported(name):
			continue
		line = f"{decl.kind} {name} {typ}"
		if i < len(decl.values):
			line += "= " + render(decl.values[i])
		lines.append(line)
	return "\n".join(lines)


def format_declaration(decl: Declaration) -> str:
	if isinstance(decl, FuncDecl):
		return format_func_decl(decl)
	if isinstance(decl, TypeDecl):
		return format_type_decl(decl)
	if isinstance(decl, ValueDecl):
		return format_value_decl(decl)
	return ""


def summarize_file(f: GoFile) -> List[str]:
	"""Return the output block for one file: header, declarations, blank line.

	Files without exported declarations produce no lines at all.
	"""
	lines = [s for s in (format_declaration(d) for d in f.decls) if s]
	if not lines:
		return []
	return [f"// {os.path.basename(f.path)}:", *lines, ""]


def summarize_package(pkg: ResolvedPackage) -> List[str]:
	"""Output lines for one resolved package, files in name order."""
	lines: List[str] = []
	if pkg.source == "fallback":
		lines.append(f"// `go list` failed, fallback to search GOMODCACHE: {pkg.dir}")
	for f in scan_package(pkg.dir):
		lines.extend(summarize_file(f))
	return lines
