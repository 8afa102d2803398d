from __future__ import annotations


def is_exported(name: str) -> bool:
	"""Report whether ``name`` (optionally ``*``-prefixed) is an exported Go identifier."""
	if name.startswith("*"):
		name = name[1:]
	if not name:
		raise ValueError("cannot classify an empty identifier")
	return name[0].isupper()
