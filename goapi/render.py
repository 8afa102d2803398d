from __future__ import annotations

from typing import List, Optional

from .model import (
	ArrayOrSliceOf,
	BinaryOp,
	Call,
	ChanDir,
	ChannelType,
	CompositeLiteral,
	Ellipsis,
	FieldList,
	FunctionLiteral,
	FunctionType,
	Identifier,
	IndexOrGeneric,
	InterfaceType,
	Literal,
	MapType,
	Parenthesized,
	PointerOf,
	QualifiedName,
	StructType,
	SyntaxNode,
	TypeAssertion,
	UnaryOp,
	Unsupported,
)


_CHAN_TOKENS = {
	ChanDir.RECV: "<-chan",
	ChanDir.SEND: "chan<-",
	ChanDir.BOTH: "chan",
}


def _render_slice(node: ArrayOrSliceOf) -> str:
	parts: List[str] = [render(node.base), "["]
	if node.low is not None:
		parts.append(render(node.low))
	parts.append(":")
	if node.high is not None:
		parts.append(render(node.high))
	if node.three_index:
		parts.append(":")
	if node.max is not None:
		parts.append(render(node.max))
	parts.append("]")
	return "".join(parts)


def render(node: Optional[SyntaxNode]) -> str:
	"""Render a type or expression node as canonical Go signature text."""
	if node is None:
		return ""
	if isinstance(node, Identifier):
		return node.name
	if isinstance(node, QualifiedName):
		return f"{render(node.owner)}.{node.member}"
	if isinstance(node, PointerOf):
		return f"*{render(node.inner)}"
	if isinstance(node, ArrayOrSliceOf):
		if node.base is not None:
			return _render_slice(node)
		return f"[{render(node.length)}]{render(node.element)}"
	if isinstance(node, Ellipsis):
		return "..." + render(node.element)
	if isinstance(node, FunctionType):
		return f"func({render_fields(node.params)}){render_results(node.results)}"
	if isinstance(node, MapType):
		return f"map[{render(node.key)}]{render(node.value)}"
	if isinstance(node, ChannelType):
		return f"{_CHAN_TOKENS[node.direction]} {render(node.element)}"
	if isinstance(node, Literal):
		return node.value
	if isinstance(node, StructType):
		return "struct{}"
	if isinstance(node, InterfaceType):
		return "interface{}"
	if isinstance(node, UnaryOp):
		return node.op + render(node.operand)
	if isinstance(node, CompositeLiteral):
		# element values are dropped
		return render(node.type) + "{}"
	if isinstance(node, Call):
		return render(node.callee) + "()"
	if isinstance(node, BinaryOp):
		return f"{render(node.left)} {node.op} {render(node.right)}"
	if isinstance(node, FunctionLiteral):
		return render(node.type)
	if isinstance(node, IndexOrGeneric):
		if len(node.args) == 1:
			return f"{render(node.base)}[{render(node.args[0])}]"
		return f"{render(node.base)}[{', '.join(render(a) for a in node.args)}]"
	if isinstance(node, Parenthesized):
		return f"({render(node.inner)})"
	if isinstance(node, TypeAssertion):
		return f"{render(node.expr)}.({render(node.type)})"
	if isinstance(node, Unsupported):
		return f"unsupported type {node.kind} {node.source!r}"
	return f"unsupported type {node!r}"


def render_fields(fields: Optional[FieldList]) -> str:
	if fields is None:
		return ""
	rendered: List[str] = []
	for field in fields.fields:
		names = ", ".join(field.names) + " " if field.names else ""
		rendered.append(names + render(field.type))
	return ", ".join(rendered)


def render_results(results: Optional[FieldList]) -> str:
	"""Render a result clause: ``""``, `` T`` or `` (a T, b U)``."""
	if results is None:
		return ""
	fields = results.fields
	need_parens = len(fields) > 1 or (len(fields) == 1 and len(fields[0].names) > 0)
	if need_parens:
		return f" ({render_fields(results)})"
	return " " + render_fields(results)
