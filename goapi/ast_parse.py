from __future__ import annotations

import logging
from typing import Iterator, List, Optional

import tree_sitter_go
from tree_sitter import Language, Node, Parser

from .errors import ParseError
from .model import (
	ArrayOrSliceOf,
	BinaryOp,
	Call,
	ChanDir,
	ChannelType,
	CompositeLiteral,
	Declaration,
	Ellipsis,
	Field,
	FieldList,
	FuncDecl,
	FunctionLiteral,
	FunctionType,
	GoFile,
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
	TypeDecl,
	UnaryOp,
	Unsupported,
	ValueDecl,
)


logger = logging.getLogger(__name__)

GO_LANGUAGE = Language(tree_sitter_go.language())

# nil, true, false and iota are predeclared identifiers, not literals
_IDENTIFIER_KINDS = {
	"identifier",
	"type_identifier",
	"field_identifier",
	"package_identifier",
	"blank_identifier",
	"nil",
	"true",
	"false",
	"iota",
}

_LITERAL_KINDS = {
	"int_literal",
	"float_literal",
	"imaginary_literal",
	"rune_literal",
	"raw_string_literal",
	"interpreted_string_literal",
}

_TOP_LEVEL_KINDS = {
	"package_clause",
	"import_declaration",
	"function_declaration",
	"method_declaration",
	"type_declaration",
	"var_declaration",
	"const_declaration",
	"comment",
}


def _text(node: Node) -> str:
	return node.text.decode("utf-8")


def _named(node: Node) -> List[Node]:
	return [c for c in node.named_children if c.type != "comment"]


def _tokens(node: Node) -> List[str]:
	return [c.type for c in node.children if not c.is_named]


def _names(node: Node) -> List[str]:
	# identifiers only: some grammar versions tag the commas as "name" too
	return [_text(n) for n in node.children_by_field_name("name") if n.type == "identifier"]


def _field(node: Node, name: str) -> Optional[SyntaxNode]:
	return convert(node.child_by_field_name(name))


def _chan_direction(node: Node) -> ChanDir:
	tokens = _tokens(node)
	if tokens and tokens[0] == "<-":
		return ChanDir.RECV
	if "<-" in tokens:
		return ChanDir.SEND
	return ChanDir.BOTH


def _union(node: Node) -> SyntaxNode:
	# A | B | C folds left, like the Go parser builds it
	terms = [convert(c) for c in _named(node)]
	result = terms[0]
	for term in terms[1:]:
		result = BinaryOp(left=result, op="|", right=term)
	return result


def _type_args(node: Node) -> List[SyntaxNode]:
	return [convert(c) for c in _named(node)]


def _field_list(node: Optional[Node]) -> Optional[FieldList]:
	"""Lower a parameter, result or type-parameter list into a FieldList."""
	if node is None:
		return None
	fields: List[Field] = []
	for child in _named(node):
		names = _names(child)
		if child.type == "variadic_parameter_declaration":
			fields.append(Field(names=names, type=Ellipsis(element=_field(child, "type"))))
		else:
			fields.append(Field(names=names, type=_field(child, "type")))
	return FieldList(fields=fields)


def _results(node: Optional[Node]) -> Optional[FieldList]:
	if node is None:
		return None
	if node.type == "parameter_list":
		return _field_list(node)
	return FieldList(fields=[Field(type=convert(node))])


def _function_type(node: Node) -> FunctionType:
	return FunctionType(
		params=_field_list(node.child_by_field_name("parameters")) or FieldList(),
		results=_results(node.child_by_field_name("result")),
	)


def convert(node: Optional[Node]) -> Optional[SyntaxNode]:
	"""Lower one tree-sitter type or expression node into a SyntaxNode."""
	if node is None:
		return None
	kind = node.type
	if kind in _IDENTIFIER_KINDS:
		return Identifier(name=_text(node))
	if kind in _LITERAL_KINDS:
		return Literal(value=_text(node))
	if kind == "qualified_type":
		return QualifiedName(owner=_field(node, "package"), member=_text(node.child_by_field_name("name")))
	if kind == "selector_expression":
		return QualifiedName(owner=_field(node, "operand"), member=_text(node.child_by_field_name("field")))
	if kind == "pointer_type":
		return PointerOf(inner=convert(_named(node)[0]))
	if kind == "array_type":
		return ArrayOrSliceOf(length=_field(node, "length"), element=_field(node, "element"))
	if kind == "implicit_length_array_type":
		return ArrayOrSliceOf(length=Ellipsis(), element=_field(node, "element"))
	if kind == "slice_type":
		return ArrayOrSliceOf(element=_field(node, "element"))
	if kind == "slice_expression":
		return ArrayOrSliceOf(
			base=_field(node, "operand"),
			low=_field(node, "start"),
			high=_field(node, "end"),
			max=_field(node, "capacity"),
			three_index=_tokens(node).count(":") == 2,
		)
	if kind == "map_type":
		return MapType(key=_field(node, "key"), value=_field(node, "value"))
	if kind == "channel_type":
		return ChannelType(direction=_chan_direction(node), element=_field(node, "value"))
	if kind == "function_type":
		return _function_type(node)
	if kind == "func_literal":
		return FunctionLiteral(type=_function_type(node))
	if kind == "struct_type":
		return StructType()
	if kind == "interface_type":
		return InterfaceType()
	if kind == "unary_expression":
		return UnaryOp(op=_text(node.child_by_field_name("operator")), operand=_field(node, "operand"))
	if kind == "negated_type":
		return UnaryOp(op="~", operand=convert(_named(node)[0]))
	if kind == "binary_expression":
		return BinaryOp(
			left=_field(node, "left"),
			op=_text(node.child_by_field_name("operator")),
			right=_field(node, "right"),
		)
	if kind in ("type_elem", "type_constraint"):
		return _union(node)
	if kind == "composite_literal":
		return CompositeLiteral(type=_field(node, "type"))
	if kind == "call_expression":
		callee = _field(node, "function")
		type_args = node.child_by_field_name("type_arguments")
		if type_args is not None:
			callee = IndexOrGeneric(base=callee, args=_type_args(type_args))
		return Call(callee=callee)
	if kind == "type_conversion_expression":
		return Call(callee=_field(node, "type"))
	if kind == "generic_type":
		return IndexOrGeneric(
			base=_field(node, "type"),
			args=_type_args(node.child_by_field_name("type_arguments")),
		)
	if kind == "index_expression":
		return IndexOrGeneric(base=_field(node, "operand"), args=[_field(node, "index")])
	if kind == "type_instantiation_expression":
		parts = [convert(c) for c in _named(node)]
		return IndexOrGeneric(base=parts[0], args=parts[1:])
	if kind in ("parenthesized_type", "parenthesized_expression"):
		return Parenthesized(inner=convert(_named(node)[0]))
	if kind == "type_assertion_expression":
		return TypeAssertion(expr=_field(node, "operand"), type=_field(node, "type"))
	return Unsupported(kind=kind, source=_text(node))


def _specs(node: Node, spec_kind: str) -> Iterator[Node]:
	for child in _named(node):
		if child.type == spec_kind:
			yield child
		elif child.type.endswith("_spec_list"):
			yield from _specs(child, spec_kind)


def _value_decls(node: Node, kind: str) -> Iterator[ValueDecl]:
	for spec in _specs(node, f"{kind}_spec"):
		value_list = next((v for v in spec.children_by_field_name("value") if v.is_named), None)
		yield ValueDecl(
			kind=kind,
			names=_names(spec),
			values=[convert(v) for v in _named(value_list)] if value_list is not None else [],
			type=_field(spec, "type"),
		)


def _declarations(root: Node) -> List[Declaration]:
	decls: List[Declaration] = []
	for child in _named(root):
		kind = child.type
		if kind == "function_declaration":
			decls.append(
				FuncDecl(
					name=_text(child.child_by_field_name("name")),
					type_params=_field_list(child.child_by_field_name("type_parameters")),
					params=_field_list(child.child_by_field_name("parameters")) or FieldList(),
					results=_results(child.child_by_field_name("result")),
				)
			)
		elif kind == "method_declaration":
			decls.append(
				FuncDecl(
					name=_text(child.child_by_field_name("name")),
					receiver=_field_list(child.child_by_field_name("receiver")),
					params=_field_list(child.child_by_field_name("parameters")) or FieldList(),
					results=_results(child.child_by_field_name("result")),
				)
			)
		elif kind == "type_declaration":
			for spec in _named(child):
				if spec.type in ("type_spec", "type_alias"):
					decls.append(TypeDecl(name=_text(spec.child_by_field_name("name")), type=_field(spec, "type")))
		elif kind == "var_declaration":
			decls.extend(_value_decls(child, "var"))
		elif kind == "const_declaration":
			decls.extend(_value_decls(child, "const"))
	return decls


def _package_name(root: Node) -> Optional[str]:
	for child in _named(root):
		if child.type == "package_clause":
			return _text(_named(child)[0])
	return None


def parse_go_file(path: str, source: bytes) -> GoFile:
	"""Parse Go source into a GoFile, raising ParseError on invalid input."""
	try:
		source.decode("utf-8")
	except UnicodeDecodeError as e:
		raise ParseError(path, f"illegal UTF-8 encoding: {e}") from e

	tree = Parser(GO_LANGUAGE).parse(source)
	root = tree.root_node
	if root.has_error:
		raise ParseError(path, "syntax error")

	package = _package_name(root)
	if package is None:
		raise ParseError(path, "missing package clause")
	for child in _named(root):
		if child.type not in _TOP_LEVEL_KINDS:
			raise ParseError(path, f"non-declaration statement outside function body: {child.type}")

	return GoFile(path=path, package=package, decls=_declarations(root))
