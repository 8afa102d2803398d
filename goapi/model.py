from __future__ import annotations

from enum import Enum
from typing import List, Optional

from pydantic import BaseModel, ConfigDict


class SyntaxNode(BaseModel):
	"""Base of every Go type/expression node the renderer understands."""

	model_config = ConfigDict(frozen=True)


class Identifier(SyntaxNode):
	name: str


class QualifiedName(SyntaxNode):
	owner: SyntaxNode
	member: str


class PointerOf(SyntaxNode):
	inner: SyntaxNode


class ArrayOrSliceOf(SyntaxNode):
	"""Array/slice type, or a slice expression when ``base`` is set.

	As a type: ``[length]element`` (``length`` is None for slices).
	As an expression: ``base[low:high]`` or ``base[low:high:max]``.
	"""

	element: Optional[SyntaxNode] = None
	length: Optional[SyntaxNode] = None
	base: Optional[SyntaxNode] = None
	low: Optional[SyntaxNode] = None
	high: Optional[SyntaxNode] = None
	max: Optional[SyntaxNode] = None
	three_index: bool = False


class Ellipsis(SyntaxNode):
	element: Optional[SyntaxNode] = None


class Field(BaseModel):
	model_config = ConfigDict(frozen=True)

	names: List[str] = []
	type: Optional[SyntaxNode] = None


class FieldList(BaseModel):
	model_config = ConfigDict(frozen=True)

	fields: List[Field] = []


class FunctionType(SyntaxNode):
	params: FieldList = FieldList()
	results: Optional[FieldList] = None
	type_params: Optional[FieldList] = None


class MapType(SyntaxNode):
	key: SyntaxNode
	value: SyntaxNode


class ChanDir(str, Enum):
	SEND = "send"
	RECV = "recv"
	BOTH = "both"


class ChannelType(SyntaxNode):
	direction: ChanDir = ChanDir.BOTH
	element: SyntaxNode


class Literal(SyntaxNode):
	value: str


class StructType(SyntaxNode):
	pass


class InterfaceType(SyntaxNode):
	pass


class UnaryOp(SyntaxNode):
	op: str
	operand: SyntaxNode


class CompositeLiteral(SyntaxNode):
	type: Optional[SyntaxNode] = None


class Call(SyntaxNode):
	callee: SyntaxNode


class BinaryOp(SyntaxNode):
	left: SyntaxNode
	op: str
	right: SyntaxNode


class FunctionLiteral(SyntaxNode):
	type: FunctionType


class IndexOrGeneric(SyntaxNode):
	base: SyntaxNode
	args: List[SyntaxNode] = []


class Parenthesized(SyntaxNode):
	inner: SyntaxNode


class TypeAssertion(SyntaxNode):
	expr: SyntaxNode
	type: Optional[SyntaxNode] = None


class Unsupported(SyntaxNode):
	"""A grammar construct the parser does not map onto a node variant."""

	kind: str
	source: str


class Declaration(BaseModel):
	model_config = ConfigDict(frozen=True)

	name: str = ""


class FuncDecl(Declaration):
	receiver: Optional[FieldList] = None
	type_params: Optional[FieldList] = None
	params: FieldList = FieldList()
	results: Optional[FieldList] = None


class TypeDecl(Declaration):
	type: SyntaxNode


class ValueDecl(Declaration):
	kind: str = "var"
	names: List[str] = []
	values: List[SyntaxNode] = []
	type: Optional[SyntaxNode] = None


class GoFile(BaseModel):
	model_config = ConfigDict(frozen=True)

	path: str
	package: str
	decls: List[Declaration] = []


class ResolvedPackage(BaseModel):
	model_config = ConfigDict(frozen=True)

	import_path: str
	dir: str
	source: str = "primary"
