from goapi.model import (
	Field,
	FieldList,
	FuncDecl,
	GoFile,
	Identifier,
	Literal,
	PointerOf,
	StructType,
	TypeDecl,
	ValueDecl,
)
from goapi.summarize import (
	format_func_decl,
	format_type_decl,
	format_value_decl,
	summarize_file,
)


def receiver(*names, typ):
	return FieldList(fields=[Field(names=list(names), type=typ)])


def test_plain_function_visibility():
	assert format_func_decl(FuncDecl(name="Run")) == "func Run()"
	assert format_func_decl(FuncDecl(name="run")) == ""


def test_receiver_gating():
	hidden = FuncDecl(name="Foo", receiver=receiver("r", typ=Identifier(name="bar")))
	assert format_func_decl(hidden) == ""
	shown = FuncDecl(name="Foo", receiver=receiver("r", typ=PointerOf(inner=Identifier(name="Bar"))))
	assert format_func_decl(shown) == "func (r *Bar) Foo()"
	private_method = FuncDecl(name="foo", receiver=receiver("r", typ=Identifier(name="Bar")))
	assert format_func_decl(private_method) == ""


def test_unnamed_receiver_is_excluded():
	decl = FuncDecl(name="Len", receiver=receiver(typ=Identifier(name="List")))
	assert format_func_decl(decl) == ""


def test_strange_receivers_become_diagnostics():
	two_fields = FieldList(
		fields=[
			Field(names=["a"], type=Identifier(name="A")),
			Field(names=["b"], type=Identifier(name="B")),
		]
	)
	assert format_func_decl(FuncDecl(name="Foo", receiver=two_fields)).startswith("strange receiver for Foo: ")
	many_names = FuncDecl(name="Foo", receiver=receiver("a", "b", typ=Identifier(name="A")))
	assert format_func_decl(many_names).startswith("strange receiver field for Foo: ")


def test_type_params_and_results():
	decl = FuncDecl(
		name="Keys",
		type_params=FieldList(fields=[Field(names=["K", "V"], type=Identifier(name="any"))]),
		params=FieldList(fields=[Field(names=["m"], type=Identifier(name="M"))]),
		results=FieldList(fields=[Field(type=Identifier(name="error"))]),
	)
	assert format_func_decl(decl) == "func Keys[K, V any](m M) error"


def test_type_decl():
	assert format_type_decl(TypeDecl(name="Config", type=StructType())) == "type Config struct{}"
	assert format_type_decl(TypeDecl(name="config", type=StructType())) == ""


def test_values_pair_positionally():
	decl = ValueDecl(
		kind="const",
		names=["A", "b", "C"],
		values=[Literal(value="1"), Literal(value="2")],
	)
	assert format_value_decl(decl) == "const A = 1\nconst C "


def test_values_with_type():
	decl = ValueDecl(kind="var", names=["X"], type=Identifier(name="int"), values=[Literal(value="5")])
	assert format_value_decl(decl) == "var X int = 5"
	assert format_value_decl(ValueDecl(kind="var", names=["x"], type=Identifier(name="int"))) == ""


def test_file_without_exports_is_silent():
	f = GoFile(
		path="/src/pkg/internal.go",
		package="pkg",
		decls=[FuncDecl(name="helper"), TypeDecl(name="state", type=StructType())],
	)
	assert summarize_file(f) == []


def test_file_block_layout():
	f = GoFile(
		path="/src/pkg/api.go",
		package="pkg",
		decls=[FuncDecl(name="helper"), FuncDecl(name="Serve"), TypeDecl(name="Server", type=StructType())],
	)
	assert summarize_file(f) == ["// api.go:", "func Serve()", "type Server struct{}", ""]
