#!/usr/bin/env python3
# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Debug printer rendering."""

from sigdoc.core.identifiers import Identifier
from sigdoc.core.paths import Dot, Fragment, RIdent, Resolved, Root
from sigdoc.loader.printer import format_equation, format_module_type, format_signature, format_text, format_type
from sigdoc.model import signature as S
from sigdoc.model import types as T
from sigdoc.model.documentation import (
	EMPTY_DOC,
	Code,
	DocBody,
	DocComment,
	DocOk,
	Newline,
	Raw,
	Reference,
	StopComment,
	Style,
	StyleKind,
)
from sigdoc.test_support import IdentFactory, abstract_type, arrow, constr, module_sig, read, sig, types, val

_ROOT = Identifier.root_of("test", "Test")
_INT = T.ConstrType(Resolved(RIdent(Identifier.core_type("int"))))
_STRING = T.ConstrType(Resolved(RIdent(Identifier.core_type("string"))))
_A = T.VarType("a")
_B = T.VarType("b")


def test_arrows_and_labels():
	ty = T.ArrowType(T.NamedLabel("x"), _INT, T.ArrowType(T.OptionalLabel("y"), _INT, _STRING))
	assert format_type(ty) == "x:int -> ?y:int -> string"
	assert format_type(T.ArrowType(None, T.ArrowType(None, _A, _B), _A)) == "('a -> 'b) -> 'a"


def test_tuples_and_constructors():
	assert format_type(T.TupleType([_INT, T.ArrowType(None, _A, _B)])) == "int * ('a -> 'b)"
	assert format_type(T.ConstrType(Resolved(RIdent(Identifier.core_type("list"))), [_A])) == "'a list"
	assert format_type(T.ConstrType(Dot(Root("Stdlib"), "result"), [_INT, _A])) == "(int, 'a) Stdlib.result"


def test_polymorphic_variants():
	elements = [T.VariantConstructor("A", True), T.VariantConstructor("B", False, [_INT])]
	assert format_type(T.PolyVariantType(T.VariantKind.FIXED, elements)) == "[ `A | `B of int ]"
	assert format_type(T.PolyVariantType(T.VariantKind.OPEN, elements[:1])) == "[> `A ]"
	assert format_type(T.PolyVariantType(T.VariantKind.CLOSED, elements, ["A"])) == "[< `A | `B of int > `A ]"


def test_objects_and_other_forms():
	assert format_type(T.ObjectType([T.ObjectMethod("m", _INT)], open_=True)) == "< m : int; .. >"
	assert format_type(T.ObjectType([])) == "< >"
	assert format_type(T.PolyType(["a"], T.ArrowType(None, _A, _A))) == "'a. 'a -> 'a"
	assert format_type(T.AliasType(_A, "b")) == "'a as 'b"
	assert format_type(T.ClassTypeExpr(Root("c"))) == "#c"
	assert format_type(T.AnyType()) == "_"
	pkg = T.PackageType(Root("S"), [(Fragment.type_(Fragment.root(), "t"), _INT)])
	assert format_type(pkg) == "(module S with type t = int)"


def test_equations():
	tid = Identifier.type_(_ROOT, "t")
	eq = S.Equation([S.TypeParam("a", S.Polarity.POS)], False, _INT)
	assert format_equation("t", eq) == "+'a t = int"
	assert format_equation("t", S.Equation(private=True, manifest=_INT)) == "t = private int"
	record = S.ReprRecord([S.Field(Identifier.field(tid, "x"), EMPTY_DOC, True, _INT)])
	assert format_equation("t", S.Equation(), record) == "t = { mutable x : int }"
	variant = S.ReprVariant(
		[
			S.Constructor(Identifier.constructor(tid, "A"), EMPTY_DOC),
			S.Constructor(Identifier.constructor(tid, "B"), EMPTY_DOC, S.TupleArgs([_INT, _STRING])),
		]
	)
	assert format_equation("t", S.Equation(), variant) == "t = A | B of int * string"
	assert format_equation("t", S.Equation(), S.ReprExtensible()) == "t = .."


def test_module_types():
	sid = Identifier.module_type(_ROOT, "S")
	with_ = S.MtWith(
		S.MtPath(Resolved(RIdent(sid))),
		[S.TypeEq(Fragment.type_(Fragment.root(), "t"), S.Equation(manifest=_INT))],
	)
	assert format_module_type(with_) == "S with type t = int"
	assert format_module_type(S.MtTypeOf(S.DeclAlias(Root("List")))) == "module type of List"
	assert format_module_type(S.MtFunctor(None, S.MtSignature([]))) == "functor () -> sig end"


def test_text():
	text = [Raw("Use "), Code("f"), Raw(" or "), Reference("val", "g"), Newline(), Style(StyleKind.BOLD, [Raw("now")])]
	assert format_text(text) == "Use [f] or g now"


def test_signature_rendering():
	ids = IdentFactory()
	t = ids.fresh("t")
	_, _, items = read(sig(module_sig(ids.fresh("M"), types(abstract_type(t)), val(ids.fresh("f"), arrow(constr(t), constr(t))))))
	assert format_signature(items) == "module M : sig\n  type t\n  val f : t -> t\nend"


def test_other_items():
	mid = Identifier.module(_ROOT, "M")
	fid = Identifier.module(_ROOT, "F")
	cid = Identifier.class_(_ROOT, "c")
	items = [
		DocComment(DocOk(DocBody([Raw("Intro.")]))),
		S.ExternalDecl(Identifier.value(_ROOT, "f"), EMPTY_DOC, _INT, ["caml_f"]),
		S.ExceptionDecl(Identifier.exception(_ROOT, "E"), EMPTY_DOC, S.TupleArgs([_STRING])),
		S.ModuleDecl(Identifier.module(_ROOT, "A"), EMPTY_DOC, S.DeclAlias(Resolved(RIdent(mid)))),
		S.ModuleDecl(
			fid,
			EMPTY_DOC,
			S.DeclModuleType(
				S.MtFunctor(
					S.FunctorParameter(Identifier.functor_parameter(fid, "X"), S.MtPath(Root("S"))),
					S.MtSignature([S.ValueDecl(Identifier.value(Identifier.functor_result(fid), "x"), EMPTY_DOC, _INT)]),
				)
			),
		),
		S.IncludeDecl(_ROOT, EMPTY_DOC, S.DeclModuleType(S.MtPath(Root("S"))), S.IncludeExpansion([])),
		S.ClassDecl(cid, EMPTY_DOC, False, [], S.ClassTypeOf(S.CtSignature(None, [S.Method(Identifier.method(cid, "m"), EMPTY_DOC, False, False, _INT)]))),
		StopComment(),
	]
	assert format_signature(items).split("\n") == [
		"(** Intro. *)",
		'external f : int = "caml_f"',
		"exception E of string",
		"module A = M",
		"module F : functor (X : S) -> sig",
		"  val x : int",
		"end",
		"include S",
		"class c : object",
		"  method m : int",
		"end",
		"(**/**)",
	]
