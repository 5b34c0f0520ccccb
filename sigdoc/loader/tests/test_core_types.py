#!/usr/bin/env python3
# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Typed-tree core types → documentation type expressions."""

import pytest

from sigdoc.core.identifiers import Identifier
from sigdoc.core.paths import Fragment, RIdent, Resolved
from sigdoc.frontend import typedtree as TT
from sigdoc.frontend.ident import NOLABEL, Labelled, Lident, OptLabelled, Pident
from sigdoc.loader.cmti import CmtiReader
from sigdoc.loader.ident_env import IdentEnv
from sigdoc.model import types as T
from sigdoc.test_support import IdentFactory, arrow, constr, predef

_ROOT = Identifier.root_of("pkg", "Unit")
_INT = T.ConstrType(Resolved(RIdent(Identifier.core_type("int"))))
_STRING = T.ConstrType(Resolved(RIdent(Identifier.core_type("string"))))


def _read(ty: TT.TCoreType, env: IdentEnv = IdentEnv.empty()) -> T.TypeExpr:
	return CmtiReader().read_core_type(env, ty)


def test_variables_and_any():
	assert _read(TT.TAny()) == T.AnyType()
	assert _read(TT.TVar("a")) == T.VarType("a")


def test_predefined_constructor_with_arguments():
	assert _read(predef("list", TT.TVar("a"))) == T.ConstrType(
		Resolved(RIdent(Identifier.core_type("list"))), [T.VarType("a")]
	)


def test_arrow_labels():
	assert _read(arrow(predef("int"), predef("string"))) == T.ArrowType(None, _INT, _STRING)
	labelled = TT.TArrow(Labelled("x"), predef("int"), TT.TArrow(OptLabelled("y"), predef("int"), predef("string")))
	assert _read(labelled) == T.ArrowType(T.NamedLabel("x"), _INT, T.ArrowType(T.OptionalLabel("y"), _INT, _STRING))


def test_tuple():
	assert _read(TT.TTuple([predef("int"), TT.TVar("a")])) == T.TupleType([_INT, T.VarType("a")])


def test_local_type_resolves_through_environment():
	ids = IdentFactory()
	t = ids.fresh("t")
	tid = Identifier.type_(_ROOT, "t")
	env = IdentEnv.empty().add_type(t, tid)
	assert _read(constr(t), env) == T.ConstrType(Resolved(RIdent(tid)))


def test_empty_quantifier_collapses():
	assert _read(TT.TPoly([], predef("int"))) == _INT


def test_quantified_type():
	assert _read(TT.TPoly(["a"], arrow(TT.TVar("a"), TT.TVar("a")))) == T.PolyType(
		["a"], T.ArrowType(None, T.VarType("a"), T.VarType("a"))
	)


def test_polymorphic_variant_kinds():
	tags = [TT.RTag("A", True), TT.RTag("B", False, [predef("int")])]
	elements = [T.VariantConstructor("A", True, []), T.VariantConstructor("B", False, [_INT])]
	assert _read(TT.TVariant(tags, TT.ClosedFlag.CLOSED)) == T.PolyVariantType(T.VariantKind.FIXED, elements)
	assert _read(TT.TVariant(tags, TT.ClosedFlag.OPEN)) == T.PolyVariantType(T.VariantKind.OPEN, elements)
	assert _read(TT.TVariant(tags, TT.ClosedFlag.CLOSED, ["A"])) == T.PolyVariantType(
		T.VariantKind.CLOSED, elements, ["A"]
	)


def test_open_variant_ignores_present_tags():
	ty = TT.TVariant([TT.RTag("A", True)], TT.ClosedFlag.OPEN, ["A"])
	assert _read(ty).kind is T.VariantKind.OPEN


def test_variant_inherit():
	ids = IdentFactory()
	t = ids.fresh("t")
	tid = Identifier.type_(_ROOT, "t")
	env = IdentEnv.empty().add_type(t, tid)
	ty = TT.TVariant([TT.RInherit(constr(t)), TT.RTag("C", True)])
	assert _read(ty, env).elements == [
		T.VariantInherit(T.ConstrType(Resolved(RIdent(tid)))),
		T.VariantConstructor("C", True, []),
	]


def test_object_types():
	closed = TT.TObject([TT.OTTag("m", predef("int"))])
	assert _read(closed) == T.ObjectType([T.ObjectMethod("m", _INT)], open_=False)
	opened = TT.TObject([TT.OTTag("m", predef("int"))], TT.ClosedFlag.OPEN)
	assert _read(opened).open_


def test_class_reference():
	ids = IdentFactory()
	c = ids.fresh("c")
	cid = Identifier.class_(_ROOT, "c")
	env = IdentEnv.empty().add_class(cid, c)
	assert _read(TT.TClass(Pident(c), [TT.TVar("a")]), env) == T.ClassTypeExpr(Resolved(RIdent(cid)), [T.VarType("a")])


def test_alias():
	assert _read(TT.TAlias(TT.TVar("a"), "b")) == T.AliasType(T.VarType("a"), "b")


def test_package_type():
	ids = IdentFactory()
	s = ids.fresh("S")
	sid = Identifier.module_type(_ROOT, "S")
	env = IdentEnv.empty().add_module_type(s, sid)
	ty = TT.TPackage(Pident(s), [(Lident("t"), predef("int"))])
	assert _read(ty, env) == T.PackageType(Resolved(RIdent(sid)), [(Fragment.type_(Fragment.root(), "t"), _INT)])


def test_unknown_node_fails_loudly():
	class TMystery(TT.TCoreType):
		pass

	with pytest.raises(NotImplementedError):
		_read(TMystery())


def test_unlabelled_arrow_label_is_none():
	assert _read(TT.TArrow(NOLABEL, TT.TVar("a"), TT.TVar("b"))).label is None
