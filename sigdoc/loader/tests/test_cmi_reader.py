#!/usr/bin/env python3
# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Compiled signature reader."""

import pytest

from sigdoc.core.identifiers import IdentKind, Identifier
from sigdoc.core.paths import RDot, RIdent, Resolved, Root
from sigdoc.frontend import compiled as C
from sigdoc.frontend import typedtree as TT
from sigdoc.frontend.ident import NOLABEL, Labelled, OptLabelled, Pident
from sigdoc.loader.cmi import CmiReader, read_label
from sigdoc.loader.ident_env import IdentEnv
from sigdoc.model import signature as S
from sigdoc.model import types as T
from sigdoc.model.documentation import EMPTY_DOC, DocBody, DocOk, Raw
from sigdoc.test_support import IdentFactory, doc, path, persistent, read, sig

_ROOT = Identifier.root_of("test", "Test")
_INT = T.ConstrType(Resolved(RIdent(Identifier.core_type("int"))))


def _int(ids: IdentFactory) -> C.CType:
	return C.CConstr(Pident(ids.fresh("int")))


def _read(items, env: IdentEnv = IdentEnv.empty()):
	return CmiReader().read_signature(env, _ROOT, items)


def test_read_label():
	assert read_label(NOLABEL) is None
	assert read_label(Labelled("f")) == T.NamedLabel("f")
	assert read_label(OptLabelled("g")) == T.OptionalLabel("g")


def test_type_expressions():
	ids = IdentFactory()
	reader = CmiReader()
	env = IdentEnv.empty()
	assert reader.read_type_expr(env, C.CVar()) == T.AnyType()
	assert reader.read_type_expr(env, C.CVar("a")) == T.VarType("a")
	assert reader.read_type_expr(env, C.CPoly([], _int(ids))) == _INT
	assert reader.read_type_expr(env, C.CPoly(["a"], C.CUnivar("a"))) == T.PolyType(["a"], T.VarType("a"))
	assert reader.read_type_expr(env, C.CObject([("m", _int(ids))], open=True)) == T.ObjectType([T.ObjectMethod("m", _INT)], open_=True)
	variant = C.CVariant([C.CRowTag("A", True)], closed=True, present=["A"])
	assert reader.read_type_expr(env, variant) == T.PolyVariantType(T.VariantKind.CLOSED, [T.VariantConstructor("A", True, [])], ["A"])
	assert reader.read_type_expr(env, C.CVariant([C.CRowTag("A", True)], closed=False)).kind is T.VariantKind.OPEN


def test_values_and_externals():
	ids = IdentFactory()
	items = [
		C.CSigValue(ids.fresh("x"), _int(ids), attributes=[doc("X.")]),
		C.CSigValue(ids.fresh("*"), _int(ids), prims=["%mul"]),
	]
	assert _read(items) == [
		S.ValueDecl(Identifier.value(_ROOT, "x"), DocOk(DocBody([Raw("X.")])), _INT),
		S.ExternalDecl(Identifier.value(_ROOT, "(*)"), EMPTY_DOC, _INT, ["%mul"]),
	]


def test_type_declarations():
	ids = IdentFactory()
	t, r = ids.fresh("t"), ids.fresh("r")
	variant = C.CTypeVariant([C.CConstructor(ids.fresh("A"), record=[C.CLabel(ids.fresh("x"), _int(ids))]), C.CConstructor(ids.fresh("B"), [C.CConstr(Pident(r))])])
	items = [
		C.CSigType(t, C.CTypeDecl([C.CVar("a")], [C.CVariance.COVARIANT], variant)),
		C.CSigType(r, C.CTypeDecl(kind=C.CTypeRecord([C.CLabel(ids.fresh("f"), _int(ids), mutable=True)]))),
	]
	result = _read(items)
	tid, rid = Identifier.type_(_ROOT, "t"), Identifier.type_(_ROOT, "r")
	a = Identifier.constructor(tid, "A")
	assert result[0] == S.TypeDecl(
		tid,
		EMPTY_DOC,
		S.Equation([S.TypeParam("a", S.Polarity.POS)]),
		S.ReprVariant(
			[
				S.Constructor(a, EMPTY_DOC, S.RecordArgs([S.Field(Identifier.field(a, "x"), EMPTY_DOC, False, _INT)])),
				S.Constructor(Identifier.constructor(tid, "B"), EMPTY_DOC, S.TupleArgs([T.ConstrType(Resolved(RIdent(rid)))])),
			]
		),
	)
	assert result[1].representation == S.ReprRecord([S.Field(Identifier.field(rid, "f"), EMPTY_DOC, True, _INT)])


def test_constrained_type_parameter_is_unnamed():
	ids = IdentFactory()
	decl = C.CTypeDecl([_int(ids), C.CVar("b")], [C.CVariance.CONTRAVARIANT, C.CVariance.INVARIANT])
	(result,) = _read([C.CSigType(ids.fresh("t"), decl)])
	assert result.equation.params == [S.TypeParam(None, S.Polarity.NEG), S.TypeParam("b")]


def test_include_of_constrained_type_reads_through():
	ids = IdentFactory()
	s = ids.fresh("S")
	content = [C.CSigType(ids.fresh("t"), C.CTypeDecl([_int(ids)])), C.CSigValue(ids.fresh("v"), _int(ids))]
	signature = sig(
		TT.SigModtype(TT.ModuleTypeDeclaration(s, TT.MtySignature(sig()))),
		TT.SigInclude(TT.IncludeDescription(TT.MtyIdent(Pident(s)), content)),
	)
	_, _, items = read(signature)
	expanded = items[1].expansion.content
	assert [type(i) for i in expanded] == [S.TypeDecl, S.ValueDecl]
	assert expanded[0].equation.params == [S.TypeParam(None)]


def test_type_extension_items_are_regrouped():
	ids = IdentFactory()
	ext = C.CExtension(path(persistent("Stdlib"), "exn"))
	items = [
		C.CSigTypext(ids.fresh("A"), ext, C.ExtStatus.FIRST),
		C.CSigTypext(ids.fresh("B"), ext, C.ExtStatus.NEXT),
		C.CSigTypext(ids.fresh("E"), C.CExtension(path(persistent("Stdlib"), "exn"), args=[_int(ids)]), C.ExtStatus.EXCEPTION),
		C.CSigTypext(ids.fresh("C"), ext, C.ExtStatus.FIRST),
	]
	result = _read(items)
	assert [type(i) for i in result] == [S.TypeExtDecl, S.ExceptionDecl, S.TypeExtDecl]
	assert [c.id.name for c in result[0].constructors] == ["A", "B"]
	assert result[0].constructors[0].id == Identifier.extension(_ROOT, "A")
	assert result[1] == S.ExceptionDecl(Identifier.exception(_ROOT, "E"), EMPTY_DOC, S.TupleArgs([_INT]))
	assert [c.id.name for c in result[2].constructors] == ["C"]


def test_extension_continuation_without_head_is_fatal():
	ids = IdentFactory()
	with pytest.raises(AssertionError):
		_read([C.CSigTypext(ids.fresh("B"), C.CExtension(path(persistent("M"), "t")), C.ExtStatus.NEXT)])


def test_modules_and_module_types():
	ids = IdentFactory()
	s, m, alias, f, x, t = (ids.fresh(n) for n in ("S", "M", "A", "F", "X", "t"))
	items = [
		C.CSigModtype(s, C.CMtySignature([C.CSigType(t, C.CTypeDecl())])),
		C.CSigModule(m, C.CMtyIdent(Pident(s))),
		C.CSigModule(alias, C.CMtyAlias(Pident(m))),
		C.CSigModule(f, C.CMtyFunctor(x, C.CMtyIdent(Pident(s)), C.CMtySignature([C.CSigValue(ids.fresh("v"), C.CConstr(path(x, "t")))]))),
	]
	result = _read(items)
	sid, mid, fid = Identifier.module_type(_ROOT, "S"), Identifier.module(_ROOT, "M"), Identifier.module(_ROOT, "F")
	assert result[0].expansion is S.Expansion.ALREADY_A_SIG
	assert result[0].expr == S.MtSignature([S.TypeDecl(Identifier.type_(sid, "t"), EMPTY_DOC, S.Equation())])
	assert result[1].type == S.DeclModuleType(S.MtPath(Resolved(RIdent(sid))))
	assert result[2].type == S.DeclAlias(Resolved(RIdent(mid)))
	param_id = Identifier.functor_parameter(fid, "X")
	assert result[3].type == S.DeclModuleType(
		S.MtFunctor(
			S.FunctorParameter(param_id, S.MtPath(Resolved(RIdent(sid)))),
			S.MtSignature(
				[
					S.ValueDecl(
						Identifier.value(Identifier.functor_result(fid), "v"),
						EMPTY_DOC,
						T.ConstrType(Resolved(RDot(IdentKind.TYPE, RIdent(param_id), "t"))),
					)
				]
			),
		)
	)


def test_alias_in_module_type_position():
	reader = CmiReader()
	expr = reader.read_module_type(IdentEnv.empty(), _ROOT, C.CMtyAlias(Pident(persistent("Other"))))
	assert expr == S.MtTypeOf(S.DeclAlias(Root("Other")))


def test_hidden_compiled_module():
	ids = IdentFactory()
	result = _read([C.CSigModule(ids.fresh("Lib__Impl"), C.CMtySignature())])
	assert result[0].hidden


def test_classes():
	ids = IdentFactory()
	c, ct = ids.fresh("c"), ids.fresh("ct")
	csig = C.CClassSignature(
		vars=[("v", True, False, _int(ids))],
		methods=[("m", False, True, C.CConstr(Pident(c)))],
	)
	items = [
		C.CSigClass(c, C.CClassDecl(C.CCtyArrow(Labelled("x"), _int(ids), C.CCtySignature(csig)), [C.CVar("a")])),
		C.CSigClassType(ct, C.CClassDecl(C.CCtyConstr(Pident(c)), virtual=True)),
	]
	result = _read(items)
	cid = Identifier.class_(_ROOT, "c")
	assert result[0] == S.ClassDecl(
		cid,
		EMPTY_DOC,
		False,
		[S.TypeParam("a")],
		S.ClassArrow(
			T.NamedLabel("x"),
			_INT,
			S.ClassTypeOf(
				S.CtSignature(
					None,
					[
						S.InstanceVariable(Identifier.instance_variable(cid, "v"), EMPTY_DOC, True, False, _INT),
						S.Method(Identifier.method(cid, "m"), EMPTY_DOC, False, True, T.ConstrType(Resolved(RIdent(cid)))),
					],
				)
			),
		),
	)
	assert result[1] == S.ClassTypeDecl(Identifier.class_type(_ROOT, "ct"), EMPTY_DOC, True, [], S.CtConstr(Resolved(RIdent(cid))))


def test_class_type_arrow_is_fatal():
	ids = IdentFactory()
	decl = C.CClassDecl(C.CCtyArrow(NOLABEL, _int(ids), C.CCtySignature(C.CClassSignature())))
	with pytest.raises(AssertionError):
		_read([C.CSigClassType(ids.fresh("ct"), decl)])


def test_class_parameters_keep_variance():
	ids = IdentFactory()
	sig_ = C.CCtySignature(C.CClassSignature())
	items = [
		C.CSigClass(ids.fresh("c"), C.CClassDecl(sig_, [C.CVar("a")], variance=[C.CVariance.COVARIANT])),
		C.CSigClassType(ids.fresh("ct"), C.CClassDecl(sig_, [C.CVar("a"), C.CVar("b")], variance=[C.CVariance.CONTRAVARIANT])),
	]
	result = _read(items)
	assert result[0].params == [S.TypeParam("a", S.Polarity.POS)]
	assert result[1].params == [S.TypeParam("a", S.Polarity.NEG), S.TypeParam("b")]
