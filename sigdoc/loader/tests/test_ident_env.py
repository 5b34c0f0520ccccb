#!/usr/bin/env python3
# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Scope environment persistence and path resolution."""

import pytest

from sigdoc.core.identifiers import IdentKind, Identifier
from sigdoc.core.paths import Apply, Dot, Fragment, RApply, RDot, RIdent, Resolved, Root
from sigdoc.frontend import compiled as C
from sigdoc.frontend import typedtree as TT
from sigdoc.frontend.ident import Lapply, Ldot, Lident, Papply, Pdot, Pident
from sigdoc.loader.ident_env import IdentEnv
from sigdoc.loader.resolver import (
	read_class_type_path,
	read_module_fragment,
	read_module_path,
	read_module_type_path,
	read_type_fragment,
	read_type_path,
)
from sigdoc.test_support import IdentFactory, abstract_type, module_sig, path, persistent, sig, types

_ROOT = Identifier.root_of("pkg", "Unit")


def test_add_returns_new_environment():
	ids = IdentFactory()
	t = ids.fresh("t")
	base = IdentEnv.empty()
	extended = base.add_type(t, Identifier.type_(_ROOT, "t"))
	assert base.find_type(t) is None
	assert extended.find_type(t) == Identifier.type_(_ROOT, "t")


def test_sibling_scopes_do_not_see_each_other():
	ids = IdentFactory()
	a, b = ids.fresh("A"), ids.fresh("B")
	parent = IdentEnv.empty().with_root(_ROOT)
	left = parent.add_module(a, Identifier.module(_ROOT, "A"))
	right = parent.add_module(b, Identifier.module(_ROOT, "B"))
	assert left.find_module(b) is None
	assert right.find_module(a) is None
	assert left.root == _ROOT


def test_rebinding_replaces_in_new_environment_only():
	ids = IdentFactory()
	t = ids.fresh("t")
	m = Identifier.module(_ROOT, "M")
	first = IdentEnv.empty().add_type(t, Identifier.type_(_ROOT, "t"))
	second = first.add_type(t, Identifier.type_(m, "t"))
	assert first.find_type(t) == Identifier.type_(_ROOT, "t")
	assert second.find_type(t) == Identifier.type_(m, "t")


def test_namespaces_are_separate():
	ids = IdentFactory()
	x = ids.fresh("x")
	env = IdentEnv.empty().add_module(x, Identifier.module(_ROOT, "x"))
	assert env.find_type(x) is None
	assert env.find_module_type(x) is None


def test_add_parameter_binds_functor_parameter():
	ids = IdentFactory()
	x = ids.fresh("X")
	f = Identifier.module(_ROOT, "F")
	param_id, env = IdentEnv.empty().add_parameter(f, x)
	assert param_id == Identifier.functor_parameter(f, "X")
	assert env.find_module(x) == param_id


def test_signature_members_are_bound_up_front():
	ids = IdentFactory()
	t, u, m, s = ids.fresh("t"), ids.fresh("u"), ids.fresh("M"), ids.fresh("S")
	a, b = ids.fresh("A"), ids.fresh("B")
	c, c_ty, c_obj, c_hash = ids.fresh("c"), ids.fresh("c"), ids.fresh("c"), ids.fresh("#c")
	ct, ct_obj = ids.fresh("ct"), ids.fresh("ct")
	signature = sig(
		types(abstract_type(t), abstract_type(u)),
		module_sig(m),
		TT.SigRecmodule([TT.ModuleDeclaration(a, TT.MtySignature(sig())), TT.ModuleDeclaration(b, TT.MtySignature(sig()))]),
		TT.SigModtype(TT.ModuleTypeDeclaration(s)),
		TT.SigClass([TT.ClassDescription(c, TT.CtySignature(TT.ClassSignature(TT.TAny())), id_class_type=c_ty, id_object=c_obj, id_typehash=c_hash)]),
		TT.SigClassType([TT.ClassTypeDeclaration(ct, TT.CtySignature(TT.ClassSignature(TT.TAny())), id_object=ct_obj)]),
	)
	env = IdentEnv.empty().add_signature_tree_items(_ROOT, signature)
	assert env.find_type(u) == Identifier.type_(_ROOT, "u")
	assert env.find_module(m) == Identifier.module(_ROOT, "M")
	assert env.find_module(b) == Identifier.module(_ROOT, "B")
	assert env.find_module_type(s) == Identifier.module_type(_ROOT, "S")
	cls = Identifier.class_(_ROOT, "c")
	assert env.find_class_type(c) == cls
	assert env.find_class_type(c_ty) == cls
	assert env.find_type(c_obj) == cls
	assert env.find_type(c_hash) == cls
	assert env.find_class_type(ct) == Identifier.class_type(_ROOT, "ct")
	assert env.find_type(ct_obj) == Identifier.class_type(_ROOT, "ct")


def test_include_contributes_compiled_members():
	ids = IdentFactory()
	t, m, s = ids.fresh("t"), ids.fresh("M"), ids.fresh("S")
	incl = TT.IncludeDescription(
		TT.MtyIdent(Pident(s)),
		[C.CSigType(t, C.CTypeDecl()), C.CSigModule(m, C.CMtySignature())],
	)
	env = IdentEnv.empty().add_signature_tree_items(_ROOT, sig(TT.SigInclude(incl)))
	assert env.find_type(t) == Identifier.type_(_ROOT, "t")
	assert env.find_module(m) == Identifier.module(_ROOT, "M")


def test_compiled_class_binds_both_namespaces():
	ids = IdentFactory()
	c = ids.fresh("c")
	env = IdentEnv.empty().add_signature_type_items(_ROOT, [C.CSigClass(c, C.CClassDecl(C.CCtySignature(C.CClassSignature())))])
	assert env.find_type(c) == Identifier.class_(_ROOT, "c")
	assert env.find_class_type(c) == Identifier.class_(_ROOT, "c")


# --- resolution ---


def test_bound_module_resolves_to_identifier():
	ids = IdentFactory()
	m = ids.fresh("M")
	mid = Identifier.module(_ROOT, "M")
	env = IdentEnv.empty().add_module(m, mid)
	assert read_module_path(env, Pident(m)) == Resolved(RIdent(mid))
	assert read_type_path(env, path(m, "t")) == Resolved(RDot(IdentKind.TYPE, RIdent(mid), "t"))
	assert read_module_type_path(env, path(m, "S")) == Resolved(RDot(IdentKind.MODULE_TYPE, RIdent(mid), "S"))


def test_persistent_unit_stays_symbolic():
	env = IdentEnv.empty().with_root(_ROOT)
	stdlib = persistent("Stdlib")
	assert read_module_path(env, Pident(stdlib)) == Root("Stdlib")
	assert read_type_path(env, path(stdlib, "List", "t")) == Dot(Dot(Root("Stdlib"), "List"), "t")


def test_self_reference_to_unit_resolves_to_root():
	env = IdentEnv.empty().with_root(_ROOT)
	assert read_module_path(env, Pident(persistent("Unit"))) == Resolved(RIdent(_ROOT))


def test_predefined_types_resolve_to_core_types():
	env = IdentEnv.empty()
	assert read_type_path(env, Pident(IdentFactory().fresh("int"))) == Resolved(RIdent(Identifier.core_type("int")))


def test_unbound_local_ident_is_fatal():
	ids = IdentFactory()
	with pytest.raises(AssertionError):
		read_type_path(IdentEnv.empty(), Pident(ids.fresh("t")))
	with pytest.raises(AssertionError):
		read_module_path(IdentEnv.empty(), Pident(ids.fresh("M")))
	with pytest.raises(AssertionError):
		read_class_type_path(IdentEnv.empty(), Pident(ids.fresh("c")))


def test_functor_application_paths():
	ids = IdentFactory()
	f, a = ids.fresh("F"), ids.fresh("A")
	fid = Identifier.module(_ROOT, "F")
	env = IdentEnv.empty().add_module(f, fid)
	app = Papply(Pident(f), Pident(persistent("Arg")))
	assert read_module_path(env, app) == Resolved(RApply(RIdent(fid), Root("Arg")))
	assert read_module_path(env, Papply(Pident(persistent("G")), Pident(f))) == Apply(Root("G"), Resolved(RIdent(fid)))
	assert read_type_path(env, Pdot(app, "t")) == Resolved(RDot(IdentKind.TYPE, RApply(RIdent(fid), Root("Arg")), "t"))
	with pytest.raises(AssertionError):
		read_type_path(env, Papply(Pident(f), Pident(a)))


def test_fragments():
	assert read_type_fragment(Lident("t")) == Fragment.type_(Fragment.root(), "t")
	assert read_type_fragment(Ldot(Lident("M"), "t")) == Fragment.type_(Fragment.module(Fragment.root(), "M"), "t")
	assert read_module_fragment(Ldot(Lident("M"), "N")) == Fragment.module(Fragment.module(Fragment.root(), "M"), "N")
	with pytest.raises(AssertionError):
		read_module_fragment(Lapply(Lident("F"), Lident("X")))
