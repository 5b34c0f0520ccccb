# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Path and fragment resolution.

Compiler paths are resolved through the scope environment:
- a bound ident becomes `Resolved(RIdent(id))`;
- an unbound persistent ident names another compilation unit and stays
  symbolic (`Root(name)`), unless it is the unit being read;
- an unbound predefined type becomes a CORE_TYPE identifier;
- any other unbound ident cannot come out of a type-checked signature.

Fragments (left-hand sides of `with` constraints and package substitutions)
are relative to the constrained signature and never consult the environment.
"""

from __future__ import annotations

from typing import Callable, Optional

from sigdoc.core.identifiers import IdentKind, Identifier
from sigdoc.core.paths import (
	Apply,
	DocPath,
	Dot,
	Fragment,
	RApply,
	RDot,
	RIdent,
	Resolved,
	Root,
)
from sigdoc.frontend.ident import CPath, Ident, Lapply, Ldot, Lident, Longident, Papply, Pdot, Pident
from sigdoc.loader.ident_env import IdentEnv

PREDEFINED_TYPES = frozenset(
	{
		"int",
		"char",
		"string",
		"bytes",
		"float",
		"bool",
		"unit",
		"exn",
		"array",
		"list",
		"option",
		"nativeint",
		"int32",
		"int64",
		"lazy_t",
		"extension_constructor",
		"floatarray",
	}
)


def _unbound(what: str, ident: Ident) -> AssertionError:
	return AssertionError(f"unbound {what} ident '{ident}' (front-end bug)")


def read_module_path(env: IdentEnv, path: CPath) -> DocPath:
	if isinstance(path, Pident):
		found = env.find_module(path.ident)
		if found is not None:
			return Resolved(RIdent(found))
		if path.ident.persistent:
			if env.root is not None and env.root.name == path.ident.name:
				return Resolved(RIdent(env.root))
			return Root(path.ident.name)
		raise _unbound("module", path.ident)
	if isinstance(path, Pdot):
		return _dot(env, path, IdentKind.MODULE)
	if isinstance(path, Papply):
		functor = read_module_path(env, path.functor)
		arg = read_module_path(env, path.arg)
		if isinstance(functor, Resolved):
			return Resolved(RApply(functor.path, arg))
		return Apply(functor, arg)
	raise TypeError(f"not a compiler path: {path!r}")


def _dot(env: IdentEnv, path: Pdot, kind: IdentKind) -> DocPath:
	parent = read_module_path(env, path.parent)
	if isinstance(parent, Resolved):
		return Resolved(RDot(kind, parent.path, path.name))
	return Dot(parent, path.name)


def _read_member_path(
	env: IdentEnv,
	path: CPath,
	kind: IdentKind,
	lookup: Callable[[Ident], Optional[Identifier]],
	fallback: Optional[Callable[[Ident], Optional[Identifier]]] = None,
) -> DocPath:
	if isinstance(path, Pident):
		found = lookup(path.ident)
		if found is None and fallback is not None:
			found = fallback(path.ident)
		if found is None:
			raise _unbound(kind.name.lower().replace("_", " "), path.ident)
		return Resolved(RIdent(found))
	if isinstance(path, Pdot):
		return _dot(env, path, kind)
	if isinstance(path, Papply):
		raise AssertionError(f"functor application in {kind.name.lower()} path (front-end bug)")
	raise TypeError(f"not a compiler path: {path!r}")


def _core_type(ident: Ident) -> Optional[Identifier]:
	if ident.name in PREDEFINED_TYPES and not ident.persistent:
		return Identifier.core_type(ident.name)
	return None


def read_module_type_path(env: IdentEnv, path: CPath) -> DocPath:
	return _read_member_path(env, path, IdentKind.MODULE_TYPE, env.find_module_type)


def read_type_path(env: IdentEnv, path: CPath) -> DocPath:
	return _read_member_path(env, path, IdentKind.TYPE, env.find_type, _core_type)


def read_class_type_path(env: IdentEnv, path: CPath) -> DocPath:
	return _read_member_path(env, path, IdentKind.CLASS_TYPE, env.find_class_type)


def read_module_fragment(lid: Longident) -> Fragment:
	if isinstance(lid, Lident):
		return Fragment.module(Fragment.root(), lid.name)
	if isinstance(lid, Ldot):
		return Fragment.module(read_module_fragment(lid.parent), lid.name)
	if isinstance(lid, Lapply):
		raise AssertionError("functor application in signature fragment (front-end bug)")
	raise TypeError(f"not a long identifier: {lid!r}")


def read_type_fragment(lid: Longident) -> Fragment:
	if isinstance(lid, Lident):
		return Fragment.type_(Fragment.root(), lid.name)
	if isinstance(lid, Ldot):
		return Fragment.type_(read_module_fragment(lid.parent), lid.name)
	if isinstance(lid, Lapply):
		raise AssertionError("functor application in signature fragment (front-end bug)")
	raise TypeError(f"not a long identifier: {lid!r}")


__all__ = [
	"PREDEFINED_TYPES",
	"read_module_path",
	"read_module_type_path",
	"read_type_path",
	"read_class_type_path",
	"read_module_fragment",
	"read_type_fragment",
]
