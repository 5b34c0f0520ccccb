# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Shared builders for tests that need typed-tree inputs.

Spelling typed-tree nodes by hand is noisy (every binder needs a stamped
ident, every reference a compiler path). These helpers keep test inputs close
to what the front-end hands over while staying readable.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from sigdoc.core.identifiers import Identifier
from sigdoc.core.span import Span
from sigdoc.frontend import typedtree as TT
from sigdoc.frontend.ident import NOLABEL, Attribute, CPath, Ident, Pdot, Pident
from sigdoc.loader.cmti import read_interface
from sigdoc.model.documentation import Documentation
from sigdoc.model.signature import SignatureItem


class IdentFactory:
	"""Hands out idents with fresh stamps, the way the front-end binds names."""

	def __init__(self, start: int = 1000) -> None:
		self._next = start

	def fresh(self, name: str) -> Ident:
		ident = Ident(name, self._next)
		self._next += 1
		return ident


def persistent(name: str) -> Ident:
	"""Ident of another compilation unit."""
	return Ident(name, 0, persistent=True)


def path(ident: Ident, *names: str) -> CPath:
	"""`ident.n1.n2...` as a compiler path."""
	p: CPath = Pident(ident)
	for name in names:
		p = Pdot(p, name)
	return p


def predef(name: str, *args: TT.TCoreType) -> TT.TConstr:
	"""Reference to a predefined type (`int`, `list`, ...)."""
	return TT.TConstr(Pident(Ident(name, 0)), list(args))


def constr(target: Ident | CPath, *args: TT.TCoreType) -> TT.TConstr:
	p = Pident(target) if isinstance(target, Ident) else target
	return TT.TConstr(p, list(args))


def arrow(*parts: TT.TCoreType) -> TT.TCoreType:
	"""Right-nested unlabelled arrow `t1 -> t2 -> ... -> tn`."""
	result = parts[-1]
	for arg in reversed(parts[:-1]):
		result = TT.TArrow(NOLABEL, arg, result)
	return result


def doc(payload: str, line: int = 1, column: int = 1) -> Attribute:
	return Attribute("ocaml.doc", payload, Span(file="test.mli", line=line, column=column))


def text(payload: str, line: int = 1, column: int = 1) -> Attribute:
	return Attribute("ocaml.text", payload, Span(file="test.mli", line=line, column=column))


def sig(*items: TT.SignatureItem) -> TT.Signature:
	return TT.Signature(list(items))


def val(ident: Ident, ty: TT.TCoreType, *, attrs: Sequence[Attribute] = (), prim: Sequence[str] = ()) -> TT.SigValue:
	return TT.SigValue(TT.ValueDescription(ident, ty, list(prim), list(attrs)))


def abstract_type(
	ident: Ident,
	*,
	params: Sequence[TT.TypeParam] = (),
	manifest: Optional[TT.TCoreType] = None,
	attrs: Sequence[Attribute] = (),
) -> TT.TypeDeclaration:
	return TT.TypeDeclaration(ident, list(params), manifest=manifest, attributes=list(attrs))


def types(*decls: TT.TypeDeclaration) -> TT.SigType:
	return TT.SigType(list(decls))


def module(ident: Ident, mty: TT.TModuleType, *, attrs: Sequence[Attribute] = ()) -> TT.SigModule:
	return TT.SigModule(TT.ModuleDeclaration(ident, mty, list(attrs)))


def module_sig(ident: Ident, *items: TT.SignatureItem, attrs: Sequence[Attribute] = ()) -> TT.SigModule:
	return module(ident, TT.MtySignature(sig(*items)), attrs=attrs)


def read(signature: TT.Signature, unit: str = "Test", root: str = "test") -> Tuple[Identifier, Documentation, List[SignatureItem]]:
	"""Read a signature as the interface of `unit` with default collaborators."""
	return read_interface(root, unit, signature)


__all__ = [
	"IdentFactory",
	"persistent",
	"path",
	"predef",
	"constr",
	"arrow",
	"doc",
	"text",
	"sig",
	"val",
	"abstract_type",
	"types",
	"module",
	"module_sig",
	"read",
]
