# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Compiled signature → documentation model.

The typed-tree reader delegates here for content the checker has already
computed: the realised signature of an `include` and the module type of a
`module type of` argument. Compiled signatures carry no source syntax and no
floating comments, so the output has no comment items.

Type extensions arrive as one item per constructor: a FIRST item opens a
`TypeExtDecl`, NEXT items extend it, EXCEPTION items are exceptions.
"""

from __future__ import annotations

import logging
from typing import List, Optional

from sigdoc.core.config import DEFAULT_CONFIG, ReaderConfig
from sigdoc.core.identifiers import Identifier
from sigdoc.core.names import is_hidden, parenthesise
from sigdoc.frontend import compiled as C
from sigdoc.frontend.ident import ArgLabel, Labelled, Nolabel, OptLabelled
from sigdoc.loader.attrs import AttrCommentReader, read_canonical
from sigdoc.loader.ident_env import IdentEnv
from sigdoc.loader.reader_protocol import CommentReader
from sigdoc.loader.resolver import (
	read_class_type_path,
	read_module_path,
	read_module_type_path,
	read_type_fragment,
	read_type_path,
)
from sigdoc.model import signature as S
from sigdoc.model import types as T
from sigdoc.model.documentation import EMPTY_DOC

logger = logging.getLogger(__name__)

_POLARITY = {
	C.CVariance.COVARIANT: S.Polarity.POS,
	C.CVariance.CONTRAVARIANT: S.Polarity.NEG,
	C.CVariance.INVARIANT: None,
}


def read_label(label: ArgLabel) -> Optional[T.Label]:
	"""Normalise a front-end argument label (shared by both readers)."""
	if isinstance(label, Nolabel):
		return None
	if isinstance(label, Labelled):
		return T.NamedLabel(label.name)
	if isinstance(label, OptLabelled):
		return T.OptionalLabel(label.name)
	raise TypeError(f"not an argument label: {label!r}")


class CmiReader:
	"""Reads compiled signatures; implements `CompiledSignatureReader`."""

	def __init__(self, config: ReaderConfig = DEFAULT_CONFIG, comments: Optional[CommentReader] = None) -> None:
		self.config = config
		self.comments: CommentReader = comments if comments is not None else AttrCommentReader(config)

	# --- type expressions ---

	def read_type_expr(self, env: IdentEnv, ty: C.CType) -> T.TypeExpr:
		method = getattr(self, f"visit_type_{type(ty).__name__}", None)
		if method is None:
			raise NotImplementedError(f"No compiled reader for type {type(ty).__name__}")
		return method(env, ty)

	def visit_type_CVar(self, env: IdentEnv, ty: C.CVar) -> T.TypeExpr:
		if ty.name is None:
			return T.AnyType()
		return T.VarType(ty.name)

	def visit_type_CArrow(self, env: IdentEnv, ty: C.CArrow) -> T.TypeExpr:
		return T.ArrowType(read_label(ty.label), self.read_type_expr(env, ty.arg), self.read_type_expr(env, ty.res))

	def visit_type_CTuple(self, env: IdentEnv, ty: C.CTuple) -> T.TypeExpr:
		return T.TupleType([self.read_type_expr(env, t) for t in ty.types])

	def visit_type_CConstr(self, env: IdentEnv, ty: C.CConstr) -> T.TypeExpr:
		return T.ConstrType(read_type_path(env, ty.path), [self.read_type_expr(env, t) for t in ty.args])

	def visit_type_CObject(self, env: IdentEnv, ty: C.CObject) -> T.TypeExpr:
		methods = [T.ObjectMethod(name, self.read_type_expr(env, t)) for name, t in ty.methods]
		return T.ObjectType(methods, open_=ty.open)

	def visit_type_CVariant(self, env: IdentEnv, ty: C.CVariant) -> T.TypeExpr:
		elements: List[T.VariantConstructor | T.VariantInherit] = []
		for fld in ty.fields:
			if isinstance(fld, C.CRowTag):
				elements.append(T.VariantConstructor(fld.name, fld.constant, [self.read_type_expr(env, t) for t in fld.args]))
			else:
				elements.append(T.VariantInherit(self.read_type_expr(env, fld.type)))
		if not ty.closed:
			return T.PolyVariantType(T.VariantKind.OPEN, elements)
		if ty.present is not None:
			return T.PolyVariantType(T.VariantKind.CLOSED, elements, list(ty.present))
		return T.PolyVariantType(T.VariantKind.FIXED, elements)

	def visit_type_CUnivar(self, env: IdentEnv, ty: C.CUnivar) -> T.TypeExpr:
		return T.VarType(ty.name)

	def visit_type_CPoly(self, env: IdentEnv, ty: C.CPoly) -> T.TypeExpr:
		return T.poly(ty.vars, self.read_type_expr(env, ty.body))

	def visit_type_CPackage(self, env: IdentEnv, ty: C.CPackage) -> T.TypeExpr:
		substs = [(read_type_fragment(lid), self.read_type_expr(env, t)) for lid, t in ty.fields]
		return T.PackageType(read_module_type_path(env, ty.path), substs)

	# --- type declarations ---

	def read_type_params(self, params: List[C.CType], variance: List[C.CVariance]) -> List[S.TypeParam]:
		out: List[S.TypeParam] = []
		for idx, param in enumerate(params):
			polarity = _POLARITY[variance[idx]] if idx < len(variance) else None
			# A constrained parameter (`type 'a t constraint 'a = int`) is not a variable.
			name = param.name if isinstance(param, C.CVar) else None
			out.append(S.TypeParam(name, polarity))
		return out

	def read_fields(self, env: IdentEnv, parent: Identifier, labels: List[C.CLabel]) -> List[S.Field]:
		out: List[S.Field] = []
		for lbl in labels:
			fid = Identifier.field(parent, lbl.id.name)
			doc = self.comments.read_attributes(fid, lbl.attributes)
			out.append(S.Field(fid, doc, lbl.mutable, self.read_type_expr(env, lbl.type)))
		return out

	def read_constructor_args(
		self,
		env: IdentEnv,
		parent: Identifier,
		args: List[C.CType],
		record: Optional[List[C.CLabel]],
	) -> S.ConstructorArgs:
		if record is not None:
			return S.RecordArgs(self.read_fields(env, parent, record))
		return S.TupleArgs([self.read_type_expr(env, t) for t in args])

	def _read_res(self, env: IdentEnv, res: Optional[C.CType]) -> Optional[T.TypeExpr]:
		return None if res is None else self.read_type_expr(env, res)

	def read_type_decl(self, env: IdentEnv, parent: Identifier, item: C.CSigType) -> S.TypeDecl:
		tid = Identifier.type_(parent, item.id.name)
		doc = self.comments.read_attributes(tid, item.attributes)
		decl = item.decl
		equation = S.Equation(
			params=self.read_type_params(decl.params, decl.variance),
			private=decl.private,
			manifest=self._read_res(env, decl.manifest),
		)
		representation: Optional[S.Representation] = None
		if isinstance(decl.kind, C.CTypeVariant):
			cstrs: List[S.Constructor] = []
			for cd in decl.kind.constructors:
				cid = Identifier.constructor(tid, cd.id.name)
				cstrs.append(
					S.Constructor(
						cid,
						self.comments.read_attributes(cid, cd.attributes),
						self.read_constructor_args(env, cid, cd.args, cd.record),
						self._read_res(env, cd.res),
					)
				)
			representation = S.ReprVariant(cstrs)
		elif isinstance(decl.kind, C.CTypeRecord):
			representation = S.ReprRecord(self.read_fields(env, tid, decl.kind.labels))
		elif isinstance(decl.kind, C.CTypeOpen):
			representation = S.ReprExtensible()
		return S.TypeDecl(tid, doc, equation, representation)

	def read_extension_constructor(self, env: IdentEnv, parent: Identifier, item: C.CSigTypext) -> S.ExtensionConstructor:
		eid = Identifier.extension(parent, item.id.name)
		return S.ExtensionConstructor(
			eid,
			self.comments.read_attributes(eid, item.attributes),
			self.read_constructor_args(env, eid, item.ext.args, item.ext.record),
			self._read_res(env, item.ext.res),
		)

	def read_exception(self, env: IdentEnv, parent: Identifier, item: C.CSigTypext) -> S.ExceptionDecl:
		xid = Identifier.exception(parent, item.id.name)
		return S.ExceptionDecl(
			xid,
			self.comments.read_attributes(xid, item.attributes),
			self.read_constructor_args(env, xid, item.ext.args, item.ext.record),
			self._read_res(env, item.ext.res),
		)

	# --- modules ---

	def read_module_type(self, env: IdentEnv, parent: Identifier, mty: C.CModuleType) -> S.ModuleTypeExpr:
		if isinstance(mty, C.CMtyIdent):
			return S.MtPath(read_module_type_path(env, mty.path))
		if isinstance(mty, C.CMtySignature):
			return S.MtSignature(self.read_signature(env, parent, mty.items))
		if isinstance(mty, C.CMtyFunctor):
			parameter: Optional[S.FunctorParameter] = None
			body_env = env
			if mty.param_id is not None and mty.param is not None:
				param_id, body_env = env.add_parameter(parent, mty.param_id)
				expansion = S.Expansion.ALREADY_A_SIG if isinstance(mty.param, C.CMtySignature) else None
				parameter = S.FunctorParameter(param_id, self.read_module_type(env, param_id, mty.param), expansion)
			result = self.read_module_type(body_env, Identifier.functor_result(parent), mty.result)
			return S.MtFunctor(parameter, result)
		if isinstance(mty, C.CMtyAlias):
			return S.MtTypeOf(S.DeclAlias(read_module_path(env, mty.path)))
		raise NotImplementedError(f"No compiled reader for module type {type(mty).__name__}")

	def read_module_decl(self, env: IdentEnv, parent: Identifier, item: C.CSigModule) -> S.ModuleDecl:
		mid = Identifier.module(parent, item.id.name)
		doc = self.comments.read_attributes(mid, item.attributes)
		canonical = read_canonical(doc)
		decl: S.ModuleDeclType
		if isinstance(item.type, C.CMtyAlias):
			decl = S.DeclAlias(read_module_path(env, item.type.path))
		else:
			decl = S.DeclModuleType(self.read_module_type(env, mid, item.type))
		hidden = False if canonical is not None else is_hidden(item.id.name, self.config)
		expansion = S.Expansion.ALREADY_A_SIG if isinstance(item.type, C.CMtySignature) else None
		return S.ModuleDecl(mid, doc, decl, canonical, hidden, expansion)

	def read_module_type_decl(self, env: IdentEnv, parent: Identifier, item: C.CSigModtype) -> S.ModuleTypeDecl:
		mtid = Identifier.module_type(parent, item.id.name)
		doc = self.comments.read_attributes(mtid, item.attributes)
		expr = None if item.type is None else self.read_module_type(env, mtid, item.type)
		expansion = S.Expansion.ALREADY_A_SIG if isinstance(item.type, C.CMtySignature) else None
		return S.ModuleTypeDecl(mtid, doc, expr, expansion)

	# --- classes ---

	def read_class_signature(self, env: IdentEnv, parent: Identifier, csig: C.CClassSignature) -> S.CtSignature:
		self_type: Optional[T.TypeExpr] = None
		if csig.self_type is not None and not (isinstance(csig.self_type, C.CVar) and csig.self_type.name is None):
			self_type = self.read_type_expr(env, csig.self_type)
		items: List[S.ClassSignatureItem] = []
		for name, mutable, virtual, ty in csig.vars:
			vid = Identifier.instance_variable(parent, name)
			items.append(S.InstanceVariable(vid, EMPTY_DOC, mutable, virtual, self.read_type_expr(env, ty)))
		for name, private, virtual, ty in csig.methods:
			mid = Identifier.method(parent, name)
			items.append(S.Method(mid, EMPTY_DOC, private, virtual, self.read_type_expr(env, ty)))
		return S.CtSignature(self_type, items)

	def read_class_type(self, env: IdentEnv, parent: Identifier, cty: C.CClassType) -> S.ClassTypeExpression:
		if isinstance(cty, C.CCtyConstr):
			return S.CtConstr(read_class_type_path(env, cty.path), [self.read_type_expr(env, t) for t in cty.args])
		if isinstance(cty, C.CCtySignature):
			return self.read_class_signature(env, parent, cty.signature)
		if isinstance(cty, C.CCtyArrow):
			raise AssertionError("class arrow in compiled class type position (front-end bug)")
		raise NotImplementedError(f"No compiled reader for class type {type(cty).__name__}")

	def read_class_decl_type(self, env: IdentEnv, parent: Identifier, cty: C.CClassType) -> S.ClassDeclType:
		if isinstance(cty, C.CCtyArrow):
			return S.ClassArrow(
				read_label(cty.label),
				self.read_type_expr(env, cty.arg),
				self.read_class_decl_type(env, parent, cty.res),
			)
		return S.ClassTypeOf(self.read_class_type(env, parent, cty))

	def read_class(self, env: IdentEnv, parent: Identifier, item: C.CSigClass) -> S.ClassDecl:
		cid = Identifier.class_(parent, item.id.name)
		return S.ClassDecl(
			cid,
			self.comments.read_attributes(cid, item.attributes),
			item.decl.virtual,
			self.read_type_params(item.decl.params, item.decl.variance),
			self.read_class_decl_type(env, cid, item.decl.type),
		)

	def read_class_type_decl(self, env: IdentEnv, parent: Identifier, item: C.CSigClassType) -> S.ClassTypeDecl:
		ctid = Identifier.class_type(parent, item.id.name)
		return S.ClassTypeDecl(
			ctid,
			self.comments.read_attributes(ctid, item.attributes),
			item.decl.virtual,
			self.read_type_params(item.decl.params, item.decl.variance),
			self.read_class_type(env, ctid, item.decl.type),
		)

	# --- signatures ---

	def read_signature(self, env: IdentEnv, parent: Identifier, items: List[C.CSignatureItem]) -> List[S.SignatureItem]:
		"""Read a compiled signature; every member is bound before any is read."""
		logger.debug("reading compiled signature of %s (%d items)", parent, len(items))
		env = env.add_signature_type_items(parent, items)
		out: List[S.SignatureItem] = []
		for item in items:
			if isinstance(item, C.CSigValue):
				out.append(self.read_value(env, parent, item))
			elif isinstance(item, C.CSigType):
				out.append(self.read_type_decl(env, parent, item))
			elif isinstance(item, C.CSigTypext):
				self._read_typext_item(env, parent, item, out)
			elif isinstance(item, C.CSigModule):
				out.append(self.read_module_decl(env, parent, item))
			elif isinstance(item, C.CSigModtype):
				out.append(self.read_module_type_decl(env, parent, item))
			elif isinstance(item, C.CSigClass):
				out.append(self.read_class(env, parent, item))
			elif isinstance(item, C.CSigClassType):
				out.append(self.read_class_type_decl(env, parent, item))
			else:
				raise NotImplementedError(f"No compiled reader for item {type(item).__name__}")
		return out

	def read_value(self, env: IdentEnv, parent: Identifier, item: C.CSigValue) -> S.Declaration:
		vid = Identifier.value(parent, parenthesise(item.id.name))
		doc = self.comments.read_attributes(vid, item.attributes)
		ty = self.read_type_expr(env, item.type)
		if item.prims:
			return S.ExternalDecl(vid, doc, ty, list(item.prims))
		return S.ValueDecl(vid, doc, ty)

	def _read_typext_item(
		self,
		env: IdentEnv,
		parent: Identifier,
		item: C.CSigTypext,
		out: List[S.SignatureItem],
	) -> None:
		if item.status is C.ExtStatus.EXCEPTION:
			out.append(self.read_exception(env, parent, item))
			return
		ext = self.read_extension_constructor(env, parent, item)
		if item.status is C.ExtStatus.FIRST:
			out.append(
				S.TypeExtDecl(
					read_type_path(env, item.ext.type_path),
					EMPTY_DOC,
					self.read_type_params(item.ext.type_params, []),
					item.ext.private,
					[ext],
				)
			)
			return
		head = out[-1] if out else None
		if not isinstance(head, S.TypeExtDecl):
			raise AssertionError(f"extension constructor '{item.id.name}' continues no type extension (front-end bug)")
		out[-1] = S.TypeExtDecl(head.type_path, head.doc, head.type_params, head.private, head.constructors + [ext])


__all__ = ["CmiReader", "read_label"]
