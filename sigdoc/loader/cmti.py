# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Typed signature tree → documentation model.

Pipeline placement:
  typed tree (sigdoc.frontend.typedtree) → CmtiReader (this file) → doc model

The reader is a depth-first, pre-order descent over one signature. Every
function takes the scope environment explicitly; a scope that introduces
bindings builds a new environment and passes it down, nothing is mutated.

Dispatch is per node class (`visit_<category>_<NodeClass>`); a node class
without a visitor fails loudly with NotImplementedError. Shapes the front-end
never produces in a signature (extension rebinds, class arrows inside class
signatures, aliases used as module types, ...) raise AssertionError: they are
contract violations of the producer, not user errors.

Two collaborators are injected:
- a `CommentReader` turning attributes into documentation and comment items;
- a `CompiledSignatureReader` for content the checker has already computed
  (the realised signature of an `include`, the module type of a
  `module type of` argument).
"""

from __future__ import annotations

import logging
from typing import List, Optional, Tuple, Union

from sigdoc.core.config import DEFAULT_CONFIG, ReaderConfig
from sigdoc.core.identifiers import Identifier
from sigdoc.core.names import is_hidden, parenthesise
from sigdoc.frontend import typedtree as TT
from sigdoc.frontend.ident import Attribute, Longident
from sigdoc.loader.attrs import AttrCommentReader, read_canonical
from sigdoc.loader.cmi import CmiReader, read_label
from sigdoc.loader.ident_env import IdentEnv
from sigdoc.loader.reader_protocol import CommentReader, CompiledSignatureReader
from sigdoc.loader.resolver import (
	read_class_type_path,
	read_module_fragment,
	read_module_path,
	read_module_type_path,
	read_type_fragment,
	read_type_path,
)
from sigdoc.model import signature as S
from sigdoc.model import types as T
from sigdoc.model.documentation import EMPTY_DOC, Comment, DocComment, Documentation

logger = logging.getLogger(__name__)

_POLARITY = {
	TT.Variance.COVARIANT: S.Polarity.POS,
	TT.Variance.CONTRAVARIANT: S.Polarity.NEG,
	TT.Variance.INVARIANT: None,
}

ClassItem = Union[S.ClassSignatureItem, Comment]


class CmtiReader:
	"""Reads typed signature trees into the documentation model."""

	def __init__(
		self,
		config: ReaderConfig = DEFAULT_CONFIG,
		compiled: Optional[CompiledSignatureReader] = None,
		comments: Optional[CommentReader] = None,
	) -> None:
		self.config = config
		self.comments: CommentReader = comments if comments is not None else AttrCommentReader(config)
		self.compiled: CompiledSignatureReader = (
			compiled if compiled is not None else CmiReader(config, self.comments)
		)

	def _doc(self, origin: Identifier, attributes: List[Attribute]) -> Documentation:
		return self.comments.read_attributes(origin, attributes)

	def _dispatch(self, category: str, node: object):
		method = getattr(self, f"visit_{category}_{type(node).__name__}", None)
		if method is None:
			raise NotImplementedError(f"No typed-tree reader for {category} node {type(node).__name__}")
		return method

	# --- core types ---

	def read_core_type(self, env: IdentEnv, ty: TT.TCoreType) -> T.TypeExpr:
		return self._dispatch("type", ty)(env, ty)

	def visit_type_TAny(self, env: IdentEnv, ty: TT.TAny) -> T.TypeExpr:
		return T.AnyType()

	def visit_type_TVar(self, env: IdentEnv, ty: TT.TVar) -> T.TypeExpr:
		return T.VarType(ty.name)

	def visit_type_TArrow(self, env: IdentEnv, ty: TT.TArrow) -> T.TypeExpr:
		return T.ArrowType(read_label(ty.label), self.read_core_type(env, ty.arg), self.read_core_type(env, ty.res))

	def visit_type_TTuple(self, env: IdentEnv, ty: TT.TTuple) -> T.TypeExpr:
		return T.TupleType([self.read_core_type(env, t) for t in ty.types])

	def visit_type_TConstr(self, env: IdentEnv, ty: TT.TConstr) -> T.TypeExpr:
		return T.ConstrType(read_type_path(env, ty.path), [self.read_core_type(env, t) for t in ty.args])

	def visit_type_TObject(self, env: IdentEnv, ty: TT.TObject) -> T.TypeExpr:
		fields: List[T.ObjectMethod | T.ObjectInherit] = []
		for fld in ty.fields:
			if isinstance(fld, TT.OTTag):
				fields.append(T.ObjectMethod(fld.name, self.read_core_type(env, fld.type)))
			else:
				fields.append(T.ObjectInherit(self.read_core_type(env, fld.type)))
		return T.ObjectType(fields, open_=ty.closed is TT.ClosedFlag.OPEN)

	def visit_type_TClass(self, env: IdentEnv, ty: TT.TClass) -> T.TypeExpr:
		return T.ClassTypeExpr(read_class_type_path(env, ty.path), [self.read_core_type(env, t) for t in ty.args])

	def visit_type_TAlias(self, env: IdentEnv, ty: TT.TAlias) -> T.TypeExpr:
		return T.AliasType(self.read_core_type(env, ty.type), ty.name)

	def visit_type_TVariant(self, env: IdentEnv, ty: TT.TVariant) -> T.TypeExpr:
		elements: List[T.VariantConstructor | T.VariantInherit] = []
		for fld in ty.fields:
			if isinstance(fld, TT.RTag):
				elements.append(T.VariantConstructor(fld.name, fld.constant, [self.read_core_type(env, t) for t in fld.args]))
			else:
				elements.append(T.VariantInherit(self.read_core_type(env, fld.type)))
		if ty.closed is TT.ClosedFlag.OPEN:
			return T.PolyVariantType(T.VariantKind.OPEN, elements)
		if ty.present is not None:
			return T.PolyVariantType(T.VariantKind.CLOSED, elements, list(ty.present))
		return T.PolyVariantType(T.VariantKind.FIXED, elements)

	def visit_type_TPoly(self, env: IdentEnv, ty: TT.TPoly) -> T.TypeExpr:
		return T.poly(ty.vars, self.read_core_type(env, ty.type))

	def visit_type_TPackage(self, env: IdentEnv, ty: TT.TPackage) -> T.TypeExpr:
		substs = [(read_type_fragment(lid), self.read_core_type(env, t)) for lid, t in ty.fields]
		return T.PackageType(read_module_type_path(env, ty.path), substs)

	# --- type declarations ---

	def read_type_parameter(self, param: TT.TypeParam) -> S.TypeParam:
		ty, variance = param
		if isinstance(ty, TT.TAny):
			name = None
		elif isinstance(ty, TT.TVar):
			name = ty.name
		else:
			raise AssertionError(f"type parameter is neither '_' nor a variable: {ty!r} (front-end bug)")
		return S.TypeParam(name, _POLARITY[variance])

	def read_label_declaration(self, env: IdentEnv, parent: Identifier, ld: TT.LabelDeclaration) -> S.Field:
		fid = Identifier.field(parent, ld.id.name)
		return S.Field(fid, self._doc(fid, ld.attributes), ld.mutable, self.read_core_type(env, ld.type))

	def read_constructor_arguments(
		self,
		env: IdentEnv,
		field_parent: Identifier,
		args: TT.ConstructorArguments,
	) -> S.ConstructorArgs:
		"""Positional or inline-record arguments; record fields are parented by `field_parent`."""
		if isinstance(args, TT.CstrTuple):
			return S.TupleArgs([self.read_core_type(env, t) for t in args.types])
		if isinstance(args, TT.CstrRecord):
			return S.RecordArgs([self.read_label_declaration(env, field_parent, ld) for ld in args.labels])
		raise NotImplementedError(f"No typed-tree reader for constructor arguments {type(args).__name__}")

	def _read_opt(self, env: IdentEnv, ty: Optional[TT.TCoreType]) -> Optional[T.TypeExpr]:
		return None if ty is None else self.read_core_type(env, ty)

	def read_constructor_declaration(self, env: IdentEnv, parent: Identifier, cd: TT.ConstructorDeclaration) -> S.Constructor:
		cid = Identifier.constructor(parent, cd.id.name)
		return S.Constructor(
			cid,
			self._doc(cid, cd.attributes),
			self.read_constructor_arguments(env, cid, cd.args),
			self._read_opt(env, cd.res),
		)

	def read_type_kind(self, env: IdentEnv, parent: Identifier, kind: TT.TypeKind) -> Optional[S.Representation]:
		if isinstance(kind, TT.TypeAbstract):
			return None
		if isinstance(kind, TT.TypeVariant):
			return S.ReprVariant([self.read_constructor_declaration(env, parent, cd) for cd in kind.constructors])
		if isinstance(kind, TT.TypeRecord):
			return S.ReprRecord([self.read_label_declaration(env, parent, ld) for ld in kind.labels])
		if isinstance(kind, TT.TypeOpen):
			return S.ReprExtensible()
		raise NotImplementedError(f"No typed-tree reader for type kind {type(kind).__name__}")

	def read_type_equation(self, env: IdentEnv, decl: TT.TypeDeclaration) -> S.Equation:
		return S.Equation(
			params=[self.read_type_parameter(p) for p in decl.params],
			private=decl.private,
			manifest=self._read_opt(env, decl.manifest),
			constraints=[(self.read_core_type(env, a), self.read_core_type(env, b)) for a, b in decl.cstrs],
		)

	def read_type_declaration(self, env: IdentEnv, parent: Identifier, decl: TT.TypeDeclaration) -> S.TypeDecl:
		tid = Identifier.type_(parent, decl.id.name)
		return S.TypeDecl(
			tid,
			self._doc(tid, decl.attributes),
			self.read_type_equation(env, decl),
			self.read_type_kind(env, tid, decl.kind),
		)

	def read_extension_constructor(self, env: IdentEnv, parent: Identifier, ext: TT.ExtensionConstructor) -> S.ExtensionConstructor:
		eid = Identifier.extension(parent, ext.id.name)
		if isinstance(ext.kind, TT.ExtRebind):
			raise AssertionError(f"extension rebind '{ext.id.name}' in a signature (front-end bug)")
		return S.ExtensionConstructor(
			eid,
			self._doc(eid, ext.attributes),
			self.read_constructor_arguments(env, eid, ext.kind.args),
			self._read_opt(env, ext.kind.res),
		)

	def read_type_extension(self, env: IdentEnv, parent: Identifier, tyext: TT.TypeExtension) -> S.TypeExtDecl:
		return S.TypeExtDecl(
			read_type_path(env, tyext.path),
			self._doc(parent, tyext.attributes),
			[self.read_type_parameter(p) for p in tyext.params],
			tyext.private,
			[self.read_extension_constructor(env, parent, ext) for ext in tyext.constructors],
		)

	def read_exception(self, env: IdentEnv, parent: Identifier, ext: TT.ExtensionConstructor) -> S.ExceptionDecl:
		xid = Identifier.exception(parent, ext.id.name)
		if isinstance(ext.kind, TT.ExtRebind):
			raise AssertionError(f"exception rebind '{ext.id.name}' in a signature (front-end bug)")
		return S.ExceptionDecl(
			xid,
			self._doc(xid, ext.attributes),
			self.read_constructor_arguments(env, xid, ext.kind.args),
			self._read_opt(env, ext.kind.res),
		)

	def read_value_description(self, env: IdentEnv, parent: Identifier, vd: TT.ValueDescription) -> S.Declaration:
		vid = Identifier.value(parent, parenthesise(vd.id.name))
		doc = self._doc(vid, vd.attributes)
		ty = self.read_core_type(env, vd.type)
		if vd.prim:
			return S.ExternalDecl(vid, doc, ty, list(vd.prim))
		return S.ValueDecl(vid, doc, ty)

	# --- classes ---

	def read_class_type_field(self, env: IdentEnv, parent: Identifier, ctf: TT.ClassTypeField) -> Optional[ClassItem]:
		desc = ctf.desc
		if isinstance(desc, TT.CtfVal):
			vid = Identifier.instance_variable(parent, desc.name)
			return S.InstanceVariable(
				vid, self._doc(vid, ctf.attributes), desc.mutable, desc.virtual, self.read_core_type(env, desc.type)
			)
		if isinstance(desc, TT.CtfMethod):
			mid = Identifier.method(parent, desc.name)
			return S.Method(
				mid, self._doc(mid, ctf.attributes), desc.private, desc.virtual, self.read_core_type(env, desc.type)
			)
		if isinstance(desc, TT.CtfConstraint):
			return S.Constraint(self.read_core_type(env, desc.left), self.read_core_type(env, desc.right))
		if isinstance(desc, TT.CtfInherit):
			return S.Inherit(self.read_class_signature(env, parent, desc.type))
		if isinstance(desc, TT.CtfAttribute):
			return self.comments.read_comment(parent, desc.attribute)
		raise NotImplementedError(f"No typed-tree reader for class field {type(desc).__name__}")

	def read_self_type(self, env: IdentEnv, ty: TT.TCoreType) -> Optional[T.TypeExpr]:
		if isinstance(ty, TT.TAny):
			return None
		return self.read_core_type(env, ty)

	def read_class_signature(self, env: IdentEnv, parent: Identifier, cty: TT.TClassType) -> S.ClassTypeExpression:
		"""Class type in a position where only a constructor or a signature may appear."""
		if isinstance(cty, TT.CtyConstr):
			return S.CtConstr(read_class_type_path(env, cty.path), [self.read_core_type(env, t) for t in cty.args])
		if isinstance(cty, TT.CtySignature):
			items: List[ClassItem] = []
			for ctf in cty.signature.fields:
				item = self.read_class_type_field(env, parent, ctf)
				if item is not None:
					items.append(item)
			return S.CtSignature(self.read_self_type(env, cty.signature.self_type), items)
		if isinstance(cty, TT.CtyArrow):
			raise AssertionError("class arrow inside a class signature (front-end bug)")
		if isinstance(cty, TT.CtyOpen):
			raise AssertionError("local open inside a class signature (front-end bug)")
		raise NotImplementedError(f"No typed-tree reader for class type {type(cty).__name__}")

	def read_class_type(self, env: IdentEnv, parent: Identifier, cty: TT.TClassType) -> S.ClassDeclType:
		"""Declared type of a class: arrows are kept, local opens are transparent."""
		if isinstance(cty, TT.CtyArrow):
			return S.ClassArrow(
				read_label(cty.label),
				self.read_core_type(env, cty.arg),
				self.read_class_type(env, parent, cty.res),
			)
		if isinstance(cty, TT.CtyOpen):
			return self.read_class_type(env, parent, cty.body)
		return S.ClassTypeOf(self.read_class_signature(env, parent, cty))

	def read_class_description(self, env: IdentEnv, parent: Identifier, cld: TT.ClassDescription) -> S.ClassDecl:
		cid = Identifier.class_(parent, cld.id_class.name)
		return S.ClassDecl(
			cid,
			self._doc(cid, cld.attributes),
			cld.virtual,
			[self.read_type_parameter(p) for p in cld.params],
			self.read_class_type(env, cid, cld.expr),
		)

	def read_class_type_declaration(self, env: IdentEnv, parent: Identifier, cltd: TT.ClassTypeDeclaration) -> S.ClassTypeDecl:
		ctid = Identifier.class_type(parent, cltd.id_class_type.name)
		return S.ClassTypeDecl(
			ctid,
			self._doc(ctid, cltd.attributes),
			cltd.virtual,
			[self.read_type_parameter(p) for p in cltd.params],
			self.read_class_signature(env, ctid, cltd.expr),
		)

	# --- module types ---

	def read_module_type(self, env: IdentEnv, parent: Identifier, mty: TT.TModuleType) -> S.ModuleTypeExpr:
		return self._dispatch("mty", mty)(env, parent, mty)

	def visit_mty_MtyIdent(self, env: IdentEnv, parent: Identifier, mty: TT.MtyIdent) -> S.ModuleTypeExpr:
		return S.MtPath(read_module_type_path(env, mty.path))

	def visit_mty_MtySignature(self, env: IdentEnv, parent: Identifier, mty: TT.MtySignature) -> S.ModuleTypeExpr:
		return S.MtSignature(self.read_signature(env, parent, mty.signature))

	def visit_mty_MtyFunctor(self, env: IdentEnv, parent: Identifier, mty: TT.MtyFunctor) -> S.ModuleTypeExpr:
		parameter: Optional[S.FunctorParameter] = None
		result_env = env
		if mty.param is not None and mty.param_id is not None:
			param_id, result_env = env.add_parameter(parent, mty.param_id)
			expr = self.read_module_type(env, param_id, mty.param)
			expansion = S.Expansion.ALREADY_A_SIG if isinstance(expr, S.MtSignature) else None
			parameter = S.FunctorParameter(param_id, expr, expansion)
		result = self.read_module_type(result_env, Identifier.functor_result(parent), mty.result)
		return S.MtFunctor(parameter, result)

	def visit_mty_MtyWith(self, env: IdentEnv, parent: Identifier, mty: TT.MtyWith) -> S.ModuleTypeExpr:
		body = self.read_module_type(env, parent, mty.body)
		return S.MtWith(body, [self.read_with_constraint(env, item) for item in mty.constraints])

	def visit_mty_MtyTypeof(self, env: IdentEnv, parent: Identifier, mty: TT.MtyTypeof) -> S.ModuleTypeExpr:
		desc = mty.expr.desc
		if isinstance(desc, TT.ModIdent):
			return S.MtTypeOf(S.DeclAlias(read_module_path(env, desc.path)))
		logger.debug("module type of %s under %s: using the compiled module type", type(desc).__name__, parent)
		return S.MtTypeOf(S.DeclModuleType(self.compiled.read_module_type(env, parent, mty.expr.mod_type)))

	def visit_mty_MtyAlias(self, env: IdentEnv, parent: Identifier, mty: TT.MtyAlias) -> S.ModuleTypeExpr:
		raise AssertionError("module alias used as a module type (front-end bug)")

	def read_with_constraint(self, env: IdentEnv, item: TT.WithItem) -> S.Substitution:
		constraint = item.constraint
		if isinstance(constraint, TT.WithType):
			return S.TypeEq(read_type_fragment(item.fragment), self.read_type_equation(env, constraint.decl))
		if isinstance(constraint, TT.WithModule):
			return S.ModuleEq(read_module_fragment(item.fragment), S.DeclAlias(read_module_path(env, constraint.path)))
		if isinstance(constraint, TT.WithTypeSubst):
			return self._read_type_subst(env, item.fragment, constraint.decl)
		if isinstance(constraint, TT.WithModSubst):
			return S.ModuleSubst(read_module_fragment(item.fragment), read_module_path(env, constraint.path))
		raise NotImplementedError(f"No typed-tree reader for constraint {type(constraint).__name__}")

	def _read_type_subst(self, env: IdentEnv, fragment: Longident, decl: TT.TypeDeclaration) -> S.TypeSubst:
		params: List[str] = []
		for ty, _variance in decl.params:
			if not isinstance(ty, TT.TVar):
				raise AssertionError(f"type substitution parameter is not a variable: {ty!r} (front-end bug)")
			params.append(ty.name)
		if not isinstance(decl.manifest, TT.TConstr):
			raise AssertionError(f"type substitution '{decl.id.name}' without a constructor manifest (front-end bug)")
		return S.TypeSubst(read_type_fragment(fragment), params, read_type_path(env, decl.manifest.path))

	# --- modules ---

	def read_module_type_declaration(self, env: IdentEnv, parent: Identifier, mtd: TT.ModuleTypeDeclaration) -> S.ModuleTypeDecl:
		mtid = Identifier.module_type(parent, mtd.id.name)
		doc = self._doc(mtid, mtd.attributes)
		expr = None if mtd.type is None else self.read_module_type(env, mtid, mtd.type)
		expansion = S.Expansion.ALREADY_A_SIG if isinstance(expr, S.MtSignature) else None
		return S.ModuleTypeDecl(mtid, doc, expr, expansion)

	def read_module_declaration(self, env: IdentEnv, parent: Identifier, md: TT.ModuleDeclaration) -> S.ModuleDecl:
		mid = Identifier.module(parent, md.id.name)
		doc = self._doc(mid, md.attributes)
		canonical = read_canonical(doc)
		decl: S.ModuleDeclType
		if isinstance(md.type, TT.MtyAlias):
			decl = S.DeclAlias(read_module_path(env, md.type.path))
		else:
			decl = S.DeclModuleType(self.read_module_type(env, mid, md.type))
		hidden = False if canonical is not None else is_hidden(md.id.name, self.config)
		expansion = None
		if isinstance(decl, S.DeclModuleType) and isinstance(decl.expr, S.MtSignature):
			expansion = S.Expansion.ALREADY_A_SIG
		return S.ModuleDecl(mid, doc, decl, canonical, hidden, expansion)

	def read_include(self, env: IdentEnv, parent: Identifier, incl: TT.IncludeDescription) -> S.IncludeDecl:
		doc = self._doc(parent, incl.attributes)
		expr = self.read_module_type(env, parent, incl.mod)
		content = self.compiled.read_signature(env, parent, list(incl.type))
		return S.IncludeDecl(parent, doc, S.DeclModuleType(expr), S.IncludeExpansion(content, resolved=False))

	# --- signatures ---

	def _with_comments(self, parent: Identifier, attributes: List[Attribute], decl: S.Declaration) -> List[S.SignatureItem]:
		"""A group member preceded by the floating comments attached to it."""
		items: List[S.SignatureItem] = list(self.comments.read_comments(parent, attributes))
		items.append(decl)
		return items

	def read_signature_item(self, env: IdentEnv, parent: Identifier, item: TT.SignatureItem) -> List[S.SignatureItem]:
		return self._dispatch("item", item)(env, parent, item)

	def visit_item_SigValue(self, env: IdentEnv, parent: Identifier, item: TT.SigValue) -> List[S.SignatureItem]:
		return [self.read_value_description(env, parent, item.decl)]

	def visit_item_SigType(self, env: IdentEnv, parent: Identifier, item: TT.SigType) -> List[S.SignatureItem]:
		out: List[S.SignatureItem] = []
		for decl in item.decls:
			out.extend(self._with_comments(parent, decl.attributes, self.read_type_declaration(env, parent, decl)))
		return out

	def visit_item_SigTypext(self, env: IdentEnv, parent: Identifier, item: TT.SigTypext) -> List[S.SignatureItem]:
		return [self.read_type_extension(env, parent, item.ext)]

	def visit_item_SigException(self, env: IdentEnv, parent: Identifier, item: TT.SigException) -> List[S.SignatureItem]:
		return [self.read_exception(env, parent, item.ext)]

	def visit_item_SigModule(self, env: IdentEnv, parent: Identifier, item: TT.SigModule) -> List[S.SignatureItem]:
		return [self.read_module_declaration(env, parent, item.decl)]

	def visit_item_SigRecmodule(self, env: IdentEnv, parent: Identifier, item: TT.SigRecmodule) -> List[S.SignatureItem]:
		# Group members are already bound by `add_signature_tree_items`.
		out: List[S.SignatureItem] = []
		for decl in item.decls:
			out.extend(self._with_comments(parent, decl.attributes, self.read_module_declaration(env, parent, decl)))
		return out

	def visit_item_SigModtype(self, env: IdentEnv, parent: Identifier, item: TT.SigModtype) -> List[S.SignatureItem]:
		return [self.read_module_type_declaration(env, parent, item.decl)]

	def visit_item_SigOpen(self, env: IdentEnv, parent: Identifier, item: TT.SigOpen) -> List[S.SignatureItem]:
		return []

	def visit_item_SigInclude(self, env: IdentEnv, parent: Identifier, item: TT.SigInclude) -> List[S.SignatureItem]:
		return [self.read_include(env, parent, item.incl)]

	def visit_item_SigClass(self, env: IdentEnv, parent: Identifier, item: TT.SigClass) -> List[S.SignatureItem]:
		out: List[S.SignatureItem] = []
		for cld in item.decls:
			out.extend(self._with_comments(parent, cld.attributes, self.read_class_description(env, parent, cld)))
		return out

	def visit_item_SigClassType(self, env: IdentEnv, parent: Identifier, item: TT.SigClassType) -> List[S.SignatureItem]:
		out: List[S.SignatureItem] = []
		for cltd in item.decls:
			out.extend(self._with_comments(parent, cltd.attributes, self.read_class_type_declaration(env, parent, cltd)))
		return out

	def visit_item_SigAttribute(self, env: IdentEnv, parent: Identifier, item: TT.SigAttribute) -> List[S.SignatureItem]:
		comment = self.comments.read_comment(parent, item.attribute)
		return [] if comment is None else [comment]

	def read_signature(self, env: IdentEnv, parent: Identifier, signature: TT.Signature) -> List[S.SignatureItem]:
		"""Read one signature; all of its members are bound before any is read."""
		env = env.add_signature_tree_items(parent, signature)
		out: List[S.SignatureItem] = []
		for item in signature.items:
			out.extend(self.read_signature_item(env, parent, item))
		return out

	def read_interface(
		self,
		root: str,
		name: str,
		signature: TT.Signature,
	) -> Tuple[Identifier, Documentation, List[S.SignatureItem]]:
		"""
		Read a compilation unit's interface.

		Returns `(root identifier, unit documentation, items)`. A leading
		freestanding doc comment becomes the unit documentation instead of the
		first item.
		"""
		root_id = Identifier.root_of(root, name)
		logger.debug("reading interface %s (root %s, %d items)", name, root, len(signature.items))
		items = self.read_signature(IdentEnv.empty().with_root(root_id), root_id, signature)
		doc: Documentation = EMPTY_DOC
		if items and isinstance(items[0], DocComment):
			doc = items[0].doc
			items = items[1:]
		logger.debug("read interface %s: %d items", name, len(items))
		return root_id, doc, items


def read_interface(
	root: str,
	name: str,
	signature: TT.Signature,
	*,
	config: Optional[ReaderConfig] = None,
	compiled: Optional[CompiledSignatureReader] = None,
	comments: Optional[CommentReader] = None,
) -> Tuple[Identifier, Documentation, List[S.SignatureItem]]:
	"""Read a typed interface with the default collaborators (or the given ones)."""
	reader = CmtiReader(
		config if config is not None else DEFAULT_CONFIG,
		compiled=compiled,
		comments=comments,
	)
	return reader.read_interface(root, name, signature)


__all__ = ["CmtiReader", "read_interface"]
