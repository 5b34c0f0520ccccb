# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Debug printer for the documentation model.

Renders declarations in interface-like syntax, one line per declaration,
nested signatures indented by two spaces. Resolved references print the name
of the identifier they point at. This is for debugging and test assertions,
not a documentation renderer.
"""

from __future__ import annotations

from typing import Iterable, List, Optional

from sigdoc.core.paths import format_path
from sigdoc.model import documentation as D
from sigdoc.model import signature as S
from sigdoc.model import types as T

_INDENT = "  "


def format_label(label: Optional[T.Label]) -> str:
	if isinstance(label, T.NamedLabel):
		return f"{label.name}:"
	if isinstance(label, T.OptionalLabel):
		return f"?{label.name}:"
	return ""


def _atom(ty: T.TypeExpr) -> str:
	text = format_type(ty)
	if isinstance(ty, (T.ArrowType, T.TupleType, T.PolyType, T.AliasType)):
		return f"({text})"
	return text


def _args(args: List[T.TypeExpr]) -> str:
	if not args:
		return ""
	if len(args) == 1:
		return f"{_atom(args[0])} "
	return "(" + ", ".join(format_type(a) for a in args) + ") "


def format_type(ty: T.TypeExpr) -> str:
	if isinstance(ty, T.AnyType):
		return "_"
	if isinstance(ty, T.VarType):
		return f"'{ty.name}"
	if isinstance(ty, T.ArrowType):
		arg = _atom(ty.arg) if isinstance(ty.arg, (T.ArrowType, T.PolyType, T.AliasType)) else format_type(ty.arg)
		return f"{format_label(ty.label)}{arg} -> {format_type(ty.res)}"
	if isinstance(ty, T.TupleType):
		return " * ".join(_atom(t) for t in ty.types)
	if isinstance(ty, T.ConstrType):
		return f"{_args(ty.args)}{format_path(ty.path)}"
	if isinstance(ty, T.PolyVariantType):
		return _format_variant(ty)
	if isinstance(ty, T.ObjectType):
		fields = []
		for fld in ty.fields:
			if isinstance(fld, T.ObjectMethod):
				fields.append(f"{fld.name} : {format_type(fld.type)}")
			else:
				fields.append(format_type(fld.type))
		if ty.open_:
			fields.append("..")
		return "< " + "; ".join(fields) + " >" if fields else "< >"
	if isinstance(ty, T.ClassTypeExpr):
		return f"{_args(ty.args)}#{format_path(ty.path)}"
	if isinstance(ty, T.AliasType):
		return f"{_atom(ty.type)} as '{ty.name}"
	if isinstance(ty, T.PolyType):
		names = " ".join(f"'{v}" for v in ty.vars)
		return f"{names}. {format_type(ty.body)}"
	if isinstance(ty, T.PackageType):
		text = f"module {format_path(ty.path)}"
		if ty.substitutions:
			text += " with " + " and ".join(f"type {frag} = {format_type(t)}" for frag, t in ty.substitutions)
		return f"({text})"
	return "<invalid type>"


def _format_variant(ty: T.PolyVariantType) -> str:
	elems = []
	for elem in ty.elements:
		if isinstance(elem, T.VariantConstructor):
			if elem.constant and not elem.args:
				elems.append(f"`{elem.name}")
			else:
				args = " & ".join(format_type(a) for a in elem.args)
				elems.append(f"`{elem.name} of {'& ' if elem.constant else ''}{args}")
		else:
			elems.append(format_type(elem.type))
	body = " | ".join(elems)
	if ty.kind is T.VariantKind.OPEN:
		return f"[> {body} ]"
	if ty.kind is T.VariantKind.CLOSED:
		present = ""
		if ty.closed_tags:
			present = " > " + " ".join(f"`{tag}" for tag in ty.closed_tags)
		return f"[< {body}{present} ]"
	return f"[ {body} ]"


def _format_params(params: List[S.TypeParam]) -> str:
	def one(p: S.TypeParam) -> str:
		sign = "+" if p.variance is S.Polarity.POS else "-" if p.variance is S.Polarity.NEG else ""
		return sign + ("_" if p.name is None else f"'{p.name}")

	if not params:
		return ""
	if len(params) == 1:
		return one(params[0]) + " "
	return "(" + ", ".join(one(p) for p in params) + ") "


def _format_cstr_args(args: S.ConstructorArgs, res: Optional[T.TypeExpr]) -> str:
	text = ""
	if isinstance(args, S.TupleArgs) and args.types:
		text = " * ".join(_atom(t) for t in args.types)
	elif isinstance(args, S.RecordArgs):
		text = _format_fields(args.fields)
	if res is not None:
		return f" : {text} -> {format_type(res)}" if text else f" : {format_type(res)}"
	return f" of {text}" if text else ""


def _format_fields(fields: List[S.Field]) -> str:
	parts = [f"{'mutable ' if f.mutable else ''}{f.id.name} : {format_type(f.type)}" for f in fields]
	return "{ " + "; ".join(parts) + " }"


def format_equation(name: str, eq: S.Equation, repr_: Optional[S.Representation] = None) -> str:
	text = f"{_format_params(eq.params)}{name}"
	private = "private " if eq.private else ""
	if eq.manifest is not None:
		text += f" = {private}{format_type(eq.manifest)}"
		private = ""
	if isinstance(repr_, S.ReprVariant):
		cstrs = " | ".join(c.id.name + _format_cstr_args(c.args, c.res) for c in repr_.constructors)
		text += f" = {private}{cstrs}"
	elif isinstance(repr_, S.ReprRecord):
		text += f" = {private}{_format_fields(repr_.fields)}"
	elif isinstance(repr_, S.ReprExtensible):
		text += f" = {private}.."
	for left, right in eq.constraints:
		text += f" constraint {format_type(left)} = {format_type(right)}"
	return text


def _format_decl_type(decl: S.ModuleDeclType) -> str:
	if isinstance(decl, S.DeclAlias):
		return format_path(decl.path)
	return format_module_type(decl.expr)


def _format_subst(sub: S.Substitution) -> str:
	if isinstance(sub, S.TypeEq):
		return "type " + format_equation(str(sub.fragment), sub.equation)
	if isinstance(sub, S.ModuleEq):
		return f"module {sub.fragment} = {_format_decl_type(sub.decl)}"
	if isinstance(sub, S.TypeSubst):
		params = _format_params([S.TypeParam(p) for p in sub.params])
		return f"type {params}{sub.fragment} := {_args([T.VarType(p) for p in sub.params])}{format_path(sub.path)}"
	if isinstance(sub, S.ModuleSubst):
		return f"module {sub.fragment} := {format_path(sub.path)}"
	return "<invalid substitution>"


def format_module_type(expr: S.ModuleTypeExpr) -> str:
	"""Single-line rendering of a module-type expression."""
	if isinstance(expr, S.MtPath):
		return format_path(expr.path)
	if isinstance(expr, S.MtSignature):
		inner = " ".join(line.strip() for line in _format_items(expr.items, 0))
		return f"sig {inner} end" if inner else "sig end"
	if isinstance(expr, S.MtFunctor):
		if expr.parameter is None:
			return f"functor () -> {format_module_type(expr.result)}"
		param = expr.parameter
		return f"functor ({param.id.name} : {format_module_type(param.expr)}) -> {format_module_type(expr.result)}"
	if isinstance(expr, S.MtWith):
		subs = " and ".join(_format_subst(s) for s in expr.substitutions)
		return f"{format_module_type(expr.body)} with {subs}"
	if isinstance(expr, S.MtTypeOf):
		return f"module type of {_format_decl_type(expr.decl)}"
	return "<invalid module type>"


def _module_lines(head: str, expr: S.ModuleTypeExpr, depth: int) -> List[str]:
	pad = _INDENT * depth
	if isinstance(expr, S.MtSignature):
		return [f"{pad}{head} sig"] + _format_items(expr.items, depth + 1) + [f"{pad}end"]
	if isinstance(expr, S.MtFunctor):
		if expr.parameter is None:
			return _module_lines(f"{head} functor () ->", expr.result, depth)
		param = expr.parameter
		return _module_lines(f"{head} functor ({param.id.name} : {format_module_type(param.expr)}) ->", expr.result, depth)
	return [f"{pad}{head} {format_module_type(expr)}"]


def format_text(text: Iterable[D.TextElement]) -> str:
	"""Plain-text rendering of doc text (markup dropped)."""
	out: List[str] = []
	for elem in text:
		if isinstance(elem, (D.Raw, D.Verbatim, D.PreCode)):
			out.append(elem.text)
		elif isinstance(elem, D.Code):
			out.append(f"[{elem.text}]")
		elif isinstance(elem, (D.Style, D.Title)):
			out.append(format_text(elem.text))
		elif isinstance(elem, D.Reference):
			out.append(format_text(elem.text) if elem.text else elem.target)
		elif isinstance(elem, D.ListBlock):
			out.append(" ".join(format_text(item) for item in elem.items))
		elif isinstance(elem, D.Newline):
			out.append(" ")
	return "".join(out)


def _format_comment(comment: D.Comment) -> str:
	if isinstance(comment, D.StopComment):
		return "(**/**)"
	doc = comment.doc
	if isinstance(doc, D.DocError):
		return f"(** <error: {doc.message}> *)"
	return f"(** {format_text(doc.body.text)} *)"


def _class_type_lines(head: str, expr: S.ClassTypeExpression, depth: int) -> List[str]:
	pad = _INDENT * depth
	if isinstance(expr, S.CtConstr):
		return [f"{pad}{head} {_args(expr.args)}{format_path(expr.path)}"]
	self_part = f" ({format_type(expr.self_type)})" if expr.self_type is not None else ""
	lines = [f"{pad}{head} object{self_part}"]
	inner = _INDENT * (depth + 1)
	for item in expr.items:
		if isinstance(item, S.InstanceVariable):
			flags = ("mutable " if item.mutable else "") + ("virtual " if item.virtual else "")
			lines.append(f"{inner}val {flags}{item.id.name} : {format_type(item.type)}")
		elif isinstance(item, S.Method):
			flags = ("private " if item.private else "") + ("virtual " if item.virtual else "")
			lines.append(f"{inner}method {flags}{item.id.name} : {format_type(item.type)}")
		elif isinstance(item, S.Constraint):
			lines.append(f"{inner}constraint {format_type(item.left)} = {format_type(item.right)}")
		elif isinstance(item, S.Inherit):
			lines.extend(_class_type_lines("inherit", item.expr, depth + 1))
		else:
			lines.append(inner + _format_comment(item))
	lines.append(f"{pad}end")
	return lines


def _class_decl_lines(head: str, decl: S.ClassDeclType, depth: int) -> List[str]:
	if isinstance(decl, S.ClassArrow):
		arg = format_label(decl.label) + _atom(decl.arg)
		return _class_decl_lines(f"{head} {arg} ->", decl.res, depth)
	return _class_type_lines(head, decl.expr, depth)


def _format_item(item: S.SignatureItem, depth: int) -> List[str]:
	pad = _INDENT * depth
	if isinstance(item, S.ValueDecl):
		return [f"{pad}val {item.id.name} : {format_type(item.type)}"]
	if isinstance(item, S.ExternalDecl):
		prims = " ".join(f'"{p}"' for p in item.primitives)
		return [f"{pad}external {item.id.name} : {format_type(item.type)} = {prims}"]
	if isinstance(item, S.TypeDecl):
		return [f"{pad}type {format_equation(item.id.name, item.equation, item.representation)}"]
	if isinstance(item, S.TypeExtDecl):
		cstrs = " | ".join(c.id.name + _format_cstr_args(c.args, c.res) for c in item.constructors)
		private = "private " if item.private else ""
		return [f"{pad}type {_format_params(item.type_params)}{format_path(item.type_path)} += {private}{cstrs}"]
	if isinstance(item, S.ExceptionDecl):
		return [f"{pad}exception {item.id.name}{_format_cstr_args(item.args, item.res)}"]
	if isinstance(item, S.ModuleDecl):
		if isinstance(item.type, S.DeclAlias):
			return [f"{pad}module {item.id.name} = {format_path(item.type.path)}"]
		return _module_lines(f"module {item.id.name} :", item.type.expr, depth)
	if isinstance(item, S.ModuleTypeDecl):
		if item.expr is None:
			return [f"{pad}module type {item.id.name}"]
		return _module_lines(f"module type {item.id.name} =", item.expr, depth)
	if isinstance(item, S.IncludeDecl):
		return [f"{pad}include {_format_decl_type(item.decl)}"]
	if isinstance(item, S.ClassDecl):
		virtual = "virtual " if item.virtual else ""
		params = "[" + ", ".join(_format_params([p]).strip() for p in item.params) + "] " if item.params else ""
		return _class_decl_lines(f"class {virtual}{params}{item.id.name} :", item.type, depth)
	if isinstance(item, S.ClassTypeDecl):
		virtual = "virtual " if item.virtual else ""
		params = "[" + ", ".join(_format_params([p]).strip() for p in item.params) + "] " if item.params else ""
		return _class_type_lines(f"class type {virtual}{params}{item.id.name} =", item.expr, depth)
	if isinstance(item, D.Comment):
		return [pad + _format_comment(item)]
	return [f"{pad}<invalid item>"]


def _format_items(items: Iterable[S.SignatureItem], depth: int) -> List[str]:
	lines: List[str] = []
	for item in items:
		lines.extend(_format_item(item, depth))
	return lines


def format_signature(items: Iterable[S.SignatureItem]) -> str:
	"""Render a signature, one declaration per line."""
	return "\n".join(_format_items(items, 0))


__all__ = [
	"format_label",
	"format_type",
	"format_equation",
	"format_module_type",
	"format_text",
	"format_signature",
]
