# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Declarations, module-type expressions and class types of the documentation model.

A signature is an ordered list of items; an item is either a `Declaration`
or a freestanding `Comment` (see `sigdoc.model.documentation`). Every
declaration carries its Identifier (except `TypeExtDecl` and `IncludeDecl`,
which declare nothing by themselves) and its extracted documentation.

Expansion:
- `expansion` is `Expansion.ALREADY_A_SIG` when the declared module type is
  syntactically a signature, None otherwise. It is fixed at construction.
- `IncludeDecl.expansion` always carries the realised content with
  `resolved=False`; resolution is the job of a later pass.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple, Union

from sigdoc.core.identifiers import Identifier
from sigdoc.core.paths import DocPath, Fragment
from sigdoc.model.documentation import Comment, Documentation
from sigdoc.model.types import Label, TypeExpr


class Expansion(Enum):
	"""Cached expansion marker of a module, module type or functor parameter."""

	ALREADY_A_SIG = auto()


class Declaration:
	"""Base class for documentation declarations."""
	pass


SignatureItem = Union[Declaration, Comment]


# Type declarations

class Polarity(Enum):
	POS = auto()
	NEG = auto()


@dataclass(frozen=True)
class TypeParam:
	"""A type parameter; `name` is None for `_`."""

	name: Optional[str]
	variance: Optional[Polarity] = None


@dataclass(frozen=True)
class Equation:
	params: List[TypeParam] = field(default_factory=list)
	private: bool = False
	manifest: Optional[TypeExpr] = None
	constraints: List[Tuple[TypeExpr, TypeExpr]] = field(default_factory=list)


@dataclass(frozen=True)
class Field:
	id: Identifier
	doc: Documentation
	mutable: bool
	type: TypeExpr


class ConstructorArgs:
	pass


@dataclass(frozen=True)
class TupleArgs(ConstructorArgs):
	types: List[TypeExpr] = field(default_factory=list)


@dataclass(frozen=True)
class RecordArgs(ConstructorArgs):
	fields: List[Field]


@dataclass(frozen=True)
class Constructor:
	id: Identifier
	doc: Documentation
	args: ConstructorArgs = field(default_factory=TupleArgs)
	res: Optional[TypeExpr] = None


class Representation:
	pass


@dataclass(frozen=True)
class ReprVariant(Representation):
	constructors: List[Constructor]


@dataclass(frozen=True)
class ReprRecord(Representation):
	fields: List[Field]


@dataclass(frozen=True)
class ReprExtensible(Representation):
	pass


@dataclass(frozen=True)
class TypeDecl(Declaration):
	id: Identifier
	doc: Documentation
	equation: Equation
	# None for an abstract type.
	representation: Optional[Representation] = None


@dataclass(frozen=True)
class ExtensionConstructor:
	id: Identifier
	doc: Documentation
	args: ConstructorArgs = field(default_factory=TupleArgs)
	res: Optional[TypeExpr] = None


@dataclass(frozen=True)
class TypeExtDecl(Declaration):
	type_path: DocPath
	doc: Documentation
	type_params: List[TypeParam]
	private: bool
	constructors: List[ExtensionConstructor]


@dataclass(frozen=True)
class ExceptionDecl(Declaration):
	id: Identifier
	doc: Documentation
	args: ConstructorArgs = field(default_factory=TupleArgs)
	res: Optional[TypeExpr] = None


# Values

@dataclass(frozen=True)
class ValueDecl(Declaration):
	id: Identifier
	doc: Documentation
	type: TypeExpr


@dataclass(frozen=True)
class ExternalDecl(Declaration):
	id: Identifier
	doc: Documentation
	type: TypeExpr
	primitives: List[str]


# Module types

class ModuleTypeExpr:
	"""Base class for module-type expressions."""
	pass


class ModuleDeclType:
	"""The declared type of a module: an alias or a module-type expression."""
	pass


@dataclass(frozen=True)
class DeclAlias(ModuleDeclType):
	path: DocPath


@dataclass(frozen=True)
class DeclModuleType(ModuleDeclType):
	expr: ModuleTypeExpr


@dataclass(frozen=True)
class MtPath(ModuleTypeExpr):
	path: DocPath


@dataclass(frozen=True)
class MtSignature(ModuleTypeExpr):
	items: List[SignatureItem]


@dataclass(frozen=True)
class FunctorParameter:
	id: Identifier
	expr: ModuleTypeExpr
	expansion: Optional[Expansion] = None


@dataclass(frozen=True)
class MtFunctor(ModuleTypeExpr):
	"""`functor (X : P) -> R`; `parameter` is None for a generative functor."""
	parameter: Optional[FunctorParameter]
	result: ModuleTypeExpr


class Substitution:
	pass


@dataclass(frozen=True)
class ModuleEq(Substitution):
	fragment: Fragment
	decl: ModuleDeclType


@dataclass(frozen=True)
class TypeEq(Substitution):
	fragment: Fragment
	equation: Equation


@dataclass(frozen=True)
class ModuleSubst(Substitution):
	fragment: Fragment
	path: DocPath


@dataclass(frozen=True)
class TypeSubst(Substitution):
	fragment: Fragment
	params: List[str]
	path: DocPath


@dataclass(frozen=True)
class MtWith(ModuleTypeExpr):
	"""A constrained module type; substitutions keep their source order."""
	body: ModuleTypeExpr
	substitutions: List[Substitution]


@dataclass(frozen=True)
class MtTypeOf(ModuleTypeExpr):
	decl: ModuleDeclType


# Modules

@dataclass(frozen=True)
class ModuleDecl(Declaration):
	id: Identifier
	doc: Documentation
	type: ModuleDeclType
	canonical: Optional[DocPath] = None
	hidden: bool = False
	expansion: Optional[Expansion] = None


@dataclass(frozen=True)
class ModuleTypeDecl(Declaration):
	id: Identifier
	doc: Documentation
	expr: Optional[ModuleTypeExpr] = None
	expansion: Optional[Expansion] = None


@dataclass(frozen=True)
class IncludeExpansion:
	content: List[SignatureItem]
	resolved: bool = False


@dataclass(frozen=True)
class IncludeDecl(Declaration):
	parent: Identifier
	doc: Documentation
	decl: ModuleDeclType
	expansion: IncludeExpansion


# Classes

class ClassTypeExpression:
	"""Base class for class type expressions."""
	pass


@dataclass(frozen=True)
class CtConstr(ClassTypeExpression):
	path: DocPath
	args: List[TypeExpr] = field(default_factory=list)


class ClassSignatureItem:
	pass


@dataclass(frozen=True)
class InstanceVariable(ClassSignatureItem):
	id: Identifier
	doc: Documentation
	mutable: bool
	virtual: bool
	type: TypeExpr


@dataclass(frozen=True)
class Method(ClassSignatureItem):
	id: Identifier
	doc: Documentation
	private: bool
	virtual: bool
	type: TypeExpr


@dataclass(frozen=True)
class Constraint(ClassSignatureItem):
	left: TypeExpr
	right: TypeExpr


@dataclass(frozen=True)
class Inherit(ClassSignatureItem):
	expr: ClassTypeExpression


@dataclass(frozen=True)
class CtSignature(ClassTypeExpression):
	"""`object ('self) ... end`; items may also contain comments."""
	self_type: Optional[TypeExpr]
	items: List[Union[ClassSignatureItem, Comment]]


class ClassDeclType:
	"""The declared type of a class: a class type or an arrow to one."""
	pass


@dataclass(frozen=True)
class ClassTypeOf(ClassDeclType):
	expr: ClassTypeExpression


@dataclass(frozen=True)
class ClassArrow(ClassDeclType):
	label: Optional[Label]
	arg: TypeExpr
	res: ClassDeclType


@dataclass(frozen=True)
class ClassDecl(Declaration):
	id: Identifier
	doc: Documentation
	virtual: bool
	params: List[TypeParam]
	type: ClassDeclType


@dataclass(frozen=True)
class ClassTypeDecl(Declaration):
	id: Identifier
	doc: Documentation
	virtual: bool
	params: List[TypeParam]
	expr: ClassTypeExpression


def declaration_id(item: SignatureItem) -> Optional[Identifier]:
	"""Return the identifier a signature item declares, if it declares one."""
	return getattr(item, "id", None)


__all__ = [
	"Expansion", "Declaration", "SignatureItem",
	"Polarity", "TypeParam", "Equation", "Field", "ConstructorArgs", "TupleArgs",
	"RecordArgs", "Constructor", "Representation", "ReprVariant", "ReprRecord",
	"ReprExtensible", "TypeDecl", "ExtensionConstructor", "TypeExtDecl", "ExceptionDecl",
	"ValueDecl", "ExternalDecl",
	"ModuleTypeExpr", "ModuleDeclType", "DeclAlias", "DeclModuleType", "MtPath",
	"MtSignature", "FunctorParameter", "MtFunctor", "Substitution", "ModuleEq",
	"TypeEq", "ModuleSubst", "TypeSubst", "MtWith", "MtTypeOf",
	"ModuleDecl", "ModuleTypeDecl", "IncludeExpansion", "IncludeDecl",
	"ClassTypeExpression", "CtConstr", "ClassSignatureItem", "InstanceVariable", "Method",
	"Constraint", "Inherit", "CtSignature", "ClassDeclType", "ClassTypeOf",
	"ClassArrow", "ClassDecl", "ClassTypeDecl", "declaration_id",
]
