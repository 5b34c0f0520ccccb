# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Typed signature tree.

Pipeline placement:
  source → front-end (parse + type check) → typed tree (this file) → sigdoc loader → doc model

This is the front-end's view of an interface after type checking: every name
is an `Ident` with a stamp, every reference is a compiler path, and
documentation comments are still raw attributes. The loader never mutates
these nodes.

Guiding rules:
- Core types (`T*`) mirror the surface type syntax after checking.
- Module types (`Mty*`), class types (`Cty*`) and class fields (`Ctf*`) keep
  their own node families.
- Signature items (`Sig*`) keep source order; floating comments are
  `SigAttribute` items.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

from sigdoc.frontend.compiled import CModuleType, CSignatureItem
from sigdoc.frontend.ident import ArgLabel, Attribute, CPath, Ident, Longident


class ClosedFlag(Enum):
	CLOSED = auto()
	OPEN = auto()


class Variance(Enum):
	COVARIANT = auto()
	CONTRAVARIANT = auto()
	INVARIANT = auto()


# Core types

class TCoreType:
	"""Base class for typed-tree core types."""
	pass


@dataclass
class TAny(TCoreType):
	pass


@dataclass
class TVar(TCoreType):
	name: str


@dataclass
class TArrow(TCoreType):
	label: ArgLabel
	arg: TCoreType
	res: TCoreType


@dataclass
class TTuple(TCoreType):
	types: List[TCoreType]


@dataclass
class TConstr(TCoreType):
	path: CPath
	args: List[TCoreType] = field(default_factory=list)


class TObjectField:
	pass


@dataclass
class OTTag(TObjectField):
	name: str
	type: TCoreType
	attributes: List[Attribute] = field(default_factory=list)


@dataclass
class OTInherit(TObjectField):
	type: TCoreType


@dataclass
class TObject(TCoreType):
	fields: List[TObjectField]
	closed: ClosedFlag = ClosedFlag.CLOSED


@dataclass
class TClass(TCoreType):
	"""`#c` class type reference."""
	path: CPath
	args: List[TCoreType] = field(default_factory=list)


@dataclass
class TAlias(TCoreType):
	type: TCoreType
	name: str


class TRowField:
	pass


@dataclass
class RTag(TRowField):
	name: str
	constant: bool
	args: List[TCoreType] = field(default_factory=list)
	attributes: List[Attribute] = field(default_factory=list)


@dataclass
class RInherit(TRowField):
	type: TCoreType


@dataclass
class TVariant(TCoreType):
	fields: List[TRowField]
	closed: ClosedFlag = ClosedFlag.CLOSED
	# Tags that must be present (`[< a | b > a]`); None when unrestricted.
	present: Optional[List[str]] = None


@dataclass
class TPoly(TCoreType):
	vars: List[str]
	type: TCoreType


@dataclass
class TPackage(TCoreType):
	path: CPath
	fields: List[Tuple[Longident, TCoreType]] = field(default_factory=list)


# Type declarations

@dataclass
class LabelDeclaration:
	id: Ident
	type: TCoreType
	mutable: bool = False
	attributes: List[Attribute] = field(default_factory=list)


class ConstructorArguments:
	pass


@dataclass
class CstrTuple(ConstructorArguments):
	types: List[TCoreType] = field(default_factory=list)


@dataclass
class CstrRecord(ConstructorArguments):
	labels: List[LabelDeclaration]


@dataclass
class ConstructorDeclaration:
	id: Ident
	args: ConstructorArguments = field(default_factory=CstrTuple)
	res: Optional[TCoreType] = None
	attributes: List[Attribute] = field(default_factory=list)


class TypeKind:
	pass


@dataclass
class TypeAbstract(TypeKind):
	pass


@dataclass
class TypeVariant(TypeKind):
	constructors: List[ConstructorDeclaration]


@dataclass
class TypeRecord(TypeKind):
	labels: List[LabelDeclaration]


@dataclass
class TypeOpen(TypeKind):
	pass


TypeParam = Tuple[TCoreType, Variance]


@dataclass
class TypeDeclaration:
	id: Ident
	params: List[TypeParam] = field(default_factory=list)
	# Extra `constraint 'a = ...` equations.
	cstrs: List[Tuple[TCoreType, TCoreType]] = field(default_factory=list)
	kind: TypeKind = field(default_factory=TypeAbstract)
	private: bool = False
	manifest: Optional[TCoreType] = None
	attributes: List[Attribute] = field(default_factory=list)


class ExtensionConstructorKind:
	pass


@dataclass
class ExtDecl(ExtensionConstructorKind):
	args: ConstructorArguments = field(default_factory=CstrTuple)
	res: Optional[TCoreType] = None


@dataclass
class ExtRebind(ExtensionConstructorKind):
	"""`type t += A = B`; never valid in a signature."""
	path: CPath


@dataclass
class ExtensionConstructor:
	id: Ident
	kind: ExtensionConstructorKind = field(default_factory=ExtDecl)
	attributes: List[Attribute] = field(default_factory=list)


@dataclass
class TypeExtension:
	path: CPath
	constructors: List[ExtensionConstructor]
	params: List[TypeParam] = field(default_factory=list)
	private: bool = False
	attributes: List[Attribute] = field(default_factory=list)


@dataclass
class ValueDescription:
	id: Ident
	type: TCoreType
	# Primitive names of an `external`; empty for a plain `val`.
	prim: List[str] = field(default_factory=list)
	attributes: List[Attribute] = field(default_factory=list)


# Module expressions (only as the argument of `module type of`)

class ModuleExprDesc:
	pass


@dataclass
class ModIdent(ModuleExprDesc):
	path: CPath


@dataclass
class ModStructure(ModuleExprDesc):
	pass


@dataclass
class ModFunctor(ModuleExprDesc):
	pass


@dataclass
class ModApply(ModuleExprDesc):
	functor: ModuleExprDesc
	arg: ModuleExprDesc


@dataclass
class ModConstraint(ModuleExprDesc):
	body: ModuleExprDesc


@dataclass
class ModUnpack(ModuleExprDesc):
	pass


@dataclass
class ModuleExpr:
	desc: ModuleExprDesc
	# The checker's compiled module type for this expression.
	mod_type: CModuleType


# Module types

class TModuleType:
	"""Base class for typed-tree module types."""
	pass


@dataclass
class MtyIdent(TModuleType):
	path: CPath


@dataclass
class MtySignature(TModuleType):
	signature: "Signature"


@dataclass
class MtyFunctor(TModuleType):
	"""`functor (X : P) -> R`; `param` is None for a generative functor `()`."""
	param_id: Optional[Ident]
	param: Optional[TModuleType]
	result: TModuleType


class WithConstraint:
	pass


@dataclass
class WithType(WithConstraint):
	decl: TypeDeclaration


@dataclass
class WithModule(WithConstraint):
	path: CPath


@dataclass
class WithTypeSubst(WithConstraint):
	decl: TypeDeclaration


@dataclass
class WithModSubst(WithConstraint):
	path: CPath


@dataclass
class WithItem:
	"""One `with` constraint: the constrained path, the source fragment and the constraint."""
	path: CPath
	fragment: Longident
	constraint: WithConstraint


@dataclass
class MtyWith(TModuleType):
	body: TModuleType
	constraints: List[WithItem]


@dataclass
class MtyTypeof(TModuleType):
	expr: ModuleExpr


@dataclass
class MtyAlias(TModuleType):
	"""`module M = N`; only valid as the type of a module declaration."""
	path: CPath


@dataclass
class ModuleDeclaration:
	id: Ident
	type: TModuleType
	attributes: List[Attribute] = field(default_factory=list)


@dataclass
class ModuleTypeDeclaration:
	id: Ident
	type: Optional[TModuleType] = None
	attributes: List[Attribute] = field(default_factory=list)


@dataclass
class IncludeDescription:
	mod: TModuleType
	# Realised content of the included module type, as computed by the checker.
	type: List[CSignatureItem] = field(default_factory=list)
	attributes: List[Attribute] = field(default_factory=list)


# Classes

class TClassType:
	"""Base class for typed-tree class types."""
	pass


@dataclass
class CtyConstr(TClassType):
	path: CPath
	args: List[TCoreType] = field(default_factory=list)


@dataclass
class ClassSignature:
	self_type: TCoreType
	fields: List["ClassTypeField"] = field(default_factory=list)


@dataclass
class CtySignature(TClassType):
	signature: ClassSignature


@dataclass
class CtyArrow(TClassType):
	label: ArgLabel
	arg: TCoreType
	res: TClassType


@dataclass
class CtyOpen(TClassType):
	"""`let open M in cty`."""
	path: CPath
	body: TClassType


class ClassTypeFieldDesc:
	pass


@dataclass
class CtfInherit(ClassTypeFieldDesc):
	type: TClassType


@dataclass
class CtfVal(ClassTypeFieldDesc):
	name: str
	type: TCoreType
	mutable: bool = False
	virtual: bool = False


@dataclass
class CtfMethod(ClassTypeFieldDesc):
	name: str
	type: TCoreType
	private: bool = False
	virtual: bool = False


@dataclass
class CtfConstraint(ClassTypeFieldDesc):
	left: TCoreType
	right: TCoreType


@dataclass
class CtfAttribute(ClassTypeFieldDesc):
	attribute: Attribute


@dataclass
class ClassTypeField:
	desc: ClassTypeFieldDesc
	attributes: List[Attribute] = field(default_factory=list)


@dataclass
class ClassDescription:
	"""
	`class c : ...` in a signature.

	A class binds four idents: the class itself, its class type, its object
	type `c` and the open object type `#c`.
	"""
	id_class: Ident
	expr: TClassType
	params: List[TypeParam] = field(default_factory=list)
	virtual: bool = False
	id_class_type: Optional[Ident] = None
	id_object: Optional[Ident] = None
	id_typehash: Optional[Ident] = None
	attributes: List[Attribute] = field(default_factory=list)


@dataclass
class ClassTypeDeclaration:
	"""`class type c = ...`; binds the class type, its object type and `#c`."""
	id_class_type: Ident
	expr: TClassType
	params: List[TypeParam] = field(default_factory=list)
	virtual: bool = False
	id_object: Optional[Ident] = None
	id_typehash: Optional[Ident] = None
	attributes: List[Attribute] = field(default_factory=list)


# Signature items

class SignatureItem:
	"""Base class for typed-tree signature items."""
	pass


@dataclass
class SigValue(SignatureItem):
	decl: ValueDescription


@dataclass
class SigType(SignatureItem):
	decls: List[TypeDeclaration]
	recursive: bool = True


@dataclass
class SigTypext(SignatureItem):
	ext: TypeExtension


@dataclass
class SigException(SignatureItem):
	ext: ExtensionConstructor


@dataclass
class SigModule(SignatureItem):
	decl: ModuleDeclaration


@dataclass
class SigRecmodule(SignatureItem):
	decls: List[ModuleDeclaration]


@dataclass
class SigModtype(SignatureItem):
	decl: ModuleTypeDeclaration


@dataclass
class SigOpen(SignatureItem):
	path: CPath


@dataclass
class SigInclude(SignatureItem):
	incl: IncludeDescription


@dataclass
class SigClass(SignatureItem):
	decls: List[ClassDescription]


@dataclass
class SigClassType(SignatureItem):
	decls: List[ClassTypeDeclaration]


@dataclass
class SigAttribute(SignatureItem):
	attribute: Attribute


@dataclass
class Signature:
	items: List[SignatureItem] = field(default_factory=list)


__all__ = [
	"ClosedFlag", "Variance",
	"TCoreType", "TAny", "TVar", "TArrow", "TTuple", "TConstr",
	"TObjectField", "OTTag", "OTInherit", "TObject", "TClass", "TAlias",
	"TRowField", "RTag", "RInherit", "TVariant", "TPoly", "TPackage",
	"LabelDeclaration", "ConstructorArguments", "CstrTuple", "CstrRecord",
	"ConstructorDeclaration", "TypeKind", "TypeAbstract", "TypeVariant",
	"TypeRecord", "TypeOpen", "TypeParam", "TypeDeclaration",
	"ExtensionConstructorKind", "ExtDecl", "ExtRebind", "ExtensionConstructor",
	"TypeExtension", "ValueDescription",
	"ModuleExprDesc", "ModIdent", "ModStructure", "ModFunctor", "ModApply",
	"ModConstraint", "ModUnpack", "ModuleExpr",
	"TModuleType", "MtyIdent", "MtySignature", "MtyFunctor", "WithConstraint",
	"WithType", "WithModule", "WithTypeSubst", "WithModSubst", "WithItem",
	"MtyWith", "MtyTypeof", "MtyAlias",
	"ModuleDeclaration", "ModuleTypeDeclaration", "IncludeDescription",
	"TClassType", "CtyConstr", "ClassSignature", "CtySignature", "CtyArrow", "CtyOpen",
	"ClassTypeFieldDesc", "CtfInherit", "CtfVal", "CtfMethod", "CtfConstraint",
	"CtfAttribute", "ClassTypeField", "ClassDescription", "ClassTypeDeclaration",
	"SignatureItem", "SigValue", "SigType", "SigTypext", "SigException",
	"SigModule", "SigRecmodule", "SigModtype", "SigOpen", "SigInclude",
	"SigClass", "SigClassType", "SigAttribute", "Signature",
]
