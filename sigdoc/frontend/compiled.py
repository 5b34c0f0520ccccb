# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Compiled (reduced) signatures.

This is the shape the checker stores in compiled interfaces and attaches to
typed-tree nodes whose content it has already computed (the realised content
of an `include`, the module type of a `module type of` argument). Compared to
the typed tree it has no source syntax: type expressions are plain terms,
there are no floating comments, and type extensions are split into one item
per constructor.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

from sigdoc.frontend.ident import ArgLabel, Attribute, CPath, Ident, Longident


# Type expressions

class CType:
	"""Base class for compiled type expressions."""
	pass


@dataclass
class CVar(CType):
	"""A type variable; `name` is None for an unnamed (`_`) variable."""
	name: Optional[str] = None


@dataclass
class CArrow(CType):
	label: ArgLabel
	arg: CType
	res: CType


@dataclass
class CTuple(CType):
	types: List[CType]


@dataclass
class CConstr(CType):
	path: CPath
	args: List[CType] = field(default_factory=list)


@dataclass
class CObject(CType):
	methods: List[Tuple[str, CType]]
	open: bool = False


class CRowField:
	pass


@dataclass
class CRowTag(CRowField):
	name: str
	constant: bool
	args: List[CType] = field(default_factory=list)


@dataclass
class CRowInherit(CRowField):
	type: CType


@dataclass
class CVariant(CType):
	fields: List[CRowField]
	closed: bool = True
	present: Optional[List[str]] = None


@dataclass
class CUnivar(CType):
	name: str


@dataclass
class CPoly(CType):
	vars: List[str]
	body: CType


@dataclass
class CPackage(CType):
	path: CPath
	fields: List[Tuple[Longident, CType]] = field(default_factory=list)


# Declarations

class CVariance(Enum):
	COVARIANT = auto()
	CONTRAVARIANT = auto()
	INVARIANT = auto()


@dataclass
class CLabel:
	id: Ident
	type: CType
	mutable: bool = False
	attributes: List[Attribute] = field(default_factory=list)


@dataclass
class CConstructor:
	id: Ident
	# Positional arguments, or record labels for an inline record.
	args: List[CType] = field(default_factory=list)
	record: Optional[List[CLabel]] = None
	res: Optional[CType] = None
	attributes: List[Attribute] = field(default_factory=list)


class CTypeKind:
	pass


@dataclass
class CTypeAbstract(CTypeKind):
	pass


@dataclass
class CTypeVariant(CTypeKind):
	constructors: List[CConstructor]


@dataclass
class CTypeRecord(CTypeKind):
	labels: List[CLabel]


@dataclass
class CTypeOpen(CTypeKind):
	pass


@dataclass
class CTypeDecl:
	params: List[CType] = field(default_factory=list)
	variance: List[CVariance] = field(default_factory=list)
	kind: CTypeKind = field(default_factory=CTypeAbstract)
	private: bool = False
	manifest: Optional[CType] = None


class ExtStatus(Enum):
	FIRST = auto()       # first constructor of a `type t += ...`
	NEXT = auto()        # following constructors of the same extension
	EXCEPTION = auto()   # an exception declaration


@dataclass
class CExtension:
	type_path: CPath
	type_params: List[CType] = field(default_factory=list)
	args: List[CType] = field(default_factory=list)
	record: Optional[List[CLabel]] = None
	res: Optional[CType] = None
	private: bool = False


# Module types

class CModuleType:
	"""Base class for compiled module types."""
	pass


@dataclass
class CMtyIdent(CModuleType):
	path: CPath


@dataclass
class CMtySignature(CModuleType):
	items: List["CSignatureItem"] = field(default_factory=list)


@dataclass
class CMtyFunctor(CModuleType):
	param_id: Optional[Ident]
	param: Optional[CModuleType]
	result: CModuleType


@dataclass
class CMtyAlias(CModuleType):
	path: CPath


# Classes

@dataclass
class CClassSignature:
	self_type: Optional[CType] = None
	# (name, mutable, virtual, type)
	vars: List[Tuple[str, bool, bool, CType]] = field(default_factory=list)
	# (name, private, virtual, type)
	methods: List[Tuple[str, bool, bool, CType]] = field(default_factory=list)


class CClassType:
	pass


@dataclass
class CCtyConstr(CClassType):
	path: CPath
	args: List[CType] = field(default_factory=list)


@dataclass
class CCtySignature(CClassType):
	signature: CClassSignature


@dataclass
class CCtyArrow(CClassType):
	label: ArgLabel
	arg: CType
	res: CClassType


@dataclass
class CClassDecl:
	type: CClassType
	params: List[CType] = field(default_factory=list)
	virtual: bool = False
	variance: List[CVariance] = field(default_factory=list)


# Signature items

class CSignatureItem:
	"""Base class for compiled signature items."""
	pass


@dataclass
class CSigValue(CSignatureItem):
	id: Ident
	type: CType
	prims: List[str] = field(default_factory=list)
	attributes: List[Attribute] = field(default_factory=list)


@dataclass
class CSigType(CSignatureItem):
	id: Ident
	decl: CTypeDecl
	attributes: List[Attribute] = field(default_factory=list)


@dataclass
class CSigTypext(CSignatureItem):
	id: Ident
	ext: CExtension
	status: ExtStatus = ExtStatus.FIRST
	attributes: List[Attribute] = field(default_factory=list)


@dataclass
class CSigModule(CSignatureItem):
	id: Ident
	type: CModuleType
	attributes: List[Attribute] = field(default_factory=list)


@dataclass
class CSigModtype(CSignatureItem):
	id: Ident
	type: Optional[CModuleType] = None
	attributes: List[Attribute] = field(default_factory=list)


@dataclass
class CSigClass(CSignatureItem):
	id: Ident
	decl: CClassDecl
	attributes: List[Attribute] = field(default_factory=list)


@dataclass
class CSigClassType(CSignatureItem):
	id: Ident
	decl: CClassDecl
	attributes: List[Attribute] = field(default_factory=list)


__all__ = [
	"CType", "CVar", "CArrow", "CTuple", "CConstr", "CObject",
	"CRowField", "CRowTag", "CRowInherit", "CVariant", "CUnivar", "CPoly", "CPackage",
	"CVariance", "CLabel", "CConstructor", "CTypeKind", "CTypeAbstract",
	"CTypeVariant", "CTypeRecord", "CTypeOpen", "CTypeDecl", "ExtStatus", "CExtension",
	"CModuleType", "CMtyIdent", "CMtySignature", "CMtyFunctor", "CMtyAlias",
	"CClassSignature", "CClassType", "CCtyConstr", "CCtySignature", "CCtyArrow",
	"CClassDecl", "CSignatureItem", "CSigValue", "CSigType", "CSigTypext",
	"CSigModule", "CSigModtype", "CSigClass", "CSigClassType",
]
