# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Type expressions of the documentation model.

Invariant: `PolyType` always has at least one variable; readers collapse an
empty quantifier to its body (see `poly`).
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional, Tuple

from sigdoc.core.paths import DocPath, Fragment


# Argument labels

class Label:
	"""Base class for argument labels (no label is `None`)."""
	pass


@dataclass(frozen=True)
class NamedLabel(Label):
	name: str


@dataclass(frozen=True)
class OptionalLabel(Label):
	name: str


class TypeExpr:
	"""Base class for documentation type expressions."""
	pass


@dataclass(frozen=True)
class AnyType(TypeExpr):
	pass


@dataclass(frozen=True)
class VarType(TypeExpr):
	name: str


@dataclass(frozen=True)
class ArrowType(TypeExpr):
	label: Optional[Label]
	arg: TypeExpr
	res: TypeExpr


@dataclass(frozen=True)
class TupleType(TypeExpr):
	types: List[TypeExpr]


@dataclass(frozen=True)
class ConstrType(TypeExpr):
	path: DocPath
	args: List[TypeExpr] = field(default_factory=list)


class VariantKind(Enum):
	OPEN = auto()     # [> ... ]
	FIXED = auto()    # [ ... ]
	CLOSED = auto()   # [< ... ] (optionally with present tags)


@dataclass(frozen=True)
class VariantConstructor:
	name: str
	constant: bool
	args: List[TypeExpr] = field(default_factory=list)


@dataclass(frozen=True)
class VariantInherit:
	type: TypeExpr


@dataclass(frozen=True)
class PolyVariantType(TypeExpr):
	kind: VariantKind
	elements: List[VariantConstructor | VariantInherit]
	# Present tags; only meaningful when kind is CLOSED.
	closed_tags: List[str] = field(default_factory=list)


@dataclass(frozen=True)
class ObjectMethod:
	name: str
	type: TypeExpr


@dataclass(frozen=True)
class ObjectInherit:
	type: TypeExpr


@dataclass(frozen=True)
class ObjectType(TypeExpr):
	fields: List[ObjectMethod | ObjectInherit]
	open_: bool = False


@dataclass(frozen=True)
class ClassTypeExpr(TypeExpr):
	"""`#c` reference to a class or class type."""
	path: DocPath
	args: List[TypeExpr] = field(default_factory=list)


@dataclass(frozen=True)
class AliasType(TypeExpr):
	type: TypeExpr
	name: str


@dataclass(frozen=True)
class PolyType(TypeExpr):
	vars: List[str]
	body: TypeExpr


@dataclass(frozen=True)
class PackageType(TypeExpr):
	path: DocPath
	substitutions: List[Tuple[Fragment, TypeExpr]] = field(default_factory=list)


def poly(vars: List[str], body: TypeExpr) -> TypeExpr:
	"""Build a universally quantified type, collapsing an empty quantifier."""
	if not vars:
		return body
	return PolyType(list(vars), body)


__all__ = [
	"Label", "NamedLabel", "OptionalLabel",
	"TypeExpr", "AnyType", "VarType", "ArrowType", "TupleType", "ConstrType",
	"VariantKind", "VariantConstructor", "VariantInherit", "PolyVariantType",
	"ObjectMethod", "ObjectInherit", "ObjectType", "ClassTypeExpr",
	"AliasType", "PolyType", "PackageType", "poly",
]
