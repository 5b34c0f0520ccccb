# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Declaration identifiers.

An Identifier is the stable, hierarchical name of one documented entity:
`(kind, parent, name)`. Identifiers form a tree rooted at a single ROOT per
compilation unit and are the only way the documentation model refers to a
declaration. They are frozen and hashable so they can key side tables.

Invariants:
- ROOT has no parent and carries the compilation-root name in `root`.
- CORE_TYPE has no parent (predefined types).
- every other kind has a parent of an allowed kind (see `_PARENT_KINDS`).
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional


class IdentKind(Enum):
	"""Kinds of declaration identifiers."""

	ROOT = auto()
	MODULE = auto()
	MODULE_TYPE = auto()
	FUNCTOR_PARAMETER = auto()
	FUNCTOR_RESULT = auto()
	TYPE = auto()
	CORE_TYPE = auto()
	CONSTRUCTOR = auto()
	FIELD = auto()
	EXTENSION = auto()
	EXCEPTION = auto()
	VALUE = auto()
	CLASS = auto()
	CLASS_TYPE = auto()
	METHOD = auto()
	INSTANCE_VARIABLE = auto()


SIGNATURE_KINDS = frozenset(
	{
		IdentKind.ROOT,
		IdentKind.MODULE,
		IdentKind.MODULE_TYPE,
		IdentKind.FUNCTOR_PARAMETER,
		IdentKind.FUNCTOR_RESULT,
	}
)
FIELD_PARENT_KINDS = frozenset(
	{IdentKind.TYPE, IdentKind.CONSTRUCTOR, IdentKind.EXTENSION, IdentKind.EXCEPTION}
)
CLASS_SIGNATURE_KINDS = frozenset({IdentKind.CLASS, IdentKind.CLASS_TYPE})

_PARENT_KINDS = {
	IdentKind.MODULE: SIGNATURE_KINDS,
	IdentKind.MODULE_TYPE: SIGNATURE_KINDS,
	IdentKind.FUNCTOR_PARAMETER: SIGNATURE_KINDS,
	IdentKind.FUNCTOR_RESULT: SIGNATURE_KINDS,
	IdentKind.TYPE: SIGNATURE_KINDS,
	IdentKind.EXTENSION: SIGNATURE_KINDS,
	IdentKind.EXCEPTION: SIGNATURE_KINDS,
	IdentKind.VALUE: SIGNATURE_KINDS,
	IdentKind.CLASS: SIGNATURE_KINDS,
	IdentKind.CLASS_TYPE: SIGNATURE_KINDS,
	IdentKind.CONSTRUCTOR: frozenset({IdentKind.TYPE}),
	IdentKind.FIELD: FIELD_PARENT_KINDS,
	IdentKind.METHOD: CLASS_SIGNATURE_KINDS,
	IdentKind.INSTANCE_VARIABLE: CLASS_SIGNATURE_KINDS,
}

# Separators used by `Identifier.__str__`.
_KIND_LABEL = {
	IdentKind.MODULE_TYPE: "module-type-",
	IdentKind.FUNCTOR_PARAMETER: "argument-",
	IdentKind.TYPE: "type-",
	IdentKind.CONSTRUCTOR: "constructor-",
	IdentKind.FIELD: "field-",
	IdentKind.EXTENSION: "extension-",
	IdentKind.EXCEPTION: "exception-",
	IdentKind.VALUE: "val-",
	IdentKind.CLASS: "class-",
	IdentKind.CLASS_TYPE: "class-type-",
	IdentKind.METHOD: "method-",
	IdentKind.INSTANCE_VARIABLE: "instance-variable-",
}


@dataclass(frozen=True)
class Identifier:
	"""A stable declaration identifier `(kind, parent, name)`."""

	kind: IdentKind
	parent: Optional["Identifier"]
	name: str
	# Compilation-root name; only meaningful for ROOT.
	root: Optional[str] = None

	def __post_init__(self) -> None:
		if self.kind in (IdentKind.ROOT, IdentKind.CORE_TYPE):
			if self.parent is not None:
				raise ValueError(f"{self.kind.name} identifier cannot have a parent")
			return
		allowed = _PARENT_KINDS[self.kind]
		if self.parent is None or self.parent.kind not in allowed:
			parent_kind = None if self.parent is None else self.parent.kind.name
			raise ValueError(f"{self.kind.name} identifier cannot be parented by {parent_kind}")

	@staticmethod
	def root_of(root: str, name: str) -> "Identifier":
		return Identifier(IdentKind.ROOT, None, name, root=root)

	@staticmethod
	def module(parent: "Identifier", name: str) -> "Identifier":
		return Identifier(IdentKind.MODULE, parent, name)

	@staticmethod
	def module_type(parent: "Identifier", name: str) -> "Identifier":
		return Identifier(IdentKind.MODULE_TYPE, parent, name)

	@staticmethod
	def functor_parameter(parent: "Identifier", name: str) -> "Identifier":
		return Identifier(IdentKind.FUNCTOR_PARAMETER, parent, name)

	@staticmethod
	def functor_result(parent: "Identifier") -> "Identifier":
		return Identifier(IdentKind.FUNCTOR_RESULT, parent, "")

	@staticmethod
	def type_(parent: "Identifier", name: str) -> "Identifier":
		return Identifier(IdentKind.TYPE, parent, name)

	@staticmethod
	def core_type(name: str) -> "Identifier":
		return Identifier(IdentKind.CORE_TYPE, None, name)

	@staticmethod
	def constructor(parent: "Identifier", name: str) -> "Identifier":
		return Identifier(IdentKind.CONSTRUCTOR, parent, name)

	@staticmethod
	def field(parent: "Identifier", name: str) -> "Identifier":
		return Identifier(IdentKind.FIELD, parent, name)

	@staticmethod
	def extension(parent: "Identifier", name: str) -> "Identifier":
		return Identifier(IdentKind.EXTENSION, parent, name)

	@staticmethod
	def exception(parent: "Identifier", name: str) -> "Identifier":
		return Identifier(IdentKind.EXCEPTION, parent, name)

	@staticmethod
	def value(parent: "Identifier", name: str) -> "Identifier":
		return Identifier(IdentKind.VALUE, parent, name)

	@staticmethod
	def class_(parent: "Identifier", name: str) -> "Identifier":
		return Identifier(IdentKind.CLASS, parent, name)

	@staticmethod
	def class_type(parent: "Identifier", name: str) -> "Identifier":
		return Identifier(IdentKind.CLASS_TYPE, parent, name)

	@staticmethod
	def method(parent: "Identifier", name: str) -> "Identifier":
		return Identifier(IdentKind.METHOD, parent, name)

	@staticmethod
	def instance_variable(parent: "Identifier", name: str) -> "Identifier":
		return Identifier(IdentKind.INSTANCE_VARIABLE, parent, name)

	def is_signature(self) -> bool:
		"""True if declarations can be parented by this identifier."""
		return self.kind in SIGNATURE_KINDS

	def ancestors(self) -> list["Identifier"]:
		"""Return the chain from the root down to (and including) this identifier."""
		chain: list[Identifier] = []
		cur: Optional[Identifier] = self
		while cur is not None:
			chain.append(cur)
			cur = cur.parent
		chain.reverse()
		return chain

	def __str__(self) -> str:
		parts: list[str] = []
		for ident in self.ancestors():
			if ident.kind is IdentKind.ROOT:
				parts.append(ident.name)
			elif ident.kind is IdentKind.FUNCTOR_RESULT:
				parts.append("result")
			else:
				parts.append(_KIND_LABEL.get(ident.kind, "") + ident.name)
		return ".".join(parts)


__all__ = [
	"IdentKind",
	"Identifier",
	"SIGNATURE_KINDS",
	"FIELD_PARENT_KINDS",
	"CLASS_SIGNATURE_KINDS",
]
