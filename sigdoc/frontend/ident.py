# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Compiler-internal identifiers, paths, long identifiers, labels and attributes.

An `Ident` is the front-end's binding occurrence: two idents with the same
name but different stamps are different bindings. Persistent idents name
compilation units and are never bound by a signature.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from sigdoc.core.span import Span


@dataclass(frozen=True)
class Ident:
	name: str
	stamp: int = 0
	persistent: bool = False

	def __str__(self) -> str:
		return self.name if self.persistent else f"{self.name}/{self.stamp}"


# Compiler paths

class CPath:
	"""Base class for compiler paths."""
	pass


@dataclass(frozen=True)
class Pident(CPath):
	ident: Ident


@dataclass(frozen=True)
class Pdot(CPath):
	parent: CPath
	name: str


@dataclass(frozen=True)
class Papply(CPath):
	functor: CPath
	arg: CPath


# Long identifiers (source-level dotted names, used by `with` fragments)

class Longident:
	"""Base class for long identifiers."""
	pass


@dataclass(frozen=True)
class Lident(Longident):
	name: str


@dataclass(frozen=True)
class Ldot(Longident):
	parent: Longident
	name: str


@dataclass(frozen=True)
class Lapply(Longident):
	functor: Longident
	arg: Longident


# Argument labels

class ArgLabel:
	"""Base class for front-end argument labels."""
	pass


@dataclass(frozen=True)
class Nolabel(ArgLabel):
	pass


@dataclass(frozen=True)
class Labelled(ArgLabel):
	name: str


@dataclass(frozen=True)
class OptLabelled(ArgLabel):
	name: str


NOLABEL = Nolabel()


# Attributes

@dataclass(frozen=True)
class Attribute:
	"""
	An attribute attached to an item (`[@@ocaml.doc "..."]`, `[@@@ocaml.text "..."]`).

	`payload` is the string payload when the attribute carries one, None for any
	other payload shape.

	`loc` is where the payload starts: a `Span`, or the front-end's own location
	object (see `Span.from_loc`).
	"""
	name: str
	payload: Optional[str] = None
	loc: Any = field(default_factory=Span)


__all__ = [
	"Ident",
	"CPath",
	"Pident",
	"Pdot",
	"Papply",
	"Longident",
	"Lident",
	"Ldot",
	"Lapply",
	"ArgLabel",
	"Nolabel",
	"Labelled",
	"OptLabelled",
	"NOLABEL",
	"Attribute",
]
