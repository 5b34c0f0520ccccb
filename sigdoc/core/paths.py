# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Documentation-model references: doc paths and signature fragments.

A DocPath is what a type/module/class reference inside the documentation model
points at. Resolution happens through the scope environment while reading: a
reference to something declared in scope becomes `Resolved(RIdent(id))`, a
member of a resolved module stays resolved (`RDot`), and references rooted in
an unbound persistent unit stay symbolic (`Root` / `Dot`).

A Fragment is the left-hand side of a `with` constraint (or a package type
substitution). It is relative to the constrained signature, whose own position
is the ROOT fragment, so fragments never go through the scope environment.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto
from typing import Optional

from sigdoc.core.identifiers import IdentKind, Identifier


class DocPath:
	"""Base class for documentation paths."""
	pass


class ResolvedPath:
	"""Base class for resolved documentation paths."""
	pass


@dataclass(frozen=True)
class RIdent(ResolvedPath):
	"""A path that is exactly one declaration identifier."""
	identifier: Identifier


@dataclass(frozen=True)
class RDot(ResolvedPath):
	"""
	Member `name` of a resolved module.

	`kind` is one of MODULE, MODULE_TYPE, TYPE, CLASS, CLASS_TYPE and records
	which namespace the member was looked up in.
	"""
	kind: IdentKind
	parent: ResolvedPath
	name: str


@dataclass(frozen=True)
class RApply(ResolvedPath):
	"""Application of a resolved functor to an argument path."""
	functor: ResolvedPath
	arg: DocPath


@dataclass(frozen=True)
class Resolved(DocPath):
	path: ResolvedPath


@dataclass(frozen=True)
class Root(DocPath):
	"""A persistent compilation unit that is not bound in scope."""
	name: str


@dataclass(frozen=True)
class Dot(DocPath):
	parent: DocPath
	name: str


@dataclass(frozen=True)
class Apply(DocPath):
	functor: DocPath
	arg: DocPath


class FragmentKind(Enum):
	"""Kinds of signature fragments."""

	ROOT = auto()
	MODULE = auto()
	TYPE = auto()


@dataclass(frozen=True)
class Fragment:
	"""A dotted name relative to a constrained signature."""

	kind: FragmentKind
	parent: Optional["Fragment"] = None
	name: str = ""

	@staticmethod
	def root() -> "Fragment":
		return Fragment(FragmentKind.ROOT)

	@staticmethod
	def module(parent: "Fragment", name: str) -> "Fragment":
		return Fragment(FragmentKind.MODULE, parent, name)

	@staticmethod
	def type_(parent: "Fragment", name: str) -> "Fragment":
		return Fragment(FragmentKind.TYPE, parent, name)

	def __str__(self) -> str:
		if self.kind is FragmentKind.ROOT or self.parent is None:
			return self.name
		prefix = str(self.parent)
		return f"{prefix}.{self.name}" if prefix else self.name


def resolved_identifier(path: DocPath) -> Optional[Identifier]:
	"""Return the identifier a path resolves to directly, if any."""
	if isinstance(path, Resolved) and isinstance(path.path, RIdent):
		return path.path.identifier
	return None


def format_path(path: DocPath | ResolvedPath) -> str:
	"""Render a path as a dotted name (resolved identifiers use their name)."""
	if isinstance(path, Resolved):
		return format_path(path.path)
	if isinstance(path, RIdent):
		return path.identifier.name
	if isinstance(path, RDot):
		return f"{format_path(path.parent)}.{path.name}"
	if isinstance(path, RApply):
		return f"{format_path(path.functor)}({format_path(path.arg)})"
	if isinstance(path, Root):
		return path.name
	if isinstance(path, Dot):
		return f"{format_path(path.parent)}.{path.name}"
	if isinstance(path, Apply):
		return f"{format_path(path.functor)}({format_path(path.arg)})"
	raise TypeError(f"not a documentation path: {path!r}")


def module_path_of_string(text: str) -> DocPath:
	"""
	Build an unresolved module path from dotted syntax (`A.B.C`).

	Raises ValueError when a segment is not a module name.
	"""
	segments = text.split(".")
	for seg in segments:
		if not seg or not (seg[0].isalpha() and seg[0].isupper()):
			raise ValueError(f"invalid module path '{text}'")
		if not all(ch.isalnum() or ch in "_'" for ch in seg):
			raise ValueError(f"invalid module path '{text}'")
	path: DocPath = Root(segments[0])
	for seg in segments[1:]:
		path = Dot(path, seg)
	return path


__all__ = [
	"DocPath",
	"ResolvedPath",
	"RIdent",
	"RDot",
	"RApply",
	"Resolved",
	"Root",
	"Dot",
	"Apply",
	"FragmentKind",
	"Fragment",
	"resolved_identifier",
	"format_path",
	"module_path_of_string",
]
