# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Structured documentation attached to declarations.

A declaration's documentation is either `DocOk(body)` (an empty body means
"no documentation") or `DocError(...)` when its comment failed to parse. A
parse failure is kept in the model; it is never dropped.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import List, Optional

from sigdoc.core.identifiers import Identifier
from sigdoc.core.paths import DocPath
from sigdoc.core.span import Span


# Text elements

class TextElement:
	pass


@dataclass(frozen=True)
class Raw(TextElement):
	text: str


@dataclass(frozen=True)
class Code(TextElement):
	text: str


@dataclass(frozen=True)
class PreCode(TextElement):
	text: str


@dataclass(frozen=True)
class Verbatim(TextElement):
	text: str


class StyleKind(Enum):
	BOLD = auto()
	ITALIC = auto()
	EMPHASIZE = auto()
	CENTER = auto()
	LEFT = auto()
	RIGHT = auto()
	SUPERSCRIPT = auto()
	SUBSCRIPT = auto()


@dataclass(frozen=True)
class Style(TextElement):
	kind: StyleKind
	text: List[TextElement]


@dataclass(frozen=True)
class ListBlock(TextElement):
	ordered: bool
	items: List[List[TextElement]]


@dataclass(frozen=True)
class Newline(TextElement):
	"""Paragraph break."""
	pass


@dataclass(frozen=True)
class Title(TextElement):
	level: int
	label: Optional[str]
	text: List[TextElement]


@dataclass(frozen=True)
class Reference(TextElement):
	"""`{!target}` or `{{!kind:target} text}`; targets are kept symbolic."""
	kind: Optional[str]
	target: str
	text: Optional[List[TextElement]] = None


# Tags

class Tag:
	pass


@dataclass(frozen=True)
class Author(Tag):
	name: str


@dataclass(frozen=True)
class Version(Tag):
	version: str


class SeeKind(Enum):
	URL = auto()
	FILE = auto()
	DOC = auto()


@dataclass(frozen=True)
class See(Tag):
	kind: SeeKind
	target: str
	text: List[TextElement] = field(default_factory=list)


@dataclass(frozen=True)
class Since(Tag):
	version: str


@dataclass(frozen=True)
class Before(Tag):
	version: str
	text: List[TextElement] = field(default_factory=list)


@dataclass(frozen=True)
class Deprecated(Tag):
	text: List[TextElement] = field(default_factory=list)


@dataclass(frozen=True)
class Param(Tag):
	name: str
	text: List[TextElement] = field(default_factory=list)


@dataclass(frozen=True)
class Raise(Tag):
	name: str
	text: List[TextElement] = field(default_factory=list)


@dataclass(frozen=True)
class Return(Tag):
	text: List[TextElement] = field(default_factory=list)


@dataclass(frozen=True)
class Inline(Tag):
	pass


@dataclass(frozen=True)
class Canonical(Tag):
	"""`@canonical A.B`: the module's preferred documentation path."""
	path: DocPath
	reference: str


# Documentation values

@dataclass(frozen=True)
class DocBody:
	text: List[TextElement] = field(default_factory=list)
	tags: List[Tag] = field(default_factory=list)

	def is_empty(self) -> bool:
		return not self.text and not self.tags


class Documentation:
	"""Base class for a declaration's documentation."""
	pass


@dataclass(frozen=True)
class DocOk(Documentation):
	body: DocBody = field(default_factory=DocBody)


@dataclass(frozen=True)
class DocError(Documentation):
	origin: Identifier
	location: Span
	message: str


EMPTY_DOC = DocOk()


# Freestanding comments

class Comment:
	"""Base class for freestanding comments in a signature or class signature."""
	pass


@dataclass(frozen=True)
class DocComment(Comment):
	doc: Documentation


@dataclass(frozen=True)
class StopComment(Comment):
	"""The documentation stop marker `(**/**)`."""
	pass


__all__ = [
	"TextElement", "Raw", "Code", "PreCode", "Verbatim", "StyleKind", "Style",
	"ListBlock", "Newline", "Title", "Reference",
	"Tag", "Author", "Version", "SeeKind", "See", "Since", "Before", "Deprecated",
	"Param", "Raise", "Return", "Inline", "Canonical",
	"DocBody", "Documentation", "DocOk", "DocError", "EMPTY_DOC",
	"Comment", "DocComment", "StopComment",
]
