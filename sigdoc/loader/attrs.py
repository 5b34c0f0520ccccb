# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Comment extraction: attributes → documentation values and comment items.

Attached documentation comes from doc attributes on a declaration;
freestanding comments come from text attributes that are signature items of
their own. A parse failure never escapes: it becomes a `DocError` whose
location points into the source file.
"""

from __future__ import annotations

import logging
from typing import List, Optional, Sequence

from sigdoc.core.config import DEFAULT_CONFIG, ReaderConfig
from sigdoc.core.identifiers import Identifier
from sigdoc.core.paths import DocPath
from sigdoc.core.span import Span
from sigdoc.docparse import DocParseError, parse_doc
from sigdoc.frontend.ident import Attribute
from sigdoc.model.documentation import (
	Canonical,
	Comment,
	Deprecated,
	DocBody,
	DocComment,
	DocError,
	DocOk,
	Documentation,
	Newline,
	Raw,
	StopComment,
	Tag,
	TextElement,
)

logger = logging.getLogger(__name__)


def _doc_error(origin: Identifier, attr: Attribute, err: DocParseError) -> DocError:
	location = Span.from_loc(attr.loc).shifted(err.line, err.column)
	logger.debug("doc comment of %s failed to parse at %s:%s: %s", origin, location.line, location.column, err)
	return DocError(origin, location, str(err))


def read_attributes(
	origin: Identifier,
	attributes: Sequence[Attribute],
	config: ReaderConfig = DEFAULT_CONFIG,
) -> Documentation:
	"""
	Build the documentation of the declaration `origin` from its attributes.

	Several doc attributes are concatenated with a paragraph break between
	them. A deprecation attribute adds a `@deprecated` tag unless one is
	already written. The first parse failure wins and is returned as a
	`DocError`.
	"""
	text: List[TextElement] = []
	tags: List[Tag] = []
	deprecated: Optional[Attribute] = None
	for attr in attributes:
		if attr.name in config.doc_attributes and attr.payload is not None:
			try:
				body = parse_doc(attr.payload)
			except DocParseError as err:
				return _doc_error(origin, attr, err)
			if text and body.text:
				text.append(Newline())
			text.extend(body.text)
			tags.extend(body.tags)
		elif attr.name in config.deprecated_attributes:
			deprecated = attr
	if deprecated is not None and not any(isinstance(tag, Deprecated) for tag in tags):
		tags.append(Deprecated([Raw(deprecated.payload)] if deprecated.payload else []))
	return DocOk(DocBody(text, tags))


def read_comment(
	parent: Identifier,
	attr: Attribute,
	config: ReaderConfig = DEFAULT_CONFIG,
) -> Optional[Comment]:
	"""Turn a freestanding text attribute into a comment item (None for other attributes)."""
	if attr.name not in config.text_attributes or attr.payload is None:
		return None
	if attr.payload == config.stop_comment:
		return StopComment()
	try:
		body = parse_doc(attr.payload)
	except DocParseError as err:
		return DocComment(_doc_error(parent, attr, err))
	return DocComment(DocOk(body))


def read_comments(
	parent: Identifier,
	attributes: Sequence[Attribute],
	config: ReaderConfig = DEFAULT_CONFIG,
) -> List[Comment]:
	comments: List[Comment] = []
	for attr in attributes:
		comment = read_comment(parent, attr, config)
		if comment is not None:
			comments.append(comment)
	return comments


def read_canonical(doc: Documentation) -> Optional[DocPath]:
	"""Path of the first `@canonical` tag of a successfully parsed doc."""
	if not isinstance(doc, DocOk):
		return None
	for tag in doc.body.tags:
		if isinstance(tag, Canonical):
			return tag.path
	return None


class AttrCommentReader:
	"""`CommentReader` over front-end attributes, bound to one configuration."""

	def __init__(self, config: ReaderConfig = DEFAULT_CONFIG) -> None:
		self.config = config

	def read_attributes(self, origin: Identifier, attributes: Sequence[Attribute]) -> Documentation:
		return read_attributes(origin, attributes, self.config)

	def read_comment(self, parent: Identifier, attr: Attribute) -> Optional[Comment]:
		return read_comment(parent, attr, self.config)

	def read_comments(self, parent: Identifier, attributes: Sequence[Attribute]) -> List[Comment]:
		return read_comments(parent, attributes, self.config)


__all__ = [
	"read_attributes",
	"read_comment",
	"read_comments",
	"read_canonical",
	"AttrCommentReader",
]
