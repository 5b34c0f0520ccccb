#!/usr/bin/env python3
# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Comment extraction from front-end attributes."""

import logging
from types import SimpleNamespace

from sigdoc.core.config import ReaderConfig
from sigdoc.core.identifiers import Identifier
from sigdoc.core.paths import Root
from sigdoc.core.span import Span
from sigdoc.frontend.ident import Attribute
from sigdoc.loader.attrs import (
	AttrCommentReader,
	read_attributes,
	read_canonical,
	read_comment,
	read_comments,
)
from sigdoc.model.documentation import (
	EMPTY_DOC,
	Canonical,
	Deprecated,
	DocBody,
	DocComment,
	DocError,
	DocOk,
	Newline,
	Raw,
	StopComment,
)
from sigdoc.test_support import doc, text

_ROOT = Identifier.root_of("pkg", "Unit")
_VAL = Identifier.value(_ROOT, "f")


def test_no_attributes_is_empty_doc():
	assert read_attributes(_VAL, []) == EMPTY_DOC


def test_doc_attributes_are_concatenated_with_a_break():
	result = read_attributes(_VAL, [doc(" First. "), doc(" Second. ")])
	assert result == DocOk(DocBody([Raw("First."), Newline(), Raw("Second.")], []))


def test_unrelated_attributes_are_ignored():
	attrs = [Attribute("inline"), doc("Text."), Attribute("ocaml.warning", "-32")]
	assert read_attributes(_VAL, attrs) == DocOk(DocBody([Raw("Text.")]))


def test_deprecated_attribute_adds_tag():
	result = read_attributes(_VAL, [doc("Old."), Attribute("ocaml.deprecated", "use g")])
	assert result.body.tags == [Deprecated([Raw("use g")])]


def test_deprecated_attribute_without_payload():
	result = read_attributes(_VAL, [Attribute("deprecated")])
	assert result == DocOk(DocBody([], [Deprecated([])]))


def test_written_deprecated_tag_wins_over_attribute():
	result = read_attributes(_VAL, [doc("Old.\n@deprecated use h"), Attribute("ocaml.deprecated", "use g")])
	assert result.body.tags == [Deprecated([Raw("use h")])]


def test_parse_failure_becomes_doc_error_with_source_location():
	result = read_attributes(_VAL, [doc("Fine."), doc("Stray ] here", line=10, column=5)])
	assert isinstance(result, DocError)
	assert result.origin == _VAL
	assert result.location.file == "test.mli"
	assert (result.location.line, result.location.column) == (10, 11)
	assert result.message


def test_parse_failure_on_later_line_keeps_payload_column():
	result = read_attributes(_VAL, [doc("Fine.\n@frobnicate", line=3, column=4)])
	assert isinstance(result, DocError)
	assert (result.location.line, result.location.column) == (4, 1)


def test_parse_failure_location_from_compiler_position():
	start = SimpleNamespace(pos_fname="lib.mli", pos_lnum=7, pos_bol=100, pos_cnum=104)
	loc = SimpleNamespace(loc_start=start, loc_end=start)
	result = read_attributes(_VAL, [Attribute("ocaml.doc", "Bad ] here", loc)])
	assert isinstance(result, DocError)
	assert (result.location.file, result.location.line, result.location.column) == ("lib.mli", 7, 9)
	assert result.location.raw is loc


def test_parse_failure_is_logged(caplog):
	with caplog.at_level(logging.DEBUG, logger="sigdoc.loader.attrs"):
		read_attributes(_VAL, [doc("{b open")])
	assert any("failed to parse" in rec.getMessage() for rec in caplog.records)


def test_read_comment_kinds():
	assert read_comment(_ROOT, text("/*")) == StopComment()
	assert read_comment(_ROOT, text(" Section. ")) == DocComment(DocOk(DocBody([Raw("Section.")])))
	assert read_comment(_ROOT, doc("Attached.")) is None
	assert read_comment(_ROOT, Attribute("ocaml.text")) is None


def test_read_comment_error_is_attributed_to_parent():
	comment = read_comment(_ROOT, text("{b open"))
	assert isinstance(comment, DocComment)
	assert isinstance(comment.doc, DocError)
	assert comment.doc.origin == _ROOT


def test_read_comments_keeps_order_and_skips_others():
	comments = read_comments(_ROOT, [text("A."), doc("skip"), text("/*"), text("B.")])
	assert comments == [
		DocComment(DocOk(DocBody([Raw("A.")]))),
		StopComment(),
		DocComment(DocOk(DocBody([Raw("B.")]))),
	]


def test_read_canonical():
	ok = DocOk(DocBody([], [Canonical(Root("Foo"), "Foo")]))
	assert read_canonical(ok) == Root("Foo")
	assert read_canonical(EMPTY_DOC) is None
	assert read_canonical(DocError(_ROOT, Span(), "boom")) is None


def test_reader_uses_configured_attribute_names():
	reader = AttrCommentReader(ReaderConfig(doc_attributes=("mydoc",), text_attributes=("mytext",), stop_comment="stop"))
	assert reader.read_attributes(_VAL, [doc("ignored")]) == EMPTY_DOC
	assert reader.read_attributes(_VAL, [Attribute("mydoc", "Used.")]) == DocOk(DocBody([Raw("Used.")]))
	assert reader.read_comment(_ROOT, Attribute("mytext", "stop")) == StopComment()
	assert reader.read_comments(_ROOT, [text("ignored")]) == []
