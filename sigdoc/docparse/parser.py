# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Documentation comment parser.

Turns the raw payload of a doc attribute into a `DocBody`:

- Block tags are split off line by line first: a line whose first non-blank
  character is `@` starts a tag, which runs until the next tag line. Text before
  the first tag is the comment body. Lines inside a verbatim (`{v ... v}`) or
  pre-code (`{[ ... ]}`) block never start a tag.
- The body and the free text of each tag are parsed with the inline grammar in
  `grammar.lark`.

Positions reported by `DocParseError` are 1-based and relative to the payload;
the comment extraction glue shifts them into the source file.
"""

from __future__ import annotations

import re
from pathlib import Path
from typing import List, Optional, Tuple

from lark import Lark, Token, Tree
from lark.exceptions import UnexpectedInput

from sigdoc.core.paths import module_path_of_string
from sigdoc.model.documentation import (
	Author,
	Before,
	Canonical,
	Code,
	Deprecated,
	DocBody,
	Inline,
	ListBlock,
	Newline,
	Param,
	PreCode,
	Raise,
	Raw,
	Reference,
	Return,
	See,
	SeeKind,
	Since,
	Style,
	StyleKind,
	Tag,
	TextElement,
	Title,
	Verbatim,
	Version,
)

_GRAMMAR_PATH = Path(__file__).with_name("grammar.lark")
_GRAMMAR_SRC = _GRAMMAR_PATH.read_text()

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	start="start",
	maybe_placeholders=False,
)

_TAG_LINE = re.compile(r"^([ \t]*)@([a-z]+)")

# Verbatim and pre-code blocks; a tag line inside one is block text.
_PRECODE = re.compile(r"\{\[.*?\]\}", re.S)
_VERBATIM = re.compile(r"\{v\s.*?\sv\}", re.S)
_BLOCK_OPEN = re.compile(r"(?<!\\)(\{v(?=\s|$)|\{\[)")
_BLOCK_CLOSE = {"{v": re.compile(r"(?:^|\s)v\}"), "{[": re.compile(r"\]\}")}

# Nested code-span brackets are swapped for private-use characters while lexing.
_MASK = str.maketrans("[]", "\ue000\ue001")
_UNMASK = str.maketrans("\ue000\ue001", "[]")

_STYLE_KINDS = {
	"b": StyleKind.BOLD,
	"i": StyleKind.ITALIC,
	"e": StyleKind.EMPHASIZE,
	"C": StyleKind.CENTER,
	"L": StyleKind.LEFT,
	"R": StyleKind.RIGHT,
	"^": StyleKind.SUPERSCRIPT,
	"_": StyleKind.SUBSCRIPT,
}


class DocParseError(ValueError):
	"""
	Malformed documentation comment.

	Raised by the parser service only; comment extraction turns it into a
	`DocError` value attached to the declaration.
	"""

	def __init__(self, message: str, *, line: int = 1, column: int = 1) -> None:
		super().__init__(message)
		self.line = line
		self.column = column


def parse_doc(text: str) -> DocBody:
	"""Parse one documentation payload into a `DocBody`."""
	body_lines, tags = _split_tags(text)
	body = _parse_text("\n".join(body_lines), line=1, column=1)
	return DocBody(text=body, tags=[_read_tag(name, rest, line, column) for name, rest, line, column in tags])


def _split_tags(text: str) -> Tuple[List[str], List[Tuple[str, str, int, int]]]:
	"""
	Split a payload into body lines and `(tag, text, line, column)` entries.

	`column` is where the tag text starts (just after the tag name).
	"""
	body: List[str] = []
	tags: List[Tuple[str, List[str], int, int]] = []
	opened: Optional[str] = None
	for lineno, line in enumerate(text.split("\n"), start=1):
		m = _TAG_LINE.match(line) if opened is None else None
		if m is not None:
			tags.append((m.group(2), [line[m.end():]], lineno, m.end() + 1))
		elif tags:
			tags[-1][1].append(line)
		else:
			body.append(line)
		opened = _open_block(line, opened)
	return body, [(name, "\n".join(lines), lineno, col) for name, lines, lineno, col in tags]


def _open_block(line: str, opened: Optional[str]) -> Optional[str]:
	"""Opener of the verbatim or pre-code block still open after `line`, if any."""
	pos = 0
	while True:
		if opened is not None:
			close = _BLOCK_CLOSE[opened].search(line, pos)
			if close is None:
				return opened
			pos = close.end()
			opened = None
		m = _BLOCK_OPEN.search(line, pos)
		if m is None:
			return None
		opened = m.group(1)
		pos = m.end()


def _read_tag(name: str, rest: str, line: int, column: int) -> Tag:
	if name == "author":
		return Author(_required_arg(name, rest, line, column))
	if name == "version":
		return Version(_required_arg(name, rest, line, column))
	if name == "since":
		return Since(_required_arg(name, rest, line, column))
	if name == "before":
		version, text, col = _split_word(name, rest, line, column)
		return Before(version, _parse_text(text, line=line, column=col))
	if name == "param":
		pname, text, col = _split_word(name, rest, line, column)
		return Param(pname, _parse_text(text, line=line, column=col))
	if name == "raise":
		exn, text, col = _split_word(name, rest, line, column)
		return Raise(exn, _parse_text(text, line=line, column=col))
	if name == "deprecated":
		return Deprecated(_parse_text(rest, line=line, column=column))
	if name == "return":
		return Return(_parse_text(rest, line=line, column=column))
	if name == "inline":
		if rest.strip():
			raise DocParseError("@inline takes no argument", line=line, column=column)
		return Inline()
	if name == "see":
		return _read_see(rest, line, column)
	if name == "canonical":
		reference = _required_arg(name, rest, line, column)
		try:
			path = module_path_of_string(reference)
		except ValueError as err:
			raise DocParseError(str(err), line=line, column=column) from err
		return Canonical(path, reference)
	raise DocParseError(f"unknown tag '@{name}'", line=line, column=max(1, column - len(name) - 1))


def _required_arg(tag: str, rest: str, line: int, column: int) -> str:
	value = " ".join(rest.split())
	if not value:
		raise DocParseError(f"@{tag} expects an argument", line=line, column=column)
	return value


def _split_word(tag: str, rest: str, line: int, column: int) -> Tuple[str, str, int]:
	"""Split `rest` into its first word and the remaining text (with its start column)."""
	stripped = rest.lstrip()
	if not stripped:
		raise DocParseError(f"@{tag} expects an argument", line=line, column=column)
	offset = len(rest) - len(stripped)
	parts = stripped.split(None, 1)
	word = parts[0]
	text = parts[1] if len(parts) > 1 else ""
	return word, text, column + offset + len(word) + 1


def _read_see(rest: str, line: int, column: int) -> See:
	stripped = rest.lstrip()
	col = column + len(rest) - len(stripped)
	for opening, closing, kind in (("<", ">", SeeKind.URL), ("'", "'", SeeKind.FILE), ('"', '"', SeeKind.DOC)):
		if stripped.startswith(opening):
			end = stripped.find(closing, 1)
			if end < 0:
				raise DocParseError(f"unterminated @see target, expected '{closing}'", line=line, column=col)
			target = stripped[1:end]
			text = stripped[end + 1:]
			return See(kind, target, _parse_text(text, line=line, column=col + end + 1))
	raise DocParseError("@see expects <url>, 'file' or \"document\"", line=line, column=col)


def _parse_text(text: str, *, line: int, column: int) -> List[TextElement]:
	"""Parse inline markup; (`line`, `column`) is where `text` starts in the payload."""
	if not text.strip():
		return []
	try:
		tree = _PARSER.parse(_mask_code_spans(text))
	except UnexpectedInput as err:
		err_line = getattr(err, "line", None)
		err_col = getattr(err, "column", None)
		if not isinstance(err_line, int) or err_line < 1:
			err_line = 1
		if not isinstance(err_col, int) or err_col < 1:
			err_col = 1
		message = str(err).strip().splitlines()[0] if str(err).strip() else "syntax error"
		message = message.translate(_UNMASK)
		raise DocParseError(
			message,
			line=line + err_line - 1,
			column=column + err_col - 1 if err_line == 1 else err_col,
		) from err
	return _trim(_build_inlines(tree.children))


def _mask_code_spans(text: str) -> str:
	"""
	Hide brackets nested inside `[...]` code spans from the lexer.

	Code spans may nest balanced brackets to any depth. Nested brackets are
	swapped one-for-one for private-use characters, so token positions do not
	move; `_build_inline` swaps them back. Unbalanced brackets are left alone
	for the parser to report.
	"""
	out: List[str] = []
	pos = 0
	i = 0
	while i < len(text):
		ch = text[i]
		if ch == "\\":
			i += 2
			continue
		if ch == "{":
			m = _PRECODE.match(text, i) or _VERBATIM.match(text, i)
			i = m.end() if m is not None else i + 1
			continue
		if ch != "[":
			i += 1
			continue
		end = _code_span_end(text, i)
		if end is None:
			i += 1
			continue
		out.append(text[pos:i + 1])
		out.append(text[i + 1:end].translate(_MASK))
		pos = end
		i = end + 1
	out.append(text[pos:])
	return "".join(out)


def _code_span_end(text: str, start: int) -> Optional[int]:
	"""Index of the `]` closing the code span opened at `start`."""
	depth = 0
	i = start
	while i < len(text):
		ch = text[i]
		if ch == "\\":
			i += 2
			continue
		if ch == "[":
			depth += 1
		elif ch == "]":
			depth -= 1
			if depth == 0:
				return i
		i += 1
	return None


def _build_inlines(nodes: List[Tree | Token]) -> List[TextElement]:
	out: List[TextElement] = []
	for node in nodes:
		if isinstance(node, Token):
			continue
		elem = _build_inline(node)
		# Adjacent raw text is merged into one element.
		if isinstance(elem, Raw) and out and isinstance(out[-1], Raw):
			out[-1] = Raw(out[-1].text + elem.text)
		else:
			out.append(elem)
	return out


def _build_inline(node: Tree) -> TextElement:
	kind = node.data
	if kind == "raw":
		return Raw(str(node.children[0]))
	if kind == "escape":
		return Raw(str(node.children[0])[1:])
	if kind == "space":
		return Raw(" ")
	if kind == "newline":
		return Newline()
	if kind == "code":
		return Code(str(node.children[0])[1:-1].translate(_UNMASK))
	if kind == "precode":
		return PreCode(str(node.children[0])[2:-2])
	if kind == "verbatim":
		return Verbatim(str(node.children[0])[3:-3])
	if kind == "style":
		opening = str(node.children[0])
		return Style(_STYLE_KINDS[opening[1]], _trim(_build_inlines(node.children[1:])))
	if kind == "title":
		return _build_title(node)
	if kind == "reference":
		return _build_reference(node, with_text=False)
	if kind == "reference_text":
		return _build_reference(node, with_text=True)
	if kind == "list_block":
		return _build_list(node)
	raise AssertionError(f"unexpected doc markup node '{kind}' (grammar bug)")


def _build_title(node: Tree) -> Title:
	opening = str(node.children[0])[1:].strip()
	level_text, _, label = opening.partition(":")
	return Title(int(level_text), label or None, _trim(_build_inlines(node.children[1:])))


def _build_reference(node: Tree, *, with_text: bool) -> Reference:
	inner = str(node.children[0])[2:-1]
	kind: Optional[str] = None
	target = inner
	prefix, sep, rest = inner.partition(":")
	if sep and prefix and all(("a" <= ch <= "z") or ch == "-" for ch in prefix):
		kind, target = prefix, rest
	if not with_text:
		return Reference(kind, target)
	return Reference(kind, target, _trim(_build_inlines(node.children[1:])))


def _build_list(node: Tree) -> ListBlock:
	opening = str(node.children[0])
	items = [
		_trim(_build_inlines(child.children[1:]))
		for child in node.children[1:]
		if isinstance(child, Tree) and child.data == "item"
	]
	return ListBlock(ordered=opening.startswith("{ol"), items=items)


def _trim(elems: List[TextElement]) -> List[TextElement]:
	"""Drop leading and trailing whitespace-only text."""
	out = list(elems)
	if out and isinstance(out[0], Raw):
		text = out[0].text.lstrip()
		if text:
			out[0] = Raw(text)
		else:
			out.pop(0)
	if out and isinstance(out[-1], Raw):
		text = out[-1].text.rstrip()
		if text:
			out[-1] = Raw(text)
		else:
			out.pop()
	return out


__all__ = ["DocParseError", "parse_doc"]
