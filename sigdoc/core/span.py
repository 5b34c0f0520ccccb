# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Lightweight source span representation used by attributes and doc errors.

A Span can wrap whatever location object the front-end provides via the `raw`
field while also carrying optional file/line/column info when available.
Lines and columns are 1-based.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Optional


@dataclass(frozen=True)
class Span:
	"""Represents a source span (best-effort file/line/column plus raw front-end loc)."""

	file: Optional[str] = None
	line: Optional[int] = None
	column: Optional[int] = None
	end_line: Optional[int] = None
	end_column: Optional[int] = None
	raw: Any = None

	@classmethod
	def from_loc(cls, loc: Any) -> "Span":
		"""
		Wrap a front-end location as a Span.

		Accepts a Span (returned unchanged), a compiler location whose `loc_start`
		and `loc_end` are lexing positions (`pos_fname`, `pos_lnum`, `pos_bol`,
		`pos_cnum`), or any object with `file`/`line`/`column` attributes. The
		original object is kept in `raw`.
		"""
		if loc is None:
			return cls()
		if isinstance(loc, cls):
			return loc
		start = getattr(loc, "loc_start", None)
		if start is None:
			return cls(
				file=getattr(loc, "file", None),
				line=getattr(loc, "line", None),
				column=getattr(loc, "column", None),
				raw=loc,
			)
		end = getattr(loc, "loc_end", None) or start
		return cls(
			file=start.pos_fname or None,
			line=start.pos_lnum,
			# Lexing positions count columns from 0.
			column=start.pos_cnum - start.pos_bol + 1,
			end_line=end.pos_lnum,
			end_column=end.pos_cnum - end.pos_bol + 1,
			raw=loc,
		)

	def shifted(self, line: int, column: int) -> "Span":
		"""
		Return the point span of (`line`, `column`) inside text starting at this span.

		Used to turn a position reported relative to a comment payload into a
		position in the source file. Column offsets only apply on the first line.
		"""
		base_line = self.line if self.line is not None else 1
		base_col = self.column if self.column is not None else 1
		new_line = base_line + line - 1
		new_col = base_col + column - 1 if line == 1 else column
		return replace(self, line=new_line, column=new_col, end_line=new_line, end_column=new_col)


__all__ = ["Span"]
