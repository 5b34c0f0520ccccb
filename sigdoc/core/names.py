# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Cosmetic name policies shared by both readers."""

from __future__ import annotations

from sigdoc.core.config import DEFAULT_CONFIG, ReaderConfig

# Alphanumeric infix operators; they still need parentheses to be used as names.
_KEYWORD_OPERATORS = frozenset({"asr", "land", "lnot", "lor", "lsl", "lsr", "lxor", "mod"})


def _is_ident_start(ch: str) -> bool:
	if ch == "_" or ("a" <= ch <= "z") or ("A" <= ch <= "Z"):
		return True
	# Latin-1 letters, excluding the multiplication and division signs.
	code = ord(ch)
	return 0xC0 <= code <= 0xFF and code not in (0xD7, 0xF7)


def parenthesise(name: str) -> str:
	"""Wrap operator names in parentheses (`+` -> `(+)`, `mod` -> `(mod)`)."""
	if name in _KEYWORD_OPERATORS:
		return f"({name})"
	if name and not _is_ident_start(name[0]):
		return f"({name})"
	return name


def is_hidden(name: str, config: ReaderConfig = DEFAULT_CONFIG) -> bool:
	"""Return True if `name` follows the internal-naming convention."""
	return config.hidden_marker in name


__all__ = ["parenthesise", "is_hidden"]
