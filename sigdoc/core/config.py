# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Reader configuration.

The readers are pure functions of their input plus this value; there is no
environment-variable or file-based configuration at this layer.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class ReaderConfig:
	"""Knobs consulted by comment extraction and name policies."""

	# Attribute names carrying documentation attached to a declaration.
	doc_attributes: Tuple[str, ...] = ("ocaml.doc", "doc")
	# Attribute names carrying freestanding documentation.
	text_attributes: Tuple[str, ...] = ("ocaml.text", "text")
	# Attribute names turned into a `@deprecated` tag when none is written.
	deprecated_attributes: Tuple[str, ...] = ("ocaml.deprecated", "deprecated")
	# Text-attribute payload of the documentation stop comment `(**/**)`.
	stop_comment: str = "/*"
	# A module whose name contains this marker is hidden unless it has a
	# `@canonical` tag.
	hidden_marker: str = "__"


DEFAULT_CONFIG = ReaderConfig()


__all__ = ["ReaderConfig", "DEFAULT_CONFIG"]
