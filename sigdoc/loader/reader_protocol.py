# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Collaborator protocols of the typed-tree reader.

The typed-tree reader does not parse comments itself and does not rebuild
signatures the checker has already computed. It delegates both through these
protocols; `CmiReader` and `AttrCommentReader` are the default implementations.
"""

from __future__ import annotations

from typing import List, Optional, Protocol, Sequence

from sigdoc.core.identifiers import Identifier
from sigdoc.frontend.compiled import CModuleType, CSignatureItem
from sigdoc.frontend.ident import Attribute
from sigdoc.loader.ident_env import IdentEnv
from sigdoc.model.documentation import Comment, Documentation
from sigdoc.model.signature import ModuleTypeExpr, SignatureItem


class CompiledSignatureReader(Protocol):
	"""Reads compiled signatures into the documentation model."""

	def read_signature(self, env: IdentEnv, parent: Identifier, items: List[CSignatureItem]) -> List[SignatureItem]:
		"""Read a compiled signature whose members are parented by `parent`."""
		...

	def read_module_type(self, env: IdentEnv, parent: Identifier, mty: CModuleType) -> ModuleTypeExpr:
		...


class CommentReader(Protocol):
	"""Extracts documentation from front-end attributes."""

	def read_attributes(self, origin: Identifier, attributes: Sequence[Attribute]) -> Documentation:
		"""
		Return the documentation attached to `origin`.

		Absence is an empty `DocOk`; a malformed comment is a `DocError`, never an
		exception.
		"""
		...

	def read_comment(self, parent: Identifier, attr: Attribute) -> Optional[Comment]:
		...

	def read_comments(self, parent: Identifier, attributes: Sequence[Attribute]) -> List[Comment]:
		...


__all__ = ["CompiledSignatureReader", "CommentReader"]
