# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Scope environment: compiler idents → declaration identifiers.

The environment is a persistent value. Every `add_*` returns a new
environment and leaves the receiver untouched, so sibling scopes derived from
the same parent never see each other's bindings. Rebinding an ident replaces
the previous binding in the new environment only.

Entering a signature binds all of its members up front (types, modules,
module types, classes, class types, and whatever included signatures
contribute), so references between members of the same signature resolve
regardless of declaration order.
"""

from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Iterable, Mapping, Optional, Tuple

from sigdoc.core.identifiers import Identifier
from sigdoc.frontend.compiled import (
	CSigClass,
	CSigClassType,
	CSigModtype,
	CSigModule,
	CSignatureItem,
	CSigType,
)
from sigdoc.frontend.ident import Ident
from sigdoc.frontend.typedtree import (
	SigClass,
	SigClassType,
	SigInclude,
	SigModtype,
	SigModule,
	SigRecmodule,
	SigType,
	Signature,
)


def _frozen(table: Mapping[Ident, Identifier]) -> Mapping[Ident, Identifier]:
	return MappingProxyType(dict(table))


def _extend(table: Mapping[Ident, Identifier], bindings: Iterable[Tuple[Optional[Ident], Identifier]]) -> Mapping[Ident, Identifier]:
	new = dict(table)
	for ident, identifier in bindings:
		if ident is not None:
			new[ident] = identifier
	return MappingProxyType(new)


@dataclass(frozen=True)
class IdentEnv:
	"""
	Immutable scope environment.

	`types` may map to TYPE, CLASS or CLASS_TYPE identifiers (a class binds its
	object type and `#c`); `class_types` maps to CLASS or CLASS_TYPE identifiers.
	"""

	root: Optional[Identifier] = None
	modules: Mapping[Ident, Identifier] = field(default_factory=lambda: _frozen({}))
	module_types: Mapping[Ident, Identifier] = field(default_factory=lambda: _frozen({}))
	types: Mapping[Ident, Identifier] = field(default_factory=lambda: _frozen({}))
	class_types: Mapping[Ident, Identifier] = field(default_factory=lambda: _frozen({}))

	@staticmethod
	def empty() -> "IdentEnv":
		return IdentEnv()

	def with_root(self, root: Identifier) -> "IdentEnv":
		return replace(self, root=root)

	# Single bindings

	def add_module(self, ident: Ident, identifier: Identifier) -> "IdentEnv":
		return replace(self, modules=_extend(self.modules, [(ident, identifier)]))

	def add_module_type(self, ident: Ident, identifier: Identifier) -> "IdentEnv":
		return replace(self, module_types=_extend(self.module_types, [(ident, identifier)]))

	def add_type(self, ident: Ident, identifier: Identifier) -> "IdentEnv":
		return replace(self, types=_extend(self.types, [(ident, identifier)]))

	def add_class(
		self,
		identifier: Identifier,
		id_class: Ident,
		id_class_type: Optional[Ident] = None,
		id_object: Optional[Ident] = None,
		id_typehash: Optional[Ident] = None,
	) -> "IdentEnv":
		"""Bind every ident a class (or class type) introduces to `identifier`."""
		return replace(
			self,
			class_types=_extend(self.class_types, [(id_class, identifier), (id_class_type, identifier)]),
			types=_extend(self.types, [(id_object, identifier), (id_typehash, identifier)]),
		)

	def add_class_type(
		self,
		identifier: Identifier,
		id_class_type: Ident,
		id_object: Optional[Ident] = None,
		id_typehash: Optional[Ident] = None,
	) -> "IdentEnv":
		return replace(
			self,
			class_types=_extend(self.class_types, [(id_class_type, identifier)]),
			types=_extend(self.types, [(id_object, identifier), (id_typehash, identifier)]),
		)

	def add_parameter(self, parent: Identifier, ident: Ident) -> Tuple[Identifier, "IdentEnv"]:
		"""Allocate the FUNCTOR_PARAMETER identifier for `ident` and bind it."""
		param_id = Identifier.functor_parameter(parent, ident.name)
		return param_id, self.add_module(ident, param_id)

	# Whole signatures

	def add_signature_tree_items(self, parent: Identifier, signature: Signature) -> "IdentEnv":
		"""Bind every member a typed-tree signature declares under `parent`."""
		env = self
		for item in signature.items:
			if isinstance(item, SigType):
				for decl in item.decls:
					env = env.add_type(decl.id, Identifier.type_(parent, decl.id.name))
			elif isinstance(item, SigModule):
				env = env.add_module(item.decl.id, Identifier.module(parent, item.decl.id.name))
			elif isinstance(item, SigRecmodule):
				for decl in item.decls:
					env = env.add_module(decl.id, Identifier.module(parent, decl.id.name))
			elif isinstance(item, SigModtype):
				env = env.add_module_type(item.decl.id, Identifier.module_type(parent, item.decl.id.name))
			elif isinstance(item, SigClass):
				for cls in item.decls:
					env = env.add_class(
						Identifier.class_(parent, cls.id_class.name),
						cls.id_class,
						cls.id_class_type,
						cls.id_object,
						cls.id_typehash,
					)
			elif isinstance(item, SigClassType):
				for cltyp in item.decls:
					env = env.add_class_type(
						Identifier.class_type(parent, cltyp.id_class_type.name),
						cltyp.id_class_type,
						cltyp.id_object,
						cltyp.id_typehash,
					)
			elif isinstance(item, SigInclude):
				env = env.add_signature_type_items(parent, item.incl.type)
		return env

	def add_signature_type_items(self, parent: Identifier, items: Iterable[CSignatureItem]) -> "IdentEnv":
		"""Bind every member a compiled signature declares under `parent`."""
		env = self
		for item in items:
			if isinstance(item, CSigType):
				env = env.add_type(item.id, Identifier.type_(parent, item.id.name))
			elif isinstance(item, CSigModule):
				env = env.add_module(item.id, Identifier.module(parent, item.id.name))
			elif isinstance(item, CSigModtype):
				env = env.add_module_type(item.id, Identifier.module_type(parent, item.id.name))
			elif isinstance(item, CSigClass):
				# Compiled classes carry one ident for both namespaces.
				identifier = Identifier.class_(parent, item.id.name)
				env = env.add_class(identifier, item.id, id_object=item.id)
			elif isinstance(item, CSigClassType):
				identifier = Identifier.class_type(parent, item.id.name)
				env = env.add_class_type(identifier, item.id, id_object=item.id)
		return env

	# Lookups

	def find_module(self, ident: Ident) -> Optional[Identifier]:
		return self.modules.get(ident)

	def find_module_type(self, ident: Ident) -> Optional[Identifier]:
		return self.module_types.get(ident)

	def find_type(self, ident: Ident) -> Optional[Identifier]:
		return self.types.get(ident)

	def find_class_type(self, ident: Ident) -> Optional[Identifier]:
		return self.class_types.get(ident)


__all__ = ["IdentEnv"]
