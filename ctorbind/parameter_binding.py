# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-18
"""
Per-parameter binding plan for one constructor parameter.

A binding is an immutable value: merges never edit a binding, they build a new
one and swap it into the owning `ConstructorBindingSet` slot. The variants are

  - convention match: a source member chain found by the naming convention;
  - included: another mapping's binding, reached through an `IncludedMember`;
  - inherited: a base mapping's binding rebased onto the derived mapping;
  - configured: an explicit resolver installed by configuration.

A binding resolves iff it carries a resolver.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Any, Optional, Sequence

from ctorbind.core.members import MemberChain, ParameterDecl, format_chain
from ctorbind.included_member import IncludedMember
from ctorbind.resolvers import MemberPathResolver, ValueResolver

if TYPE_CHECKING:
	from ctorbind.config import MappingConfiguration
	from ctorbind.type_mapping import TypeMapping


@dataclass(frozen=True)
class ParameterBinding:
	type_map: "TypeMapping"
	parameter: ParameterDecl
	source_members: MemberChain = ()
	resolver: Optional[ValueResolver] = None
	included_member: Optional[IncludedMember] = None

	@classmethod
	def from_convention(
		cls, type_map: "TypeMapping", parameter: ParameterDecl, source_members: Sequence[Any]
	) -> "ParameterBinding":
		chain = tuple(source_members)
		if not chain:
			return cls(type_map=type_map, parameter=parameter)
		return cls(
			type_map=type_map,
			parameter=parameter,
			source_members=chain,
			resolver=MemberPathResolver(chain),
		)

	@classmethod
	def from_included(cls, binding: "ParameterBinding", included_member: IncludedMember) -> "ParameterBinding":
		return cls(
			type_map=included_member.type_map,
			parameter=binding.parameter,
			source_members=binding.source_members,
			resolver=binding.resolver,
			included_member=included_member.chain(binding.included_member),
		)

	@classmethod
	def from_inherited(
		cls,
		type_map: "TypeMapping",
		inherited: "ParameterBinding",
		parameter: Optional[ParameterDecl] = None,
	) -> "ParameterBinding":
		"""
		Rebase `inherited` onto `type_map`.

		`parameter` is the derived constructor's own declaration for this
		position; the base declaration is used when omitted.
		"""
		return cls(
			type_map=type_map,
			parameter=parameter if parameter is not None else inherited.parameter,
			source_members=inherited.source_members,
			resolver=inherited.resolver,
			included_member=inherited.included_member,
		)

	def with_resolver(self, resolver: ValueResolver) -> "ParameterBinding":
		return replace(self, resolver=resolver)

	@property
	def can_resolve(self) -> bool:
		return self.resolver is not None

	@property
	def destination_name(self) -> str:
		return self.parameter.name

	@property
	def destination_type(self) -> Any:
		return self.parameter.type

	def default_value(self, configuration: "MappingConfiguration") -> Any:
		"""Declared default when optional, else the destination type's zero value."""
		if self.parameter.is_optional:
			return self.parameter.make_default()
		return configuration.default(self.destination_type)

	def resolve(self, source: Any) -> Any:
		"""
		Read this parameter's value from `source` (the including mapping's source).

		Bindings chained through an included member first project `source`
		along the inclusion path.
		"""
		if self.resolver is None:
			raise LookupError(f"{self} has no resolver")
		if self.included_member is not None:
			source = self.included_member.project(source)
		return self.resolver.resolve(source)

	def describe(self) -> str:
		if self.resolver is None:
			return f"{self.destination_name}: <unresolved>"
		where = str(self.resolver) if not self.source_members else format_chain(self.source_members)
		if self.included_member is not None:
			where = f"{self.included_member}.{where}"
		return f"{self.destination_name} <- {where}"

	def __str__(self) -> str:
		owner = getattr(self.type_map, "destination_type", None)
		owner_name = getattr(owner, "__name__", "?")
		return f"{owner_name}, parameter {self.destination_name}"


__all__ = ["ParameterBinding"]
