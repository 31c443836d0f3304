# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-18
"""
Constructor binding set: resolution state for one candidate constructor.

The set holds one `ParameterBinding` per constructor parameter, index-aligned
with `ctor.params`. Resolvability is memoized in a tri-state cell
(None = unknown); every mutator clears it explicitly.

Two merges pull bindings from related mappings:

  - `apply_included_member` copies resolved bindings positionally from an
	included mapping bound to the *same* constructor;
  - `apply_inherited_map` copies resolved bindings from a base mapping,
	correlated by case-insensitive parameter name and exact declared type.

Both are monotonic (resolved positions are never replaced) and idempotent, so
callers may re-run them as related mappings progress.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable, List, Optional, Sequence

from ctorbind.core.members import ConstructorSig, MemberRef, ParameterDecl
from ctorbind.errors import ConfigurationError
from ctorbind.included_member import IncludedMember
from ctorbind.parameter_binding import ParameterBinding
from ctorbind.resolvers import ValueResolver

if TYPE_CHECKING:
	from ctorbind.type_mapping import TypeMapping


def _same_name(a: str, b: str) -> bool:
	return a.casefold() == b.casefold()


class ConstructorBindingSet:
	def __init__(self) -> None:
		self.ctor: Optional[ConstructorSig] = None
		self._params: List[ParameterBinding] = []
		self._can_resolve: Optional[bool] = None

	@property
	def params(self) -> tuple[ParameterBinding, ...]:
		return tuple(self._params)

	def __len__(self) -> int:
		return len(self._params)

	def reset(self, ctor: ConstructorSig) -> None:
		self.ctor = ctor
		self._params.clear()
		self._can_resolve = None

	@property
	def can_resolve(self) -> bool:
		if self._can_resolve is None:
			self._can_resolve = self._parameters_can_resolve()
		return self._can_resolve

	@can_resolve.setter
	def can_resolve(self, value: Optional[bool]) -> None:
		self._can_resolve = value

	def _parameters_can_resolve(self) -> bool:
		for param in self._params:
			if not param.can_resolve:
				return False
		return True

	def unresolved(self) -> list[ParameterBinding]:
		return [p for p in self._params if not p.can_resolve]

	def get(self, name: str) -> Optional[ParameterBinding]:
		"""Binding whose parameter name equals `name` ignoring case, or None."""
		for param in self._params:
			if _same_name(param.destination_name, name):
				return param
		return None

	def add_parameter(
		self,
		parameter: ParameterDecl,
		candidate_chains: Iterable[Sequence[MemberRef]],
		type_map: "TypeMapping",
	) -> ParameterBinding:
		"""
		Append the binding for the next declared parameter.

		`candidate_chains` are the convention matcher's proposals, best first;
		the first non-empty one is bound.
		"""
		clash = self.get(parameter.name)
		if clash is not None:
			raise ConfigurationError(
				reason_code="duplicate-parameter-name",
				message=(
					f"constructor parameters '{clash.destination_name}' and '{parameter.name}' "
					"differ only in case"
				),
				type_name=self.ctor.owner.__qualname__ if self.ctor is not None else None,
				constructor=str(self.ctor) if self.ctor is not None else None,
				parameter_names=(clash.destination_name, parameter.name),
			)
		chain: tuple[MemberRef, ...] = ()
		for candidate in candidate_chains:
			if candidate:
				chain = tuple(candidate)
				break
		binding = ParameterBinding.from_convention(type_map, parameter, chain)
		self._params.append(binding)
		self._can_resolve = None
		return binding

	def configure_parameter(self, name: str, resolver: ValueResolver) -> ParameterBinding:
		"""Install an explicit resolver for parameter `name` (case-insensitive)."""
		for index, param in enumerate(self._params):
			if _same_name(param.destination_name, name):
				binding = param.with_resolver(resolver)
				self._params[index] = binding
				self._can_resolve = None
				return binding
		raise KeyError(f"constructor {self.ctor} has no parameter '{name}'")

	def apply_included_member(self, included_member: IncludedMember) -> bool:
		"""
		Merge resolved bindings from `included_member`'s mapping, positionally.

		Returns True when at least one position was replaced.
		"""
		included_map = included_member.type_map.constructor_map
		if self.can_resolve or included_map is None or included_map.ctor != self.ctor:
			return False
		changed = False
		for index, included_param in enumerate(included_map._params):
			if not included_param.can_resolve or self._params[index].can_resolve:
				continue
			changed = True
			self._can_resolve = None
			self._params[index] = ParameterBinding.from_included(included_param, included_member)
		return changed

	def apply_inherited_map(self, inherited_map: "TypeMapping", this_map: "TypeMapping") -> bool:
		"""
		Merge resolved bindings from base mapping `inherited_map`, by name.

		Positions whose base counterpart is missing, unresolved, or declared
		with a different type stay unresolved. Resolvability is set from the
		outcome directly. Returns True when at least one position was replaced.
		"""
		if self.can_resolve:
			return False
		base_set = inherited_map.constructor_map
		can_resolve = True
		changed = False
		for index, this_param in enumerate(self._params):
			if this_param.can_resolve:
				continue
			inherited_param = base_set.get(this_param.destination_name) if base_set is not None else None
			if (
				inherited_param is None
				or not inherited_param.can_resolve
				or this_param.destination_type != inherited_param.destination_type
			):
				can_resolve = False
				continue
			self._params[index] = ParameterBinding.from_inherited(
				this_map, inherited_param, parameter=this_param.parameter
			)
			changed = True
		self._can_resolve = can_resolve
		return changed

	def describe(self) -> str:
		lines = [str(self.ctor) if self.ctor is not None else "<no constructor>"]
		lines.extend(f"  {p.describe()}" for p in self._params)
		return "\n".join(lines)


__all__ = ["ConstructorBindingSet"]
