# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Minimal type mapping: the owner of a `ConstructorBindingSet`.

A `TypeMapping` pairs a source type with a destination type and knows its
related mappings (an optional base mapping and any included members). It
drives binding for one given constructor; choosing among several candidate
constructors belongs to the caller.
"""

from __future__ import annotations

from typing import Any, List, Optional, Sequence

from ctorbind.constructor_binding import ConstructorBindingSet
from ctorbind.convention import ConventionMatcher
from ctorbind.core.diagnostics import Diagnostic, configure_diag
from ctorbind.core.members import ConstructorSig, MemberRef
from ctorbind.included_member import IncludedMember


class TypeMapping:
	def __init__(self, source_type: Any, destination_type: Any, *, base: Optional["TypeMapping"] = None) -> None:
		self.source_type = source_type
		self.destination_type = destination_type
		self.base = base
		self.included_members: List[IncludedMember] = []
		self.constructor_map: Optional[ConstructorBindingSet] = None

	def __repr__(self) -> str:
		src = getattr(self.source_type, "__name__", self.source_type)
		dst = getattr(self.destination_type, "__name__", self.destination_type)
		return f"TypeMapping({src} -> {dst})"

	def ensure_constructor_map(self) -> ConstructorBindingSet:
		if self.constructor_map is None:
			self.constructor_map = ConstructorBindingSet()
		return self.constructor_map

	def include(self, path: Sequence[MemberRef], type_map: "TypeMapping") -> IncludedMember:
		"""Register `type_map` as mapping the nested source reached by `path`."""
		included = IncludedMember(type_map=type_map, path=tuple(path))
		self.included_members.append(included)
		return included

	def bind_constructor(self, ctor: ConstructorSig, matcher: ConventionMatcher) -> bool:
		"""Reset onto `ctor`, convention-match every parameter, report resolvability."""
		ctor_map = self.ensure_constructor_map()
		ctor_map.reset(ctor)
		for parameter in ctor.params:
			ctor_map.add_parameter(parameter, matcher.match(parameter.name, self), self)
		return ctor_map.can_resolve

	def merge_related(self) -> bool:
		"""
		Pull bindings from the base mapping and included members.

		Included members are re-applied until a full round changes nothing;
		merges only add resolutions so this terminates.
		"""
		ctor_map = self.constructor_map
		if ctor_map is None:
			return False
		if self.base is not None:
			ctor_map.apply_inherited_map(self.base, self)
		changed = True
		while changed and not ctor_map.can_resolve:
			changed = False
			for included in self.included_members:
				if ctor_map.apply_included_member(included):
					changed = True
		return ctor_map.can_resolve

	def validate(self) -> list[Diagnostic]:
		"""
		Report an unusable constructor.

		Unresolved parameters that declare a default are acceptable; the
		constructor is unusable only when a required parameter is unresolved.
		"""
		ctor_map = self.constructor_map
		if ctor_map is None or ctor_map.ctor is None:
			return [
				configure_diag(
					message="no constructor has been bound",
					code="no-constructor",
					subject=repr(self),
				)
			]
		if ctor_map.can_resolve:
			return []
		missing = [p for p in ctor_map.unresolved() if not p.parameter.is_optional]
		if not missing:
			return []
		names = ", ".join(p.destination_name for p in missing)
		return [
			configure_diag(
				message=f"no usable constructor: cannot resolve parameter(s) {names}",
				code="no-usable-constructor",
				subject=repr(self),
				notes=[f"constructor: {ctor_map.ctor}"] + [str(p) for p in missing],
			)
		]


__all__ = ["TypeMapping"]
