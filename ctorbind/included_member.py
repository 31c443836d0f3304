# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Included members: a nested source value mapped by its own type mapping.

`path` leads from the including mapping's source object to the nested source
the included mapping reads. Provenance composes through `chain`, so a binding
pulled through two levels of inclusion still knows the full access path.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Optional

from ctorbind.core.members import MemberChain, format_chain

if TYPE_CHECKING:
	from ctorbind.type_mapping import TypeMapping


@dataclass(frozen=True)
class IncludedMember:
	type_map: "TypeMapping"
	path: MemberChain = ()

	def chain(self, inner: Optional["IncludedMember"]) -> "IncludedMember":
		"""Compose with the provenance `inner` already carried (outer path first)."""
		if inner is None:
			return self
		return IncludedMember(type_map=inner.type_map, path=self.path + inner.path)

	def project(self, source: Any) -> Any:
		"""Walk `path` from `source`; None short-circuits."""
		value = source
		for member in self.path:
			if value is None:
				return None
			value = getattr(value, member.name)
		return value

	def __str__(self) -> str:
		return format_chain(self.path)


__all__ = ["IncludedMember"]
