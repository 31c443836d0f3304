# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Naming-convention matching of destination names to source member chains.

Names are compared after dropping underscores and case-folding, so
`customer_name`, `customerName` and `CustomerName` are the same key. When no
member matches directly, the matcher flattens: it looks for a member whose key
is a prefix of the destination key and continues in that member's declared
type (`customer_name` -> `customer.name`).
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, List, Protocol

from ctorbind.core.members import MemberChain, members_of

if TYPE_CHECKING:
	from ctorbind.type_mapping import TypeMapping


class ConventionMatcher(Protocol):
	def match(self, name: str, type_map: "TypeMapping") -> List[MemberChain]:
		"""Candidate source member chains for destination `name`, best first."""
		...


def normalize_name(name: str) -> str:
	return name.replace("_", "").casefold()


class NameConventionMatcher:
	def __init__(self, max_depth: int = 4) -> None:
		self.max_depth = max_depth

	def match(self, name: str, type_map: "TypeMapping") -> List[MemberChain]:
		return self.candidates(name, type_map.source_type)

	def candidates(self, name: str, source_type: Any) -> List[MemberChain]:
		out: List[MemberChain] = []
		key = normalize_name(name)
		if key:
			self._collect(key, source_type, (), out, self.max_depth)
		return out

	def _collect(self, key: str, ty: Any, prefix: MemberChain, out: List[MemberChain], depth: int) -> None:
		members = members_of(ty)
		# Direct matches outrank flattened ones at the same level.
		for member in members:
			if normalize_name(member.name) == key:
				out.append(prefix + (member,))
		if depth <= 1:
			return
		for member in members:
			member_key = normalize_name(member.name)
			if member_key and len(key) > len(member_key) and key.startswith(member_key):
				self._collect(key[len(member_key):], member.type, prefix + (member,), out, depth - 1)


__all__ = ["ConventionMatcher", "NameConventionMatcher", "normalize_name"]
