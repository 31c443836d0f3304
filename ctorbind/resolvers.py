# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Value resolvers: how one constructor argument is read from a source object.

Convention matching produces a `MemberPathResolver`; explicit configuration
may install any other `ValueResolver`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Protocol

from ctorbind.core.members import MemberChain, format_chain


class ValueResolver(Protocol):
	def resolve(self, source: Any) -> Any:
		"""Return the argument value for `source`."""
		...


@dataclass(frozen=True)
class MemberPathResolver:
	"""Reads a member chain; a None anywhere along the chain yields None."""

	members: MemberChain

	def resolve(self, source: Any) -> Any:
		value = source
		for member in self.members:
			if value is None:
				return None
			value = getattr(value, member.name)
		return value

	def __str__(self) -> str:
		return format_chain(self.members)


@dataclass(frozen=True)
class FuncResolver:
	"""Resolver backed by a user callable taking the source object."""

	fn: Callable[[Any], Any]

	def resolve(self, source: Any) -> Any:
		return self.fn(source)

	def __str__(self) -> str:
		return getattr(self.fn, "__name__", repr(self.fn))


__all__ = ["ValueResolver", "MemberPathResolver", "FuncResolver"]
