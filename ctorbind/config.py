# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Mapping configuration shared by every type mapping of one mapper.

Only the zero/empty value table lives here for now: it supplies the value a
constructor parameter receives when nothing resolves it and the parameter
declares no default of its own.
"""

from __future__ import annotations

from decimal import Decimal
from typing import Any, Callable, Dict


def _seed_defaults() -> Dict[Any, Callable[[], Any]]:
	return {
		int: int,
		float: float,
		complex: complex,
		bool: bool,
		str: str,
		bytes: bytes,
		Decimal: Decimal,
		# Containers get a fresh instance per call.
		list: list,
		dict: dict,
		set: set,
		tuple: tuple,
		frozenset: frozenset,
	}


class MappingConfiguration:
	def __init__(self) -> None:
		self._defaults: Dict[Any, Callable[[], Any]] = _seed_defaults()

	def register_default(self, ty: Any, factory: Callable[[], Any]) -> None:
		"""Override (or add) the zero value factory for `ty`."""
		self._defaults[ty] = factory

	def default(self, ty: Any) -> Any:
		"""Zero/empty value of `ty`; None for types without one."""
		factory = self._defaults.get(ty)
		if factory is None:
			return None
		return factory()


__all__ = ["MappingConfiguration"]
