# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
from __future__ import annotations

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class ConfigurationError(Exception):
	"""
	A structured, serializable mapping-configuration error.

	Raised only for configurations that cannot be represented at all (e.g. two
	constructor parameters whose names collide case-insensitively). Merely
	unresolvable constructors are reported through diagnostics instead.
	"""

	reason_code: str
	message: str
	type_name: str | None = None
	constructor: str | None = None
	parameter_names: tuple[str, ...] | None = None

	def __str__(self) -> str:
		return self.format_human()

	def to_dict(self) -> dict[str, Any]:
		return {
			"reason_code": self.reason_code,
			"message": self.message,
			"type_name": self.type_name,
			"constructor": self.constructor,
			"parameter_names": list(self.parameter_names) if self.parameter_names is not None else None,
		}

	def format_human(self) -> str:
		parts: list[str] = [f"[{self.reason_code}] {self.message}"]
		if self.type_name:
			parts.append(f"type: {self.type_name}")
		if self.constructor:
			parts.append(f"constructor: {self.constructor}")
		if self.parameter_names:
			parts.append(f"parameters: {', '.join(self.parameter_names)}")
		return "\n".join(parts)


__all__ = ["ConfigurationError"]
