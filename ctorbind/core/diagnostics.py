# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Common diagnostic structure for configuration validation.

Validation passes return these instead of raising: an unresolvable
constructor is a normal outcome that the owning configuration reports.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class Diagnostic:
	"""Represents a configuration diagnostic (error/warning/etc.)."""

	message: str
	code: str | None = None
	# Pass that produced the diagnostic ("configure" for binding validation).
	phase: str | None = None
	severity: str = "error"
	# Dotted destination type name the diagnostic refers to, when known.
	subject: str | None = None
	notes: list[str] = field(default_factory=list)

	def format_human(self) -> str:
		head = f"{self.severity}"
		if self.code:
			head += f"[{self.code}]"
		if self.subject:
			head += f" {self.subject}"
		lines = [f"{head}: {self.message}"]
		lines.extend(f"  note: {n}" for n in self.notes)
		return "\n".join(lines)


def configure_diag(*args, **kwargs) -> Diagnostic:
	"""Diagnostic constructor defaulting to the configure phase."""
	if "phase" not in kwargs or kwargs.get("phase") is None:
		kwargs["phase"] = "configure"
	return Diagnostic(*args, **kwargs)


__all__ = ["Diagnostic", "configure_diag"]
