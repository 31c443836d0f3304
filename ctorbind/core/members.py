# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-18
"""
Member and constructor signature primitives.

A *member chain* is a tuple of `MemberRef`, outermost access first:
`(customer, name)` reads `source.customer.name`. The empty tuple means the
chain is unbound.

`ConstructorSig` is a value type so that two type mappings evaluating the same
constructor compare equal even when the signature objects were introspected
separately.
"""

from __future__ import annotations

import dataclasses
import inspect
import typing
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Tuple


class _Empty:
	"""Sentinel type for 'parameter declares no default'."""

	_instance: Optional["_Empty"] = None

	def __new__(cls) -> "_Empty":
		if cls._instance is None:
			cls._instance = super().__new__(cls)
		return cls._instance

	def __repr__(self) -> str:
		return "EMPTY"


EMPTY = _Empty()


@dataclass(frozen=True)
class MemberRef:
	"""One member access on a source type."""

	owner: type
	name: str
	type: Any = Any

	def __str__(self) -> str:
		return self.name


MemberChain = Tuple[MemberRef, ...]


def format_chain(chain: Sequence[MemberRef]) -> str:
	if not chain:
		return "<unbound>"
	return ".".join(m.name for m in chain)


@dataclass(frozen=True)
class ParameterDecl:
	"""A declared constructor parameter (position is 0-based, `self` excluded)."""

	position: int
	name: str
	type: Any = Any
	default: Any = EMPTY
	# Set for dataclass fields declared with `field(default_factory=...)`.
	default_factory: Optional[Callable[[], Any]] = None

	@property
	def is_optional(self) -> bool:
		return self.default is not EMPTY or self.default_factory is not None

	def make_default(self) -> Any:
		if self.default_factory is not None:
			return self.default_factory()
		return self.default


@dataclass(frozen=True)
class ConstructorSig:
	"""A constructor of `owner`: `__init__` or a factory classmethod."""

	owner: type
	name: str
	params: Tuple[ParameterDecl, ...] = ()

	def __str__(self) -> str:
		args = ", ".join(p.name for p in self.params)
		return f"{self.owner.__name__}.{self.name}({args})"


def _type_hints(fn: Callable[..., Any]) -> dict[str, Any]:
	try:
		return typing.get_type_hints(fn)
	except (NameError, TypeError):
		# Unresolvable forward references: fall back to the raw annotations.
		return dict(getattr(fn, "__annotations__", {}))


def constructor_from_callable(owner: type, fn: Callable[..., Any], name: str) -> ConstructorSig:
	"""
	Build a `ConstructorSig` for `fn`, treating it as a constructor of `owner`.

	`fn` may be a bound classmethod (the `cls` argument is already bound) or
	`owner.__init__` (the leading `self` is dropped). Variadic parameters are
	not part of the signature.
	"""
	hints = _type_hints(fn)
	sig = inspect.signature(fn)
	factories: dict[str, Callable[[], Any]] = {}
	if name == "__init__" and dataclasses.is_dataclass(owner):
		for f in dataclasses.fields(owner):
			if f.default_factory is not dataclasses.MISSING:
				factories[f.name] = f.default_factory
	params: list[ParameterDecl] = []
	for idx, p in enumerate(sig.parameters.values()):
		if idx == 0 and name == "__init__" and p.name == "self":
			continue
		if p.kind in (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD):
			continue
		factory = factories.get(p.name)
		if factory is not None or p.default is inspect.Parameter.empty:
			default = EMPTY
		else:
			default = p.default
		params.append(
			ParameterDecl(
				position=len(params),
				name=p.name,
				type=hints.get(p.name, Any),
				default=default,
				default_factory=factory,
			)
		)
	return ConstructorSig(owner=owner, name=name, params=tuple(params))


def constructor_of(cls: type) -> ConstructorSig:
	"""Introspect `cls.__init__` into a `ConstructorSig`."""
	return constructor_from_callable(cls, cls.__init__, "__init__")


def members_of(cls: Any) -> list[MemberRef]:
	"""
	Readable members of `cls`, in declaration order.

	Annotated class attributes (dataclass fields included) come first, then
	properties whose getter declares a return annotation.
	"""
	if not isinstance(cls, type):
		return []
	out: list[MemberRef] = []
	seen: set[str] = set()
	for klass in reversed(cls.__mro__):
		if klass is object:
			continue
		annotations = inspect.get_annotations(klass)
		try:
			hints = typing.get_type_hints(klass)
		except (NameError, TypeError):
			hints = dict(annotations)
		for name in annotations:
			if name.startswith("_") or name in seen:
				continue
			seen.add(name)
			out.append(MemberRef(owner=cls, name=name, type=hints.get(name, Any)))
	for name, attr in inspect.getmembers(cls, lambda a: isinstance(a, property)):
		if name.startswith("_") or name in seen or attr.fget is None:
			continue
		ret = _type_hints(attr.fget).get("return", Any)
		seen.add(name)
		out.append(MemberRef(owner=cls, name=name, type=ret))
	return out


__all__ = [
	"EMPTY",
	"MemberRef",
	"MemberChain",
	"format_chain",
	"ParameterDecl",
	"ConstructorSig",
	"constructor_from_callable",
	"constructor_of",
	"members_of",
]
