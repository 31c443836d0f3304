# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-18
"""ConstructorBindingSet: convention binding, lookup, caching and configuration."""

from dataclasses import dataclass, field

import pytest

from ctorbind import (
	ConfigurationError,
	ConstructorBindingSet,
	ConstructorSig,
	FuncResolver,
	MappingConfiguration,
	NameConventionMatcher,
	ParameterDecl,
	TypeMapping,
	constructor_of,
)


@dataclass
class PersonSource:
	name: str
	age: int


@dataclass
class Person:
	name: str
	age: int


@dataclass
class NamedOnly:
	name: str


@dataclass
class Profile:
	name: str
	nickname: str = ""


@dataclass
class Tagged:
	name: str
	tags: list = field(default_factory=list)


class NoArgs:
	def __init__(self) -> None:
		pass


def _bind(source_type, dest_type):
	tm = TypeMapping(source_type, dest_type)
	tm.bind_constructor(constructor_of(dest_type), NameConventionMatcher())
	return tm, tm.constructor_map


def test_bindings_follow_declaration_order():
	_, cm = _bind(PersonSource, Person)
	assert len(cm) == len(cm.ctor.params) == 2
	assert [p.destination_name for p in cm.params] == ["name", "age"]
	assert [p.parameter.position for p in cm.params] == [0, 1]


def test_both_parameters_resolved_by_convention():
	_, cm = _bind(PersonSource, Person)
	assert cm.can_resolve is True
	assert [m.name for m in cm.params[0].source_members] == ["name"]
	assert [m.name for m in cm.params[1].source_members] == ["age"]
	assert cm.params[1].resolve(PersonSource(name="ann", age=41)) == 41


def test_zero_parameter_constructor_is_vacuously_resolvable():
	_, cm = _bind(PersonSource, NoArgs)
	assert len(cm) == 0
	assert cm.can_resolve is True


def test_optional_parameter_left_unresolved_uses_declared_default():
	tm, cm = _bind(NamedOnly, Profile)
	assert cm.can_resolve is False
	nickname = cm.get("nickname")
	assert nickname is not None and not nickname.can_resolve
	assert nickname.default_value(MappingConfiguration()) == ""
	# Only optional parameters are missing: the constructor is still usable.
	assert tm.validate() == []


def test_factory_default_is_built_fresh_per_call():
	tm, cm = _bind(NamedOnly, Tagged)
	tags = cm.get("tags")
	assert not tags.can_resolve
	assert tags.parameter.is_optional
	config = MappingConfiguration()
	first = tags.default_value(config)
	assert first == []
	assert first is not tags.default_value(config)
	assert tm.validate() == []


def test_required_parameter_default_is_zero_value():
	_, cm = _bind(NamedOnly, Person)
	age = cm.get("age")
	assert age.default_value(MappingConfiguration()) == 0


def test_lookup_is_case_insensitive():
	_, cm = _bind(PersonSource, Person)
	assert cm.get("NAME") is cm.params[0]
	assert cm.get("Age") is cm.params[1]
	assert cm.get("missing") is None


def test_reset_clears_bindings_and_cache():
	tm, cm = _bind(PersonSource, Person)
	assert cm.can_resolve is True
	cm.reset(constructor_of(Profile))
	assert cm.ctor == constructor_of(Profile)
	assert len(cm) == 0
	# Nothing added yet: vacuously true, but recomputed rather than stale.
	cm.can_resolve = False
	cm.reset(constructor_of(Profile))
	assert cm.can_resolve is True


def test_can_resolve_is_memoized_until_invalidated():
	tm, cm = _bind(NamedOnly, Person)
	assert cm.can_resolve is False
	cm.can_resolve = True
	assert cm.can_resolve is True
	cm.can_resolve = None
	assert cm.can_resolve is False


def test_add_parameter_prefers_first_non_empty_candidate():
	tm = TypeMapping(PersonSource, Person)
	cm = ConstructorBindingSet()
	ctor = constructor_of(Person)
	cm.reset(ctor)
	chains = NameConventionMatcher().candidates("name", PersonSource)
	binding = cm.add_parameter(ctor.params[0], [(), chains[0]], tm)
	assert binding.can_resolve
	assert binding.source_members == chains[0]
	unbound = cm.add_parameter(ctor.params[1], [], tm)
	assert not unbound.can_resolve
	assert unbound.source_members == ()


def test_duplicate_names_differing_in_case_are_rejected():
	tm = TypeMapping(PersonSource, Person)
	ctor = ConstructorSig(
		owner=Person,
		name="create",
		params=(ParameterDecl(0, "name", str), ParameterDecl(1, "Name", str)),
	)
	with pytest.raises(ConfigurationError, match="differ only in case") as excinfo:
		tm.bind_constructor(ctor, NameConventionMatcher())
	assert excinfo.value.reason_code == "duplicate-parameter-name"
	assert excinfo.value.to_dict()["parameter_names"] == ["name", "Name"]


def test_configure_parameter_installs_resolver():
	tm, cm = _bind(NamedOnly, Person)
	assert cm.can_resolve is False
	before = cm.get("name")
	cm.configure_parameter("AGE", FuncResolver(lambda src: len(src.name)))
	assert cm.can_resolve is True
	assert cm.get("name") is before
	assert cm.get("age").resolve(NamedOnly(name="bob")) == 3


def test_configure_unknown_parameter_raises():
	_, cm = _bind(NamedOnly, Person)
	with pytest.raises(KeyError):
		cm.configure_parameter("height", FuncResolver(lambda src: 0))


def test_validate_names_unresolved_required_parameters():
	tm, _ = _bind(NamedOnly, Person)
	diags = tm.validate()
	assert len(diags) == 1
	assert diags[0].code == "no-usable-constructor"
	assert diags[0].phase == "configure"
	assert "age" in diags[0].message
	assert "name" not in diags[0].message.split("parameter(s)")[1]


def test_validation_and_plan_render_for_humans():
	tm, cm = _bind(NamedOnly, Person)
	text = tm.validate()[0].format_human()
	assert text.startswith("error[no-usable-constructor] TypeMapping(NamedOnly -> Person):")
	assert "note: constructor: Person.__init__(name, age)" in text
	assert cm.describe().splitlines() == [
		"Person.__init__(name, age)",
		"  name <- name",
		"  age: <unresolved>",
	]


def test_validate_without_bound_constructor():
	diags = TypeMapping(NamedOnly, Person).validate()
	assert [d.code for d in diags] == ["no-constructor"]
