# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
# author: Sławomir Liszniański; created: 2026-10-18
"""
ctorbind: constructor-binding resolution for object-to-object mapping.

For a destination constructor, decide whether every parameter can be supplied
from a source object and record where each value comes from. Nothing here
executes a mapping.
"""

from ctorbind.config import MappingConfiguration
from ctorbind.constructor_binding import ConstructorBindingSet
from ctorbind.convention import ConventionMatcher, NameConventionMatcher
from ctorbind.core.members import (
	EMPTY,
	ConstructorSig,
	MemberRef,
	ParameterDecl,
	constructor_from_callable,
	constructor_of,
	members_of,
)
from ctorbind.errors import ConfigurationError
from ctorbind.included_member import IncludedMember
from ctorbind.parameter_binding import ParameterBinding
from ctorbind.resolvers import FuncResolver, MemberPathResolver, ValueResolver
from ctorbind.type_mapping import TypeMapping

__all__ = [
	"EMPTY",
	"ConfigurationError",
	"ConstructorBindingSet",
	"ConstructorSig",
	"ConventionMatcher",
	"FuncResolver",
	"IncludedMember",
	"MappingConfiguration",
	"MemberPathResolver",
	"MemberRef",
	"NameConventionMatcher",
	"ParameterBinding",
	"ParameterDecl",
	"TypeMapping",
	"ValueResolver",
	"constructor_from_callable",
	"constructor_of",
	"members_of",
]
