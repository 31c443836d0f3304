"""
ctorbind.core: shared member/signature primitives and diagnostics.

Modules:
  - members: MemberRef, member chains, ParameterDecl, ConstructorSig
  - diagnostics: Diagnostic record returned by validation
"""

__all__ = [
	"members",
	"diagnostics",
]
