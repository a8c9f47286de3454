# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Contract violation kinds raised by closure contracts and typed wrappers.

All three kinds are unrecoverable at the point of detection: nothing in this
package retries or swallows them. `ContractViolation` is the shared base so
callers can catch any arity/type failure in one clause, while each kind also
derives from the builtin exception a Python caller would expect (`ValueError`
for construction-time problems, `TypeError` for call-time mismatches).
"""

from __future__ import annotations


class ContractViolation(Exception):
	"""Base class for every arity or type validation failure."""


class ArityMismatch(ContractViolation, ValueError):
	"""
	A wrapped callable's parameter count does not match the wrapper shape.

	Also raised when the parameter count cannot be determined at all (the
	introspection failure is chained as `__cause__`). Only raised while a
	wrapper is being constructed.
	"""

	def __init__(self, message: str, *, expected: int, actual: int | None = None) -> None:
		super().__init__(message)
		self.expected = expected
		self.actual = actual


class UnrecognizedTypeName(ContractViolation, ValueError):
	"""A declared type name resolves neither to a semantic category nor to a class."""

	def __init__(self, name: str, reason: str | None = None) -> None:
		message = f"unrecognized type name {name!r}"
		if reason:
			message = f"{message}: {reason}"
		super().__init__(message)
		self.name = name


class FunctionalTypeError(ContractViolation, TypeError):
	"""An argument or result failed validation, or the call boundary rejected a value."""


__all__ = ["ContractViolation", "ArityMismatch", "UnrecognizedTypeName", "FunctionalTypeError"]
