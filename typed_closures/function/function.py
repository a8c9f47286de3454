# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Transforming shapes: Function, IntFunction and BiFunction."""

from __future__ import annotations

from typing import Any, Callable, Optional

from typed_closures.core.errors import FunctionalTypeError
from typed_closures.function.shape import ResultTypedShape, resolve_declared


class Function(ResultTypedShape):
	"""One argument in, one value out; the result is validated when a type is declared."""

	ARITY = 1

	@classmethod
	def of(cls, closure: Callable[[Any], Any], declared_type: Optional[str] = None) -> "Function":
		return cls(cls._contract_for(closure), resolve_declared(declared_type))

	def apply(self, value: Any) -> Any:
		return self._check_result(self._contract.invoke(value))


class IntFunction(ResultTypedShape):
	"""
	Transforms a raw integer.

	The argument is a primitive, so the declared type never applies to it; it
	only has to be an int (int subclasses such as IntEnum members count,
	booleans do not).
	"""

	ARITY = 1

	@classmethod
	def of(cls, closure: Callable[[int], Any], declared_type: Optional[str] = None) -> "IntFunction":
		return cls(cls._contract_for(closure), resolve_declared(declared_type))

	def apply(self, value: int) -> Any:
		if not isinstance(value, int) or isinstance(value, bool):
			raise FunctionalTypeError(
				f"IntFunction.apply: Argument #1 must be of type int, {type(value).__qualname__} given"
			)
		return self._check_result(self._contract.invoke(value))


class BiFunction(ResultTypedShape):
	"""Two arguments in, one value out; the operands are not assumed to share a type."""

	ARITY = 2

	@classmethod
	def of(cls, closure: Callable[[Any, Any], Any], declared_type: Optional[str] = None) -> "BiFunction":
		return cls(cls._contract_for(closure), resolve_declared(declared_type))

	def apply(self, value: Any, value2: Any) -> Any:
		return self._check_result(self._contract.invoke(value, value2))


__all__ = ["Function", "IntFunction", "BiFunction"]
