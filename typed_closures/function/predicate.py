# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
One-argument shapes with a scalar result: Predicate, ToIntFunction, ToFloatFunction.

None of these declare a type; the result is returned exactly as the callable
produced it.
"""

from __future__ import annotations

from typing import Any, Callable

from typed_closures.function.shape import FunctionalShape


class Predicate(FunctionalShape):
	ARITY = 1

	@classmethod
	def of(cls, closure: Callable[[Any], bool]) -> "Predicate":
		return cls(cls._contract_for(closure))

	def test(self, value: Any) -> bool:
		return self._contract.invoke(value)


class ToIntFunction(FunctionalShape):
	ARITY = 1

	@classmethod
	def of(cls, closure: Callable[[Any], int]) -> "ToIntFunction":
		return cls(cls._contract_for(closure))

	def apply_as_int(self, value: Any) -> int:
		return self._contract.invoke(value)


class ToFloatFunction(FunctionalShape):
	ARITY = 1

	@classmethod
	def of(cls, closure: Callable[[Any], float]) -> "ToFloatFunction":
		return cls(cls._contract_for(closure))

	def apply_as_float(self, value: Any) -> float:
		return self._contract.invoke(value)


__all__ = ["Predicate", "ToIntFunction", "ToFloatFunction"]
