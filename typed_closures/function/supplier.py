# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Zero-argument shapes: Supplier (produces a value) and Runnable (side effect only)."""

from __future__ import annotations

from typing import Any, Callable, Optional

from typed_closures.function.shape import FunctionalShape, ResultTypedShape, resolve_declared


class Supplier(ResultTypedShape):
	"""Produces a value on each `get`; validated when a type is declared."""

	ARITY = 0

	@classmethod
	def of(cls, closure: Callable[[], Any], declared_type: Optional[str] = None) -> "Supplier":
		return cls(cls._contract_for(closure), resolve_declared(declared_type))

	def get(self) -> Any:
		return self._check_result(self._contract.invoke())


class Runnable(FunctionalShape):
	ARITY = 0

	@classmethod
	def of(cls, closure: Callable[[], Any]) -> "Runnable":
		return cls(cls._contract_for(closure))

	def run(self) -> None:
		self._contract.invoke()


__all__ = ["Supplier", "Runnable"]
