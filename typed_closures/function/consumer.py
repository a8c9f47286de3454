# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""Consumers: one- and two-argument shapes called for their side effects."""

from __future__ import annotations

from typing import Any, Callable

from typed_closures.function.shape import FunctionalShape


class Consumer(FunctionalShape):
	ARITY = 1

	@classmethod
	def of(cls, closure: Callable[[Any], Any]) -> "Consumer":
		return cls(cls._contract_for(closure))

	def accept(self, value: Any) -> None:
		self._contract.invoke(value)


class BiConsumer(FunctionalShape):
	ARITY = 2

	@classmethod
	def of(cls, closure: Callable[[Any, Any], Any]) -> "BiConsumer":
		return cls(cls._contract_for(closure))

	def accept(self, value: Any, value2: Any) -> None:
		self._contract.invoke(value, value2)


__all__ = ["Consumer", "BiConsumer"]
