# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Same-type operators: UnaryOperator and BinaryOperator.

BinaryOperator checks both operands against the declared type *before* the
callable runs, so a mismatched operand never reaches the computation.

UnaryOperator may be built without a declared type. Its type then goes
through two states:

  Unset          no type enforced yet
  Learned(type)  the type of the first call's result

The first call records its result type before validating, so the first call
is held to the learned type like every later one. The transition happens
under a lock: when several threads make the first call at once, exactly one
of them records the type and the others validate against it.
"""

from __future__ import annotations

import logging
import threading
from dataclasses import dataclass
from typing import Any, Optional, Union

from typed_closures.contract.closure_contract import ClosureContract
from typed_closures.core.declared import DeclaredType
from typed_closures.function.function import BiFunction, Function

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Unset:
	"""No type has been declared or learned yet."""


@dataclass(frozen=True)
class Learned:
	declared: DeclaredType


TypeState = Union[Unset, Learned]


class UnaryOperator(Function):
	"""A Function whose argument and result share one declared or learned type."""

	def __init__(self, contract: ClosureContract, declared: Optional[DeclaredType] = None) -> None:
		super().__init__(contract, declared)
		self._state: TypeState = Unset() if declared is None else Learned(declared)
		self._state_lock = threading.Lock()

	def _establish(self, result: Any) -> DeclaredType:
		state = self._state
		if isinstance(state, Learned):
			return state.declared
		with self._state_lock:
			if isinstance(self._state, Unset):
				self._state = Learned(DeclaredType.of_value(result))
				logger.debug("%r learned type %s", self, self._state.declared.name)
			return self._state.declared

	def apply(self, value: Any) -> Any:
		result = self._contract.invoke(value)
		declared = self._establish(result)
		self._contract.validate_type(value, declared)
		self._contract.validate_type(result, declared)
		return result


class BinaryOperator(BiFunction):
	"""A BiFunction whose operands and result share the declared type."""

	def apply(self, value: Any, value2: Any) -> Any:
		if self._declared is not None:
			self._contract.validate_type(value, self._declared)
			self._contract.validate_type(value2, self._declared)
		return super().apply(value, value2)


__all__ = ["UnaryOperator", "BinaryOperator", "Unset", "Learned", "TypeState"]
