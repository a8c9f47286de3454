# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Common base for the typed functional wrappers.

Every shape fixes an arity; `of` routes the callable through
`ClosureContract.create`, so a wrapper never exists around a callable with the
wrong parameter count. Shapes that produce a value may also carry a declared
type, resolved once at construction.
"""

from __future__ import annotations

from typing import Any, Callable, ClassVar, Optional

from typed_closures.contract.closure_contract import ClosureContract
from typed_closures.core.declared import DeclaredType


def resolve_declared(declared_type: Optional[str]) -> Optional[DeclaredType]:
	if declared_type is None:
		return None
	return DeclaredType.resolve(declared_type)


class FunctionalShape:
	"""A ClosureContract with a fixed arity; subclasses add the invocation method."""

	ARITY: ClassVar[int]

	def __init__(self, contract: ClosureContract) -> None:
		self._contract = contract

	@classmethod
	def _contract_for(cls, closure: Callable[..., Any]) -> ClosureContract:
		return ClosureContract.create(closure, cls.ARITY)

	def __repr__(self) -> str:
		return f"{type(self).__name__}({self._contract.closure!r})"


class ResultTypedShape(FunctionalShape):
	"""A shape whose result is validated against an optional declared type."""

	def __init__(self, contract: ClosureContract, declared: Optional[DeclaredType] = None) -> None:
		super().__init__(contract)
		self._declared = declared

	def _check_result(self, result: Any) -> Any:
		if self._declared is not None:
			self._contract.validate_type(result, self._declared)
		return result


__all__ = ["FunctionalShape", "ResultTypedShape", "resolve_declared"]
