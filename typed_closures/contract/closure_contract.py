# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
ClosureContract: one wrapped callable plus the checks around calling it.

A contract exists only for callables whose positional parameter count equals
the expected arity; `create` refuses anything else. The signature is
introspected once, at creation, and the annotation checks derived from it are
cached on the contract.

Every `TypeError` that escapes a call (annotation checks, or the callable's
own body) is re-raised as a translated `FunctionalTypeError`, so callers never
see the raw call-boundary message.
"""

from __future__ import annotations

import inspect
import logging
from typing import Any, Callable, Optional

from typed_closures.config import get_config
from typed_closures.contract.call_boundary import CallBoundary, build_call_boundary
from typed_closures.contract.error_translator import translate
from typed_closures.core.declared import DeclaredType, as_declared
from typed_closures.core.errors import ArityMismatch, FunctionalTypeError

logger = logging.getLogger(__name__)

_POSITIONAL = (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD)
_VARIADIC = (inspect.Parameter.VAR_POSITIONAL, inspect.Parameter.VAR_KEYWORD)


def count_parameters(sig: inspect.Signature, expected_arity: int) -> int:
	"""
	Return the number of positional parameters in `sig`.

	Raises:
	  ArityMismatch: for variadic callables and callables with a required
	  keyword-only parameter; neither can be called with a fixed positional
	  argument list.
	"""
	count = 0
	for param in sig.parameters.values():
		if param.kind in _VARIADIC:
			raise ArityMismatch(f"variadic parameter '{param.name}' is not supported", expected=expected_arity)
		if param.kind is inspect.Parameter.KEYWORD_ONLY:
			if param.default is inspect.Parameter.empty:
				raise ArityMismatch(f"required keyword-only parameter '{param.name}' is not supported", expected=expected_arity)
			continue
		if param.kind in _POSITIONAL:
			count += 1
	return count


class ClosureContract:
	"""Holds a callable with a verified arity and invokes it under contract."""

	def __init__(self, closure: Callable[..., Any], arity: int, boundary: Optional[CallBoundary]) -> None:
		self._closure = closure
		self._arity = arity
		self._boundary = boundary

	@property
	def closure(self) -> Callable[..., Any]:
		return self._closure

	@property
	def arity(self) -> int:
		return self._arity

	@property
	def boundary(self) -> Optional[CallBoundary]:
		return self._boundary

	@classmethod
	def create(cls, closure: Callable[..., Any], expected_arity: int) -> "ClosureContract":
		"""
		Build a contract for `closure`, which must take exactly `expected_arity`
		positional parameters.

		Raises:
		  ArityMismatch: on a parameter count mismatch, or when the callable's
		  signature cannot be introspected.
		"""
		try:
			sig = inspect.signature(closure)
		except (TypeError, ValueError) as exc:
			raise ArityMismatch(
				f"failed to determine the parameter count: {exc}",
				expected=expected_arity,
			) from exc
		actual = count_parameters(sig, expected_arity)
		if actual != expected_arity:
			raise ArityMismatch(
				f"closure takes {actual} parameter(s), expected {expected_arity}",
				expected=expected_arity,
				actual=actual,
			)
		boundary = None
		if get_config().enforce_annotations:
			boundary = build_call_boundary(closure, sig)
			if boundary.is_empty:
				boundary = None
		logger.debug("created contract for %r with arity %d", closure, expected_arity)
		return cls(closure, expected_arity, boundary)

	def invoke(self, *args: Any) -> Any:
		"""
		Call the wrapped closure with `args`.

		Raises:
		  FunctionalTypeError: when the call boundary or the closure raises TypeError.
		"""
		try:
			if self._boundary is not None:
				self._boundary.check_arguments(args)
			result = self._closure(*args)
			if self._boundary is not None:
				self._boundary.check_result(result)
		except TypeError as exc:
			raise translate(exc) from exc
		return result

	def validate_type(self, value: Any, declared: "str | DeclaredType") -> None:
		"""
		Check `value` against a declared type name (or an already resolved DeclaredType).

		Raises:
		  UnrecognizedTypeName: when `declared` is a name that does not resolve.
		  FunctionalTypeError: when `value` does not satisfy the declared type.
		"""
		declared_type = as_declared(declared)
		if not declared_type.matches(value):
			raise FunctionalTypeError(
				f"Passed argument is not of the valid datatype: expected {declared_type.name}, "
				f"got {type(value).__qualname__}"
			)


__all__ = ["ClosureContract", "count_parameters"]
