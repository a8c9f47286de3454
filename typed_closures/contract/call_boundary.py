# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Call-boundary checks derived from a callable's own annotations.

A wrapped callable may annotate its parameters and return value with classes
(`def f(item: Order) -> Invoice`). Those annotations are read once when the
contract is created and enforced on every call with `isinstance`, so a
callable rejects an argument of the wrong class the same way a typed
function would. The raised `TypeError` names the callable, the parameter
and its position; the contract hands it to the error translator.

Only annotations with a runtime meaning are enforced: plain classes, `None`,
and `Optional`/`Union` of those. Generic aliases (`list[int]`), `Any`,
protocols and type variables are left alone.
"""

from __future__ import annotations

import inspect
import logging
import types
from dataclasses import dataclass
from typing import Any, Callable, Optional, Sequence, Tuple, Union, get_args, get_origin

logger = logging.getLogger(__name__)

# Implicit numeric promotion accepted by annotations (an int is a valid float).
_PROMOTIONS = {
	float: (int,),
	complex: (float, int),
}

_UNION_ORIGINS = (Union, types.UnionType)


def runtime_types(annotation: Any) -> Optional[Tuple[type, ...]]:
	"""
	Return the classes an annotation accepts at runtime, or None when the
	annotation cannot be enforced with `isinstance`.
	"""
	if annotation is inspect.Parameter.empty or annotation is Any:
		return None
	if annotation is None or annotation is type(None):
		return (type(None),)
	origin = get_origin(annotation)
	if origin in _UNION_ORIGINS:
		accepted: list[type] = []
		for arg in get_args(annotation):
			part = runtime_types(arg)
			if part is None:
				return None
			accepted.extend(part)
		return tuple(accepted)
	if origin is None and isinstance(annotation, type):
		return (annotation, *_PROMOTIONS.get(annotation, ()))
	return None


def _describe(accepted: Tuple[type, ...]) -> str:
	names: list[str] = []
	for cls in accepted:
		name = "None" if cls is type(None) else cls.__qualname__
		if name not in names:
			names.append(name)
	return "|".join(names)


def _type_label(value: Any) -> str:
	return "None" if value is None else type(value).__qualname__


@dataclass(frozen=True)
class ParameterCheck:
	position: int
	name: str
	accepted: Tuple[type, ...]


@dataclass(frozen=True)
class CallBoundary:
	"""Annotation-derived checks for one callable."""

	label: str
	parameters: Tuple[ParameterCheck, ...]
	returns: Optional[Tuple[type, ...]] = None

	@property
	def is_empty(self) -> bool:
		return not self.parameters and self.returns is None

	def check_arguments(self, args: Sequence[Any]) -> None:
		for check in self.parameters:
			if check.position >= len(args):
				continue
			value = args[check.position]
			if not isinstance(value, check.accepted):
				raise TypeError(
					f"{self.label}(): Argument #{check.position + 1} ({check.name}) must be of type "
					f"{_describe(check.accepted)}, {_type_label(value)} given"
				)

	def check_result(self, result: Any) -> None:
		if self.returns is not None and not isinstance(result, self.returns):
			raise TypeError(
				f"{self.label}(): Return value must be of type {_describe(self.returns)}, "
				f"{_type_label(result)} returned"
			)


def _callable_label(func: Callable[..., Any]) -> str:
	label = getattr(func, "__qualname__", None)
	if isinstance(label, str):
		return label
	return type(func).__qualname__


def _evaluated_signature(func: Callable[..., Any], sig: inspect.Signature) -> inspect.Signature:
	"""Resolve string annotations (postponed evaluation); fall back to `sig` when they cannot be."""
	has_strings = isinstance(sig.return_annotation, str) or any(
		isinstance(p.annotation, str) for p in sig.parameters.values()
	)
	if not has_strings:
		return sig
	try:
		return inspect.signature(func, eval_str=True)
	except (NameError, AttributeError, SyntaxError, TypeError) as exc:
		logger.warning("skipping unresolvable annotations on %s: %s", _callable_label(func), exc)
		return sig


def build_call_boundary(func: Callable[..., Any], sig: inspect.Signature) -> CallBoundary:
	"""Read the annotations of `func` (whose signature is `sig`) into a CallBoundary."""
	sig = _evaluated_signature(func, sig)
	checks: list[ParameterCheck] = []
	position = 0
	for param in sig.parameters.values():
		if param.kind not in (param.POSITIONAL_ONLY, param.POSITIONAL_OR_KEYWORD):
			continue
		accepted = None if isinstance(param.annotation, str) else runtime_types(param.annotation)
		if accepted is not None:
			checks.append(ParameterCheck(position=position, name=param.name, accepted=accepted))
		position += 1
	returns = None
	# A class signature carries __init__'s "-> None"; calling it returns an instance.
	if not isinstance(func, type) and not isinstance(sig.return_annotation, str):
		returns = runtime_types(sig.return_annotation)
	boundary = CallBoundary(label=_callable_label(func), parameters=tuple(checks), returns=returns)
	if not boundary.is_empty:
		logger.debug(
			"call boundary for %s: %d checked parameter(s), return checked: %s",
			boundary.label,
			len(boundary.parameters),
			boundary.returns is not None,
		)
	return boundary


__all__ = ["CallBoundary", "ParameterCheck", "build_call_boundary", "runtime_types"]
