# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Class identity for composite values.

Composite values are compared by the fully-qualified name of their exact class
(`module.qualname`), never by `isinstance`: a subclass instance does not match
a declared superclass name.
"""

from __future__ import annotations

import builtins
import importlib
import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Any

from typed_closures.core.errors import UnrecognizedTypeName
from typed_closures.core.type_names import parse_type_name

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ClassHandle:
	"""Identity of a class; equality compares `name` only."""

	name: str
	cls: type = field(compare=False, repr=False)

	@property
	def short_name(self) -> str:
		return self.cls.__qualname__


def qualified_name(cls: type) -> str:
	"""Return `module.qualname` for `cls`, or the bare qualname for builtins."""
	module = cls.__module__
	if module == "builtins":
		return cls.__qualname__
	return f"{module}.{cls.__qualname__}"


def handle_for(cls: type) -> ClassHandle:
	return ClassHandle(name=qualified_name(cls), cls=cls)


def class_of(value: Any) -> ClassHandle:
	"""Return the handle of the exact class of `value`."""
	return handle_for(type(value))


def resolve_class(name: str) -> ClassHandle:
	"""
	Resolve a class name to its handle.

	Dotted names import the longest importable module prefix and walk the
	remaining attributes (`pkg.mod.Outer.Inner`). Bare names are looked up in
	`builtins`.

	Raises:
	  UnrecognizedTypeName: when nothing importable by that name is a class.
	"""
	ref = parse_type_name(name)
	if ref.qualifier is not None or any(" " in seg for seg in ref.segments):
		raise UnrecognizedTypeName(name, "not a class name")
	return _resolve_dotted(ref.segments)


@lru_cache(maxsize=256)
def _resolve_dotted(segments: tuple[str, ...]) -> ClassHandle:
	text = ".".join(segments)
	if len(segments) == 1:
		target = getattr(builtins, segments[0], None)
	else:
		target = _import_and_walk(segments)
	if not isinstance(target, type):
		raise UnrecognizedTypeName(text, "not a class")
	handle = handle_for(target)
	logger.debug("resolved class name %r to %s", text, handle.name)
	return handle


def _import_and_walk(segments: tuple[str, ...]) -> Any:
	for split in range(len(segments) - 1, 0, -1):
		module_name = ".".join(segments[:split])
		try:
			target: Any = importlib.import_module(module_name)
		except ImportError:
			continue
		except Exception as exc:
			raise UnrecognizedTypeName(".".join(segments), f"module {module_name!r} failed to import") from exc
		for attr in segments[split:]:
			target = getattr(target, attr, None)
			if target is None:
				break
		return target
	return None


__all__ = ["ClassHandle", "qualified_name", "handle_for", "class_of", "resolve_class"]
