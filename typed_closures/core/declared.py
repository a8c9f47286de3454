# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Declared types: a type name resolved once, checked many times.

A declared name resolves to up to two things:
  - a semantic category, used for scalar/array/handle values;
  - a class handle, used for composite values (class identity).

Vocabulary words (`int`, `string`, `resource (closed)`) always carry a
category; they also carry a class handle when a builtin of that name exists
(`int`, `float`, `bool`, `str`, `object`). Any other name must resolve to a
class, whose category comes from `classify_class`.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from typed_closures.core.class_identity import ClassHandle, class_of, resolve_class
from typed_closures.core.errors import UnrecognizedTypeName
from typed_closures.core.semantic_types import SemanticType, classify_class, classify_value, lookup_name
from typed_closures.core.type_names import parse_type_name


@dataclass(frozen=True)
class DeclaredType:
	"""A resolved declared type. `name` is the normalized declared text."""

	name: str
	category: Optional[SemanticType]
	class_handle: Optional[ClassHandle] = None

	def matches(self, value: Any) -> bool:
		"""
		Return True when `value` satisfies this declared type.

		Composite values must match the class handle exactly; every other value
		must match the category.
		"""
		actual = classify_value(value)
		if actual is SemanticType.OBJECT:
			return self.class_handle is not None and class_of(value) == self.class_handle
		return self.category is actual

	@classmethod
	def resolve(cls, name: str) -> "DeclaredType":
		"""
		Resolve a declared type name.

		Raises:
		  UnrecognizedTypeName: when the name is malformed, or is neither a
		  vocabulary word nor an importable class.
		"""
		ref = parse_type_name(name)
		category = lookup_name(name)
		if category is not None:
			handle: Optional[ClassHandle] = None
			if ref.is_single_word:
				try:
					handle = resolve_class(ref.key)
				except UnrecognizedTypeName:
					handle = None
			return cls(name=ref.text, category=category, class_handle=handle)
		handle = resolve_class(ref.text)
		return cls(name=handle.name, category=classify_class(handle.cls), class_handle=handle)

	@classmethod
	def of_value(cls, value: Any) -> "DeclaredType":
		"""The declared type a value would satisfy: its own category and exact class."""
		handle = class_of(value)
		return cls(name=handle.name, category=classify_value(value), class_handle=handle)


def as_declared(declared: "str | DeclaredType") -> DeclaredType:
	if isinstance(declared, DeclaredType):
		return declared
	return DeclaredType.resolve(declared)


__all__ = ["DeclaredType", "as_declared"]
