# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Semantic type categories and the classifier that maps values and names onto them.

Every comparison above this module is a plain equality between two
`SemanticType` members: values are classified by their exact runtime class,
names through a fixed synonym table. Subclasses of builtins are composite
values (they carry their own class identity) and classify as OBJECT.
"""

from __future__ import annotations

import io
import mmap
import socket
from enum import Enum
from typing import Any, Dict

from typed_closures.core.errors import UnrecognizedTypeName
from typed_closures.core.type_names import parse_type_name


class SemanticType(Enum):
	"""Closed set of categories a runtime value can belong to."""

	BOOLEAN = "boolean"
	INTEGER = "integer"
	FLOAT = "float"
	STRING = "string"
	ARRAY = "array"
	OBJECT = "object"
	EXTERNAL_HANDLE = "resource"
	CLOSED_HANDLE = "resource (closed)"
	NULL = "null"
	UNKNOWN = "unknown type"

	@property
	def canonical_name(self) -> str:
		return self.value

	def is_boolean(self) -> bool:
		return self is SemanticType.BOOLEAN

	def is_integer(self) -> bool:
		return self is SemanticType.INTEGER

	def is_float(self) -> bool:
		return self is SemanticType.FLOAT

	def is_string(self) -> bool:
		return self is SemanticType.STRING

	def is_array(self) -> bool:
		return self is SemanticType.ARRAY

	def is_object(self) -> bool:
		return self is SemanticType.OBJECT

	def is_handle(self) -> bool:
		"""True for both open and closed handles."""
		return self in (SemanticType.EXTERNAL_HANDLE, SemanticType.CLOSED_HANDLE)

	def is_closed_handle(self) -> bool:
		return self is SemanticType.CLOSED_HANDLE

	def is_null(self) -> bool:
		return self is SemanticType.NULL

	def is_unknown(self) -> bool:
		return self is SemanticType.UNKNOWN


_SYNONYMS: Dict[str, SemanticType] = {
	"boolean": SemanticType.BOOLEAN,
	"bool": SemanticType.BOOLEAN,
	"integer": SemanticType.INTEGER,
	"int": SemanticType.INTEGER,
	"double": SemanticType.FLOAT,
	"float": SemanticType.FLOAT,
	"string": SemanticType.STRING,
	"str": SemanticType.STRING,
	"array": SemanticType.ARRAY,
	"object": SemanticType.OBJECT,
	"resource": SemanticType.EXTERNAL_HANDLE,
	"resource (closed)": SemanticType.CLOSED_HANDLE,
	"null": SemanticType.NULL,
	"void": SemanticType.NULL,
	"none": SemanticType.NULL,
	"unknown type": SemanticType.UNKNOWN,
}

# Exact classes only: subclasses of these are composite values.
_EXACT_CLASSES: Dict[type, SemanticType] = {
	bool: SemanticType.BOOLEAN,
	int: SemanticType.INTEGER,
	float: SemanticType.FLOAT,
	str: SemanticType.STRING,
	bytes: SemanticType.STRING,
	list: SemanticType.ARRAY,
	tuple: SemanticType.ARRAY,
	dict: SemanticType.ARRAY,
	set: SemanticType.ARRAY,
	frozenset: SemanticType.ARRAY,
	type(None): SemanticType.NULL,
}

_HANDLE_CLASSES = (io.IOBase, socket.socket, mmap.mmap)


def _handle_state(value: Any) -> SemanticType:
	if isinstance(value, socket.socket):
		# A closed socket reports fileno() == -1 rather than raising.
		return SemanticType.CLOSED_HANDLE if value.fileno() == -1 else SemanticType.EXTERNAL_HANDLE
	return SemanticType.CLOSED_HANDLE if value.closed else SemanticType.EXTERNAL_HANDLE


def classify_value(value: Any) -> SemanticType:
	"""Return the semantic category of `value`. Never raises."""
	category = _EXACT_CLASSES.get(type(value))
	if category is not None:
		return category
	if value is Ellipsis or value is NotImplemented:
		return SemanticType.UNKNOWN
	if isinstance(value, _HANDLE_CLASSES):
		try:
			return _handle_state(value)
		except Exception:
			return SemanticType.UNKNOWN
	return SemanticType.OBJECT


def classify_class(cls: type) -> SemanticType:
	"""
	Return the category that instances of exactly `cls` classify to.

	Handle classes report EXTERNAL_HANDLE: open/closed is a property of an
	instance, not of its class.
	"""
	category = _EXACT_CLASSES.get(cls)
	if category is not None:
		return category
	if issubclass(cls, _HANDLE_CLASSES):
		return SemanticType.EXTERNAL_HANDLE
	return SemanticType.OBJECT


def lookup_name(name: str) -> SemanticType | None:
	"""Vocabulary lookup that returns None instead of raising for non-vocabulary names."""
	return _SYNONYMS.get(parse_type_name(name).key)


def classify_name(name: str) -> SemanticType:
	"""
	Resolve a declared type name through the synonym table (case-insensitive).

	Class names are not part of the vocabulary; they are resolved one level up
	by class identity.

	Raises:
	  UnrecognizedTypeName: for empty, malformed, or unknown names.
	"""
	category = lookup_name(name)
	if category is None:
		raise UnrecognizedTypeName(name, "not a semantic type name")
	return category


def canonical_synonym(name: str) -> str:
	"""Return the canonical spelling of a vocabulary name (e.g. "bool" -> "boolean")."""
	return classify_name(name).canonical_name


__all__ = [
	"SemanticType",
	"classify_value",
	"classify_class",
	"classify_name",
	"lookup_name",
	"canonical_synonym",
]
