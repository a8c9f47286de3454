# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
typed_closures: arity- and type-checked wrappers around Python callables.

Subpackages:
  core:      semantic type classification, class identity, errors
  contract:  ClosureContract, call-boundary checks, error translation
  function:  the typed functional wrappers (Supplier, Function, ...)
"""

from typed_closures.core.errors import (
	ArityMismatch,
	ContractViolation,
	FunctionalTypeError,
	UnrecognizedTypeName,
)
from typed_closures.core.semantic_types import SemanticType, classify_name, classify_value
from typed_closures.function import (
	BiConsumer,
	BiFunction,
	BinaryOperator,
	Consumer,
	Function,
	IntFunction,
	Predicate,
	Runnable,
	Supplier,
	ToFloatFunction,
	ToIntFunction,
	UnaryOperator,
)

__all__ = [
	"ArityMismatch",
	"ContractViolation",
	"FunctionalTypeError",
	"UnrecognizedTypeName",
	"SemanticType",
	"classify_name",
	"classify_value",
	"BiConsumer",
	"BiFunction",
	"BinaryOperator",
	"Consumer",
	"Function",
	"IntFunction",
	"Predicate",
	"Runnable",
	"Supplier",
	"ToFloatFunction",
	"ToIntFunction",
	"UnaryOperator",
]
