"""
typed_closures.function: the typed functional wrappers.

Each wrapper is built with `Shape.of(callable[, declared_type])` and exposes a
single invocation method:

  Supplier.get, Runnable.run, Consumer.accept, BiConsumer.accept,
  Function.apply, IntFunction.apply, BiFunction.apply, UnaryOperator.apply,
  BinaryOperator.apply, Predicate.test, ToIntFunction.apply_as_int,
  ToFloatFunction.apply_as_float
"""

from typed_closures.function.consumer import BiConsumer, Consumer
from typed_closures.function.function import BiFunction, Function, IntFunction
from typed_closures.function.operators import BinaryOperator, UnaryOperator
from typed_closures.function.predicate import Predicate, ToFloatFunction, ToIntFunction
from typed_closures.function.supplier import Runnable, Supplier

__all__ = [
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
