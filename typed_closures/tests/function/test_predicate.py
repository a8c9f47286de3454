# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
import pytest

from typed_closures.core.errors import FunctionalTypeError
from typed_closures.function import Predicate, ToFloatFunction, ToIntFunction
from typed_closures.test_support import SampleObject


@pytest.mark.parametrize("outcome", [True, False])
def test_predicate_returns_result_unmodified(outcome):
	assert Predicate.of(lambda value: outcome).test(SampleObject()) is outcome


def test_predicate_on_values():
	is_set = Predicate.of(lambda item: item.setter_invoked)
	assert is_set.test(SampleObject().set_value("x")) is True
	assert is_set.test(SampleObject()) is False


def test_predicate_translates_type_errors():
	with pytest.raises(FunctionalTypeError):
		Predicate.of(lambda value: value > 3).test("three")


def test_to_int_function():
	assert ToIntFunction.of(len).apply_as_int([1, 2]) == 2
	assert ToIntFunction.of(lambda item: len(item.value)).apply_as_int(SampleObject()) == len("DefaultValue")


def test_to_int_function_translates_type_errors():
	with pytest.raises(FunctionalTypeError):
		ToIntFunction.of(len).apply_as_int(5)


def test_to_float_function():
	assert ToFloatFunction.of(lambda s: len(s) / 2).apply_as_float("abcd") == 2.0
