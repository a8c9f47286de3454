# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Function, IntFunction and BiFunction: results validated only when a type is declared.
"""

import enum

import pytest

from typed_closures.core.errors import FunctionalTypeError
from typed_closures.function import BiFunction, Function, IntFunction
from typed_closures.test_support import OTHER, SAMPLE, OtherObject, SampleObject


def relabel(item: SampleObject) -> SampleObject:
	return item.set_value("ISet")


def relabel_first(first: SampleObject, second: SampleObject) -> SampleObject:
	return first.set_value("Set")


def test_function_success():
	sample = SampleObject()
	result = Function.of(relabel).apply(sample)
	assert result is sample
	assert sample.value == "ISet"


def test_function_success_with_declared_type():
	result = Function.of(relabel, SAMPLE).apply(SampleObject())
	assert result.value == "ISet"


def test_function_may_change_type():
	sample = SampleObject()
	result = Function.of(lambda item: OtherObject().set_value("ISet"), OTHER).apply(sample)
	assert isinstance(result, OtherObject)
	assert not sample.setter_invoked


def test_function_invalid_result_type():
	with pytest.raises(FunctionalTypeError):
		Function.of(relabel, OTHER).apply(SampleObject())


def test_function_invalid_argument_type():
	with pytest.raises(FunctionalTypeError):
		Function.of(relabel).apply(OtherObject())


def test_function_scalar_result():
	assert Function.of(lambda s: len(s), "integer").apply("abc") == 3
	with pytest.raises(FunctionalTypeError):
		Function.of(lambda s: str(len(s)), "integer").apply("abc")


def test_int_function_success():
	build = IntFunction.of(lambda n: [SampleObject() for _ in range(n)], "array")
	assert len(build.apply(3)) == 3


def test_int_function_declared_type_does_not_apply_to_argument():
	make = IntFunction.of(lambda n: SampleObject().set_value(str(n)), SAMPLE)
	assert make.apply(7).value == "7"


@pytest.mark.parametrize("value", ["3", 3.0, True, None])
def test_int_function_requires_integer_argument(value):
	calls = []
	make = IntFunction.of(lambda n: calls.append(n))
	with pytest.raises(FunctionalTypeError):
		make.apply(value)
	assert calls == []


def test_int_function_invalid_result_type():
	with pytest.raises(FunctionalTypeError):
		IntFunction.of(lambda n: n, SAMPLE).apply(1)


def test_bi_function_success_leaves_second_argument_alone():
	first, second = SampleObject(), SampleObject()
	result = BiFunction.of(relabel_first).apply(first, second)
	assert first.setter_invoked
	assert not second.setter_invoked
	assert first.value == "Set"
	assert second.value == "DefaultValue"
	assert result.value == "Set"


def test_bi_function_with_declared_type():
	first, second = SampleObject(), SampleObject()
	result = BiFunction.of(relabel_first, SAMPLE).apply(first, second)
	assert result is first
	assert second.value == "DefaultValue"


def test_bi_function_operands_need_not_share_a_type():
	first, second = SampleObject(), SampleObject()
	result = BiFunction.of(lambda a, b: OtherObject().set_value("Set"), OTHER).apply(first, second)
	assert not first.setter_invoked
	assert not second.setter_invoked
	assert result.value == "Set"


def test_bi_function_invalid_result_type():
	with pytest.raises(FunctionalTypeError):
		BiFunction.of(relabel_first, OTHER).apply(SampleObject(), SampleObject())


def test_bi_function_invalid_argument_type():
	with pytest.raises(FunctionalTypeError):
		BiFunction.of(relabel_first).apply(SampleObject(), OtherObject())


class Level(enum.IntEnum):
	LOW = 1
	HIGH = 2


def test_int_function_accepts_int_subclasses():
	double = IntFunction.of(lambda n: n * 2)
	assert double.apply(Level.LOW) == 2
	assert double.apply(Level.HIGH) == 4
