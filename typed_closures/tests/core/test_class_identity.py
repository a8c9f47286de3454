# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Class identity resolution and DeclaredType matching.
"""

from __future__ import annotations

import collections

import pytest

from typed_closures.core.class_identity import class_of, qualified_name, resolve_class
from typed_closures.core.declared import DeclaredType, as_declared
from typed_closures.core.errors import UnrecognizedTypeName
from typed_closures.core.semantic_types import SemanticType
from typed_closures.test_support import CHILD, SAMPLE, SampleChild, SampleObject


def test_resolve_dotted_class():
	handle = resolve_class(SAMPLE)
	assert handle.cls is SampleObject
	assert handle.name == SAMPLE
	assert handle.short_name == "SampleObject"


def test_resolve_builtin_by_bare_name():
	assert resolve_class("int").cls is int
	assert resolve_class("object").cls is object
	assert resolve_class("int").name == "int"


def test_resolve_stdlib_class():
	handle = resolve_class("collections.OrderedDict")
	assert handle.cls is collections.OrderedDict
	assert handle == class_of(collections.OrderedDict())


@pytest.mark.parametrize(
	"name",
	["nope.Missing", "os.path", "os.path.join", "Frobnicate", "resource (closed)", "unknown type"],
)
def test_unresolvable_class_names(name):
	with pytest.raises(UnrecognizedTypeName):
		resolve_class(name)


def test_class_identity_ignores_subtyping():
	assert class_of(SampleObject()) == resolve_class(SAMPLE)
	assert class_of(SampleChild()) != resolve_class(SAMPLE)
	assert class_of(SampleChild()) == resolve_class(CHILD)


def test_qualified_name_of_nested_class():
	class Inner:
		pass

	assert qualified_name(Inner).endswith("test_qualified_name_of_nested_class.<locals>.Inner")
	assert qualified_name(str) == "str"


def test_declared_vocabulary_word():
	declared = DeclaredType.resolve("int")
	assert declared.category is SemanticType.INTEGER
	assert declared.matches(5)
	assert not declared.matches(True)
	assert not declared.matches(5.0)
	assert not declared.matches(SampleObject())


def test_declared_object_matches_only_plain_object_instances():
	declared = DeclaredType.resolve("object")
	assert declared.matches(object())
	assert not declared.matches(SampleObject())
	assert not declared.matches(1)


def test_declared_handle_word_has_no_class():
	declared = DeclaredType.resolve("resource (closed)")
	assert declared.category is SemanticType.CLOSED_HANDLE
	assert declared.class_handle is None


def test_declared_builtin_container_class_uses_its_category():
	declared = DeclaredType.resolve("dict")
	assert declared.category is SemanticType.ARRAY
	assert declared.matches({"a": 1})
	assert declared.matches([1])


def test_declared_class_name():
	declared = DeclaredType.resolve(SAMPLE)
	assert declared.name == SAMPLE
	assert declared.category is SemanticType.OBJECT
	assert declared.matches(SampleObject())
	assert not declared.matches(SampleChild())
	assert not declared.matches("SampleObject")


def test_declared_of_value():
	assert DeclaredType.of_value(SampleObject()).name == SAMPLE
	assert DeclaredType.of_value(3).category is SemanticType.INTEGER
	assert DeclaredType.of_value(3).matches(4)
	assert not DeclaredType.of_value(3).matches("4")


def test_as_declared_passes_resolved_types_through():
	declared = DeclaredType.resolve("string")
	assert as_declared(declared) is declared
	assert as_declared("string") == declared


def test_unknown_declared_name():
	with pytest.raises(UnrecognizedTypeName):
		DeclaredType.resolve("frobnicate")


def test_module_failing_at_import_is_unrecognized(tmp_path, monkeypatch):
	(tmp_path / "tc_broken_module.py").write_text("raise RuntimeError('boom')\n")
	monkeypatch.syspath_prepend(str(tmp_path))
	with pytest.raises(UnrecognizedTypeName) as excinfo:
		resolve_class("tc_broken_module.Thing")
	assert isinstance(excinfo.value.__cause__, RuntimeError)


def test_non_ascii_class_path(tmp_path, monkeypatch):
	(tmp_path / "tc_unicode_module.py").write_text("class Größe:\n\tpass\n", encoding="utf-8")
	monkeypatch.syspath_prepend(str(tmp_path))
	handle = resolve_class("tc_unicode_module.Größe")
	assert handle.name == "tc_unicode_module.Größe"
