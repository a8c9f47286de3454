# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Shared helpers for wrapper tests.

Sample classes live in an importable module (not a test file) so their
qualified names resolve through `resolve_class`, e.g.
`typed_closures.test_support.SampleObject`.
"""

from __future__ import annotations

SAMPLE = "typed_closures.test_support.SampleObject"
OTHER = "typed_closures.test_support.OtherObject"
CHILD = "typed_closures.test_support.SampleChild"


class SampleObject:
	"""Records whether its setter ran, so tests can observe closure side effects."""

	def __init__(self) -> None:
		self.value = "DefaultValue"
		self.setter_invoked = False

	def set_value(self, value: str) -> "SampleObject":
		self.setter_invoked = True
		self.value = value
		return self


class OtherObject:
	"""Unrelated to SampleObject, with the same interface."""

	def __init__(self) -> None:
		self.value = "DefaultValue"
		self.setter_invoked = False

	def set_value(self, value: str) -> "OtherObject":
		self.setter_invoked = True
		self.value = value
		return self


class SampleChild(SampleObject):
	"""Subclass used to show that class identity, not subtyping, is compared."""


__all__ = ["SAMPLE", "OTHER", "CHILD", "SampleObject", "OtherObject", "SampleChild"]
