# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Normalization of call-time type errors.

Errors raised while calling a wrapped closure mention call sites, parameter
names and the wrapper machinery itself. None of that is meaningful to the
caller of a typed wrapper, so the message is reduced to the part that
describes the mismatch:

  1. every parenthesized fragment is removed,
  2. anonymous-wrapper markers become the configured placeholder and
     `<locals>` qualifier prefixes are dropped,
  3. whitespace runs collapse to a single space.

The original error stays reachable as `__cause__`.
"""

from __future__ import annotations

import re

from typed_closures.config import get_config
from typed_closures.core.errors import FunctionalTypeError

_PARENTHESIZED = re.compile(r"\((.*?)\)")
_ANONYMOUS_MARKER = "@anonymous"
_LOCALS_QUALIFIER = re.compile(r"[\w.<>]*<locals>\.")
_WHITESPACE = re.compile(r"\s+")


def clean_message(message: str, placeholder: str | None = None) -> str:
	if placeholder is None:
		placeholder = get_config().wrapper_placeholder
	message = _PARENTHESIZED.sub("", message)
	message = message.replace(_ANONYMOUS_MARKER, placeholder)
	message = _LOCALS_QUALIFIER.sub("", message)
	return _WHITESPACE.sub(" ", message).strip()


def translate(raw: BaseException) -> FunctionalTypeError:
	"""Build a FunctionalTypeError with a cleaned message, chained to `raw`."""
	translated = FunctionalTypeError(clean_message(str(raw)))
	translated.__cause__ = raw
	return translated


__all__ = ["clean_message", "translate"]
