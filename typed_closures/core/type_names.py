# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Parser for declared type names.

A declared name is either a word from the semantic vocabulary (`int`,
`resource (closed)`, `unknown type`, ...) or a dotted class path
(`package.module.ClassName`). Both share one small grammar so spacing and
case differences normalize the same way everywhere a name is resolved:

  type_name : segment ("." segment)* qualifier?
  segment   : WORD+
  qualifier : "(" WORD ")"

Malformed input (empty string, stray punctuation, unbalanced parentheses)
is reported as `UnrecognizedTypeName`, never as a raw lark exception.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from functools import lru_cache
from typing import Optional, Tuple

from lark import Lark
from lark.exceptions import LarkError

from typed_closures.core.errors import UnrecognizedTypeName

logger = logging.getLogger(__name__)

_GRAMMAR_SRC = r"""
start: segment ("." segment)* qualifier?

segment: WORD+
qualifier: "(" WORD ")"

WORD: /(?!\d)\w+/

%import common.WS
%ignore WS
"""

_PARSER = Lark(
	_GRAMMAR_SRC,
	parser="lalr",
	lexer="basic",
	maybe_placeholders=False,
)


@dataclass(frozen=True)
class TypeNameRef:
	"""
	Normalized form of a declared type name.

	`segments` holds the dotted parts, each with its words joined by a single
	space; `qualifier` is the parenthesized suffix, if any. Case is preserved
	so class paths stay resolvable; vocabulary lookups use `key`.
	"""

	segments: Tuple[str, ...]
	qualifier: Optional[str] = None

	@property
	def text(self) -> str:
		base = ".".join(self.segments)
		if self.qualifier is not None:
			return f"{base} ({self.qualifier})"
		return base

	@property
	def key(self) -> str:
		"""Lowercased text, the lookup key for the semantic vocabulary."""
		return self.text.lower()

	@property
	def is_dotted(self) -> bool:
		return len(self.segments) > 1

	@property
	def is_single_word(self) -> bool:
		return len(self.segments) == 1 and " " not in self.segments[0] and self.qualifier is None


def parse_type_name(name: str) -> TypeNameRef:
	"""
	Parse `name` into a `TypeNameRef`.

	Raises:
	  UnrecognizedTypeName: when `name` is not a string or does not match the grammar.
	"""
	if not isinstance(name, str):
		raise UnrecognizedTypeName(repr(name), "type names must be strings")
	return _parse_cached(name)


@lru_cache(maxsize=512)
def _parse_cached(name: str) -> TypeNameRef:
	try:
		tree = _PARSER.parse(name)
	except LarkError as exc:
		raise UnrecognizedTypeName(name, "malformed type name") from exc
	segments: list[str] = []
	qualifier: Optional[str] = None
	for child in tree.children:
		if child.data == "segment":
			segments.append(" ".join(str(tok) for tok in child.children))
		else:
			qualifier = str(child.children[0])
	ref = TypeNameRef(segments=tuple(segments), qualifier=qualifier)
	logger.debug("parsed type name %r as %r", name, ref.text)
	return ref


__all__ = ["TypeNameRef", "parse_type_name"]
