# vim: set noexpandtab: -*- indent-tabs-mode: t -*-
"""
Process-wide settings for closure contracts.

Settings come from the environment the first time they are needed:

  TYPED_CLOSURES_WRAPPER_PLACEHOLDER   text substituted for anonymous-wrapper
                                       markers in translated error messages
                                       (default "()")
  TYPED_CLOSURES_ENFORCE_ANNOTATIONS   "0"/"false"/"no"/"off" disables
                                       call-boundary annotation checks
                                       (default enabled)

Embedding applications and tests can swap the active settings with
`set_config`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping, Optional

_FALSEY = {"0", "false", "no", "off"}


@dataclass(frozen=True)
class ContractConfig:
	"""Settings consulted by contract creation and error translation."""

	wrapper_placeholder: str = "()"
	enforce_annotations: bool = True

	@classmethod
	def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ContractConfig":
		env = os.environ if environ is None else environ
		placeholder = env.get("TYPED_CLOSURES_WRAPPER_PLACEHOLDER", cls.wrapper_placeholder)
		enforce_raw = env.get("TYPED_CLOSURES_ENFORCE_ANNOTATIONS", "1")
		return cls(
			wrapper_placeholder=placeholder,
			enforce_annotations=enforce_raw.strip().lower() not in _FALSEY,
		)


_ACTIVE: ContractConfig | None = None


def get_config() -> ContractConfig:
	"""Return the active settings, loading them from the environment once."""
	global _ACTIVE
	if _ACTIVE is None:
		_ACTIVE = ContractConfig.from_env()
	return _ACTIVE


def set_config(config: ContractConfig | None) -> ContractConfig | None:
	"""
	Replace the active settings and return the previous ones.

	Passing None drops the cached settings so the next `get_config` re-reads
	the environment.
	"""
	global _ACTIVE
	previous = _ACTIVE
	_ACTIVE = config
	return previous


__all__ = ["ContractConfig", "get_config", "set_config"]
