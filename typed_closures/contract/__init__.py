"""
typed_closures.contract: one wrapped callable and the checks around calling it.

Modules:
  - closure_contract: ClosureContract (arity at creation, invoke, validate_type)
  - call_boundary: enforcement of the callable's own annotations
  - error_translator: normalization of call-time type errors
"""

from typed_closures.contract.closure_contract import ClosureContract
from typed_closures.contract.error_translator import translate

__all__ = ["ClosureContract", "translate"]
