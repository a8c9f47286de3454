"""
typed_closures.core: shared type vocabulary and errors used by contracts and wrappers.

Modules:
  - errors: contract violation exception kinds
  - semantic_types: SemanticType enum and value/name classification
  - type_names: lark grammar for declared type names
  - class_identity: ClassHandle resolution for composite values
  - declared: DeclaredType (a declared name resolved once)
"""

__all__ = [
	"errors",
	"semantic_types",
	"type_names",
	"class_identity",
	"declared",
]
