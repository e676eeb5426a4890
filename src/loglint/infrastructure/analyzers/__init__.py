"""Name and type analysis over the Python AST."""

from loglint.infrastructure.analyzers.symbols import ModuleSymbols, dotted_name
from loglint.infrastructure.analyzers.type_resolver import (
    NameInfo,
    Scope,
    TypeResolver,
    binop_chain,
)

__all__ = [
    "ModuleSymbols",
    "NameInfo",
    "Scope",
    "TypeResolver",
    "binop_chain",
    "dotted_name",
]
