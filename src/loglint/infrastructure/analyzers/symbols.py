"""Module symbol table: local names → fully qualified names.

Resolves imports, module-level classes and builtins. Does not guess
star imports: names they would provide stay unresolved.
"""

from __future__ import annotations

import ast
import builtins
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType

# Python builtins from stdlib (auto-updated with Python version)
_BUILTINS = frozenset(dir(builtins))

_BUILTIN_EXCEPTIONS = frozenset(
    name
    for name, value in vars(builtins).items()
    if isinstance(value, type) and issubclass(value, BaseException)
)

_EXCEPTION_ROOT = "builtins.BaseException"


@dataclass(frozen=True, slots=True)
class ModuleSymbols:
    """Names visible at module level.

    Attributes:
        module: Module name used to qualify local classes
        imports: Local alias → imported FQN
        bases: Local class name → FQNs of its direct bases
    """

    module: str
    imports: Mapping[str, str]
    bases: Mapping[str, tuple[str, ...]]

    def __post_init__(self) -> None:
        """Validate invariants. FAIL-FIRST."""
        if not self.module:
            raise ValueError("module must not be empty")

    @classmethod
    def from_tree(cls, tree: ast.Module, module: str) -> ModuleSymbols:
        """Collect imports and classes of a parsed module.

        Imports anywhere in the file count, including function-level ones.

        Args:
            tree: Parsed AST module
            module: Module name

        Returns:
            ModuleSymbols for the module
        """
        imports: dict[str, str] = {}
        class_nodes: list[ast.ClassDef] = []

        for node in ast.walk(tree):
            match node:
                case ast.Import(names=names):
                    for alias in names:
                        if alias.asname:
                            imports[alias.asname] = alias.name
                        else:
                            # "import a.b" binds "a"
                            head = alias.name.split(".", 1)[0]
                            imports[head] = head
                case ast.ImportFrom(module=source, names=names):
                    for alias in names:
                        if alias.name == "*":
                            continue
                        qualified = f"{source}.{alias.name}" if source else alias.name
                        imports[alias.asname or alias.name] = qualified
                case ast.ClassDef():
                    class_nodes.append(node)

        # first pass knows class names, second pass their bases
        table = cls(
            module=module,
            imports=MappingProxyType(imports),
            bases=MappingProxyType({node.name: () for node in class_nodes}),
        )
        bases = {
            node.name: tuple(
                fqn for fqn in (table.resolve_expr(base) for base in node.bases) if fqn is not None
            )
            for node in class_nodes
        }
        return cls(module=module, imports=table.imports, bases=MappingProxyType(bases))

    def class_fqn(self, name: str) -> str:
        """FQN of a class declared in this module."""
        return f"{self.module}.{name}"

    def is_local_class(self, fqn: str) -> bool:
        """Check if fqn names a class declared in this module."""
        prefix = f"{self.module}."
        return fqn.startswith(prefix) and fqn[len(prefix) :] in self.bases

    def resolve_dotted(self, dotted: str) -> str | None:
        """Resolve a dotted name to FQN.

        Order: imports, module classes, builtins.

        Args:
            dotted: Name as written (e.g. "Timber", "android.util.Log")

        Returns:
            FQN, or None if the first part is unknown
        """
        head, _, rest = dotted.partition(".")
        if head in self.imports:
            base = self.imports[head]
        elif head in self.bases:
            base = self.class_fqn(head)
        elif head in _BUILTINS:
            base = f"builtins.{head}"
        else:
            return None
        return f"{base}.{rest}" if rest else base

    def resolve_expr(self, node: ast.expr) -> str | None:
        """Resolve a Name or Attribute chain to FQN."""
        dotted = dotted_name(node)
        if dotted is None:
            return None
        return self.resolve_dotted(dotted)

    def hierarchy_of(self, fqn: str) -> frozenset[str]:
        """The class itself plus every supertype this module can resolve.

        Module classes are followed transitively. Builtin exception
        classes add BaseException.

        Args:
            fqn: Class FQN

        Returns:
            Hierarchy including fqn
        """
        seen: set[str] = set()
        pending = [fqn]
        while pending:
            current = pending.pop()
            if current in seen:
                continue
            seen.add(current)
            if self.is_local_class(current):
                pending.extend(self.bases[current[len(self.module) + 1 :]])
            elif current.startswith("builtins.") and current[9:] in _BUILTIN_EXCEPTIONS:
                seen.add(_EXCEPTION_ROOT)
        return frozenset(seen)


def dotted_name(node: ast.expr) -> str | None:
    """Render a Name/Attribute chain as "a.b.c", None for anything else."""
    match node:
        case ast.Name(id=name):
            return name
        case ast.Attribute(value=value, attr=attr):
            prefix = dotted_name(value)
            return f"{prefix}.{attr}" if prefix is not None else None
    return None
