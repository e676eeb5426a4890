"""AST-based source host adapter.

Implements SourceHostProtocol for Python sources: every call expression
with a resolvable callee becomes a CallSite, arguments carry their
inferred static types and constant values.
"""

from __future__ import annotations

import ast
import logging
from pathlib import Path
from typing import TYPE_CHECKING

from loglint.domain.exceptions.parsing import ParsingError
from loglint.domain.model.argument import Argument
from loglint.domain.model.call_site import Ancestor, CallSite
from loglint.domain.model.callee import CalleeIdentity
from loglint.domain.model.compilation_unit import CompilationUnit
from loglint.domain.model.configuration import LintConfig
from loglint.domain.model.enums import AncestorKind, ExpressionKind
from loglint.domain.model.source_range import SourceRange
from loglint.domain.model.static_type import StaticType
from loglint.infrastructure.analyzers.symbols import ModuleSymbols
from loglint.infrastructure.analyzers.type_resolver import Scope, TypeResolver, binop_chain

if TYPE_CHECKING:
    from collections.abc import Iterator

logger = logging.getLogger(__name__)

_STR_OWNER = "builtins.str"

# Nodes that end the search for an enclosing call
_BOUNDARY_NODES = (ast.Module, ast.FunctionDef, ast.AsyncFunctionDef, ast.Lambda, ast.ClassDef)


class PythonSourceHost:
    """Source host using the Python AST.

    Stateless between parse_file() calls.

    FAIL-FIRST: raises ParsingError on any parsing issue.
    """

    def __init__(
        self,
        config: LintConfig | None = None,
        *,
        min_platform_version: int | None = None,
    ) -> None:
        """Initialize host.

        Args:
            config: Names the facade classes (default: LintConfig())
            min_platform_version: Platform version every unit targets,
                None if unknown

        Raises:
            ValueError: If min_platform_version < 1
        """
        if min_platform_version is not None and min_platform_version < 1:
            raise ValueError(f"min_platform_version must be >= 1, got {min_platform_version}")

        self._config = config or LintConfig()
        self._min_platform_version = min_platform_version

    def discover(self, root: Path) -> Iterator[Path]:
        """Yield .py files under root in sorted order, skipping __pycache__.

        A root that is not a directory is yielded as is, so a missing
        file surfaces as a ParsingError from parse_file().
        """
        if not root.is_dir():
            yield root
            return
        for path in sorted(root.rglob("*.py")):
            if "__pycache__" in path.parts:
                continue
            yield path

    def parse_file(self, path: Path) -> CompilationUnit:
        """Parse single Python file.

        Args:
            path: Path to .py file

        Returns:
            CompilationUnit with every resolved call site

        Raises:
            ParsingError: If file cannot be read or parsed
        """
        try:
            source = path.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise ParsingError(path, "file not found") from e
        except PermissionError as e:
            raise ParsingError(path, "permission denied") from e
        except IsADirectoryError as e:
            raise ParsingError(path, "is a directory") from e
        except UnicodeDecodeError as e:
            raise ParsingError(path, f"encoding error: {e}") from e

        return self.parse_source(source, path)

    def parse_source(self, source: str, path: Path) -> CompilationUnit:
        """Parse source text as if read from path.

        Raises:
            ParsingError: On syntax errors or nesting too deep to analyse
        """
        try:
            tree = ast.parse(source, filename=str(path))
        except SyntaxError as e:
            raise ParsingError(path, f"syntax error: {e}") from e
        except ValueError as e:  # null bytes
            raise ParsingError(path, f"invalid source: {e}") from e
        except RecursionError as e:
            raise ParsingError(path, "nesting too deep to parse") from e

        try:
            symbols = ModuleSymbols.from_tree(tree, path.stem or "module")
            collector = _CallCollector(path, source, symbols, self._config)
            collector.visit(tree)
        except RecursionError as e:
            raise ParsingError(path, "nesting too deep to analyse") from e

        logger.debug("Parsed %s: %d call site(s)", path, len(collector.call_sites))
        return CompilationUnit(
            path=path,
            call_sites=tuple(collector.call_sites),
            min_platform_version=self._min_platform_version,
        )


class _CallCollector(ast.NodeVisitor):
    """Collects call sites in pre-order: outer calls before inner ones."""

    def __init__(
        self,
        path: Path,
        source: str,
        symbols: ModuleSymbols,
        config: LintConfig,
    ) -> None:
        self._path = path
        self._source = source
        self._symbols = symbols
        self._config = config
        self._types = TypeResolver(symbols, config)
        self._parents: list[ast.AST] = []
        self._scopes: list[Scope] = []
        self._classes: list[str] = []
        self._callees: dict[int, CalleeIdentity | None] = {}
        self.call_sites: list[CallSite] = []

    @property
    def _scope(self) -> Scope:
        return self._scopes[-1]

    def visit(self, node: ast.AST) -> None:
        scope: Scope | None = None
        match node:
            case ast.Module():
                scope = self._types.module_scope(node)
            case ast.FunctionDef() | ast.AsyncFunctionDef() | ast.Lambda():
                scope = self._types.function_scope(node, self._scope)
        if scope is not None:
            self._scopes.append(scope)
        if isinstance(node, ast.ClassDef):
            self._classes.append(self._symbols.class_fqn(node.name))

        if isinstance(node, ast.Call):
            self._record(node)

        self._parents.append(node)
        if isinstance(node, ast.BinOp):
            # operator chains are walked flat, not one level per operator
            first, steps = binop_chain(node)
            for operand in (first, *(right for _, right in steps)):
                self.visit(operand)
        else:
            super().visit(node)
        self._parents.pop()

        if isinstance(node, ast.ClassDef):
            self._classes.pop()
        if scope is not None:
            self._scopes.pop()

    # --- call sites ---

    def _record(self, node: ast.Call) -> None:
        callee = self._callee(node)
        if callee is None:
            logger.debug("%s:%d: unresolved call %s", self._path, node.lineno, self._text(node.func))
            return

        func = node.func
        self.call_sites.append(
            CallSite(
                callee=callee,
                arguments=tuple(self._argument(arg) for arg in node.args),
                source_range=self._range(node),
                text=self._text(node),
                receiver=self._argument(func.value) if isinstance(func, ast.Attribute) else None,
                ancestors=self._ancestors(node),
                expression=node,
            )
        )

    def _callee(self, node: ast.Call) -> CalleeIdentity | None:
        """Resolve the method a call invokes (cached per node)."""
        key = id(node)
        if key not in self._callees:
            self._callees[key] = self._resolve_callee(node)
        return self._callees[key]

    def _resolve_callee(self, node: ast.Call) -> CalleeIdentity | None:
        match node.func:
            case ast.Attribute(value=receiver, attr=name):
                owner = self._owner_of(receiver)
            case ast.Name(id=local):
                fqn = self._symbols.resolve_dotted(local)
                if fqn is None:
                    # module-level function or a callable local
                    owner, name = self._symbols.module, local
                else:
                    owner, _, name = fqn.rpartition(".")
            case _:
                return None

        if not owner:
            return None
        return CalleeIdentity(owner=owner, name=name, hierarchy=self._symbols.hierarchy_of(owner))

    def _owner_of(self, receiver: ast.expr) -> str | None:
        """Class whose member is accessed on receiver."""
        match receiver:
            case ast.Constant(value=str()) | ast.JoinedStr():
                return _STR_OWNER
            case ast.Name(id="self" | "cls") if self._classes:
                return self._classes[-1]
            case ast.Name(id=name) if self._scope.lookup(name) is not None:
                return self._owner_by_type(receiver)
            case ast.Name() | ast.Attribute():
                fqn = self._symbols.resolve_expr(receiver)
                if fqn is not None:
                    return fqn
            case ast.Call():
                inner = self._callee(receiver)
                if inner is not None:
                    # Facade.tag(..) returns the tree
                    if inner.name == self._config.tag_method and inner.is_member_of_any(
                        self._config.facade_classes
                    ):
                        return self._config.tree_class
                    if inner.name[:1].isupper():
                        return f"{inner.owner}.{inner.name}"  # constructor
        return self._owner_by_type(receiver)

    def _owner_by_type(self, receiver: ast.expr) -> str | None:
        if self._types.type_of(receiver, self._scope) is StaticType.STRING:
            return _STR_OWNER
        return None

    def _ancestors(self, node: ast.Call) -> tuple[Ancestor, ...]:
        """Enclosing nodes, innermost first, up to the nearest boundary.

        A call reached through another call's callee expression (a
        receiver chain) is not nested in that call's arguments.
        """
        ancestors: list[Ancestor] = []
        child: ast.AST = node
        for parent in reversed(self._parents):
            match parent:
                case ast.Call() if child is not parent.func:
                    ancestors.append(Ancestor(AncestorKind.CALL, self._callee(parent)))
                case _ if isinstance(parent, _BOUNDARY_NODES):
                    ancestors.append(Ancestor(AncestorKind.METHOD))
                    break
                case _:
                    ancestors.append(Ancestor(AncestorKind.EXPRESSION))
            child = parent
        return tuple(ancestors)

    # --- arguments ---

    def _argument(self, expr: ast.expr) -> Argument:
        """Build the read-only view of an argument expression."""
        scope = self._scope
        source_range = self._range(expr)
        text = self._text(expr)

        match expr:
            case ast.Constant(value=None):
                return Argument(
                    StaticType.UNKNOWN,
                    source_range,
                    text,
                    kind=ExpressionKind.NULL_LITERAL,
                    expression=expr,
                )

            case ast.Constant(value=value):
                return Argument(
                    self._types.type_of(expr, scope),
                    source_range,
                    text,
                    kind=ExpressionKind.LITERAL,
                    literal_value=value if isinstance(value, str) else None,
                    expression=expr,
                )

            case ast.JoinedStr(values=values):
                parts = tuple(
                    self._argument(part.value if isinstance(part, ast.FormattedValue) else part)
                    for part in values
                )
                if all(part.kind is ExpressionKind.LITERAL for part in parts):
                    return Argument(
                        StaticType.STRING,
                        source_range,
                        text,
                        kind=ExpressionKind.LITERAL,
                        literal_value="".join(part.literal_value or "" for part in parts),
                        expression=expr,
                    )
                return Argument(
                    StaticType.STRING,
                    source_range,
                    text,
                    kind=ExpressionKind.CONCATENATION,
                    operands=parts,
                    expression=expr,
                )

            case ast.BinOp(op=ast.Add()) if self._types.type_of(expr, scope) is StaticType.STRING:
                return Argument(
                    StaticType.STRING,
                    source_range,
                    text,
                    kind=ExpressionKind.CONCATENATION,
                    literal_value=self._types.constant_value(expr, scope),
                    operands=tuple(self._argument(operand) for operand in _added(expr)),
                    expression=expr,
                )

            case ast.IfExp(body=body, orelse=orelse):
                return Argument(
                    self._types.type_of(expr, scope),
                    source_range,
                    text,
                    kind=ExpressionKind.CONDITIONAL,
                    operands=(self._argument(body), self._argument(orelse)),
                    expression=expr,
                )

            case ast.Name(id=name):
                info = scope.lookup(name)
                if info is None:
                    return Argument(
                        StaticType.UNKNOWN,
                        source_range,
                        text,
                        kind=ExpressionKind.NAME,
                        symbol=name,
                        expression=expr,
                    )
                return Argument(
                    info.static_type,
                    source_range,
                    text,
                    kind=ExpressionKind.NAME,
                    literal_value=info.value,
                    symbol=name,
                    binding=info.binding,
                    expression=expr,
                )

            case ast.Attribute(value=value, attr=attr):
                return Argument(
                    self._types.type_of(expr, scope),
                    source_range,
                    text,
                    kind=ExpressionKind.QUALIFIED,
                    symbol=attr,
                    receiver=self._argument(value),
                    expression=expr,
                )

            case ast.Call(func=ast.Name(id="str"), args=[value], keywords=[]) if (
                self._symbols.resolve_dotted("str") == _STR_OWNER
            ):
                # str(x) reads x.__str__()
                return Argument(
                    StaticType.STRING,
                    source_range,
                    text,
                    kind=ExpressionKind.CALL,
                    symbol="__str__",
                    receiver=self._argument(value),
                    expression=expr,
                )

            case ast.Call(func=func):
                match func:
                    case ast.Attribute(value=value, attr=attr):
                        receiver, symbol = self._argument(value), attr
                    case ast.Name(id=local):
                        receiver, symbol = None, local
                    case _:
                        receiver, symbol = None, None
                return Argument(
                    self._types.type_of(expr, scope),
                    source_range,
                    text,
                    kind=ExpressionKind.CALL,
                    symbol=symbol,
                    receiver=receiver,
                    expression=expr,
                )

        return Argument(
            self._types.type_of(expr, scope),
            source_range,
            text,
            expression=expr,
        )

    # --- positions ---

    def _range(self, node: ast.AST) -> SourceRange:
        return SourceRange.from_node(self._path, node)

    def _text(self, node: ast.AST) -> str:
        return ast.get_source_segment(self._source, node) or ast.unparse(node) or "<expr>"


def _added(expr: ast.expr) -> list[ast.expr]:
    """Operands of a left-associative chain of +."""
    first, steps = binop_chain(expr, ast.Add)
    return [first, *(right for _, right in steps)]
