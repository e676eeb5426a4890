"""Static types of Python expressions.

Best-effort inference over literals, annotations, constructor calls and
local assignments. Anything it cannot place is UNKNOWN.
"""

from __future__ import annotations

import ast
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

from loglint.domain.model.enums import Binding
from loglint.domain.model.static_type import StaticType

if TYPE_CHECKING:
    from collections.abc import Iterator

    from loglint.domain.model.configuration import LintConfig
    from loglint.infrastructure.analyzers.symbols import ModuleSymbols

_ANNOTATION_TYPES = {
    "builtins.str": StaticType.STRING,
    "builtins.int": StaticType.INTEGER,
    "builtins.float": StaticType.DOUBLE,
    "builtins.bool": StaticType.BOOLEAN,
    "datetime.datetime": StaticType.DATE,
    "datetime.date": StaticType.DATE,
}

_CALL_RESULT_TYPES = {
    "builtins.str": StaticType.STRING,
    "builtins.repr": StaticType.STRING,
    "builtins.int": StaticType.INTEGER,
    "builtins.len": StaticType.INTEGER,
    "builtins.float": StaticType.DOUBLE,
    "builtins.bool": StaticType.BOOLEAN,
    "datetime.datetime": StaticType.DATE,
    "datetime.datetime.now": StaticType.DATE,
    "datetime.datetime.utcnow": StaticType.DATE,
    "datetime.datetime.today": StaticType.DATE,
    "datetime.datetime.fromtimestamp": StaticType.DATE,
    "datetime.datetime.strptime": StaticType.DATE,
    "datetime.date": StaticType.DATE,
    "datetime.date.today": StaticType.DATE,
    "time.time": StaticType.DOUBLE,
}

# str methods that return str
_STR_METHODS = frozenset(
    {
        "capitalize",
        "casefold",
        "format",
        "join",
        "lower",
        "lstrip",
        "replace",
        "rstrip",
        "strip",
        "title",
        "upper",
    }
)

# Nodes that open a new name scope
_SCOPE_NODES = (ast.FunctionDef, ast.AsyncFunctionDef, ast.Lambda, ast.ClassDef)


@dataclass(frozen=True, slots=True)
class NameInfo:
    """What a name refers to within a scope.

    Attributes:
        static_type: Inferred type
        binding: Local, parameter, module field or constant
        value: String value of a constant
    """

    static_type: StaticType
    binding: Binding
    value: str | None = None


@dataclass(slots=True)
class Scope:
    """Names bound in one function or module body."""

    names: dict[str, NameInfo] = field(default_factory=dict)
    parent: Scope | None = None

    def lookup(self, name: str) -> NameInfo | None:
        """Find name here or in an enclosing scope."""
        scope: Scope | None = self
        while scope is not None:
            if name in scope.names:
                return scope.names[name]
            scope = scope.parent
        return None

    def bind(self, name: str, info: NameInfo) -> None:
        """Bind name. Conflicting types degrade to UNKNOWN."""
        existing = self.names.get(name)
        if existing is not None and existing.static_type is not info.static_type:
            info = NameInfo(StaticType.UNKNOWN, existing.binding)
        self.names[name] = info


class TypeResolver:
    """Infers StaticTypes for one module."""

    def __init__(self, symbols: ModuleSymbols, config: LintConfig) -> None:
        self._symbols = symbols
        self._config = config

    def module_scope(self, tree: ast.Module) -> Scope:
        """Scope of module-level names.

        UPPER_CASE names assigned exactly once are constants, string
        constants keep their value. Other names are module fields.
        """
        scope = Scope()
        assigned: dict[str, int] = {}
        for node in _scope_nodes(tree.body):
            for name, _ in _assignments(node):
                assigned[name] = assigned.get(name, 0) + 1

        for node in _scope_nodes(tree.body):
            for name, value in _assignments(node):
                static_type = self._assigned_type(node, value, scope)
                if name.isupper() and assigned[name] == 1:
                    constant = self.constant_value(value, scope) if value is not None else None
                    scope.bind(name, NameInfo(static_type, Binding.CONSTANT, constant))
                else:
                    scope.bind(name, NameInfo(static_type, Binding.FIELD))
        return scope

    def function_scope(
        self,
        node: ast.FunctionDef | ast.AsyncFunctionDef | ast.Lambda,
        parent: Scope,
    ) -> Scope:
        """Scope of a function: parameters, then local assignments."""
        scope = Scope(parent=parent)
        args = node.args
        for arg in (*args.posonlyargs, *args.args, *args.kwonlyargs):
            scope.bind(arg.arg, NameInfo(self.annotation_type(arg.annotation), Binding.PARAMETER))
        for arg in (args.vararg, args.kwarg):
            if arg is not None:
                scope.bind(arg.arg, NameInfo(StaticType.UNKNOWN, Binding.PARAMETER))

        if isinstance(node, ast.Lambda):
            return scope

        for statement in _scope_nodes(node.body):
            for name, value in _assignments(statement):
                scope.bind(name, NameInfo(self._assigned_type(statement, value, scope), Binding.LOCAL))
        return scope

    def annotation_type(self, annotation: ast.expr | None) -> StaticType:
        """Type named by an annotation, UNKNOWN if not one of ours."""
        if annotation is None:
            return StaticType.UNKNOWN
        if isinstance(annotation, ast.Constant) and isinstance(annotation.value, str):
            try:
                annotation = ast.parse(annotation.value, mode="eval").body
            except SyntaxError:
                return StaticType.UNKNOWN
        fqn = self._symbols.resolve_expr(annotation)
        if fqn is None:
            return StaticType.UNKNOWN
        if fqn in _ANNOTATION_TYPES:
            return _ANNOTATION_TYPES[fqn]
        if self.is_throwable_class(fqn):
            return StaticType.THROWABLE
        return StaticType.UNKNOWN

    def is_throwable_class(self, fqn: str) -> bool:
        """Check if fqn is an exception class."""
        hierarchy = self._symbols.hierarchy_of(fqn)
        return any(cls in hierarchy for cls in self._config.throwable_classes)

    def type_of(self, expr: ast.expr, scope: Scope) -> StaticType:
        """Static type of an expression.

        Args:
            expr: Expression node
            scope: Innermost scope at the expression

        Returns:
            StaticType, UNKNOWN when not inferable
        """
        match expr:
            case ast.Constant(value=bool()):
                return StaticType.BOOLEAN
            case ast.Constant(value=int()):
                return StaticType.INTEGER
            case ast.Constant(value=float()):
                return StaticType.DOUBLE
            case ast.Constant(value=str()) | ast.JoinedStr():
                return StaticType.STRING
            case ast.BinOp():
                first, steps = binop_chain(expr)
                static_type = self.type_of(first, scope)
                for op, right in steps:
                    static_type = self._binop_type(static_type, op, right, scope)
                return static_type
            case ast.Compare() | ast.UnaryOp(op=ast.Not()):
                return StaticType.BOOLEAN
            case ast.IfExp(body=body, orelse=orelse):
                then_type = self.type_of(body, scope)
                return then_type if then_type is self.type_of(orelse, scope) else StaticType.UNKNOWN
            case ast.Name(id=name):
                info = scope.lookup(name)
                return info.static_type if info is not None else StaticType.UNKNOWN
            case ast.Call():
                return self._call_type(expr, scope)
        return StaticType.UNKNOWN

    def constant_value(self, expr: ast.expr, scope: Scope) -> str | None:
        """String value of a compile-time constant, None if not provable."""
        match expr:
            case ast.Constant(value=str() as value):
                return value
            case ast.JoinedStr(values=values) if all(isinstance(v, ast.Constant) for v in values):
                return "".join(str(v.value) for v in values if isinstance(v, ast.Constant))
            case ast.BinOp(op=ast.Add()):
                first, steps = binop_chain(expr, ast.Add)
                parts = [self.constant_value(first, scope)]
                parts.extend(self.constant_value(right, scope) for _, right in steps)
                if any(part is None for part in parts):
                    return None
                return "".join(part for part in parts if part is not None)
            case ast.Name(id=name):
                info = scope.lookup(name)
                if info is not None and info.binding is Binding.CONSTANT:
                    return info.value
        return None

    def _binop_type(
        self,
        left_type: StaticType,
        op: ast.operator,
        right: ast.expr,
        scope: Scope,
    ) -> StaticType:
        if isinstance(op, ast.Mod) and left_type is StaticType.STRING:
            return StaticType.STRING  # printf-style formatting
        right_type = self.type_of(right, scope)
        if isinstance(op, ast.Add) and StaticType.STRING in (left_type, right_type):
            return StaticType.STRING
        if left_type.is_numeric and right_type.is_numeric:
            if isinstance(op, ast.Div) or StaticType.DOUBLE in (left_type, right_type):
                return StaticType.DOUBLE
            return StaticType.INTEGER
        return StaticType.UNKNOWN

    def _call_type(self, node: ast.Call, scope: Scope) -> StaticType:
        func = node.func
        if isinstance(func, ast.Attribute) and func.attr in _STR_METHODS:
            if self.type_of(func.value, scope) is StaticType.STRING:
                return StaticType.STRING

        fqn = self._symbols.resolve_expr(func)
        if fqn is None:
            return StaticType.UNKNOWN
        if fqn in _CALL_RESULT_TYPES:
            return _CALL_RESULT_TYPES[fqn]
        if self.is_throwable_class(fqn):
            return StaticType.THROWABLE
        return StaticType.UNKNOWN

    def _assigned_type(self, node: ast.AST, value: ast.expr | None, scope: Scope) -> StaticType:
        match node:
            case ast.ExceptHandler():
                return StaticType.THROWABLE  # anything caught is an exception
            case ast.AnnAssign(annotation=annotation):
                annotated = self.annotation_type(annotation)
                if annotated.is_known or value is None:
                    return annotated
        if value is None:
            return StaticType.UNKNOWN
        return self.type_of(value, scope)


def binop_chain(
    expr: ast.expr,
    op: type[ast.operator] | None = None,
) -> tuple[ast.expr, list[tuple[ast.operator, ast.expr]]]:
    """Split a left-nested operator chain without recursion.

    ``a + b - c`` parses as ``BinOp(BinOp(a, +, b), -, c)``. Generated code
    can nest thousands of levels, deeper than the interpreter stack.

    Args:
        expr: Expression, usually an ast.BinOp
        op: Only follow operators of this type (default: any)

    Returns:
        (first operand, [(operator, operand), ...]) in source order
    """
    steps: list[tuple[ast.operator, ast.expr]] = []
    node = expr
    while isinstance(node, ast.BinOp) and (op is None or isinstance(node.op, op)):
        steps.append((node.op, node.right))
        node = node.left
    steps.reverse()
    return node, steps


def _scope_nodes(body: list[ast.stmt]) -> Iterator[ast.AST]:
    """Nodes of a body in source order, not entering nested scopes."""
    found: list[ast.AST] = []
    pending: list[ast.AST] = list(body)
    while pending:
        node = pending.pop()
        found.append(node)
        if isinstance(node, _SCOPE_NODES):
            continue
        pending.extend(ast.iter_child_nodes(node))
    found.sort(key=lambda n: (getattr(n, "lineno", 0), getattr(n, "col_offset", 0)))
    yield from found


def _assignments(node: ast.AST) -> Iterator[tuple[str, ast.expr | None]]:
    """(name, assigned value) pairs bound by one node.

    Value is None when the bound value is not a single expression
    (tuple unpacking, loop targets, with-targets).
    """
    match node:
        case ast.Assign(targets=targets, value=value):
            for target in targets:
                if isinstance(target, ast.Name):
                    yield target.id, value
                else:
                    yield from _unpacked(target)
        case ast.AnnAssign(target=ast.Name(id=name), value=value):
            yield name, value
        case ast.AugAssign(target=ast.Name(id=name), op=op, value=value):
            yield name, ast.BinOp(left=ast.Name(id=name, ctx=ast.Load()), op=op, right=value)
        case ast.NamedExpr(target=ast.Name(id=name), value=value):
            yield name, value
        case ast.ExceptHandler(name=str() as name):
            yield name, None
        case ast.For(target=target) | ast.AsyncFor(target=target) | ast.comprehension(target=target):
            yield from _unpacked(target)
        case ast.withitem(optional_vars=target) if target is not None:
            yield from _unpacked(target)
        case ast.FunctionDef(name=name) | ast.AsyncFunctionDef(name=name):
            yield name, None


def _unpacked(target: ast.expr) -> Iterator[tuple[str, ast.expr | None]]:
    """Names bound by an assignment target, without values."""
    for node in ast.walk(target):
        if isinstance(node, ast.Name):
            yield node.id, None
