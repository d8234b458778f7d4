from dataclasses import dataclass, field


@dataclass(frozen=True)
class Span:
    line: int = 0
    column: int = 0


# Expressions. Only the shapes rules look at are modelled; everything else
# is a RawExpression carrying the parser's node type.


@dataclass(frozen=True)
class RawExpression:
    kind: str = "Expr"


@dataclass(frozen=True)
class NewExpression:
    class_name: str | None = None


@dataclass(frozen=True)
class AssignmentExpression:
    target: str | None = None
    value: object = field(default_factory=RawExpression)


@dataclass(frozen=True)
class MethodCallExpression:
    target: str | None = None
    method: str | None = None


# Statements


@dataclass(frozen=True)
class Statement:
    span: Span = field(default_factory=Span, kw_only=True)

    @property
    def kind(self):
        return type(self).__name__


@dataclass(frozen=True)
class ExpressionStatement(Statement):
    expression: object = field(default_factory=RawExpression)


@dataclass(frozen=True)
class ReturnStatement(Statement):
    expression: object | None = None


@dataclass(frozen=True)
class EchoStatement(Statement):
    expressions: tuple = ()


@dataclass(frozen=True)
class OpaqueStatement(Statement):
    """
    A statement the loader does not model. It never has children.
    """

    node_type: str = "Stmt"

    @property
    def kind(self):
        return self.node_type


@dataclass(frozen=True)
class BlockStatement(Statement):
    statements: tuple = ()


@dataclass(frozen=True)
class BlockBody:
    statements: tuple = ()


@dataclass(frozen=True)
class StatementBody:
    statement: Statement = field(default_factory=OpaqueStatement)


@dataclass(frozen=True)
class ElseIf:
    condition: object = field(default_factory=RawExpression)
    body: object = field(default_factory=BlockBody)


@dataclass(frozen=True)
class IfStatement(Statement):
    condition: object = field(default_factory=RawExpression)
    body: object = field(default_factory=BlockBody)
    elseifs: tuple = ()
    else_body: object | None = None


@dataclass(frozen=True)
class WhileStatement(Statement):
    condition: object = field(default_factory=RawExpression)
    body: object = field(default_factory=BlockBody)


@dataclass(frozen=True)
class ForStatement(Statement):
    body: object = field(default_factory=BlockBody)


@dataclass(frozen=True)
class ForeachStatement(Statement):
    body: object = field(default_factory=BlockBody)


@dataclass(frozen=True)
class Case:
    condition: object | None = None
    statements: tuple = ()


@dataclass(frozen=True)
class SwitchStatement(Statement):
    condition: object = field(default_factory=RawExpression)
    cases: tuple = ()


@dataclass(frozen=True)
class CatchBlock:
    types: tuple = ()
    var: str | None = None
    body: tuple = ()


@dataclass(frozen=True)
class FinallyBlock:
    body: tuple = ()


@dataclass(frozen=True)
class TryStatement(Statement):
    body: tuple = ()
    catches: tuple = ()
    finally_block: FinallyBlock | None = None


# Class and trait members


@dataclass(frozen=True)
class Member:
    name: str = ""
    modifiers: tuple = ()
    span: Span = field(default_factory=Span, kw_only=True)


@dataclass(frozen=True)
class Parameter:
    name: str = ""
    type: str | None = None


@dataclass(frozen=True)
class ConcreteMethod(Member):
    parameters: tuple = ()
    return_type: str | None = None
    body: tuple = ()


@dataclass(frozen=True)
class AbstractMethod(Member):
    parameters: tuple = ()
    return_type: str | None = None


@dataclass(frozen=True)
class ConcreteConstructor(Member):
    name: str = "__construct"
    parameters: tuple = ()
    body: tuple = ()


@dataclass(frozen=True)
class AbstractConstructor(Member):
    name: str = "__construct"
    parameters: tuple = ()


@dataclass(frozen=True)
class Property(Member):
    pass


@dataclass(frozen=True)
class Constant(Member):
    pass


@dataclass(frozen=True)
class ClassStatement(Statement):
    name: str = ""
    modifiers: tuple = ()
    members: tuple = ()


@dataclass(frozen=True)
class TraitStatement(Statement):
    name: str = ""
    members: tuple = ()


@dataclass(frozen=True)
class NamespaceStatement(Statement):
    name: str | None = None
    statements: tuple = ()
    braced: bool = True


VISIBILITY_MODIFIERS = frozenset({"public", "protected", "private"})


# Analysis values


@dataclass(frozen=True)
class FileContext:
    path: str | None = None


@dataclass(frozen=True)
class Suggestion:
    """
    One finding produced by a rule for a statement.

    The statement reference is kept for callers that want to locate the
    finding in the tree; it does not take part in equality or hashing.
    """

    rule: str
    message: str
    span: Span = field(default_factory=Span)
    statement: Statement | None = field(default=None, compare=False, repr=False)

    def to_dict(self):
        return {
            "rule": self.rule,
            "message": self.message,
            "line": self.span.line,
            "column": self.span.column,
        }
