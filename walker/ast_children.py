from walker.ast_nodes import (
    BlockBody,
    BlockStatement,
    ClassStatement,
    ConcreteConstructor,
    ConcreteMethod,
    ForStatement,
    ForeachStatement,
    IfStatement,
    NamespaceStatement,
    StatementBody,
    SwitchStatement,
    TraitStatement,
    TryStatement,
    WhileStatement,
)


def _body_statements(body):
    """
    Statements of a loop/conditional body in either block or single-statement form.
    """
    if isinstance(body, BlockBody):
        return list(body.statements)
    if isinstance(body, StatementBody):
        return [body.statement]
    return []


def _member_statements(members, member_kinds):
    statements = []
    for member in members:
        if isinstance(member, member_kinds):
            statements.extend(member.body)
    return statements


def child_statements(statement):
    """
    Returns the immediate child statements of ``statement`` in source order.

    Every shape maps to a list; statements that carry no nested statements,
    and shapes not listed here, have no children.
    """
    if isinstance(statement, BlockStatement):
        return list(statement.statements)

    # Only the primary body. elseif/else branches are not expanded.
    if isinstance(statement, (IfStatement, WhileStatement, ForStatement, ForeachStatement)):
        return _body_statements(statement.body)

    if isinstance(statement, SwitchStatement):
        children = []
        for case in statement.cases:
            children.extend(case.statements)
        return children

    if isinstance(statement, TryStatement):
        children = list(statement.body)
        for catch in statement.catches:
            children.extend(catch.body)
        if statement.finally_block is not None:
            children.extend(statement.finally_block.body)
        return children

    if isinstance(statement, ClassStatement):
        return _member_statements(statement.members, (ConcreteMethod, ConcreteConstructor))

    if isinstance(statement, TraitStatement):
        return _member_statements(statement.members, ConcreteMethod)

    if isinstance(statement, NamespaceStatement):
        return list(statement.statements)

    return []
