import logging

from walker.ast_children import child_statements

logger = logging.getLogger(__name__)


def walk_ast(statement, nodes, *, depth=0, parent=None):
    """
    Recursively walks a statement tree and collects every reachable
    statement into a flat, pre-order list.

    Each entry keeps its depth and parent so callers can rebuild structure.
    """

    node = {
        "kind": statement.kind,
        "line": statement.span.line,
        "depth": depth,
        "statement": statement,
        "parent": parent,
    }
    nodes.append(node)

    logger.debug("VISITING: %s", statement.kind)

    for child in child_statements(statement):
        walk_ast(child, nodes, depth=depth + 1, parent=node)

    return node


def iter_statements(statement):
    """
    Yields ``statement`` and every statement nested in it, each node before
    its children and children in source order.
    """
    yield statement
    for child in child_statements(statement):
        yield from iter_statements(child)
