import os

from walker.ast_nodes import ClassStatement
from walker.base_rule import BaseRule


class ClassNameRule(BaseRule):
    """
    Warns when a class is declared in a file with a different name.

    Needs the path of the analyzed file; without one it stays silent.
    """

    code = "E0005"
    description = "Class name should match the file name."

    def matches(self, statement):
        return isinstance(statement, ClassStatement) and bool(statement.name)

    def apply(self, statement, context):
        path = context.path if context is not None else None
        if not path:
            return []

        stem = os.path.basename(path).split(".", 1)[0]
        if stem == statement.name:
            return []

        return [
            self.suggestion(
                f"Class '{statement.name}' is declared in '{os.path.basename(path)}'; "
                f"the file should be named '{statement.name}.php'.",
                statement,
            )
        ]
