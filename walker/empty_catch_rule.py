from walker.ast_nodes import TryStatement
from walker.base_rule import BaseRule


class EmptyCatchRule(BaseRule):
    """
    Warns when a catch clause swallows the exception with an empty body.
    """

    code = "E0002"
    description = "Catch blocks should not be empty."

    def matches(self, statement):
        return isinstance(statement, TryStatement)

    def apply(self, statement, context):
        suggestions = []
        for catch in statement.catches:
            if catch.body:
                continue
            caught = " | ".join(catch.types) or "exception"
            suggestions.append(
                self.suggestion(
                    f"Empty catch block for {caught}; handle, log or rethrow the exception.",
                    statement,
                )
            )
        return suggestions
