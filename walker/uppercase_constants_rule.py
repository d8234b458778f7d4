from walker.ast_nodes import ClassStatement, Constant, TraitStatement
from walker.base_rule import BaseRule


class UppercaseConstantsRule(BaseRule):
    """
    Class constants are expected in UPPER_SNAKE_CASE.
    """

    code = "E0004"
    description = "Class constants should be upper-case."

    def matches(self, statement):
        return isinstance(statement, (ClassStatement, TraitStatement))

    def apply(self, statement, context):
        suggestions = []
        for member in statement.members:
            if not isinstance(member, Constant):
                continue
            if member.name == member.name.upper():
                continue
            suggestions.append(
                self.suggestion(
                    f"Constant '{member.name}' in '{statement.name}' should be upper-case "
                    f"('{member.name.upper()}').",
                    statement,
                    member,
                )
            )
        return suggestions
