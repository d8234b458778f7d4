from walker.ast_nodes import AbstractMethod, ClassStatement, ConcreteMethod, TraitStatement
from walker.base_rule import BaseRule


class ReturnTypeRule(BaseRule):
    """
    Warns when a method has no declared return type.
    Constructors never declare one and are skipped.
    """

    code = "E0008"
    description = "Methods should declare a return type."

    def matches(self, statement):
        return isinstance(statement, (ClassStatement, TraitStatement))

    def apply(self, statement, context):
        suggestions = []
        for member in statement.members:
            if not isinstance(member, (ConcreteMethod, AbstractMethod)):
                continue
            if member.return_type:
                continue
            suggestions.append(
                self.suggestion(
                    f"Method '{member.name}' in '{statement.name}' has no return type.",
                    statement,
                    member,
                )
            )
        return suggestions
