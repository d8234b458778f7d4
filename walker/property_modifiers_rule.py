from walker.ast_nodes import VISIBILITY_MODIFIERS, ClassStatement, Property, TraitStatement
from walker.base_rule import BaseRule


class PropertyModifiersRule(BaseRule):
    code = "E0006"
    description = "Properties should declare their visibility."

    def matches(self, statement):
        return isinstance(statement, (ClassStatement, TraitStatement))

    def apply(self, statement, context):
        suggestions = []
        for member in statement.members:
            if not isinstance(member, Property):
                continue
            if VISIBILITY_MODIFIERS.intersection(member.modifiers):
                continue
            suggestions.append(
                self.suggestion(
                    f"Property '{member.name}' in '{statement.name}' has no visibility modifier.",
                    statement,
                    member,
                )
            )
        return suggestions
