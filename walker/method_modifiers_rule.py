from walker.ast_nodes import (
    VISIBILITY_MODIFIERS,
    AbstractConstructor,
    AbstractMethod,
    ClassStatement,
    ConcreteConstructor,
    ConcreteMethod,
    TraitStatement,
)
from walker.base_rule import BaseRule


class MethodModifiersRule(BaseRule):
    """
    Warns when a method or constructor relies on implicit public visibility.
    """

    code = "E0003"
    description = "Methods should declare their visibility."

    _METHOD_KINDS = (ConcreteMethod, AbstractMethod, ConcreteConstructor, AbstractConstructor)

    def matches(self, statement):
        return isinstance(statement, (ClassStatement, TraitStatement))

    def apply(self, statement, context):
        suggestions = []
        for member in statement.members:
            if not isinstance(member, self._METHOD_KINDS):
                continue
            if VISIBILITY_MODIFIERS.intersection(member.modifiers):
                continue
            suggestions.append(
                self.suggestion(
                    f"Method '{member.name}' in '{statement.name}' has no visibility modifier "
                    "(public, protected or private).",
                    statement,
                    member,
                )
            )
        return suggestions
