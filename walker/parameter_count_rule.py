from walker.ast_nodes import (
    AbstractConstructor,
    AbstractMethod,
    ClassStatement,
    ConcreteConstructor,
    ConcreteMethod,
    TraitStatement,
)
from walker.base_rule import BaseRule

MAX_PARAMETERS = 5


class ParameterCountRule(BaseRule):
    """
    Warns about methods taking more than MAX_PARAMETERS parameters.
    """

    code = "E0007"
    description = f"Methods should not take more than {MAX_PARAMETERS} parameters."

    _METHOD_KINDS = (ConcreteMethod, AbstractMethod, ConcreteConstructor, AbstractConstructor)

    def __init__(self, max_parameters=MAX_PARAMETERS):
        self.max_parameters = max_parameters

    def matches(self, statement):
        return isinstance(statement, (ClassStatement, TraitStatement))

    def apply(self, statement, context):
        suggestions = []
        for member in statement.members:
            if not isinstance(member, self._METHOD_KINDS):
                continue
            count = len(member.parameters)
            if count <= self.max_parameters:
                continue
            suggestions.append(
                self.suggestion(
                    f"Method '{member.name}' takes {count} parameters; "
                    f"consider grouping them (limit is {self.max_parameters}).",
                    statement,
                    member,
                )
            )
        return suggestions
