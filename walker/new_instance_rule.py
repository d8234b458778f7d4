from walker.ast_nodes import AssignmentExpression, ExpressionStatement, NewExpression
from walker.base_rule import BaseRule


class NewInstanceRule(BaseRule):
    """
    Flags assignments of freshly created objects, e.g. ``$x = new Bar();``.
    Such objects are usually better injected as dependencies.
    """

    code = "E0010"
    description = "Prefer injecting dependencies over creating them with 'new'."

    def matches(self, statement):
        if not isinstance(statement, ExpressionStatement):
            return False
        expression = statement.expression
        return isinstance(expression, AssignmentExpression) and isinstance(expression.value, NewExpression)

    def apply(self, statement, context):
        expression = statement.expression
        class_name = expression.value.class_name or "an anonymous class"
        target = expression.target or "a variable"
        return [
            self.suggestion(
                f"{target} is assigned a new instance of {class_name}; "
                "consider injecting it as a dependency instead.",
                statement,
            )
        ]
