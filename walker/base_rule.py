from walker.ast_nodes import Suggestion


class BaseRule:
    """
    Inspects one statement at a time. Descending into children is the
    engine's job, not the rule's.
    """

    code = None
    description = ""

    def matches(self, statement):
        raise NotImplementedError("matches() must be implemented")

    def apply(self, statement, context):
        raise NotImplementedError("apply() must be implemented")

    def validate(self, statement, context=None):
        if not self.matches(statement):
            return []
        return list(self.apply(statement, context) or [])

    def suggestion(self, message, statement, member=None):
        span = statement.span
        if member is not None and member.span.line:
            span = member.span
        return Suggestion(rule=self.code, message=message, span=span, statement=statement)
