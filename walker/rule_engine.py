import logging

from walker.ast_nodes import FileContext, Statement
from walker.ast_walker import iter_statements

logger = logging.getLogger(__name__)


class RuleEngine:
    """
    Applies every active rule to every statement reachable from a root
    and collects the suggestions.

    Results are grouped by rule (rules in identifier order), then in
    pre-order traversal within each rule.
    """

    def __init__(self, rules):
        self.rules = dict(sorted(dict(rules).items()))

    @property
    def codes(self):
        return list(self.rules)

    def run(self, statements, context=None):
        if isinstance(statements, Statement):
            statements = [statements]
        else:
            statements = list(statements)
        if context is None:
            context = FileContext()

        logger.debug("Running %d rule(s) on %s", len(self.rules), context.path or "<memory>")

        suggestions = []
        for code, rule in self.rules.items():
            for root in statements:
                for statement in iter_statements(root):
                    suggestions.extend(self._validate(code, rule, statement, context))

        return suggestions

    def _validate(self, code, rule, statement, context):
        try:
            return rule.validate(statement, context)
        except Exception:
            logger.warning(
                "Rule %s failed on %s (line %s); no suggestion produced.",
                code,
                statement.kind,
                statement.span.line,
                exc_info=True,
            )
            return []
