from walker.ast_children import child_statements
from walker.ast_nodes import FileContext, Suggestion
from walker.base_rule import BaseRule
from walker.engine_factory import ALL_RULE_CODES, build_engine, build_rules
from walker.rule_engine import RuleEngine

__all__ = [
    "ALL_RULE_CODES",
    "BaseRule",
    "FileContext",
    "RuleEngine",
    "Suggestion",
    "build_engine",
    "build_rules",
    "child_statements",
]
