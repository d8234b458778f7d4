from types import MappingProxyType

from walker.rule_engine import RuleEngine

from walker.class_name_rule import ClassNameRule
from walker.empty_catch_rule import EmptyCatchRule
from walker.method_modifiers_rule import MethodModifiersRule
from walker.new_instance_rule import NewInstanceRule
from walker.parameter_count_rule import ParameterCountRule
from walker.property_modifiers_rule import PropertyModifiersRule
from walker.return_type_rule import ReturnTypeRule
from walker.uppercase_constants_rule import UppercaseConstantsRule


BUILTIN_RULES = (
    EmptyCatchRule,
    MethodModifiersRule,
    UppercaseConstantsRule,
    ClassNameRule,
    PropertyModifiersRule,
    ParameterCountRule,
    ReturnTypeRule,
    NewInstanceRule,
)

ALL_RULE_CODES = tuple(sorted(rule.code for rule in BUILTIN_RULES))


def _normalized_codes(disable):
    if not disable:
        return set()
    return {code.strip().upper() for code in disable if code and code.strip()}


def build_rules(disable=None):
    """
    Returns a read-only mapping of rule code to rule instance for every
    built-in rule not listed in ``disable``. Unknown codes are ignored.
    """
    disabled = _normalized_codes(disable)
    rules = {}

    for rule_class in BUILTIN_RULES:
        if rule_class.code in disabled:
            continue
        if rule_class.code in rules:
            raise ValueError(f"Duplicate rule code: {rule_class.code}")
        rules[rule_class.code] = rule_class()

    return MappingProxyType(dict(sorted(rules.items())))


def build_engine(disable=None):
    return RuleEngine(build_rules(disable))
