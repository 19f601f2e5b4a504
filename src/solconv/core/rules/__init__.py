from solconv.core.ports.rule import Rule
from solconv.core.rules.constants import ConstantNameRule, is_valid_constant_name
from solconv.core.rules.internal_names import InternalNameRule, is_valid_internal_name
from solconv.core.rules.scripts import ScriptShapeRule
from solconv.core.rules.test_names import TestNameRule, is_valid_test_name

DEFAULT_RULES: tuple[Rule, ...] = (
    TestNameRule(),
    InternalNameRule(),
    ConstantNameRule(),
    ScriptShapeRule(),
)

__all__ = [
    "DEFAULT_RULES",
    "ConstantNameRule",
    "InternalNameRule",
    "Rule",
    "ScriptShapeRule",
    "TestNameRule",
    "is_valid_constant_name",
    "is_valid_internal_name",
    "is_valid_test_name",
]
