"""
English singular/plural inflection.

Inflector wraps a RuleSet (regex rules + irregular and uninflected word
tables) and adds countable words and rule registration. Rule files in YAML
can extend either.
"""

from .rules import Rule, RuleSet, RuleTable
from .inflector import Inflector, get_instance
from .loader import apply_rule_file, load_rule_file
from .constants import (
    COUNTABLE_WORDS,
    IRREGULAR_WORDS,
    PLURAL_RULES,
    RULE_TYPES,
    SINGULAR_RULES,
    UNINFLECTED_WORDS,
)

__all__ = [
    "Inflector",
    "get_instance",
    "Rule",
    "RuleSet",
    "RuleTable",
    "apply_rule_file",
    "load_rule_file",
    "COUNTABLE_WORDS",
    "IRREGULAR_WORDS",
    "PLURAL_RULES",
    "RULE_TYPES",
    "SINGULAR_RULES",
    "UNINFLECTED_WORDS",
]
