"""
Pattern-based inflection engine.

A RuleSet holds two independent RuleTables, one per direction. Each table
is consulted in a fixed order:

1. uninflected words (exact, case-sensitive) -> word unchanged
2. irregular words (exact, case-sensitive) -> mapped form
3. pattern rules, in list order -> first match is substituted
4. nothing matched -> word unchanged

A RuleSet is an ordinary value owned by whoever built it. Two RuleSets never
share tables, so tests and callers can mutate their own copy freely.
"""

import logging
import re
import threading
from dataclasses import dataclass, field
from typing import Iterable, Optional

from . import constants

logger = logging.getLogger("lexis.inflection")


@dataclass
class Rule:
    """A compiled (pattern, template) pair."""

    source: str
    template: str
    pattern: re.Pattern = field(repr=False)

    @classmethod
    def compile(cls, source: str, template: str) -> "Rule":
        """
        Compile a rule, checking both halves up front.

        Raises:
            re.error: Invalid pattern, or a template with a bad escape or a
                numbered group the pattern does not have
            IndexError: Template names a group the pattern does not have
        """
        # Rules are authored case-insensitive (pluralize("Status") == "Statuses")
        pattern = re.compile(source, re.IGNORECASE)
        _check_template(pattern, template)
        return cls(source, template, pattern)

    def apply(self, word: str) -> Optional[str]:
        """Return the substituted word, or None when the pattern does not match."""
        if self.pattern.search(word) is None:
            return None
        return self.pattern.sub(self.template, word, count=1)


def _check_template(pattern: re.Pattern, template: str) -> None:
    # Expand against an empty match that has the same numbered and named groups
    names = {index: name for name, index in pattern.groupindex.items()}
    groups = "".join(
        f"(?P<{names[i]}>)" if i in names else "()"
        for i in range(1, pattern.groups + 1)
    )
    re.compile(groups).match("").expand(template)


@dataclass
class RuleTable:
    """Rules for one direction (to plural or to singular)."""

    rules: list[Rule] = field(default_factory=list)
    uninflected: set[str] = field(default_factory=set)
    irregular: dict[str, str] = field(default_factory=dict)

    def inflect(self, word: str) -> str:
        if word in self.uninflected:
            return word

        if word in self.irregular:
            return self.irregular[word]

        for rule in self.rules:
            result = rule.apply(word)
            if result is not None:
                return result

        return word

    def add_rules(self, rules: Iterable[Rule], prepend: bool = False) -> None:
        rules = list(rules)
        if prepend:
            self.rules[:0] = rules
        else:
            self.rules.extend(rules)

    def copy(self) -> "RuleTable":
        # Compiled Rule objects are immutable, so sharing them is fine
        return RuleTable(list(self.rules), set(self.uninflected), dict(self.irregular))


class RuleSet:
    """
    Plural and singular rule tables plus the operations over them.

    Reads and writes take a re-entrant lock, so a single RuleSet can be
    shared between threads (the process-wide inflector does exactly that).

    Examples:
        >>> rules = RuleSet.default()
        >>> rules.pluralize("matrix")
        'matrices'
        >>> rules.singularize("oxen")
        'ox'
    """

    def __init__(self, plural: Optional[RuleTable] = None, singular: Optional[RuleTable] = None):
        self.plural = plural if plural is not None else RuleTable()
        self.singular = singular if singular is not None else RuleTable()
        self._lock = threading.RLock()

    @classmethod
    def default(cls) -> "RuleSet":
        """Build a RuleSet seeded with the English tables from constants."""
        irregular = dict(constants.IRREGULAR_WORDS)

        plural = RuleTable(
            rules=[Rule.compile(p, t) for p, t in constants.PLURAL_RULES],
            uninflected=set(constants.UNINFLECTED_WORDS) | set(constants.PLURAL_UNINFLECTED),
            irregular=irregular,
        )
        singular = RuleTable(
            rules=[Rule.compile(p, t) for p, t in constants.SINGULAR_RULES],
            uninflected=set(constants.UNINFLECTED_WORDS) | set(constants.SINGULAR_UNINFLECTED),
            irregular={p: s for s, p in irregular.items()},
        )
        return cls(plural, singular)

    def copy(self) -> "RuleSet":
        with self._lock:
            return RuleSet(self.plural.copy(), self.singular.copy())

    def table(self, rule_type: str) -> RuleTable:
        if rule_type == "plural":
            return self.plural
        if rule_type == "singular":
            return self.singular
        raise KeyError(rule_type)

    def pluralize(self, word: str) -> str:
        with self._lock:
            return self.plural.inflect(word)

    def singularize(self, word: str) -> str:
        with self._lock:
            return self.singular.inflect(word)

    def add_irregular(self, singular: str, plural: str) -> None:
        """Register singular <-> plural in both directions."""
        with self._lock:
            self.plural.irregular[singular] = plural
            self.singular.irregular[plural] = singular
        logger.debug(f"Irregular pair added: {singular!r} -> {plural!r}")

    def add_uninflected(self, word: str, rule_type: Optional[str] = None) -> None:
        """Register an identical-form word for one direction, or both when rule_type is None."""
        with self._lock:
            tables = (self.plural, self.singular) if rule_type is None else (self.table(rule_type),)
            for table in tables:
                table.uninflected.add(word)
        logger.debug(f"Uninflected word added ({rule_type or 'both'}): {word!r}")

    def add_rules(self, rule_type: str, rules: Iterable[Rule], prepend: bool = False) -> None:
        rules = list(rules)
        with self._lock:
            self.table(rule_type).add_rules(rules, prepend=prepend)
        logger.debug(
            f"{len(rules)} {rule_type} rule(s) {'prepended' if prepend else 'appended'}: "
            f"{[r.source for r in rules]}"
        )
