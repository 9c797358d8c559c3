"""
English word inflector: singular/plural conversion with overridable rules.

Inflector wraps a RuleSet (the generic pattern engine) and adds the domain
extras: the countable-word list and the registration API used by
applications to teach it new words.

Each Inflector owns its RuleSet. get_instance() hands out one shared,
process-wide inflector for callers that want the classic singleton.
"""

import logging
import os
import re
import threading
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any, Optional

from ..errors import InvalidArgumentError
from ..logging_config import setup_logging
from . import constants
from .rules import Rule, RuleSet

logger = logging.getLogger("lexis.inflection")

_instance: Optional["Inflector"] = None
_instance_lock = threading.Lock()


class Inflector:
    """
    Transforms English words between singular and plural.

    All mutating methods return the inflector so calls can be chained:

        >>> inflector = Inflector().add_word("bar", "foo").add_countable_rule("views")
        >>> inflector.to_plural("foo")
        'bar'

    Lookup order for to_plural/to_singular is uninflected words, then
    irregular words, then the pattern rules in list order.
    """

    def __init__(self, rules: Optional[RuleSet] = None):
        """
        Args:
            rules: Rule set to inflect with (default: a fresh copy of the English seed rules)
        """
        self.rules = rules if rules is not None else RuleSet.default()
        self.countable: list[str] = list(constants.COUNTABLE_WORDS)

    def __repr__(self) -> str:
        return (
            f"<Inflector plural_rules={len(self.rules.plural.rules)} "
            f"singular_rules={len(self.rules.singular.rules)} countable={len(self.countable)}>"
        )

    # ------------------------------------------------------------------
    # Rule registration
    # ------------------------------------------------------------------

    def _add_rule(self, data: Any, rule_type: str, prepend: bool = False) -> None:
        """
        Add rule data of the given type.

        Accepted data: a string, a mapping of {pattern: template}, or an
        iterable of strings and (pattern, template) pairs. For the singular
        and plural types a bare string is an uninflected word for that
        direction. Countable items are stored as str(item).

        Raises:
            InvalidArgumentError: Unsupported rule type or malformed data
        """
        if rule_type not in constants.RULE_TYPES:
            raise InvalidArgumentError(f"Unsupported rule type: {rule_type!r}")

        items = _normalize_rule_data(data)

        if rule_type == "countable":
            words = [str(item) for item in items]
            self.countable.extend(words)
            logger.debug(f"Countable word(s) added: {words}")
            return

        words = []
        patterns = []
        for item in items:
            if isinstance(item, str):
                words.append(item)
            else:
                patterns.append(_compile_rule(item))

        for word in words:
            self.rules.add_uninflected(word, rule_type)
        if patterns:
            self.rules.add_rules(rule_type, patterns, prepend=prepend)

    def add_countable_rule(self, data: Any) -> "Inflector":
        """
        Add one or more countable words.

        Args:
            data: A word or an iterable of words
        """
        self._add_rule(data, "countable")
        return self

    def add_word(self, singular: str, plural: str = "") -> "Inflector":
        """
        Register a specific word pair.

        The pair is keyed by the form each table looks up: the plural table
        maps plural -> singular and the singular table maps singular ->
        plural. So after add_word("bar", "foo"), to_plural("foo") is "bar"
        and to_singular("bar") is "foo". To make to_plural("cactus") give
        "cactuses", register add_word("cactuses", "cactus").

        Args:
            singular: Key in the singular table, value in the plural table
            plural: Key in the plural table, value in the singular table.
                Omitted or empty means the word is identical in both forms
                (uninflected).

        Examples:
            >>> inflector.add_word("bar", "foo").to_plural("foo")
            'bar'
            >>> inflector.add_word("sheep").to_plural("sheep")
            'sheep'
        """
        if plural:
            # add_irregular(a, b) keys the plural table by a and the singular table by b
            self.rules.add_irregular(plural, singular)
        else:
            self.rules.add_uninflected(singular)
        return self

    def add_pluralise_rule(self, data: Any, prepend: bool = False) -> "Inflector":
        """
        Add pluralisation rules.

        New rules go to the END of the list by default. The seed list ends
        in catch-all rules ("s$", "$"), so an appended rule only fires for
        words nothing earlier matches. Pass prepend=True to put the rules
        first.

        Args:
            data: {pattern: template}, (pattern, template) pairs, or words
            prepend: Insert ahead of the existing rules instead of after them
        """
        self._add_rule(data, "plural", prepend=prepend)
        return self

    def add_singularise_rule(self, data: Any, prepend: bool = False) -> "Inflector":
        """
        Add singularisation rules. Same ordering caveat as add_pluralise_rule().
        """
        self._add_rule(data, "singular", prepend=prepend)
        return self

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------

    def is_countable(self, word: str) -> bool:
        """Exact, case-sensitive membership in the countable list."""
        return word in self.countable

    def is_plural(self, word: str) -> bool:
        """
        True when pluralizing the singular form gives the word back.

        This is a round trip, not a classification: a word none of the rules
        touch can come out as both plural and singular.
        """
        return self.to_plural(self.to_singular(word)) == word

    def is_singular(self, word: str) -> bool:
        """True when singularizing the word leaves it unchanged."""
        return self.to_singular(word) == word

    def to_plural(self, word: str) -> str:
        """Convert a word to its plural form."""
        return self.rules.pluralize(word)

    def to_singular(self, word: str) -> str:
        """Convert a word to its singular form."""
        return self.rules.singularize(word)


def _normalize_rule_data(data: Any) -> list:
    if isinstance(data, str):
        return [data]
    if isinstance(data, Mapping):
        return list(data.items())
    if isinstance(data, Iterable) and not isinstance(data, (bytes, bytearray)):
        return list(data)
    raise InvalidArgumentError(f"Invalid inflector rule data: {data!r}")


def _compile_rule(item: Any) -> Rule:
    if (
        not isinstance(item, (tuple, list))
        or len(item) != 2
        or not all(isinstance(part, str) for part in item)
    ):
        raise InvalidArgumentError(f"Pattern rules must be (pattern, template) string pairs, got {item!r}")

    pattern, template = item
    try:
        return Rule.compile(pattern, template)
    except (re.error, IndexError) as e:
        raise InvalidArgumentError(f"Invalid rule {pattern!r} -> {template!r}: {e}") from e


def get_instance(new: bool = False) -> Inflector:
    """
    Get the process-wide inflector.

    The shared instance is built on first use. At that point:

    - LEXIS_LOG_DIR, when set, switches on lexis file logging there
    - LEXIS_RULES_FILE, when set, names a YAML rule file applied to the instance

    Args:
        new: Return a fresh, unshared inflector instead (mainly for tests)
    """
    global _instance

    if new:
        return Inflector()

    with _instance_lock:
        if _instance is None:
            log_dir = os.environ.get("LEXIS_LOG_DIR")
            if log_dir:
                setup_logging(Path(log_dir))

            inflector = Inflector()
            rules_file = os.environ.get("LEXIS_RULES_FILE")
            if rules_file:
                from .loader import apply_rule_file

                apply_rule_file(inflector, Path(rules_file))
            _instance = inflector
            logger.info(f"Shared inflector ready: {inflector!r}")
        return _instance
