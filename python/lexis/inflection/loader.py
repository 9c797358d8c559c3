"""
YAML rule files for the inflector.

A rule file lets an application keep its extra vocabulary next to its
config instead of in code:

    countable: [views, downloads]
    words:
      - sheep                          # same in both forms
      - [cactus, cactuses]             # to_plural("cactus") == "cactuses"
      - {singular: person, plural: people}
    plural:
      - ["^(custom)$", "\\1izables"]
    singular:
      - ["^(inflec|contribu)tors$", "\\1ta"]
    prepend: true                      # optional, put pattern rules first

Every section is optional. The process-wide inflector applies the file
named by LEXIS_RULES_FILE on first use (see inflector.get_instance).
"""

import logging
from pathlib import Path
from typing import Any

import yaml

from ..errors import InvalidArgumentError, RuleFileError
from .inflector import Inflector

logger = logging.getLogger("lexis.inflection")

SECTIONS = ("countable", "words", "plural", "singular", "prepend")


def load_rule_file(file_path: Path) -> dict[str, Any]:
    """
    Read and validate a YAML rule file.

    Args:
        file_path: Path to the .yaml/.yml file

    Returns:
        Dict with keys countable, words, plural, singular (lists) and prepend (bool)

    Raises:
        RuleFileError: File missing, unreadable or not valid YAML
        InvalidArgumentError: File parsed but its sections are malformed
    """
    try:
        text = Path(file_path).read_text(encoding="utf-8")
    except OSError as e:
        raise RuleFileError(f"Cannot read rule file {file_path}: {e}") from e

    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as e:
        raise RuleFileError(f"Invalid YAML in rule file {file_path}: {e}") from e

    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise InvalidArgumentError(f"Rule file {file_path} must contain a mapping at the top level")

    unknown = sorted(set(data) - set(SECTIONS))
    if unknown:
        raise InvalidArgumentError(f"Unknown section(s) in rule file {file_path}: {', '.join(unknown)}")

    rules = {
        "countable": _as_list(data.get("countable"), "countable"),
        "words": [_parse_word(entry) for entry in _as_list(data.get("words"), "words")],
        "plural": [_parse_rule(entry, "plural") for entry in _as_list(data.get("plural"), "plural")],
        "singular": [_parse_rule(entry, "singular") for entry in _as_list(data.get("singular"), "singular")],
        "prepend": bool(data.get("prepend", False)),
    }
    return rules


def apply_rule_file(inflector: Inflector, file_path: Path) -> Inflector:
    """
    Load a rule file and register its contents on an inflector.

    Returns:
        The same inflector, for chaining
    """
    rules = load_rule_file(file_path)

    if rules["countable"]:
        inflector.add_countable_rule(rules["countable"])
    # File pairs read naturally (to_plural(singular) == plural), unlike add_word()
    for singular, plural in rules["words"]:
        if plural:
            inflector.rules.add_irregular(singular, plural)
        else:
            inflector.add_word(singular)
    if rules["plural"]:
        inflector.add_pluralise_rule(rules["plural"], prepend=rules["prepend"])
    if rules["singular"]:
        inflector.add_singularise_rule(rules["singular"], prepend=rules["prepend"])

    logger.info(
        f"Rule file applied: {file_path} "
        f"({len(rules['countable'])} countable, {len(rules['words'])} words, "
        f"{len(rules['plural'])} plural, {len(rules['singular'])} singular)"
    )
    return inflector


def _as_list(value: Any, section: str) -> list:
    if value is None:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, list):
        raise InvalidArgumentError(f"Section {section!r} must be a list, got {type(value).__name__}")
    return value


def _parse_word(entry: Any) -> tuple[str, str]:
    if isinstance(entry, str):
        return entry, ""
    if isinstance(entry, dict) and "singular" in entry:
        return str(entry["singular"]), str(entry.get("plural") or "")
    if isinstance(entry, list) and len(entry) in (1, 2):
        singular = str(entry[0])
        plural = str(entry[1]) if len(entry) == 2 and entry[1] else ""
        return singular, plural
    raise InvalidArgumentError(f"Invalid word entry: {entry!r}")


def _parse_rule(entry: Any, section: str) -> Any:
    # Strings stay strings (uninflected for that direction); pairs become tuples
    if isinstance(entry, str):
        return entry
    if isinstance(entry, list) and len(entry) == 2:
        return str(entry[0]), str(entry[1])
    if isinstance(entry, dict) and len(entry) == 1:
        ((pattern, template),) = entry.items()
        return str(pattern), str(template)
    raise InvalidArgumentError(f"Invalid {section} rule entry: {entry!r}")
