"""
lexis - UTF-8 string helpers, English inflection and naming-convention
normalization.

Subpackages:

- inflection/  Singular/plural rule engine (Inflector, RuleSet, YAML rule files)
- normalize/   camelCase / snake_case / dash / space conversions
- strings/     increment, locale-aware comparison, codepoint primitives

Usage:
    from lexis import Inflector, to_key, increment

    inflector = Inflector()
    inflector.to_plural("matrix")      # "matrices"
    to_key("Foo Bar")                  # "foo_bar"
    increment("title")                 # "title (2)"
"""

import logging

__version__ = "0.1.0"

from lexis.errors import InvalidArgumentError, LexisError, RuleFileError
from lexis.inflection import Inflector, RuleSet, get_instance
from lexis.normalize import (
    from_camel_case,
    to_camel_case,
    to_dash_separated,
    to_key,
    to_space_separated,
    to_underscore_separated,
    to_variable,
)
from lexis.strings import increment, strcasecmp, strcmp

# Library logging stays silent until the application calls setup_logging()
logging.getLogger("lexis").addHandler(logging.NullHandler())

__all__ = [
    "__version__",
    # errors
    "LexisError",
    "InvalidArgumentError",
    "RuleFileError",
    # inflection
    "Inflector",
    "RuleSet",
    "get_instance",
    # normalize
    "from_camel_case",
    "to_camel_case",
    "to_dash_separated",
    "to_space_separated",
    "to_underscore_separated",
    "to_variable",
    "to_key",
    # strings
    "increment",
    "strcmp",
    "strcasecmp",
]
