"""Parse-time policy.

Whether newlines widen a gap and whether explicit parentheses are accepted
alongside whitespace grouping are choices made here rather than in the
parser, so one process can hold several policies at once.
"""
import os
from typing import FrozenSet, NamedTuple

DEFAULT_FUNCTIONS = frozenset(["sqrt", "exp", "ln", "log", "sin", "cos", "tan", "abs"])


def flag(get, name, default):
    value = get(name)
    if value is None:
        return default
    return value.strip().lower() not in ("", "0", "false", "no", "off")


DEBUG = flag(os.getenv, "DEBUG", False)


class ParserConfig(NamedTuple):
    functions: FrozenSet[str] = DEFAULT_FUNCTIONS
    count_newlines: bool = True
    allow_grouping: bool = True
    allow_negation: bool = True

    @classmethod
    def from_env(cls, environ=None):
        """Build a config from `SPACED_*` environment variables.

        SPACED_FUNCTIONS is a comma separated list of prefix function names;
        SPACED_COUNT_NEWLINES, SPACED_GROUPING and SPACED_NEGATION are flags.
        """
        get = os.getenv if environ is None else environ.get
        functions = get("SPACED_FUNCTIONS")
        if functions is not None:
            functions = frozenset(f.strip() for f in functions.split(",") if f.strip())
        return cls(
            functions=DEFAULT_FUNCTIONS if functions is None else functions,
            count_newlines=flag(get, "SPACED_COUNT_NEWLINES", True),
            allow_grouping=flag(get, "SPACED_GROUPING", True),
            allow_negation=flag(get, "SPACED_NEGATION", True),
        )
