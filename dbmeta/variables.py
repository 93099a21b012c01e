"""
Variable substitution for templated names.

Handles ${NAME} and %%NAME%% references. Values come from an explicit mapping
first and from the process environment second; unresolved references are left
in place.
"""

import os
import re
from collections.abc import Mapping
from typing import Protocol

VARIABLE_PATTERNS = [
    re.compile(r"\$\{([^}]+)\}"),
    re.compile(r"%%([^%]+)%%"),
]


class VariableSpace(Protocol):
    """Anything able to resolve variables inside a string."""

    def substitute_variables(self, text: str) -> str: ...


class Variables:
    """Mapping-backed VariableSpace falling back to environment variables."""

    def __init__(self, values: Mapping[str, str] | None = None, use_environment: bool = True):
        self.values = dict(values or {})
        self.use_environment = use_environment

    def get(self, name: str) -> str | None:
        if name in self.values:
            return self.values[name]
        if self.use_environment:
            return os.environ.get(name)
        return None

    def substitute_variables(self, text: str) -> str:
        if not text:
            return text

        def replace(match: re.Match) -> str:
            value = self.get(match.group(1).strip())
            return match.group(0) if value is None else str(value)

        for pattern in VARIABLE_PATTERNS:
            text = pattern.sub(replace, text)
        return text
