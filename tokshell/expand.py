"""Expansion of $NAME references to environment values."""

from __future__ import annotations

import os
import re
from collections.abc import Mapping

_VARIABLE = re.compile(r"\$([A-Za-z0-9_]*)")


def expand_env_vars(text: str, env: Mapping[str, str] | None = None) -> str:
    """Replace each $NAME in text with its value from env (the process
    environment by default). Unset names and a bare $ expand to nothing."""
    values = os.environ if env is None else env

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        if not name:
            return ""
        return values.get(name, "")

    return _VARIABLE.sub(replace, text)