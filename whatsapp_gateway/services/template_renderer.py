"""``{{variable}}`` placeholder handling for message templates."""

from __future__ import annotations

import re
from collections.abc import Mapping

VARIABLE_PATTERN = re.compile(r"\{\{(\w+)\}\}")


def extract_variables(content: str) -> list[str]:
    """Unique variable names in order of first appearance."""
    variables: list[str] = []
    for match in VARIABLE_PATTERN.finditer(content):
        name = match.group(1)
        if name not in variables:
            variables.append(name)
    return variables


def render_template(content: str, data: Mapping[str, str | None]) -> str:
    """Fill every placeholder for sending; unknown variables become empty."""

    def replace(match: re.Match[str]) -> str:
        name = match.group(1)
        return data.get(name) or data.get(name.lower()) or ""

    return VARIABLE_PATTERN.sub(replace, content)


def preview_template(content: str, samples: Mapping[str, str]) -> str:
    """Fill known placeholders and leave the rest visible."""

    def replace(match: re.Match[str]) -> str:
        return samples.get(match.group(1)) or match.group(0)

    return VARIABLE_PATTERN.sub(replace, content)
