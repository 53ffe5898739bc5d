"""Recover a nutrient table from loosely formatted model output."""

import json
import logging
import re
from collections.abc import Callable

from pydantic import ValidationError

from nutrient_resolver.domain.nutrients import NutrientTable

_logger = logging.getLogger(__name__)

_GREEDY_OBJECT = re.compile(r"\{[\s\S]*\}")
_LEADING_FENCE = re.compile(r"^```[^\n]*\n?")
_TRAILING_FENCE = re.compile(r"\s*```$")

ParseStrategy = Callable[[str], dict[str, object] | None]


def parse_greedy(text: str) -> dict[str, object] | None:
    """Parse the span from the first ``{`` to the last ``}``."""
    match = _GREEDY_OBJECT.search(text)
    if match is None:
        return None
    return _load_object(match.group(0))


def parse_fence_stripped(text: str) -> dict[str, object] | None:
    """Strip markdown code fences and retry the greedy parse."""
    cleaned = _LEADING_FENCE.sub("", text.strip())
    cleaned = _TRAILING_FENCE.sub("", cleaned).strip()
    return parse_greedy(cleaned)


def parse_balanced_lines(text: str) -> dict[str, object] | None:
    """Collect lines from the first ``{`` until braces balance out."""
    collected: list[str] = []
    depth = 0
    for line in text.splitlines():
        if not collected and "{" not in line:
            continue
        collected.append(line)
        depth += line.count("{") - line.count("}")
        if depth == 0 and "}" in line:
            break
    if not collected:
        return None
    return _load_object("\n".join(collected))


STRATEGIES: tuple[ParseStrategy, ...] = (
    parse_greedy,
    parse_fence_stripped,
    parse_balanced_lines,
)


def extract_table(
    raw_text: str, strategies: tuple[ParseStrategy, ...] = STRATEGIES
) -> NutrientTable | None:
    """Return a validated nutrient table, or None when the text has none.

    Strategies run in order and the first one producing a JSON object wins.
    The winning object must then carry every basis and every nutrient;
    a partially valid table is rejected as a whole.
    """
    payload = None
    for strategy in strategies:
        payload = strategy(raw_text)
        if payload is not None:
            _logger.debug("Parsed model output with %s", strategy.__name__)
            break
    if payload is None:
        _logger.warning("No JSON object found in model output")
        return None
    try:
        return NutrientTable.model_validate(payload)
    except ValidationError as exc:
        _logger.warning(
            "Model output failed nutrient validation: %s error(s)", exc.error_count()
        )
        return None


def _load_object(candidate: str) -> dict[str, object] | None:
    """Decode JSON text, accepting only objects."""
    try:
        loaded = json.loads(candidate)
    except (json.JSONDecodeError, RecursionError):
        return None
    if not isinstance(loaded, dict):
        return None
    return loaded
