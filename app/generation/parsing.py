"""Normalize raw model output into a summary string or a tag list.

The model is asked for a bare JSON array of tags but often wraps it in prose
or code fences, or skips the JSON entirely. `parse_tags` therefore runs an
ordered chain of strategies over a candidate string: the first strategy that
returns anything other than `NO_RESULT` wins. Only text that is not JSON at
all reaches the comma/newline split; valid JSON that is not a non-empty array
of strings is rejected.
"""
import json
import re
from typing import Any, Callable

from jsonschema import Draft202012Validator

from app.shared.errors import EmptyResultError

BRACKETED_ARRAY = re.compile(r"\[.*?\]", re.DOTALL)
SPLIT_ON = re.compile(r"[,\n]")
MAX_TAGS = 5
NO_RESULT = object()

TAG_ARRAY_SCHEMA = {"type": "array", "items": {"type": "string"}}
_tag_array = Draft202012Validator(TAG_ARRAY_SCHEMA)

TagStrategy = Callable[[str], Any]


def parse_summary(raw: str) -> str:
    summary = (raw or "").strip()
    if not summary:
        raise EmptyResultError("Summary generation failed: the response was empty.")
    return summary


def extract_candidate(raw: str) -> str:
    """First bracketed array in the text, or the whole text if there is none."""
    m = BRACKETED_ARRAY.search(raw)
    return m.group(0) if m else raw


def strict_json_array(candidate: str) -> Any:
    """Any valid JSON value, `NO_RESULT` when the candidate is not JSON."""
    try:
        return json.loads(candidate)
    except ValueError:
        return NO_RESULT


def split_delimited(candidate: str) -> list[str]:
    text = candidate
    if text.startswith("["):
        text = text[1:]
    if text.endswith("]"):
        text = text[:-1]
    text = text.replace('"', "").strip()
    return [piece.strip() for piece in SPLIT_ON.split(text) if piece.strip()]


TAG_STRATEGIES: tuple[TagStrategy, ...] = (strict_json_array, split_delimited)


def _run_strategies(candidate: str, strategies: tuple[TagStrategy, ...]) -> Any:
    for strategy in strategies:
        result = strategy(candidate)
        if result is not NO_RESULT:
            return result
    return []


def _dedupe(tags: list[str]) -> list[str]:
    out: list[str] = []
    for tag in tags:
        if tag.strip() and tag not in out:
            out.append(tag)
    return out


def parse_tags(raw: str, max_tags: int | None = None) -> list[str]:
    limit = MAX_TAGS if max_tags is None else max_tags
    tags = _run_strategies(extract_candidate(raw or ""), TAG_STRATEGIES)
    # parsed JSON that is not a non-empty array of strings is not retried
    if not tags or not _tag_array.is_valid(tags):
        raise EmptyResultError("Tag generation failed: no valid tag array was produced.")

    tags = _dedupe(tags[:limit])
    if not tags:
        raise EmptyResultError("Tag generation failed: no tags were generated.")
    return tags
