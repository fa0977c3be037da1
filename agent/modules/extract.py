"""
Locate and decode the JSON payload embedded in a free-text LLM reply.

Two stages, first match wins:
  1. a fenced block tagged ```json
  2. the first balanced {...} region anywhere in the text

Stage 2 can misfire when the narrative around the payload contains stray
braces; the first balanced region is taken as-is.
"""
import json
import re

from agent.errors import PayloadParseError

_FENCED_JSON = re.compile(r"```json[ \t]*\r?\n(.*?)\r?\n?[ \t]*```", re.DOTALL | re.IGNORECASE)


def find_payload(raw: str) -> str | None:
    """Return the candidate JSON text, or None if neither stage matches."""
    fenced = _FENCED_JSON.search(raw)
    if fenced:
        return fenced.group(1).strip()
    return _first_balanced_object(raw)


def _first_balanced_object(text: str) -> str | None:
    """Scan for the first `{` and return up to its matching `}`.

    Braces inside JSON string literals are not counted. If the first region
    never closes, scanning resumes from the next `{`.
    """
    start = text.find("{")
    while start != -1:
        depth = 0
        in_string = False
        escaped = False
        for i in range(start, len(text)):
            ch = text[i]
            if in_string:
                if escaped:
                    escaped = False
                elif ch == "\\":
                    escaped = True
                elif ch == '"':
                    in_string = False
                continue
            if ch == '"':
                in_string = True
            elif ch == "{":
                depth += 1
            elif ch == "}":
                depth -= 1
                if depth == 0:
                    return text[start:i + 1]
        start = text.find("{", start + 1)
    return None


def extract_payload(raw: str) -> dict:
    """Extract the payload object from an LLM reply.

    Raises PayloadParseError when no payload is found or it is not a JSON object.
    """
    candidate = find_payload(raw or "")
    if candidate is None:
        raise PayloadParseError("No valid JSON found in response")
    try:
        payload = json.loads(candidate)
    except json.JSONDecodeError as e:
        raise PayloadParseError(f"Malformed JSON in response: {e}") from e
    if not isinstance(payload, dict):
        raise PayloadParseError(
            f"Expected a JSON object in response, got {type(payload).__name__}"
        )
    return payload


def _string_list(payload: dict, key: str) -> list[str]:
    value = payload.get(key)
    if value is None:
        return []
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise PayloadParseError(f"Field {key!r} must be an array of strings")
    return value


def payload_fields(payload: dict) -> tuple[str, list[str], list[str]]:
    """Return (content, hashtags, suggestions), defaulting absent fields."""
    content = payload.get("content")
    if content is None:
        content = ""
    elif not isinstance(content, str):
        raise PayloadParseError("Field 'content' must be a string")
    return content, _string_list(payload, "hashtags"), _string_list(payload, "suggestions")
