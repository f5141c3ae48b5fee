# career_projects/agents/recovery.py
"""
Best-effort recovery of a JSON array of projects from free-text model output.

Stages, each tried only when the previous one failed:
1) strip markdown fences and cut the text down to the outermost [ ... ]
2) strict json.loads
3) textual repairs (stray quotes, raw control chars, trailing commas,
   lone backslashes) followed by json.loads
4) independent parsing of every non-nested { ... } object

The repairs are applied per JSON string literal, so text that is already
valid JSON passes through them unchanged.
"""
import json
import logging
import re
from typing import Any, Iterator

logger = logging.getLogger(__name__)

FENCE_JSON_RE = re.compile(r"```json\n?")
FENCE_RE = re.compile(r"```\n?")
OBJECT_RE = re.compile(r"\{[^{}]*\}")
TRAILING_COMMA_RE = re.compile(r",(\s*[}\]])")
ESCAPE_RE = re.compile(r'\\(["\\/bfnrt]|u[0-9a-fA-F]{4})|\\')
WHITESPACE_RE = re.compile(r"\s*")

# characters that may legally follow the closing quote of a JSON string
STRING_TERMINATORS = ",:}]"
CONTROL_ESCAPES = {"\n": "\\n", "\t": "\\t", "\r": "\\r"}


class RecoveryError(ValueError):
    pass


def strip_code_fences(text: str) -> str:
    return FENCE_RE.sub("", FENCE_JSON_RE.sub("", text)).strip()


def _array_slice(text: str) -> str:
    start = text.find("[")
    end = text.rfind("]")
    if start == -1 or end == -1 or start >= end:
        raise RecoveryError("No valid JSON array found in response")
    return text[start:end + 1]


def _load_array(text: str) -> list[Any] | None:
    try:
        parsed = json.loads(text)
    except json.JSONDecodeError:
        return None
    return parsed if isinstance(parsed, list) else None


def _segments(text: str) -> Iterator[tuple[str, bool]]:
    """
    Split text into (chunk, is_string) pieces. String chunks include their
    quotes; an unterminated string runs to the end of the text.
    """
    i, n = 0, len(text)
    while i < n:
        start = text.find('"', i)
        if start == -1:
            yield text[i:], False
            return
        if start > i:
            yield text[i:start], False

        j = start + 1
        while j < n and text[j] != '"':
            j += 2 if text[j] == "\\" else 1
        end = min(j + 1, n)
        yield text[start:end], True
        i = end


def _rebuild(text: str, *, inside=None, outside=None) -> str:
    out = []
    for chunk, is_string in _segments(text):
        fn = inside if is_string else outside
        out.append(fn(chunk) if fn else chunk)
    return "".join(out)


def _closes_string(text: str, pos: int) -> bool:
    nxt = WHITESPACE_RE.match(text, pos).end()
    return nxt >= len(text) or text[nxt] in STRING_TERMINATORS


def escape_stray_quotes(text: str) -> str:
    """Escape quotes inside a string that are not followed by , : } or ]."""
    out = []
    in_string = False
    i, n = 0, len(text)
    while i < n:
        ch = text[i]
        if not in_string:
            in_string = ch == '"'
            out.append(ch)
        elif ch == "\\":
            out.append(text[i:i + 2])
            i += 2
            continue
        elif ch == '"':
            if _closes_string(text, i + 1):
                in_string = False
                out.append(ch)
            else:
                out.append('\\"')
        else:
            out.append(ch)
        i += 1
    return "".join(out)


def escape_control_chars(text: str) -> str:
    def _escape(chunk: str) -> str:
        for raw, escaped in CONTROL_ESCAPES.items():
            chunk = chunk.replace(raw, escaped)
        return chunk

    return _rebuild(text, inside=_escape)


def strip_trailing_commas(text: str) -> str:
    return _rebuild(text, outside=lambda chunk: TRAILING_COMMA_RE.sub(r"\1", chunk))


def escape_lone_backslashes(text: str) -> str:
    """Double backslashes that do not start a valid JSON escape sequence."""
    def _escape(chunk: str) -> str:
        return ESCAPE_RE.sub(lambda m: m.group(0) if m.group(1) else "\\\\", chunk)

    return _rebuild(text, inside=_escape)


REPAIRS = (
    escape_stray_quotes,
    escape_control_chars,
    strip_trailing_commas,
    escape_lone_backslashes,
)


def repair_json(text: str) -> str:
    for repair in REPAIRS:
        text = repair(text)
    return text


def _extract_objects(text: str) -> list[dict[str, Any]]:
    objects = []
    for match in OBJECT_RE.finditer(text):
        try:
            parsed = json.loads(match.group(0))
        except json.JSONDecodeError:
            continue
        if isinstance(parsed, dict):
            objects.append(parsed)
    return objects


def extract_project_array(response_text: str) -> list[Any]:
    """Return the list of items found in the model output or raise RecoveryError."""
    cleaned = strip_code_fences(response_text or "")
    json_part = _array_slice(cleaned)

    # 1) Strict parse
    parsed = _load_array(json_part)
    if parsed is not None:
        return parsed
    logger.info("Direct parsing failed, attempting repair...")

    # 2) Repaired parse
    repaired = repair_json(json_part)
    parsed = _load_array(repaired)
    if parsed is not None:
        return parsed
    logger.info("Repair parsing failed, extracting individual objects...")

    # 3) Object-by-object salvage
    objects = _extract_objects(repaired)
    if not objects:
        raise RecoveryError("Failed to extract any valid projects from response")
    logger.info("Recovered %d project object(s) individually", len(objects))
    return objects
