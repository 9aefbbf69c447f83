import re
from dataclasses import dataclass

from util import error_codes
from util.errors import ValidationError

CALLBACK_SENTINEL = "\x0f"
CALLBACK_SEPARATOR = "|"

# Syntax: "<sentinel><unique>[|<payload>]"
CALLBACK_PATTERN = re.compile(r"^\x0f([-A-Za-z0-9_]+)(\|(.+))?$")
UNIQUE_PATTERN = re.compile(r"^[-A-Za-z0-9_]+$")


@dataclass(frozen = True)
class ParsedCallback:
    unique: str
    payload: str


def is_structured(data: str | None) -> bool:
    return bool(data) and data[0] == CALLBACK_SENTINEL


def parse_callback(data: str | None) -> ParsedCallback | None:
    if not is_structured(data):
        return None
    match = CALLBACK_PATTERN.fullmatch(data)
    if not match:
        return None
    return ParsedCallback(unique = match.group(1), payload = match.group(3) or "")


def callback_key(unique: str) -> str:
    """Registry key under which the handler of a structured callback is stored."""
    return CALLBACK_SENTINEL + unique


def encode_callback(unique: str, *payload_parts: str) -> str:
    """
    Builds the callback data for a button whose presses should reach the handler
    registered under `callback_key(unique)`.

    Parameters:
    unique (str): The identifier of the button, letters, digits, '-' and '_' only.
    payload_parts (str): Values joined with '|' into the payload handed to the handler.
    """
    if not UNIQUE_PATTERN.fullmatch(unique):
        raise ValidationError(f"Invalid callback unique '{unique}'", error_codes.INVALID_CALLBACK_UNIQUE)
    payload = CALLBACK_SEPARATOR.join(payload_parts)
    if "\n" in payload:
        raise ValidationError("Callback payload must stay on one line", error_codes.INVALID_CALLBACK_PAYLOAD)
    if not payload:
        return callback_key(unique)
    return f"{callback_key(unique)}{CALLBACK_SEPARATOR}{payload}"
