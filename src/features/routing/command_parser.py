import re
from dataclasses import dataclass

# Syntax: "/<command>[@<bot>] <payload>", the payload is the rest of the first line
COMMAND_PATTERN = re.compile(r"^/+([A-Za-z0-9_]+)(@([A-Za-z0-9_]+))?([ \t\n\f\r]|$)(.+)?")


@dataclass(frozen = True)
class ParsedCommand:
    command: str
    bot_name: str | None
    payload: str

    def is_addressed_to(self, username: str | None) -> bool:
        if not self.bot_name:
            return True  # untagged commands belong to every bot in the chat
        return bool(username) and self.bot_name.casefold() == username.casefold()


def parse_command(text: str | None) -> ParsedCommand | None:
    if not text:
        return None
    match = COMMAND_PATTERN.match(text)
    if not match:
        return None
    return ParsedCommand(
        command = match.group(1),
        bot_name = match.group(3),
        payload = match.group(5) or "",
    )
