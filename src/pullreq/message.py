"""Parsing the edited pull request message into title and body."""

from collections.abc import Iterable
from enum import Enum

from . import ParsedMessage

COMMENT_PREFIX = "#"

# Only ASCII whitespace makes a line blank
BLANK_CHARS = " \t\n\r\f\v"


class ParseState(Enum):
    """Where the parser is in the message."""

    IN_TITLE = "IN_TITLE"
    IN_BODY = "IN_BODY"


def read_title_and_body(lines: Iterable[str]) -> ParsedMessage:
    """
    Parse message lines the way git parses a commit message.

    The first block of non-blank lines is the title, joined with spaces.
    Everything after the first blank line is the body. The first comment
    line ends the message; nothing after it is read.

    Args:
        lines: Message lines, with or without line terminators

    Returns:
        ParsedMessage with stripped title and body (either may be empty)
    """
    state = ParseState.IN_TITLE
    title_parts: list[str] = []
    body_parts: list[str] = []

    for line in lines:
        line = line.rstrip("\r\n")
        if line.startswith(COMMENT_PREFIX):
            break

        if state == ParseState.IN_TITLE and line.strip(BLANK_CHARS):
            title_parts.append(line)
        else:
            state = ParseState.IN_BODY
            body_parts.append(line)

    title = " ".join(title_parts).strip()
    body = "\n".join(body_parts).strip()
    return ParsedMessage(title=title, body=body)


def read_title_and_body_from_file(path: str) -> ParsedMessage:
    """
    Parse the message file at path.

    Raises:
        OSError: If the file cannot be read
    """
    with open(path, encoding="utf-8") as f:
        return read_title_and_body(f)
