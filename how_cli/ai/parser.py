"""
Turns a free-form model reply into an `Answer`.

Commands are extracted by the first of three passes that yields anything:

1. Marker scan: `TITLE:`, `DESCRIPTION:`, `COMMAND:` and `SCRIPT:` lines,
   driven by a small state machine.
2. Fenced code blocks: each complete ``` block becomes one command.
3. Raw passthrough: the whole reply becomes the only command.

Title and description always come from the marker scan. Parsing never fails.
"""

import logging

from enum import Enum
from typing import List, Tuple

from .types import Answer


logger = logging.getLogger(__name__)

FENCE = "```"


class LineKind(Enum):
    TITLE = "TITLE:"
    DESCRIPTION = "DESCRIPTION:"
    COMMAND = "COMMAND:"
    SCRIPT = "SCRIPT:"
    TEXT = "text"
    BLANK = "blank"


class ParserState(Enum):
    IDLE = "idle"
    AWAITING_TITLE = "awaiting_title"
    AWAITING_DESCRIPTION = "awaiting_description"
    AWAITING_COMMAND = "awaiting_command"
    IN_SCRIPT = "in_script"


_MARKERS = (LineKind.TITLE, LineKind.DESCRIPTION, LineKind.COMMAND, LineKind.SCRIPT)

# Marker kinds whose value may sit on the following line.
_AWAITING_STATES = {
    LineKind.TITLE: ParserState.AWAITING_TITLE,
    LineKind.DESCRIPTION: ParserState.AWAITING_DESCRIPTION,
    LineKind.COMMAND: ParserState.AWAITING_COMMAND,
}


def classify_line(line: str) -> Tuple[LineKind, str]:
    """Returns the kind of a reply line and its value.

    For markers the value is the trimmed text after the marker, for plain
    text it is the trimmed line.
    """
    stripped = line.strip()
    if not stripped:
        return LineKind.BLANK, ""

    for marker in _MARKERS:
        if stripped.startswith(marker.value):
            return marker, stripped[len(marker.value):].strip()

    return LineKind.TEXT, stripped


def next_state(
    state: ParserState, kind: LineKind, value: str, base: ParserState
) -> ParserState:
    """Transition function of the marker scanner.

    `base` is the state an awaited value returns to: IN_SCRIPT once a
    `SCRIPT:` marker was seen, IDLE before that.
    """
    if kind is LineKind.SCRIPT:
        return ParserState.IN_SCRIPT

    if kind in _AWAITING_STATES:
        # A new marker always cancels whatever was awaited before it.
        return base if value else _AWAITING_STATES[kind]

    if kind is LineKind.TEXT and state in _AWAITING_STATES.values():
        return base

    return state


class MarkerScanner:
    """Single pass over the reply collecting marker values."""

    def __init__(self):
        self.state = ParserState.IDLE
        self.base = ParserState.IDLE
        self.title = ""
        self.description = ""
        self.commands: List[str] = []
        self.script_lines: List[str] = []

    def feed(self, line: str):
        kind, value = classify_line(line)

        if kind is LineKind.TITLE:
            self.title = value
        elif kind is LineKind.DESCRIPTION:
            self.description = value
        elif kind is LineKind.COMMAND:
            if value:
                self.commands.append(value)
        elif kind is LineKind.SCRIPT:
            self.base = ParserState.IN_SCRIPT
        elif kind is LineKind.TEXT:
            self._consume_text(line, value)

        self.state = next_state(self.state, kind, value, self.base)

    def _consume_text(self, line: str, value: str):
        if self.state is ParserState.AWAITING_TITLE:
            self.title = value
        elif self.state is ParserState.AWAITING_DESCRIPTION:
            self.description = value
        elif self.state is ParserState.AWAITING_COMMAND:
            self.commands.append(value)
        elif self.state is ParserState.IN_SCRIPT:
            # Script lines keep their indentation.
            self.script_lines.append(line)

    def result(self, raw_text: str) -> Answer:
        commands = list(self.commands)
        if self.script_lines:
            commands.append("\n".join(self.script_lines))
        return Answer(
            title=self.title,
            description=self.description,
            commands=commands,
            raw_text=raw_text,
        )


def scan_markers(text: str) -> Answer:
    scanner = MarkerScanner()
    for line in text.split("\n"):
        scanner.feed(line)
    return scanner.result(text)


def extract_code_blocks(text: str) -> List[str]:
    """Returns the contents of every closed markdown code fence.

    A block that is opened but never closed is dropped, and so is an empty one.
    """
    blocks = []
    in_block = False
    block_lines: List[str] = []

    for line in text.split("\n"):
        if line.strip().startswith(FENCE):
            if in_block and block_lines:
                blocks.append("\n".join(block_lines))
            block_lines = []
            in_block = not in_block
            continue

        if in_block:
            block_lines.append(line)

    return blocks


def parse_response(raw_text: str) -> Answer:
    answer = scan_markers(raw_text)
    if answer.commands:
        logger.debug("Found %d command(s) using markers", len(answer.commands))
        return answer

    answer.commands = extract_code_blocks(raw_text)
    if answer.commands:
        logger.debug("Found %d command(s) in code blocks", len(answer.commands))
        return answer

    if raw_text:
        logger.debug("No structure found in reply, using it verbatim")
        answer.commands = [raw_text]

    return answer
