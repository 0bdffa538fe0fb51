"""Interactive prompts — region selection and API key entry.

Each prompt loop opens its own :class:`PromptSession`, re-asks until the
answer is valid, and releases the session once, on acceptance.
"""

from __future__ import annotations

import getpass
import sys
from collections.abc import Callable
from typing import TextIO

from ccr_config.generator import Region
from ccr_config.messages import MessageSet

REGION_CHOICES: dict[str, Region] = {
    "1": Region.CN,
    "2": Region.INTL,
}


class PromptAborted(Exception):
    """The input channel closed before a valid answer was given."""


# ---------------------------------------------------------------------------
# Line-based session
# ---------------------------------------------------------------------------


class PromptSession:
    """One line-based interactive session over a pair of text streams.

    Defaults to the process's stdin/stdout.  Closing the session releases
    it; the underlying streams are left open.
    """

    def __init__(self, stdin: TextIO | None = None, stdout: TextIO | None = None) -> None:
        self._in = stdin if stdin is not None else sys.stdin
        self._out = stdout if stdout is not None else sys.stdout
        self.closed = False

    def say(self, text: str) -> None:
        """Write one status line."""
        self._out.write(text + "\n")
        self._out.flush()

    def ask(self, cue: str, *, secret: bool = False) -> str:
        """Show *cue* and read one line (without its newline)."""
        if self.closed:
            raise PromptAborted("prompt session already closed")

        if secret and self._in is sys.stdin and self._in.isatty():
            try:
                return getpass.getpass(cue, stream=self._out)
            except EOFError as e:
                raise PromptAborted("input closed") from e

        self._out.write(cue)
        self._out.flush()
        try:
            line = self._in.readline()
        except ValueError as e:  # I/O on a closed stream
            raise PromptAborted("input closed") from e
        if not line:
            raise PromptAborted("input closed")
        return line.rstrip("\r\n")

    def close(self) -> None:
        self.closed = True

    def __enter__(self) -> PromptSession:
        return self

    def __exit__(self, *exc: object) -> None:
        self.close()


SessionFactory = Callable[[], PromptSession]


# ---------------------------------------------------------------------------
# Prompt loops
# ---------------------------------------------------------------------------


def prompt_region(messages: MessageSet, session_factory: SessionFactory = PromptSession) -> Region:
    """Ask for the service region until the answer is ``1`` or ``2``."""
    with session_factory() as session:
        while True:
            session.say(messages.region_prompt)
            session.say(messages.region_option_cn)
            session.say(messages.region_option_intl)
            choice = session.ask(messages.region_input).strip()
            region = REGION_CHOICES.get(choice)
            if region is not None:
                return region
            session.say(messages.invalid_region)


def prompt_api_key(messages: MessageSet, session_factory: SessionFactory = PromptSession) -> str:
    """Ask for the API key until a non-blank value is entered; returns it trimmed."""
    with session_factory() as session:
        while True:
            key = session.ask(messages.api_key_prompt, secret=True).strip()
            if key:
                session.say(messages.api_key_set)
                return key
            session.say(messages.invalid_api_key)
