"""
Phrase Input Sources
====================

Where the phrase to encode comes from. The CLI picks a source and hands
it to :meth:`CryptogramEngine.encode_from`; nothing downstream inspects
command-line arguments or standard input directly.

Two sources:
    - :class:`ArgumentSource` -- a phrase already supplied by the caller.
    - :class:`PromptSource` -- asks interactively. An empty answer or
      end-of-input yields the empty phrase; Ctrl-C still aborts.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol

import click

from shared.logger import ToolLogger

DEFAULT_PROMPT = "Enter a phrase to convert"


class InputSource(Protocol):
    """Yields one phrase."""

    def read(self) -> str: ...


class ArgumentSource:
    """A phrase passed in by the caller, e.g. a positional CLI argument."""

    def __init__(self, phrase: str) -> None:
        self._phrase = phrase

    def read(self) -> str:
        return self._phrase


class PromptSource:
    """Prompts for the phrase on standard input.

    Args:
        prompt: Prompt text.
        prompt_func: Callable with :func:`click.prompt`'s signature.
        logger: Logger for the end-of-input note.
    """

    def __init__(
        self,
        prompt: str = DEFAULT_PROMPT,
        prompt_func: Callable[..., str] = click.prompt,
        logger: Optional[ToolLogger] = None,
    ) -> None:
        self._prompt = prompt
        self._prompt_func = prompt_func
        self._logger = logger or ToolLogger("cryptogram.collectors")

    def read(self) -> str:
        try:
            return self._prompt_func(self._prompt, default="", show_default=False)
        except click.Abort as exc:
            # click.prompt raises Abort for both EOF and Ctrl-C; only EOF means "no phrase"
            if not isinstance(exc.__context__, EOFError):
                raise
            click.echo()
            self._logger.debug("No input at prompt, using the empty phrase")
            return ""
