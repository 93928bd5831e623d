"""Tests for the phrase input sources."""

from __future__ import annotations

import click
import pytest

from cryptogram.collectors.phrase import DEFAULT_PROMPT, ArgumentSource, PromptSource


def test_argument_source_returns_phrase() -> None:
    assert ArgumentSource("Attack at dawn").read() == "Attack at dawn"


def test_argument_source_allows_empty() -> None:
    assert ArgumentSource("").read() == ""


def test_prompt_source_uses_prompt_func() -> None:
    seen = {}

    def fake_prompt(text, **kwargs):
        seen["text"] = text
        seen.update(kwargs)
        return "typed phrase"

    assert PromptSource(prompt_func=fake_prompt).read() == "typed phrase"
    assert seen["text"] == DEFAULT_PROMPT
    assert seen["default"] == ""


def _raise_from(original: BaseException):
    """Prompt function that fails the way click.prompt does: Abort chained to *original*."""

    def prompt(text, **kwargs):
        try:
            raise original
        except (EOFError, KeyboardInterrupt):
            raise click.Abort() from None

    return prompt


def test_prompt_source_end_of_input_is_empty_phrase(capsys) -> None:
    assert PromptSource(prompt_func=_raise_from(EOFError())).read() == ""
    # the prompt line is terminated so later output starts on its own line
    assert capsys.readouterr().out == "\n"


def test_prompt_source_ctrl_c_aborts() -> None:
    with pytest.raises(click.Abort):
        PromptSource(prompt_func=_raise_from(KeyboardInterrupt())).read()


def test_prompt_source_bare_abort_propagates() -> None:
    def aborting_prompt(text, **kwargs):
        raise click.Abort()

    with pytest.raises(click.Abort):
        PromptSource(prompt_func=aborting_prompt).read()


def test_click_prompt_ctrl_c_aborts(monkeypatch) -> None:
    def interrupted(prompt):
        raise KeyboardInterrupt

    monkeypatch.setattr(click.termui, "visible_prompt_func", interrupted)
    with pytest.raises(click.Abort):
        PromptSource().read()


def test_click_prompt_end_of_input(monkeypatch) -> None:
    def closed(prompt):
        raise EOFError

    monkeypatch.setattr(click.termui, "visible_prompt_func", closed)
    assert PromptSource().read() == ""


def test_prompt_source_custom_prompt() -> None:
    source = PromptSource(prompt="Phrase?", prompt_func=lambda text, **kw: text)
    assert source.read() == "Phrase?"
