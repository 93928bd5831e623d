"""Tests for the engine facade."""

from __future__ import annotations

import pytest

from cryptogram.analyzers.rounds import InvalidArgument
from cryptogram.collectors.phrase import ArgumentSource, PromptSource
from cryptogram.core.engine import CryptogramEngine
from cryptogram.generators.derangement import DerangementError
from shared.config import ToolConfig
from tests.conftest import NoOpShuffler, ScriptedShuffler


class TestEncode:

    def test_encode_builds_cryptogram(self, config: ToolConfig) -> None:
        puzzle = CryptogramEngine(config).encode("Hello, World!")
        assert puzzle.decoded == "hello, world!"
        assert puzzle.decode() == "hello, world!"
        assert puzzle.encoded[5:7] == ", "
        assert puzzle.encoded.endswith("!")
        assert puzzle.encoded.isupper()

    def test_configured_seed_is_reproducible(self, config: ToolConfig) -> None:
        first = CryptogramEngine(config).encode("same phrase")
        second = CryptogramEngine(config).encode("same phrase")
        assert first.encoded == second.encoded
        assert first.derangement == second.derangement

    def test_injected_rng(self) -> None:
        engine = CryptogramEngine(rng=ScriptedShuffler(misses=1))
        puzzle = engine.encode("abc xyz")
        assert puzzle.encoded == "BCD YZA"
        assert puzzle.attempts == 2

    def test_encode_from_argument(self, config: ToolConfig) -> None:
        puzzle = CryptogramEngine(config).encode_from(ArgumentSource("Zebra"))
        assert puzzle.phrase == "Zebra"

    def test_encode_from_empty_prompt(self, config: ToolConfig) -> None:
        source = PromptSource(prompt_func=lambda text, **kw: "")
        puzzle = CryptogramEngine(config).encode_from(source)
        assert puzzle.encoded == ""
        assert len(puzzle.derangement.replacements) == 26

    def test_letterless_phrase_still_gets_a_key(self, config: ToolConfig) -> None:
        puzzle = CryptogramEngine(config).encode("2 + 2 = 4")
        assert puzzle.encoded == "2 + 2 = 4"
        assert puzzle.attempts >= 1

    def test_configured_cap(self) -> None:
        cfg = ToolConfig()
        cfg.cryptogram.max_attempts = 7
        engine = CryptogramEngine(cfg, rng=NoOpShuffler())
        with pytest.raises(DerangementError):
            engine.encode("anything")


class TestStatistics:

    def test_average_attempts(self, config: ToolConfig) -> None:
        assert 2.3 <= CryptogramEngine(config).average_attempts(5_000) <= 3.1

    def test_round_statistics_default_trials(self) -> None:
        cfg = ToolConfig()
        cfg.cryptogram.stats_trials = 300
        cfg.cryptogram.seed = 8
        assert CryptogramEngine(cfg).round_statistics().trials == 300

    def test_round_statistics_explicit_trials(self, config: ToolConfig) -> None:
        assert CryptogramEngine(config).round_statistics(40).trials == 40

    def test_round_statistics_rejects_zero(self, config: ToolConfig) -> None:
        with pytest.raises(InvalidArgument):
            CryptogramEngine(config).round_statistics(0)
