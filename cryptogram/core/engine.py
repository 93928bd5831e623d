"""
Cryptogram Engine
=================

Central orchestrator for the cryptogram generator. The
:class:`CryptogramEngine` wires the derangement generator, the builder
and the round statistics together behind one interface and applies
configuration and logging.

Architecture follows the Facade pattern (Gamma et al., 1994).

References:
    - Gamma, E., Helm, R., Johnson, R., & Vlissides, J. (1994).
      Design Patterns: Elements of Reusable Object-Oriented Software.
      Addison-Wesley.
"""

from __future__ import annotations

from typing import Optional

from shared.config import ToolConfig
from shared.logger import ToolLogger, get_logger

from cryptogram.analyzers.rounds import RoundStatistics
from cryptogram.collectors.phrase import InputSource
from cryptogram.core.models import Cryptogram, Derangement, RoundStatisticsResult
from cryptogram.generators.derangement import DerangementGenerator, RandomSource
from cryptogram.generators.substitution import CryptogramBuilder


class CryptogramEngine:
    """Generates cryptograms and attempt-count statistics.

    Usage::

        engine = CryptogramEngine()
        puzzle = engine.encode("Attack at dawn")
        puzzle = engine.encode_from(PromptSource())
        mean = engine.average_attempts(10_000)

    Args:
        config: Toolkit configuration; defaults when omitted.
        rng: Random source override. When omitted the generator is seeded
            from ``config.cryptogram.seed`` (unseeded if that is unset).
        logger: Logger override.
    """

    def __init__(
        self,
        config: Optional[ToolConfig] = None,
        *,
        rng: Optional[RandomSource] = None,
        logger: Optional[ToolLogger] = None,
    ) -> None:
        self.config = config or ToolConfig()
        self.logger = logger or get_logger("cryptogram.engine", self.config)

        settings = self.config.cryptogram
        if rng is not None:
            self.generator = DerangementGenerator(
                rng, max_attempts=settings.max_attempts
            )
        else:
            self.generator = DerangementGenerator.seeded(
                settings.seed, max_attempts=settings.max_attempts
            )
        self.builder = CryptogramBuilder()
        self.statistics = RoundStatistics(self.generator)

    # ------------------------------------------------------------------ #
    #  Puzzle generation
    # ------------------------------------------------------------------ #

    def generate_key(self) -> Derangement:
        """Return a fresh derangement."""
        key = self.generator.generate()
        self.logger.debug("Derangement found after %d shuffle(s)", key.attempts)
        return key

    def encode(self, phrase: str) -> Cryptogram:
        """Encode *phrase* under a fresh derangement."""
        with self.logger.operation("encode"):
            key = self.generate_key()
            puzzle = self.builder.build(phrase, key)
            self.logger.info(
                "Encoded %d character(s) in %d shuffle(s)",
                len(phrase),
                key.attempts,
            )
            return puzzle

    def encode_from(self, source: InputSource) -> Cryptogram:
        """Read a phrase from *source* and encode it."""
        phrase = source.read()
        if not phrase:
            self.logger.debug("Empty phrase, producing an empty cryptogram")
        return self.encode(phrase)

    # ------------------------------------------------------------------ #
    #  Diagnostics
    # ------------------------------------------------------------------ #

    def average_attempts(self, trials: int) -> float:
        """Mean shuffles per derangement over *trials* generations."""
        return self.statistics.average(trials)

    def round_statistics(self, trials: Optional[int] = None) -> RoundStatisticsResult:
        """Summarise attempt counts; *trials* defaults to the configured count."""
        count = trials if trials is not None else self.config.cryptogram.stats_trials
        with self.logger.operation("round_statistics"), self.logger.timed(
            f"{count} derangement trials"
        ):
            result = self.statistics.summarize(count)
        self.logger.info(
            "Mean attempts %.4f over %d trials (expected %.4f)",
            result.mean,
            result.trials,
            result.expected,
        )
        return result
