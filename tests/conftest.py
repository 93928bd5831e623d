"""Shared fixtures for the cryptogram test suite."""

from __future__ import annotations

import random

import pytest

from cryptogram.core.models import Derangement
from cryptogram.generators.derangement import DerangementGenerator
from shared.config import ToolConfig

# h->B e->X l->Q o->N w->F r->G d->S, remaining letters filled without fixed points
HELLO_WORLD_KEY = "CDESXHIBJKLQOPNRTGUVWYFZAM"


class NoOpShuffler:
    """Random source whose shuffle leaves the list untouched."""

    def __init__(self) -> None:
        self.calls = 0

    def shuffle(self, x) -> None:
        self.calls += 1


class ScriptedShuffler:
    """Leaves the list alone for ``misses`` calls, then rotates it by one."""

    def __init__(self, misses: int) -> None:
        self.misses = misses
        self.calls = 0

    def shuffle(self, x) -> None:
        self.calls += 1
        if self.calls > self.misses:
            x[:] = sorted(x)[1:] + sorted(x)[:1]


@pytest.fixture
def hello_key() -> Derangement:
    return Derangement(replacements=HELLO_WORLD_KEY)


@pytest.fixture
def rng() -> random.Random:
    return random.Random(20240601)


@pytest.fixture
def generator(rng: random.Random) -> DerangementGenerator:
    return DerangementGenerator(rng)


@pytest.fixture
def config() -> ToolConfig:
    cfg = ToolConfig()
    cfg.cryptogram.seed = 1234
    return cfg
