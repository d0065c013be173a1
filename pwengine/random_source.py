"""
Uniform index providers used by the sampler.

Any object with a `randbelow(n)` method returning an int in [0, n) can be
plugged into `sampler.sample`.
"""

from __future__ import annotations

import logging
import random
import secrets
from typing import Protocol

from .config import EngineConfig, DEFAULT_CONFIG

logger = logging.getLogger(__name__)


class IndexSource(Protocol):
    def randbelow(self, n: int) -> int:
        ...


def _check_upper_bound(n: int) -> None:
    if n <= 0:
        raise ValueError(f"Upper bound must be positive, got {n}.")


class SecretsIndexSource:
    """Cryptographically secure indices from the OS generator."""

    def randbelow(self, n: int) -> int:
        _check_upper_bound(n)
        return secrets.randbelow(n)


class PseudoIndexSource:
    """
    Mersenne Twister indices. Reproducible with a seed, which makes it handy
    for tests and demos, but it must not be used for real secrets.
    """

    def __init__(self, seed: int | None = None) -> None:
        self._rng = random.Random(seed)
        logger.warning(
            "Using non-cryptographic random source; "
            "generated passwords are predictable."
        )

    def randbelow(self, n: int) -> int:
        _check_upper_bound(n)
        return self._rng.randrange(n)


SOURCE_NAMES = ("secrets", "pseudo", "quantum")


def make_index_source(
    name: str | None = None,
    config: EngineConfig | None = None,
    seed: int | None = None,
) -> IndexSource:
    """Build the index source called `name` (defaults to config.random_source)."""
    cfg = config or DEFAULT_CONFIG
    name = name or cfg.random_source

    if name == "secrets":
        return SecretsIndexSource()
    if name == "pseudo":
        return PseudoIndexSource(seed)
    if name == "quantum":
        # qiskit is slow to import; only pay for it when asked.
        from .quantum_engine import QuantumIndexSource

        return QuantumIndexSource(cfg)

    raise ValueError(
        f"Unknown random source {name!r}; expected one of {', '.join(SOURCE_NAMES)}."
    )
