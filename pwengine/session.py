"""
High-level generation pipeline and per-session state.

A session is an immutable SessionState value. Every operation takes the
current state and returns a new one together with a GenerationOutcome, so
the caller owns all state and nothing is kept at module level.
"""

from __future__ import annotations

import enum
import logging
from dataclasses import dataclass, field, replace
from typing import Union

from .charset import build_alphabet
from .config import (
    DEFAULT_CONFIG,
    DEFAULT_OPTIONS,
    EngineConfig,
    GenerationOptions,
    preset_options,
)
from .entropy import estimate_entropy_bits
from .errors import EmptyAlphabetError, InvalidLengthError
from .history import record
from .random_source import IndexSource
from .sampler import sample
from .strength import StrengthScore, score

logger = logging.getLogger(__name__)


class FailureReason(str, enum.Enum):
    EMPTY_ALPHABET = "empty_alphabet"
    INVALID_LENGTH = "invalid_length"


@dataclass(frozen=True)
class Generated:
    """
    A successfully generated password with its metadata.
    """
    password: str
    strength: StrengthScore
    # Theoretical entropy: length * log2(alphabet_size).
    entropy_bits: float
    alphabet_size: int

    ok = True


@dataclass(frozen=True)
class GenerationFailed:
    """
    No password was generated. `message` is for display only and is never
    a password.
    """
    reason: FailureReason
    message: str

    ok = False


GenerationOutcome = Union[Generated, GenerationFailed]


@dataclass(frozen=True)
class SessionState:
    options: GenerationOptions = DEFAULT_OPTIONS
    # None until a generation succeeds, and again after one fails.
    password: str | None = None
    strength: StrengthScore | None = None
    history: tuple[str, ...] = field(default_factory=tuple)


def generate_password_with_meta(
    options: GenerationOptions | None = None,
    source: IndexSource | None = None,
    config: EngineConfig | None = None,
) -> GenerationOutcome:
    """
    Build the alphabet, sample a password and score it.

    Engine errors are returned as GenerationFailed instead of raised.
    """
    opts = options or DEFAULT_OPTIONS
    alphabet = build_alphabet(opts)

    try:
        password = sample(alphabet, opts.length, source=source, config=config)
    except EmptyAlphabetError as exc:
        logger.info("Generation refused: no character class enabled")
        return GenerationFailed(FailureReason.EMPTY_ALPHABET, str(exc))
    except InvalidLengthError as exc:
        logger.info("Generation refused: %s", exc)
        return GenerationFailed(FailureReason.INVALID_LENGTH, str(exc))

    logger.debug(
        "Generated password of length %d from %d-character alphabet",
        len(password),
        len(alphabet),
    )
    return Generated(
        password=password,
        strength=score(password),
        entropy_bits=estimate_entropy_bits(len(alphabet), len(password)),
        alphabet_size=len(alphabet),
    )


def generate_password(
    options: GenerationOptions | None = None,
    source: IndexSource | None = None,
    config: EngineConfig | None = None,
) -> str:
    """
    Convenience wrapper returning only the password.

    Raises EmptyAlphabetError or InvalidLengthError when nothing can be
    generated.
    """
    outcome = generate_password_with_meta(options, source, config)
    if isinstance(outcome, Generated):
        return outcome.password
    if outcome.reason is FailureReason.EMPTY_ALPHABET:
        raise EmptyAlphabetError(outcome.message)
    raise InvalidLengthError(outcome.message)


def new_session(options: GenerationOptions | None = None) -> SessionState:
    return SessionState(options=options or DEFAULT_OPTIONS)


def regenerate(
    state: SessionState,
    source: IndexSource | None = None,
    config: EngineConfig | None = None,
) -> tuple[SessionState, GenerationOutcome]:
    """
    Generate a new password from the session's current options.

    On success the password and strength are replaced and the password is
    recorded in history. On failure the current password and strength are
    cleared and history is left alone.
    """
    cfg = config or DEFAULT_CONFIG
    outcome = generate_password_with_meta(state.options, source, cfg)

    if isinstance(outcome, Generated):
        new_state = replace(
            state,
            password=outcome.password,
            strength=outcome.strength,
            history=record(state.history, outcome.password, cfg.history_size),
        )
    else:
        new_state = replace(state, password=None, strength=None)

    return new_state, outcome


def update_options(
    state: SessionState,
    options: GenerationOptions,
    source: IndexSource | None = None,
    config: EngineConfig | None = None,
) -> tuple[SessionState, GenerationOutcome]:
    """Switch to `options` and regenerate, as any option change does."""
    return regenerate(replace(state, options=options), source, config)


def apply_preset(
    state: SessionState,
    name: str,
    source: IndexSource | None = None,
    config: EngineConfig | None = None,
) -> tuple[SessionState, GenerationOutcome]:
    # Raises UnknownPresetError before touching the state.
    options = preset_options(name)
    return update_options(state, options, source, config)
