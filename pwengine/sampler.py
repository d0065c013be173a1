"""
Sampler: draw a fixed-length password from an alphabet.
"""

from __future__ import annotations

from .charset import is_empty_alphabet
from .config import EngineConfig, DEFAULT_CONFIG
from .errors import EmptyAlphabetError, InvalidLengthError
from .random_source import IndexSource, SecretsIndexSource


def validate_length(length: int, config: EngineConfig | None = None) -> int:
    cfg = config or DEFAULT_CONFIG
    if isinstance(length, bool) or not isinstance(length, int):
        raise InvalidLengthError(
            f"Password length must be an integer, got {type(length).__name__}."
        )
    if not cfg.min_length <= length <= cfg.max_length:
        raise InvalidLengthError(
            f"Password length {length} is outside "
            f"[{cfg.min_length}, {cfg.max_length}]."
        )
    return length


def sample(
    alphabet: str,
    length: int,
    source: IndexSource | None = None,
    config: EngineConfig | None = None,
) -> str:
    """
    Draw `length` characters from `alphabet`, each chosen independently and
    uniformly by index (with replacement).

    Raises EmptyAlphabetError for an empty alphabet and InvalidLengthError
    for an unsupported length.
    """
    if is_empty_alphabet(alphabet):
        raise EmptyAlphabetError("Select at least one character type.")
    validate_length(length, config)

    source = source or SecretsIndexSource()
    size = len(alphabet)
    return "".join(alphabet[source.randbelow(size)] for _ in range(length))
