"""
Configuration for the password engine: character classes, length bounds,
generation options and presets.
"""

from __future__ import annotations

from dataclasses import dataclass, replace as _replace

from .errors import UnknownPresetError


# Character classes, concatenated in CLASS_ORDER when building an alphabet.
UPPERCASE = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
LOWERCASE = "abcdefghijklmnopqrstuvwxyz"
NUMBERS = "0123456789"
SYMBOLS = "!@#$%^&*()_+-=[]{}|;:,.<>?"

CLASS_ORDER = ("uppercase", "lowercase", "numbers", "symbols")

CLASS_CHARS = {
    "uppercase": UPPERCASE,
    "lowercase": LOWERCASE,
    "numbers": NUMBERS,
    "symbols": SYMBOLS,
}

MIN_LENGTH = 4
MAX_LENGTH = 32
HISTORY_SIZE = 5


@dataclass(frozen=True)
class GenerationOptions:
    length: int = 12
    include_uppercase: bool = True
    include_lowercase: bool = True
    include_numbers: bool = True
    include_symbols: bool = True

    def class_flags(self) -> dict[str, bool]:
        """Enabled flag per class name, in CLASS_ORDER."""
        return {
            "uppercase": self.include_uppercase,
            "lowercase": self.include_lowercase,
            "numbers": self.include_numbers,
            "symbols": self.include_symbols,
        }

    def replace(self, **changes) -> "GenerationOptions":
        return _replace(self, **changes)


DEFAULT_OPTIONS = GenerationOptions()

PRESETS = {
    "weak": DEFAULT_OPTIONS.replace(length=8, include_symbols=False),
    "medium": DEFAULT_OPTIONS.replace(length=12),
    "strong": DEFAULT_OPTIONS.replace(length=16),
}


def preset_options(name: str) -> GenerationOptions:
    """
    Return the fixed option bundle for a preset name.

    Presets always start from DEFAULT_OPTIONS, so applying one discards
    whatever options were active before.
    """
    try:
        return PRESETS[name.strip().lower()]
    except (KeyError, AttributeError):
        raise UnknownPresetError(
            f"Unknown preset {name!r}; expected one of {', '.join(PRESETS)}."
        ) from None


@dataclass
class EngineConfig:
    # Bounds enforced on GenerationOptions.length.
    min_length: int = MIN_LENGTH
    max_length: int = MAX_LENGTH

    # How many previous passwords the session keeps.
    history_size: int = HISTORY_SIZE

    # "secrets", "pseudo" or "quantum" (see random_source.make_index_source).
    random_source: str = "secrets"

    # Quantum source only: qubits per shot, shots per circuit run, and
    # SHA-256 mixing rounds applied to each batch of measured bits.
    num_qubits: int = 16
    quantum_shots: int = 8
    entropy_rounds: int = 1


# Default configuration instance you can import elsewhere
DEFAULT_CONFIG = EngineConfig()
