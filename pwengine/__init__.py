"""
Password Engine package: random passwords from selectable character
classes, with a strength score and a short rolling history.
"""

from .config import (
    DEFAULT_CONFIG,
    DEFAULT_OPTIONS,
    EngineConfig,
    GenerationOptions,
    preset_options,
)
from .charset import build_alphabet
from .errors import (
    EmptyAlphabetError,
    InvalidLengthError,
    PasswordEngineError,
    UnknownPresetError,
)
from .history import record
from .random_source import PseudoIndexSource, SecretsIndexSource, make_index_source
from .sampler import sample
from .session import (
    FailureReason,
    Generated,
    GenerationFailed,
    SessionState,
    apply_preset,
    generate_password,
    generate_password_with_meta,
    new_session,
    regenerate,
    update_options,
)
from .strength import StrengthLabel, StrengthScore, score

__all__ = [
    "DEFAULT_CONFIG",
    "DEFAULT_OPTIONS",
    "EngineConfig",
    "GenerationOptions",
    "preset_options",
    "build_alphabet",
    "EmptyAlphabetError",
    "InvalidLengthError",
    "PasswordEngineError",
    "UnknownPresetError",
    "record",
    "PseudoIndexSource",
    "SecretsIndexSource",
    "make_index_source",
    "sample",
    "FailureReason",
    "Generated",
    "GenerationFailed",
    "SessionState",
    "apply_preset",
    "generate_password",
    "generate_password_with_meta",
    "new_session",
    "regenerate",
    "update_options",
    "StrengthLabel",
    "StrengthScore",
    "score",
]
