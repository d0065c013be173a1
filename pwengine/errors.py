"""
Exceptions raised by the password engine.
"""


class PasswordEngineError(Exception):
    """Generic password engine error."""


class EmptyAlphabetError(PasswordEngineError):
    """Every character class is disabled, so there is nothing to sample."""


class InvalidLengthError(PasswordEngineError):
    """Requested password length is outside the supported range."""


class UnknownPresetError(PasswordEngineError):
    """Preset name is not one of the known presets."""
