import pytest

from pwengine.config import (
    DEFAULT_OPTIONS,
    LOWERCASE,
    NUMBERS,
    PRESETS,
    SYMBOLS,
    UPPERCASE,
    GenerationOptions,
    preset_options,
)
from pwengine.errors import UnknownPresetError


def test_class_strings():
    assert UPPERCASE == "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
    assert LOWERCASE == UPPERCASE.lower()
    assert NUMBERS == "0123456789"
    assert SYMBOLS == "!@#$%^&*()_+-=[]{}|;:,.<>?"
    assert len(set(SYMBOLS)) == len(SYMBOLS)


def test_default_options_enable_everything():
    assert DEFAULT_OPTIONS.length == 12
    assert all(DEFAULT_OPTIONS.class_flags().values())


def test_weak_preset():
    assert preset_options("weak") == GenerationOptions(
        length=8,
        include_uppercase=True,
        include_lowercase=True,
        include_numbers=True,
        include_symbols=False,
    )


@pytest.mark.parametrize("name,length", [("medium", 12), ("strong", 16)])
def test_medium_and_strong_presets(name, length):
    options = preset_options(name)
    assert options.length == length
    assert all(options.class_flags().values())


def test_preset_name_is_case_insensitive():
    assert preset_options(" Strong ") == PRESETS["strong"]


def test_unknown_preset():
    with pytest.raises(UnknownPresetError):
        preset_options("ultra")


def test_options_are_immutable():
    with pytest.raises(AttributeError):
        DEFAULT_OPTIONS.length = 20
