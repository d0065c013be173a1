import pytest

from pwengine.errors import (
    EmptyAlphabetError,
    InvalidLengthError,
    PasswordEngineError,
    UnknownPresetError,
)


@pytest.mark.parametrize(
    "error", [EmptyAlphabetError, InvalidLengthError, UnknownPresetError]
)
def test_engine_errors_share_base_and_describe_themselves(error):
    assert issubclass(error, PasswordEngineError)
    assert error.__doc__
