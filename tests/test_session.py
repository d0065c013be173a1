import pytest

from pwengine.config import DEFAULT_OPTIONS, EngineConfig, GenerationOptions
from pwengine.errors import EmptyAlphabetError, InvalidLengthError, UnknownPresetError
from pwengine.session import (
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
from pwengine.strength import StrengthLabel

NO_CLASSES = GenerationOptions(
    include_uppercase=False,
    include_lowercase=False,
    include_numbers=False,
    include_symbols=False,
)


def test_generate_with_meta(seeded_source):
    outcome = generate_password_with_meta(DEFAULT_OPTIONS, seeded_source)
    assert isinstance(outcome, Generated)
    assert outcome.ok
    assert len(outcome.password) == 12
    assert outcome.alphabet_size == 88
    assert outcome.entropy_bits > 77
    assert outcome.strength.value > 0


def test_empty_alphabet_is_a_failure_not_a_password():
    outcome = generate_password_with_meta(NO_CLASSES)
    assert isinstance(outcome, GenerationFailed)
    assert not outcome.ok
    assert outcome.reason is FailureReason.EMPTY_ALPHABET


def test_invalid_length_is_a_failure():
    outcome = generate_password_with_meta(DEFAULT_OPTIONS.replace(length=64))
    assert isinstance(outcome, GenerationFailed)
    assert outcome.reason is FailureReason.INVALID_LENGTH


def test_generate_password_raises_on_failure():
    with pytest.raises(EmptyAlphabetError):
        generate_password(NO_CLASSES)
    with pytest.raises(InvalidLengthError):
        generate_password(DEFAULT_OPTIONS.replace(length=2))


def test_generate_password_default():
    assert len(generate_password()) == DEFAULT_OPTIONS.length


def test_new_session_is_empty():
    state = new_session()
    assert state == SessionState()
    assert state.password is None
    assert state.history == ()


def test_regenerate_records_history(seeded_source):
    state = new_session()
    state, outcome = regenerate(state, seeded_source)
    assert state.password == outcome.password
    assert state.strength == outcome.strength
    assert state.history == (outcome.password,)


def test_history_after_six_generations(seeded_source):
    state = new_session()
    generated = []
    for _ in range(6):
        state, outcome = regenerate(state, seeded_source)
        generated.append(outcome.password)
    assert state.history == tuple(reversed(generated[1:]))
    assert state.password == generated[-1]


def test_history_size_from_config(seeded_source):
    config = EngineConfig(history_size=2)
    state = new_session()
    for _ in range(4):
        state, _outcome = regenerate(state, seeded_source, config)
    assert len(state.history) == 2


def test_failure_clears_password_and_keeps_history(seeded_source):
    state, _ = regenerate(new_session(), seeded_source)
    history = state.history

    state, outcome = update_options(state, NO_CLASSES, seeded_source)
    assert isinstance(outcome, GenerationFailed)
    assert state.password is None
    assert state.strength is None
    assert state.history == history
    assert state.options == NO_CLASSES


def test_update_options_regenerates(seeded_source):
    state, _ = regenerate(new_session(), seeded_source)
    options = DEFAULT_OPTIONS.replace(length=20, include_symbols=False)
    state, outcome = update_options(state, options, seeded_source)
    assert len(state.password) == 20
    assert state.password.isalnum()
    assert len(state.history) == 2


def test_apply_preset_overwrites_options(seeded_source):
    state = new_session(NO_CLASSES.replace(length=30))
    state, outcome = apply_preset(state, "weak", seeded_source)
    assert state.options == GenerationOptions(
        length=8,
        include_uppercase=True,
        include_lowercase=True,
        include_numbers=True,
        include_symbols=False,
    )
    assert isinstance(outcome, Generated)
    assert len(outcome.password) == 8


def test_apply_strong_preset_scores(fixed_source):
    # Alphabet index 0 is "A", 26 is "a", 52 is "0", 62 is "!".
    source = fixed_source([0, 26, 52, 62])
    state, outcome = apply_preset(new_session(), "strong", source)
    assert outcome.password == "Aa0!" * 4
    assert outcome.strength.value == 100
    assert outcome.strength.label is StrengthLabel.STRONG


def test_apply_unknown_preset():
    state = new_session()
    with pytest.raises(UnknownPresetError):
        apply_preset(state, "extreme")


def test_states_are_not_mutated(seeded_source):
    before = new_session()
    after, _ = regenerate(before, seeded_source)
    assert before.password is None
    assert before.history == ()
    assert after is not before
