import logging

import pytest

from pwengine.random_source import (
    PseudoIndexSource,
    SecretsIndexSource,
    make_index_source,
)


@pytest.mark.parametrize("source", [SecretsIndexSource(), PseudoIndexSource(seed=7)])
def test_range(source):
    values = {source.randbelow(10) for _ in range(500)}
    assert values <= set(range(10))
    assert len(values) > 1


@pytest.mark.parametrize("source", [SecretsIndexSource(), PseudoIndexSource(seed=7)])
def test_rejects_non_positive_bound(source):
    with pytest.raises(ValueError):
        source.randbelow(0)


def test_pseudo_is_reproducible():
    a = PseudoIndexSource(seed=42)
    b = PseudoIndexSource(seed=42)
    assert [a.randbelow(88) for _ in range(20)] == [b.randbelow(88) for _ in range(20)]


def test_pseudo_warns(caplog):
    with caplog.at_level(logging.WARNING, logger="pwengine.random_source"):
        PseudoIndexSource()
    assert "non-cryptographic" in caplog.text


def test_make_index_source():
    assert isinstance(make_index_source("secrets"), SecretsIndexSource)
    assert isinstance(make_index_source("pseudo", seed=1), PseudoIndexSource)
    assert isinstance(make_index_source(), SecretsIndexSource)


def test_make_index_source_unknown():
    with pytest.raises(ValueError):
        make_index_source("dice")
