"""Tests for environment overrides."""

import pytest

from qubic import config
from qubic.config import env_int
from qubic.errors import ConfigurationError, ValidationError


class TestEnvInt:
    def test_default_when_unset(self, monkeypatch) -> None:
        monkeypatch.delenv("QUBIC_TEST_KNOB", raising=False)
        assert env_int("QUBIC_TEST_KNOB", 4) == 4

    def test_blank_uses_default(self, monkeypatch) -> None:
        monkeypatch.setenv("QUBIC_TEST_KNOB", "  ")
        assert env_int("QUBIC_TEST_KNOB", 4) == 4

    def test_override(self, monkeypatch) -> None:
        monkeypatch.setenv("QUBIC_TEST_KNOB", "6")
        assert env_int("QUBIC_TEST_KNOB", 4) == 6

    def test_not_an_integer(self, monkeypatch) -> None:
        monkeypatch.setenv("QUBIC_TEST_KNOB", "deep")
        with pytest.raises(ConfigurationError) as exc_info:
            env_int("QUBIC_TEST_KNOB", 4)
        assert exc_info.value.context == {"key": "QUBIC_TEST_KNOB", "value": "deep"}

    def test_below_minimum(self, monkeypatch) -> None:
        monkeypatch.setenv("QUBIC_TEST_KNOB", "0")
        with pytest.raises(ValidationError):
            env_int("QUBIC_TEST_KNOB", 4)

    def test_custom_minimum(self, monkeypatch) -> None:
        monkeypatch.setenv("QUBIC_TEST_KNOB", "0")
        assert env_int("QUBIC_TEST_KNOB", 4, minimum=0) == 0


def test_profile_depths_fit_under_ceiling() -> None:
    assert 1 <= config.MEDIUM_DEPTH <= config.MAX_SEARCH_DEPTH
    assert 1 <= config.HARD_DEPTH <= config.MAX_SEARCH_DEPTH
