"""Tests for configuration and initialization."""

from __future__ import annotations

import logging

import pytest

from result_extensions import ExtensionsConfig, get_codec, get_config, init


class TestExtensionsConfig:
    """Tests for the ExtensionsConfig dataclass."""

    def test_default_values(self) -> None:
        config = ExtensionsConfig()
        assert config.log_level is None
        assert config.json_output is True
        assert config.json_strict is True
        assert config.json_order is None

    def test_config_is_frozen(self) -> None:
        config = ExtensionsConfig()
        with pytest.raises(AttributeError):
            config.json_strict = False  # type: ignore[misc]


class TestInit:
    """Tests for init()."""

    def test_explicit_values(self) -> None:
        config = init(json_strict=False, json_order='deterministic')
        assert config.json_strict is False
        assert config.json_order == 'deterministic'
        assert get_config() is config

    def test_invalid_order_raises(self) -> None:
        with pytest.raises(ValueError, match='json_order'):
            init(json_order='random')  # type: ignore[arg-type]

    def test_init_rebuilds_codec(self) -> None:
        before = get_codec()
        init(json_order='sorted')
        after = get_codec()
        assert after is not before
        assert after.order == 'sorted'

    def test_log_level_configures_logging(self) -> None:
        root_level = logging.getLogger().level
        init(log_level='WARNING')
        assert logging.getLogger('result_extensions').level == logging.WARNING
        assert logging.getLogger().level == root_level

    def test_explicit_args_beat_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('RESULT_EXTENSIONS_JSON_STRICT', 'false')
        monkeypatch.setenv('RESULT_EXTENSIONS_JSON_ORDER', 'deterministic')
        config = init(json_strict=True, json_order='sorted')
        assert config.json_strict is True
        assert config.json_order == 'sorted'


class TestEnvironment:
    """Tests for environment-based resolution."""

    def test_defaults_without_environment(self) -> None:
        assert get_config() == ExtensionsConfig()

    def test_get_config_is_stable(self) -> None:
        assert get_config() is get_config()

    @pytest.mark.parametrize(('raw', 'expected'), [('0', False), ('false', False), ('NO', False), ('1', True), ('yes', True)])
    def test_strict_from_environment(self, monkeypatch: pytest.MonkeyPatch, raw: str, expected: bool) -> None:
        monkeypatch.setenv('RESULT_EXTENSIONS_JSON_STRICT', raw)
        assert get_config().json_strict is expected

    def test_unknown_strict_value_warns(self, monkeypatch: pytest.MonkeyPatch, caplog: pytest.LogCaptureFixture) -> None:
        monkeypatch.setenv('RESULT_EXTENSIONS_JSON_STRICT', 'maybe')
        with caplog.at_level(logging.WARNING):
            assert get_config().json_strict is True
        assert 'RESULT_EXTENSIONS_JSON_STRICT' in caplog.text

    def test_order_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('RESULT_EXTENSIONS_JSON_ORDER', 'Sorted')
        assert get_config().json_order == 'sorted'

    def test_unknown_order_ignored(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('RESULT_EXTENSIONS_JSON_ORDER', 'shuffled')
        assert get_config().json_order is None

    def test_log_level_from_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('RESULT_EXTENSIONS_LOG_LEVEL', 'DEBUG')
        assert get_config().log_level == 'DEBUG'

    def test_shared_codec_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('RESULT_EXTENSIONS_JSON_STRICT', '0')
        assert get_codec().strict is False
