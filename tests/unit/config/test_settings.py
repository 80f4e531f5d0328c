"""Unit tests for config settings & validation."""

import dataclasses
import sys
from dataclasses import dataclass, field
from typing import ClassVar
from unittest.mock import MagicMock, patch

import pytest

from mp_mailer.config.settings import (
    DotenvSettingsLoader,
    EnvSettingsLoader,
    Settings,
)
from mp_mailer.config.validation import (
    ConfigError,
    InvalidSettingValueError,
    MissingRequiredSettingError,
)


# ---------------------------------------------------------------------------
# Concrete settings class used across tests
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class RelaySettings(Settings):
    _prefix: ClassVar[str] = "RELAY"

    host: str = "localhost"
    port: int = 2525
    debug: bool = False
    allowed_senders: list[str] = field(default_factory=list)

    def _validate(self) -> None:
        if self.port < 1:
            raise InvalidSettingValueError("port", self.port, "must be positive")


@dataclass(frozen=True)
class StrictSettings(Settings):
    _prefix: ClassVar[str] = "STRICT"

    required_field: str


# ---------------------------------------------------------------------------
# EnvSettingsLoader
# ---------------------------------------------------------------------------


class TestEnvSettingsLoader:
    def test_loads_string(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("RELAY_HOST", "example.com")
        assert EnvSettingsLoader().load(RelaySettings).host == "example.com"

    def test_loads_int(self) -> None:
        settings = EnvSettingsLoader({"RELAY_PORT": "9000"}).load(RelaySettings)
        assert settings.port == 9000

    @pytest.mark.parametrize("truthy", ["true", "True", "1", "yes", "on"])
    def test_loads_bool_true(self, truthy: str) -> None:
        assert EnvSettingsLoader({"RELAY_DEBUG": truthy}).load(RelaySettings).debug is True

    @pytest.mark.parametrize("falsy", ["false", "False", "0", "no", "off"])
    def test_loads_bool_false(self, falsy: str) -> None:
        assert EnvSettingsLoader({"RELAY_DEBUG": falsy}).load(RelaySettings).debug is False

    def test_loads_list(self) -> None:
        settings = EnvSettingsLoader({"RELAY_ALLOWED_SENDERS": "a@x.com, b@x.com,"}).load(RelaySettings)
        assert settings.allowed_senders == ["a@x.com", "b@x.com"]

    def test_defaults_preserved_when_env_absent(self) -> None:
        settings = EnvSettingsLoader({}).load(RelaySettings)
        assert settings.host == "localhost"
        assert settings.port == 2525
        assert settings.debug is False
        assert settings.allowed_senders == []

    def test_prefix_is_not_a_field(self) -> None:
        assert "_prefix" not in {f.name for f in dataclasses.fields(RelaySettings)}

    def test_missing_required_raises(self) -> None:
        with pytest.raises(MissingRequiredSettingError) as exc_info:
            EnvSettingsLoader({}).load(StrictSettings)
        assert exc_info.value.setting_name == "STRICT_REQUIRED_FIELD"

    def test_uncoercible_value_raises_invalid(self) -> None:
        with pytest.raises(InvalidSettingValueError) as exc_info:
            EnvSettingsLoader({"RELAY_PORT": "many"}).load(RelaySettings)
        assert exc_info.value.setting_name == "RELAY_PORT"

    def test_validation_error_is_not_wrapped(self) -> None:
        with pytest.raises(InvalidSettingValueError):
            EnvSettingsLoader({"RELAY_PORT": "0"}).load(RelaySettings)

    def test_settings_are_frozen(self) -> None:
        settings = EnvSettingsLoader({}).load(RelaySettings)
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.host = "other"  # type: ignore[misc]


class TestDotenvSettingsLoader:
    def test_loads_env_file_then_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        fake_dotenv = MagicMock()
        fake_dotenv.load_dotenv.side_effect = lambda *a, **kw: monkeypatch.setenv("RELAY_HOST", "from-dotenv")
        with patch.dict(sys.modules, {"dotenv": fake_dotenv}):
            settings = DotenvSettingsLoader(".env.test").load(RelaySettings)
        fake_dotenv.load_dotenv.assert_called_once_with(".env.test", override=False)
        assert settings.host == "from-dotenv"

    def test_missing_dotenv_package(self) -> None:
        with patch.dict(sys.modules, {"dotenv": None}):
            with pytest.raises(ImportError, match="python-dotenv"):
                DotenvSettingsLoader().load(RelaySettings)


class TestConfigErrors:
    def test_hierarchy(self) -> None:
        assert issubclass(MissingRequiredSettingError, ConfigError)
        assert issubclass(InvalidSettingValueError, ConfigError)

    def test_codes(self) -> None:
        assert MissingRequiredSettingError("X").code == "missing_required_setting"
        assert InvalidSettingValueError("x", 1, "bad").code == "invalid_setting_value"

    def test_invalid_value_detail(self) -> None:
        err = InvalidSettingValueError("port", 0, "must be positive")
        assert err.detail == {"setting": "port", "reason": "must be positive"}
        assert "0" in err.message
