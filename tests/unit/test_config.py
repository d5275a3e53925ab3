"""Unit Tests - Settings and scheduling policy."""

import calendar
from datetime import timedelta

import pytest
from pydantic import ValidationError

from salon_scheduling.config.policy import (
    DEFAULT_POLICY,
    EDIT_LEAD_TIME,
    WEEK_START,
    WEEKLY_STATS_WINDOW,
    SchedulingPolicy,
)
from salon_scheduling.config.settings import Settings, get_settings
from salon_scheduling.bootstrap import configure
from salon_scheduling.utils.logger import configure_logging, get_logger, setup_logging


class TestPolicyConstants:
    def test_business_constants(self) -> None:
        """Test the default business rules."""
        assert EDIT_LEAD_TIME == timedelta(days=2)
        assert WEEK_START == calendar.SUNDAY
        assert WEEKLY_STATS_WINDOW == 8

    def test_default_policy_matches_constants(self) -> None:
        """Test that the default policy carries the constants."""
        assert DEFAULT_POLICY.edit_lead_time == EDIT_LEAD_TIME
        assert DEFAULT_POLICY.week_start == WEEK_START
        assert DEFAULT_POLICY.weekly_stats_window == WEEKLY_STATS_WINDOW
        assert DEFAULT_POLICY.default_custom_range_days == 7

    def test_invalid_week_start_fails(self) -> None:
        """Test that week_start must be a weekday number."""
        with pytest.raises(ValidationError):
            SchedulingPolicy(week_start=7)


class TestSettings:
    def test_defaults(self) -> None:
        """Test settings without environment overrides."""
        settings = Settings(_env_file=None)

        assert settings.log_level == "INFO"
        assert settings.app_env == "development"
        assert not settings.is_production
        assert settings.week_start_day == calendar.SUNDAY

    def test_environment_overrides_policy(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that environment variables reach the policy."""
        monkeypatch.setenv("EDIT_LEAD_TIME_DAYS", "1.5")
        monkeypatch.setenv("WEEK_START_DAY", "0")
        monkeypatch.setenv("WEEKLY_STATS_WINDOW", "12")

        policy = SchedulingPolicy.from_settings(get_settings())

        assert policy.edit_lead_time == timedelta(days=1, hours=12)
        assert policy.week_start == calendar.MONDAY
        assert policy.weekly_stats_window == 12

    def test_settings_are_cached(self) -> None:
        """Test that get_settings returns one instance."""
        assert get_settings() is get_settings()

    def test_invalid_log_level_fails(self, monkeypatch: pytest.MonkeyPatch) -> None:
        """Test that unknown log levels are rejected."""
        monkeypatch.setenv("LOG_LEVEL", "VERBOSE")

        with pytest.raises(ValidationError):
            Settings(_env_file=None)


class TestLogging:
    def test_setup_and_log(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that events are rendered as JSON lines."""
        setup_logging("DEBUG")
        logger = get_logger("tests.logging")

        logger.info("test_event", appointment_id=42)

        output = capsys.readouterr().out
        assert '"event": "test_event"' in output
        assert '"appointment_id": 42' in output

    def test_console_renderer(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that key=value lines are rendered when JSON is off."""
        setup_logging("INFO", json=False)

        get_logger("tests.console").info("console_event", appointment_id=7)

        output = capsys.readouterr().out
        assert "console_event" in output
        assert "appointment_id=7" in output
        assert '"event"' not in output

    def test_level_filters_debug(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Test that debug events are dropped at INFO level."""
        setup_logging("INFO")

        get_logger("tests.level").debug("hidden_event")

        assert "hidden_event" not in capsys.readouterr().out

    def test_configure_logging_from_settings(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test that LOG_JSON and APP_ENV reach the rendered events."""
        monkeypatch.setenv("LOG_JSON", "false")
        monkeypatch.setenv("APP_ENV", "staging")

        configure_logging()
        get_logger("tests.settings").info("settings_event")

        output = capsys.readouterr().out
        assert "settings_event" in output
        assert "app_env=staging" in output
        assert '"event"' not in output

    def test_production_forces_json(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test that production logs JSON even with LOG_JSON off."""
        monkeypatch.setenv("LOG_JSON", "false")
        monkeypatch.setenv("APP_ENV", "production")

        configure_logging()
        get_logger("tests.production").info("production_event")

        output = capsys.readouterr().out
        assert '"event": "production_event"' in output
        assert '"app_env": "production"' in output


class TestBootstrap:
    def test_configure_returns_settings_policy(
        self,
        monkeypatch: pytest.MonkeyPatch,
        capsys: pytest.CaptureFixture[str],
    ) -> None:
        """Test that configure applies settings and logs the policy."""
        monkeypatch.setenv("WEEK_START_DAY", "0")
        monkeypatch.setenv("WEEKLY_STATS_WINDOW", "4")

        policy = configure()

        assert policy.week_start == calendar.MONDAY
        assert policy.weekly_stats_window == 4
        output = capsys.readouterr().out
        assert '"event": "scheduling_core_configured"' in output
        assert '"weekly_stats_window": 4' in output
