"""Unit tests for the application context."""

import asyncio

import pytest

from src.contact_form.runtime.config.config_data import ConfigData
from src.contact_form.runtime.context import (
    AppContext,
    get_config,
    get_context,
    set_config,
    with_context,
)


class TestContext:
    def test_default_context_available(self):
        context = get_context()

        assert isinstance(context, AppContext)
        assert context.config is get_config()

    def test_tests_run_with_test_environment(self):
        assert get_config().app.environment == "test"

    def test_with_context_override(self):
        original = get_config()
        override = ConfigData()
        override.database.url = "sqlite:///override.db"

        with with_context(override):
            assert get_config() is override
            assert get_config().database.url == "sqlite:///override.db"

        assert get_config() is original

    def test_with_context_none_keeps_config(self):
        original = get_config()
        with with_context(None):
            assert get_config() is original

    def test_with_context_rejects_other_types(self):
        with pytest.raises(ValueError, match="config_override must be ConfigData"):
            with with_context({"app": {"port": 1}}):  # type: ignore[arg-type]
                pass

    def test_override_is_restored_after_exception(self):
        original = get_config()
        with pytest.raises(RuntimeError):
            with with_context(ConfigData()):
                raise RuntimeError("boom")
        assert get_config() is original

    def test_set_config_is_isolated_per_task(self):
        original = get_config()

        async def replace_in_task() -> ConfigData:
            replacement = ConfigData()
            set_config(replacement)
            return get_config()

        replaced = asyncio.run(replace_in_task())

        assert replaced is not original
        assert get_config() is original
