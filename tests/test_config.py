"""Tests for majority/config.py."""
import dataclasses

import pytest
from majority.config import Settings, check_sorted_enabled, load_settings


class TestLoadSettings:
    def test_defaults(self, clean_env):
        settings = load_settings()
        assert settings == Settings(
            langfuse_public_key=None,
            langfuse_secret_key=None,
            langfuse_host=None,
            check_sorted=False,
        )

    def test_langfuse_keys(self, clean_env):
        clean_env.setenv("LANGFUSE_PUBLIC_KEY", "pk")
        clean_env.setenv("LANGFUSE_SECRET_KEY", "sk")
        clean_env.setenv("LANGFUSE_HOST", "http://localhost:3000")
        settings = load_settings()
        assert settings.langfuse_public_key == "pk"
        assert settings.langfuse_secret_key == "sk"
        assert settings.langfuse_host == "http://localhost:3000"

    def test_empty_key_is_none(self, clean_env):
        clean_env.setenv("LANGFUSE_PUBLIC_KEY", "")
        assert load_settings().langfuse_public_key is None

    @pytest.mark.parametrize("raw", ["1", "true", "YES", " on "])
    def test_check_sorted_truthy(self, clean_env, raw):
        clean_env.setenv("MAJORITY_CHECK_SORTED", raw)
        assert load_settings().check_sorted is True

    @pytest.mark.parametrize("raw", ["0", "false", "No", "off", ""])
    def test_check_sorted_falsy(self, clean_env, raw):
        clean_env.setenv("MAJORITY_CHECK_SORTED", raw)
        assert load_settings().check_sorted is False

    def test_check_sorted_invalid(self, clean_env):
        clean_env.setenv("MAJORITY_CHECK_SORTED", "maybe")
        with pytest.raises(ValueError, match="MAJORITY_CHECK_SORTED"):
            load_settings()

    def test_settings_frozen(self, clean_env):
        settings = load_settings()
        with pytest.raises(dataclasses.FrozenInstanceError):
            settings.check_sorted = True


class TestCheckSortedEnabled:
    def test_unset(self, clean_env):
        assert check_sorted_enabled() is False

    def test_set(self, clean_env):
        clean_env.setenv("MAJORITY_CHECK_SORTED", "yes")
        assert check_sorted_enabled() is True

    def test_ignores_other_settings(self, clean_env):
        clean_env.setenv("MAJORITY_CHECK_SORTED", "1")
        clean_env.setenv("LANGFUSE_PUBLIC_KEY", "pk")
        assert check_sorted_enabled() is True
