"""Tests for settings and per-table drag configuration."""

import pydantic
import pytest

pytestmark = pytest.mark.unit

from tablednd.config import DEFAULT_SERIALIZE_REGEXP, DragConfig, get_settings


class TestSettings:
    """Tests for environment-driven defaults."""

    def test_defaults(self):
        """Test the built-in defaults."""
        settings = get_settings()
        assert settings.sensitivity == 10
        assert settings.scroll_amount == 5
        assert settings.hierarchy_level == 0
        assert settings.drag_class == "tDnD_whileDrag"

    def test_environment_overrides(self, monkeypatch):
        """Test TABLEDND_ variables feed DragConfig defaults."""
        monkeypatch.setenv("TABLEDND_SENSITIVITY", "3")
        monkeypatch.setenv("TABLEDND_HIERARCHY_LEVEL", "2")
        get_settings.cache_clear()

        config = DragConfig()
        assert config.sensitivity == 3
        assert config.hierarchy_level == 2
        assert config.hierarchy_enabled


class TestDragConfig:
    """Tests for drag configuration validation."""

    def test_defaults(self):
        """Test a default configuration."""
        config = DragConfig()
        assert config.drag_handle is None
        assert config.on_drag_class == "tDnD_whileDrag"
        assert config.auto_clean_relations is True
        assert config.serialize_regexp == DEFAULT_SERIALIZE_REGEXP
        assert config.serialize_param_name is None
        assert config.json_pretty_separator == "\t\t\t"
        assert not config.hierarchy_enabled

    def test_negative_values_rejected(self):
        """Test negative sensitivity or depth is rejected."""
        with pytest.raises(pydantic.ValidationError):
            DragConfig(sensitivity=-1)
        with pytest.raises(pydantic.ValidationError):
            DragConfig(hierarchy_level=-2)

    def test_invalid_regexp_rejected(self):
        """Test an uncompilable serialize_regexp is rejected."""
        with pytest.raises(pydantic.ValidationError):
            DragConfig(serialize_regexp="[unclosed")

    def test_unknown_option_rejected(self):
        """Test misspelled options fail instead of being ignored."""
        with pytest.raises(pydantic.ValidationError):
            DragConfig(sensitivty=4)

    def test_frozen(self):
        """Test configuration is immutable once built."""
        config = DragConfig()
        with pytest.raises(pydantic.ValidationError):
            config.sensitivity = 1

    def test_merged_returns_new_config(self):
        """Test merged applies overrides and keeps callbacks."""

        def on_drop(table, row):
            pass

        base = DragConfig(on_drop=on_drop, sensitivity=4)
        derived = base.merged(hierarchy_level=2)

        assert derived is not base
        assert derived.hierarchy_level == 2
        assert derived.sensitivity == 4
        assert derived.on_drop is on_drop
        assert base.hierarchy_level == 0
