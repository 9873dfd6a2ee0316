"""Tests for config module."""

import pytest

from threaded_generator.config import GeneratorConfig, get_config


def test_defaults():
    """Test default configuration values."""
    config = GeneratorConfig()

    assert config.thread_name_prefix == "generator"
    assert config.daemon is True
    assert config.verbose is False
    assert config.demo_items == 45


def test_from_env(monkeypatch):
    """Test loading configuration from environment variables."""
    monkeypatch.setenv("THREADGEN_THREAD_NAME_PREFIX", "worker")
    monkeypatch.setenv("THREADGEN_DAEMON", "false")
    monkeypatch.setenv("THREADGEN_VERBOSE", "yes")
    monkeypatch.setenv("THREADGEN_DEMO_ITEMS", "10")

    config = get_config()

    assert config.thread_name_prefix == "worker"
    assert config.daemon is False
    assert config.verbose is True
    assert config.demo_items == 10


def test_invalid_values():
    """Test that invalid configuration is rejected."""
    with pytest.raises(ValueError):
        GeneratorConfig(demo_items=0)
    with pytest.raises(ValueError):
        GeneratorConfig(thread_name_prefix="")
