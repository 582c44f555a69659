"""
Shared fixtures for rgbacolor tests.

Isolates every test from the user's config file and provides common
Color instances.
"""
import sys
import os
import pytest

# Ensure src is on the path when running without an install
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'src'))

from rgbacolor import Color
from rgbacolor.utils import config as config_module
from rgbacolor.utils import logger as logger_module


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Point the config loader at an empty temp dir and drop cached settings"""
    monkeypatch.setenv('RGBACOLOR_CONFIG', str(tmp_path / 'missing.json'))
    monkeypatch.setattr(logger_module, 'DEBUG_MODE', True)
    config_module.reset_settings()
    yield tmp_path
    config_module.reset_settings()


@pytest.fixture
def write_config(isolated_config, monkeypatch):
    """Write a JSON config file and make it the active one"""
    def _write(text):
        path = isolated_config / 'config.json'
        path.write_text(text, encoding='utf-8')
        monkeypatch.setenv('RGBACOLOR_CONFIG', str(path))
        config_module.reset_settings()
        return path
    return _write


@pytest.fixture
def orange():
    """Fully opaque orange (255, 128, 0)"""
    return Color().set_from_rgb(255, 128, 0)


@pytest.fixture
def translucent_teal():
    """Teal at half opacity"""
    return Color().set_from_rgb(0, 128, 128, 0.5)
