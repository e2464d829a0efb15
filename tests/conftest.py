"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

from pathlib import Path
from unittest.mock import MagicMock

import pytest

APPLICATION_CONFIG = """<?php
return [
    'modules' => [
        'Zend\\Router',
        'Zend\\Validator',
        'Application',
    ],
    'module_listener_options' => [
        'config_cache_enabled' => false,
    ],
];
"""

MODULES_CONFIG = """<?php
return [
    'Zend\\Router',
    'Application',
];
"""

AGGREGATOR_CONFIG = """<?php

use Zend\\ConfigAggregator\\ConfigAggregator;

$aggregator = new ConfigAggregator([
    \\Zend\\Router\\ConfigProvider::class,
    App\\ConfigProvider::class,
], $cacheConfig['config_cache_path']);

return $aggregator->getMergedConfig();
"""


@pytest.fixture(autouse=True)
def isolated_config_home(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point XDG_CONFIG_HOME at a temporary directory."""
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    return config_home


@pytest.fixture
def notifier() -> MagicMock:
    """Mock notifier recording info and error calls."""
    return MagicMock()


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Project root with application and aggregator configuration files."""
    root = tmp_path / "project"
    (root / "config").mkdir(parents=True)
    (root / "config" / "application.config.php").write_text(APPLICATION_CONFIG)
    (root / "config" / "config.php").write_text(AGGREGATOR_CONFIG)
    return root


@pytest.fixture
def modules_project(tmp_path: Path) -> Path:
    """Project root with only a modules.config.php file."""
    root = tmp_path / "modules-project"
    (root / "config").mkdir(parents=True)
    (root / "config" / "modules.config.php").write_text(MODULES_CONFIG)
    return root


@pytest.fixture
def application_config() -> str:
    """Sample config/application.config.php content."""
    return APPLICATION_CONFIG


@pytest.fixture
def modules_config() -> str:
    """Sample config/modules.config.php content."""
    return MODULES_CONFIG


@pytest.fixture
def aggregator_config() -> str:
    """Sample config/config.php content with a ConfigAggregator."""
    return AGGREGATOR_CONFIG
