"""
Pytest configuration and shared fixtures.
"""

import os
import tempfile
from collections.abc import Iterator
from pathlib import Path

import pytest
from hypothesis import settings

from chuk_tonal import NameParser, TonalConfig, set_config, set_parser

settings.register_profile("fast", max_examples=50)
settings.register_profile("slow", max_examples=1000)
settings.load_profile("slow" if os.environ.get("HYPO_SLOW") == "1" else "fast")


@pytest.fixture(autouse=True)
def default_config() -> Iterator[None]:
    """Restore the default config (and default parser) after every test."""
    yield
    set_config(TonalConfig())


@pytest.fixture
def temp_dir() -> Iterator[Path]:
    """Create a temporary directory for test files."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def config_path(temp_dir: Path) -> Path:
    """Path for a temporary YAML config file."""
    return temp_dir / "tonal.yaml"


@pytest.fixture
def parser() -> NameParser:
    """A fresh parser installed as the default."""
    p = NameParser()
    set_parser(p)
    return p
