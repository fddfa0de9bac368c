#  Copyright (c) Michele De Stefano 2026.
import importlib.resources
import os
from collections.abc import Generator
from pathlib import Path
from typing import Any

import pytest

# pygame must run without a real display or audio device
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

import pygame as pg  # noqa: E402


@pytest.fixture(scope="session")
def resources_path() -> Path:
    return Path(str(importlib.resources.files("tests.resources")))


@pytest.fixture(scope="session")
def pygame_initialized() -> Generator[None, Any, None]:
    pg.init()
    yield
    pg.quit()
