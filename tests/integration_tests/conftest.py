#  Copyright (c) Michele De Stefano - 2026.
from pathlib import Path

import pygame as pg
import pytest

from live_regression import Dataset, load_dataset


@pytest.fixture(scope="function")
def proportional_dataset(resources_path: Path) -> Dataset:
    return load_dataset(str(resources_path / "proportional.csv"))


@pytest.fixture(scope="function")
def small_surface(pygame_initialized) -> pg.Surface:
    # 20 usable pixels per axis with the default margin
    return pg.Surface((80, 80))


@pytest.fixture(scope="session")
def sample_dataset_path() -> Path:
    return Path(__file__).parents[2] / "data" / "data.csv"


@pytest.fixture(scope="function")
def sample_dataset(sample_dataset_path: Path) -> Dataset:
    return load_dataset(str(sample_dataset_path))
