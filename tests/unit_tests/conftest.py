#  Copyright (c) Michele De Stefano 2026.
import numpy as np
import pygame as pg
import pytest

from live_regression import FitConfig, RegressionEngine, RenderLoop
from live_regression.coordinates import SurfaceGeometry
from live_regression.normalizer import normalize


@pytest.fixture(scope="function")
def config() -> FitConfig:
    return FitConfig()


@pytest.fixture(scope="function")
def geometry() -> SurfaceGeometry:
    return SurfaceGeometry(width=800, height=600, margin=30.0)


@pytest.fixture(scope="function")
def small_geometry() -> SurfaceGeometry:
    # 20 usable pixels per axis: the default learning rates are stable here
    return SurfaceGeometry(width=80, height=80, margin=30.0)


@pytest.fixture(scope="function")
def proportional_series() -> tuple[np.ndarray, np.ndarray]:
    return normalize([1, 2, 3, 4]), normalize([2, 4, 6, 8])


@pytest.fixture(scope="function")
def unit_config() -> FitConfig:
    # No amplification: normalized values map straight onto the usable area
    return FitConfig(amplification=1.0)


@pytest.fixture(scope="function")
def offscreen_surface(pygame_initialized) -> pg.Surface:
    return pg.Surface((200, 200))


@pytest.fixture(scope="function")
def render_loop(
    unit_config: FitConfig, offscreen_surface: pg.Surface
) -> RenderLoop:
    # With a 200x200 surface the points land on (65, 135) and (100, 100)
    xs = np.array([0.25, 0.5])
    ys = np.array([0.25, 0.5])
    engine = RegressionEngine(unit_config, slope=1.0, intercept=10.0)
    return RenderLoop(
        xs, ys, unit_config, engine=engine, surface=offscreen_surface
    )
