#  Copyright (c) Michele De Stefano - 2026.
import numpy as np
import pygame as pg
import pytest

from live_regression import Dataset, FitConfig, RenderLoop
from live_regression.session import create_session


def test_animation_converges_to_best_fit_line(
    proportional_dataset: Dataset, small_surface: pg.Surface
) -> None:
    # given
    session = create_session(
        proportional_dataset, FitConfig(), surface=small_surface, seed=0
    )
    loop = session.loop
    loop.start()
    initial_loss = session.engine.mean_squared_error(
        session.xs, session.ys, loop.geometry
    )

    # when
    for _ in range(10_000):
        loop.tick()

    # then
    # The normalized series coincide, so the best fit is y = x
    assert loop.ticks == 10_000
    assert session.engine.slope == pytest.approx(1.0, abs=1e-6)
    assert session.engine.intercept == pytest.approx(0.0, abs=1e-3)
    final_loss = session.engine.mean_squared_error(
        session.xs, session.ys, loop.geometry
    )
    assert final_loss < 1e-6 < initial_loss


def test_same_seed_gives_same_animation(
    proportional_dataset: Dataset, small_surface: pg.Surface
) -> None:
    # given
    sessions = [
        create_session(
            proportional_dataset, FitConfig(), surface=small_surface, seed=11
        )
        for _ in range(2)
    ]

    # when
    trajectories = []
    for session in sessions:
        trajectory = []
        for _ in range(50):
            session.loop.tick()
            trajectory.append(session.engine.parameters)
        trajectories.append(trajectory)

    # then
    assert trajectories[0] == trajectories[1]


def test_resize_mid_run_keeps_parameters(
    proportional_dataset: Dataset, small_surface: pg.Surface
) -> None:
    # given
    session = create_session(
        proportional_dataset, FitConfig(), surface=small_surface, seed=5
    )
    for _ in range(10):
        session.loop.tick()
    parameters = session.engine.parameters
    point_x_before = session.loop.mapper.to_surface_x(session.xs[0])

    # when
    session.loop.resize(120, 90)

    # then
    assert session.engine.parameters == parameters
    assert session.loop.mapper.to_surface_x(session.xs[0]) != point_x_before


def test_run_in_a_display_window(
    pygame_initialized, proportional_dataset: Dataset, mocker
) -> None:
    # given
    mocker.patch(
        "pygame.event.get",
        side_effect=[[], [], [], [pg.event.Event(pg.QUIT)]],
    )
    mocker.patch("pygame.time.wait")
    session = create_session(
        proportional_dataset, FitConfig(window_size=(320, 240)), seed=1
    )

    # when
    session.loop.run()

    # then
    assert session.loop.surface.get_size() == (320, 240)
    assert session.loop.ticks == 3
    assert session.loop.state == RenderLoop.STOPPED


def test_loop_survives_divergence_with_default_config(
    sample_dataset: Dataset, pygame_initialized, mocker
) -> None:
    # given
    config = FitConfig()
    line_mock = mocker.patch("pygame.draw.line")
    session = create_session(
        sample_dataset, config, surface=pg.Surface((800, 600)), seed=0
    )

    # when
    for _ in range(300):
        session.loop.tick()

    # then
    assert session.loop.ticks == 300
    assert not np.isfinite(session.engine.slope)
    fit_line_calls = [
        c for c in line_mock.call_args_list if c.args[1] == config.line_color
    ]
    assert 0 < len(fit_line_calls) < 300
