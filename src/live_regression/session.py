#  Copyright (c) Michele De Stefano - 2026.
from dataclasses import dataclass

import numpy as np
import pandas as pd
import pygame as pg

from .chrome import Chrome
from .config import FitConfig
from .errors import ResourceError, ShapeMismatchError
from .normalizer import normalize
from .regression import RegressionEngine
from .render_loop import RenderLoop

DEFAULT_RESOURCE = "data.csv"
DEFAULT_X_LABEL = "X"
DEFAULT_Y_LABEL = "Y"


@dataclass
class Dataset:
    """
    The two raw series to fit, with their axis labels.
    """

    xs: np.ndarray
    ys: np.ndarray
    x_label: str = DEFAULT_X_LABEL
    y_label: str = DEFAULT_Y_LABEL

    def __post_init__(self) -> None:
        if len(self.xs) != len(self.ys):
            raise ShapeMismatchError(
                f"X and Y series have different lengths "
                f"({len(self.xs)} != {len(self.ys)})"
            )

    def __len__(self) -> int:
        return len(self.xs)


@dataclass
class AnimationSession:
    dataset: Dataset
    xs: np.ndarray
    ys: np.ndarray
    loop: RenderLoop

    @property
    def engine(self) -> RegressionEngine:
        return self.loop.engine


def load_dataset(resource: str = DEFAULT_RESOURCE) -> Dataset:
    """
    Loads a comma separated resource whose first row holds the column names.

    Only the first two columns are consumed: they are coerced to numbers
    (non-numeric fields become NaN). Further columns are ignored.

    Args:
        resource:   Path or URL of the resource.

    Returns:
        The dataset with labels taken from the header.

    Raises:
        ResourceError: if the resource cannot be read or parsed.
    """
    try:
        frame = pd.read_csv(resource, skipinitialspace=True)
    except (OSError, ValueError) as e:
        raise ResourceError(f"Cannot read dataset '{resource}': {e}") from e
    if frame.shape[1] < 2:
        raise ResourceError(
            f"Dataset '{resource}' has {frame.shape[1]} column(s), "
            "at least 2 are needed"
        )
    xs = pd.to_numeric(frame.iloc[:, 0], errors="coerce").to_numpy(dtype=float)
    ys = pd.to_numeric(frame.iloc[:, 1], errors="coerce").to_numpy(dtype=float)
    return Dataset(
        xs=xs,
        ys=ys,
        x_label=_label(frame.columns[0], DEFAULT_X_LABEL),
        y_label=_label(frame.columns[1], DEFAULT_Y_LABEL),
    )


def _label(column: object, default: str) -> str:
    label = str(column).strip()
    # pandas names missing header cells "Unnamed: <i>"
    if not label or label.startswith("Unnamed:"):
        return default
    return label


def create_session(
    dataset: Dataset,
    config: FitConfig,
    surface: pg.Surface | None = None,
    seed: int | None = None,
    log: bool = False,
) -> AnimationSession:
    """
    Normalizes the dataset and builds the render loop, without starting it.

    Args:
        dataset:    The raw dataset.

        config:     Session configuration.

        surface:    Where to draw. None opens a display window.

        seed:       Seed for the initial regression parameters.

        log:        Set this to True for printing diagnostics.
    """
    xs = normalize(dataset.xs)
    ys = normalize(dataset.ys)
    chrome = Chrome(config, x_label=dataset.x_label, y_label=dataset.y_label)
    loop = RenderLoop(
        xs, ys, config, chrome=chrome, surface=surface, seed=seed, log=log
    )
    return AnimationSession(dataset=dataset, xs=xs, ys=ys, loop=loop)


def start_session(
    resource: str = DEFAULT_RESOURCE,
    config: FitConfig | None = None,
    surface: pg.Surface | None = None,
    seed: int | None = None,
    log: bool = False,
) -> AnimationSession | None:
    """
    Loads the dataset and runs the animation until it is stopped.

    Returns:
        The session once the loop has stopped, or None if the dataset could
        not be loaded (startup is aborted, there is no retry).
    """
    config = config if config is not None else FitConfig()
    try:
        dataset = load_dataset(resource)
    except ResourceError as e:
        print(f"Startup aborted: {e}")
        return None
    if log:
        print(
            f"Loaded {len(dataset)} samples from '{resource}' "
            f"({dataset.x_label} vs {dataset.y_label})"
        )
    session = create_session(dataset, config, surface=surface, seed=seed, log=log)
    with session.loop as loop:
        loop.run()
    return session
