#  Copyright (c) Michele De Stefano - 2026.
import numpy as np

from .config import FitConfig
from .coordinates import CoordinateMapper, SurfaceGeometry
from .errors import ShapeMismatchError


class RegressionEngine:
    """
    Fits a line y = slope * x + intercept with one gradient descent update
    per call, using the mean squared error over the whole dataset.

    The fit is computed in scaled space, i.e. on the amplified values that
    are plotted, without the margin offset. There is no stopping criterion:
    the engine keeps stepping for as long as it is called.
    """

    __config: FitConfig
    __log: bool
    slope: float
    intercept: float
    last_loss: float | None
    steps: int

    def __init__(
        self,
        config: FitConfig,
        slope: float = 0.0,
        intercept: float = 0.0,
        log: bool = False,
    ) -> None:
        """
        Constructor.

        Args:
            config:     Configuration holding amplification and learning rates.

            slope:      Initial slope.

            intercept:  Initial intercept (scaled space).

            log:        Set this to True for printing the parameters at every
                        step.
        """
        self.__config = config
        self.__log = log
        self.slope = slope
        self.intercept = intercept
        self.last_loss = None
        self.steps = 0

    @classmethod
    def seeded(
        cls,
        config: FitConfig,
        geometry: SurfaceGeometry,
        seed: int | None = None,
        log: bool = False,
    ) -> "RegressionEngine":
        """
        Creates an engine with pseudo-random initial parameters: slope in
        [0,1) and intercept in [0, surface height).

        Args:
            config:     The session configuration.

            geometry:   The surface geometry at session start.

            seed:       Seed of the random generator. None means
                        non-reproducible parameters.

            log:        See the constructor.
        """
        rng = np.random.default_rng(seed)
        slope = float(rng.random())
        intercept = float(rng.random() * geometry.height)
        return cls(config, slope=slope, intercept=intercept, log=log)

    @property
    def parameters(self) -> tuple[float, float]:
        return self.slope, self.intercept

    def step(
        self, xs: np.ndarray, ys: np.ndarray, geometry: SurfaceGeometry
    ) -> tuple[float, float]:
        """
        Performs one gradient descent update.

        Args:
            xs:         Normalized X series.

            ys:         Normalized Y series.

            geometry:   Current surface geometry.

        Returns:
            The updated (slope, intercept) pair. Parameters are returned
            unchanged for an empty dataset.
        """
        xi, yi = self.__scaled(xs, ys, geometry)
        n = len(xi)
        if n == 0:
            return self.parameters

        err = self.slope * xi + self.intercept - yi
        grad_slope = 2.0 / n * np.sum(err * xi)
        grad_intercept = 2.0 / n * np.sum(err)

        self.last_loss = float(np.mean(err**2))
        self.slope -= self.__config.slope_learning_rate * float(grad_slope)
        self.intercept -= self.__config.intercept_learning_rate * float(
            grad_intercept
        )
        self.steps += 1
        if self.__log:
            print(
                f"step {self.steps}: slope = {self.slope}, "
                f"intercept = {self.intercept}, mse = {self.last_loss}"
            )
        return self.parameters

    def mean_squared_error(
        self, xs: np.ndarray, ys: np.ndarray, geometry: SurfaceGeometry
    ) -> float:
        """
        Mean squared error of the current line on the scaled dataset. It is
        only an observable metric: the engine never acts on it.
        """
        xi, yi = self.__scaled(xs, ys, geometry)
        if len(xi) == 0:
            return 0.0
        err = self.slope * xi + self.intercept - yi
        return float(np.mean(err**2))

    def __scaled(
        self, xs: np.ndarray, ys: np.ndarray, geometry: SurfaceGeometry
    ) -> tuple[np.ndarray, np.ndarray]:
        if len(xs) != len(ys):
            raise ShapeMismatchError(
                f"X and Y series have different lengths ({len(xs)} != {len(ys)})"
            )
        mapper = CoordinateMapper(self.__config, geometry)
        xi = mapper.scale(np.asarray(xs, dtype=float), geometry.width)
        yi = mapper.scale(np.asarray(ys, dtype=float), geometry.height)
        return xi, yi
