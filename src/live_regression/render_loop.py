#  Copyright (c) Michele De Stefano - 2026.
import numpy as np
import pygame as pg

from .chrome import Chrome
from .config import FitConfig
from .coordinates import CoordinateMapper, SurfaceGeometry
from .errors import ShapeMismatchError
from .regression import RegressionEngine


class RenderLoop:
    """
    Animation loop that alternates one regression step and one full redraw.

    The loop starts Idle, becomes Running on start() and keeps ticking until
    stop() is called (directly, or by closing the window / pressing Escape).
    """

    IDLE = "idle"
    RUNNING = "running"
    STOPPED = "stopped"

    # Line endpoints are clipped to this range before drawing
    __max_coordinate: float = 1e6

    __config: FitConfig
    __xs: np.ndarray
    __ys: np.ndarray
    __geometry: SurfaceGeometry
    __mapper: CoordinateMapper
    __engine: RegressionEngine
    __chrome: Chrome
    __surface: pg.Surface
    __owns_display: bool
    __clock: pg.time.Clock
    __log: bool

    state: str
    ticks: int

    def __init__(
        self,
        xs: np.ndarray,
        ys: np.ndarray,
        config: FitConfig,
        chrome: Chrome | None = None,
        engine: RegressionEngine | None = None,
        surface: pg.Surface | None = None,
        seed: int | None = None,
        log: bool = False,
    ) -> None:
        """
        Constructor.

        Args:
            xs:         Normalized X series.

            ys:         Normalized Y series.

            config:     Session configuration.

            chrome:     Static chart drawing. Default: unlabeled axes.

            engine:     The regression engine. If None, an engine with
                        random initial parameters is created.

            surface:    Where to draw. If None, a resizable display window
                        is opened (pygame must be initialized).

            seed:       Seed for the initial parameters of a newly created
                        engine.

            log:        Set this to True for printing per-tick diagnostics.
        """
        self.__config = config
        self.__xs = xs
        self.__ys = ys
        self.__log = log
        self.__owns_display = surface is None
        if surface is None:
            surface = pg.display.set_mode(config.window_size, pg.RESIZABLE)
            pg.display.set_caption("Live linear regression")
        self.__surface = surface
        self.__geometry = SurfaceGeometry.from_size(surface.get_size(), config)
        self.__mapper = CoordinateMapper(config, self.__geometry)
        self.__chrome = chrome if chrome is not None else Chrome(config)
        self.__engine = (
            engine
            if engine is not None
            else RegressionEngine.seeded(config, self.__geometry, seed, log)
        )
        self.__clock = pg.time.Clock()
        self.state = self.IDLE
        self.ticks = 0

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.stop()

    @property
    def running(self) -> bool:
        return self.state == self.RUNNING

    @property
    def engine(self) -> RegressionEngine:
        return self.__engine

    @property
    def geometry(self) -> SurfaceGeometry:
        return self.__geometry

    @property
    def mapper(self) -> CoordinateMapper:
        return self.__mapper

    @property
    def surface(self) -> pg.Surface:
        return self.__surface

    def start(self) -> bool:
        """
        Moves the loop from Idle to Running.

        Returns:
            True if the loop is running. Mismatched series keep it Idle.
        """
        if self.state != self.IDLE:
            return self.running
        if len(self.__xs) != len(self.__ys):
            print(
                "Cannot start: X and Y series have different lengths "
                f"({len(self.__xs)} != {len(self.__ys)})"
            )
            return False
        self.state = self.RUNNING
        self.__chrome.draw(self.__surface, self.__geometry)
        return True

    def stop(self) -> None:
        self.state = self.STOPPED

    def run(self) -> None:
        """
        Runs the animation until stop() is called.
        """
        self.start()
        while self.running:
            self.__handle_events(pg.event.get())
            if not self.running:
                break
            self.tick()
            self.__clock.tick(self.__config.fps)
            pg.time.wait(self.__config.min_tick_delay_ms)

    def tick(self) -> None:
        """
        One regression step followed by a full redraw.
        """
        try:
            self.__engine.step(self.__xs, self.__ys, self.__geometry)
        except ShapeMismatchError as e:
            print(f"Regression step skipped: {e}")
        self.__chrome.draw(self.__surface, self.__geometry)
        self.draw_points()
        self.draw_line()
        if self.__owns_display:
            pg.display.flip()
        self.ticks += 1
        if self.__log:
            print(f"tick {self.ticks}: intercept = {self.__engine.intercept}")

    def resize(self, width: int, height: int) -> None:
        """
        Adapts to a new surface size. Regression parameters are left
        untouched: only subsequent pixel mappings change.
        """
        self.__geometry.width = width
        self.__geometry.height = height
        if self.__owns_display:
            self.__surface = pg.display.get_surface()
        else:
            self.__surface = pg.Surface((width, height))
        self.__chrome.draw(self.__surface, self.__geometry)

    def draw_points(self) -> None:
        if len(self.__xs) != len(self.__ys):
            print(
                "Points not drawn: X and Y series have different lengths "
                f"({len(self.__xs)} != {len(self.__ys)})"
            )
            return
        xs = np.asarray(self.__xs, dtype=float)
        ys = np.asarray(self.__ys, dtype=float)
        surface_x = self.__mapper.to_surface_x(xs)
        surface_y = self.__mapper.to_surface_y(ys)
        for x, y in zip(surface_x, surface_y):
            if not (np.isfinite(x) and np.isfinite(y)):
                continue
            pg.draw.circle(
                self.__surface,
                self.__config.point_color,
                (float(x), float(y)),
                self.__config.point_radius,
            )

    def draw_line(self) -> None:
        """
        Draws the current fit from normalized x = 0 to x = 1.
        """
        slope, intercept = self.__engine.parameters
        x_norm = np.array([0.0, 1.0])
        x_scaled = self.__mapper.scale(x_norm, self.__geometry.width)
        y_scaled = slope * x_scaled + intercept
        surface_x = self.__mapper.to_surface_x(x_norm)
        surface_y = self.__mapper.scaled_to_surface_y(y_scaled)
        if not np.all(np.isfinite(surface_y)):
            return
        limit = self.__max_coordinate
        surface_x = np.clip(surface_x, -limit, limit)
        surface_y = np.clip(surface_y, -limit, limit)
        pg.draw.line(
            self.__surface,
            self.__config.line_color,
            (float(surface_x[0]), float(surface_y[0])),
            (float(surface_x[1]), float(surface_y[1])),
            self.__config.line_width,
        )

    def __handle_events(self, events: list[pg.event.Event]) -> None:
        for e in events:
            if e.type == pg.QUIT:
                self.stop()
            elif e.type == pg.KEYDOWN and e.key == pg.K_ESCAPE:
                self.stop()
            elif e.type == pg.VIDEORESIZE:
                self.resize(e.w, e.h)
