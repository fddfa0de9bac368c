#  Copyright (c) Michele De Stefano - 2026.
import pygame as pg

from .config import FitConfig
from .coordinates import SurfaceGeometry


class Chrome:
    """
    Static parts of the chart: background, axes, ticks and axis labels.
    """

    __num_tick_steps: int = 15
    __tick_width: int = 2
    __tick_length: int = 15
    __font_size: int = 24

    __config: FitConfig
    __x_label: str
    __y_label: str
    __font: pg.font.Font | None

    def __init__(self, config: FitConfig, x_label: str = "X", y_label: str = "Y"):
        self.__config = config
        self.__x_label = x_label
        self.__y_label = y_label
        self.__font = None

    @property
    def labels(self) -> tuple[str, str]:
        return self.__x_label, self.__y_label

    def draw(self, surface: pg.Surface, geometry: SurfaceGeometry) -> None:
        """
        Clears the surface and draws all the static parts.
        """
        surface.fill(self.__config.background_color)
        self.__draw_axes(surface, geometry)
        self.__draw_ticks(surface, geometry)
        self.__draw_labels(surface, geometry)

    def __draw_axes(self, surface: pg.Surface, geometry: SurfaceGeometry) -> None:
        m = geometry.margin
        origin = (m, geometry.height - m)
        pg.draw.line(
            surface,
            self.__config.axis_color,
            origin,
            (geometry.width - m, geometry.height - m),
            self.__config.line_width,
        )
        pg.draw.line(
            surface,
            self.__config.axis_color,
            origin,
            (m, m),
            self.__config.line_width,
        )

    def __draw_ticks(self, surface: pg.Surface, geometry: SurfaceGeometry) -> None:
        step_x = geometry.width / self.__num_tick_steps
        step_y = geometry.height / self.__num_tick_steps
        half_width = self.__tick_width / 2
        half_length = self.__tick_length / 2
        for i in range(1, self.__num_tick_steps):
            x = i * step_x
            y = i * step_y
            surface.fill(
                self.__config.axis_color,
                pg.Rect(
                    round(x - half_width),
                    round(geometry.height - geometry.margin - half_length),
                    self.__tick_width,
                    self.__tick_length,
                ),
            )
            surface.fill(
                self.__config.axis_color,
                pg.Rect(
                    round(geometry.margin - half_length),
                    round(y - half_width),
                    self.__tick_length,
                    self.__tick_width,
                ),
            )

    def __draw_labels(self, surface: pg.Surface, geometry: SurfaceGeometry) -> None:
        if self.__font is None:
            self.__font = pg.font.Font(None, self.__font_size)
        half_margin = geometry.margin / 2

        x_text = self.__font.render(self.__x_label, True, self.__config.label_color)
        surface.blit(
            x_text,
            x_text.get_rect(
                center=(
                    round(geometry.width / 2),
                    round(geometry.height - half_margin),
                )
            ),
        )

        # Y label reads bottom to top
        y_text = pg.transform.rotate(
            self.__font.render(self.__y_label, True, self.__config.label_color),
            90,
        )
        surface.blit(
            y_text,
            y_text.get_rect(
                center=(round(half_margin), round(geometry.height / 2))
            ),
        )
