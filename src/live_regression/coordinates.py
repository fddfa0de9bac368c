#  Copyright (c) Michele De Stefano - 2026.
from dataclasses import dataclass

import numpy as np

from .config import FitConfig


@dataclass
class SurfaceGeometry:
    """
    Size of the drawing surface and the border margin kept on every side.
    """

    width: int
    height: int
    margin: float

    @classmethod
    def from_size(cls, size: tuple[int, int], config: FitConfig) -> "SurfaceGeometry":
        return cls(width=size[0], height=size[1], margin=config.margin)


class CoordinateMapper:
    """
    Maps normalized data values to surface pixels and back.

    The same scale function is used for plotting points, plotting the fit
    line and computing the regression step, so the line always lines up
    with the points.
    """

    __config: FitConfig
    __geometry: SurfaceGeometry

    def __init__(self, config: FitConfig, geometry: SurfaceGeometry) -> None:
        """
        Constructor.

        Args:
            config:     The session configuration (amplification constant).

            geometry:   The surface geometry. It is read at every call, so a
                        resize is reflected by subsequent mappings.
        """
        self.__config = config
        self.__geometry = geometry

    @property
    def geometry(self) -> SurfaceGeometry:
        return self.__geometry

    def scale(
        self, normalized_value: float | np.ndarray, axis_extent: float
    ) -> float | np.ndarray:
        """
        Converts a normalized value to scaled space (no margin offset).

        Args:
            normalized_value:   Scalar or array of normalized values.

            axis_extent:        Width or height of the surface.
        """
        usable_extent = axis_extent - 2 * self.__geometry.margin
        return normalized_value * usable_extent * self.__config.amplification

    def unscale(
        self, scaled_value: float | np.ndarray, axis_extent: float
    ) -> float | np.ndarray:
        usable_extent = axis_extent - 2 * self.__geometry.margin
        return scaled_value / (usable_extent * self.__config.amplification)

    def to_surface_x(self, normalized_x: float | np.ndarray) -> float | np.ndarray:
        return self.__geometry.margin + self.scale(
            normalized_x, self.__geometry.width
        )

    def to_surface_y(self, normalized_y: float | np.ndarray) -> float | np.ndarray:
        # Surface origin is top-left, data Y grows upwards
        return self.scaled_to_surface_y(
            self.scale(normalized_y, self.__geometry.height)
        )

    def scaled_to_surface_y(
        self, scaled_y: float | np.ndarray
    ) -> float | np.ndarray:
        return self.__geometry.height - self.__geometry.margin - scaled_y

    def from_surface_x(self, surface_x: float | np.ndarray) -> float | np.ndarray:
        return self.unscale(
            surface_x - self.__geometry.margin, self.__geometry.width
        )

    def from_surface_y(self, surface_y: float | np.ndarray) -> float | np.ndarray:
        return self.unscale(
            self.__geometry.height - self.__geometry.margin - surface_y,
            self.__geometry.height,
        )
