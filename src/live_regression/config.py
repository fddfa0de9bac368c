#  Copyright (c) Michele De Stefano - 2026.
import dataclasses
from dataclasses import dataclass


@dataclass(frozen=True)
class FitConfig:
    """
    Tunable constants of a fitting session.

    The learning rates are tuned against the amplification constant: the
    slope gradient grows with the square of the amplification, while the
    intercept curvature does not depend on it. Use with_amplification for
    changing the amplification without making the descent diverge.
    """

    margin: float = 30.0
    amplification: float = 500.0
    point_radius: int = 2
    slope_learning_rate: float = 5e-8
    intercept_learning_rate: float = 5e-8 * 5e5
    min_tick_delay_ms: int = 1
    fps: int = 60
    window_size: tuple[int, int] = (800, 600)
    line_width: int = 2
    background_color: tuple[int, int, int] = (0, 0, 0)
    axis_color: tuple[int, int, int] = (255, 255, 255)
    label_color: tuple[int, int, int] = (255, 0, 0)
    point_color: tuple[int, int, int] = (255, 255, 0)
    line_color: tuple[int, int, int] = (0, 255, 255)

    def with_amplification(self, amplification: float) -> "FitConfig":
        """
        Returns a copy with a different amplification and a slope learning
        rate rescaled accordingly.

        Args:
            amplification:  The new display-amplification constant.
        """
        ratio = self.amplification / amplification
        return dataclasses.replace(
            self,
            amplification=amplification,
            slope_learning_rate=self.slope_learning_rate * ratio**2,
        )
