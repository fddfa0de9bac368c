#  Copyright (c) Michele De Stefano - 2026.
__version__ = "0.1.0"

from .config import FitConfig
from .coordinates import CoordinateMapper, SurfaceGeometry
from .errors import LiveRegressionError, ResourceError, ShapeMismatchError
from .normalizer import normalize
from .regression import RegressionEngine
from .render_loop import RenderLoop
from .session import AnimationSession, Dataset, load_dataset, start_session
