from .math_tools import MathTools
from .date_tools import DateTools
from .distance_converter import DistanceConverter
from .duration_converter import DurationConverter

__all__ = ["MathTools", "DateTools", "DistanceConverter", "DurationConverter"]
