"""Fire ellipse geometry and line intersection."""

from firetrace.geometry.ellipse import FireEllipse
from firetrace.geometry.intersection import ellipse_line_intersection

__all__ = ["FireEllipse", "ellipse_line_intersection"]
