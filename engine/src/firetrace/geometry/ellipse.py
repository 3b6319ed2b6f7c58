"""Fire ellipse geometry.

A fire ellipse is a regular ellipse defined by its total length, total
width, heading direction and time since ignition, with the ignition point
at the rear focus and placed at the origin [0, 0]. Fire spreads fastest
toward the head vertex and slowest toward the back vertex.

References:
    - Alexander, M.E. (1985). Estimating the length-to-breadth ratio
      of elliptical forest fire patterns.
    - Anderson, H.E. (1983). Predicting wind-driven wild land fire size
      and shape. Research Paper INT-305.
"""

from __future__ import annotations

import math

from firetrace.exceptions import InvalidGeometry
from firetrace.geometry.trig import azimuth_of, caz2rot, rotate_point


def calculate_length_to_breadth_ratio(wind_speed: float) -> float:
    """Length-to-breadth ratio of a wind-driven fire ellipse.

    LBR = 1 + 8.729 * (1 - exp(-0.030 * ws))^2.155, with ws in km/h.
    Callers holding midflame wind in ft/min convert it first.

    Args:
        wind_speed: Wind speed in km/h

    Returns:
        Length-to-breadth ratio (>=1.0).
    """
    if wind_speed <= 0.0:
        return 1.0
    return 1.0 + 8.729 * (1.0 - math.exp(-0.030 * wind_speed)) ** 2.155


def calculate_eccentricity(lbr: float) -> float:
    """Eccentricity e = sqrt(1 - 1/LBR^2); 0 for a circle, below 1 otherwise."""
    if lbr <= 1.0:
        return 0.0
    return math.sqrt(1.0 - 1.0 / (lbr * lbr))


def calculate_back_ros(head_ros: float, lbr: float) -> float:
    """Backing rate of spread for a fire ignited at the ellipse focus.

    back_ros = head_ros * (1 - e) / (1 + e)
    """
    e = calculate_eccentricity(lbr)
    return head_ros * (1.0 - e) / (1.0 + e)


def calculate_flank_ros(head_ros: float, lbr: float) -> float:
    """Flanking rate of spread (the ellipse semi-minor axis growth rate).

    flank_ros = (head_ros + back_ros) / (2 * LBR)
    """
    lbr = max(lbr, 1.0)
    return (head_ros + calculate_back_ros(head_ros, lbr)) / (2.0 * lbr)


class FireEllipse:
    """Immutable fire ellipse with the ignition point at the origin.

    Distances are in world units, angles of the public API are compass
    degrees clockwise from north unless noted, and rates are distances
    divided by the time since ignition.
    """

    def __init__(
        self,
        length: float,
        width: float,
        heading: float = 0.0,
        time: float = 1.0,
    ):
        if length <= 0 or width <= 0:
            raise InvalidGeometry(
                f"fire ellipse length and width must be positive, got {length} x {width}"
            )
        if width > length:
            length, width = width, length
        self._a = length / 2.0  # semi-major axis
        self._b = width / 2.0  # semi-minor axis
        self._c = math.sqrt(max(0.0, self._a * self._a - self._b * self._b))
        self._e = self._c / self._a
        self._g = self._a - self._c  # backing distance
        self._h = 2.0 * self._a - self._g  # heading distance
        self._time = time
        self._heading = heading
        self._rot = caz2rot(heading) * math.pi / 180.0
        self._center = rotate_point(self._a - self._g, 0.0, 0.0, 0.0, self._rot)
        self._head = rotate_point(self._h, 0.0, 0.0, 0.0, self._rot)
        self._back = rotate_point(-self._g, 0.0, 0.0, 0.0, self._rot)

    @classmethod
    def from_spread_rate(
        cls, head_rate: float, lwr: float, heading: float = 0.0, time: float = 1.0
    ) -> FireEllipse:
        """Build the ellipse grown from a head spread rate and length-to-width ratio."""
        x = lwr * lwr - 1.0
        e = math.sqrt(x) / lwr if x > 0 else 0.0
        back_rate = head_rate * (1.0 - e) / (1.0 + e)
        length = time * (head_rate + back_rate)
        return cls(length, length / lwr, heading, time)

    def __repr__(self) -> str:
        return (
            f"FireEllipse(length={self.length!r}, width={self.width!r}, "
            f"heading={self._heading!r}, time={self._time!r})"
        )

    @property
    def a(self) -> float:
        return self._a

    @property
    def b(self) -> float:
        return self._b

    @property
    def c(self) -> float:
        """Distance from the center to either focus."""
        return self._c

    @property
    def e(self) -> float:
        return self._e

    @property
    def g(self) -> float:
        return self._g

    @property
    def length(self) -> float:
        return 2.0 * self._a

    @property
    def width(self) -> float:
        return 2.0 * self._b

    @property
    def lwr(self) -> float:
        return self._a / self._b

    @property
    def head_dist(self) -> float:
        return self._h

    @property
    def back_dist(self) -> float:
        return self._g

    @property
    def flank_dist(self) -> float:
        return self._b

    @property
    def head_rate(self) -> float:
        return self._h / self._time

    @property
    def back_rate(self) -> float:
        return self._g / self._time

    @property
    def flank_rate(self) -> float:
        return self._b / self._time

    @property
    def time(self) -> float:
        return self._time

    @property
    def heading(self) -> float:
        """Heading in compass degrees."""
        return self._heading

    @property
    def heading_radians(self) -> float:
        return self._heading * math.pi / 180.0

    @property
    def rotation(self) -> float:
        """Geometric rotation in radians, counter-clockwise from east."""
        return self._rot

    @property
    def center(self) -> tuple[float, float]:
        return self._center

    @property
    def head(self) -> tuple[float, float]:
        return self._head

    @property
    def back(self) -> tuple[float, float]:
        return self._back

    @property
    def ignition(self) -> tuple[float, float]:
        return 0.0, 0.0

    def beta_ratio(self, beta: float) -> float:
        """Ratio of the ignition-to-perimeter distance at `beta` radians
        clockwise from the heading to the heading distance."""
        if abs(beta) == 0:
            return 1.0
        return (1.0 - self._e) / (1.0 - self._e * math.cos(beta))

    def beta_dist_to_perimeter(self, beta: float) -> float:
        return self.beta_ratio(beta) * self._h

    def beta_rate(self, beta: float) -> float:
        return self.beta_dist_to_perimeter(beta) / self._time

    def beta_degrees_to_point(self, x: float, y: float) -> float:
        """Degrees clockwise from the heading to the bearing of (x, y)."""
        return (360.0 + (azimuth_of(x, y) - self._heading)) % 360.0

    def beta_radians_to_point(self, x: float, y: float) -> float:
        return math.radians(self.beta_degrees_to_point(x, y))

    def beta_ratio_to_point(self, x: float, y: float) -> float:
        return self.beta_ratio(self.beta_radians_to_point(x, y))

    def beta_time_to_point(self, x: float, y: float) -> float:
        """Fire arrival time from the ignition point to (x, y)."""
        rate = self.beta_ratio_to_point(x, y) * self._h / self._time
        return math.hypot(x, y) / rate

    def contains_point(self, px: float, py: float, buffer: float = 0.0) -> bool:
        """True if (px, py) lies within the perimeter shrunk by `buffer`.

        With a zero buffer, points on the perimeter are inside.
        """
        cx, cy = self._center
        x, y = rotate_point(px - cx, py - cy, 0.0, 0.0, -self._rot)
        rx = x / self._a
        ry = y / self._b
        return rx * rx + ry * ry <= 1.0 - buffer

    def perimeter(self) -> float:
        """Approximate perimeter length (series expansion in (a-b)/(a+b))."""
        xm = (self._a - self._b) / (self._a + self._b)
        xk = 1.0 + xm * xm / 4.0 + xm**4 / 64.0
        return math.pi * (self._a + self._b) * xk

    def perimeter_point_at(self, theta: float) -> tuple[float, float]:
        """Perimeter point at parametric angle `theta` (radians) from the center."""
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        phi = self.heading_radians
        cos_p = math.cos(phi)
        sin_p = math.sin(phi)
        cx, cy = self._center
        x = self._a * cos_t * cos_p - self._b * sin_t * sin_p + cx
        y = self._a * cos_t * sin_p + self._b * sin_t * cos_p + cy
        return x, y
