"""Forward/inverse matrices for the two hex tilings."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from math import sqrt


@dataclass(frozen=True)
class OrientationMatrix:
    f0: float; f1: float; f2: float; f3: float  # axial(q,r) -> pixel
    b0: float; b1: float; b2: float; b3: float  # pixel -> axial
    start_angle: float                           # first corner, in sixths of a turn
    arc_left_angle: float                        # incident edges at corner 0
    arc_right_angle: float


class Orientation(Enum):
    """The pointy-top and flat-top tilings. No other orientations exist."""

    POINTY = OrientationMatrix(
        f0=sqrt(3.0), f1=sqrt(3.0) / 2.0,
        f2=0.0,       f3=3.0 / 2.0,
        b0=sqrt(3.0) / 3.0, b1=-1.0 / 3.0,
        b2=0.0,             b3=2.0 / 3.0,
        start_angle=0.5,
        arc_left_angle=2.5,
        arc_right_angle=-1.5,
    )
    FLAT = OrientationMatrix(
        f0=3.0 / 2.0,       f1=0.0,
        f2=sqrt(3.0) / 2.0, f3=sqrt(3.0),
        b0=2.0 / 3.0,  b1=0.0,
        b2=-1.0 / 3.0, b3=sqrt(3.0) / 3.0,
        start_angle=0.0,
        arc_left_angle=2.0,
        arc_right_angle=-2.0,
    )

    @property
    def f(self) -> tuple[float, float, float, float]:
        m = self.value
        return m.f0, m.f1, m.f2, m.f3

    @property
    def b(self) -> tuple[float, float, float, float]:
        m = self.value
        return m.b0, m.b1, m.b2, m.b3

    @property
    def start_angle(self) -> float:
        return self.value.start_angle

    @property
    def arc_angles(self) -> tuple[float, float]:
        return self.value.arc_left_angle, self.value.arc_right_angle

    @property
    def is_flat(self) -> bool:
        return self is Orientation.FLAT

    @staticmethod
    def from_value(value: "Orientation | str") -> "Orientation":
        """Return the matching orientation for a member or a case-insensitive name."""

        if isinstance(value, Orientation):
            return value
        if isinstance(value, str):
            try:
                return Orientation[value.strip().upper()]
            except KeyError:
                pass
        raise ValueError(f"Unknown orientation {value!r}; expected 'pointy' or 'flat'")
