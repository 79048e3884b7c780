from __future__ import annotations

from typing import TYPE_CHECKING

from math import pi
import numpy as np

if TYPE_CHECKING:
    from numpy import typing as npt


def deg2rad(degrees: float) -> float:
    return degrees * pi / 180


def arc_sweep(start_deg: float, end_deg: float, *, clockwise: bool = False) -> float:
    """
    Signed angular sweep from `start_deg` to `end_deg`, in degrees.

    Args:
        start_deg: Start angle.
        end_deg: End angle.
        clockwise: If True, the sweep runs toward decreasing angles and the
            result lies in (-360, 0]; otherwise it lies in [0, 360).

    Returns:
        The sweep in degrees. Equal angles (modulo 360) give 0.
    """
    if clockwise:
        return -((start_deg - end_deg) % 360.0)
    return (end_deg - start_deg) % 360.0


def arc_points(
    C: tuple[float, float],
    r: float,
    start_deg: float,
    end_deg: float,
    *,
    clockwise: bool = False,
    n_points: int = 100
    ) -> npt.NDArray[np.float64]:
    """
    Generate points along a circular arc around center C.

    Args:
        C: Circle center (cx, cy).
        r: Circle radius. Zero gives `n_points` copies of the center.
        start_deg: Start angle in degrees (0 = +x, 90 = +y).
        end_deg: End angle in degrees.
        clockwise: Direction of the sweep, see `arc_sweep`.
        n_points: Number of points to generate along the arc (including endpoints).

    Returns:
        Array of shape (n_points, 2) containing the (x, y) coordinates of the points along the arc.
    """
    cx, cy = C
    sweep = arc_sweep(start_deg, end_deg, clockwise=clockwise)

    angles = np.deg2rad(np.linspace(start_deg, start_deg + sweep, n_points))

    x = cx + r * np.cos(angles)
    y = cy + r * np.sin(angles)

    return np.column_stack((x, y))


def quad_curve_points(
    P0: tuple[float, float],
    P1: tuple[float, float],
    P2: tuple[float, float],
    *,
    n_points: int = 17
    ) -> npt.NDArray[np.float64]:
    """
    Sample a quadratic Bezier curve B(t) = (1-t)^2 P0 + 2(1-t)t P1 + t^2 P2.

    Args:
        P0: Start point.
        P1: Control point.
        P2: End point.
        n_points: Number of samples, including both end points.

    Returns:
        Array of shape (n_points, 2).
    """
    t = np.linspace(0.0, 1.0, n_points)[:, None]
    p0, p1, p2 = (np.asarray(p, dtype=np.float64) for p in (P0, P1, P2))
    return (1 - t) ** 2 * p0 + 2 * (1 - t) * t * p1 + t ** 2 * p2
