"""Distances and coordinate conversions on the WGS84 ellipsoid."""

from __future__ import annotations

import math

EARTH_RADIUS = 6_378_137.0
SIMULATION_EARTH_RADIUS = 1.0
SCALE_FACTOR = SIMULATION_EARTH_RADIUS / EARTH_RADIUS

WGS84_A = EARTH_RADIUS
WGS84_E = 0.0818191908426
_WGS84_F = 1 / 298.257223563
_WGS84_B = 6_356_752.314245

_ITERATION_LIMIT = 100
_TOLERANCE = 1e-12


def vincenty_distance(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Geodesic distance in metres between two points given in degrees.

    Raises ValueError when the iteration does not converge (nearly antipodal points).
    """
    a, b, f = WGS84_A, _WGS84_B, _WGS84_F
    big_l = math.radians(lon2 - lon1)
    u1 = math.atan((1 - f) * math.tan(math.radians(lat1)))
    u2 = math.atan((1 - f) * math.tan(math.radians(lat2)))
    sin_u1, cos_u1 = math.sin(u1), math.cos(u1)
    sin_u2, cos_u2 = math.sin(u2), math.cos(u2)

    lam = big_l
    for _ in range(_ITERATION_LIMIT):
        sin_lam, cos_lam = math.sin(lam), math.cos(lam)
        sin_sigma = math.hypot(
            cos_u2 * sin_lam, cos_u1 * sin_u2 - sin_u1 * cos_u2 * cos_lam
        )
        if sin_sigma == 0.0:
            return 0.0
        cos_sigma = sin_u1 * sin_u2 + cos_u1 * cos_u2 * cos_lam
        sigma = math.atan2(sin_sigma, cos_sigma)
        sin_alpha = cos_u1 * cos_u2 * sin_lam / sin_sigma
        cos_sq_alpha = 1 - sin_alpha * sin_alpha
        cos_2sigma_m = (
            cos_sigma - 2 * sin_u1 * sin_u2 / cos_sq_alpha if cos_sq_alpha != 0 else 0.0
        )
        c = f / 16 * cos_sq_alpha * (4 + f * (4 - 3 * cos_sq_alpha))
        previous = lam
        lam = big_l + (1 - c) * f * sin_alpha * (
            sigma
            + c
            * sin_sigma
            * (cos_2sigma_m + c * cos_sigma * (-1 + 2 * cos_2sigma_m * cos_2sigma_m))
        )
        if abs(lam - previous) <= _TOLERANCE:
            break
    else:
        raise ValueError("Vincenty formula failed to converge")

    u_sq = cos_sq_alpha * (a * a - b * b) / (b * b)
    big_a = 1 + u_sq / 16384 * (4096 + u_sq * (-768 + u_sq * (320 - 175 * u_sq)))
    big_b = u_sq / 1024 * (256 + u_sq * (-128 + u_sq * (74 - 47 * u_sq)))
    delta_sigma = (
        big_b
        * sin_sigma
        * (
            cos_2sigma_m
            + big_b
            / 4
            * (
                cos_sigma * (-1 + 2 * cos_2sigma_m * cos_2sigma_m)
                - big_b
                / 6
                * cos_2sigma_m
                * (-3 + 4 * sin_sigma * sin_sigma)
                * (-3 + 4 * cos_2sigma_m * cos_2sigma_m)
            )
        )
    )
    return b * big_a * (sigma - delta_sigma)


def wgs84_to_xyz(lat: float, lon: float, alt: float) -> tuple[float, float, float]:
    """Convert degrees and metres of altitude to a right-handed, Y-up point in metres."""
    lat_rad = math.radians(lat)
    lon_rad = math.radians(-lon)
    e2 = WGS84_E**2
    n = WGS84_A / math.sqrt(1.0 - e2 * math.sin(lat_rad) ** 2)

    x = (n + alt) * math.cos(lat_rad) * math.cos(lon_rad)
    y = (n + alt) * math.cos(lat_rad) * math.sin(lon_rad)
    z = ((1.0 - e2) * n + alt) * math.sin(lat_rad)
    return (x, z, y)