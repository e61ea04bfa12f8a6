"""
Evapotranspiration (ET) estimation module.
Implements a simplified Hargreaves-Samani ET₀ with a UV-index radiation proxy.
"""

import math

import numpy as np

HARGREAVES_COEFF = 0.0023
HARGREAVES_OFFSET = 17.8
RA_PER_UV_UNIT = 15 / 10  # MJ/m²/day per UV index step


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round .5 away from -inf, like a browser's Math.round."""
    scale = 10 ** ndigits
    return math.floor(value * scale + 0.5) / scale


def radiation_proxy(uv_index: float) -> float:
    """
    Approximate extraterrestrial radiation (Ra) from the UV index.

    Stands in for the latitude / day-of-year solar geometry; irrigation
    score thresholds are tuned against this proxy.
    """
    return uv_index * RA_PER_UV_UNIT


def compute_et0_uv_proxy(temp_max_c: float, temp_min_c: float, uv_index: float) -> float:
    """
    Compute reference evapotranspiration (ET₀) in mm/day.

    ET₀ = max(0, 0.0023 × (Tmean + 17.8) × √|Tmax − Tmin| × Ra)
    """
    t_mean = (temp_max_c + temp_min_c) / 2
    t_range = temp_max_c - temp_min_c
    ra = radiation_proxy(uv_index)
    et0 = HARGREAVES_COEFF * (t_mean + HARGREAVES_OFFSET) * np.sqrt(abs(t_range)) * ra
    return float(max(0.0, et0))


def compute_et0_mm(temp_max_c: float, temp_min_c: float, uv_index: float) -> float:
    """ET₀ rounded to one decimal, as shown to farmers."""
    return round_half_up(compute_et0_uv_proxy(temp_max_c, temp_min_c, uv_index), 1)
