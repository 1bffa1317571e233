import math

import numpy as np


def divide(a: float, b: float) -> float:
	"""
	float division following IEEE-754 rather than python's ZeroDivisionError
	:returns: inf, -inf or nan where b == 0
	"""
	with np.errstate(divide="ignore", invalid="ignore"):
		return float(np.divide(np.float64(a), np.float64(b)))


def cos(radians: float) -> float:
	with np.errstate(invalid="ignore"):
		return float(np.cos(np.float64(radians)))


def sin(radians: float) -> float:
	with np.errstate(invalid="ignore"):
		return float(np.sin(np.float64(radians)))


def atan2(y: float, x: float) -> float:
	return float(np.arctan2(np.float64(y), np.float64(x)))


def floor(value: float) -> float:
	"""math.floor returns an int and chokes on inf and nan; this one stays a float"""
	return float(np.floor(np.float64(value)))


def linear_interpolate(start: float, end: float, amount: float) -> float:
	# amount is not clamped; values outside 0..1 extrapolate
	return start + (end - start) * amount


def map_float(value: float, old_min: float, old_max: float, new_min: float, new_max: float) -> float:
	return new_min + (new_max - new_min) * divide(value - old_min, old_max - old_min)


def clamp_float(value: float, minimum: float, maximum: float) -> float:
	# ordered comparisons; if minimum > maximum the minimum wins
	if value <= minimum:
		return minimum
	if value >= maximum:
		return maximum
	return value


def angle_difference(a: float, b: float) -> float:
	"""in radians"""
	diff = b - a
	if not math.isfinite(diff):
		return diff
	# wrapped into [-pi, pi]
	return math.remainder(diff, math.pi * 2)


def interpolate_angles(a: float, b: float, t: float) -> float:
	"""in radians"""
	return a + angle_difference(a, b) * t


def radians_to_degrees(radians: float) -> float:
	if radians is None:
		return None
	return radians / math.pi * 180.0


def opposite_angle(radians: float) -> float:
	return angle_difference(math.pi, radians)
