import logging
from typing import List, Optional

import shapely.geometry
import shapely.geometry.multilinestring
import shapely.ops

from .Vector2D import Vector2D
from .util import interpolate_angles

log = logging.getLogger(__name__)

START = "START"
END = "END"


def from_point(point: shapely.geometry.Point) -> Vector2D:
	return Vector2D(point.x, point.y)


def to_point(vector: Vector2D) -> shapely.geometry.Point:
	return shapely.geometry.Point(vector.x, vector.y)


def _line_parts(geometry) -> list:
	"""
	the line as a list of single-part lines, in input order.
	A MultiLineString is merged first; parts that do not join stay separate
	"""
	if type(geometry) is not shapely.geometry.multilinestring.MultiLineString:
		return [geometry]
	merged = shapely.ops.linemerge(geometry)
	if type(merged) is shapely.geometry.LineString:
		return [merged]
	log.debug("multi-part line %s does not merge into a single line", geometry.wkt)
	return list(geometry.geoms)


def vectors_from_line(geometry) -> List[Vector2D]:
	"""
	:param geometry: LineString, or a MultiLineString which is merged first.
		Parts that cannot be merged contribute their vertices one after another
	:returns: one Vector2D per vertex
	"""
	return [
		Vector2D(coord[0], coord[1])
		for part in _line_parts(geometry)
		for coord in part.coords
	]


def line_direction(geometry, start_end: str = START) -> Optional[float]:
	"""
	:param geometry: LineString or MultiLineString. When a MultiLineString does not merge into
		one line, the first part is used for the "START" and the last part for the "END"
	:param start_end: find the direction at the "START" or the "END" of the line
	:returns: radians, or None when the line has fewer than two vertices
	"""
	if start_end not in (START, END):
		raise ValueError(f"start_end parameter must have a value of '{START}' or '{END}', got {start_end!r}")

	parts = _line_parts(geometry)
	if not parts:
		vertices = []
	elif start_end == START:
		vertices = vectors_from_line(parts[0])
	else:
		vertices = vectors_from_line(parts[-1])
	if len(vertices) < 2:
		log.debug("line with %d vertices has no direction", len(vertices))
		return None
	elif len(vertices) == 2:
		a, b = vertices
		return (b - a).angle()

	if start_end == START:
		a, b, c = vertices[:3]
	else:
		a, b, c = vertices[-3:]

	ab = b - a
	bc = c - b
	weight_ab = ab.magnitude()
	weight_bc = bc.magnitude()
	weight_sum = weight_ab + weight_bc
	if weight_sum == 0:
		log.debug("line %s has coincident vertices at its %s", geometry.wkt, start_end)
		return ab.angle()

	return interpolate_angles(ab.angle(), bc.angle(), weight_bc / weight_sum)
