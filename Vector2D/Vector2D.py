import math
from numbers import Real

from . import util


def _format_component(value: float) -> str:
	"""shortest float text, with whole numbers printed without the trailing '.0'"""
	text = repr(value)
	if text.endswith(".0"):
		text = text[:-2]
	return text


class Vector2D:
	"""
	Pure python 2D vector of floats.
	Every operation returns a new Vector2D; the receiver is never modified.
	Degenerate input (division by zero and the like) produces inf / nan instead of raising.
	"""

	__slots__ = ("x", "y")

	def __init__(self, x: float = 0.0, y: float = 0.0):
		if isinstance(x, tuple):
			self.x = float(x[0])
			self.y = float(x[1])
		else:
			self.x = float(x)
			self.y = float(y)

	# construction

	@classmethod
	def new(cls, x: float, y: float) -> "Vector2D":
		return cls(x, y)

	@classmethod
	def from_scalar(cls, value: float) -> "Vector2D":
		return cls(value, value)

	@classmethod
	def from_radians(cls, radians: float) -> "Vector2D":
		return cls(util.cos(radians), util.sin(radians))

	@classmethod
	def zero(cls) -> "Vector2D":
		return cls(0.0, 0.0)

	@classmethod
	def unit(cls) -> "Vector2D":
		"""(1, 1); note this is NOT a vector of length 1"""
		return cls(1.0, 1.0)

	def copy(self) -> "Vector2D":
		return Vector2D(self.x, self.y)

	# magnitude and distance

	def magnitude_squared(self) -> float:
		return self.x * self.x + self.y * self.y

	def magnitude(self) -> float:
		return math.sqrt(self.magnitude_squared())

	def distance(self, other: "Vector2D") -> float:
		"""
		squares the SUM of the componentwise differences, which is not the euclidean distance.
		see euclidean_distance()
		"""
		summed = (self.x - other.x) + (self.y - other.y)
		return math.sqrt(summed * summed)

	def euclidean_distance(self, other: "Vector2D") -> float:
		dx = self.x - other.x
		dy = self.y - other.y
		return math.sqrt(dx * dx + dy * dy)

	def dot(self, other: "Vector2D") -> float:
		return self.x * other.x + self.y * other.y

	# componentwise and scalar arithmetic

	def add(self, other: "Vector2D") -> "Vector2D":
		return Vector2D(self.x + other.x, self.y + other.y)

	def subtract(self, other: "Vector2D") -> "Vector2D":
		return Vector2D(self.x - other.x, self.y - other.y)

	def multiply(self, other: "Vector2D") -> "Vector2D":
		return Vector2D(self.x * other.x, self.y * other.y)

	def divide(self, other: "Vector2D") -> "Vector2D":
		return Vector2D(util.divide(self.x, other.x), util.divide(self.y, other.y))

	def multiply_scalar(self, scalar: float) -> "Vector2D":
		return Vector2D(self.x * scalar, self.y * scalar)

	def divide_scalar(self, scalar: float) -> "Vector2D":
		return Vector2D(util.divide(self.x, scalar), util.divide(self.y, scalar))

	# geometric transforms

	def reflect(self, normal: "Vector2D") -> "Vector2D":
		dot_product = self.dot(normal)
		return Vector2D(
			self.x - 2 * dot_product * normal.x,
			self.y - 2 * dot_product * normal.y
		)

	def normalize(self) -> "Vector2D":
		mag = self.magnitude()
		# exact comparison; nothing to divide in either case
		if mag == 0 or mag == 1:
			return self.copy()
		return self.divide_scalar(mag)

	def limit(self, maximum: float) -> "Vector2D":
		if self.magnitude_squared() <= maximum * maximum:
			return self.copy()
		return self.normalize().multiply_scalar(maximum)

	def angle(self) -> float:
		"""
		:return: radians, 0 along +x and increasing towards +y.
			Computed as -atan2(-y, x)
		"""
		return -1 * util.atan2(self.y * -1, self.x)

	def rotate(self, angle: float) -> "Vector2D":
		"""
		Note the y component is x·sin(a) - y·cos(a), which is not a true rotation.
		see rotate_standard()
		"""
		cos_a = util.cos(angle)
		sin_a = util.sin(angle)
		return Vector2D(
			self.x * cos_a - self.y * sin_a,
			self.x * sin_a - self.y * cos_a
		)

	def rotate_standard(self, angle: float) -> "Vector2D":
		"""counter-clockwise rotation by the standard rotation matrix"""
		cos_a = util.cos(angle)
		sin_a = util.sin(angle)
		return Vector2D(
			self.x * cos_a - self.y * sin_a,
			self.x * sin_a + self.y * cos_a
		)

	def angle_between(self, other: "Vector2D") -> float:
		"""
		Evaluates dot / |self| * |other| (multiplied by |other|, not divided),
		then returns pi for results <= -1, 0 for results >= 0, and the raw value otherwise.
		see angle_between_acos() for the actual angle between two vectors
		"""
		raw = util.divide(self.dot(other), self.magnitude()) * other.magnitude()
		if raw <= -1:
			return math.pi
		if raw >= 0:
			return 0.0
		return raw

	def angle_between_acos(self, other: "Vector2D") -> float:
		"""
		:return: radians in [0, pi]; nan if either vector has zero length
		"""
		cosine = util.divide(self.dot(other), self.magnitude() * other.magnitude())
		if math.isnan(cosine):
			return cosine
		return math.acos(util.clamp_float(cosine, -1.0, 1.0))

	# interpolation, mapping and clamping

	def linear_interpolate_to_vector(self, other: "Vector2D", amount: float) -> "Vector2D":
		return Vector2D(
			util.linear_interpolate(self.x, other.x, amount),
			util.linear_interpolate(self.y, other.y, amount)
		)

	def map_to_scalars(self, old_min: float, old_max: float, new_min: float, new_max: float) -> "Vector2D":
		return Vector2D(
			util.map_float(self.x, old_min, old_max, new_min, new_max),
			util.map_float(self.y, old_min, old_max, new_min, new_max)
		)

	def map_to_vectors(self, old_min: "Vector2D", old_max: "Vector2D", new_min: "Vector2D", new_max: "Vector2D") -> "Vector2D":
		return Vector2D(
			util.map_float(self.x, old_min.x, old_max.x, new_min.x, new_max.x),
			util.map_float(self.y, old_min.y, old_max.y, new_min.y, new_max.y)
		)

	def clamp_to_scalars(self, minimum: float, maximum: float) -> "Vector2D":
		return Vector2D(
			util.clamp_float(self.x, minimum, maximum),
			util.clamp_float(self.y, minimum, maximum)
		)

	def clamp_to_vectors(self, minimum: "Vector2D", maximum: "Vector2D") -> "Vector2D":
		return Vector2D(
			util.clamp_float(self.x, minimum.x, maximum.x),
			util.clamp_float(self.y, minimum.y, maximum.y)
		)

	def floor(self) -> "Vector2D":
		return Vector2D(util.floor(self.x), util.floor(self.y))

	def negate(self) -> "Vector2D":
		return self.multiply_scalar(-1)

	# python protocol

	def __copy__(self):
		return self.copy()

	def __iter__(self):
		yield self.x
		yield self.y

	def __eq__(self, other):
		if type(other) is not Vector2D:
			return NotImplemented
		return self.x == other.x and self.y == other.y

	def __hash__(self):
		return hash((self.x, self.y))

	def __repr__(self):
		return f"Vector2D({self.x:.2f}, {self.y:.2f})"

	def __str__(self):
		"""
		x:y using python float text, so non-finite components print as nan, inf and -inf
		and very large or small values use exponent notation (1e+16)
		"""
		return f"{_format_component(self.x)}:{_format_component(self.y)}"

	def __add__(self, other):
		if type(other) is not Vector2D:
			return NotImplemented
		return self.add(other)

	def __sub__(self, other):
		if type(other) is not Vector2D:
			return NotImplemented
		return self.subtract(other)

	def __mul__(self, other):
		if type(other) is Vector2D:
			return self.multiply(other)
		if isinstance(other, Real):
			return self.multiply_scalar(other)
		return NotImplemented

	def __rmul__(self, other):
		if isinstance(other, Real):
			return self.multiply_scalar(other)
		return NotImplemented

	def __truediv__(self, other):
		if type(other) is Vector2D:
			return self.divide(other)
		if isinstance(other, Real):
			return self.divide_scalar(other)
		return NotImplemented

	def __neg__(self):
		return self.negate()

	def __pos__(self):
		return self.copy()
