from .Vector2D import Vector2D
from .util import angle_difference, interpolate_angles, opposite_angle, radians_to_degrees

__version__ = "1.0.0"
