"""Point and rectangle value types consumed by the transform bridge."""

from geomat.geom.point import Point2D, Point3D
from geomat.geom.rect import Rectangle

__all__ = ["Point2D", "Point3D", "Rectangle"]
