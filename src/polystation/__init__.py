"""Polystation - Offset and station of points along a polyline.

Polystation is a small linear-referencing toolkit: given an ordered chain of
connected line segments (a polyline) and a query point, it finds the point's
offset (perpendicular distance to the nearest segment the point projects onto)
and its station (distance travelled along the polyline to that projection).

Example:
    $ polystation vertices.csv --point 160,-50

This reads the polyline vertices from vertices.csv and prints the offset and
station of the point (160, -50).
"""

__version__ = "0.1.0"
__author__ = "Polystation contributors"

__all__ = ["__author__", "__version__"]
