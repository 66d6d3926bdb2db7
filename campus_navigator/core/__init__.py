"""Core foundation classes for geodesic calculations.

- GeoCalculator: distances (haversine, flat-earth, manhattan), bearings, midpoints
"""

from campus_navigator.core.geo_calculator import GeoCalculator

__all__ = [
    "GeoCalculator",
]
