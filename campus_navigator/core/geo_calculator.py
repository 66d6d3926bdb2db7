"""Geodesic calculations on Earth's surface.

Provides geographic helper functions for campus routing:
- Distance calculation (Haversine formula)
- Flat-earth distances (Euclidean and Manhattan) used as A* heuristics
- Bearing calculation (initial heading between points) and compass names
- Midpoint and destination points on the great circle

Haversine uses the WGS84 spherical Earth approximation (R = 6,371 km).
The flat-earth functions project degrees to meters with a fixed
~111 km/degree factor and are only meaningful over campus-sized areas.
"""

from math import asin, atan2, cos, degrees, radians, sin, sqrt

from campus_navigator.constants import GeoConfig

EARTH_RADIUS_M = GeoConfig.EARTH_RADIUS_M

COMPASS_POINTS = (
    "N", "NNE", "NE", "ENE", "E", "ESE", "SE", "SSE",
    "S", "SSW", "SW", "WSW", "W", "WNW", "NW", "NNW",
)  # fmt: skip


class GeoCalculator:
    """Static methods for geodesic calculations on Earth's surface.

    Coordinates are in decimal degrees (WGS84).
    Bearings are in degrees clockwise from North (0-360).
    Distances are in meters.
    """

    EARTH_RADIUS_M = EARTH_RADIUS_M

    @staticmethod
    def haversine_distance_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Calculate great-circle distance between two points using Haversine formula.

        Args:
            lat1: Latitude of first point (decimal degrees)
            lon1: Longitude of first point (decimal degrees)
            lat2: Latitude of second point (decimal degrees)
            lon2: Longitude of second point (decimal degrees)

        Returns:
            Distance in meters.
        """
        dlat = radians(lat2 - lat1)
        dlon = radians(lon2 - lon1)
        a = sin(dlat / 2) ** 2 + cos(radians(lat1)) * cos(radians(lat2)) * sin(dlon / 2) ** 2
        return EARTH_RADIUS_M * 2 * atan2(sqrt(a), sqrt(1 - a))

    @staticmethod
    def flat_earth_distance_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Straight-line distance on a planar projection around the first point.

        Latitude delta is scaled by ~111,000 m/degree, longitude delta by the
        same factor times cos(lat1). Not a haversine replacement: the error
        grows with distance and latitude.

        Returns:
            Distance in meters.
        """
        lat_m = (lat2 - lat1) * GeoConfig.METERS_PER_DEGREE
        lon_m = (lon2 - lon1) * GeoConfig.METERS_PER_DEGREE * cos(radians(lat1))
        return sqrt(lat_m * lat_m + lon_m * lon_m)

    @staticmethod
    def manhattan_distance_m(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Sum of the projected north-south and east-west distances in meters.

        Uses the same planar projection as flat_earth_distance_m. Overestimates
        diagonal distances, so it is not an admissible A* heuristic on graphs
        with diagonal walkways.
        """
        lat_m = abs(lat2 - lat1) * GeoConfig.METERS_PER_DEGREE
        lon_m = abs(lon2 - lon1) * GeoConfig.METERS_PER_DEGREE * cos(radians(lat1))
        return lat_m + lon_m

    @staticmethod
    def initial_bearing_deg(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
        """Calculate initial bearing from point 1 to point 2.

        The bearing is the compass direction to travel from start to end,
        measured clockwise from true North.

        Returns:
            Bearing in degrees (0-360, clockwise from North).
        """
        lat1_rad, lat2_rad = radians(lat1), radians(lat2)
        dlon = radians(lon2 - lon1)
        y = sin(dlon) * cos(lat2_rad)
        x = cos(lat1_rad) * sin(lat2_rad) - sin(lat1_rad) * cos(lat2_rad) * cos(dlon)
        return (degrees(atan2(y, x)) + 360) % 360

    @staticmethod
    def compass_direction(bearing_deg: float) -> str:
        """Name of the 16-point compass sector containing a bearing (e.g. "NE")."""
        index = int(round((bearing_deg % 360) / 22.5)) % len(COMPASS_POINTS)
        return COMPASS_POINTS[index]

    @staticmethod
    def midpoint(lat1: float, lon1: float, lat2: float, lon2: float) -> tuple[float, float]:
        """Midpoint of the great-circle arc between two points.

        Returns:
            Tuple (lat, lon) in decimal degrees.
        """
        lat1_rad, lon1_rad = radians(lat1), radians(lon1)
        lat2_rad = radians(lat2)
        dlon = radians(lon2 - lon1)

        bx = cos(lat2_rad) * cos(dlon)
        by = cos(lat2_rad) * sin(dlon)
        mid_lat = atan2(sin(lat1_rad) + sin(lat2_rad), sqrt((cos(lat1_rad) + bx) ** 2 + by**2))
        mid_lon = lon1_rad + atan2(by, cos(lat1_rad) + bx)
        return degrees(mid_lat), degrees(mid_lon)

    @staticmethod
    def destination(lat: float, lon: float, bearing_deg: float, distance_m: float) -> tuple[float, float]:
        """Point reached by travelling distance_m from (lat, lon) along an initial bearing.

        Returns:
            Tuple (lat, lon) in decimal degrees.
        """
        brng = radians(bearing_deg)
        lat1, lon1 = radians(lat), radians(lon)
        d_r = distance_m / EARTH_RADIUS_M

        lat2 = asin(sin(lat1) * cos(d_r) + cos(lat1) * sin(d_r) * cos(brng))
        lon2 = lon1 + atan2(sin(brng) * sin(d_r) * cos(lat1), cos(d_r) - sin(lat1) * sin(lat2))
        return degrees(lat2), degrees(lon2)
