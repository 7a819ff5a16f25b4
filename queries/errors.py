class PathError(ValueError):
    """Base class for path queries that cannot be answered."""


class InvalidPathError(PathError):
    """Missing path, or too few assigned waypoints for the operation."""


class IndexOutOfRangeError(PathError):
    """The cursor is negative or past the end of the waypoint list."""


class UnassignedCursorError(PathError):
    """The cursor points at a reserved slot."""


class NoNextWaypointError(PathError):
    """No assigned waypoint after the cursor (open path exhausted)."""
