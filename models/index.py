from typing import Optional
from .waypoint import Path, is_assigned


def next_assigned_index(path: Path, from_index: int, wrap: bool) -> Optional[int]:
    """
    Index of the next assigned waypoint after `from_index`.

    The scan wraps past the end back to index 0 only when `wrap` is set and
    the path is a closed circuit. `from_index = -1` returns the first
    assigned waypoint. Each slot is visited at most once, so a list of
    reserved slots terminates with None.

    Args:
        path: Path to scan.
        from_index: Starting slot index (excluded from the scan).
        wrap: Allow wrapping on closed circuits.

    Returns:
        Optional[int]: Slot index, or None if no assigned waypoint is found.
    """
    if path is None:
        return None
    n = len(path.waypoints)
    wrap = wrap and path.is_closed_circuit

    if from_index < -1 or from_index > n - 1:
        return None
    if from_index == n - 1 and not wrap:
        return None

    # starting before the first slot covers the whole list, otherwise skip the current one
    n_iterations = n if from_index < 0 else n - 1
    idx = from_index
    for _ in range(n_iterations):
        idx += 1
        if idx >= n:
            if not wrap:
                break
            idx = 0
        if is_assigned(path.waypoints[idx]):
            return idx
    return None


def previous_assigned_index(path: Path, from_index: int, wrap: bool) -> Optional[int]:
    """
    Mirror of `next_assigned_index` scanning backwards.

    `from_index = len(path.waypoints)` returns the last assigned waypoint.
    """
    if path is None:
        return None
    n = len(path.waypoints)
    wrap = wrap and path.is_closed_circuit

    if from_index < 0 or from_index > n:
        return None
    if from_index == 0 and not wrap:
        return None

    n_iterations = n if from_index >= n else n - 1
    idx = from_index
    for _ in range(n_iterations):
        idx -= 1
        if idx < 0:
            if not wrap:
                break
            idx = n - 1
        if is_assigned(path.waypoints[idx]):
            return idx
    return None


def first_assigned_index(path: Path) -> Optional[int]:
    return next_assigned_index(path, -1, False)


def last_assigned_index(path: Path) -> Optional[int]:
    if path is None:
        return None
    return previous_assigned_index(path, len(path.waypoints), False)
