from dataclasses import dataclass, fields
from typing import Any, Dict


@dataclass(frozen=True)
class PathQueryConfig:
    """
    Numerical tuning of the path queries.
    """

    coarse_samples: int = 5  # [-] coarse intervals of the closest-point search
    t_accuracy: float = 1e-4  # [-] half-window at which closest-point refinement stops
    line_segments: int = 10  # [-] polyline steps when measuring to the next waypoint
    min_t_step: float = 1e-3  # [-] smallest t increment of the distance march
    distance_epsilon: float = 1e-6  # [m] distances at or below this count as zero
    estimate_segments: int = 8  # [-] steps of a quick length estimate, also the minimum
    path_precision: float = 0.5  # [-] precision factor for cached distances, in (0, 1]
    max_precision_length: float = 0.5  # [m] polyline step length at precision 1

    def __post_init__(self):
        """Validate ranges."""
        for name in ("coarse_samples", "line_segments", "estimate_segments"):
            value = getattr(self, name)
            if int(value) != value or value < 1:
                raise ValueError(f"{name} must be an integer >= 1, got {value}")
        for name in ("t_accuracy", "min_t_step", "max_precision_length"):
            if getattr(self, name) <= 0.0:
                raise ValueError(f"{name} must be > 0, got {getattr(self, name)}")
        if self.distance_epsilon < 0.0:
            raise ValueError(f"distance_epsilon must be >= 0, got {self.distance_epsilon}")
        if not (0.0 < self.path_precision <= 1.0):
            raise ValueError(f"path_precision must be in (0, 1], got {self.path_precision}")

    @classmethod
    def from_dict(cls, values: Dict[str, Any]) -> "PathQueryConfig":
        """
        Create a config from a mapping. Missing keys keep their default.

        Raises:
            ValueError: If the mapping holds unknown keys or invalid values.
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(values) - known)
        if unknown:
            raise ValueError(f"Unknown config keys: {', '.join(unknown)}")
        return cls(**values)

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


DEFAULT_CONFIG = PathQueryConfig()
