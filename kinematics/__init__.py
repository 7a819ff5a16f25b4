# kinematics/__init__.py

from .velocity import velocity_at

__all__ = ["velocity_at"]
