"""Travel records backend: trips, stages, posts, attractions and stage photos."""

__version__ = "0.1.0"
