"""apiscaffold -- generate an Express + MongoDB REST API skeleton from a project name."""

__version__ = "1.0.0"
