"""ActionScope - scope-based authorization for quality actions."""

__version__ = "0.1.0"
