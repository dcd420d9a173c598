"""wmscore - Core services of a warehouse management system.

Role management backed by SQLAlchemy, with structured logging and
environment-driven configuration.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
