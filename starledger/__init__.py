"""Exchange handle allocation and star balance service."""

__version__ = "0.1.0"
