"""In-memory book catalog organised by category, with per-author binary files."""

__version__ = "0.1.0"
__all__ = ["books", "categories", "catalog", "storage", "demo"]