"""Resume data model in the JSON Resume layout, loaded from YAML or JSON."""

__version__ = "0.1.0"
__all__ = ["resume"]