"""Project configuration loading and validation."""
from .loader import DocsConfig, load_config

__all__ = ["DocsConfig", "load_config"]
