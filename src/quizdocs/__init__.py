__version__ = "0.1.0"

__all__ = [
    "__version__",
    "build",
    "catalog",
    "cli",
    "config",
    "core",
    "errors",
    "exit_codes",
    "locales",
    "model",
    "readme",
    "render",
    "urls",
]
