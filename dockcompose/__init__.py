"""Progress writers, prompts, line splitting, scan suggestion and end-to-end test helpers."""

__version__ = "0.1.0"