"""Text preparation for speech: replacement rules, speaker tagging, history and byte names."""

__version__ = "1.0.5"
__all__ = ["__version__"]