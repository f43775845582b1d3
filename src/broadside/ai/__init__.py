"""Computer opponent exports."""

from .targeting import TargetingAI, TargetMode, find_streak

__all__ = ["TargetingAI", "TargetMode", "find_streak"]
