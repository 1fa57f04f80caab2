"""MindScape - personal notes with AI writing aids."""

__version__ = "1.0.0"
