"""Idea assessment engine: review queue workflow and Value/Feasibility scoring."""

__version__ = "0.1.0"
