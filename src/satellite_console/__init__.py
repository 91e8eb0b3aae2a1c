"""Interactive single-satellite orientation, solar panel and data collection simulator."""

__version__ = "1.0.0"
