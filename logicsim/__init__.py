"""Digital logic gates, truth tables and an interactive command-line simulator."""

__version__ = "0.1.0"