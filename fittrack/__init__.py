"""FitTrack - local workout log, daily habits and a rolling weekly count."""

__version__ = "0.1.0"
