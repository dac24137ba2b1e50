"""
Observer module for diatomic simulations.

Provides the Observer pattern for monitoring:
- SeriesObserver: Capture the six result series
- LogObserver: Progress records through logging
"""

from .observer import LogObserver, Observer, SeriesObserver

__all__ = [
    "Observer",
    "SeriesObserver",
    "LogObserver",
]
