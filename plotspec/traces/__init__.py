"""
Chart builders.

Every builder is a ``Trace``: it can be added to a ``Plot`` and serialized
without the caller knowing its concrete kind.
"""
from .bar import Bar
from .base import BaseTrace, Trace
from .candlestick import Candlestick
from .histogram import Bins, Cumulative, CurrentBin, HistDirection, HistFunc, HistNorm, Histogram
from .scatter import Scatter

__all__ = [
    "Trace",
    "BaseTrace",
    "Bar",
    "Scatter",
    "Histogram",
    "Candlestick",
    "Bins",
    "Cumulative",
    "CurrentBin",
    "HistDirection",
    "HistFunc",
    "HistNorm",
]
