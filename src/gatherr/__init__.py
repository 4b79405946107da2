"""Collect an iterable of ``Ok``/``Err`` outcomes into a single result that keeps every error."""

from __future__ import annotations

from .errors import Error, UnwrapError
from .gather import Gatherr, Outcomes, gatherr
from .result import Err, Ok, Outcome, Result

__version__ = "0.1.0"

__all__ = [
    "Err",
    "Error",
    "Gatherr",
    "Ok",
    "Outcome",
    "Outcomes",
    "Result",
    "UnwrapError",
    "gatherr",
]
