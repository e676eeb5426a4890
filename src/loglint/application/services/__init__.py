"""Application services."""

from loglint.application.services.detector import Detector
from loglint.application.services.linter import Linter

__all__ = ["Detector", "Linter"]
