"""Analysis orchestration and external service clients."""

from .analyzer import AnalysisService, AnalysisSlot, FileAnalysis
from .prediction import PredictionClient

__all__ = ["AnalysisService", "AnalysisSlot", "FileAnalysis", "PredictionClient"]
