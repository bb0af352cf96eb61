from earnings_analyzer.analysis.analyzer import Analyzer
from earnings_analyzer.analysis.base import BaseAnalysisProvider
from earnings_analyzer.analysis.factory import AnalyzerFactory

__all__ = ["Analyzer", "AnalyzerFactory", "BaseAnalysisProvider"]
