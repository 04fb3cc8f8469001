from .core import AnalysisResult, analyze

__version__ = "1.0.0"

__all__ = ["AnalysisResult", "analyze", "__version__"]
