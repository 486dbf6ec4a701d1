from .format_manager import FormatManager
from .resolution_report import ResolutionReport

__all__ = [
    'FormatManager',
    'ResolutionReport'
]
