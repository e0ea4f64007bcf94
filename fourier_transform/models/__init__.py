from .config import TransformConfiguration
from .results import ErrorReport, PowerSpectrum, TransformFailed, TransformResult

__all__ = [
    "TransformConfiguration",
    "ErrorReport",
    "PowerSpectrum",
    "TransformFailed",
    "TransformResult",
]
