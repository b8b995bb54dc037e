from .calculator import ProductivityEngine, compute
from .errors import InvalidInput
from .result import CalculationInput, CalculationResult

__all__ = [
    "CalculationInput",
    "CalculationResult",
    "InvalidInput",
    "ProductivityEngine",
    "compute",
]
