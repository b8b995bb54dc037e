"""EPT productivity calculator: latency-driven productivity and labor cost impact."""

from .engine import (
    CalculationInput,
    CalculationResult,
    InvalidInput,
    ProductivityEngine,
    compute,
)
from .models import ExperienceLevel, Role

__version__ = "0.1.0"

__all__ = [
    "CalculationInput",
    "CalculationResult",
    "ExperienceLevel",
    "InvalidInput",
    "ProductivityEngine",
    "Role",
    "compute",
]
