# The OBV update rule follows the QuantConnect Lean implementation, including its refusal to
# accumulate from a zero running total.
# - https://github.com/QuantConnect/Lean

from .obv import Obv

__all__ = [
    "Obv",
]
