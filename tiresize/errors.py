"""
Exceptions raised by tiresize.
"""

from typing import Optional


class InvalidUnitError(ValueError):
    """
    Raised when a unit tag is outside the recognized set.

    The message is shown to users as-is, so it defaults to the literal
    "Invalid unit". The rejected tag is kept on ``unit``.
    """

    def __init__(self, message: str = "Invalid unit", unit: Optional[object] = None):
        super().__init__(message)
        self.unit = unit
