"""Exception types raised while validating and evaluating interpolation input."""

from __future__ import annotations


class InterpolationError(ValueError):
    """Base class for every user-facing interpolation failure."""

    default_message = "Interpolation failed"

    def __init__(self, message: str | None = None):
        super().__init__(message or self.default_message)

    @property
    def message(self) -> str:
        return str(self)


class ParseError(InterpolationError):
    """Raised when a coordinate is missing or not a finite real number."""

    default_message = "Please fill all x and y fields with numeric values."


class DuplicateXError(InterpolationError):
    """Raised when two points share exactly the same x value."""

    default_message = "Duplicate x-values found. Each x must be unique."


class DegenerateInputError(DuplicateXError):
    """Raised by the evaluator when a basis denominator is exactly zero.

    Reaching this means duplicate x values slipped past validation.
    """

    default_message = (
        "Duplicate x-values detected (division by zero). Ensure all x are distinct."
    )


class MissingQueryError(InterpolationError):
    """Raised when no query x is supplied."""

    default_message = "Please enter the x value to evaluate."


class PointCountError(InterpolationError):
    """Raised when the number of points falls outside the accepted range."""

    default_message = "Number of points must be between 1 and 10."


class PointSourceError(InterpolationError):
    """Raised when a point source cannot read its input."""

    default_message = "Could not load points"
