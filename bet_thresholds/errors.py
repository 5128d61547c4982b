"""Error types raised by the bet threshold calculations."""


class ThresholdError(ValueError):
    """Base class for all bet threshold errors."""


class InvalidParameterError(ThresholdError):
    """Dice count or confidence outside its domain."""


class UnsupportedConfidenceError(ThresholdError):
    """Confidence level has no rule-of-thumb multiplier."""


class InsufficientDataError(ThresholdError):
    """Not enough distinct dice counts to fit a slope."""


class EmptyInputError(ThresholdError):
    """Aggregate requested over an empty grid."""
