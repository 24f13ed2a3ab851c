"""Validation, cleaning and standardization of extracted records."""

from .validation_rules import ValidationRules, ValidationVerdict
from .validators import DataValidator, BatchValidationResult
from .cleaners import DataCleaner, CleaningResult
from .standardizers import DataStandardizer

__all__ = [
    'ValidationRules',
    'ValidationVerdict',
    'DataValidator',
    'BatchValidationResult',
    'DataCleaner',
    'CleaningResult',
    'DataStandardizer',
]
