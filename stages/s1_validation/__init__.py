"""Row validation"""

from .validator import RowValidator, validate_and_normalize, validate_entry

__all__ = ["RowValidator", "validate_and_normalize", "validate_entry"]
