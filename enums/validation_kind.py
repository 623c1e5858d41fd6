from enum import Enum


class ValidationKind(Enum):
    VALUE_MISSING = "valueMissing"
    TYPE_MISMATCH = "typeMismatch"
    # Policy check on the entered value, not a browser validity flag
    TOO_SHORT = "tooShort"
    # element.checkValidity() returned false
    INVALID = "invalid"
