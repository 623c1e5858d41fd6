from enum import Enum


class Outcome(Enum):
    NAVIGATION = "navigation"
    INLINE_ERROR = "inline error"
    NATIVE_VALIDATION = "native validation"
