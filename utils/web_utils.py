from playwright.sync_api import Locator
from enums.validation_kind import ValidationKind

VALIDITY_SCRIPTS = {
    ValidationKind.VALUE_MISSING: "el => el.validity.valueMissing",
    ValidationKind.TYPE_MISMATCH: "el => el.validity.typeMismatch",
}
VALUE_LENGTH_SCRIPT = "el => el.value.length"
CHECK_VALIDITY_SCRIPT = "el => el.checkValidity()"


def highlight_element(locator: Locator):
    """
    Highlights an element by adding a 2px solid red border.
    Returns the element's original 'style' attribute so it can be restored later.
    """
    original_style = locator.evaluate("el => el.getAttribute('style')")
    locator.evaluate(
        "el => el.setAttribute('style', (el.getAttribute('style') || '') + '; border: 2px solid red !important;')"
    )
    return original_style


def reset_element_style(locator: Locator, original_style: str):
    """
    Restores an element's style attribute to its original value.
    Args:
        locator: The Playwright Locator for the element.
        original_style: The style string returned from highlight_element().
    """
    if original_style is None:
        locator.evaluate("el => el.removeAttribute('style')")
    else:
        locator.evaluate("(el, style) => el.setAttribute('style', style)", original_style)


def get_value_length(locator) -> int:
    """Length of the value currently entered in an input element."""
    return int(locator.evaluate(VALUE_LENGTH_SCRIPT))


def check_validity(locator) -> bool:
    """Synchronous HTML5 validity check of a form control (checkValidity())."""
    return bool(locator.evaluate(CHECK_VALIDITY_SCRIPT))


def read_validation_flag(locator, kind: ValidationKind, min_length: int = 6) -> bool:
    """
    Reads one client-side validation flag of a form control.

    Args:
        locator: Locator (or SmartLocator) of an input element.
        kind: Which flag to read.
        min_length: Threshold for the TOO_SHORT policy check.

    Returns:
        bool: True when the control is in the given validation state.
    """
    if kind is ValidationKind.TOO_SHORT:
        return get_value_length(locator) < min_length

    if kind is ValidationKind.INVALID:
        return not check_validity(locator)

    return bool(locator.evaluate(VALIDITY_SCRIPTS[kind]))
