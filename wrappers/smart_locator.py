import inspect
import re
import time
from utils.code_utils import normalize_args
from utils.web_utils import highlight_element, reset_element_style


class SmartLocator:
    """
    SmartLocator is a wrapper around Playwright's Locator that provides:
    - Transparent proxying of locator methods (e.g. .fill(), .click()).
    - Placeholder replacement in string arguments.
    - Optional element highlighting and step delay for watching a run.

    The underlying locator is resolved lazily on every call, so a
    SmartLocator survives page reloads and navigations.
    """

    def __init__(self, owner, selector):
        self.page = owner.page
        self.config = owner.config
        self.owner = owner
        self.selector = str(selector)
        self.placeholder_manager = owner.placeholder_manager

        # Detect field name for messages
        self.field_name = self._get_field_info()

    def _get_field_info(self):
        stack = inspect.stack()
        for frame_info in stack:
            if frame_info.code_context:
                line = frame_info.code_context[0].strip()
                if "SmartLocator" in line and "self." in line:
                    match = re.match(r"self\.(\w+)\s*=\s*SmartLocator", line)
                    if match:
                        return match.group(1)
        return "unknown_field"

    def _locator(self):
        selector = self.placeholder_manager.replace_placeholders_with_values(self.selector)
        return self.page.locator(selector)

    @property
    def locator(self):
        return self._locator()

    def __getattr__(self, item):
        target = getattr(self._locator(), item)

        if callable(target):
            def wrapper(*args, **kwargs):

                # Normalize so the first parameter is positional
                args, kwargs = normalize_args(target, *args, **kwargs)
                args, kwargs = self._replace_placeholders(args, kwargs)
                element_style = self._highlight_element_with_delay()

                try:
                    return target(*args, **kwargs)
                finally:
                    self._restore_element_style(element_style)
            return wrapper
        return target

    def __str__(self):
        return f"<SmartLocator field='{self.field_name}' selector='{self.selector}'>"

    __repr__ = __str__

    def _replace_placeholders(self, args, kwargs) -> tuple:
        args = list(args)

        for i, arg in enumerate(args):
            if isinstance(arg, str):
                args[i] = self.placeholder_manager.replace_placeholders_with_values(arg)

        return tuple(args), kwargs

    def _highlight_element_with_delay(self):
        step_delay_milliseconds = self.config.get("step_delay")

        try:
            step_delay_seconds = float(step_delay_milliseconds) / 1000.0
        except (TypeError, ValueError):
            step_delay_seconds = 0.0

        if self.config.get("highlight"):
            element_style = highlight_element(self._locator())
            time.sleep(step_delay_seconds)
            return element_style

        elif step_delay_seconds > 0.0:
            time.sleep(step_delay_seconds)

        return None

    def _restore_element_style(self, element_style):
        # Clicks may navigate away, so only restore what is still on the page
        if self.config.get("highlight") and self._locator().count() > 0:
            reset_element_style(self._locator(), element_style)
