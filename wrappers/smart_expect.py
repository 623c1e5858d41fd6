from playwright.sync_api import expect as pw_expect, Page, Locator
from utils.code_utils import normalize_args
from wrappers.smart_locator import SmartLocator
from wrappers.smart_page import SmartPage


class SmartExpect:
    def __init__(self, actual):
        self.placeholder_manager = None

        if isinstance(actual, SmartLocator):
            self.page = actual.page
            self.placeholder_manager = actual.placeholder_manager
            unwrapped = actual.locator
        elif isinstance(actual, SmartPage):
            self.page = actual.page
            self.placeholder_manager = actual.placeholder_manager
            unwrapped = actual.page
        elif isinstance(actual, Locator):
            self.page = actual.page
            unwrapped = actual
        elif isinstance(actual, Page):
            self.page = actual
            unwrapped = actual
        else:
            raise ValueError(f"Unsupported type: {type(actual)}")

        self._inner = pw_expect(unwrapped)

    def __getattr__(self, item):
        target = getattr(self._inner, item)

        if callable(target) and (item.startswith("to_") or item.startswith("not_to_")):
            def wrapper(*args, **kwargs):
                args, kwargs = normalize_args(target, *args, **kwargs)
                args, kwargs = self._replace_placeholders(args, kwargs)
                return target(*args, **kwargs)
            return wrapper
        return target

    def _replace_placeholders(self, args, kwargs):
        if not self.placeholder_manager:
            return tuple(args), kwargs

        args = list(args)

        for i, arg in enumerate(args):
            if isinstance(arg, str):
                args[i] = self.placeholder_manager.replace_placeholders_with_values(arg)

        return tuple(args), kwargs

    def __dir__(self):
        return dir(self._inner)

# ---------------- helpers ---------------- #

def expect(actual):
    """Public entry point: works with Smart wrappers or native Playwright objects."""
    return SmartExpect(actual)
