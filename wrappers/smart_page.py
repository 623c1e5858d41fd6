from urllib.parse import urljoin
from playwright.sync_api import Page
from helpers.placeholder_manager import PlaceholderManager
from utils.code_utils import normalize_args


class SmartPage:
    """
    SmartPage is a wrapper around Playwright's Page that provides:
    - Transparent proxying of page methods (e.g. .goto(), .locator(), .evaluate()).
    - Placeholder management for dynamic URLs and form data.
    - Route resolution against config["base_url"].

    Errors raised by the wrapped page are never caught here: a failed
    navigation or a missing element reaches the test unchanged.
    """

    def __init__(self, page: Page, config: dict):
        self.page = page
        self.config = config
        self.placeholder_manager = PlaceholderManager(config)

    def add_placeholder(self, name: str, value=None):
        if not name:
            raise ValueError("Placeholder name must not be empty")

        self.placeholder_manager.add_placeholder(name, value)

    def remove_placeholder(self, name: str):
        self.placeholder_manager.remove_placeholder(name)

    def url_for(self, path: str) -> str:
        """Absolute URL of a route relative to the configured base URL."""
        return urljoin(self.config["base_url"], path)

    def __getattr__(self, item):
        target = getattr(self.page, item)

        if callable(target):
            def wrapper(*args, **kwargs):
                args, kwargs = normalize_args(target, *args, **kwargs)
                args, kwargs = self._replace_placeholders(args, kwargs)
                return target(*args, **kwargs)

            return wrapper
        return target

    def _replace_placeholders(self, args, kwargs):
        args = list(args)
        for i, arg in enumerate(args):
            if isinstance(arg, str):
                args[i] = self.placeholder_manager.replace_placeholders_with_values(arg)

        for k, v in kwargs.items():
            if isinstance(v, str):
                kwargs[k] = self.placeholder_manager.replace_placeholders_with_values(v)

        return tuple(args), kwargs

    def __str__(self):
        return f"<SmartPage {self.__class__.__name__}>"

    __repr__ = __str__
