from playwright.sync_api import Browser, BrowserContext, Page


class BrowserSession:
    """
    One isolated browsing context (Playwright BrowserContext + Page).

    The session owns the context lifecycle; page objects only operate
    on self.page. A stub application, when given, is routed into every
    context the session opens.
    """

    def __init__(self, browser: Browser, config: dict, stub_application=None):
        self.browser = browser
        self.config = config
        self.stub_application = stub_application
        self.context: BrowserContext | None = None
        self.page: Page | None = None

    def open(self, storage_state=None) -> Page:
        if storage_state is not None:
            self.context = self.browser.new_context(storage_state=storage_state)
        else:
            self.context = self.browser.new_context()
        self.context.set_default_timeout(self.config.get("timeout", 30000))

        if self.stub_application:
            self.stub_application.install(self.context)

        self.page = self.context.new_page()
        return self.page

    def storage_state(self) -> dict:
        """Cookies and local storage of the current context, as an opaque dict."""
        return self.context.storage_state()

    def restart(self) -> Page:
        """Simulate a browser restart: reopen from the captured storage state."""
        state = self.storage_state()
        self.close()
        print(f"[INFO] Session restarted with {len(state.get('cookies', []))} persisted cookie(s)")
        return self.open(state)

    def close(self):
        try:
            if self.page is not None:
                self.page.close()
        finally:
            self.page = None
            if self.context is not None:
                self.context.close()
                self.context = None
