from playwright.sync_api import Page
from common.constants import LANDING_PATH, LOGOUT_FORM_SELECTOR
from wrappers.smart_locator import SmartLocator
from wrappers.smart_page import SmartPage


class LandingPage(SmartPage):

    def __init__(self, page: Page, config: dict):
        super().__init__(page, config)

        # Locators
        self.logout_form = SmartLocator(self, LOGOUT_FORM_SELECTOR)
        self.landing_url = self.url_for(LANDING_PATH)

    def open(self):
        self.goto(self.landing_url)

    def logout(self):
        # The logout form is hidden; the app submits it from its menu link
        self.logout_form.evaluate("form => form.submit()")
