from playwright.sync_api import Page
from common.constants import PASSWORD_RESET_PATH, EMAIL_INPUT_SELECTOR, SUBMIT_BUTTON_SELECTOR
from wrappers.smart_locator import SmartLocator
from wrappers.smart_page import SmartPage


class PasswordResetPage(SmartPage):

    def __init__(self, page: Page, config: dict):
        super().__init__(page, config)

        # Locators
        self.email_input = SmartLocator(self, EMAIL_INPUT_SELECTOR)
        self.send_link_button = SmartLocator(self, SUBMIT_BUTTON_SELECTOR)
        self.password_reset_url = self.url_for(PASSWORD_RESET_PATH)
