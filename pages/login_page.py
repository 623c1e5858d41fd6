from playwright.sync_api import Page
from common.constants import (LOGIN_PATH, EMAIL_INPUT_SELECTOR, PASSWORD_INPUT_SELECTOR,
                              REMEMBER_ME_SELECTOR, SUBMIT_BUTTON_SELECTOR,
                              FORGOT_PASSWORD_SELECTOR, LOGIN_ERROR_SELECTOR)
from wrappers.smart_locator import SmartLocator
from wrappers.smart_page import SmartPage


class LoginPage(SmartPage):

    def __init__(self, page: Page, config: dict):
        super().__init__(page, config)

        # Locators
        self.email_input = SmartLocator(self, EMAIL_INPUT_SELECTOR)
        self.password_input = SmartLocator(self, PASSWORD_INPUT_SELECTOR)
        self.remember_me_checkbox = SmartLocator(self, REMEMBER_ME_SELECTOR)
        self.login_button = SmartLocator(self, SUBMIT_BUTTON_SELECTOR)
        self.error_feedback = SmartLocator(self, LOGIN_ERROR_SELECTOR)
        self.forgot_password_link = SmartLocator(self, FORGOT_PASSWORD_SELECTOR)
        self.login_url = self.url_for(LOGIN_PATH)

    def navigate(self):
        self.goto(self.login_url)

    def fill_form(self, email, password):
        self.email_input.fill(email)
        self.password_input.fill(password)

    def submit_form(self):
        self.login_button.click()

    def submit_credentials(self, email, password, remember_me=False):
        """Values are typed verbatim; validation belongs to the browser and the server."""
        self.fill_form(email, password)
        if remember_me:
            self.remember_me_checkbox.check()
        self.submit_form()

    def open_forgot_password(self):
        self.forgot_password_link.click()
