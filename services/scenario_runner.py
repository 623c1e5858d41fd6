from common.constants import DEFAULT_MIN_PASSWORD_LENGTH, LANDING_PATH
from data.login_scenarios import Scenario, ScenarioExpectation
from enums.outcome import Outcome
from enums.scenario_step import Step
from pages.landing_page import LandingPage
from pages.login_page import LoginPage
from services.browser_session import BrowserSession
from utils.web_utils import read_validation_flag
from wrappers.smart_expect import expect


class ScenarioRunner:
    """
    Executes catalog scenarios on a browser session.

    Steps run in order with no retries. Any Playwright error or failed
    expectation propagates to the calling test unchanged.
    """

    def __init__(self, session: BrowserSession, config: dict):
        self.session = session
        self.config = config
        self.min_password_length = int(config.get("min_password_length", DEFAULT_MIN_PASSWORD_LENGTH))
        self.form_submissions = []
        self.login_page = None
        self._attach(self.session.page)

    def run(self, scenario: Scenario):
        print(f"[INFO] Scenario {scenario.name}: {', '.join(step.value for step in scenario.steps)}")

        for step in scenario.steps:
            self.perform(step, scenario)

        self.verify(scenario.expectation)

    def perform(self, step: Step, scenario: Scenario):
        credential = scenario.credential

        if step is Step.NAVIGATE:
            self.login_page.navigate()

        elif step is Step.FILL_CREDENTIALS:
            self.login_page.fill_form(credential.email, credential.password)

        elif step is Step.SUBMIT_CREDENTIALS:
            self.login_page.submit_credentials(credential.email, credential.password,
                                               credential.remember_me)

        elif step is Step.EXPECT_AUTHENTICATED:
            expect(self.login_page).to_have_url(self.login_page.url_for(LANDING_PATH))

        elif step is Step.RESTART_SESSION:
            self._attach(self.session.restart())

        elif step is Step.OPEN_LANDING:
            LandingPage(self.session.page, self.config).open()

        elif step is Step.LOGOUT:
            LandingPage(self.session.page, self.config).logout()

        elif step is Step.EXPECT_FORGOT_PASSWORD_LINK:
            expect(self.login_page.forgot_password_link).to_be_visible()

        elif step is Step.OPEN_FORGOT_PASSWORD:
            self.login_page.open_forgot_password()

        else:
            raise ValueError(f"Unsupported step: {step}")

    def verify(self, expectation: ScenarioExpectation):
        outcome = expectation.outcome

        if outcome is Outcome.NAVIGATION:
            expect(self.login_page).to_have_url(self.login_page.url_for(expectation.resulting_url))

        elif outcome is Outcome.INLINE_ERROR:
            expect(self.login_page.locator(expectation.visible_indicator).first).to_be_visible()
            expect(self.login_page).to_have_url(self.login_page.login_url)

        else:
            expect(self.login_page).to_have_url(self.login_page.login_url)

            for flag in expectation.validation_flags:
                actual = read_validation_flag(self._field_locator(flag.field), flag.kind,
                                              self.min_password_length)
                assert actual is flag.expected, (
                    f"Expected {flag.field} {flag.kind.value} to be {flag.expected}, got {actual}")

            assert not self.form_submissions, (
                f"Form was submitted despite failing validation: {self.form_submissions}")

    def _field_locator(self, field: str):
        return getattr(self.login_page, f"{field}_input")

    def _attach(self, page):
        # Page objects and request tracking follow the session's current page
        self.login_page = LoginPage(page, self.config)
        page.on("request", self._record_form_submission)

    def _record_form_submission(self, request):
        if request.method == "POST" and request.is_navigation_request():
            self.form_submissions.append(request.url)
