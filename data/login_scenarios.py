from dataclasses import dataclass, field, replace
from typing import Optional
from common.constants import (LANDING_PATH, LOGIN_PATH, PASSWORD_RESET_PATH,
                              INVALID_FEEDBACK_SELECTOR, LOGIN_ERROR_SELECTOR,
                              DEFAULT_MIN_PASSWORD_LENGTH, WRONG_PASSWORD)
from data.user_fixtures import Credential, UserFixtures
from enums.outcome import Outcome
from enums.scenario_step import Step
from enums.validation_kind import ValidationKind

MALFORMED_EMAIL = "invalid-email"
BARE_WORD_EMAIL = "hahaha"
SHORT_PASSWORD = "a"


@dataclass(frozen=True)
class ValidationFlag:
    field: str
    kind: ValidationKind
    expected: bool = True


@dataclass(frozen=True)
class ScenarioExpectation:
    """
    Observable outcome of a scenario. Exactly one category applies:
    a resulting URL, a visible inline error indicator, or native
    validation flags on the form fields.
    """
    resulting_url: Optional[str] = None
    visible_indicator: Optional[str] = None
    validation_flags: tuple = field(default_factory=tuple)

    def __post_init__(self):
        categories = [self.resulting_url is not None,
                      self.visible_indicator is not None,
                      bool(self.validation_flags)]
        if categories.count(True) != 1:
            raise ValueError("A scenario expectation needs exactly one outcome: "
                             "resulting_url, visible_indicator or validation_flags")

    @property
    def outcome(self) -> Outcome:
        if self.resulting_url is not None:
            return Outcome.NAVIGATION
        if self.visible_indicator is not None:
            return Outcome.INLINE_ERROR
        return Outcome.NATIVE_VALIDATION


@dataclass(frozen=True)
class Scenario:
    name: str
    credential: Optional[Credential]
    steps: tuple
    expectation: ScenarioExpectation

    def __str__(self):
        return self.name


def build_login_scenarios(users: UserFixtures,
                          min_password_length: int = DEFAULT_MIN_PASSWORD_LENGTH) -> list[Scenario]:
    """Catalog of login scenarios driven by the given user fixtures."""
    valid_users = users.valid()
    if not valid_users:
        raise ValueError("At least one valid user fixture is required")
    if not users.invalid():
        raise ValueError("At least one invalid user fixture is required")

    known_user = valid_users[0].credential
    unknown_user = users.invalid()[0].credential
    submit = (Step.NAVIGATE, Step.SUBMIT_CREDENTIALS)
    fill_only = (Step.NAVIGATE, Step.FILL_CREDENTIALS)

    scenarios = []

    for user in valid_users:
        scenarios.append(Scenario(
            f"valid_login[{user.name}]", user.credential, submit,
            ScenarioExpectation(resulting_url=LANDING_PATH)))

    scenarios.append(Scenario(
        "invalid_login", unknown_user, submit,
        ScenarioExpectation(visible_indicator=INVALID_FEEDBACK_SELECTOR)))

    for user in valid_users:
        scenarios.append(Scenario(
            f"wrong_password[{user.name}]", replace(user.credential, password=WRONG_PASSWORD), submit,
            ScenarioExpectation(visible_indicator=LOGIN_ERROR_SELECTOR)))

    scenarios.append(Scenario(
        "empty_fields", Credential("", ""), submit,
        ScenarioExpectation(validation_flags=(
            ValidationFlag("email", ValidationKind.VALUE_MISSING),
            ValidationFlag("password", ValidationKind.VALUE_MISSING),
        ))))

    scenarios.append(Scenario(
        "malformed_email", Credential(MALFORMED_EMAIL, known_user.password), submit,
        ScenarioExpectation(validation_flags=(
            ValidationFlag("email", ValidationKind.TYPE_MISMATCH),
        ))))

    scenarios.append(Scenario(
        "well_formed_email", Credential(known_user.email, known_user.password), fill_only,
        ScenarioExpectation(validation_flags=(
            ValidationFlag("email", ValidationKind.TYPE_MISMATCH, expected=False),
        ))))

    scenarios.append(Scenario(
        "short_password", Credential(known_user.email, SHORT_PASSWORD), fill_only,
        ScenarioExpectation(validation_flags=(
            ValidationFlag("password", ValidationKind.TOO_SHORT),
        ))))

    for user in valid_users:
        scenarios.append(Scenario(
            f"remember_me[{user.name}]", replace(user.credential, remember_me=True),
            (Step.NAVIGATE,
             Step.SUBMIT_CREDENTIALS,
             Step.EXPECT_AUTHENTICATED,
             Step.RESTART_SESSION,
             Step.OPEN_LANDING,
             Step.EXPECT_AUTHENTICATED,
             Step.LOGOUT),
            ScenarioExpectation(resulting_url=LOGIN_PATH)))

    scenarios.append(Scenario(
        "forgot_password", None,
        (Step.NAVIGATE, Step.EXPECT_FORGOT_PASSWORD_LINK, Step.OPEN_FORGOT_PASSWORD),
        ScenarioExpectation(resulting_url=PASSWORD_RESET_PATH)))

    scenarios.append(Scenario(
        "malformed_email_blocks_submission", Credential(BARE_WORD_EMAIL, known_user.password), submit,
        ScenarioExpectation(validation_flags=(
            ValidationFlag("email", ValidationKind.INVALID),
        ))))

    _check_thresholds(scenarios, min_password_length)
    return scenarios


def _check_thresholds(scenarios, min_password_length: int):
    for scenario in scenarios:
        for flag in scenario.expectation.validation_flags:
            if flag.kind is ValidationKind.TOO_SHORT and scenario.credential:
                if len(scenario.credential.password) >= min_password_length:
                    raise ValueError(f"{scenario.name}: password is not shorter "
                                     f"than {min_password_length} characters")
