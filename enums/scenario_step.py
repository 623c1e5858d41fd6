from enum import Enum


class Step(Enum):
    NAVIGATE = "navigate"
    FILL_CREDENTIALS = "fill credentials"
    SUBMIT_CREDENTIALS = "submit credentials"
    EXPECT_AUTHENTICATED = "expect authenticated"
    RESTART_SESSION = "restart session"
    OPEN_LANDING = "open landing"
    LOGOUT = "logout"
    EXPECT_FORGOT_PASSWORD_LINK = "expect forgot password link"
    OPEN_FORGOT_PASSWORD = "open forgot password"
