# Routes of the application under test, relative to config["base_url"]
LOGIN_PATH = "login"
LANDING_PATH = "master-items"
LOGOUT_PATH = "logout"
PASSWORD_RESET_PATH = "password/reset"

# Login form markup
EMAIL_INPUT_SELECTOR = "input[name='email']"
PASSWORD_INPUT_SELECTOR = "input[name='password']"
REMEMBER_ME_SELECTOR = "input[name='remember']"
SUBMIT_BUTTON_SELECTOR = "button[type='submit']"
FORGOT_PASSWORD_TEXT = "Forgot Your Password?"
FORGOT_PASSWORD_SELECTOR = f"text={FORGOT_PASSWORD_TEXT}"
INVALID_FEEDBACK_SELECTOR = ".invalid-feedback"
LOGIN_ERROR_SELECTOR = ".invalid-feedback, .alert-danger"
LOGOUT_FORM_SELECTOR = "#logout-form"

DEFAULT_MIN_PASSWORD_LENGTH = 6
WRONG_PASSWORD = "wrongpassword"
