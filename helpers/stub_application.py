import html
import secrets
import time
from urllib.parse import parse_qs, urljoin, urlparse
from playwright.sync_api import BrowserContext, Route
from common.constants import (LOGIN_PATH, LANDING_PATH, LOGOUT_PATH, PASSWORD_RESET_PATH,
                              FORGOT_PASSWORD_TEXT)

SESSION_COOKIE = "stub_session"
REMEMBER_ME_SECONDS = 30 * 24 * 60 * 60
LOGIN_FAILED_MESSAGE = "These credentials do not match our records."

LOGIN_TEMPLATE = """<!DOCTYPE html>
<html>
<head><title>Login</title></head>
<body>
<form method="POST" action="{login_url}">
  <label for="email">Email Address</label>
  <input id="email" type="email" name="email" value="{email}" required autofocus>
  {error}
  <label for="password">Password</label>
  <input id="password" type="password" name="password" required>
  <input type="checkbox" name="remember" id="remember">
  <label for="remember">Remember Me</label>
  <button type="submit">Login</button>
  <a href="{reset_url}">{forgot_text}</a>
</form>
</body>
</html>"""

ERROR_TEMPLATE = """<span class="invalid-feedback" role="alert" style="display: block">
    <strong>{message}</strong>
  </span>"""

LANDING_TEMPLATE = """<!DOCTYPE html>
<html>
<head><title>Master Items</title></head>
<body>
<h1>Master Items</h1>
<a href="#" onclick="event.preventDefault(); document.getElementById('logout-form').submit();">Logout</a>
<form id="logout-form" action="{logout_url}" method="POST" style="display: none;"></form>
</body>
</html>"""

PASSWORD_RESET_TEMPLATE = """<!DOCTYPE html>
<html>
<head><title>Reset Password</title></head>
<body>
<form method="POST" action="{reset_url}">
  <label for="email">Email Address</label>
  <input id="email" type="email" name="email" required>
  <button type="submit">Send Password Reset Link</button>
</form>
</body>
</html>"""

REDIRECT_TEMPLATE = """<!DOCTYPE html>
<html><head><script>window.location.replace({url!r});</script></head><body></body></html>"""


class StubApplication:
    """
    Deterministic stand-in for the application under test.

    Installed as a Playwright route on a browser context, it serves the
    login, landing, logout and password reset routes with the same form
    markup as the real application. Valid credentials come from the user
    fixtures; the authenticated session is a cookie on the context, so it
    round-trips through storage_state() like the real one.
    """

    def __init__(self, base_url: str, users):
        self.base_url = base_url
        self.credentials = {(user.credential.email, user.credential.password)
                            for user in users.valid()}
        self.login_attempts = 0

    def install(self, context: BrowserContext):
        context.route(f"{self.base_url}**", lambda route: self.handle(route, context))

    def handle(self, route: Route, context: BrowserContext):
        request = route.request
        path = urlparse(request.url).path.strip("/")

        if path == LOGIN_PATH and request.method == "POST":
            self._login(route, context)
        elif path == LOGIN_PATH:
            self._render(route, self._login_html())
        elif path == LANDING_PATH:
            if self.is_authenticated(context):
                self._render(route, LANDING_TEMPLATE.format(logout_url=self._url(LOGOUT_PATH)))
            else:
                self._redirect(route, LOGIN_PATH)
        elif path == LOGOUT_PATH and request.method == "POST":
            context.clear_cookies()
            self._redirect(route, LOGIN_PATH)
        elif path == PASSWORD_RESET_PATH:
            self._render(route, PASSWORD_RESET_TEMPLATE.format(reset_url=self._url(PASSWORD_RESET_PATH)))
        else:
            route.fulfill(status=404, content_type="text/plain", body="Not Found")

    def is_authenticated(self, context: BrowserContext) -> bool:
        return any(cookie["name"] == SESSION_COOKIE
                   for cookie in context.cookies(self.base_url))

    def _login(self, route: Route, context: BrowserContext):
        self.login_attempts += 1
        form = parse_qs(route.request.post_data or "", keep_blank_values=True)
        email = form.get("email", [""])[0]
        password = form.get("password", [""])[0]

        if (email, password) not in self.credentials:
            print(f"[INFO] Stub rejected login for '{email}'")
            self._render(route, self._login_html(email, LOGIN_FAILED_MESSAGE))
            return

        cookie = {"name": SESSION_COOKIE, "value": secrets.token_hex(16), "url": self.base_url}
        if "remember" in form:
            cookie["expires"] = int(time.time()) + REMEMBER_ME_SECONDS
        context.add_cookies([cookie])
        self._redirect(route, LANDING_PATH)

    def _login_html(self, email: str = "", message: str = None) -> str:
        error = ERROR_TEMPLATE.format(message=html.escape(message)) if message else ""
        return LOGIN_TEMPLATE.format(login_url=self._url(LOGIN_PATH),
                                     email=html.escape(email, quote=True),
                                     error=error,
                                     reset_url=self._url(PASSWORD_RESET_PATH),
                                     forgot_text=FORGOT_PASSWORD_TEXT)

    def _url(self, path: str) -> str:
        return urljoin(self.base_url, path)

    def _render(self, route: Route, body: str):
        route.fulfill(status=200, content_type="text/html", body=body)

    def _redirect(self, route: Route, path: str):
        # Client-side redirect, intercepted requests never answer with a 3xx
        route.fulfill(status=200, content_type="text/html",
                      body=REDIRECT_TEMPLATE.format(url=self._url(path)))
