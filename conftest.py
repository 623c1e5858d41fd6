import json
import time
from datetime import datetime
from pathlib import Path
import pytest
from playwright.sync_api import sync_playwright
from data.login_scenarios import build_login_scenarios
from data.user_fixtures import load_user_fixtures
from helpers.stub_application import StubApplication
from services.browser_session import BrowserSession
from services.scenario_runner import ScenarioRunner
from utils.text_utils import safe_filename


ROOT_DIR = Path(__file__).parent
CONFIG_FILE = ROOT_DIR / "config.json"
REPORT_DIR = Path.cwd() / "reports"
REPORT_FILE = REPORT_DIR / "report.html"


# ---------------------------------------------------------------------------
# CLI options
# ---------------------------------------------------------------------------
def pytest_addoption(parser):
    parser.addoption(
        "--target",
        action="store",
        choices=["stub", "live"],
        help="Run against the routed stub application or the live deployment",
    )

    parser.addoption(
        "--highlight",
        action="store",
        choices=["true", "false"],
        help="Highlight elements during tests",
    )

    parser.addoption(
        "--screenshot_on_error",
        action="store",
        choices=["true", "false"],
        help="Capture screenshot on test failure",
    )

    parser.addoption(
        "--step_delay",
        action="store",
        type=int,
        help="Delay (in ms) between steps",
    )

    parser.addoption(
        "--users_file",
        action="store",
        help="Path to the user fixtures JSON file",
    )


# ---------------------------------------------------------------------------
# Load configuration
# ---------------------------------------------------------------------------
def load_config(pytestconfig) -> dict:
    """config.json overlaid with command line options."""
    with open(CONFIG_FILE, encoding="utf-8") as f:
        cfg = json.load(f)

    # Browser and headless (pytest-playwright options)
    browser = _get_option(pytestconfig, "browser")
    if browser:
        cfg["browser"] = browser[0] if isinstance(browser, (list, tuple)) else browser
    headed = _get_option(pytestconfig, "headed")
    if headed:
        cfg["headless"] = False
    else:
        cfg["headless"] = bool(cfg.get("headless", True))

    # Base URL (pytest-base-url option)
    base_url = _get_option(pytestconfig, "base_url")
    if base_url:
        cfg["base_url"] = base_url
    if not cfg["base_url"].endswith("/"):
        cfg["base_url"] += "/"

    # Target application
    target = _get_option(pytestconfig, "target")
    if target:
        cfg["target"] = target
    else:
        cfg["target"] = cfg.get("target", "stub")

    # Highlight mode
    highlight = _get_option(pytestconfig, "highlight")
    if highlight is not None:
        cfg["highlight"] = highlight.lower() == "true"
    else:
        cfg["highlight"] = bool(cfg.get("highlight", False))

    # Screenshot on error
    screenshot_on_error = _get_option(pytestconfig, "screenshot_on_error")
    if screenshot_on_error is not None:
        cfg["screenshot_on_error"] = screenshot_on_error.lower() == "true"
    else:
        cfg["screenshot_on_error"] = bool(cfg.get("screenshot_on_error", False))

    # Step delay
    step_delay = _get_option(pytestconfig, "step_delay")
    if step_delay is not None:
        cfg["step_delay"] = float(step_delay)
    else:
        cfg["step_delay"] = float(cfg.get("step_delay", 0.0))

    # User fixtures
    users_file = _get_option(pytestconfig, "users_file")
    if users_file:
        cfg["users_file"] = users_file

    return cfg


def _get_option(pytestconfig, name):
    try:
        return pytestconfig.getoption(name)
    except ValueError:
        # Option registered by a plugin that is not installed
        return None


def _users_path(cfg: dict) -> Path:
    path = Path(cfg.get("users_file", "data/users.json"))
    return path if path.is_absolute() else ROOT_DIR / path


# ---------------------------------------------------------------------------
# Scenario catalog parametrization
# ---------------------------------------------------------------------------
def pytest_generate_tests(metafunc):
    if "scenario" in metafunc.fixturenames:
        cfg = load_config(metafunc.config)
        users = load_user_fixtures(_users_path(cfg), cfg)
        scenarios = build_login_scenarios(users, int(cfg.get("min_password_length", 6)))
        metafunc.parametrize("scenario", scenarios, ids=[s.name for s in scenarios])


# ---------------------------------------------------------------------------
# Config and fixture data
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def config(pytestconfig):
    return load_config(pytestconfig)


@pytest.fixture(scope="session")
def users(config):
    """User fixtures, loaded once per run."""
    return load_user_fixtures(_users_path(config), config)


@pytest.fixture(scope="session")
def stub_application(config, users):
    if config["target"] != "stub":
        return None
    print(f"[INFO] Routing {config['base_url']} to the stub application")
    return StubApplication(config["base_url"], users)


# ---------------------------------------------------------------------------
# Playwright fixtures
# ---------------------------------------------------------------------------
@pytest.fixture(scope="session")
def playwright_instance():
    """Provide a shared Playwright instance."""
    with sync_playwright() as p:
        yield p


@pytest.fixture(scope="session")
def browser(playwright_instance, config):
    """Launch a browser based on config."""
    browser_name = config.get("browser", "chromium")
    headless = config.get("headless", True)
    browser = getattr(playwright_instance, browser_name).launch(headless=headless)
    yield browser
    browser.close()


@pytest.fixture(scope="function")
def session(browser, config, stub_application):
    """New isolated browser session per test."""
    session = BrowserSession(browser, config, stub_application)
    session.open()
    yield session
    session.close()


@pytest.fixture(scope="function")
def page(session):
    return session.page


@pytest.fixture(scope="function")
def scenario_runner(session, config):
    return ScenarioRunner(session, config)


def pytest_configure(config):
    """Make sure reports/ exists and direct pytest-html there."""
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    config.option.htmlpath = str(REPORT_FILE)
    print(f"[INFO] HTML report → {REPORT_FILE}")


def pytest_sessionstart(session):
    """Delete old report & screenshots before the session begins."""
    REPORT_DIR.mkdir(parents=True, exist_ok=True)
    for f in REPORT_DIR.glob("*"):
        try:
            f.unlink()
        except OSError as e:
            print(f"[WARN] Could not remove {f}: {e}")


@pytest.hookimpl(hookwrapper=True)
def pytest_runtest_makereport(item, call):
    """Capture a Playwright screenshot and attach it to the HTML report."""
    outcome = yield
    rep = outcome.get_result()

    # Run only when the test itself failed
    if rep.when != "call" or not rep.failed:
        return

    try:
        # Resolved from config.json and --screenshot_on_error by the config fixture
        cfg = item.funcargs.get("config") or {}
        if not cfg.get("screenshot_on_error", True):
            return

        # The session may have been restarted, so ask it for its current page
        session = item.funcargs.get("session", None)
        if not isinstance(session, BrowserSession) or session.page is None:
            return

        # Build unique name: {test-name}-yyyy-MM-dd-hh-mm-ss-sss.png
        ts = datetime.now().strftime("%Y-%m-%d-%H-%M-%S-%f")[:-3]
        screenshot_name = f"{safe_filename(item.name)}-{ts}.png"
        screenshot_path = REPORT_DIR / screenshot_name

        # Give browser time to render any failure overlay
        time.sleep(0.2)

        session.page.screenshot(path=str(screenshot_path), full_page=True)
        print(f"[INFO] Screenshot saved → {screenshot_path}")

        # Attach to pytest-html report
        html = item.config.pluginmanager.getplugin("html")
        if html:
            rel_path = screenshot_path.name
            link_html = f'<a href="{rel_path}" target="_blank">Open Screenshot</a>'
            rep.extras = getattr(rep, "extras", [])
            rep.extras.append(html.extras.html(link_html))
            rep.extras.append(html.extras.image(rel_path))

    except Exception as e:
        print(f"[WARN] Screenshot capture failed: {e}")
