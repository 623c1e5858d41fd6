import json
from dataclasses import dataclass
from pathlib import Path
from helpers.placeholder_manager import PlaceholderManager

REQUIRED_KEYS = ("name", "email", "password", "valid")
FIELD_TYPES = {"name": str, "email": str, "password": str, "valid": bool, "remember_me": bool}


@dataclass(frozen=True)
class Credential:
    email: str
    password: str
    remember_me: bool = False

    def __repr__(self):
        # Keep passwords out of pytest output and reports
        return f"Credential(email={self.email!r}, password='***', remember_me={self.remember_me})"


@dataclass(frozen=True)
class UserFixture:
    name: str
    credential: Credential
    valid: bool


class UserFixtures:
    """
    Ordered, read-only collection of user fixtures.
    Loaded once per test run and passed explicitly to whoever needs it.
    """

    def __init__(self, fixtures):
        self._fixtures = tuple(fixtures)
        names = [fixture.name for fixture in self._fixtures]
        duplicates = sorted({name for name in names if names.count(name) > 1})
        if duplicates:
            raise ValueError(f"Duplicate user fixture names: {', '.join(duplicates)}")

    def __iter__(self):
        return iter(self._fixtures)

    def __len__(self):
        return len(self._fixtures)

    def valid(self) -> list[UserFixture]:
        return [fixture for fixture in self._fixtures if fixture.valid]

    def invalid(self) -> list[UserFixture]:
        return [fixture for fixture in self._fixtures if not fixture.valid]

    def get(self, name: str) -> UserFixture:
        for fixture in self._fixtures:
            if fixture.name == name:
                return fixture
        raise KeyError(f"No user fixture named '{name}'")


def parse_user_fixtures(records, config: dict) -> UserFixtures:
    """
    Build UserFixtures from raw records (the parsed users.json list).

    Email and password values may hold #NAME# placeholders, resolved from
    the command line, the environment or config.json.
    """
    if not isinstance(records, list):
        raise ValueError("User fixtures must be a JSON list of records")

    placeholder_manager = PlaceholderManager(config)
    fixtures = []

    for index, record in enumerate(records):
        if not isinstance(record, dict):
            raise ValueError(f"User fixture #{index} is not an object")

        missing = [key for key in REQUIRED_KEYS if key not in record]
        if missing:
            raise ValueError(f"User fixture #{index} is missing: {', '.join(missing)}")

        for key, expected_type in FIELD_TYPES.items():
            if key in record and not isinstance(record[key], expected_type):
                raise ValueError(f"User fixture #{index} field '{key}' must be a {expected_type.__name__}, "
                                 f"got {type(record[key]).__name__}")

        email = _resolve(placeholder_manager, record["email"])
        password = _resolve(placeholder_manager, record["password"])

        fixtures.append(UserFixture(
            name=record["name"],
            credential=Credential(email, password, record.get("remember_me", False)),
            valid=record["valid"],
        ))

    return UserFixtures(fixtures)


def load_user_fixtures(path, config: dict) -> UserFixtures:
    """Load and resolve the user fixture file (data/users.json by default)."""
    path = Path(path)

    with open(path, encoding="utf-8") as f:
        try:
            records = json.load(f)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in {path}: {e}") from e

    return parse_user_fixtures(records, config)


def _resolve(placeholder_manager: PlaceholderManager, text: str) -> str:
    placeholder_manager.add_placeholders_from_text(text)
    return placeholder_manager.replace_placeholders_with_values(text)
