import re
from utils.code_utils import get_effective_config_value

PLACEHOLDER_PREFIX = "#"
PLACEHOLDER_SUFFIX = "#"
PLACEHOLDER_PATTERN = re.compile(
    rf"{re.escape(PLACEHOLDER_PREFIX)}([A-Z][A-Z0-9_]*){re.escape(PLACEHOLDER_SUFFIX)}")


class PlaceholderManager:

    def __init__(self, config: dict):
        self.config = config
        self.placeholders_map = {}

    # Adds a simple key-only or key-value placeholder
    def add_placeholder(self, name: str, value=None):
        self.placeholders_map[name] = str(value) if value is not None else None

    # Removes a simple key-only or key-value placeholder
    def remove_placeholder(self, name: str):
        return self.placeholders_map.pop(name, None)

    # Registers every #NAME# found in the text as a key-only placeholder
    def add_placeholders_from_text(self, text: str):
        for name in find_placeholder_names(text):
            if name.lower() not in self.placeholders_map:
                self.add_placeholder(name.lower())

    # Replaces simple key-only or key-value placeholders with their values
    def replace_placeholders_with_values(self, text: str) -> str:
        initial_text = ""

        # Repeat replacements for nested placeholders
        while text != initial_text:
            initial_text = text

            for key, value in self.placeholders_map.items():
                simple_placeholder = get_simple_placeholder_from_name(key)

                if simple_placeholder not in text:
                    continue

                if value is None:
                    # Get key-only value from command line parameter
                    # or from system env variable
                    # or from config parameter
                    value = get_effective_config_value(key, self.config)

                    if value is None:
                        print(f"[WARN] Placeholder {simple_placeholder} has no value")
                        continue
                    self.placeholders_map[key] = value

                text = text.replace(simple_placeholder, value)
        return text


# Create placeholder from its name
def get_simple_placeholder_from_name(name: str) -> str:
    return f"{PLACEHOLDER_PREFIX}{name.upper()}{PLACEHOLDER_SUFFIX}"


# Names of all #NAME# placeholders in the text, in order of appearance
def find_placeholder_names(text: str) -> list[str]:
    return PLACEHOLDER_PATTERN.findall(text or "")
