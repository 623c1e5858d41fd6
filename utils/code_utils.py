import inspect
import os
import sys


def normalize_args(fn, *args, **kwargs):
    """
    Ensure the first positional-or-keyword parameter is always in args[0].
    Leave keyword-only arguments in kwargs.

    Example:
        normalize_args(locator.fill, value="secret")
        → (("secret",), {})
    """
    try:
        sig = inspect.signature(fn)
    except (TypeError, ValueError):
        # Builtins and some mocks expose no signature
        return tuple(args), dict(kwargs)

    params = list(sig.parameters.values())

    normalized_args = list(args)
    new_kwargs = dict(kwargs)

    for i, p in enumerate(params):
        if p.kind in (inspect.Parameter.POSITIONAL_ONLY, inspect.Parameter.POSITIONAL_OR_KEYWORD):
            if len(normalized_args) <= i and p.name in new_kwargs:
                normalized_args.insert(i, new_kwargs.pop(p.name))
        # Stop after handling the first string input param
        if i == 0:
            break

    return tuple(normalized_args), new_kwargs


def get_effective_config_value(name: str, config: dict) -> str | None:
    """
    Returns the effective configuration value for a given name, following priority:
        1. Command-line parameter (--name=value)
        2. System environment variable (case-insensitive)
        3. Config file value (case-insensitive)

    Environment wins over config.json so that real credentials never have
    to be committed next to the defaults.

    Args:
        name (str): Variable name (case-insensitive, e.g. "QA_USER_EMAIL")
        config (dict): Configuration dictionary loaded from config.json

    Returns:
        str | None: Effective value or None if not found
    """
    name_lower = name.lower()

    # 1️ Command-line via raw sys.argv (--name=value)
    for arg in sys.argv:
        if arg.startswith("--") and "=" in arg:
            arg_name, arg_val = arg[2:].split("=", 1)
            if arg_name.lower() == name_lower:
                return arg_val.strip()

    # 2️ Environment variable
    for key, value in os.environ.items():
        if key.lower() == name_lower:
            return str(value)

    # 3️ Config file
    for key, value in config.items():
        if key.lower() == name_lower:
            return str(value)

    return None
