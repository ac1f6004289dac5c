"""Configuration loading with environment variable substitution.

config.yaml has two top-level keys:

    config:          base settings shared by every environment
    environments:    optional per-environment overlays, keyed by name

The overlay for the selected environment is merged recursively over the base
before the result is validated as ``ConfigData``.
"""

import os
import re
from collections.abc import Mapping
from pathlib import Path
from typing import Any

import yaml
from loguru import logger
from pydantic import ValidationError

from src.contact_form.runtime.config.config_data import ConfigData
from src.contact_form.runtime.config.settings import EnvironmentVariables

_PLACEHOLDER = re.compile(r"\$\{([^}]+)\}")


def substitute_env_vars(text: str, env: Mapping[str, str] | None = None) -> str:
    """
    Substitute environment variable placeholders in text.

    Supports formats:
    - ${VAR_NAME} - required variable (raises error if missing)
    - ${VAR_NAME:-default} - optional with default value
    - ${VAR_NAME:?error_message} - required with custom error message

    Lines that are YAML comments are left untouched.
    """
    variables = os.environ if env is None else env

    def replacer(match: re.Match[str]) -> str:
        var_expr = match.group(1)

        if ":-" in var_expr:
            var_name, default = var_expr.split(":-", 1)
            return variables.get(var_name, default)

        if ":?" in var_expr:
            var_name, error_msg = var_expr.split(":?", 1)
            value = variables.get(var_name)
            if value is None:
                raise ValueError(f"Required environment variable {var_name}: {error_msg}")
            return value

        value = variables.get(var_expr)
        if value is None:
            raise ValueError(f"Required environment variable {var_expr} not set")
        return value

    return "".join(
        line if line.lstrip().startswith("#") else _PLACEHOLDER.sub(replacer, line)
        for line in text.splitlines(keepends=True)
    )


def environment_variables_for(environment: str) -> dict[str, str]:
    """Return os.environ with ``<ENVIRONMENT>_`` prefixed variables promoted.

    ``PRODUCTION_DATABASE_URL`` becomes ``DATABASE_URL`` when loading the
    production environment. Promoted values win over unprefixed ones.
    """
    prefix = f"{environment.upper()}_"
    variables = dict(os.environ)
    promoted = {
        name[len(prefix):]: value
        for name, value in os.environ.items()
        if name.startswith(prefix) and len(name) > len(prefix)
    }
    if promoted:
        logger.debug("Applying {} overrides: {}", environment, sorted(promoted))
    variables.update(promoted)
    return variables


def merge_dicts(base: dict[str, Any], override: Mapping[str, Any]) -> dict[str, Any]:
    """Recursively merge ``override`` into a copy of ``base``."""
    result = dict(base)
    for key, value in override.items():
        if isinstance(result.get(key), dict) and isinstance(value, Mapping):
            result[key] = merge_dicts(result[key], value)
        else:
            result[key] = value
    return result


def load_templated_yaml(file_path: Path, environment: str | None = None) -> ConfigData:
    """
    Load config.yaml for one deployment environment.

    Args:
        file_path: Path to the YAML file
        environment: Environment to load; defaults to APP_ENVIRONMENT

    Returns:
        The validated configuration, with ``app.environment`` set to the
        selected environment

    Raises:
        ValueError: If required environment variables are missing or the
            file does not describe a valid configuration
        FileNotFoundError: If the YAML file doesn't exist
    """
    env_mode = environment or EnvironmentVariables().environment
    logger.info("Loading configuration for environment: {}", env_mode)

    content = Path(file_path).read_text(encoding="utf-8")
    substituted = substitute_env_vars(content, environment_variables_for(env_mode))

    try:
        loaded = yaml.safe_load(substituted)
    except yaml.YAMLError as e:
        raise ValueError(f"Error parsing YAML: {e}") from e
    if not isinstance(loaded, dict):
        raise ValueError("Failed to parse YAML: expected a mapping at the top level")

    base = loaded.get("config") or {}
    overlays = loaded.get("environments") or {}
    overlay = overlays.get(env_mode) or {}
    if env_mode not in overlays:
        logger.debug("No overlay for environment {}; using base configuration", env_mode)

    merged = merge_dicts(base, overlay)
    merged = merge_dicts(merged, {"app": {"environment": env_mode}})

    try:
        return ConfigData.model_validate(merged)
    except ValidationError as e:
        raise ValueError(f"Invalid configuration: {e}") from e


def load_config() -> ConfigData:
    """Load the process configuration, falling back to defaults without a file."""
    settings = EnvironmentVariables()
    path = Path(settings.config_file)
    if not path.exists():
        logger.warning("Configuration file {} not found; using defaults", path)
        return ConfigData.model_validate({"app": {"environment": settings.environment}})
    return load_templated_yaml(path, settings.environment)
