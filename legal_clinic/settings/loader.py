import logging
import os
from collections.abc import Mapping
from pathlib import Path

import yaml
from pydantic import ValidationError

from legal_clinic.exceptions import SettingsError
from legal_clinic.settings.models import Settings

logger = logging.getLogger(__name__)

SETTINGS_PATH_ENV = "LC_SETTINGS_PATH"
API_BASE_URL_ENV = "LC_API_BASE_URL"


def load_settings(path: Path, env: Mapping[str, str] | None = None) -> Settings:
    """
    Load and validate the settings file.

    ``LC_API_BASE_URL`` in the environment overrides ``api.base_url``.
    Raises SettingsError if the file is missing, not YAML, or fails validation.
    """
    env = os.environ if env is None else env

    if not path.exists():
        raise SettingsError(f"Settings file not found at: {path}")

    try:
        data = yaml.safe_load(path.read_text())
    except yaml.YAMLError as e:
        raise SettingsError(f"Invalid YAML syntax in settings file: {e}") from e

    if not isinstance(data, dict):
        raise SettingsError("Settings file must contain a mapping")

    override = env.get(API_BASE_URL_ENV)
    if override:
        if not isinstance(data.get("api"), dict):
            data["api"] = {}
        data["api"]["base_url"] = override
        logger.info("API base URL overridden from %s", API_BASE_URL_ENV)

    try:
        return Settings.model_validate(data)
    except ValidationError as e:
        raise SettingsError(f"Settings validation failed:\n{e}") from e


def default_settings_path(env: Mapping[str, str] | None = None) -> Path:
    env = os.environ if env is None else env
    return Path(env.get(SETTINGS_PATH_ENV, "settings.yaml"))
