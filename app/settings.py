from constants import *
import copy
import yaml
import os

import logging

# Retrieve main logger
logger = logging.getLogger("main")


# Cache variable
_cached_settings = None


def _apply_environment_overrides(settings):
    for env_name, (section, key) in ENVIRONMENT_OVERRIDES.items():
        value = os.environ.get(env_name)
        if value:
            settings.setdefault(section, {})[key] = value
    return settings


def load_settings(force=False):
    global _cached_settings

    if _cached_settings and not force:
        return _cached_settings

    settings = copy.deepcopy(DEFAULT_SETTINGS)

    if os.path.exists(CONFIG_FILE):
        logger.debug(f"Reading configuration file: {CONFIG_FILE}")
        with open(CONFIG_FILE, "r") as yaml_file:
            file_settings = yaml.safe_load(yaml_file) or {}

        # Deep merge with defaults so new keys are always present
        for section, values in file_settings.items():
            if isinstance(values, dict) and isinstance(settings.get(section), dict):
                settings[section].update(values)
            else:
                settings[section] = values

    else:
        try:
            os.makedirs(CONFIG_DIR, exist_ok=True)
            with open(CONFIG_FILE, "w") as yaml_file:
                yaml.dump(DEFAULT_SETTINGS, yaml_file)
        except OSError as e:
            logger.warning(f"Could not write default configuration to {CONFIG_FILE}: {e}")

    settings = _apply_environment_overrides(settings)

    _cached_settings = settings
    return settings


def reload_conf():
    return load_settings(force=True)


def verify_settings(settings):
    success = True
    errors = []
    jwt_settings = settings.get("jwt", {})
    for key in ("access_token_expiration", "refresh_token_expiration", "register_token_expiration"):
        value = jwt_settings.get(key)
        if not isinstance(value, int) or value <= 0:
            success = False
            errors.append({"path": f"jwt/{key}", "error": f"Expiration must be a positive number of seconds, got {value!r}."})
    same_site = settings.get("cookie", {}).get("same_site")
    if same_site not in ("Strict", "Lax", "None"):
        success = False
        errors.append({"path": "cookie/same_site", "error": f"Unsupported SameSite value {same_site!r}."})
    return success, errors
