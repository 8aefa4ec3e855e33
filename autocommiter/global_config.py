"""Global configuration management for autocommiter.

Handles user-level files stored in ~/.autocommiter/:
- config.yaml: selected model and gitmoji preference
- credentials: API key for the GitHub Models inference service
- models.json: cached catalogue of chat-completion models
"""

import os
import stat
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from autocommiter.config import API_KEY_ENV_VAR, DEFAULT_MODEL, Settings


class GlobalConfigError(Exception):
    """Raised when there's an error with global configuration."""
    pass


_CONFIG_DIR = Path.home() / ".autocommiter"


def get_global_config_dir() -> Path:
    """Get the global autocommiter configuration directory.

    Returns:
        Path to ~/.autocommiter/
    """
    return _CONFIG_DIR


def ensure_global_config_dir() -> Path:
    """Ensure the global config directory exists."""
    config_dir = get_global_config_dir()
    config_dir.mkdir(parents=True, exist_ok=True)
    return config_dir


def get_config_file_path() -> Path:
    return get_global_config_dir() / "config.yaml"


def get_credentials_file_path() -> Path:
    return get_global_config_dir() / "credentials"


def get_models_cache_path() -> Path:
    return get_global_config_dir() / "models.json"


def load_global_config() -> Dict[str, Any]:
    """Load global configuration from ~/.autocommiter/config.yaml.

    Returns:
        Dictionary with configuration values. Empty dict if file doesn't exist.

    Raises:
        GlobalConfigError: If the file exists but cannot be parsed.
    """
    config_file = get_config_file_path()

    if not config_file.exists():
        return {}

    try:
        with open(config_file, "r", encoding="utf-8") as f:
            config = yaml.safe_load(f) or {}
    except (OSError, yaml.YAMLError) as e:
        raise GlobalConfigError(f"Failed to load config from {config_file}: {e}")

    if not isinstance(config, dict):
        raise GlobalConfigError(f"Invalid config in {config_file}: expected a mapping")
    return config


def save_global_config(config: Dict[str, Any]) -> None:
    """Save global configuration to ~/.autocommiter/config.yaml."""
    ensure_global_config_dir()
    config_file = get_config_file_path()

    try:
        with open(config_file, "w", encoding="utf-8") as f:
            yaml.dump(config, f, default_flow_style=False, sort_keys=False)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save config to {config_file}: {e}")


def _parse_credentials(text: str) -> Dict[str, str]:
    credentials = {}
    for line in text.splitlines():
        line = line.strip()
        # Skip empty lines and comments
        if not line or line.startswith("#"):
            continue
        if "=" in line:
            key, value = line.split("=", 1)
            credentials[key.strip()] = value.strip()
    return credentials


def load_credentials() -> Dict[str, str]:
    """Load API keys from ~/.autocommiter/credentials.

    Returns:
        Dictionary mapping environment variable names to keys.
    """
    credentials_file = get_credentials_file_path()

    if not credentials_file.exists():
        return {}

    try:
        return _parse_credentials(credentials_file.read_text(encoding="utf-8"))
    except OSError as e:
        raise GlobalConfigError(f"Failed to load credentials from {credentials_file}: {e}")


def save_credential(key_name: str, api_key: str) -> None:
    """Save or update one KEY=value entry in the credentials file.

    The file is restricted to owner read/write.
    """
    ensure_global_config_dir()
    credentials_file = get_credentials_file_path()

    credentials = load_credentials()
    credentials[key_name] = api_key

    try:
        with open(credentials_file, "w", encoding="utf-8") as f:
            f.write("# autocommiter API credentials\n")
            f.write("# Format: NAME=value\n\n")
            for key, value in credentials.items():
                f.write(f"{key}={value}\n")

        os.chmod(credentials_file, stat.S_IRUSR | stat.S_IWUSR)
    except OSError as e:
        raise GlobalConfigError(f"Failed to save credential: {e}")


def get_credential(key_name: str) -> Optional[str]:
    return load_credentials().get(key_name)


def get_api_key() -> Optional[str]:
    """Get the inference API key.

    Checks the GITHUB_TOKEN environment variable first (a .env file is
    loaded into the environment when autocommiter.llm is imported), then the
    credentials file.
    """
    api_key = os.getenv(API_KEY_ENV_VAR)
    if api_key:
        return api_key
    return get_credential(API_KEY_ENV_VAR)


def set_api_key(api_key: str) -> None:
    save_credential(API_KEY_ENV_VAR, api_key)


def get_selected_model() -> str:
    """Get the selected model id, falling back to the default model."""
    return load_global_config().get("model") or DEFAULT_MODEL


def set_selected_model(model_id: str) -> None:
    config = load_global_config()
    config["model"] = model_id
    save_global_config(config)


def get_gitmoji_enabled() -> bool:
    """Return True only if gitmoji prefixes were explicitly enabled."""
    return load_global_config().get("enable_gitmoji") is True


def set_gitmoji_enabled(enabled: bool) -> None:
    config = load_global_config()
    config["enable_gitmoji"] = enabled
    save_global_config(config)


def is_configured() -> bool:
    """Check if an API key is available from any source."""
    return bool(get_api_key())


def load_settings() -> Settings:
    """Resolve all user settings into one Settings value.

    Called once per CLI invocation; the result is passed explicitly to
    whatever needs it.
    """
    config = load_global_config()
    return Settings(
        api_key=get_api_key(),
        model=config.get("model") or DEFAULT_MODEL,
        gitmoji=config.get("enable_gitmoji") is True,
    )
