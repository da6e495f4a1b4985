import os
import yaml
from revenuelens.core.domain.settings import SystemSettings

# Environment variable -> key inside the 'analytics' section
ANALYTICS_ENV_OVERRIDES = {
    "REVENUELENS_FORECASTING_WINDOW": "forecasting_window",
    "REVENUELENS_EMA_ALPHA": "ema_alpha",
    "REVENUELENS_ANOMALY_THRESHOLD": "anomaly_threshold",
    "REVENUELENS_BREAK_SENSITIVITY": "break_sensitivity",
}


def load_settings(path: str | None = None) -> SystemSettings:
    """
    Load system settings from a YAML file.
    Falls back to environment variables if file doesn't exist or is not provided.

    Args:
        path: Path to config.yaml. Defaults to REVENUELENS_CONFIG_FILE env var or "config.yaml".
    """
    if path is None:
        path = os.getenv("REVENUELENS_CONFIG_FILE", "config.yaml")

    config_data = {}

    if os.path.exists(path):
        try:
            with open(path, "r") as f:
                config_data = yaml.safe_load(f) or {}
        except Exception as e:
            raise RuntimeError(f"Failed to load configuration from {path}: {e}")

    # Env vars > File > Defaults
    if os.getenv("REVENUELENS_LOG_LEVEL"):
        config_data["log_level"] = os.getenv("REVENUELENS_LOG_LEVEL")

    analytics = dict(config_data.get("analytics") or {})
    for env_name, key in ANALYTICS_ENV_OVERRIDES.items():
        if os.getenv(env_name):
            analytics[key] = os.getenv(env_name)
    if analytics:
        config_data["analytics"] = analytics

    return SystemSettings(**config_data)
