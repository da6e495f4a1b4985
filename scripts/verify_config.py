import sys

from revenuelens.adapters.config.settings_loader import load_settings

path = sys.argv[1] if len(sys.argv) > 1 else None

try:
    settings = load_settings(path)
    print(f"LOG_LEVEL: {settings.log_level}")
    for key, value in settings.analytics.model_dump().items():
        print(f"{key.upper()}: {value}")
    print("Configuration loaded successfully!")
except Exception as e:
    print(f"Configuration failed: {e}")
    sys.exit(1)
