APP_NAME = "keepsake"
ENV_PREFIX = "KEEPSAKE_SETTINGS__"

# Reserved store key holding the ISO-8601 UTC time of the last flush.
LAST_SAVE_TIME_KEY = "LastSaveTime"

DEFAULT_SETTINGS_FILENAME = "settings.yaml"
DEFAULT_REGISTRY_FILENAME = "registry.json"
