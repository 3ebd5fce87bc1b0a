"""Built-in default configuration for mkcd."""

# Base layer that every other config source is merged on top of
DEFAULT_CONFIG = {
    "version": "1.0",
    "settings": {
        "verbose": False,
        "color": True,
    },
}
