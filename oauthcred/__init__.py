"""Configuration, data locations, database setup and settings for an OAuth-backed git credential helper."""

__version__ = "0.1.0"
__all__ = [
    "app_config",
    "user_resource",
    "sql_statements",
    "httpbody",
    "helper_settings",
    "cred_default",
]