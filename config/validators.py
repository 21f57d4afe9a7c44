"""
Configuration Validation for Post Insights

This module contains configuration validation logic.
Kept apart from settings.py so settings stays a plain table of values.
"""

from utils.exceptions import ConfigurationError
from utils.helpers import is_valid_url


def validate_settings():
    """
    Validate that all required settings are properly configured.

    Raises:
        ConfigurationError: If required settings are missing or invalid.
    """
    # Import settings here to avoid circular imports
    from config import settings

    errors = []

    # Required environment variables
    required_vars = [
        ("LLAMA_API_KEY", settings.LLAMA_API_KEY),
        ("LLAMA_API_URL", settings.LLAMA_API_URL),
        ("LLAMA_MODEL", settings.LLAMA_MODEL),
    ]

    for var_name, var_value in required_vars:
        if not var_value:
            errors.append(f"Missing required environment variable: {var_name}")

    if settings.LLAMA_API_URL and not is_valid_url(settings.LLAMA_API_URL):
        errors.append(f"LLAMA_API_URL is not a valid URL: {settings.LLAMA_API_URL}")

    # Validate numeric settings are within reasonable bounds
    numeric_validations = [
        ("LLAMA_REQUEST_TIMEOUT", settings.LLAMA_REQUEST_TIMEOUT, 1, 120),
        ("IMAGE_ANALYSIS_DELAY", settings.IMAGE_ANALYSIS_DELAY, 0.0, 60.0),
        ("RECENTLY_VIEWED_LIMIT", settings.RECENTLY_VIEWED_LIMIT, 0, 100),
    ]

    for name, value, min_val, max_val in numeric_validations:
        if value < min_val or value > max_val:
            errors.append(f"{name} must be between {min_val} and {max_val}, got {value}")

    # Raise all errors at once
    if errors:
        error_msg = "Configuration validation failed:\n" + "\n".join(f"  - {e}" for e in errors)
        raise ConfigurationError(error_msg)

    return True


def get_config_summary() -> dict:
    """
    Returns a summary of current configuration (without sensitive values).
    Useful for logging startup state.
    """
    # Import settings here to avoid circular imports
    from config import settings

    return {
        "chat_api": {
            "url": settings.LLAMA_API_URL,
            "model": settings.LLAMA_MODEL,
            "api_key_configured": bool(settings.LLAMA_API_KEY),
            "timeout_seconds": settings.LLAMA_REQUEST_TIMEOUT,
        },
        "search": {
            "image_analysis_delay": settings.IMAGE_ANALYSIS_DELAY,
            "recently_viewed_limit": settings.RECENTLY_VIEWED_LIMIT,
        },
    }
