"""API key validation utilities.

Keys come from the environment (or a .env file). Catch the usual copy-paste
mistakes early, before a request goes out with a broken header.
"""

import re
from typing import Literal

Provider = Literal["spotify", "youtube", "x", "assemblyai", "groq"]

_PROVIDER_NAMES: dict[str, str] = {
    "spotify": "Spotify",
    "youtube": "YouTube",
    "x": "X",
    "assemblyai": "AssemblyAI",
    "groq": "Groq",
}


class APIKeyError(ValueError):
    """Raised when API key is invalid or missing."""

    pass


def validate_api_key(key: str | None, provider: Provider, key_name: str) -> str:
    """Validate API key format and return cleaned key.

    Args:
        key: The API key to validate (may be None)
        provider: The API provider name
        key_name: Environment variable name (for error messages)

    Returns:
        Validated and stripped API key

    Raises:
        APIKeyError: If key is missing, empty, or malformed

    Example:
        >>> validate_api_key(os.environ.get("GROQ_API_KEY"), "groq", "GROQ_API_KEY")
    """
    name = _PROVIDER_NAMES[provider]

    if key is None or not key.strip():
        raise APIKeyError(
            f"{name} credential is required.\n"
            f"Set the {key_name} environment variable.\n"
            f"Example: export {key_name}='your-key-here'"
        )

    # Check quotes and control characters on the raw value
    stripped = key.strip()
    if (stripped.startswith('"') and stripped.endswith('"')) or (
        stripped.startswith("'") and stripped.endswith("'")
    ):
        raise APIKeyError(
            f"{name} credential should not be quoted.\n"
            f"Remove quotes from {key_name} environment variable.\n"
            f"Example: export {key_name}=your-key-here"
        )

    if any(char in key for char in ["\n", "\r", "\0", "\t"]):
        raise APIKeyError(
            f"{name} credential contains invalid characters.\n"
            f"Credentials should not contain newlines or control characters.\n"
            f"Check your {key_name} environment variable."
        )

    if provider == "groq" and not re.match(r"^gsk_[A-Za-z0-9]+$", stripped):
        raise APIKeyError(
            f"Groq API key format appears invalid.\n"
            f"Groq keys start with 'gsk_' followed by alphanumeric characters.\n"
            f"Check your {key_name} environment variable."
        )

    return stripped
