"""Credential resolution.

Everything secret comes from the environment. It is read once at startup
into a ``Credentials`` object that is passed down explicitly; a missing
platform credential is a reason to skip that platform, not to crash.
"""

import logging
import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import load_dotenv
from pydantic import BaseModel

from careerlog.config.schema import GlobalConfig
from careerlog.utils.api_keys import Provider, validate_api_key
from careerlog.utils.errors import MissingCredentialError

logger = logging.getLogger(__name__)

# Environment variable -> Credentials field
CREDENTIAL_VARIABLES: dict[str, str] = {
    "SPOTIFY_CLIENT_ID": "spotify_client_id",
    "SPOTIFY_CLIENT_SECRET": "spotify_client_secret",
    "YOUTUBE_API_KEY": "youtube_api_key",
    "X_API_KEY": "x_api_key",
    "X_API_SECRET": "x_api_secret",
    "X_ACCESS_TOKEN": "x_access_token",
    "X_ACCESS_TOKEN_SECRET": "x_access_token_secret",
    "ASSEMBLYAI_API_KEY": "assemblyai_api_key",
    "GROQ_API_KEY": "groq_api_key",
}


class XCredentials(BaseModel):
    """OAuth 1.0a user-context credentials for X."""

    api_key: str
    api_secret: str
    access_token: str
    access_token_secret: str


class Credentials(BaseModel):
    """Secrets available to this process. Any field may be absent."""

    spotify_client_id: str | None = None
    spotify_client_secret: str | None = None
    youtube_api_key: str | None = None
    x_api_key: str | None = None
    x_api_secret: str | None = None
    x_access_token: str | None = None
    x_access_token_secret: str | None = None
    assemblyai_api_key: str | None = None
    groq_api_key: str | None = None

    @property
    def has_spotify(self) -> bool:
        return bool(self.spotify_client_id and self.spotify_client_secret)

    @property
    def has_youtube(self) -> bool:
        return bool(self.youtube_api_key)

    def require_x(self) -> XCredentials:
        """Return X credentials or raise listing every missing variable."""
        values = self._require(
            [
                ("X_API_KEY", "x"),
                ("X_API_SECRET", "x"),
                ("X_ACCESS_TOKEN", "x"),
                ("X_ACCESS_TOKEN_SECRET", "x"),
            ]
        )
        return XCredentials(
            api_key=values["X_API_KEY"],
            api_secret=values["X_API_SECRET"],
            access_token=values["X_ACCESS_TOKEN"],
            access_token_secret=values["X_ACCESS_TOKEN_SECRET"],
        )

    def require_assemblyai(self) -> str:
        return self._require([("ASSEMBLYAI_API_KEY", "assemblyai")])["ASSEMBLYAI_API_KEY"]

    def require_groq(self) -> str:
        return self._require([("GROQ_API_KEY", "groq")])["GROQ_API_KEY"]

    def _require(self, variables: list[tuple[str, Provider]]) -> dict[str, str]:
        missing = [
            name
            for name, _ in variables
            if not getattr(self, CREDENTIAL_VARIABLES[name])
        ]
        if missing:
            raise MissingCredentialError(missing)

        return {
            name: validate_api_key(
                getattr(self, CREDENTIAL_VARIABLES[name]), provider, name
            )
            for name, provider in variables
        }


def load_environment(dotenv_path: Path | None = None) -> bool:
    """Load a ``.env`` file into the process environment.

    Existing variables are never overridden, so CI secrets win over a stray
    local file.
    """
    loaded = load_dotenv(dotenv_path=dotenv_path, override=False)
    if loaded:
        logger.debug("Loaded environment from .env")
    return loaded


def resolve_credentials(environ: Mapping[str, str] | None = None) -> Credentials:
    """Read every known credential from the environment.

    Empty strings count as absent.
    """
    env = os.environ if environ is None else environ
    values = {
        field: env.get(variable) or None
        for variable, field in CREDENTIAL_VARIABLES.items()
    }
    return Credentials(**values)


def apply_environment_overrides(
    config: GlobalConfig, environ: Mapping[str, str] | None = None
) -> GlobalConfig:
    """Overlay show/channel identifiers from the environment onto config.

    Returns a new config; the input is left untouched.
    """
    env = os.environ if environ is None else environ
    updated = config.model_copy(deep=True)

    if env.get("SPOTIFY_SHOW_ID"):
        updated.spotify.show_id = env["SPOTIFY_SHOW_ID"]
    if env.get("YOUTUBE_CHANNEL_ID"):
        updated.youtube.channel = env["YOUTUBE_CHANNEL_ID"]
    if env.get("APPLE_PODCAST_ID"):
        updated.apple.podcast_id = env["APPLE_PODCAST_ID"]
    if env.get("AMAZON_MUSIC_SHOW_ID"):
        updated.amazon.show_id = env["AMAZON_MUSIC_SHOW_ID"]
    if env.get("AMAZON_MUSIC_REGION"):
        updated.amazon.region = env["AMAZON_MUSIC_REGION"]

    return updated
