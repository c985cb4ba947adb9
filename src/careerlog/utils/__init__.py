"""Utility functions and helpers for careerlog."""

from careerlog.utils.errors import (
    AutomationError,
    BrowserUnavailableError,
    CareerLogError,
    ConfigError,
    EmptyResultError,
    EpisodeNotFoundError,
    EpisodeStoreError,
    FeedParseError,
    HighlightError,
    InvalidConfigError,
    MissingCredentialError,
    PageTimeoutError,
    PlatformAuthError,
    PlatformError,
    PostingError,
    StoreNotFoundError,
    TranscriptionError,
    TranscriptionTimeoutError,
    TranscriptNotFoundError,
)
from careerlog.utils.paths import get_config_dir

__all__ = [
    # Errors
    "CareerLogError",
    "ConfigError",
    "InvalidConfigError",
    "MissingCredentialError",
    "EpisodeStoreError",
    "StoreNotFoundError",
    "EpisodeNotFoundError",
    "FeedParseError",
    "PlatformError",
    "PlatformAuthError",
    "EmptyResultError",
    "AutomationError",
    "BrowserUnavailableError",
    "PageTimeoutError",
    "TranscriptionError",
    "TranscriptNotFoundError",
    "TranscriptionTimeoutError",
    "HighlightError",
    "PostingError",
    # Paths
    "get_config_dir",
]
