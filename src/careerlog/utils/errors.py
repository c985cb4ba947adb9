"""Custom exceptions for careerlog."""


class CareerLogError(Exception):
    """Base exception for all careerlog errors."""

    pass


class ConfigError(CareerLogError):
    """Configuration-related errors."""

    pass


class InvalidConfigError(ConfigError):
    """Invalid configuration data."""

    pass


class MissingCredentialError(ConfigError):
    """A required credential is absent from the environment."""

    def __init__(self, variables: list[str]) -> None:
        self.variables = variables
        noun = "variable" if len(variables) == 1 else "variables"
        super().__init__(
            f"Missing required environment {noun}: {', '.join(variables)}"
        )


class EpisodeStoreError(CareerLogError):
    """Episode store errors."""

    pass


class StoreNotFoundError(EpisodeStoreError):
    """No episode store file could be located."""

    pass


class EpisodeNotFoundError(EpisodeStoreError):
    """Episode GUID not present in the store."""

    def __init__(self, guid: str) -> None:
        self.guid = guid
        super().__init__(f"Episode with GUID {guid} not found")


class FeedParseError(EpisodeStoreError):
    """RSS feed parsing errors."""

    pass


class PlatformError(CareerLogError):
    """Error talking to a podcast platform."""

    def __init__(
        self, message: str, platform: str, status_code: int | None = None
    ) -> None:
        super().__init__(message)
        self.platform = platform
        self.status_code = status_code


class PlatformAuthError(PlatformError):
    """Platform rejected our credentials."""

    pass


class EmptyResultError(PlatformError):
    """Platform answered but returned nothing usable."""

    pass


class AutomationError(PlatformError):
    """Headless browser automation failed."""

    pass


class BrowserUnavailableError(AutomationError):
    """Browser automation library or browser binary is not installed."""

    pass


class PageTimeoutError(AutomationError):
    """Page did not finish loading in time."""

    pass


class TranscriptionError(CareerLogError):
    """Transcription service errors."""

    pass


class TranscriptNotFoundError(TranscriptionError):
    """No transcript file for the episode."""

    pass


class TranscriptionTimeoutError(TranscriptionError):
    """Transcription job did not finish within the allowed number of polls."""

    pass


class HighlightError(CareerLogError):
    """Highlight generation errors."""

    pass


class PostingError(CareerLogError):
    """Social posting errors."""

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        self.status_code = status_code
