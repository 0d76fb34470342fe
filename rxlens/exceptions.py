"""Error taxonomy for the capture → transcribe pipeline."""


class ConfigurationError(ValueError):
    """Raised when a component is built without the settings it requires."""


class TranscriptionError(Exception):
    """Base for every failure normalized at the transcription boundary."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class CaptureUnavailable(TranscriptionError):
    """No image could be obtained: permission denied or nothing to capture."""


class EncodingFailure(TranscriptionError):
    """The captured image bytes are empty or unreadable."""


class NetworkFailure(TranscriptionError):
    """Connectivity problem or timeout talking to the inference endpoint."""


class EndpointFailure(TranscriptionError):
    """Non-success HTTP status or a response body of the wrong shape."""
