"""
Speech dictation service for Tasknote
Wraps a speech-to-text backend and keeps the running transcript
"""
from enum import Enum
from typing import Callable, List, Optional, Protocol

from ..utils.logging import get_logger, log_error

logger = get_logger(__name__)

ResultCallback = Callable[[str], None]
ErrorCallback = Callable[[Exception], None]


class SpeechErrorKind(str, Enum):
    """Reasons dictation can fail"""
    NOT_AUTHORIZED = "not_authorized"
    RECOGNITION_FAILED = "recognition_failed"
    RECOGNITION_UNAVAILABLE = "recognition_unavailable"


class SpeechRecognitionError(Exception):
    """Raised when dictation cannot start or the recognizer fails"""
    def __init__(self, kind: SpeechErrorKind, message: Optional[str] = None):
        self.kind = kind
        super().__init__(message or kind.value.replace("_", " "))


class SpeechBackend(Protocol):
    """Audio capture plus speech-to-text, e.g. a platform recognizer."""

    def request_authorization(self) -> bool: ...

    def is_available(self) -> bool: ...

    def start(self, on_result: ResultCallback, on_error: ErrorCallback) -> None: ...

    def stop(self) -> None: ...


class DictationSession:
    """
    One dictation at a time over a SpeechBackend.

    The backend reports partial transcripts through on_result; each replaces
    recognized_text. A backend error stops recording and is kept in error.
    """

    def __init__(self, backend: SpeechBackend):
        self.backend = backend
        self.is_recording = False
        self.recognized_text = ""
        self.error: Optional[SpeechRecognitionError] = None

    def start_recording(self) -> None:
        """
        Start dictation.

        Raises:
            SpeechRecognitionError: If the user has not authorized speech
                recognition, the recognizer is unavailable, or the backend
                fails to start
        """
        if not self.backend.request_authorization():
            self.error = SpeechRecognitionError(SpeechErrorKind.NOT_AUTHORIZED)
            raise self.error

        if not self.backend.is_available():
            self.error = SpeechRecognitionError(SpeechErrorKind.RECOGNITION_UNAVAILABLE)
            raise self.error

        if self.is_recording:
            self.backend.stop()

        self.recognized_text = ""
        self.error = None
        self.is_recording = True
        try:
            self.backend.start(self._on_result, self._on_error)
        except Exception as e:
            self.is_recording = False
            self.error = SpeechRecognitionError(SpeechErrorKind.RECOGNITION_FAILED, str(e))
            raise self.error from e

    def try_start_recording(self) -> bool:
        """Start dictation, logging instead of raising on failure."""
        try:
            self.start_recording()
            return True
        except SpeechRecognitionError as e:
            log_error(e, "DictationSession.start_recording")
            return False

    def stop_recording(self) -> str:
        """Stop dictation and return the final transcript."""
        if self.is_recording:
            self.backend.stop()
            self.is_recording = False
        return self.recognized_text

    def _on_result(self, text: str) -> None:
        self.recognized_text = text

    def _on_error(self, error: Exception) -> None:
        self.stop_recording()
        self.error = SpeechRecognitionError(SpeechErrorKind.RECOGNITION_FAILED, str(error))
        log_error(error, "DictationSession recognition")


class ScriptedSpeechBackend:
    """
    Backend that replays a fixed list of partial transcripts.

    Used for demos and tests where no microphone is present. When fail_with
    is set, the error is reported after the partial results.
    """

    def __init__(
        self,
        partials: List[str],
        authorized: bool = True,
        available: bool = True,
        fail_with: Optional[Exception] = None,
    ):
        self.partials = list(partials)
        self.authorized = authorized
        self.available = available
        self.fail_with = fail_with
        self.running = False

    def request_authorization(self) -> bool:
        return self.authorized

    def is_available(self) -> bool:
        return self.available

    def start(self, on_result: ResultCallback, on_error: ErrorCallback) -> None:
        self.running = True
        for text in self.partials:
            on_result(text)
        if self.fail_with is not None:
            on_error(self.fail_with)

    def stop(self) -> None:
        self.running = False


__all__ = [
    "SpeechErrorKind",
    "SpeechRecognitionError",
    "SpeechBackend",
    "DictationSession",
    "ScriptedSpeechBackend",
]
