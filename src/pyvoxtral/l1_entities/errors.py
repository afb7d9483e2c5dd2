"""Domain error types."""

from __future__ import annotations


class VoxtralError(Exception):
    """Base class for every error raised by the binding."""


class LibraryNotFoundError(VoxtralError, FileNotFoundError):
    """Raised when the native shared library does not exist at the resolved path."""

    def __init__(self, path: str) -> None:
        super().__init__(f'Voxtral library not found at {path}')
        self.path = path


class LibraryOpenError(VoxtralError):
    """Raised when the shared library exists but the dynamic loader rejects it."""

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f'Failed to load Voxtral library {path}: {reason}')
        self.path = path


class SymbolResolutionError(VoxtralError):
    """Raised when a required entry point is missing from the shared library."""

    def __init__(self, symbol: str, path: str) -> None:
        super().__init__(f'Symbol {symbol!r} not found in {path}')
        self.symbol = symbol
        self.path = path


class LibraryNotInitializedError(VoxtralError):
    """Raised when the process-wide library is requested before init()."""


class ModelLoadError(VoxtralError):
    """Raised when the native load_model entry point returns a nonzero code."""

    def __init__(self, model_dir: str, code: int) -> None:
        super().__init__(f'Failed to load Voxtral model from {model_dir} (code {code})')
        self.model_dir = model_dir
        self.code = code


class ConversionError(VoxtralError):
    """Raised when ffmpeg cannot produce the 16 kHz mono WAV.

    ``output`` holds whatever ffmpeg printed (stdout and stderr combined), or
    the launch error when the process never started.
    """

    def __init__(self, audio_path: str, output: str, returncode: int | None = None) -> None:
        if returncode is None:
            message = f'ffmpeg conversion failed for {audio_path}'
        else:
            message = f'ffmpeg exited with code {returncode} for {audio_path}'
        if output:
            message = f'{message}\n{output}'
        super().__init__(message)
        self.audio_path = audio_path
        self.output = output
        self.returncode = returncode
