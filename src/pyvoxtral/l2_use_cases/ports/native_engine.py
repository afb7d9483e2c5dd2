"""Port: native speech-to-text engine entry points."""

from __future__ import annotations

from typing import Protocol


class NativeEngine(Protocol):
    """The three entry points exported by the native engine."""

    def load_model(self, model_dir: str) -> int:
        """Load model weights from *model_dir*. Returns 0 on success, a failure code otherwise."""
        ...

    def transcribe(self, wav_path: str) -> str:
        """Transcribe a 16 kHz mono WAV file.

        Returns an owned copy of the native result. The native buffer it was
        copied from stays valid only until the next ``free_result()``.
        """
        ...

    def free_result(self) -> None:
        """Release native resources held by the most recent ``transcribe()``."""
        ...
