"""Use case: load a Voxtral model and transcribe audio files through the native engine."""

from __future__ import annotations

import logging
import os
import tempfile
import threading
from pathlib import Path

from pyvoxtral.l1_entities.errors import ModelLoadError
from pyvoxtral.l2_use_cases.ports.audio_converter import AudioConverter
from pyvoxtral.l2_use_cases.ports.native_engine import NativeEngine

log = logging.getLogger('voxtral.session')

CONVERTED_FILENAME = 'converted.wav'

# One native library per process, so sessions share one lock unless told otherwise.
_NATIVE_CALL_LOCK = threading.Lock()


class VoxtralSession:
    """Drives model loads and transcriptions through the native engine.

    A session holds only its collaborators: the loaded model lives on the
    native side, one per process, so any session can transcribe once any
    session has loaded it.

    Native calls are serialized through *native_lock*: the engine makes no
    thread-safety promise for a loaded model. Audio conversion runs outside
    the lock, so several threads may convert concurrently while only one is
    inside the engine.
    """

    def __init__(
        self,
        engine: NativeEngine,
        converter: AudioConverter,
        native_lock: threading.Lock | None = None,
    ) -> None:
        self._engine = engine
        self._converter = converter
        self._lock = native_lock if native_lock is not None else _NATIVE_CALL_LOCK

    def load(self, model_dir: str | os.PathLike) -> None:
        """Load model weights from *model_dir*. Raises ModelLoadError on a nonzero code."""
        path = str(model_dir)
        log.info('Loading Voxtral model from %s', path)
        with self._lock:
            code = self._engine.load_model(path)
        if code != 0:
            log.error('load_model returned %d for %s', code, path)
            raise ModelLoadError(path, code)

    def transcribe(self, audio_path: str | os.PathLike) -> str:
        """Transcribe *audio_path* and return the whitespace-trimmed text.

        The audio is first converted by ffmpeg into a private temporary
        directory, which is gone by the time this returns or raises.
        """
        try:
            tmp = tempfile.TemporaryDirectory(prefix='voxtral', ignore_cleanup_errors=True)
        except OSError:
            log.exception('Could not create scratch directory for %s', audio_path)
            raise

        with tmp as scratch:
            converted = Path(scratch) / CONVERTED_FILENAME
            self._converter.convert(Path(audio_path), converted)

            with self._lock:
                try:
                    text = self._engine.transcribe(str(converted))
                finally:
                    self._engine.free_result()

        log.debug('Transcribed %s (%d chars)', audio_path, len(text))
        return text.strip()
