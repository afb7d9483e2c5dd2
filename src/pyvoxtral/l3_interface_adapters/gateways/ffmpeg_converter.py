"""Gateway: ffmpeg audio converter — implements AudioConverter port."""

from __future__ import annotations

import logging
import shutil
import subprocess  # noqa: S404 -- intentional: shells out to ffmpeg with a fixed arg list, not shell=True
from pathlib import Path

from pyvoxtral.l1_entities.audio_constants import CHANNELS, SAMPLE_RATE
from pyvoxtral.l1_entities.errors import ConversionError

log = logging.getLogger('voxtral.ffmpeg')


class FfmpegAudioConverter:
    """Resamples any ffmpeg-readable input to a 16 kHz mono WAV file."""

    def __init__(self, ffmpeg: str = 'ffmpeg', timeout: float | None = None) -> None:
        self._ffmpeg = ffmpeg
        self._timeout = timeout

    def build_command(self, source: Path, destination: Path) -> list[str]:
        return [
            self._ffmpeg,
            '-i',
            str(source),
            '-ar',
            str(SAMPLE_RATE),
            '-ac',
            str(CHANNELS),
            '-y',
            str(destination),
        ]

    def convert(self, source: Path, destination: Path) -> None:
        """Convert *source* into *destination*.

        Raises:
            ConversionError: ffmpeg is missing, could not be launched, timed
                             out, or exited non-zero. Carries ffmpeg's output.
        """
        if shutil.which(self._ffmpeg) is None:
            raise ConversionError(
                str(source),
                f'{self._ffmpeg} is required but not found on PATH.\n'
                '  macOS:  brew install ffmpeg\n'
                '  Debian: apt install ffmpeg',
            )

        cmd = self.build_command(source, destination)
        log.debug('Running %s', ' '.join(cmd))

        try:
            result = subprocess.run(  # noqa: S603
                cmd,
                stdout=subprocess.PIPE,
                stderr=subprocess.STDOUT,
                timeout=self._timeout,
            )
        except subprocess.TimeoutExpired as exc:
            raise ConversionError(str(source), f'ffmpeg timed out after {self._timeout}s') from exc
        except OSError as exc:
            raise ConversionError(str(source), f'Failed to launch ffmpeg: {exc}') from exc

        if result.returncode != 0:
            output = result.stdout.decode('utf-8', errors='replace').strip()
            log.warning('ffmpeg exited with code %d for %s', result.returncode, source)
            raise ConversionError(str(source), output, result.returncode)
