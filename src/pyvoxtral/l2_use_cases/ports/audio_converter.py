"""Port: audio format conversion."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class AudioConverter(Protocol):
    """Converts arbitrary audio into the WAV format the native engine reads."""

    def convert(self, source: Path, destination: Path) -> None:
        """Write *source* as 16 kHz mono WAV to *destination*, overwriting it.

        Raises ConversionError on failure.
        """
        ...
