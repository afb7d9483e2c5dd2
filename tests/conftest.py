"""Shared test fixtures and protocol-conforming fakes."""

from __future__ import annotations

from pathlib import Path

import pytest

from pyvoxtral.l1_entities.config import AppConfig
from pyvoxtral.l1_entities.errors import ConversionError
from pyvoxtral.l4_frameworks_and_drivers.infra_config import build_app_config

# --- Protocol-conforming Fakes ---


class FakeNativeEngine:
    """Fake native engine for L2 use case tests — records every entry-point call."""

    def __init__(self, text: str = '  Hello from Voxtral.\n', load_code: int = 0):
        self._text = text
        self._load_code = load_code
        self.calls: list[str] = []
        self.load_model_calls: list[str] = []
        self.transcribe_calls: list[str] = []
        self.transcribe_saw_file: list[bool] = []
        self.free_result_calls: int = 0

    def load_model(self, model_dir: str) -> int:
        self.calls.append('load_model')
        self.load_model_calls.append(model_dir)
        return self._load_code

    def transcribe(self, wav_path: str) -> str:
        self.calls.append('transcribe')
        self.transcribe_calls.append(wav_path)
        self.transcribe_saw_file.append(Path(wav_path).exists())
        return self._text

    def free_result(self) -> None:
        self.calls.append('free_result')
        self.free_result_calls += 1

    def set_load_code(self, code: int) -> None:
        self._load_code = code

    def set_text(self, text: str) -> None:
        self._text = text


class FakeAudioConverter:
    """Fake converter — writes a placeholder WAV, or raises ConversionError when told to."""

    def __init__(self, fail_with: str | None = None):
        self._fail_with = fail_with
        self.convert_calls: list[tuple[Path, Path]] = []

    def convert(self, source: Path, destination: Path) -> None:
        self.convert_calls.append((source, destination))
        if self._fail_with is not None:
            raise ConversionError(str(source), self._fail_with, 1)
        destination.write_bytes(b'RIFF\x00\x00\x00\x00WAVE')

    def set_failure(self, output: str | None) -> None:
        self._fail_with = output


# --- Standard Fixtures ---


@pytest.fixture
def default_config() -> AppConfig:
    return build_app_config({})


@pytest.fixture
def sample_config_yaml(tmp_path: Path) -> Path:
    content = """\
engine:
  library_path: "/opt/voxtral/libgovoxtral.so"
  model_dir: "/models/demo"
conversion:
  ffmpeg: "/usr/local/bin/ffmpeg"
  timeout: 120
"""
    p = tmp_path / 'config.yaml'
    p.write_text(content, encoding='utf-8')
    return p


@pytest.fixture
def audio_file(tmp_path: Path) -> Path:
    p = tmp_path / 'sample.mp3'
    p.write_bytes(b'ID3fake-mp3-data')
    return p


@pytest.fixture
def fake_engine() -> FakeNativeEngine:
    return FakeNativeEngine()


@pytest.fixture
def fake_converter() -> FakeAudioConverter:
    return FakeAudioConverter()
