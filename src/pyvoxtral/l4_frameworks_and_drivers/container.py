"""Dependency container — composition root for wiring all layers together."""

from __future__ import annotations

from pyvoxtral.l1_entities.config import AppConfig
from pyvoxtral.l2_use_cases.ports.audio_converter import AudioConverter
from pyvoxtral.l2_use_cases.ports.config_loader import ConfigLoader
from pyvoxtral.l2_use_cases.ports.native_engine import NativeEngine
from pyvoxtral.l2_use_cases.transcription_session import VoxtralSession
from pyvoxtral.l3_interface_adapters.gateways import native_library
from pyvoxtral.l3_interface_adapters.gateways.ffmpeg_converter import FfmpegAudioConverter
from pyvoxtral.l3_interface_adapters.gateways.yaml_config_loader import YamlConfigLoader


class DependencyContainer:
    """Binds the native library and wires the session. Easy to override for testing.

    Constructing the container runs ``native_library.init()``, so library
    errors (not found, open failure, missing symbol) surface here.
    """

    def __init__(self, config: AppConfig) -> None:
        self.config = config

        self.engine: NativeEngine = native_library.init(config.engine.library_path or None)
        self.converter: AudioConverter = FfmpegAudioConverter(
            ffmpeg=config.conversion.ffmpeg,
            timeout=config.conversion.timeout,
        )
        self.session = VoxtralSession(self.engine, self.converter)

    @staticmethod
    def config_loader() -> ConfigLoader:
        return YamlConfigLoader()
