"""Configuration Pydantic models — pure schema, no infrastructure defaults."""

from __future__ import annotations

from pydantic import BaseModel


class EngineConfig(BaseModel):
    library_path: str  # '' = platform default in the working directory
    model_dir: str | None = None


class ConversionConfig(BaseModel):
    ffmpeg: str
    timeout: float | None = None  # seconds; None = wait for ffmpeg indefinitely


class AppConfig(BaseModel):
    engine: EngineConfig
    conversion: ConversionConfig
