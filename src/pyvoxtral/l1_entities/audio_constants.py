"""Audio format expected by the native engine."""

SAMPLE_RATE = 16000
CHANNELS = 1
