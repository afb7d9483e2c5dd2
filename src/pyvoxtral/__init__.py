"""pyvoxtral -- Python binding for the native Voxtral speech-to-text engine."""

__version__ = '0.1.0'
