"""Gateway: ctypes binding to libgovoxtral — implements NativeEngine port."""

from __future__ import annotations

import ctypes
import logging
import os
import sys
from pathlib import Path

from pyvoxtral.l1_entities.errors import (
    LibraryNotFoundError,
    LibraryNotInitializedError,
    LibraryOpenError,
    SymbolResolutionError,
)

log = logging.getLogger('voxtral.native')

LIBRARY_STEM = 'libgovoxtral'

# Resolve every symbol (and transitive dependency) at dlopen time, not on first call.
# Windows has neither flag; LoadLibrary always binds eagerly there.
_DLOPEN_MODE = getattr(os, 'RTLD_NOW', 0) | getattr(ctypes, 'RTLD_GLOBAL', 0)

_active: NativeLibrary | None = None


def default_library_path() -> Path:
    """Platform default library file in the current working directory."""
    suffix = '.dylib' if sys.platform == 'darwin' else '.so'
    return Path.cwd() / f'{LIBRARY_STEM}{suffix}'


class NativeLibrary:
    """The engine's three entry points, bound from an opened shared library.

    ``transcribe`` hands back a pointer into native memory that is only valid
    until ``free_result``; the bytes are copied into a Python string before
    this method returns so the caller may release right after.
    """

    def __init__(self, path: str, dll: ctypes.CDLL) -> None:
        self.path = path
        self._load_model = _bind(dll, 'load_model', path, [ctypes.c_char_p], ctypes.c_int)
        self._transcribe = _bind(dll, 'transcribe', path, [ctypes.c_char_p], ctypes.c_void_p)
        self._free_result = _bind(dll, 'free_result', path, [], None)

    def load_model(self, model_dir: str) -> int:
        return self._load_model(os.fsencode(model_dir))

    def transcribe(self, wav_path: str) -> str:
        ptr = self._transcribe(os.fsencode(wav_path))
        if not ptr:
            return ''
        return ctypes.string_at(ptr).decode('utf-8', errors='replace')

    def free_result(self) -> None:
        self._free_result()


def _bind(dll: ctypes.CDLL, name: str, path: str, argtypes: list, restype):
    try:
        fn = getattr(dll, name)
    except AttributeError as exc:
        raise SymbolResolutionError(name, path) from exc
    fn.argtypes = argtypes
    fn.restype = restype
    return fn


def init(library_path: str | os.PathLike | None = None) -> NativeLibrary:
    """Open the Voxtral shared library and bind its entry points.

    With no *library_path*, looks for ``libgovoxtral.dylib`` (macOS) or
    ``libgovoxtral.so`` (elsewhere) in the working directory. On success the
    library also becomes the process-wide :func:`active_library`; on failure
    that binding is left as it was.

    Not safe to call concurrently with itself or with running sessions. The
    library stays mapped for the life of the process.

    Raises:
        LibraryNotFoundError: nothing exists at the resolved path.
        LibraryOpenError: the dynamic loader refused the file.
        SymbolResolutionError: a required entry point is missing.
    """
    global _active  # noqa: PLW0603 -- one native library per process

    path = str(library_path) if library_path else str(default_library_path())
    if not Path(path).exists():
        raise LibraryNotFoundError(path)

    try:
        dll = ctypes.CDLL(path, mode=_DLOPEN_MODE)
    except OSError as exc:
        raise LibraryOpenError(path, str(exc)) from exc

    library = NativeLibrary(path, dll)
    _active = library
    log.info('Voxtral library bound from %s', path)
    return library


def active_library() -> NativeLibrary:
    """Return the library bound by the last successful :func:`init`."""
    if _active is None:
        raise LibraryNotInitializedError('Voxtral library not initialized. Call init() first.')
    return _active
