from __future__ import annotations
from typing import Optional


class ConfigProbeError(Exception):
    """Base des erreurs terminales d'un passage lecture/analyse."""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class FileReadError(ConfigProbeError):
    """Fichier absent, illisible, non UTF-8 ou lecture trop longue."""


class ParseError(ConfigProbeError):
    """Texte qui n'est pas un document JSON valide."""

    def __init__(self, message: str, path: Optional[str] = None,
                 lineno: Optional[int] = None, colno: Optional[int] = None):
        super().__init__(message, path)
        self.lineno = lineno
        self.colno = colno
