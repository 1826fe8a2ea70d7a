"""
Chyby relay servera

RelayError nesie správu, ktorú je bezpečné vrátiť klientovi, a HTTP status.
Detaily od poskytovateľa (UpstreamError.detail) idú len do logu.
"""
from typing import Any, Optional


class RelayError(Exception):
    """Základná chyba servera"""

    status_code: int = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class InvalidInputError(RelayError):
    """Chýbajúci alebo chybný vstup od klienta"""

    status_code = 400


class UpstreamError(RelayError):
    """Zlyhanie externej služby (sieť, non-2xx, nečitateľná odpoveď)"""

    status_code = 500

    def __init__(self, source: str, message: str, detail: Optional[Any] = None):
        super().__init__(message)
        self.source = source
        self.detail = detail

    def __str__(self) -> str:
        if self.detail is None:
            return f"{self.source}: {self.message}"
        return f"{self.source}: {self.message} ({self.detail})"
