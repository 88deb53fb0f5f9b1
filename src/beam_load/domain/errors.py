from __future__ import annotations

from enum import Enum


class ErrorCode(str, Enum):
    INVALID_GEOMETRY = "INVALID_GEOMETRY"
    INVALID_SUPPORTS = "INVALID_SUPPORTS"
    INVALID_LOAD_POSITION = "INVALID_LOAD_POSITION"
    UNDEFINED_SAFETY_FACTOR = "UNDEFINED_SAFETY_FACTOR"


class BeamLoadError(ValueError):
    """
    Error tipado del motor. Hereda de ValueError para que quien ya captura
    ValueError (UI, scripts) siga funcionando.
    """
    code: ErrorCode

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return f"[{self.code.value}] {self.message}"


class InvalidGeometryError(BeamLoadError):
    code = ErrorCode.INVALID_GEOMETRY


class InvalidSupportsError(BeamLoadError):
    code = ErrorCode.INVALID_SUPPORTS


class InvalidLoadPositionError(BeamLoadError):
    code = ErrorCode.INVALID_LOAD_POSITION


class UndefinedSafetyFactorError(BeamLoadError):
    code = ErrorCode.UNDEFINED_SAFETY_FACTOR
