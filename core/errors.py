# core/errors.py
from __future__ import annotations


class EngineError(Exception):
    """Base de todos los errores del motor de comparación FV."""


class InvalidInput(EngineError, ValueError):
    pass


class DivisionByZero(EngineError, ZeroDivisionError):
    pass


class OutOfRange(EngineError, IndexError):
    pass
