from __future__ import annotations

from typing import Any


class TokenError(Exception):
    """Base de los errores del motor de tokens."""


class InvalidColorError(TokenError, ValueError):
    def __init__(self, value: Any, reason: str = "") -> None:
        self.value = value
        message = f"Color inválido: {value!r}"
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class InvalidArgumentError(TokenError, ValueError):
    def __init__(self, name: str, value: Any, reason: str) -> None:
        self.name = name
        self.value = value
        super().__init__(f"Argumento inválido {name}={value!r}: {reason}")


__all__ = ["TokenError", "InvalidColorError", "InvalidArgumentError"]
