"""Mensagens exibidas ao usuário após cada fluxo."""

from dataclasses import dataclass
from enum import Enum


class MessageKind(str, Enum):
    SUCCESS = "success"
    WARNING = "warning"
    ERROR = "error"


@dataclass(frozen=True)
class Feedback:
    """Mensagem transitória. Cada fluxo substitui a anterior, nada se acumula."""

    kind: MessageKind
    text: str

    @classmethod
    def success(cls, text: str) -> "Feedback":
        return cls(MessageKind.SUCCESS, text)

    @classmethod
    def warning(cls, text: str) -> "Feedback":
        return cls(MessageKind.WARNING, text)

    @classmethod
    def error(cls, text: str) -> "Feedback":
        return cls(MessageKind.ERROR, text)

    @property
    def is_error(self) -> bool:
        return self.kind == MessageKind.ERROR

    def __str__(self) -> str:
        return self.text
