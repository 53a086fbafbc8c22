"""Hierarquia de erros da camada de API.

Quem chama trata ``ApiError`` como um todo; as subclasses só distinguem a origem.
"""

import logging
from typing import Optional

import httpx

logger = logging.getLogger(__name__)

# Mensagem usada quando o corpo de erro não pode ser lido como JSON
FALLBACK_ERROR_MESSAGE = "Erro desconhecido da API"


class ApiError(Exception):
    """Falha de uma chamada à API. ``str(err)`` é a mensagem para o usuário."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def __str__(self) -> str:
        return self.message


class RequestError(ApiError):
    """O servidor respondeu com status fora da faixa 2xx."""

    def __init__(self, status: int, message: str) -> None:
        super().__init__(message)
        self.status = status

    def __repr__(self) -> str:
        return f"RequestError(status={self.status}, message={self.message!r})"


class TransportError(ApiError):
    """Falha de rede antes de qualquer status HTTP (conexão, timeout, ...)."""


class InvalidResponseError(ApiError):
    """Resposta 2xx com corpo que não corresponde ao formato esperado."""


def error_from_response(response: httpx.Response) -> RequestError:
    """Converte uma resposta não-2xx em ``RequestError``.

    Usa o campo ``message`` do corpo JSON; sem esse campo, a frase de status
    HTTP. Um corpo ilegível vira a mensagem genérica em vez de um segundo erro.
    """
    try:
        body = response.json()
    except ValueError:
        logger.debug(f"Corpo de erro ilegível (status {response.status_code})")
        return RequestError(response.status_code, FALLBACK_ERROR_MESSAGE)

    message: Optional[str] = None
    if isinstance(body, dict) and body.get("message"):
        message = str(body["message"])
    return RequestError(response.status_code, message or response.reason_phrase)


def status_only_error(response: httpx.Response) -> RequestError:
    """Erro para DELETE: o corpo nunca é lido, a mensagem cita só o status."""
    return RequestError(response.status_code, f"HTTP {response.status_code}")
