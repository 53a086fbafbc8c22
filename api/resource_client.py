"""Cliente genérico para uma coleção REST (GET/POST/PUT/DELETE).

Toda resposta passa primeiro pela verificação de status; o corpo só é lido
como JSON no caminho de sucesso, e nunca em DELETE.
"""

import logging
from typing import Any, Generic, Optional, Type, TypeVar, Union

import httpx
from pydantic import BaseModel, ValidationError

from api.errors import (
    InvalidResponseError,
    TransportError,
    error_from_response,
    status_only_error,
)

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=BaseModel)

Payload = Union[BaseModel, dict]


async def send(http: httpx.AsyncClient, method: str, url: str,
               payload: Optional[Payload] = None) -> httpx.Response:
    """Envia a requisição; qualquer falha do httpx vira ``TransportError``."""
    kwargs: dict[str, Any] = {}
    if payload is not None:
        if isinstance(payload, BaseModel):
            payload = payload.model_dump(mode="json")
        kwargs["json"] = payload
    logger.debug(f"{method} {url}")
    try:
        response = await http.request(method, url, **kwargs)
    except httpx.RequestError as e:
        logger.warning(f"{method} {url} falhou antes da resposta: {e}")
        raise TransportError(str(e) or type(e).__name__) from e
    logger.debug(f"{method} {url} -> {response.status_code}")
    return response


def parse_body(response: httpx.Response, model: Type[T]) -> T:
    """Valida um corpo 2xx contra ``model``."""
    try:
        return model.model_validate(response.json())
    except (ValueError, ValidationError) as e:
        raise InvalidResponseError(
            f"Resposta inválida de {response.request.method} "
            f"{response.request.url.path}: {e}"
        ) from e


def ensure_success(response: httpx.Response) -> httpx.Response:
    if not response.is_success:
        err = error_from_response(response)
        logger.warning(
            f"{response.request.method} {response.request.url.path}: "
            f"{err.status} {err.message}"
        )
        raise err
    return response


def ensure_success_bodyless(response: httpx.Response) -> bool:
    if not response.is_success:
        err = status_only_error(response)
        logger.warning(
            f"{response.request.method} {response.request.url.path}: {err.status}"
        )
        raise err
    return True


class ResourceClient(Generic[T]):
    """Acesso a uma coleção ``/<path>`` cujos itens são validados por ``model``."""

    def __init__(self, http: httpx.AsyncClient, path: str, model: Type[T]) -> None:
        self._http = http
        self.path = "/" + path.strip("/")
        self.model = model

    def _item_url(self, entity_id) -> str:
        return f"{self.path}/{entity_id}"

    async def list_all(self) -> list[T]:
        """GET da coleção completa."""
        response = ensure_success(await send(self._http, "GET", self.path))
        try:
            data = response.json()
        except ValueError as e:
            raise InvalidResponseError(f"Resposta inválida de GET {self.path}: {e}") from e
        if data is None:
            return []
        if not isinstance(data, list):
            raise InvalidResponseError(
                f"GET {self.path}: esperado um array, recebido {type(data).__name__}"
            )
        try:
            return [self.model.model_validate(item) for item in data]
        except ValidationError as e:
            raise InvalidResponseError(f"Resposta inválida de GET {self.path}: {e}") from e

    async def get(self, entity_id) -> T:
        response = ensure_success(
            await send(self._http, "GET", self._item_url(entity_id)))
        return parse_body(response, self.model)

    async def create(self, payload: Payload) -> T:
        """POST; devolve a representação do servidor com id/código atribuídos."""
        response = ensure_success(await send(self._http, "POST", self.path, payload))
        return parse_body(response, self.model)

    async def update(self, entity_id, payload: Payload) -> T:
        """PUT de substituição completa.

        O payload precisa trazer o código imutável (matrícula/registro) da
        entidade original; o servidor rejeita o que vier diferente.
        """
        response = ensure_success(
            await send(self._http, "PUT", self._item_url(entity_id), payload))
        return parse_body(response, self.model)

    async def remove(self, entity_id) -> bool:
        """DELETE. Qualquer 2xx é sucesso, com ou sem corpo."""
        response = await send(self._http, "DELETE", self._item_url(entity_id))
        return ensure_success_bodyless(response)

    def __repr__(self) -> str:
        return f"ResourceClient({self.path}, {self.model.__name__})"
