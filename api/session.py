"""Sessão HTTP compartilhada pelos clientes de recurso."""

import logging
from typing import Optional

import httpx

from api.association_client import AssociationClient
from api.resource_client import ResourceClient
from config.schema import ClientConfig
from models import Student, Subject, Teacher

logger = logging.getLogger(__name__)


class UniversityApi:
    """Agrupa os três ``ResourceClient`` e o ``AssociationClient``.

    Uso::

        async with UniversityApi(config) as api:
            alunos = await api.students.list_all()

    Um ``httpx.AsyncClient`` externo pode ser injetado (testes usam
    ``httpx.MockTransport``); nesse caso ele não é fechado aqui.
    """

    def __init__(self, config: ClientConfig,
                 http: Optional[httpx.AsyncClient] = None) -> None:
        self.config = config
        self._owns_http = http is None
        if http is None:
            http = httpx.AsyncClient(
                base_url=config.api_base_url,
                headers={"Accept": "application/json"},
                timeout=config.timeout_seconds,
            )
        self.http = http

        self.students: ResourceClient[Student] = ResourceClient(http, "/students", Student)
        self.teachers: ResourceClient[Teacher] = ResourceClient(http, "/teachers", Teacher)
        self.subjects: ResourceClient[Subject] = ResourceClient(http, "/subjects", Subject)
        self.associations = AssociationClient(http, "/students")

    async def aclose(self) -> None:
        if self._owns_http:
            await self.http.aclose()

    async def __aenter__(self) -> "UniversityApi":
        logger.debug(f"Sessão aberta: {self.config.api_base_url}")
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()
