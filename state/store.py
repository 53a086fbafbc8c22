"""ViewStateStore – as três coleções em memória (alunos, professores, matérias).

As coleções são um espelho do servidor, não a fonte da verdade. Só ``refetch``
escreve nelas, e sempre substituindo a coleção inteira: sucesso troca pelo
resultado do GET, falha troca por uma coleção vazia.
"""

import asyncio
import logging
from enum import Enum
from typing import Awaitable, Callable, Generic, Optional, TypeVar

from api.errors import ApiError
from api.session import UniversityApi
from models import Student, Subject, Teacher

logger = logging.getLogger(__name__)

T = TypeVar("T")

COLLECTION_NAMES = ("students", "teachers", "subjects")


class CollectionStatus(str, Enum):
    UNINITIALIZED = "uninitialized"
    LOADED = "loaded"
    EMPTY_AFTER_ERROR = "empty_after_error"


class Collection(Generic[T]):
    """Uma coleção nomeada e seu estado de carga."""

    def __init__(self, name: str, fetch: Callable[[], Awaitable[list[T]]]) -> None:
        self.name = name
        self._fetch = fetch
        self.items: tuple[T, ...] = ()
        self.status = CollectionStatus.UNINITIALIZED
        self.last_error: Optional[ApiError] = None

    async def refetch(self) -> bool:
        """Substitui a coleção pelo estado atual do servidor.

        Retorna False se o GET falhou; nesse caso a coleção fica vazia.
        """
        try:
            items = await self._fetch()
        except ApiError as e:
            logger.error(f"Erro ao buscar {self.name}: {e}")
            self.items = ()
            self.status = CollectionStatus.EMPTY_AFTER_ERROR
            self.last_error = e
            return False
        self.items = tuple(items)
        self.status = CollectionStatus.LOADED
        self.last_error = None
        logger.debug(f"{self.name}: {len(self.items)} itens")
        return True

    def __len__(self) -> int:
        return len(self.items)

    def __iter__(self):
        return iter(self.items)

    def __repr__(self) -> str:
        return f"Collection({self.name}, {len(self.items)} itens, {self.status.value})"


class ViewStateStore:
    """Estado compartilhado da interface.

    Editores recebem o store e, após uma mutação confirmada pelo servidor,
    pedem ``refetch_*``; nunca alteram as coleções diretamente. Com dois
    refetches em andamento, vale o que terminar por último.
    """

    def __init__(self, api: UniversityApi) -> None:
        self.api = api
        self._collections: dict[str, Collection] = {
            "students": Collection("students", api.students.list_all),
            "teachers": Collection("teachers", api.teachers.list_all),
            "subjects": Collection("subjects", api.subjects.list_all),
        }
        self._started = False

    # ─── Leitura ───

    def collection(self, name: str) -> Collection:
        try:
            return self._collections[name]
        except KeyError:
            raise KeyError(
                f"Coleção desconhecida: {name!r}. Disponíveis: {list(COLLECTION_NAMES)}"
            ) from None

    @property
    def students(self) -> tuple[Student, ...]:
        return self._collections["students"].items

    @property
    def teachers(self) -> tuple[Teacher, ...]:
        return self._collections["teachers"].items

    @property
    def subjects(self) -> tuple[Subject, ...]:
        return self._collections["subjects"].items

    # ─── Refetch ───

    async def refetch(self, name: str) -> bool:
        return await self.collection(name).refetch()

    async def refetch_students(self) -> bool:
        return await self.refetch("students")

    async def refetch_teachers(self) -> bool:
        return await self.refetch("teachers")

    async def refetch_subjects(self) -> bool:
        return await self.refetch("subjects")

    async def startup(self) -> dict[str, bool]:
        """Carga inicial: um refetch por coleção, independentes entre si.

        Só roda uma vez por store; chamadas seguintes não fazem nada.
        """
        if self._started:
            logger.debug("startup() já executado, ignorando")
            return {}
        self._started = True
        results = await asyncio.gather(
            *(self._collections[n].refetch() for n in COLLECTION_NAMES)
        )
        return dict(zip(COLLECTION_NAMES, results))

    def __repr__(self) -> str:
        parts = ", ".join(f"{n}={len(c)}" for n, c in self._collections.items())
        return f"ViewStateStore({parts})"
