"""Fluxos comuns de cadastro, edição e exclusão de uma entidade.

Cada fluxo trata os próprios erros: um ``ApiError`` vira mensagem de erro no
editor e não se propaga. Após sucesso confirmado pelo servidor, o editor pede
ao store o refetch da coleção inteira.
"""

import logging
from dataclasses import replace
from typing import Callable, Generic, Optional, TypeVar

from pydantic import BaseModel

from api.errors import ApiError
from api.resource_client import ResourceClient
from editors.edit_state import IDLE, EditState, Editing
from editors.feedback import Feedback
from editors.forms import FormError
from state.store import ViewStateStore

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=BaseModel)
F = TypeVar("F")

ConfirmFn = Callable[[str], bool]


class EntityEditor(Generic[E, F]):
    """Base dos editores de aluno e professor.

    Subclasses definem os rótulos e os ganchos ``empty_form``, ``draft_from``,
    ``build_create_payload``, ``build_update_payload`` e ``created_message``.
    """

    collection_name: str = ""
    label: str = ""          # "aluno" – usado nas mensagens de erro
    title: str = ""          # "Aluno"

    def __init__(self, client: ResourceClient[E], store: ViewStateStore,
                 confirm: ConfirmFn) -> None:
        self.client = client
        self.store = store
        self.confirm = confirm
        self.form: F = self.empty_form()
        self.edit_state: EditState = IDLE
        self.message: Optional[Feedback] = None

    # ─── Ganchos ───

    def empty_form(self) -> F:
        raise NotImplementedError

    def draft_from(self, entity: E) -> F:
        raise NotImplementedError

    def build_create_payload(self, form: F) -> BaseModel:
        raise NotImplementedError

    def build_update_payload(self, original: E, draft: F) -> BaseModel:
        raise NotImplementedError

    def created_message(self, entity: E) -> str:
        return f'{self.title} "{entity.name}" cadastrado com sucesso!'

    # ─── Cadastro ───

    def before_create(self) -> None:
        """Chamado no início de cada cadastro, antes da validação."""

    async def create(self, form: Optional[F] = None) -> Optional[E]:
        """Valida o formulário, cria no servidor e recarrega a coleção.

        Em falha, o formulário é mantido e a coleção não é tocada.
        """
        if form is not None:
            self.form = form
        self.message = None
        self.before_create()
        try:
            payload = self.build_create_payload(self.form)
        except FormError as e:
            self.message = Feedback.error(str(e))
            return None

        try:
            created = await self.client.create(payload)
        except ApiError as e:
            logger.error(f"Erro ao cadastrar {self.label}: {e}")
            self.message = Feedback.error(f"Erro ao cadastrar {self.label}: {e}")
            return None

        logger.info(f"{self.title} cadastrado: id={created.id}")
        self.message = Feedback.success(self.created_message(created))
        self.form = self.empty_form()
        await self.store.refetch(self.collection_name)
        return created

    # ─── Edição ───

    @property
    def is_editing(self) -> bool:
        return isinstance(self.edit_state, Editing)

    def begin_edit(self, entity: E) -> None:
        """Copia os campos atuais da entidade para um rascunho editável."""
        self.edit_state = Editing(original=entity, draft=self.draft_from(entity))
        self.message = None

    def update_draft(self, **changes) -> None:
        state = self.edit_state
        if not isinstance(state, Editing):
            raise RuntimeError(f"Nenhum {self.label} em edição")
        self.edit_state = Editing(original=state.original,
                                  draft=replace(state.draft, **changes))

    def cancel_edit(self) -> None:
        """Descarta o rascunho sem chamar o servidor."""
        self.edit_state = IDLE
        self.message = None

    async def submit_edit(self) -> Optional[E]:
        """Envia o rascunho. Em falha, continua em edição com a mensagem."""
        state = self.edit_state
        if not isinstance(state, Editing):
            return None
        self.message = None
        try:
            payload = self.build_update_payload(state.original, state.draft)
        except FormError as e:
            self.message = Feedback.error(str(e))
            return None

        try:
            updated = await self.client.update(state.original.id, payload)
        except ApiError as e:
            logger.error(f"Erro ao atualizar {self.label} {state.original.id}: {e}")
            self.message = Feedback.error(f"Erro ao atualizar {self.label}: {e}")
            return None

        self.message = Feedback.success(
            f'{self.title} "{updated.name}" atualizado com sucesso!')
        self.edit_state = IDLE
        await self.store.refetch(self.collection_name)
        return updated

    # ─── Exclusão ───

    def delete_question(self, entity: E) -> str:
        return f"Tem certeza que deseja deletar o {self.label} {entity.name}?"

    async def delete(self, entity: E) -> bool:
        """Pede confirmação e exclui. Recusa não envia nenhuma requisição."""
        self.message = None
        if not self.confirm(self.delete_question(entity)):
            logger.debug(f"Exclusão de {self.label} {entity.id} cancelada")
            return False

        try:
            await self.client.remove(entity.id)
        except ApiError as e:
            logger.error(f"Erro ao deletar {self.label} {entity.id}: {e}")
            self.message = Feedback.error(f"Erro ao deletar {self.label}: {e}")
            return False

        self.message = Feedback.success(
            f'{self.title} "{entity.name}" deletado com sucesso!')
        await self.store.refetch(self.collection_name)
        return True
