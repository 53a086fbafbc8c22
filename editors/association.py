"""Fluxo de associação aluno ↔ matéria."""

import logging
from typing import Optional

from api.association_client import AssociationClient
from api.errors import ApiError
from editors.feedback import Feedback
from models import Student
from state.store import ViewStateStore

logger = logging.getLogger(__name__)

SELECTION_MESSAGE = "Selecione um aluno e uma matéria para associar."


class AssociationWorkflow:
    """Seleciona um aluno e uma matéria e associa/desassocia via API.

    Sucesso recarrega a coleção de alunos; falha só gera a mensagem.
    """

    def __init__(self, client: AssociationClient, store: ViewStateStore) -> None:
        self.client = client
        self.store = store
        self.selected_student_id: str = ""
        self.selected_subject_id: str = ""
        self.message: Optional[Feedback] = None

    def select(self, student_id=None, subject_id=None) -> None:
        if student_id is not None:
            self.selected_student_id = str(student_id)
        if subject_id is not None:
            self.selected_subject_id = str(subject_id)

    def sync_defaults(self) -> None:
        """Sem seleção, pré-seleciona o primeiro aluno e a primeira matéria."""
        if not self.selected_student_id and self.store.students:
            self.selected_student_id = self.store.students[0].id
        if not self.selected_subject_id and self.store.subjects:
            self.selected_subject_id = self.store.subjects[0].id

    def _has_selection(self) -> bool:
        if not self.selected_student_id or not self.selected_subject_id:
            self.message = Feedback.error(SELECTION_MESSAGE)
            return False
        return True

    async def attach(self) -> Optional[Student]:
        self.message = None
        if not self._has_selection():
            return None
        try:
            student = await self.client.attach(self.selected_student_id,
                                               self.selected_subject_id)
        except ApiError as e:
            logger.error(f"Erro ao associar matéria: {e}")
            self.message = Feedback.error(f"Erro ao associar matéria: {e}")
            return None
        self.message = Feedback.success("Matéria associada ao aluno com sucesso!")
        await self.store.refetch_students()
        return student

    async def detach(self) -> bool:
        self.message = None
        if not self._has_selection():
            return False
        try:
            await self.client.detach(self.selected_student_id, self.selected_subject_id)
        except ApiError as e:
            logger.error(f"Erro ao remover matéria: {e}")
            self.message = Feedback.error(f"Erro ao remover matéria: {e}")
            return False
        self.message = Feedback.success("Matéria removida do aluno com sucesso!")
        await self.store.refetch_students()
        return True
