"""Editor de alunos: cadastro com vínculo automático de matérias."""

import logging
import random
from typing import Optional

from api.resource_client import ResourceClient
from editors.base import ConfirmFn, EntityEditor
from editors.forms import StudentForm, parse_shift, parse_year, require
from editors.selection import pick_subjects
from models import Shift, Student, StudentCreate, StudentUpdate, subject_refs
from state.store import ViewStateStore

logger = logging.getLogger(__name__)


def _year_label(year: int) -> str:
    return "primeiro" if year == 1 else f"{year}º"


class StudentEditor(EntityEditor[Student, StudentForm]):
    """Cadastro, edição e exclusão de alunos.

    Ao cadastrar, sorteia até ``subject_count`` matérias do ano
    ``subject_year`` entre as matérias carregadas no store. Faltando matérias,
    o cadastro segue e ``warning`` recebe um aviso.
    """

    collection_name = "students"
    label = "aluno"
    title = "Aluno"

    def __init__(self, client: ResourceClient[Student], store: ViewStateStore,
                 confirm: ConfirmFn, subject_year: int = 1, subject_count: int = 5,
                 rng: Optional[random.Random] = None) -> None:
        super().__init__(client, store, confirm)
        self.subject_year = subject_year
        self.subject_count = subject_count
        self.rng = rng
        self.warning: Optional[str] = None

    def empty_form(self) -> StudentForm:
        return StudentForm()

    def draft_from(self, entity: Student) -> StudentForm:
        return StudentForm(name=entity.name,
                           current_year=str(entity.current_year),
                           shift=(entity.shift or Shift.MORNING).value)

    def before_create(self) -> None:
        self.warning = None

    def _auto_subject_ids(self) -> list[str]:
        if self.subject_count <= 0:
            return []
        chosen = pick_subjects(self.store.subjects, self.subject_year,
                               self.subject_count, self.rng)
        year = _year_label(self.subject_year)
        if not chosen:
            self.warning = (f"Aviso: Nenhuma matéria do {year} ano disponível "
                            f"para associação automática.")
        elif len(chosen) < self.subject_count:
            self.warning = (f"Aviso: Não há {self.subject_count} matérias "
                            f"suficientes do {year} ano para associar.")
        if self.warning:
            logger.warning(self.warning)
        return [s.id for s in chosen]

    def build_create_payload(self, form: StudentForm) -> StudentCreate:
        require(form.name, form.current_year, form.shift)
        current_year = parse_year(form.current_year)
        shift = parse_shift(form.shift)
        return StudentCreate(
            name=form.name.strip(),
            current_year=current_year,
            shift=shift,
            subjects=subject_refs(self._auto_subject_ids()),
        )

    def build_update_payload(self, original: Student, draft: StudentForm) -> StudentUpdate:
        require(draft.name, draft.current_year, draft.shift)
        return StudentUpdate(
            enrollment=original.enrollment,
            name=draft.name.strip(),
            current_year=parse_year(draft.current_year),
            shift=parse_shift(draft.shift),
            subjects=subject_refs(original.subject_ids),
        )

    def created_message(self, entity: Student) -> str:
        return (f'Aluno "{entity.name}" cadastrado com sucesso! '
                f'Matrícula: {entity.enrollment}')
