"""Editor de professores."""

from editors.base import EntityEditor
from editors.forms import TeacherForm, require
from models import Teacher, TeacherCreate, TeacherUpdate


class TeacherEditor(EntityEditor[Teacher, TeacherForm]):
    collection_name = "teachers"
    label = "professor"
    title = "Professor"

    def empty_form(self) -> TeacherForm:
        return TeacherForm()

    def draft_from(self, entity: Teacher) -> TeacherForm:
        return TeacherForm(name=entity.name, department=entity.department)

    def build_create_payload(self, form: TeacherForm) -> TeacherCreate:
        require(form.name, form.department)
        return TeacherCreate(name=form.name.strip(), department=form.department.strip())

    def build_update_payload(self, original: Teacher, draft: TeacherForm) -> TeacherUpdate:
        require(draft.name, draft.department)
        # O registro vem sempre do original, nunca do rascunho
        return TeacherUpdate(
            registry=original.registry,
            name=draft.name.strip(),
            department=draft.department.strip(),
        )

    def created_message(self, entity: Teacher) -> str:
        return (f'Professor "{entity.name}" cadastrado com sucesso! '
                f'Registro: {entity.registry}')
