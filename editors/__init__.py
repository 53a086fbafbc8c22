"""Fluxos de mutação (cadastro, edição, exclusão, associação)."""

from editors.association import AssociationWorkflow
from editors.edit_state import IDLE, EditState, Editing, Idle
from editors.feedback import Feedback, MessageKind
from editors.forms import FormError, StudentForm, TeacherForm
from editors.selection import pick_subjects
from editors.student_editor import StudentEditor
from editors.teacher_editor import TeacherEditor

__all__ = [
    "AssociationWorkflow",
    "IDLE",
    "EditState",
    "Editing",
    "Idle",
    "Feedback",
    "MessageKind",
    "FormError",
    "StudentForm",
    "TeacherForm",
    "pick_subjects",
    "StudentEditor",
    "TeacherEditor",
]
