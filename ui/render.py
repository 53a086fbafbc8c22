"""Renderização rich das coleções e mensagens."""

from typing import Iterable, Optional

from rich import box
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from editors.feedback import Feedback, MessageKind
from models import Student, Subject, Teacher

_STYLES = {
    MessageKind.SUCCESS: "green",
    MessageKind.WARNING: "yellow",
    MessageKind.ERROR: "red",
}


def student_subjects_label(student: Student) -> str:
    if not student.subjects:
        return "Nenhuma matéria associada."
    return ", ".join(f"{escape(s.name or '?')} ({s.id})" for s in student.subjects)


def students_table(students: Iterable[Student]) -> Table:
    table = Table(title="Lista de Alunos", box=box.ROUNDED)
    table.add_column("ID", style="dim")
    table.add_column("Matrícula", style="bold")
    table.add_column("Nome")
    table.add_column("Ano", justify="right")
    table.add_column("Turno")
    table.add_column("Matérias")
    rows = 0
    for s in students:
        table.add_row(s.id, s.enrollment, escape(s.name), str(s.current_year),
                      s.shift.label if s.shift else "—", student_subjects_label(s))
        rows += 1
    if rows == 0:
        table.add_row("", "", "[dim]Nenhum aluno cadastrado ainda.[/dim]", "", "", "")
    return table


def teachers_table(teachers: Iterable[Teacher]) -> Table:
    table = Table(title="Lista de Professores", box=box.ROUNDED)
    table.add_column("ID", style="dim")
    table.add_column("Registro", style="bold")
    table.add_column("Nome")
    table.add_column("Departamento")
    rows = 0
    for t in teachers:
        table.add_row(t.id, t.registry, escape(t.name), escape(t.department))
        rows += 1
    if rows == 0:
        table.add_row("", "", "[dim]Nenhum professor cadastrado ainda.[/dim]", "")
    return table


def subjects_table(subjects: Iterable[Subject]) -> Table:
    table = Table(title="Matérias", box=box.ROUNDED)
    table.add_column("ID", style="dim")
    table.add_column("Nome")
    table.add_column("Ano", justify="right")
    for s in sorted(subjects, key=lambda s: (s.year, s.name)):
        table.add_row(s.id, escape(s.name), str(s.year))
    return table


def print_feedback(console: Console, message: Optional[Feedback],
                   warning: Optional[str] = None) -> None:
    """Sucesso em verde, aviso em amarelo, erro em vermelho."""
    if warning:
        console.print(warning, style=_STYLES[MessageKind.WARNING], markup=False)
    if message is not None:
        console.print(message.text, style=_STYLES[message.kind], markup=False)
