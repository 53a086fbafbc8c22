"""Menu interativo (rich) sobre um ``AdminApp``.

As coleções exibidas vêm sempre do store; os editores só pedem refetch.
"""

from typing import Optional, Sequence

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel
from rich.prompt import Confirm, Prompt

from editors.forms import StudentForm, TeacherForm
from models import Shift
from ui.app import AdminApp
from ui.render import (
    print_feedback,
    students_table,
    subjects_table,
    teachers_table,
)

console = Console()

_SHIFT_CHOICES = [s.value for s in Shift]


def confirm_prompt(question: str) -> bool:
    """Confirmação bloqueante usada antes de exclusões."""
    return Confirm.ask(question, default=False)


def _find(items: Sequence, entity_id: str):
    return next((i for i in items if i.id == entity_id), None)


class AdminShell:
    """Laço de menus: alunos, professores, matérias e associação."""

    def __init__(self, app: AdminApp) -> None:
        self.app = app

    async def run(self) -> None:
        while True:
            console.print()
            console.print(Panel(
                "[bold]Gerenciador Universitário[/bold]\n"
                f"[dim]{self.app.config.api_base_url}[/dim]",
                border_style="cyan",
            ))
            console.print("  [bold]1.[/bold] Alunos")
            console.print("  [bold]2.[/bold] Professores")
            console.print("  [bold]3.[/bold] Matérias")
            console.print("  [bold]4.[/bold] Associar / remover matéria de aluno")
            console.print("  [bold]0.[/bold] Sair")

            choice = Prompt.ask("\nOpção", default="0")
            if choice == "1":
                await self._students_menu()
            elif choice == "2":
                await self._teachers_menu()
            elif choice == "3":
                await self.app.store.refetch_subjects()
                console.print(subjects_table(self.app.store.subjects))
            elif choice == "4":
                await self._association_menu()
            elif choice == "0":
                break
            else:
                console.print("[yellow]Opção inválida.[/yellow]")

    # ─── Alunos ───

    async def _students_menu(self) -> None:
        editor = self.app.students
        while True:
            console.print(students_table(self.app.store.students))
            console.print("\n[1] Cadastrar  [2] Editar  [3] Deletar  "
                          "[4] Recarregar  [0] Voltar")
            sub = Prompt.ask("Opção", default="0")
            if sub == "0":
                break
            elif sub == "1":
                form = editor.form
                form = StudentForm(
                    name=Prompt.ask("Nome do aluno", default=form.name or None) or "",
                    current_year=Prompt.ask("Ano atual",
                                            default=form.current_year or None) or "",
                    shift=Prompt.ask("Turno", choices=_SHIFT_CHOICES, default=form.shift),
                )
                await editor.create(form)
                print_feedback(console, editor.message, editor.warning)
            elif sub == "2":
                student = self._pick(self.app.store.students, "ID do aluno")
                if student is None:
                    continue
                editor.begin_edit(student)
                console.print(f"[bold]Editar Aluno: {escape(student.name)} "
                              f"({student.enrollment})[/bold]")
                await self._edit_loop(editor, lambda d: dict(
                    name=Prompt.ask("Nome do aluno", default=d.name),
                    current_year=Prompt.ask("Ano atual", default=d.current_year),
                    shift=Prompt.ask("Turno", choices=_SHIFT_CHOICES, default=d.shift),
                ))
            elif sub == "3":
                student = self._pick(self.app.store.students, "ID do aluno")
                if student is not None:
                    await editor.delete(student)
                    print_feedback(console, editor.message)
            elif sub == "4":
                await self.app.store.refetch_students()

    # ─── Professores ───

    async def _teachers_menu(self) -> None:
        editor = self.app.teachers
        while True:
            console.print(teachers_table(self.app.store.teachers))
            console.print("\n[1] Cadastrar  [2] Editar  [3] Deletar  "
                          "[4] Recarregar  [0] Voltar")
            sub = Prompt.ask("Opção", default="0")
            if sub == "0":
                break
            elif sub == "1":
                form = editor.form
                form = TeacherForm(
                    name=Prompt.ask("Nome do professor", default=form.name or None) or "",
                    department=Prompt.ask("Departamento",
                                          default=form.department or None) or "",
                )
                await editor.create(form)
                print_feedback(console, editor.message)
            elif sub == "2":
                teacher = self._pick(self.app.store.teachers, "ID do professor")
                if teacher is None:
                    continue
                editor.begin_edit(teacher)
                console.print(f"[bold]Editar Professor: {escape(teacher.name)} "
                              f"({teacher.registry})[/bold]")
                await self._edit_loop(editor, lambda d: dict(
                    name=Prompt.ask("Nome do professor", default=d.name),
                    department=Prompt.ask("Departamento", default=d.department),
                ))
            elif sub == "3":
                teacher = self._pick(self.app.store.teachers, "ID do professor")
                if teacher is not None:
                    await editor.delete(teacher)
                    print_feedback(console, editor.message)
            elif sub == "4":
                await self.app.store.refetch_teachers()

    # ─── Associação ───

    async def _association_menu(self) -> None:
        wf = self.app.association
        store = self.app.store
        wf.sync_defaults()
        console.print(students_table(store.students))
        console.print(subjects_table(store.subjects))
        wf.select(
            student_id=Prompt.ask("ID do aluno", default=wf.selected_student_id or None) or "",
            subject_id=Prompt.ask("ID da matéria", default=wf.selected_subject_id or None) or "",
        )
        action = Prompt.ask("Ação", choices=["associar", "remover"], default="associar")
        if action == "associar":
            await wf.attach()
        else:
            await wf.detach()
        print_feedback(console, wf.message)

    # ─── Auxiliares ───

    def _pick(self, items: Sequence, label: str) -> Optional[object]:
        entity_id = Prompt.ask(label)
        entity = _find(items, entity_id)
        if entity is None:
            console.print(f"[yellow]ID não encontrado: {entity_id}[/yellow]")
        return entity

    async def _edit_loop(self, editor, ask_fields) -> None:
        """Pergunta os campos até salvar com sucesso ou cancelar."""
        while editor.is_editing:
            editor.update_draft(**ask_fields(editor.edit_state.draft))
            if not Confirm.ask("Salvar alterações?", default=True):
                editor.cancel_edit()
                console.print("[dim]Edição cancelada.[/dim]")
                break
            await editor.submit_edit()
            print_feedback(console, editor.message)
            if editor.is_editing and not Confirm.ask("Tentar novamente?", default=True):
                editor.cancel_edit()
