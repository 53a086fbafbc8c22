"""Gerenciador Universitário — CLI principal.

Uso:
  python main.py                          Menu interativo
  python main.py shell                    Menu interativo
  python main.py students list            Listar alunos
  python main.py students create ...      Cadastrar aluno
  python main.py students edit <id> ...   Atualizar aluno
  python main.py students delete <id>     Deletar aluno
  python main.py teachers list|create|edit|delete
  python main.py subjects list            Listar matérias
  python main.py associate <aluno> <matéria>
  python main.py dissociate <aluno> <matéria>
  python main.py config show              Mostrar configuração
  python main.py config set-url <url>     Alterar URL da API
"""

import asyncio
import logging
import sys
from typing import Awaitable, Callable, Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape

from config.schema import ClientConfig
from editors.forms import StudentForm, TeacherForm
from models import Shift
from state.store import CollectionStatus
from ui.app import AdminApp
from ui.render import (
    print_feedback,
    students_table,
    subjects_table,
    teachers_table,
)

console = Console()

# Substituível nos testes (injeção de transporte HTTP)
make_app: Callable[..., AdminApp] = AdminApp


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


def _load_config_or_abort(ctx: click.Context) -> ClientConfig:
    """Carrega a configuração ou encerra com mensagem de erro."""
    from config.manager import ConfigManager
    try:
        config = ConfigManager().load()
        base_url = ctx.obj.get("base_url") if ctx.obj else None
        if base_url:
            config = ClientConfig.model_validate(
                {**config.model_dump(), "api_base_url": base_url})
    except (ValueError, FileNotFoundError) as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)
    return config


def _run(ctx: click.Context, action: Callable[[AdminApp], Awaitable[bool]],
         assume_yes: bool = False) -> None:
    """Executa ``action`` dentro de uma sessão; sai com 1 se ela falhar."""
    config = _load_config_or_abort(ctx)

    def confirm(question: str) -> bool:
        return assume_yes or click.confirm(question, default=False)

    async def _main() -> bool:
        async with make_app(config, confirm=confirm) as app:
            return await action(app)

    if not asyncio.run(_main()):
        sys.exit(1)


def _check_loaded(app: AdminApp, name: str) -> bool:
    coll = app.store.collection(name)
    if coll.status == CollectionStatus.EMPTY_AFTER_ERROR:
        console.print(f"[red]Erro ao buscar {name}: {escape(str(coll.last_error))}[/red]")
        return False
    return True


def _find_or_report(items, entity_id: str, label: str):
    entity = next((i for i in items if i.id == entity_id), None)
    if entity is None:
        console.print(f"[red]{label} não encontrado: {escape(entity_id)}[/red]")
    return entity


_shift_option = click.option(
    "--shift", "-t", type=click.Choice([s.value for s in Shift], case_sensitive=False),
    help="Turno: M (Manhã), T (Tarde), N (Noite).")


# ─── SHELL ────────────────────────────────────────────────────────────────────

@click.command("shell")
@click.pass_context
def cmd_shell(ctx: click.Context):
    """Abre o menu interativo."""
    from ui.shell import AdminShell, confirm_prompt
    config = _load_config_or_abort(ctx)

    async def _main() -> None:
        async with make_app(config, confirm=confirm_prompt) as app:
            await AdminShell(app).run()

    asyncio.run(_main())


# ─── ALUNOS ───────────────────────────────────────────────────────────────────

@click.group("students")
def cmd_students():
    """Cadastro de alunos."""


@cmd_students.command("list")
@click.pass_context
def students_list(ctx: click.Context):
    """Lista todos os alunos."""
    async def action(app: AdminApp) -> bool:
        if not _check_loaded(app, "students"):
            return False
        console.print(students_table(app.store.students))
        return True
    _run(ctx, action)


@cmd_students.command("create")
@click.option("--name", "-n", required=True, help="Nome do aluno.")
@click.option("--year", "-y", "current_year", required=True, help="Ano atual (>= 1).")
@_shift_option
@click.pass_context
def students_create(ctx: click.Context, name: str, current_year: str, shift: Optional[str]):
    """Cadastra um aluno e vincula matérias do primeiro ano."""
    async def action(app: AdminApp) -> bool:
        editor = app.students
        created = await editor.create(StudentForm(
            name=name, current_year=current_year, shift=shift or Shift.MORNING.value))
        print_feedback(console, editor.message, editor.warning)
        return created is not None
    _run(ctx, action)


@cmd_students.command("edit")
@click.argument("student_id")
@click.option("--name", "-n", default=None, help="Novo nome.")
@click.option("--year", "-y", "current_year", default=None, help="Novo ano atual.")
@_shift_option
@click.pass_context
def students_edit(ctx: click.Context, student_id: str, name: Optional[str],
                  current_year: Optional[str], shift: Optional[str]):
    """Atualiza nome, ano ou turno de um aluno (matrícula inalterada)."""
    async def action(app: AdminApp) -> bool:
        student = _find_or_report(app.store.students, student_id, "Aluno")
        if student is None:
            return False
        editor = app.students
        editor.begin_edit(student)
        changes = {k: v for k, v in
                   (("name", name), ("current_year", current_year), ("shift", shift))
                   if v is not None}
        editor.update_draft(**changes)
        updated = await editor.submit_edit()
        print_feedback(console, editor.message)
        return updated is not None
    _run(ctx, action)


@cmd_students.command("delete")
@click.argument("student_id")
@click.option("--yes", "-y", "assume_yes", is_flag=True, default=False,
              help="Não pedir confirmação.")
@click.pass_context
def students_delete(ctx: click.Context, student_id: str, assume_yes: bool):
    """Deleta um aluno (pede confirmação)."""
    async def action(app: AdminApp) -> bool:
        student = _find_or_report(app.store.students, student_id, "Aluno")
        if student is None:
            return False
        editor = app.students
        deleted = await editor.delete(student)
        print_feedback(console, editor.message)
        return deleted or editor.message is None
    _run(ctx, action, assume_yes=assume_yes)


# ─── PROFESSORES ──────────────────────────────────────────────────────────────

@click.group("teachers")
def cmd_teachers():
    """Cadastro de professores."""


@cmd_teachers.command("list")
@click.pass_context
def teachers_list(ctx: click.Context):
    """Lista todos os professores."""
    async def action(app: AdminApp) -> bool:
        if not _check_loaded(app, "teachers"):
            return False
        console.print(teachers_table(app.store.teachers))
        return True
    _run(ctx, action)


@cmd_teachers.command("create")
@click.option("--name", "-n", required=True, help="Nome do professor.")
@click.option("--department", "-d", required=True, help="Departamento.")
@click.pass_context
def teachers_create(ctx: click.Context, name: str, department: str):
    """Cadastra um professor."""
    async def action(app: AdminApp) -> bool:
        editor = app.teachers
        created = await editor.create(TeacherForm(name=name, department=department))
        print_feedback(console, editor.message)
        return created is not None
    _run(ctx, action)


@cmd_teachers.command("edit")
@click.argument("teacher_id")
@click.option("--name", "-n", default=None, help="Novo nome.")
@click.option("--department", "-d", default=None, help="Novo departamento.")
@click.pass_context
def teachers_edit(ctx: click.Context, teacher_id: str, name: Optional[str],
                  department: Optional[str]):
    """Atualiza nome ou departamento de um professor (registro inalterado)."""
    async def action(app: AdminApp) -> bool:
        teacher = _find_or_report(app.store.teachers, teacher_id, "Professor")
        if teacher is None:
            return False
        editor = app.teachers
        editor.begin_edit(teacher)
        changes = {k: v for k, v in (("name", name), ("department", department))
                   if v is not None}
        editor.update_draft(**changes)
        updated = await editor.submit_edit()
        print_feedback(console, editor.message)
        return updated is not None
    _run(ctx, action)


@cmd_teachers.command("delete")
@click.argument("teacher_id")
@click.option("--yes", "-y", "assume_yes", is_flag=True, default=False,
              help="Não pedir confirmação.")
@click.pass_context
def teachers_delete(ctx: click.Context, teacher_id: str, assume_yes: bool):
    """Deleta um professor (pede confirmação)."""
    async def action(app: AdminApp) -> bool:
        teacher = _find_or_report(app.store.teachers, teacher_id, "Professor")
        if teacher is None:
            return False
        editor = app.teachers
        deleted = await editor.delete(teacher)
        print_feedback(console, editor.message)
        return deleted or editor.message is None
    _run(ctx, action, assume_yes=assume_yes)


# ─── MATÉRIAS ─────────────────────────────────────────────────────────────────

@click.group("subjects")
def cmd_subjects():
    """Matérias (somente leitura)."""


@cmd_subjects.command("list")
@click.pass_context
def subjects_list(ctx: click.Context):
    """Lista as matérias por ano."""
    async def action(app: AdminApp) -> bool:
        if not _check_loaded(app, "subjects"):
            return False
        console.print(subjects_table(app.store.subjects))
        return True
    _run(ctx, action)


# ─── ASSOCIAÇÃO ───────────────────────────────────────────────────────────────

@click.command("associate")
@click.argument("student_id")
@click.argument("subject_id")
@click.pass_context
def cmd_associate(ctx: click.Context, student_id: str, subject_id: str):
    """Associa uma matéria a um aluno."""
    async def action(app: AdminApp) -> bool:
        wf = app.association
        wf.select(student_id=student_id, subject_id=subject_id)
        student = await wf.attach()
        print_feedback(console, wf.message)
        return student is not None
    _run(ctx, action)


@click.command("dissociate")
@click.argument("student_id")
@click.argument("subject_id")
@click.pass_context
def cmd_dissociate(ctx: click.Context, student_id: str, subject_id: str):
    """Remove uma matéria de um aluno."""
    async def action(app: AdminApp) -> bool:
        wf = app.association
        wf.select(student_id=student_id, subject_id=subject_id)
        ok = await wf.detach()
        print_feedback(console, wf.message)
        return ok
    _run(ctx, action)


# ─── CONFIG ───────────────────────────────────────────────────────────────────

@click.group("config")
def cmd_config():
    """Mostrar ou alterar a configuração."""


@cmd_config.command("show")
@click.pass_context
def config_show(ctx: click.Context):
    """Mostra a configuração efetiva."""
    from config.manager import ConfigManager
    config = _load_config_or_abort(ctx)
    ConfigManager().show(config)


@cmd_config.command("set-url")
@click.argument("url")
def config_set_url(url: str):
    """Define a URL base da API e salva a configuração."""
    from config.manager import ConfigManager
    mgr = ConfigManager()
    try:
        config = mgr.set_base_url(url)
    except ValueError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)
    console.print(f"[green]✓[/green] URL da API: {config.api_base_url}")


# ─── CLI PRINCIPAL ────────────────────────────────────────────────────────────

@click.group(invoke_without_command=True)
@click.option("--base-url", default=None, help="Sobrepõe a URL da API nesta execução.")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log detalhado.")
@click.pass_context
def cli(ctx: click.Context, base_url: Optional[str], verbose: bool):
    """Gerenciador Universitário: alunos, professores e matérias via API.

    Sem subcomando, abre o menu interativo.
    """
    _setup_logging(verbose)
    ctx.ensure_object(dict)
    ctx.obj["base_url"] = base_url
    if ctx.invoked_subcommand is None:
        ctx.invoke(cmd_shell)


def main():
    """Ponto de entrada."""
    cli(obj={})


# Registrar comandos
cli.add_command(cmd_shell)
cli.add_command(cmd_students)
cli.add_command(cmd_teachers)
cli.add_command(cmd_subjects)
cli.add_command(cmd_associate)
cli.add_command(cmd_dissociate)
cli.add_command(cmd_config)


if __name__ == "__main__":
    main()
