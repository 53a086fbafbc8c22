"""Montagem da aplicação: sessão HTTP, store e editores compartilhando estado."""

import random
from typing import Optional

import httpx

from api.session import UniversityApi
from config.schema import ClientConfig
from editors.association import AssociationWorkflow
from editors.base import ConfirmFn
from editors.student_editor import StudentEditor
from editors.teacher_editor import TeacherEditor
from state.store import ViewStateStore


class AdminApp:
    """Um store e os editores que operam sobre ele.

    Uso::

        async with AdminApp(config, confirm=Confirm.ask) as app:
            await app.students.create(StudentForm(...))
    """

    def __init__(self, config: ClientConfig, confirm: ConfirmFn,
                 http: Optional[httpx.AsyncClient] = None,
                 rng: Optional[random.Random] = None) -> None:
        self.config = config
        self.api = UniversityApi(config, http=http)
        self.store = ViewStateStore(self.api)
        self.students = StudentEditor(
            self.api.students, self.store, confirm,
            subject_year=config.auto_subject_year,
            subject_count=config.auto_subject_count,
            rng=rng,
        )
        self.teachers = TeacherEditor(self.api.teachers, self.store, confirm)
        self.association = AssociationWorkflow(self.api.associations, self.store)

    async def __aenter__(self) -> "AdminApp":
        await self.store.startup()
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.api.aclose()
