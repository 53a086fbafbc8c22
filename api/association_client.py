"""Vínculo aluno ↔ matéria via sub-recurso ``/students/{id}/subjects/{id}``."""

import httpx

from api.resource_client import (
    ensure_success,
    ensure_success_bodyless,
    parse_body,
    send,
)
from models.student import Student


class AssociationClient:
    """Associa/desassocia matérias de um aluno.

    Nada é validado localmente (p.ex. vínculo duplicado); o servidor decide e
    o erro dele é repassado como ``RequestError``.
    """

    def __init__(self, http: httpx.AsyncClient, students_path: str = "/students") -> None:
        self._http = http
        self.students_path = "/" + students_path.strip("/")

    def _url(self, student_id, subject_id) -> str:
        return f"{self.students_path}/{student_id}/subjects/{subject_id}"

    async def attach(self, student_id, subject_id) -> Student:
        """POST; devolve o aluno atualizado."""
        response = ensure_success(
            await send(self._http, "POST", self._url(student_id, subject_id)))
        return parse_body(response, Student)

    async def detach(self, student_id, subject_id) -> bool:
        """DELETE do vínculo. Qualquer 2xx é sucesso, com ou sem corpo."""
        response = await send(self._http, "DELETE", self._url(student_id, subject_id))
        return ensure_success_bodyless(response)
