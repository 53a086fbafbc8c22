"""Servidor falso em memória para os testes (httpx.MockTransport)."""

import json
import re
from typing import Optional

import httpx
import pytest

from config.schema import ClientConfig

BASE_URL = "http://testserver"


class FakeUniversityServer:
    """Imita a API: /students, /teachers, /subjects e o sub-recurso de vínculo.

    ``fail[(método, caminho)] = (status, corpo)`` força uma resposta de erro;
    ``corpo`` pode ser dict (JSON), str (texto puro) ou None (sem corpo).
    Campos em ``hidden_student_fields`` não aparecem nas respostas de aluno.
    Todas as requisições ficam em ``requests``.
    """

    def __init__(self) -> None:
        self.students: dict[str, dict] = {}
        self.teachers: dict[str, dict] = {}
        self.subjects: dict[str, dict] = {}
        self.requests: list[httpx.Request] = []
        self.fail: dict[tuple[str, str], tuple[int, object]] = {}
        self.hidden_student_fields: set[str] = set()
        self._next_id = 1

    # ─── Dados ───

    def _new_id(self) -> str:
        value = str(self._next_id)
        self._next_id += 1
        return value

    def add_subject(self, name: str, year: int, subject_id: Optional[str] = None) -> dict:
        sid = subject_id or self._new_id()
        self.subjects[sid] = {"id": sid, "name": name, "year": year}
        return self.subjects[sid]

    def add_student(self, name: str, current_year: int = 1, shift: str = "M",
                    student_id: Optional[str] = None, subjects=()) -> dict:
        sid = student_id or self._new_id()
        self.students[sid] = {
            "id": sid, "enrollment": f"2024{int(sid):04d}", "name": name,
            "current_year": current_year, "shift": shift,
            "subjects": [self.subjects[s] for s in subjects],
        }
        return self.students[sid]

    def add_teacher(self, name: str, department: str,
                    teacher_id: Optional[str] = None) -> dict:
        tid = teacher_id or self._new_id()
        self.teachers[tid] = {"id": tid, "registry": f"PROF{int(tid):03d}",
                              "name": name, "department": department}
        return self.teachers[tid]

    def _render(self, resource: str, entity: dict) -> dict:
        if resource != "students":
            return entity
        return {k: v for k, v in entity.items() if k not in self.hidden_student_fields}

    def calls(self, method: str, path: str) -> list[httpx.Request]:
        return [r for r in self.requests
                if r.method == method and r.url.path == path]

    # ─── Transporte ───

    def http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(transport=httpx.MockTransport(self.handler),
                                 base_url=BASE_URL)

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        key = (request.method, request.url.path)
        if key in self.fail:
            status, body = self.fail[key]
            if isinstance(body, dict):
                return httpx.Response(status, json=body)
            if isinstance(body, str):
                return httpx.Response(status, text=body)
            return httpx.Response(status)
        return self._route(request)

    def _route(self, request: httpx.Request) -> httpx.Response:
        path = request.url.path
        method = request.method
        body = json.loads(request.content) if request.content else None

        m = re.fullmatch(r"/students/([^/]+)/subjects/([^/]+)", path)
        if m:
            return self._association(method, *m.groups())

        m = re.fullmatch(r"/(students|teachers|subjects)(?:/([^/]+))?", path)
        if not m:
            return httpx.Response(404, json={"message": "rota não encontrada"})
        resource, item_id = m.groups()
        store = getattr(self, resource)

        if item_id is None:
            if method == "GET":
                return httpx.Response(
                    200, json=[self._render(resource, e) for e in store.values()])
            if method == "POST" and resource != "subjects":
                return httpx.Response(
                    201, json=self._render(resource, self._create(resource, body)))
            return httpx.Response(405)

        if item_id not in store:
            return httpx.Response(404, json={"message": "not found"})
        if method == "GET":
            return httpx.Response(200, json=self._render(resource, store[item_id]))
        if method == "PUT":
            return self._update(resource, item_id, body)
        if method == "DELETE":
            del store[item_id]
            return httpx.Response(204)
        return httpx.Response(405)

    def _create(self, resource: str, body: dict) -> dict:
        if resource == "students":
            entity = self.add_student(body["name"], body["current_year"], body["shift"],
                                      subjects=[s["id"] for s in body["subjects"]])
        else:
            entity = self.add_teacher(body["name"], body["department"])
        return entity

    def _update(self, resource: str, item_id: str, body: dict) -> httpx.Response:
        current = getattr(self, resource)[item_id]
        code = "enrollment" if resource == "students" else "registry"
        if body.get(code) != current[code]:
            return httpx.Response(400, json={"message": f"{code} não pode mudar"})
        updated = {**current, **body, "id": item_id}
        if resource == "students":
            updated["subjects"] = [self.subjects[s["id"]] for s in body["subjects"]]
        getattr(self, resource)[item_id] = updated
        return httpx.Response(200, json=self._render(resource, updated))

    def _association(self, method: str, student_id: str, subject_id: str) -> httpx.Response:
        student = self.students.get(student_id)
        subject = self.subjects.get(subject_id)
        if student is None or subject is None:
            return httpx.Response(404, json={"message": "aluno ou matéria não encontrado"})
        ids = [s["id"] for s in student["subjects"]]
        if method == "POST":
            if subject_id in ids:
                return httpx.Response(409, json={"message": "matéria já associada"})
            student["subjects"].append(subject)
            return httpx.Response(200, json=self._render("students", student))
        if method == "DELETE":
            if subject_id not in ids:
                return httpx.Response(404)
            student["subjects"] = [s for s in student["subjects"] if s["id"] != subject_id]
            return httpx.Response(204)
        return httpx.Response(405)


@pytest.fixture
def server() -> FakeUniversityServer:
    return FakeUniversityServer()


@pytest.fixture
def config() -> ClientConfig:
    return ClientConfig(api_base_url=BASE_URL)
