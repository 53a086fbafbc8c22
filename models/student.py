"""Modelo de dados de um aluno (Pydantic v2)."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, Field, field_validator


class Shift(str, Enum):
    MORNING = "M"
    AFTERNOON = "T"
    EVENING = "N"

    @property
    def label(self) -> str:
        return {"M": "Manhã", "T": "Tarde", "N": "Noite"}[self.value]


class StudentSubject(BaseModel):
    """Matéria vinculada a um aluno.

    O servidor devolve a matéria completa; nos payloads basta o ``id``.
    """

    id: str
    name: Optional[str] = None
    year: Optional[int] = None

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, v) -> str:
        return str(v)


class SubjectRef(BaseModel):
    """Referência ``{"id": ...}`` usada nos corpos de POST/PUT."""

    id: str


def subject_refs(ids) -> list[SubjectRef]:
    """Monta referências sem ids repetidos, preservando a ordem."""
    seen: set[str] = set()
    refs = []
    for sid in ids:
        sid = str(sid)
        if sid in seen:
            continue
        seen.add(sid)
        refs.append(SubjectRef(id=sid))
    return refs


class Student(BaseModel):
    """Representa um aluno como devolvido pela API."""

    id: str                                   # Atribuído pelo servidor
    enrollment: str                           # Matrícula, imutável para o cliente
    name: str
    current_year: int = Field(ge=1)
    shift: Optional[Shift] = None             # Nem todo backend devolve o turno
    subjects: list[StudentSubject] = []

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, v) -> str:
        return str(v)

    @field_validator("subjects", mode="before")
    @classmethod
    def null_subjects(cls, v):
        # A API serializa listas vazias como null
        return [] if v is None else v

    @property
    def subject_ids(self) -> list[str]:
        return [s.id for s in self.subjects]


class StudentCreate(BaseModel):
    """Corpo do POST /students."""

    name: str
    current_year: int
    shift: Shift
    subjects: list[SubjectRef] = []


class StudentUpdate(BaseModel):
    """Corpo do PUT /students/{id}. A matrícula é devolvida inalterada."""

    enrollment: str
    name: str
    current_year: int
    shift: Shift
    subjects: list[SubjectRef] = []
