"""Modelo de dados de um professor (Pydantic v2)."""

from pydantic import BaseModel, field_validator


class Teacher(BaseModel):
    """Representa um professor como devolvido pela API."""

    id: str            # Atribuído pelo servidor
    registry: str      # Registro ("PROF001"), imutável para o cliente
    name: str
    department: str

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, v) -> str:
        return str(v)


class TeacherCreate(BaseModel):
    """Corpo do POST /teachers."""

    name: str
    department: str


class TeacherUpdate(BaseModel):
    """Corpo do PUT /teachers/{id}. O registro é devolvido inalterado."""

    registry: str
    name: str
    department: str
