"""Modelo de dados de uma matéria (Pydantic v2)."""

from pydantic import BaseModel, Field, field_validator


class Subject(BaseModel):
    """Uma matéria do currículo. Somente leitura a partir deste cliente."""

    id: str
    name: str
    year: int = Field(ge=1)   # Ano do currículo (1 = primeiro ano)

    @field_validator("id", mode="before")
    @classmethod
    def normalize_id(cls, v) -> str:
        return str(v)

    def __str__(self) -> str:
        return f"{self.name} (Ano {self.year})"
