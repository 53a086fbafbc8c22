from typing import Optional

from pydantic import BaseModel, Field, field_validator


class ClientConfig(BaseModel):
    """Configuração do cliente da API da universidade."""
    # Origem fixa da API (sem barra final)
    api_base_url: str = Field("http://localhost:8080",
        description="URL base da API")
    # Timeout por requisição em segundos; None = sem timeout
    timeout_seconds: Optional[float] = Field(None, gt=0,
        description="Timeout por requisição (None = sem timeout)")
    # Ano do currículo cujas matérias são vinculadas ao cadastrar um aluno
    auto_subject_year: int = Field(1, ge=1,
        description="Ano das matérias vinculadas automaticamente")
    # Quantidade máxima de matérias vinculadas automaticamente
    auto_subject_count: int = Field(5, ge=0,
        description="Máximo de matérias vinculadas automaticamente")

    @field_validator("api_base_url")
    @classmethod
    def validate_base_url(cls, v: str) -> str:
        v = v.strip().rstrip("/")
        if not v.startswith(("http://", "https://")):
            raise ValueError(f"URL base inválida (esperado http:// ou https://): {v!r}")
        return v
