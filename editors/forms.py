"""Formulários de entrada (valores crus, como digitados) e validação mínima.

A validação cobre só presença e conversão numérica; regras de negócio ficam
com o servidor.
"""

from dataclasses import dataclass

from models.student import Shift


class FormError(ValueError):
    """Campo obrigatório ausente ou inválido. Nenhuma requisição é feita."""


REQUIRED_MESSAGE = "Preencha todos os campos obrigatórios."


@dataclass(frozen=True)
class StudentForm:
    name: str = ""
    current_year: str = ""
    shift: str = Shift.MORNING.value


@dataclass(frozen=True)
class TeacherForm:
    name: str = ""
    department: str = ""


def require(*values) -> None:
    for v in values:
        if v is None or not str(v).strip():
            raise FormError(REQUIRED_MESSAGE)


def parse_year(raw) -> int:
    """Converte o ano digitado em inteiro positivo."""
    try:
        year = int(str(raw).strip())
    except ValueError:
        raise FormError("Ano atual deve ser um número inteiro positivo.") from None
    if year < 1:
        raise FormError("Ano atual deve ser um número inteiro positivo.")
    return year


def parse_shift(raw) -> Shift:
    value = str(raw).strip().upper()
    try:
        return Shift(value)
    except ValueError:
        options = ", ".join(f"{s.value} ({s.label})" for s in Shift)
        raise FormError(f"Turno inválido: {raw!r}. Use {options}.") from None
