"""Estado do fluxo de edição em duas fases: ``Idle`` ou ``Editing``."""

from dataclasses import dataclass
from typing import Any, Union


@dataclass(frozen=True)
class Idle:
    """Nenhuma entidade em edição."""

    def __repr__(self) -> str:
        return "Idle"


@dataclass(frozen=True)
class Editing:
    """Edição em andamento.

    ``original`` é a entidade como estava na coleção ao entrar em edição;
    ``draft`` é a cópia editável dos campos. Cancelar descarta o rascunho,
    salvar envia o rascunho somado ao código imutável do original.
    """

    original: Any
    draft: Any


IDLE = Idle()

EditState = Union[Idle, Editing]
