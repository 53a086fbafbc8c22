"""Seleção aleatória das matérias vinculadas a um novo aluno."""

import random
from typing import Optional, Sequence

from models.subject import Subject


def pick_subjects(
    subjects: Sequence[Subject],
    year: int,
    count: int,
    rng: Optional[random.Random] = None,
) -> list[Subject]:
    """Sorteia até ``count`` matérias do ano ``year``.

    Embaralhamento uniforme (Fisher–Yates de ``random.shuffle``) seguido dos
    primeiros ``count``. Com menos matérias no ano, devolve todas.
    A sequência de entrada não é alterada.
    """
    pool = [s for s in subjects if s.year == year]
    (rng or random.Random()).shuffle(pool)
    return pool[:max(count, 0)]
