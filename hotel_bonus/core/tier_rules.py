from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True)
class Tier:
    key: str       # нормализованная форма: "2 сезона"
    display: str   # как показываем на форме: "2 СЕЗОНА"


TIERS: tuple[Tier, ...] = (
    Tier("1 сезон", "1 СЕЗОН"),
    Tier("2 сезона", "2 СЕЗОНА"),
    Tier("3 сезона", "3 СЕЗОНА"),
    Tier("4 сезона", "4 СЕЗОНА"),
)

_INDEX = {t.key: i for i, t in enumerate(TIERS)}
_WS = re.compile(r"\s+")


def normalize_tier_label(label: str | None) -> str:
    return _WS.sub(" ", (label or "").strip().lower())


def tier_index(label: str | None) -> int | None:
    return _INDEX.get(normalize_tier_label(label))


def next_tier(label: str | None) -> str:
    """
    Уровень, к которому гость идёт после текущего визита.
    Пусто/неизвестно -> первый уровень, последний уровень не растёт.
    """
    i = tier_index(label)
    if i is None:
        return TIERS[0].display
    return TIERS[min(i + 1, len(TIERS) - 1)].display
