from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable


class StrategyId(str, Enum):
    """Estrategias disponibles. El orden de declaración es el desempate del selector."""

    WIDE_DECODE = "wide_decode"
    PRINTABLE_RUN = "printable_run"
    MARKED_TEXT_RUN = "marked_text_run"


@dataclass(frozen=True)
class AttemptResult:
    """
    Resultado de un intento de extracción.
    text    -> texto recuperado (vacío si success es False).
    success -> False si la estrategia falló internamente.
    """

    strategy_id: StrategyId
    text: str = ""
    success: bool = True

    def __post_init__(self):
        if not self.success and self.text:
            raise ValueError("Un intento fallido no puede llevar texto")

    @classmethod
    def failed(cls, strategy_id: StrategyId) -> "AttemptResult":
        return cls(strategy_id=strategy_id, text="", success=False)


# Firma común: bytes crudos -> texto recuperado (puede lanzar; attempt() lo captura)
StrategyFn = Callable[[bytes], str]
