from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Optional

import strategies
from core.logger import get_logger
from strategies import AttemptResult, StrategyId

log = get_logger()


@dataclass(frozen=True)
class SelectionOutcome:
    winning_strategy_id: Optional[StrategyId] = None
    text: str = ""

    @property
    def found(self) -> bool:
        return self.winning_strategy_id is not None


NO_TEXT = SelectionOutcome()


def run_all(data: bytes, parallel: bool = False) -> List[AttemptResult]:
    """Ejecuta todas las estrategias y devuelve sus intentos en orden de declaración."""
    ids = [sid for sid, _ in strategies.ordered()]
    if not parallel:
        return [strategies.attempt(sid, data) for sid in ids]
    with ThreadPoolExecutor(max_workers=len(ids) or 1) as pool:
        # map() conserva el orden de entrada
        return list(pool.map(lambda sid: strategies.attempt(sid, data), ids))


def pick_best(attempts: List[AttemptResult]) -> SelectionOutcome:
    """El texto más largo gana; en empate, el primero en orden de declaración."""
    best: Optional[AttemptResult] = None
    for a in attempts:
        if not a.success or not a.text:
            continue
        if best is None or len(a.text) > len(best.text):
            best = a
    if best is None:
        return NO_TEXT
    return SelectionOutcome(winning_strategy_id=best.strategy_id, text=best.text)


def select(data: bytes, parallel: bool = False) -> SelectionOutcome:
    attempts = run_all(data, parallel=parallel)
    outcome = pick_best(attempts)
    log.debug(
        "[EXTRACT] intentos: "
        + ", ".join(f"{a.strategy_id.value}={len(a.text)}" for a in attempts)
        + f" | ganador={outcome.winning_strategy_id.value if outcome.found else '-'}"
    )
    return outcome
