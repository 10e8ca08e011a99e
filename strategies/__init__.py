from __future__ import annotations

from typing import Dict, List, Tuple

from core.logger import get_logger

from .base import AttemptResult, StrategyFn, StrategyId

log = get_logger()

# Registro global de estrategias
registry: Dict[StrategyId, StrategyFn] = {}


def register(strategy_id: StrategyId):
    """Decorador para registrar una función de extracción bajo su StrategyId."""

    def deco(fn: StrategyFn) -> StrategyFn:
        if not isinstance(strategy_id, StrategyId):
            raise ValueError(f"{fn.__name__} debe registrarse con un StrategyId")
        if strategy_id in registry:
            raise ValueError(f"Estrategia duplicada para id='{strategy_id.value}'")
        registry[strategy_id] = fn
        return fn

    return deco


def get_strategy(strategy_id: StrategyId) -> StrategyFn:
    try:
        return registry[strategy_id]
    except KeyError as e:
        raise KeyError(
            f"No existe estrategia para id='{strategy_id}'. "
            f"Registradas: {[k.value for k in registry]}"
        ) from e


def ordered() -> List[Tuple[StrategyId, StrategyFn]]:
    """Estrategias registradas en orden de declaración de StrategyId."""
    return [(sid, registry[sid]) for sid in StrategyId if sid in registry]


def attempt(strategy_id: StrategyId, data: bytes) -> AttemptResult:
    """Ejecuta una estrategia sin dejar escapar excepciones."""
    fn = get_strategy(strategy_id)
    try:
        text = fn(data)
    except Exception as e:
        # Una estrategia rota no debe tirar las demás
        log.debug(f"[STRATEGY] {strategy_id.value} falló: {e!r}")
        return AttemptResult.failed(strategy_id)
    return AttemptResult(strategy_id=strategy_id, text=text or "", success=True)


# Importa los módulos concretos para que se auto-registren con @register
from . import (
    marked_text,  # noqa: F401
    printable_run,  # noqa: F401
    wide_decode,  # noqa: F401
)

__all__ = [
    "AttemptResult",
    "StrategyId",
    "registry",
    "register",
    "get_strategy",
    "ordered",
    "attempt",
]
