# layers/animation.py
from __future__ import annotations

import logging
import threading
from typing import Any, Callable, Optional

from core.domain.model import AnimationState
from core.errors import InvalidInput, OutOfRange

logger = logging.getLogger(__name__)

TimerFactory = Callable[..., Any]


def _check_integer(index: Any) -> None:
    if isinstance(index, bool) or not (
        isinstance(index, int) or (isinstance(index, float) and index.is_integer())
    ):
        raise InvalidInput(f"index debe ser entero: {index!r}")


class AnimationScheduler:
    """
    Cicla un índice acotado (mes u hora) cada period_ms.

    Estados: Idle / Running.
      - start(period_ms, bound): Idle -> Running. Si ya corre, no hace nada.
      - stop(): Running -> Idle. Conserva el índice. Seguro en Idle.
      - set_index(i): en cualquier estado; no reinicia el ritmo de ticks.

    Como máximo hay un timer pendiente por instancia. Cada tick se ejecuta bajo
    el lock de la instancia y valida la generación con la que fue armado, así un
    tick ya programado no puede mutar el estado después de que stop() retorna.
    """

    def __init__(
        self,
        *,
        index: int = 0,
        on_tick: Optional[Callable[[int], None]] = None,
        timer_factory: TimerFactory = threading.Timer,
    ) -> None:
        _check_integer(index)
        if index < 0:
            raise OutOfRange("index debe ser >= 0")
        self._lock = threading.RLock()
        self._index = int(index)
        self._bound = 0
        self._period_s = 0.0
        self._timer: Any = None
        self._generation = 0
        self._on_tick = on_tick
        self._timer_factory = timer_factory

    # -----------------------------
    # Lectura
    # -----------------------------

    @property
    def index(self) -> int:
        with self._lock:
            return self._index

    @property
    def bound(self) -> int:
        with self._lock:
            return self._bound

    @property
    def playing(self) -> bool:
        with self._lock:
            return self._timer is not None

    @property
    def state(self) -> AnimationState:
        with self._lock:
            return AnimationState(index=self._index, bound=self._bound, playing=self._timer is not None)

    # -----------------------------
    # Transiciones
    # -----------------------------

    def start(self, period_ms: float, bound: int) -> None:
        if bound <= 0:
            raise InvalidInput("bound debe ser > 0")
        if period_ms <= 0:
            raise InvalidInput("period_ms debe ser > 0")

        with self._lock:
            if self._timer is not None:
                return
            self._bound = int(bound)
            self._period_s = float(period_ms) / 1000.0
            self._index %= self._bound
            self._generation += 1
            self._arm(self._generation)
            logger.debug("Animación iniciada period_ms=%s bound=%s index=%s", period_ms, bound, self._index)

    def stop(self) -> None:
        with self._lock:
            self._generation += 1
            timer, self._timer = self._timer, None
            if timer is not None:
                timer.cancel()
                logger.debug("Animación detenida index=%s", self._index)

    def set_index(self, index: int) -> None:
        _check_integer(index)
        with self._lock:
            if index < 0 or (self._bound > 0 and index >= self._bound):
                raise OutOfRange(f"index fuera de rango: {index} (bound={self._bound})")
            self._index = int(index)

    # -----------------------------
    # Timer
    # -----------------------------

    def _arm(self, generation: int) -> None:
        timer = self._timer_factory(self._period_s, self._fire, args=(generation,))
        timer.daemon = True
        self._timer = timer
        timer.start()

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation or self._timer is None:
                return
            self._index = (self._index + 1) % self._bound
            try:
                if self._on_tick is not None:
                    self._on_tick(self._index)
            finally:
                # el callback pudo llamar stop()
                if generation == self._generation and self._timer is not None:
                    self._arm(generation)
