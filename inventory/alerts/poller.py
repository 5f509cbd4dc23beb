import logging
import threading
import time

from django.db import close_old_connections

logger = logging.getLogger(__name__)


class LowStockPoller(threading.Thread):
    """
    Hilo que ejecuta `tick` a tasa fija: cada `interval` segundos tras un
    retardo inicial. Si un tick tarda más que el intervalo, el siguiente se
    ejecuta apenas termina (se retrasa, no se omite).
    """

    def __init__(self, tick, interval, initial_delay=0.0, name="low-stock-poller"):
        super().__init__(name=name, daemon=True)
        self._tick = tick
        self.interval = interval
        self.initial_delay = initial_delay
        self.ticks = 0
        self._stop_event = threading.Event()

    @property
    def stopped(self) -> bool:
        return self._stop_event.is_set()

    def run(self):
        logger.info(
            "Poller de stock bajo iniciado (intervalo=%ss, retardo inicial=%ss)",
            self.interval,
            self.initial_delay,
        )
        if self._stop_event.wait(self.initial_delay):
            return

        next_run = time.monotonic()
        while not self._stop_event.is_set():
            self._run_tick()
            next_run += self.interval
            delay = next_run - time.monotonic()
            if delay <= 0:
                next_run = time.monotonic()
                delay = 0
            if self._stop_event.wait(delay):
                break
        logger.info("Poller de stock bajo detenido tras %d ciclos", self.ticks)

    def _run_tick(self):
        # El hilo no pasa por el ciclo request/response: gestionamos las conexiones a mano.
        close_old_connections()
        try:
            self._tick()
        except Exception:
            logger.exception("Error no controlado en el ciclo del poller de stock bajo")
        finally:
            self.ticks += 1
            close_old_connections()

    def stop(self, timeout=None):
        self._stop_event.set()
        if self.is_alive() and threading.current_thread() is not self:
            self.join(timeout)
