import threading


class AlertLedger:
    """
    Conjunto en memoria de IDs de producto con una alerta de stock bajo vigente.

    Lo comparten el poller y el flujo de actualización de cantidad, por eso
    toda lectura/escritura pasa por el lock. Vive lo que dura el proceso.
    """

    def __init__(self):
        self._ids = set()
        self._lock = threading.Lock()

    def __contains__(self, item_id):
        with self._lock:
            return item_id in self._ids

    def __len__(self):
        with self._lock:
            return len(self._ids)

    def claim(self, item_id) -> bool:
        """Registra el ID si no estaba. Devuelve True si este llamado lo agregó."""
        with self._lock:
            if item_id in self._ids:
                return False
            self._ids.add(item_id)
            return True

    def discard(self, item_id) -> bool:
        """Elimina el ID. Devuelve True si estaba presente."""
        with self._lock:
            if item_id not in self._ids:
                return False
            self._ids.remove(item_id)
            return True

    def reset(self) -> int:
        """Vacía el ledger completo y devuelve cuántos IDs tenía."""
        with self._lock:
            count = len(self._ids)
            self._ids.clear()
            return count

    def snapshot(self) -> frozenset:
        with self._lock:
            return frozenset(self._ids)
