import queue
import threading
from concurrent.futures import Future
from typing import Callable, Optional

from patterns_engine.utils.logger import log_debug, log_error

# Marqueur d'arrêt déposé dans la file
_STOP = object()


class Counter:
    """
    Compteur "Active Object".
    Toutes les opérations sont déposées dans une file et exécutées par UN thread dédié :
    l'appelant n'a jamais besoin de verrou, aucune incrémentation n'est perdue.
    """

    def __init__(self, name: str = "counter"):
        self.name = name
        self._count = 0
        self._dispatch_queue: "queue.Queue" = queue.Queue()

        # Protège uniquement le drapeau d'arrêt (pas le compteur)
        self._shutdown_lock = threading.Lock()
        self._shutdown = False

        self._worker = threading.Thread(target=self._run, name=f"ActiveObject-{name}", daemon=True)
        self._worker.start()

    # =========================================================================
    #  BOUCLE DU THREAD DÉDIÉ
    # =========================================================================

    def _run(self):
        while True:
            item = self._dispatch_queue.get()
            if item is _STOP:
                break
            task, future = item
            if not future.set_running_or_notify_cancel():
                continue
            try:
                future.set_result(task())
            except Exception as e:
                log_error(f"❌ {self.name}: task failed: {e}")
                future.set_exception(e)

    def _submit(self, task: Callable) -> Future:
        with self._shutdown_lock:
            if self._shutdown:
                raise RuntimeError(f"Counter '{self.name}' has been shut down")
            future = Future()
            self._dispatch_queue.put((task, future))
        return future

    # =========================================================================
    #  API PUBLIQUE
    # =========================================================================

    def increment(self) -> Future:
        """Dépose une incrémentation. Le Future renvoie la nouvelle valeur."""
        return self._submit(self._do_increment)

    def value(self, timeout: Optional[float] = None) -> int:
        """
        Valeur courante, lue par le thread dédié.
        Passe derrière toutes les incrémentations déjà déposées.
        """
        return self._submit(lambda: self._count).result(timeout)

    def shutdown(self, wait: bool = True):
        """Vide la file puis arrête le thread. Idempotent."""
        with self._shutdown_lock:
            if not self._shutdown:
                self._shutdown = True
                self._dispatch_queue.put(_STOP)
        if wait:
            self._worker.join()

    def _do_increment(self) -> int:
        self._count += 1
        log_debug(f"Count = {self._count}.")
        return self._count

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc, tb):
        self.shutdown(wait=True)
        return False

    def __repr__(self):
        return f"<Counter '{self.name}' shutdown={self._shutdown}>"
