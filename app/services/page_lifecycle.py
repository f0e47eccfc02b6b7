# app/services/page_lifecycle.py
import threading
from typing import Any, Callable

from app.utils.logging import get_logger

logger = get_logger(__name__)


class PageLifecycle:
    """
    Cykl zycia strony: mount -> (timery, wyniki zapytan) -> unmount.

    - schedule(): timer o stalym opoznieniu, anulowany przy unmount
    - deliver(): wynik wywolania sieciowego stosowany tylko gdy strona
      jest nadal zamontowana, inaczej odrzucany
    """

    def __init__(self):
        self._mounted = False
        self._timers: list[threading.Timer] = []
        # reentrant: callback pod lockiem moze sam wywolac unmount/schedule
        self._lock = threading.RLock()

    @property
    def mounted(self) -> bool:
        return self._mounted

    def mount(self) -> None:
        self._mounted = True

    def unmount(self) -> None:
        with self._lock:
            self._mounted = False
            timers, self._timers = self._timers, []
        for t in timers:
            t.cancel()
        if timers:
            logger.info(f"Cancelled {len(timers)} pending timer(s) on unmount")

    def schedule(self, delay: float, callback: Callable[[], Any]) -> threading.Timer | None:
        if not self._mounted:
            return None

        def fire():
            with self._lock:
                if not self._mounted:
                    return
                if timer in self._timers:
                    self._timers.remove(timer)
                callback()

        timer = threading.Timer(delay, fire)
        timer.daemon = True
        with self._lock:
            self._timers.append(timer)
        timer.start()
        return timer

    def deliver(self, result: Any, apply: Callable[[Any], Any]) -> bool:
        with self._lock:
            if not self._mounted:
                logger.info("Page unmounted, discarding result")
                return False
            apply(result)
            return True
