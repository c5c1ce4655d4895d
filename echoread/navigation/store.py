"""Client-local persisted markers.

The navigation gate only cares whether a key is present. The store owns every
write, so it publishes each change to its subscribers directly instead of
relying on anyone to poll it.
"""

import json
import logging
from collections.abc import Callable
from pathlib import Path

logger = logging.getLogger(__name__)

TRIAL_STARTED = "trial_started"
SUBSCRIPTION_SELECTED = "subscription_selected"
ONBOARDING_COMPLETED = "onboarding_completed"

Listener = Callable[[frozenset[str]], None]


class ClientStateStore:
    def __init__(self, path: str | Path | None = None, initial: dict[str, str] | None = None) -> None:
        self.path = Path(path) if path is not None else None
        self._values: dict[str, str] = self._load()
        self._listeners: list[Listener] = []
        if initial:
            self._values.update(initial)
            self._save()

    def _load(self) -> dict[str, str]:
        if self.path is None or not self.path.exists():
            return {}
        data = json.loads(self.path.read_text() or "{}")
        return {str(k): str(v) for k, v in data.items()}

    def _save(self) -> None:
        if self.path is None:
            return
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(self._values, sort_keys=True))

    def keys(self) -> frozenset[str]:
        return frozenset(self._values)

    def has(self, key: str) -> bool:
        return key in self._values

    def get(self, key: str) -> str | None:
        return self._values.get(key)

    def set(self, key: str, value: str = "true") -> None:
        if self._values.get(key) == value:
            return
        self._values[key] = value
        self._save()
        self._publish()

    def remove(self, key: str) -> None:
        if key not in self._values:
            return
        del self._values[key]
        self._save()
        self._publish()

    def reload(self) -> bool:
        """Pick up writes made by another context sharing the same file.

        Returns True (and notifies subscribers) when the marker set changed.
        """
        before = self.keys()
        self._values = self._load()
        if self.keys() == before:
            return False
        self._publish()
        return True

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _publish(self) -> None:
        keys = self.keys()
        logger.debug("Client markers changed: %s", sorted(keys))
        for listener in list(self._listeners):
            listener(keys)
