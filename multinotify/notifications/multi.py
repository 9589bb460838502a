"""MultiNotifier — fans a single send out to an ordered set of notifiers."""

from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator

from multinotify.notifications.channels import Notifier
from multinotify.notifications.errors import FanOutError

logger = logging.getLogger(__name__)


class MultiNotifier:
    """Composite notifier. Satisfies the Notifier protocol itself, so
    composites can be nested.

    By default every member is attempted and failures are raised together
    as a ``FanOutError`` once the loop finishes. With ``fail_fast=True`` the
    first failure propagates and the remaining members are skipped.
    """

    def __init__(self, notifiers: Iterable[Notifier] = (), *, fail_fast: bool = False) -> None:
        self._notifiers: list[Notifier] = []
        self.fail_fast = fail_fast
        for notifier in notifiers:
            self.add(notifier)

    def add(self, notifier: Notifier) -> None:
        """Append a member. Raises ValueError if it would create a cycle."""
        if notifier is self or (isinstance(notifier, MultiNotifier) and notifier._contains(self)):
            msg = "MultiNotifier cannot contain itself"
            raise ValueError(msg)
        self._notifiers.append(notifier)

    def _contains(self, target: MultiNotifier) -> bool:
        for member in self._notifiers:
            if member is target:
                return True
            if isinstance(member, MultiNotifier) and member._contains(target):
                return True
        return False

    def __len__(self) -> int:
        return len(self._notifiers)

    def __iter__(self) -> Iterator[Notifier]:
        return iter(self._notifiers)

    def leaves(self) -> list[Notifier]:
        """Return every non-composite member, nested ones flattened, in dispatch order."""
        flat: list[Notifier] = []
        for member in self._notifiers:
            if isinstance(member, MultiNotifier):
                flat.extend(member.leaves())
            else:
                flat.append(member)
        return flat

    def send(self, message: str) -> None:
        """Send ``message`` to every member in order."""
        logger.debug("Fanning out to %d notifiers", len(self._notifiers))
        failures: list[tuple[Notifier, Exception]] = []
        for notifier in self._notifiers:
            if self.fail_fast:
                notifier.send(message)
                continue
            try:
                notifier.send(message)
            except Exception as exc:
                logger.warning("Notifier %r failed: %s", notifier, exc)
                failures.append((notifier, exc))
        if failures:
            raise FanOutError(failures, len(self._notifiers))

    def __repr__(self) -> str:
        return f"MultiNotifier({self._notifiers!r})"
