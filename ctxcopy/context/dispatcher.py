"""Dispatcher: routes one provider run to the copy sink or the error channel."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from typing import TYPE_CHECKING

from ctxcopy.core.errors import ProviderError, RegisterError
from ctxcopy.core.types import ContextValue

if TYPE_CHECKING:
    from ctxcopy.clipboard.sink import CopySink
    from ctxcopy.context.providers import BaseProvider
    from ctxcopy.host.interfaces import Notifier

logger = logging.getLogger(__name__)


class Dispatcher:
    """Runs providers by name and handles every failure at this boundary.

    Availability is re-checked immediately before resolve() so a stale menu
    never triggers a lookup. Provider and register failures become error
    notifications; the register is only written after a successful resolve.
    """

    def __init__(
        self,
        providers: Iterable[BaseProvider],
        sink: CopySink,
        notifier: Notifier,
    ) -> None:
        self._providers: dict[str, BaseProvider] = {}
        for provider in providers:
            if provider.name in self._providers:
                raise ValueError(f"Duplicate provider name: {provider.name}")
            self._providers[provider.name] = provider
        self.sink = sink
        self.notifier = notifier

    @property
    def providers(self) -> list[BaseProvider]:
        """Providers in registration (menu) order."""
        return list(self._providers.values())

    def get(self, name: str) -> BaseProvider:
        """Look up a provider by name. Raises KeyError if unknown."""
        return self._providers[name]

    def names(self) -> list[str]:
        return list(self._providers)

    def availability(self) -> dict[str, bool]:
        """Current is_available() of every provider, for menus and listings."""
        return {name: p.is_available() for name, p in self._providers.items()}

    def run(self, name: str) -> ContextValue | None:
        """Resolve the named provider and copy its value.

        Args:
            name: Provider name (e.g. "git-branch").

        Returns:
            The copied value, or None if anything failed (already reported
            through the notifier).

        Raises:
            KeyError: Unknown provider name.
        """
        provider = self.get(name)

        if not provider.is_available():
            error = provider.not_applicable("not available here")
            logger.debug("Skipping unavailable provider %s", name)
            self.notifier.notify_error(str(error))
            return None

        try:
            value = provider.resolve()
        except ProviderError as e:
            logger.debug("Provider %s failed: %s", name, e)
            self.notifier.notify_error(str(e))
            return None

        try:
            self.sink.copy(value)
        except RegisterError as e:
            logger.warning("Register write failed: %s", e)
            self.notifier.notify_error(str(e))
            return None

        return value
