"""
Address lookup: free-text address input backed by a geocoding provider.

The lookup owns exactly two handles, a pending debounce timer and an
in-flight suggestions request. Each is cancelled before it is replaced, so
only the most recently issued request can ever write the suggestion list.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Callable, List, Optional

from .config import Settings
from .geocoding.base import AddressSuggestion, GeocodingProvider, ResolvedAddress

logger = logging.getLogger(__name__)

DEFAULT_DEBOUNCE_SECONDS = 0.3

OnSelect = Callable[[ResolvedAddress], None]


class AddressLookup:
    """
    Debounced, cancellable address autocomplete.

    Typical use::

        async with AddressLookup(provider, on_select=form.set_address) as lookup:
            lookup.handle_input("1600 Amph")
            await lookup.wait_idle()
            lookup.select(lookup.suggestions[0])

    ``is_required`` and ``placeholder`` are carried for the presentation layer
    only; the lookup never enforces them.
    """

    def __init__(
        self,
        provider: GeocodingProvider,
        on_select: OnSelect,
        *,
        default_value: str = "",
        placeholder: str = "Enter an address",
        is_required: bool = False,
        debounce_seconds: float = DEFAULT_DEBOUNCE_SECONDS,
    ) -> None:
        self.provider = provider
        self.on_select = on_select
        self.value = default_value
        self.placeholder = placeholder
        self.is_required = is_required
        self.debounce_seconds = debounce_seconds
        self.suggestions: List[AddressSuggestion] = []
        self.is_loading = False
        self._timer: Optional[asyncio.Task[None]] = None
        self._request: Optional[asyncio.Task[None]] = None
        self._closed = False

    @classmethod
    def from_settings(
        cls,
        settings: Settings,
        provider: GeocodingProvider,
        on_select: OnSelect,
        **kwargs: object,
    ) -> "AddressLookup":
        kwargs.setdefault("debounce_seconds", settings.address_debounce_seconds)
        return cls(provider, on_select, **kwargs)  # type: ignore[arg-type]

    async def __aenter__(self) -> "AddressLookup":
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.close()

    @property
    def closed(self) -> bool:
        return self._closed

    def handle_input(self, value: str) -> None:
        """Record a keystroke and restart the quiet period before looking it up."""
        if self._closed:
            raise RuntimeError("address_lookup_closed")
        self.value = value
        self._cancel_timer()
        self._timer = asyncio.get_running_loop().create_task(self._debounce(value))

    def select(self, suggestion: AddressSuggestion) -> ResolvedAddress:
        """Accept a suggestion: show its label, drop the list and notify the caller."""
        if self._closed:
            raise RuntimeError("address_lookup_closed")
        self._cancel_timer()
        self._cancel_request()
        self.value = suggestion.label
        self.suggestions = []
        resolved = suggestion.resolve()
        self.on_select(resolved)
        return resolved

    async def wait_idle(self) -> None:
        """Wait until no lookup is scheduled or in flight."""
        while True:
            pending = [t for t in (self._timer, self._request) if t is not None and not t.done()]
            if not pending:
                return
            await asyncio.wait(pending)

    async def close(self) -> None:
        """Cancel the pending timer and abort the in-flight request."""
        self._closed = True
        pending = [t for t in (self._timer, self._request) if t is not None and not t.done()]
        self._cancel_timer()
        self._cancel_request()
        if pending:
            await asyncio.gather(*pending, return_exceptions=True)

    def _cancel_timer(self) -> None:
        if self._timer is not None and not self._timer.done():
            self._timer.cancel()
        self._timer = None

    def _cancel_request(self) -> None:
        if self._request is not None and not self._request.done():
            self._request.cancel()
        self._request = None
        self.is_loading = False

    async def _debounce(self, query: str) -> None:
        await asyncio.sleep(self.debounce_seconds)
        self._timer = None
        self._start_search(query)

    def _start_search(self, query: str) -> None:
        self._cancel_request()
        if not query.strip():
            self.suggestions = []
            return
        self._request = asyncio.get_running_loop().create_task(self._search(query))
        self.is_loading = True

    async def _search(self, query: str) -> None:
        this_request = asyncio.current_task()
        try:
            results = await self.provider.search(query)
        except asyncio.CancelledError:
            logger.debug("address_lookup_superseded", extra={"query": query})
            raise
        except Exception as exc:
            if self._request is this_request:
                logger.warning(
                    "address_suggestions_failed", extra={"query": query}, exc_info=exc
                )
                self.suggestions = []
            return
        finally:
            if self._request is this_request:
                self.is_loading = False

        # A provider that swallowed the cancellation still must not win.
        if self._request is this_request:
            self.suggestions = list(results)
