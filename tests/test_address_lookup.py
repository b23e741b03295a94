import asyncio
import gc
import logging
from unittest.mock import Mock

import pytest
import respx
from bolibro.address_lookup import AddressLookup
from bolibro.config import Settings
from bolibro.errors import GeocodingError
from bolibro.geocoding.base import AddressSuggestion, GeocodingProvider, SuggestionAddress
from bolibro.geocoding.nominatim_provider import NominatimProvider


def _suggestion(place_id: int, label: str) -> AddressSuggestion:
    return AddressSuggestion(place_id=place_id, display_name=label, lat="1.5", lon="-2.5")


class ScriptedProvider(GeocodingProvider):
    """Provider whose responses can be held back per query."""

    def __init__(self) -> None:
        self.queries: list[str] = []
        self.cancelled: list[str] = []
        self.gates: dict[str, asyncio.Event] = {}
        self.responses: dict[str, object] = {}

    async def search(self, query: str) -> list[AddressSuggestion]:
        self.queries.append(query)
        gate = self.gates.get(query)
        try:
            if gate is not None:
                await gate.wait()
        except asyncio.CancelledError:
            self.cancelled.append(query)
            raise
        result = self.responses.get(query, [])
        if isinstance(result, Exception):
            raise result
        return result  # type: ignore[return-value]


class StubbornProvider(GeocodingProvider):
    """Provider that ignores cancellation and answers anyway."""

    def __init__(self, stale: list[AddressSuggestion]) -> None:
        self.stale = stale
        self.release = asyncio.Event()

    async def search(self, query: str) -> list[AddressSuggestion]:
        while True:
            try:
                await self.release.wait()
                return self.stale
            except asyncio.CancelledError:
                continue


@pytest.mark.asyncio
async def test_whitespace_query_clears_suggestions_without_request():
    provider = ScriptedProvider()
    lookup = AddressLookup(provider, Mock(), debounce_seconds=0)
    lookup.suggestions = [_suggestion(1, "old")]

    lookup.handle_input("   \t ")
    await lookup.wait_idle()

    assert lookup.suggestions == []
    assert provider.queries == []
    assert lookup.is_loading is False
    await lookup.close()


@pytest.mark.asyncio
async def test_empty_query_cancels_in_flight_request():
    provider = ScriptedProvider()
    provider.gates["12 Ma"] = asyncio.Event()
    provider.responses["12 Ma"] = [_suggestion(1, "12 Main St")]
    lookup = AddressLookup(provider, Mock(), debounce_seconds=0)

    lookup.handle_input("12 Ma")
    await asyncio.sleep(0.01)
    lookup.handle_input("")
    await lookup.wait_idle()
    provider.gates["12 Ma"].set()
    await asyncio.sleep(0.01)

    assert provider.cancelled == ["12 Ma"]
    assert lookup.suggestions == []
    await lookup.close()


@pytest.mark.asyncio
async def test_keystroke_burst_issues_one_request_with_final_value():
    provider = ScriptedProvider()
    provider.responses["1600 Amph"] = [_suggestion(1, "1600 Amphitheatre Parkway")]
    lookup = AddressLookup(provider, Mock(), debounce_seconds=0.2)

    for i in range(1, len("1600 Amph") + 1):
        lookup.handle_input("1600 Amph"[:i])
        await asyncio.sleep(0.01)

    assert provider.queries == []
    await lookup.wait_idle()

    assert provider.queries == ["1600 Amph"]
    assert lookup.value == "1600 Amph"
    assert [s.label for s in lookup.suggestions] == ["1600 Amphitheatre Parkway"]
    await lookup.close()


@pytest.mark.asyncio
async def test_late_response_from_superseded_request_is_ignored():
    provider = ScriptedProvider()
    provider.gates["first"] = asyncio.Event()
    provider.responses["first"] = [_suggestion(1, "stale")]
    provider.responses["second"] = [_suggestion(2, "fresh"), _suggestion(3, "fresher")]
    lookup = AddressLookup(provider, Mock(), debounce_seconds=0)

    lookup.handle_input("first")
    await asyncio.sleep(0.01)
    assert provider.queries == ["first"]
    assert lookup.is_loading is True

    lookup.handle_input("second")
    await lookup.wait_idle()
    provider.gates["first"].set()
    await asyncio.sleep(0.01)

    assert provider.cancelled == ["first"]
    assert [s.label for s in lookup.suggestions] == ["fresh", "fresher"]
    assert lookup.is_loading is False
    await lookup.close()


@pytest.mark.asyncio
async def test_provider_ignoring_cancellation_cannot_overwrite_newer_result():
    provider = StubbornProvider([_suggestion(1, "stale")])
    lookup = AddressLookup(provider, Mock(), debounce_seconds=0)

    lookup.handle_input("first")
    await asyncio.sleep(0.01)
    stale_request = lookup._request

    lookup._start_search("   ")
    provider.release.set()
    await asyncio.wait([stale_request])

    assert lookup.suggestions == []
    await lookup.close()


@pytest.mark.asyncio
async def test_failure_clears_suggestions_and_logs(caplog):
    provider = ScriptedProvider()
    provider.responses["oops"] = GeocodingError("nominatim_error_500")
    lookup = AddressLookup(provider, Mock(), debounce_seconds=0)
    lookup.suggestions = [_suggestion(1, "old")]

    with caplog.at_level(logging.WARNING, logger="bolibro.address_lookup"):
        lookup.handle_input("oops")
        await lookup.wait_idle()

    assert lookup.suggestions == []
    assert lookup.is_loading is False
    assert any(r.getMessage() == "address_suggestions_failed" for r in caplog.records)

    provider.responses["oops again"] = [_suggestion(2, "recovered")]
    lookup.handle_input("oops again")
    await lookup.wait_idle()
    assert [s.label for s in lookup.suggestions] == ["recovered"]
    await lookup.close()


@pytest.mark.asyncio
async def test_cancellation_is_not_logged_as_failure(caplog):
    provider = ScriptedProvider()
    provider.gates["first"] = asyncio.Event()
    lookup = AddressLookup(provider, Mock(), debounce_seconds=0)

    with caplog.at_level(logging.WARNING, logger="bolibro.address_lookup"):
        lookup.handle_input("first")
        await asyncio.sleep(0.01)
        lookup.handle_input("second")
        await lookup.wait_idle()

    assert provider.cancelled == ["first"]
    assert not [r for r in caplog.records if r.levelno >= logging.WARNING]
    await lookup.close()


@pytest.mark.asyncio
async def test_select_sets_label_clears_list_and_calls_back_once():
    on_select = Mock()
    suggestion = AddressSuggestion(
        place_id=7,
        display_name="12 Main St, Springfield, IL",
        lat="39.78",
        lon="-89.65",
        address=SuggestionAddress(house_number="12", road="Main St", city="Springfield"),
    )
    lookup = AddressLookup(provider=ScriptedProvider(), on_select=on_select)
    lookup.suggestions = [suggestion]

    resolved = lookup.select(suggestion)

    assert lookup.value == "12 Main St, Springfield, IL"
    assert lookup.suggestions == []
    on_select.assert_called_once_with(resolved)
    assert resolved.lat == 39.78
    assert resolved.lng == -89.65
    assert resolved.street_number == "12"
    assert resolved.route == "Main St"
    assert resolved.state == ""
    assert resolved.postal_code == ""
    await lookup.close()


@pytest.mark.asyncio
async def test_select_cancels_pending_lookup():
    provider = ScriptedProvider()
    lookup = AddressLookup(provider, Mock(), debounce_seconds=0.05)

    lookup.handle_input("12 Main")
    lookup.select(_suggestion(1, "12 Main St"))
    await asyncio.sleep(0.1)

    assert provider.queries == []
    assert lookup.suggestions == []
    await lookup.close()


@pytest.mark.asyncio
async def test_close_with_request_in_flight_leaves_no_updates_or_errors():
    loop = asyncio.get_running_loop()
    loop_errors: list[dict] = []
    loop.set_exception_handler(lambda _loop, context: loop_errors.append(context))

    provider = ScriptedProvider()
    provider.gates["12 Main"] = asyncio.Event()
    provider.responses["12 Main"] = [_suggestion(1, "12 Main St")]
    lookup = AddressLookup(provider, Mock(), debounce_seconds=0)

    lookup.handle_input("12 Main")
    await asyncio.sleep(0.01)
    await lookup.close()
    provider.gates["12 Main"].set()
    await asyncio.sleep(0.01)
    gc.collect()

    assert provider.cancelled == ["12 Main"]
    assert lookup.suggestions == []
    assert lookup.is_loading is False
    assert loop_errors == []
    loop.set_exception_handler(None)


@pytest.mark.asyncio
async def test_close_cancels_pending_debounce_timer():
    provider = ScriptedProvider()
    async with AddressLookup(provider, Mock(), debounce_seconds=0.05) as lookup:
        lookup.handle_input("12 Main")

    await asyncio.sleep(0.1)
    assert provider.queries == []
    assert lookup.closed
    with pytest.raises(RuntimeError):
        lookup.handle_input("13 Main")


@pytest.mark.asyncio
async def test_select_after_close_is_rejected():
    on_select = Mock()
    lookup = AddressLookup(ScriptedProvider(), on_select, default_value="12 Main St")
    await lookup.close()

    with pytest.raises(RuntimeError):
        lookup.select(_suggestion(1, "13 Main St"))

    on_select.assert_not_called()
    assert lookup.value == "12 Main St"

@pytest.mark.asyncio
async def test_default_value_and_presentation_flags():
    lookup = AddressLookup(
        ScriptedProvider(), Mock(), default_value="12 Main St", is_required=True
    )
    assert lookup.value == "12 Main St"
    assert lookup.is_required is True
    assert lookup.placeholder == "Enter an address"
    assert lookup.suggestions == []
    await lookup.close()


@pytest.mark.asyncio
async def test_from_settings_uses_configured_debounce():
    settings = Settings(address_debounce_seconds=0.75)
    lookup = AddressLookup.from_settings(settings, ScriptedProvider(), Mock())
    assert lookup.debounce_seconds == 0.75
    await lookup.close()


@pytest.mark.asyncio
@respx.mock
async def test_amphitheatre_scenario_end_to_end():
    route = respx.get("https://nominatim.test/search").respond(
        200,
        json=[
            {
                "place_id": 123,
                "lat": "37.4224",
                "lon": "-122.0842",
                "display_name": "1600 Amphitheatre Parkway, Mountain View, CA",
                "address": {"house_number": "1600", "road": "Amphitheatre Parkway"},
            }
        ],
    )
    provider = NominatimProvider(Settings(nominatim_url="https://nominatim.test"))
    on_select = Mock()
    lookup = AddressLookup(provider, on_select, debounce_seconds=0.01)

    lookup.handle_input("1600 Amphitheatre")
    await lookup.wait_idle()
    assert route.call_count == 1
    assert route.calls[0].request.url.params["q"] == "1600 Amphitheatre"
    assert len(lookup.suggestions) == 1

    lookup.select(lookup.suggestions[0])

    on_select.assert_called_once()
    payload = on_select.call_args.args[0].to_callback_payload()
    assert payload == {
        "formattedAddress": "1600 Amphitheatre Parkway, Mountain View, CA",
        "lat": 37.4224,
        "lng": -122.0842,
        "streetNumber": "1600",
        "route": "Amphitheatre Parkway",
        "city": "",
        "state": "",
        "postalCode": "",
        "country": "",
    }
    assert lookup.value == "1600 Amphitheatre Parkway, Mountain View, CA"
    await lookup.close()
    await provider.aclose()
