"""Unit tests for GeocodeResolver ordered first-match resolution."""

from unittest.mock import AsyncMock, patch

from ward_checker.lib.geocoder.base import BaseGeocoder, GeocodeCandidate, GeocodingProviderError
from ward_checker.lib.geocoder.nominatim import NominatimGeocoder
from ward_checker.lib.geocoder.resolver import GeocodeResolver, select_candidate
from ward_checker.lib.geocoder.variations import LocalityConfig
from ward_checker.services.session_factory import build_resolver

LOCAL_TOKENS = ("gauteng", "pretoria", "tshwane")


class _PacedGeocoder(BaseGeocoder):
    """Rate-limited provider that never finds anything."""

    def __init__(self, delay: float) -> None:
        self._delay = delay

    @property
    def provider_name(self) -> str:
        return "paced"

    @property
    def rate_limit_delay(self) -> float:
        return self._delay

    async def search(self, query: str, *, limit: int = 3) -> list[GeocodeCandidate]:
        return []


class TestSelectCandidate:
    """Tests for select_candidate() local preference."""

    def test_prefers_first_local(self, make_candidate) -> None:
        cape = make_candidate((-33.92, 18.42), "Hatfield, Cape Town, Western Cape")
        tshwane = make_candidate((-25.75, 28.23), "Hatfield, City of TSHWANE")
        pta = make_candidate((-25.74, 28.22), "Hatfield, Pretoria")
        assert select_candidate([cape, tshwane, pta], LOCAL_TOKENS) is tshwane

    def test_falls_back_to_first(self, make_candidate) -> None:
        first = make_candidate((-33.92, 18.42), "Somewhere, Cape Town")
        second = make_candidate((-29.85, 31.02), "Somewhere, Durban")
        assert select_candidate([first, second], LOCAL_TOKENS) is first

    def test_empty(self) -> None:
        assert select_candidate([], LOCAL_TOKENS) is None


class TestGeocodeResolver:
    """Tests for GeocodeResolver.resolve()."""

    async def test_first_attempt_match_stops(self, make_geocoder, make_candidate) -> None:
        geocoder = make_geocoder([make_candidate()])
        resolver = GeocodeResolver(geocoder, retry_delay=0)

        location = await resolver.resolve("1085 burnett street", "hatfield, pretoria")

        assert location is not None
        assert location.coordinate == (-25.746, 28.231)
        assert location.attempt == 1
        assert geocoder.queries == ["1085 Burnett Street, Hatfield, Pretoria, Gauteng, South Africa"]

    async def test_falls_through_empty_results(self, make_geocoder, make_candidate) -> None:
        geocoder = make_geocoder([], [], [], [make_candidate(label="Hatfield, Pretoria")])
        resolver = GeocodeResolver(geocoder, retry_delay=0)

        location = await resolver.resolve("Nowhere Lane", "Hatfield")

        assert location is not None
        assert location.attempt == 4
        assert location.query == "Hatfield, Pretoria, Gauteng, South Africa"
        assert len(geocoder.queries) == 4

    async def test_non_local_result_accepted_without_trying_more(self, make_geocoder, make_candidate) -> None:
        """A later, more local variation is never consulted once one returns anything."""
        cape = make_candidate((-33.92, 18.42), "Main Road, Cape Town")
        geocoder = make_geocoder([cape], [make_candidate()])
        resolver = GeocodeResolver(geocoder, retry_delay=0)

        location = await resolver.resolve("Main Road", "Hatfield")

        assert location is not None
        assert location.display_label == "Main Road, Cape Town"
        assert len(geocoder.queries) == 1

    async def test_exhaustion_returns_none(self, make_geocoder) -> None:
        geocoder = make_geocoder()
        resolver = GeocodeResolver(geocoder, retry_delay=0)

        assert await resolver.resolve("Nowhere Lane", "Nowhere") is None
        assert len(geocoder.queries) == 6

    async def test_provider_error_advances(self, make_geocoder, make_candidate) -> None:
        geocoder = make_geocoder(GeocodingProviderError("stub", "HTTP 503", status_code=503), [make_candidate()])
        resolver = GeocodeResolver(geocoder, retry_delay=0)

        location = await resolver.resolve("1 Park St", "Hatfield")

        assert location is not None
        assert location.attempt == 2

    async def test_all_provider_errors_return_none(self, make_geocoder) -> None:
        errors = [GeocodingProviderError("stub", "down") for _ in range(6)]
        resolver = GeocodeResolver(make_geocoder(*errors), retry_delay=0)

        assert await resolver.resolve("1 Park St", "Hatfield") is None

    async def test_delay_between_unsuccessful_attempts(self, make_geocoder) -> None:
        resolver = GeocodeResolver(make_geocoder(), retry_delay=1.0)
        with patch("ward_checker.lib.geocoder.resolver.asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
            await resolver.resolve("Nowhere Lane", "Nowhere")

        assert mock_sleep.await_count == 5
        mock_sleep.assert_awaited_with(1.0)

    async def test_no_delay_after_success(self, make_geocoder, make_candidate) -> None:
        resolver = GeocodeResolver(make_geocoder([make_candidate()]), retry_delay=1.0)
        with patch("ward_checker.lib.geocoder.resolver.asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
            await resolver.resolve("1 Park St", "Hatfield")

        mock_sleep.assert_not_awaited()

    async def test_custom_locality(self, make_geocoder) -> None:
        locality = LocalityConfig(city="Cape Town", region="Western Cape", local_tokens=("cape town",))
        geocoder = make_geocoder()
        resolver = GeocodeResolver(geocoder, locality, retry_delay=0)

        await resolver.resolve("1 beach rd, cape town", "sea point")

        assert geocoder.queries[0] == "1 Beach Rd, Sea Point, Cape Town, Western Cape, South Africa"


class TestResolverPacing:
    """Tests for the delay between unsuccessful attempts."""

    async def test_provider_failure_is_paced(self, make_geocoder, make_candidate) -> None:
        geocoder = make_geocoder(GeocodingProviderError("stub", "HTTP 503", status_code=503), [make_candidate()])
        resolver = GeocodeResolver(geocoder, retry_delay=1.0)
        with patch("ward_checker.lib.geocoder.resolver.asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
            location = await resolver.resolve("1 Park St", "Hatfield")

        assert location is not None
        mock_sleep.assert_awaited_once_with(1.0)

    def test_delay_defaults_to_provider_rate_limit(self) -> None:
        assert GeocodeResolver(NominatimGeocoder()).retry_delay == 1.0

    def test_stub_provider_has_no_rate_limit(self, make_geocoder) -> None:
        assert GeocodeResolver(make_geocoder()).retry_delay == 0.0

    def test_explicit_delay_overrides_provider(self) -> None:
        assert GeocodeResolver(NominatimGeocoder(), retry_delay=0).retry_delay == 0

    async def test_default_delay_is_awaited(self) -> None:
        resolver = GeocodeResolver(_PacedGeocoder(2.5))
        with patch("ward_checker.lib.geocoder.resolver.asyncio.sleep", new_callable=AsyncMock) as mock_sleep:
            await resolver.resolve("Nowhere Lane", "Nowhere")

        assert mock_sleep.await_count == 5
        mock_sleep.assert_awaited_with(2.5)

    def test_settings_without_override_use_provider_rate_limit(self, settings) -> None:
        settings.geocoder_retry_delay = None
        assert build_resolver(settings).retry_delay == 1.0
