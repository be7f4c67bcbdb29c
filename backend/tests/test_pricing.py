"""Dynamic pricing: occupancy discount, selected services, capacity guard."""
import pytest

from eventspace.core.constants import MAX_DISCOUNT
from eventspace.services.pricing import clamp_guest_count, compute_total, quote, rental_price

SERVICES = [
    {"id": "s1", "name": "Mobiliario", "price": 0, "is_optional": False},
    {"id": "s2", "name": "Limpieza", "price": 800},
    {"id": "s3", "name": "Seguridad", "price": 1500},
]


@pytest.fixture
def hacienda(venue_record):
    return venue_record(id="v1", price=85000, capacity=350, services=SERVICES)


class TestComputeTotal:
    def test_full_house_pays_base_price(self, hacienda):
        assert compute_total(hacienda, 350, []) == 85000

    def test_half_house(self, hacienda):
        assert compute_total(hacienda, 175, []) == pytest.approx(83500)

    def test_single_guest_gets_almost_full_discount(self, hacienda):
        expected = 85000 - MAX_DISCOUNT * (1 - 1 / 350)
        assert compute_total(hacienda, 1, []) == pytest.approx(expected)
        assert compute_total(hacienda, 1, []) == pytest.approx(82008.57, abs=0.01)

    def test_selected_services_are_added(self, hacienda):
        base = compute_total(hacienda, 200, [])
        assert compute_total(hacienda, 200, ["s2"]) == pytest.approx(base + 800)
        assert compute_total(hacienda, 200, ["s2", "s3"]) == pytest.approx(base + 2300)

    def test_additivity(self, hacienda):
        with_s2 = compute_total(hacienda, 120, ["s2"])
        assert compute_total(hacienda, 120, ["s2", "s3"]) == pytest.approx(with_s2 + 1500)

    def test_unknown_and_duplicate_service_ids(self, hacienda):
        base = compute_total(hacienda, 350, [])
        assert compute_total(hacienda, 350, ["nope"]) == base
        assert compute_total(hacienda, 350, ["s2", "s2"]) == pytest.approx(base + 800)

    def test_zero_capacity_returns_base_price(self, venue_record):
        venue = venue_record(price=20000, capacity=0, services=SERVICES)
        assert compute_total(venue, 50, ["s2"]) == 20000
        assert rental_price(venue, 50) == 20000

    def test_venue_without_services(self, venue_record):
        venue = venue_record(price=10000, capacity=100, services=None)
        assert venue.services == []
        assert compute_total(venue, 100, ["s2"]) == 10000


class TestQuote:
    def test_breakdown_adds_up(self, hacienda):
        q = quote(hacienda, 175, ["s3"])
        assert q.rental_price == pytest.approx(83500)
        assert q.services_total == 1500
        assert q.total == pytest.approx(q.rental_price + q.services_total)
        assert q.model_dump(by_alias=True).keys() == {
            "venueId", "guestCount", "rentalPrice", "servicesTotal", "total"
        }


class TestClampGuestCount:
    @pytest.mark.parametrize(
        "guests, capacity, expected",
        [(0, 100, 1), (-5, 100, 1), (50, 100, 50), (100, 100, 100), (500, 100, 100), (10, 0, 1)],
    )
    def test_clamps_to_one_and_capacity(self, guests, capacity, expected):
        assert clamp_guest_count(guests, capacity) == expected
