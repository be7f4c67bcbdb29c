"""Bookings HTTP API: server-side totals, date conflicts, status transitions, cancellation."""
import json
from datetime import timedelta

import pytest

from eventspace.services.catalog import catalog_today


def _future(days=30):
    return (catalog_today() + timedelta(days=days)).isoformat()


def _booking(**overrides):
    body = {
        "venueId": "v1",
        "date": _future(),
        "guestCount": 175,
        "selectedServiceIds": ["s2"],
        "paymentMethod": "TRANSFERENCIA",
        "notes": "Boda",
    }
    body.update(overrides)
    return body


@pytest.fixture
def booking(client, catalog, as_client):
    resp = client.post("/api/bookings", json=_booking(), headers=as_client)
    assert resp.status_code == 201
    return resp.json()


class TestCreateBooking:
    """POST /api/bookings: the stored total never comes from the client."""

    def test_total_is_computed_server_side(self, booking):
        assert booking["status"] == "PENDING"
        assert booking["clientId"] == "c1"
        assert booking["providerId"] == "p1"
        assert booking["totalPrice"] == pytest.approx(83500 + 800)
        assert booking["selectedServiceIds"] == ["s2"]

    def test_response_carries_venue_name(self, client, booking, as_client):
        assert booking["venueName"] == "Hacienda Los Arcos"
        listed = client.get("/api/bookings/me", headers=as_client).json()
        assert [b["venueName"] for b in listed] == ["Hacienda Los Arcos"]

    def test_matching_quote_accepted(self, client, catalog, as_client):
        quote = client.post(
            "/api/pricing/quote",
            json={"venueId": "v1", "guestCount": 175, "selectedServiceIds": ["s2", "s3"]},
        ).json()
        resp = client.post(
            "/api/bookings",
            json=_booking(selectedServiceIds=["s2", "s3"], quotedTotal=quote["total"]),
            headers=as_client,
        )
        assert resp.status_code == 201
        assert resp.json()["totalPrice"] == pytest.approx(quote["total"])

    def test_stale_quote_rejected(self, client, catalog, as_client):
        resp = client.post("/api/bookings", json=_booking(quotedTotal=80000), headers=as_client)
        assert resp.status_code == 422
        assert "does not match" in resp.json()["detail"]

    @pytest.mark.parametrize("literal", ["NaN", "Infinity", "-Infinity", "-1"])
    def test_non_finite_or_negative_quote_422(self, client, catalog, as_client, literal):
        raw = json.dumps(_booking(quotedTotal=0)).replace('"quotedTotal": 0', f'"quotedTotal": {literal}')
        resp = client.post(
            "/api/bookings",
            content=raw,
            headers={**as_client, "Content-Type": "application/json"},
        )
        assert resp.status_code == 422

    def test_taken_date_conflicts(self, client, booking, as_client):
        resp = client.post("/api/bookings", json=_booking(), headers={"X-User-Id": "c2"})
        assert resp.status_code == 409

    def test_past_date_conflicts(self, client, catalog, as_client):
        resp = client.post("/api/bookings", json=_booking(date=_future(-1)), headers=as_client)
        assert resp.status_code == 409

    @pytest.mark.parametrize("venue_id", ["v6", "v7"])
    def test_venue_must_be_active_or_featured(self, client, catalog, as_client, venue_id):
        resp = client.post(
            "/api/bookings",
            json=_booking(venueId=venue_id, guestCount=10, selectedServiceIds=[]),
            headers=as_client,
        )
        assert resp.status_code == 409

    @pytest.mark.parametrize(
        "overrides",
        [
            {"guestCount": 0},
            {"guestCount": 351},
            {"selectedServiceIds": ["s9"]},
            {"venueId": "v2", "guestCount": 50, "selectedServiceIds": [], "paymentMethod": "EFECTIVO"},
            {"paymentMethod": "BITCOIN"},
        ],
    )
    def test_invalid_input_422(self, client, catalog, as_client, overrides):
        resp = client.post("/api/bookings", json=_booking(**overrides), headers=as_client)
        assert resp.status_code == 422

    def test_unknown_venue_404(self, client, catalog, as_client):
        resp = client.post("/api/bookings", json=_booking(venueId="nope"), headers=as_client)
        assert resp.status_code == 404

    def test_identity_required(self, client, catalog):
        resp = client.post("/api/bookings", json=_booking())
        assert resp.status_code == 403


class TestListBookings:
    def test_client_and_provider_views(self, client, booking, as_client, as_provider):
        later = client.post(
            "/api/bookings", json=_booking(venueId="v3", date=_future(60), guestCount=80, selectedServiceIds=[]),
            headers=as_client,
        ).json()
        mine = client.get("/api/bookings/me", headers=as_client).json()
        assert [b["id"] for b in mine] == [booking["id"], later["id"]]
        provider = client.get("/api/bookings/provider", headers=as_provider).json()
        assert len(provider) == 2
        assert client.get("/api/bookings/provider", headers={"X-User-Id": "p2"}).json() == []

    def test_get_by_id(self, client, booking):
        assert client.get(f"/api/bookings/{booking['id']}").json()["id"] == booking["id"]
        assert client.get("/api/bookings/nope").status_code == 404


class TestStatus:
    """CANCELLED and COMPLETED are final."""

    def test_provider_confirms_then_completes(self, client, booking, as_provider):
        url = f"/api/bookings/{booking['id']}/status"
        assert client.patch(url, json={"status": "CONFIRMED"}, headers=as_provider).json()["status"] == "CONFIRMED"
        assert client.patch(url, json={"status": "COMPLETED"}, headers=as_provider).json()["status"] == "COMPLETED"
        resp = client.patch(url, json={"status": "PENDING"}, headers=as_provider)
        assert resp.status_code == 409

    def test_stranger_cannot_change_status(self, client, booking):
        resp = client.patch(
            f"/api/bookings/{booking['id']}/status", json={"status": "CONFIRMED"}, headers={"X-User-Id": "x"}
        )
        assert resp.status_code == 404

    def test_unknown_status_422(self, client, booking, as_provider):
        resp = client.patch(f"/api/bookings/{booking['id']}/status", json={"status": "LOST"}, headers=as_provider)
        assert resp.status_code == 422


class TestCancel:
    def test_cancel_frees_the_date(self, client, booking, as_client):
        assert client.delete(f"/api/bookings/{booking['id']}", headers=as_client).status_code == 204
        assert client.get(f"/api/bookings/{booking['id']}").json()["status"] == "CANCELLED"

        rebook = client.post("/api/bookings", json=_booking(), headers={"X-User-Id": "c2"})
        assert rebook.status_code == 201

    def test_cancel_is_idempotent(self, client, booking, as_client):
        client.delete(f"/api/bookings/{booking['id']}", headers=as_client)
        assert client.delete(f"/api/bookings/{booking['id']}", headers=as_client).status_code == 204

    def test_only_the_client_cancels(self, client, booking, as_provider):
        assert client.delete(f"/api/bookings/{booking['id']}", headers=as_provider).status_code == 404

    def test_completed_cannot_be_cancelled(self, client, booking, as_client, as_provider):
        url = f"/api/bookings/{booking['id']}/status"
        client.patch(url, json={"status": "COMPLETED"}, headers=as_provider)
        assert client.delete(f"/api/bookings/{booking['id']}", headers=as_client).status_code == 409


class TestQuoteApi:
    def test_guest_count_is_clamped(self, client, catalog):
        body = client.post(
            "/api/pricing/quote", json={"venueId": "v1", "guestCount": 1000, "selectedServiceIds": ["s2"]}
        ).json()
        assert body["guestCount"] == 350
        assert body["rentalPrice"] == 85000
        assert body["servicesTotal"] == 800
        assert body["total"] == 85800

    def test_quote_does_not_count_views(self, client, catalog):
        client.post("/api/pricing/quote", json={"venueId": "v1", "guestCount": 10})
        assert client.get("/api/venues/v1").json()["views"] == 101

    def test_unknown_venue(self, client, catalog):
        resp = client.post("/api/pricing/quote", json={"venueId": "nope", "guestCount": 10})
        assert resp.status_code == 404
