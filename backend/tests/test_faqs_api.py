"""Help center FAQs: public reads, identified writes."""
import pytest

from eventspace.data.demo_venues import DEMO_FAQS
from eventspace.services.seed_service import seed_demo_data


@pytest.fixture
def faqs(db):
    seed_demo_data(db)
    return [f[0] for f in DEMO_FAQS]


class TestReadFaqs:
    def test_list_in_insertion_order(self, client, faqs):
        body = client.get("/api/faqs").json()
        assert [f["id"] for f in body] == faqs
        assert set(body[0]) == {"id", "question", "answer", "category"}

    def test_filter_by_category(self, client, faqs):
        body = client.get("/api/faqs", params={"category": "Reservaciones"}).json()
        assert [f["id"] for f in body] == ["faq1", "faq4"]

    def test_empty_table(self, client):
        assert client.get("/api/faqs").json() == []

    def test_get_one_and_unknown(self, client, faqs):
        assert client.get("/api/faqs/faq2").json()["category"] == "Pagos"
        resp = client.get("/api/faqs/nope")
        assert resp.status_code == 404
        assert resp.json() == {"detail": "FAQ not found"}


class TestWriteFaqs:
    def test_create_appends(self, client, faqs, as_admin):
        resp = client.post(
            "/api/faqs",
            json={"question": "¿Hay estacionamiento?", "answer": "Depende del local.", "category": "Locales"},
            headers=as_admin,
        )
        assert resp.status_code == 201
        created = resp.json()
        assert created["id"].startswith("faq-")
        assert [f["id"] for f in client.get("/api/faqs").json()][-1] == created["id"]

    def test_update_is_partial(self, client, faqs, as_admin):
        resp = client.put("/api/faqs/faq3", json={"answer": "Escríbenos."}, headers=as_admin)
        assert resp.status_code == 200
        body = resp.json()
        assert body["answer"] == "Escríbenos."
        assert body["category"] == "Proveedores"

    def test_delete(self, client, faqs, as_admin):
        assert client.delete("/api/faqs/faq5", headers=as_admin).status_code == 204
        assert client.get("/api/faqs/faq5").status_code == 404
        assert client.delete("/api/faqs/faq5", headers=as_admin).status_code == 404

    @pytest.mark.parametrize(
        "body",
        [{"question": "", "answer": "x"}, {"question": "¿?"}, {"question": "¿?", "answer": "x", "category": "c" * 65}],
    )
    def test_create_rejects_invalid(self, client, as_admin, body):
        assert client.post("/api/faqs", json=body, headers=as_admin).status_code == 422

    def test_writes_require_identity(self, client, faqs):
        assert client.post("/api/faqs", json={"question": "¿?", "answer": "x"}).status_code == 403
        assert client.put("/api/faqs/faq1", json={"answer": "x"}).status_code == 403
        assert client.delete("/api/faqs/faq1").status_code == 403
        assert len(client.get("/api/faqs").json()) == len(faqs)
