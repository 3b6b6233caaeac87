"""Integration tests for the Company, Client and invoice list API endpoints"""

import pytest
from httpx import AsyncClient


async def create_company(client: AsyncClient, name: str = "Beta Works") -> dict:
    response = await client.post("/api/companies", json={"name": name, "address": "2 High Street"})
    assert response.status_code == 201
    return response.json()


async def create_client(client: AsyncClient, company_ids, **overrides) -> dict:
    payload = {"name": "Delta LLC", "email": "ap@delta-llc.io", "company_ids": company_ids}
    payload.update(overrides)
    response = await client.post("/api/clients", json=payload)
    assert response.status_code == 201
    return response.json()


class TestCompaniesAPIIntegration:
    """Integration test suite for the Company API"""

    @pytest.mark.asyncio
    async def test_company_lifecycle(self, client: AsyncClient):
        created = await create_company(client)
        company_id = created["company_id"]
        assert created["name"] == "Beta Works"

        fetched = await client.get(f"/api/companies/{company_id}")
        assert fetched.status_code == 200
        assert fetched.json()["address"] == "2 High Street"

        updated = await client.put(
            f"/api/companies/{company_id}",
            json={"name": "Beta Works Ltd", "phone": "+44 20 7946 0000", "logo_path": "company-logos/beta.png"},
        )
        assert updated.status_code == 200
        assert updated.json()["name"] == "Beta Works Ltd"
        assert updated.json()["logo_path"] == "company-logos/beta.png"

        deleted = await client.delete(f"/api/companies/{company_id}")
        assert deleted.status_code == 200
        assert deleted.json()["message"] == "Company deleted successfully"

        missing = await client.get(f"/api/companies/{company_id}")
        assert missing.status_code == 404
        assert missing.json()["error"]["code"] == "COMPANY_NOT_FOUND"

    @pytest.mark.asyncio
    async def test_list_companies_newest_first(self, client: AsyncClient, company):
        await create_company(client, "Beta Works")

        response = await client.get("/api/companies")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [c["name"] for c in data["data"]] == ["Beta Works", "Alpa Studio"]

    @pytest.mark.asyncio
    async def test_create_company_requires_name(self, client: AsyncClient):
        response = await client.post("/api/companies", json={"address": "nowhere"})

        assert response.status_code == 422
        assert "name" in response.json()["error"]["details"]


class TestClientsAPIIntegration:
    """Integration test suite for the Client API"""

    @pytest.mark.asyncio
    async def test_create_client_with_companies(self, client: AsyncClient, company):
        created = await create_client(client, [company.id])

        assert created["name"] == "Delta LLC"
        assert created["email"] == "ap@delta-llc.io"
        assert created["companies"] == [{"id": company.id, "name": "Alpa Studio"}]

    @pytest.mark.asyncio
    async def test_unknown_company_is_rejected(self, client: AsyncClient, company):
        response = await client.post(
            "/api/clients",
            json={"name": "Delta LLC", "company_ids": [company.id, 9999]},
        )

        assert response.status_code == 422
        error = response.json()["error"]
        assert error["code"] == "VALIDATION_ERROR"
        assert error["details"] == {"company_ids.1": ["The selected company_ids.1 is invalid."]}

    @pytest.mark.asyncio
    async def test_company_ids_required(self, client: AsyncClient):
        response = await client.post("/api/clients", json={"name": "Delta LLC", "company_ids": []})

        assert response.status_code == 422
        assert "company_ids" in response.json()["error"]["details"]

    @pytest.mark.asyncio
    async def test_invalid_email_is_rejected(self, client: AsyncClient, company):
        response = await client.post(
            "/api/clients",
            json={"name": "Delta LLC", "email": "not-an-email", "company_ids": [company.id]},
        )

        assert response.status_code == 422
        assert "email" in response.json()["error"]["details"]

    @pytest.mark.asyncio
    async def test_list_clients_and_their_companies(self, client: AsyncClient, company, client_record):
        other = await create_company(client)
        created = await create_client(client, [company.id, other["company_id"]])

        listed = await client.get("/api/clients")
        assert listed.status_code == 200
        body = listed.json()
        assert body["total"] == 2
        assert body["data"][0]["client_id"] == created["client_id"]
        assert len(body["data"][0]["companies"]) == 2
        assert body["data"][1]["companies"] == []

        companies = await client.get(f"/api/clients/{created['client_id']}/companies")
        assert companies.status_code == 200
        assert [c["name"] for c in companies.json()] == ["Alpa Studio", "Beta Works"]

    @pytest.mark.asyncio
    async def test_update_client_replaces_companies(self, client: AsyncClient, company):
        other = await create_company(client)
        created = await create_client(client, [company.id])

        response = await client.put(
            f"/api/clients/{created['client_id']}",
            json={"name": "Delta Holdings", "phone": "+1 555 0199", "company_ids": [other["company_id"]]},
        )

        assert response.status_code == 200
        data = response.json()
        assert data["name"] == "Delta Holdings"
        assert data["email"] is None
        assert data["companies"] == [{"id": other["company_id"], "name": "Beta Works"}]

    @pytest.mark.asyncio
    async def test_delete_client(self, client: AsyncClient, company):
        created = await create_client(client, [company.id])
        client_id = created["client_id"]

        deleted = await client.delete(f"/api/clients/{client_id}")
        assert deleted.status_code == 200
        assert deleted.json()["message"] == "Client deleted successfully"

        for path in (f"/api/clients/{client_id}", f"/api/clients/{client_id}/companies"):
            missing = await client.get(path)
            assert missing.status_code == 404
            assert missing.json()["error"]["code"] == "CLIENT_NOT_FOUND"


class TestInvoiceListAPIIntegration:
    """Integration test suite for the unpaginated invoice list"""

    @pytest.mark.asyncio
    async def test_list_invoices_newest_first(self, client: AsyncClient):
        company = await create_company(client, "Alpa Studio")
        created_client = await create_client(client, [company["company_id"]])
        payload = {
            "company_id": company["company_id"],
            "client_id": created_client["client_id"],
            "date": "2025-06-01",
            "payment_terms": "cash",
            "status": "draft",
            "items": [{"description": "Design work", "quantity": "1", "unit_price": "10.00"}],
        }
        first = await client.post("/api/invoices", json=payload)
        second = await client.post("/api/invoices", json=payload)
        assert first.status_code == 201
        assert second.status_code == 201

        response = await client.get("/api/invoices")

        assert response.status_code == 200
        data = response.json()
        assert data["total"] == 2
        assert [i["invoice_id"] for i in data["data"]] == [second.json()["invoice_id"], first.json()["invoice_id"]]
        assert all(len(i["items"]) == 1 for i in data["data"])

    @pytest.mark.asyncio
    async def test_list_invoices_empty(self, client: AsyncClient):
        response = await client.get("/api/invoices")

        assert response.status_code == 200
        assert response.json() == {"data": [], "total": 0}
