"""Tests for /api/v1/datasets endpoints."""

from __future__ import annotations

import pytest
from fastapi import status
from httpx import AsyncClient
from pytest_httpx import HTTPXMock

from payloads import (
    DATASET_REVENUE,
    GRAPHQL_URL,
    REVENUE_URN,
    autocomplete_response,
    bare_dataset,
    lookup_response,
    mutation_response,
    search_response,
    sent_body,
)


@pytest.mark.asyncio
class TestListDatasets:
    """Tests for GET /api/v1/datasets."""

    async def test_tag_filtered_page(self, client: AsyncClient, httpx_mock: HTTPXMock) -> None:
        """A tag-filtered page reports the upstream paging counters."""
        datasets = [bare_dataset(f"urn:li:dataset:(urn:li:dataPlatform:s3,ds{i},PROD)", f"ds{i}") for i in range(5)]
        httpx_mock.add_response(
            url=GRAPHQL_URL,
            method="POST",
            json=search_response(datasets, start=0, count=5, total=12),
        )

        response = await client.get("/api/v1/datasets", params={"tags": "finance", "offset": 0, "limit": 5})

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data["data"]) == 5
        assert data["paging"] == {"offset": 0, "limit": 5, "total": 12}
        assert sent_body(httpx_mock)["variables"]["input"] == {
            "type": "DATASET",
            "query": "tags:finance",
            "start": 0,
            "count": 5,
        }

    async def test_several_tags_match_any(self, client: AsyncClient, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", json=search_response([]))

        await client.get("/api/v1/datasets", params={"tags": "finance,pii"})

        assert sent_body(httpx_mock)["variables"]["input"]["query"] == "tags:finance OR tags:pii"

    async def test_query_wins_over_tags(self, client: AsyncClient, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", json=search_response([]))

        await client.get("/api/v1/datasets", params={"query": "revenue", "tags": "finance"})

        assert sent_body(httpx_mock)["variables"]["input"]["query"] == "*revenue*"

    async def test_name_autocompletes(self, client: AsyncClient, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", json=autocomplete_response([DATASET_REVENUE]))

        response = await client.get("/api/v1/datasets", params={"name": "reven"})

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["paging"] is None
        assert response.json()["data"][0]["id"] == REVENUE_URN

    async def test_normalized_shape(self, client: AsyncClient, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", json=search_response([DATASET_REVENUE]))

        response = await client.get("/api/v1/datasets")

        dataset = response.json()["data"][0]
        assert dataset == {
            "id": REVENUE_URN,
            "path": "finance.public.revenue",
            "name": "revenue",
            "origin": "PROD",
            "type": "Table",
            "platform": {
                "id": "urn:li:dataPlatform:postgres",
                "name": "postgres",
                "title": "PostgreSQL",
                "type": "RELATIONAL_DB",
            },
            "tags": [
                {"id": "urn:li:tag:finance", "name": "finance", "description": "Finance domain"},
                {"id": "urn:li:tag:pii", "name": "pii", "description": "Personally identifiable information"},
            ],
            "fields": [
                {"path": "transaction_id", "type": "STRING", "nativeType": "varchar(36)"},
                {"path": "amount", "type": "NUMBER", "nativeType": "numeric(12,2)"},
            ],
        }

    async def test_optional_blocks_absent(self, client: AsyncClient, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", json=search_response([bare_dataset()]))

        response = await client.get("/api/v1/datasets")

        dataset = response.json()["data"][0]
        assert dataset["tags"] == []
        assert dataset["fields"] is None
        assert dataset["type"] is None


@pytest.mark.asyncio
class TestGetDataset:
    """Tests for GET /api/v1/datasets/{urn}."""

    async def test_found(self, client: AsyncClient, httpx_mock: HTTPXMock) -> None:
        """Dataset URNs carry parentheses and commas and are taken as-is."""
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", json=lookup_response(DATASET_REVENUE))

        response = await client.get(f"/api/v1/datasets/{REVENUE_URN}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json()["data"]["id"] == REVENUE_URN
        body = sent_body(httpx_mock)
        assert body["variables"] == {"urn": REVENUE_URN}
        assert "entity: dataset(urn: $urn)" in body["query"]

    async def test_not_found(self, client: AsyncClient, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", json=lookup_response(None))

        response = await client.get(f"/api/v1/datasets/{REVENUE_URN}")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"data": None}


@pytest.mark.asyncio
class TestDatasetTags:
    """Tests for tag association on a dataset."""

    async def test_add_tag(self, client: AsyncClient, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", json=mutation_response(True))

        response = await client.post(f"/api/v1/datasets/{REVENUE_URN}/tags", json={"tag": "urn:li:tag:pii"})

        assert response.status_code == status.HTTP_204_NO_CONTENT
        body = sent_body(httpx_mock)
        assert "addTag(input: $input)" in body["query"]
        assert body["variables"] == {"input": {"tagUrn": "urn:li:tag:pii", "resourceUrn": REVENUE_URN}}

    async def test_add_tag_not_confirmed(self, client: AsyncClient, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", json=mutation_response(False))

        response = await client.post(f"/api/v1/datasets/{REVENUE_URN}/tags", json={"tag": "urn:li:tag:pii"})

        assert response.status_code == 422

    async def test_add_tag_errors_without_data(self, client: AsyncClient, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", json={"errors": [{"message": "Unauthorized"}]})

        response = await client.post(f"/api/v1/datasets/{REVENUE_URN}/tags", json={"tag": "urn:li:tag:pii"})

        assert response.status_code == 422

    async def test_add_tag_upstream_status_passed_through(self, client: AsyncClient, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", status_code=503)

        response = await client.post(f"/api/v1/datasets/{REVENUE_URN}/tags", json={"tag": "urn:li:tag:pii"})

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE

    async def test_add_tag_requires_tag(self, client: AsyncClient, httpx_mock: HTTPXMock) -> None:
        response = await client.post(f"/api/v1/datasets/{REVENUE_URN}/tags", json={"tag": ""})

        assert response.status_code == 422
        assert httpx_mock.get_requests() == []

    async def test_remove_tag(self, client: AsyncClient, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", json=mutation_response(True))

        response = await client.delete(f"/api/v1/datasets/{REVENUE_URN}/tags/urn:li:tag:pii")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        body = sent_body(httpx_mock)
        assert "removeTag(input: $input)" in body["query"]
        assert body["variables"] == {"input": {"tagUrn": "urn:li:tag:pii", "resourceUrn": REVENUE_URN}}

    async def test_remove_tag_not_confirmed(self, client: AsyncClient, httpx_mock: HTTPXMock) -> None:
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", json=mutation_response(False))

        response = await client.delete(f"/api/v1/datasets/{REVENUE_URN}/tags/urn:li:tag:pii")

        assert response.status_code == 422

    async def test_remove_tag_upstream_status_passed_through(
        self, client: AsyncClient, httpx_mock: HTTPXMock
    ) -> None:
        httpx_mock.add_response(url=GRAPHQL_URL, method="POST", status_code=503)

        response = await client.delete(f"/api/v1/datasets/{REVENUE_URN}/tags/urn:li:tag:pii")

        assert response.status_code == status.HTTP_503_SERVICE_UNAVAILABLE


@pytest.mark.asyncio
class TestEmptyDatasetUrn:
    """A trailing slash carries no URN and never reaches DataHub."""

    async def test_get(self, client: AsyncClient, httpx_mock: HTTPXMock) -> None:
        response = await client.get("/api/v1/datasets/")

        assert response.status_code == 422
        assert httpx_mock.get_requests() == []

    async def test_add_tag(self, client: AsyncClient, httpx_mock: HTTPXMock) -> None:
        response = await client.post("/api/v1/datasets//tags", json={"tag": "urn:li:tag:pii"})

        assert response.status_code == 422
        assert httpx_mock.get_requests() == []
