"""
Tests for inbound request logging
"""

import pytest
from starlette.requests import Request

from lodging_gateway.middleware import read_graphql_payload, summarize_document


def make_request(method: str, query_string: bytes = b"", body: bytes = b"") -> Request:
    async def receive():
        return {"type": "http.request", "body": body, "more_body": False}

    scope = {
        "type": "http",
        "method": method,
        "path": "/graphql",
        "query_string": query_string,
        "headers": [],
    }
    return Request(scope, receive)


class TestSummarizeDocument:
    def test_anonymous_query(self):
        summary = summarize_document("{ allRoles { id } userById(id: 1) { name } }")

        assert summary.operation == "query"
        assert summary.root_fields == ("allRoles", "userById")
        assert summary.entities == ["roles", "users"]

    def test_named_mutation(self):
        summary = summarize_document(
            "mutation Drop { deleteUser(id: 1) deleteLodging_image(lodging_image_id: 2) }"
        )

        assert summary.operation == "mutation Drop"
        assert summary.entities == ["lodging_images", "users"]

    def test_operation_name_picks_among_several(self):
        document = "query A { allRoles { id } } query B { allLodgings { lodging_id } }"

        summary = summarize_document(document, "B")

        assert summary.operation == "query B"
        assert summary.root_fields == ("allLodgings",)

    def test_ambiguous_document_is_not_summarized(self):
        assert summarize_document("query A { allRoles { id } } query B { allUsers { id } }") is None

    def test_introspection_fields_have_no_entity(self):
        summary = summarize_document("{ __schema { types { name } } }")

        assert summary.root_fields == ("__schema",)
        assert summary.entities == []

    @pytest.mark.parametrize("query", [None, "", "{ allRoles { id ", 42])
    def test_unusable_documents(self, query):
        assert summarize_document(query) is None


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "body, expected",
    [
        (
            b'{"query": "{ allRoles { id } }", "operationName": "X"}',
            {"query": "{ allRoles { id } }", "operationName": "X"},
        ),
        (b"[1, 2]", {}),
        (b"not json", {}),
        (b"", {}),
    ],
)
async def test_payload_from_post_body(body, expected):
    assert await read_graphql_payload(make_request("POST", body=body)) == expected


@pytest.mark.asyncio
async def test_payload_from_query_string():
    request = make_request("GET", b"query=%7B%20allRoles%20%7B%20id%20%7D%20%7D")

    assert await read_graphql_payload(request) == {"query": "{ allRoles { id } }"}
