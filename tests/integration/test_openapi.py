"""
Integration tests for OpenAPI documentation.

Verifies OpenAPI schema is correctly generated for all endpoints.
"""

import pytest
from fastapi.testclient import TestClient

pytestmark = pytest.mark.integration


@pytest.fixture
def schema(client: TestClient) -> dict:
    response = client.get("/openapi.json")
    assert response.status_code == 200
    return response.json()


class TestOpenAPISchema:
    def test_title_and_version(self, schema: dict) -> None:
        assert schema["info"]["title"] == "waitlist"
        assert schema["info"]["version"] == "0.1.0"

    def test_signup_endpoint_documented(self, schema: dict) -> None:
        post = schema["paths"]["/api/waitlist"]["post"]
        assert post["summary"] == "Join the waitlist"
        assert {"201", "400", "409", "500"} <= set(post["responses"])

    def test_count_endpoint_documented(self, schema: dict) -> None:
        assert "get" in schema["paths"]["/api/waitlist/count"]

    def test_request_schema_uses_camel_case(self, schema: dict) -> None:
        properties = schema["components"]["schemas"]["WaitlistSignupRequest"]["properties"]
        assert set(properties) == {"firstName", "lastName", "email"}
