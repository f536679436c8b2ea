"""Shared fakes and constants for SAS Logon client registration tests."""

import json
from typing import List, Optional

import httpx

BASE_URL = "https://viya.example.com"
BOOTSTRAP_TOKEN = "consul-bootstrap-token-0123456789"
ACCESS_TOKEN = "eyJhbGciOiJSUzI1NiJ9.admin-access-token"


class FakeSASLogon:
    """In-memory SAS Logon answering the token exchange and registration calls."""

    def __init__(
        self,
        token_response: Optional[httpx.Response] = None,
        registration_response: Optional[httpx.Response] = None,
    ):
        self.token_response = token_response or httpx.Response(
            200, json={"access_token": ACCESS_TOKEN, "token_type": "bearer"}
        )
        self.registration_response = registration_response or httpx.Response(
            201, json={"client_id": "ignored", "scope": ["openid"]}
        )
        self.requests: List[httpx.Request] = []

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if request.url.path == "/SASLogon/oauth/clients/consul":
            return self.token_response
        if request.url.path == "/SASLogon/oauth/clients":
            return self.registration_response
        return httpx.Response(404, text="not found")

    @property
    def transport(self) -> httpx.MockTransport:
        return httpx.MockTransport(self.handler)

    @property
    def registration_payload(self) -> dict:
        """JSON body of the registration request that was sent."""
        for request in self.requests:
            if request.url.path == "/SASLogon/oauth/clients":
                return json.loads(request.content)
        raise AssertionError("No registration request was sent")


def failing_transport(request: httpx.Request) -> httpx.Response:
    """Mock transport handler that never reaches the server."""
    raise httpx.ConnectError("connection refused", request=request)
