from unittest.mock import MagicMock

import pytest

from gamecenter_client.utils.errors import TransportError
from gamecenter_client.utils.http_client import HttpClient


@pytest.fixture
def http_client():
    client = MagicMock(spec=HttpClient)
    client.plid = "0123456789abcdef0123456789abcdef"
    return client


@pytest.fixture
def serve(http_client):
    """Makes ``http_client.get`` answer from a url -> body mapping."""

    def _serve(responses):
        def _get(url, params=None, operation="GET"):
            if url not in responses:
                raise TransportError(operation, "Expected a status code of 200", 404, url)
            return responses[url]

        http_client.get.side_effect = _get
        return http_client

    return _serve
