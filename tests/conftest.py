import textwrap

import pytest
from scrapy.http import TextResponse


@pytest.fixture
def make_response():
    """Build the scrapy response a registry would have sent."""

    def make(body: str, status: int = 200, url: str = "https://registry.test/") -> TextResponse:
        return TextResponse(
            url=url,
            status=status,
            body=textwrap.dedent(body).strip().encode("utf-8"),
            encoding="utf-8",
        )

    return make
