"""
Tests for correlation ID middleware.

This module tests correlation ID generation, header handling, context
variable access and log context cleanup.
"""

from unittest.mock import MagicMock

import pytest
from starlette.requests import Request
from starlette.responses import Response

from bookstore.logging import get_log_context, set_log_context
from bookstore.middlewares.correlation_id import (
    CorrelationIDMiddleware,
    get_correlation_id,
)


def make_request(headers: dict | None = None) -> MagicMock:
    request = MagicMock(spec=Request)
    request.headers = headers or {}
    request.state = MagicMock()
    return request


class TestCorrelationIDMiddleware:
    """Tests for CorrelationIDMiddleware class."""

    @pytest.mark.asyncio
    async def test_middleware_generates_correlation_id(self):
        """Test that middleware generates correlation ID when not provided."""
        middleware = CorrelationIDMiddleware(app=MagicMock())

        async def call_next(request):
            return Response(content="test", status_code=200)

        response = await middleware.dispatch(make_request(), call_next)

        assert len(response.headers["X-Correlation-ID"]) == 8

    @pytest.mark.asyncio
    async def test_middleware_uses_provided_correlation_id(self):
        """Test that middleware uses correlation ID from request header."""
        middleware = CorrelationIDMiddleware(app=MagicMock())
        request = make_request({"X-Correlation-ID": "test-cor"})

        async def call_next(request):
            return Response(content="test", status_code=200)

        response = await middleware.dispatch(request, call_next)

        assert response.headers["X-Correlation-ID"] == "test-cor"
        assert request.state.request_id == "test-cor"

    @pytest.mark.asyncio
    async def test_middleware_truncates_long_correlation_id(self):
        """Test that provided IDs are cut to 8 characters."""
        middleware = CorrelationIDMiddleware(app=MagicMock())
        request = make_request({"X-Correlation-ID": "0123456789abcdef"})

        async def call_next(request):
            return Response(status_code=200)

        response = await middleware.dispatch(request, call_next)

        assert response.headers["X-Correlation-ID"] == "01234567"

    @pytest.mark.asyncio
    async def test_correlation_id_visible_during_request_only(self):
        """Test the context variable is set inside and reset after."""
        middleware = CorrelationIDMiddleware(app=MagicMock())
        seen = []

        async def call_next(request):
            seen.append(get_correlation_id())
            set_log_context(location="Authors - Create")
            return Response(status_code=200)

        await middleware.dispatch(
            make_request({"X-Correlation-ID": "abcd1234"}), call_next
        )

        assert seen == ["abcd1234"]
        assert get_correlation_id() == ""
        assert get_log_context() == {}
