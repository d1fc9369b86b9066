"""
Mapper between transport payloads and the handlers' GatewayRequest/GatewayResponse.
Covers serverless function events and FastAPI/Starlette requests.
"""
import base64
import binascii
from typing import Any, Dict

from fastapi import Request, Response

from app.api.http import GatewayRequest, GatewayResponse
from app.infrastructure.logging.log_config import get_logger

logger = get_logger("HttpMapper")


class HttpMapper:
    """Mapper for request/response conversions."""

    @staticmethod
    def from_lambda_event(event: Dict[str, Any]) -> GatewayRequest:
        """
        Convert an API Gateway / Netlify function event to a GatewayRequest.

        An undecodable base64 body is passed through unchanged; the handler
        then rejects it as an unparsable body.

        Args:
            event: Event with `httpMethod`, `headers`, `body` and optional `isBase64Encoded`

        Returns:
            GatewayRequest
        """
        event = event or {}
        body = event.get('body')

        if body and event.get('isBase64Encoded'):
            try:
                body = base64.b64decode(body, validate=True).decode('utf-8')
            except (binascii.Error, UnicodeDecodeError) as e:
                logger.warning("Invalid base64 request body", extra={
                    "extra_fields": {"error": str(e)}
                })

        return GatewayRequest.create(
            method=event.get('httpMethod') or '',
            headers=event.get('headers'),
            body=body
        )

    @staticmethod
    def to_lambda_response(response: GatewayResponse) -> Dict[str, Any]:
        return response.to_lambda()

    @staticmethod
    async def from_fastapi_request(request: Request) -> GatewayRequest:
        """Read the full body and copy method and headers."""
        raw_body = await request.body()
        return GatewayRequest.create(
            method=request.method,
            headers=dict(request.headers),
            body=raw_body.decode('utf-8', errors='replace')
        )

    @staticmethod
    def to_fastapi_response(response: GatewayResponse) -> Response:
        return Response(
            content=response.body,
            status_code=response.status_code,
            headers=response.headers
        )
