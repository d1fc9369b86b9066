"""
Transport-neutral request/response types shared by the handlers.
Both the serverless entrypoints and the FastAPI routes translate to and from these.
"""
import json
from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel

from app.core.exceptions import MethodNotAllowedError


CORS_HEADERS: Dict[str, str] = {
    'Access-Control-Allow-Origin': '*',
    'Access-Control-Allow-Headers': 'Content-Type',
    'Access-Control-Allow-Methods': 'POST, OPTIONS',
    'Content-Type': 'application/json'
}

PREFLIGHT_METHOD = "OPTIONS"
ALLOWED_METHOD = "POST"


@dataclass
class GatewayRequest:
    """Incoming request. Header names are stored lower-cased."""
    method: str
    headers: Dict[str, str] = field(default_factory=dict)
    body: Optional[str] = None

    @classmethod
    def create(cls, method: str, headers: Optional[Mapping[str, Any]] = None, body: Optional[str] = None) -> 'GatewayRequest':
        headers = headers or {}
        return cls(
            method=(method or "").upper(),
            headers={str(k).lower(): str(v) for k, v in headers.items() if v is not None},
            body=body
        )

    def header(self, name: str) -> Optional[str]:
        return self.headers.get(name.lower()) or None

    @property
    def is_preflight(self) -> bool:
        return self.method == PREFLIGHT_METHOD

    @property
    def client_ip(self) -> Optional[str]:
        return self.header('x-forwarded-for') or self.header('client-ip')

    def json(self) -> Dict[str, Any]:
        """
        Parse the body as a JSON object. An empty body is an empty object.

        Raises:
            ValueError: If the body is not valid JSON or not an object
        """
        data = json.loads(self.body or '{}')
        if not isinstance(data, dict):
            raise ValueError("Request body must be a JSON object")
        return data


@dataclass
class GatewayResponse:
    status_code: int
    body: str = ''
    headers: Dict[str, str] = field(default_factory=lambda: dict(CORS_HEADERS))

    @classmethod
    def from_model(cls, status_code: int, model: BaseModel) -> 'GatewayResponse':
        return cls(status_code=status_code, body=model.model_dump_json(exclude_none=True))

    @classmethod
    def preflight(cls) -> 'GatewayResponse':
        return cls(status_code=200, body='')

    def json(self) -> Dict[str, Any]:
        return json.loads(self.body) if self.body else {}

    def to_lambda(self) -> Dict[str, Any]:
        """Shape expected by API Gateway / Netlify function runtimes."""
        return {
            "statusCode": self.status_code,
            "headers": dict(self.headers),
            "body": self.body
        }


def ensure_post(request: GatewayRequest) -> None:
    """
    Raises:
        MethodNotAllowedError: For any method other than POST
    """
    if request.method != ALLOWED_METHOD:
        raise MethodNotAllowedError()
