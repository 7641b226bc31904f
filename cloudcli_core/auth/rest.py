"""HTTP client used for token exchanges."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Mapping, Tuple

import requests
from requests import RequestException, Response

from .errors import AuthenticationError, AuthRequestError, InvalidTokenError, ServerError

log = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


@dataclass
class RestClient:
    """Form-encoded POST client that maps HTTP failures onto auth errors."""

    timeout: float | None = None
    verify: bool = True
    session: requests.Session = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.session = requests.Session()
        self.session.headers.update({"Accept": "application/json"})
        self.session.verify = self.verify

    @classmethod
    def from_settings(cls, *, http_timeout: int, ssl_disabled: bool) -> "RestClient":
        """Build a client from the persisted ``http_timeout``/``ssl_disabled`` values."""

        return cls(timeout=float(http_timeout) if http_timeout > 0 else None, verify=not ssl_disabled)

    def post_form(
        self,
        url: str,
        data: Mapping[str, str],
        *,
        auth: Tuple[str, str] | None = None,
    ) -> dict[str, Any]:
        log.debug("POST %s grant_type=%s", url, data.get("grant_type"))
        try:
            response = self.session.post(
                url,
                data=dict(data),
                auth=auth,
                timeout=self.timeout or DEFAULT_TIMEOUT,
            )
        except RequestException as exc:
            raise AuthRequestError(f"unable to reach token service at {url}: {exc}") from exc
        return self._decode(url, response)

    def _decode(self, url: str, response: Response) -> dict[str, Any]:
        status = response.status_code
        try:
            payload = response.json()
        except ValueError:
            payload = None

        if 200 <= status < 300:
            if not isinstance(payload, dict):
                raise AuthenticationError(
                    f"token service at {url} returned a non-JSON body", status_code=status
                )
            return payload

        code, description = _error_details(payload)
        if status in (400, 401):
            raise InvalidTokenError(
                f"token rejected by {url} (status={status}): {description or code or 'no detail'}",
                status_code=status,
                code=code,
                description=description,
            )
        if status >= 500:
            raise ServerError(f"token service at {url} failed (status={status})", status_code=status)
        raise AuthenticationError(
            f"unexpected response from {url} (status={status}): {description or response.reason}",
            status_code=status,
        )


def _error_details(payload: Any) -> tuple[str | None, str | None]:
    """Extract (code, description) from IAM or UAA style error bodies."""

    if not isinstance(payload, dict):
        return None, None
    code = payload.get("errorCode") or payload.get("error")
    description = payload.get("errorMessage") or payload.get("error_description")
    return (str(code) if code else None, str(description) if description else None)
