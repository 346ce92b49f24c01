"""HTTP transports used by the client."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Mapping

import requests


class Transport(ABC):
    """Abstract base class for HTTP transports.

    A transport sends one form-encoded POST and returns the raw response
    body. It must not interpret the body or the HTTP status: the service
    reports errors inside the JSON envelope, which the client decodes.
    """

    @abstractmethod
    def post_form(self, url: str, data: Mapping[str, str]) -> bytes:
        """Send ``data`` as an ``application/x-www-form-urlencoded`` POST.

        Args:
            url: Absolute request URL.
            data: Form fields.

        Returns:
            The complete response body.
        """
        ...


class RequestsTransport(Transport):
    """Transport backed by the ``requests`` library.

    Attributes:
        session: Optional session to send requests through. When None,
            each call uses a one-off ``requests.post``.
        timeout: Request timeout in seconds, or None for no timeout.
    """

    def __init__(
        self,
        session: requests.Session | None = None,
        timeout: float | None = None,
    ) -> None:
        self.session = session
        self.timeout = timeout

    def post_form(self, url: str, data: Mapping[str, str]) -> bytes:
        post = self.session.post if self.session is not None else requests.post
        response = post(url, data=dict(data), timeout=self.timeout)
        return response.content
