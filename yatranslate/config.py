"""Client configuration."""

from __future__ import annotations

import os
from dataclasses import dataclass

DEFAULT_URL = "https://translate.yandex.net/api/v1.5/tr.json"

API_KEY_ENV = "YANDEXTRANSLATEAPIKEY"
URL_ENV = "YANDEXTRANSLATEURL"


@dataclass(frozen=True)
class ClientConfig:
    """Configuration for a :class:`~yatranslate.client.Client`.

    Attributes:
        api_key: Yandex Translate API key. Must not be empty.
        base_url: Root of the API endpoints. Empty means DEFAULT_URL.
    """

    api_key: str
    base_url: str = ""

    @classmethod
    def from_env(
        cls,
        api_key: str | None = None,
        base_url: str | None = None,
    ) -> ClientConfig:
        """Build a config, filling missing values from the environment.

        Args:
            api_key: API key. If empty, reads from YANDEXTRANSLATEAPIKEY.
            base_url: Endpoint root. If empty, reads from YANDEXTRANSLATEURL
                      or falls back to DEFAULT_URL when the client is built.

        Returns:
            A new ClientConfig. The key may still be empty; the client
            rejects it on construction.
        """
        return cls(
            api_key=api_key or os.environ.get(API_KEY_ENV, ""),
            base_url=base_url or os.environ.get(URL_ENV, ""),
        )
