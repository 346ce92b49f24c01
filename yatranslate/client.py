"""Yandex Translate API client."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, Iterator

from yatranslate.config import DEFAULT_URL, ClientConfig
from yatranslate.errors import ApiError, MalformedResponseError, MissingKeyError
from yatranslate.languages import UNKNOWN, format_direction, parse_direction
from yatranslate.transport import RequestsTransport, Transport

logger = logging.getLogger(__name__)

CODE_OK = 200

GET_LANGS_PATH = "/getLangs"
DETECT_PATH = "/detect"
TRANSLATE_PATH = "/translate"


@dataclass
class Envelope:
    """Decoded response body shared by every endpoint.

    Only the fields belonging to the called endpoint are populated.
    """

    code: int | None = None
    message: str = ""
    dirs: list[str] = field(default_factory=list)
    langs: dict[str, str] = field(default_factory=dict)
    lang: str = ""
    text: list[str] = field(default_factory=list)


@dataclass
class LanguageList:
    """Result of :meth:`Client.list_languages`.

    Unpacks as ``directions, languages``.

    Attributes:
        directions: Supported directions, e.g. ['en-ru', 'ru-en'].
        languages: Language code to display name.
    """

    directions: list[str]
    languages: dict[str, str]

    def __iter__(self) -> Iterator[Any]:
        return iter((self.directions, self.languages))

    def targets_for(self, source_lang: str) -> list[str]:
        """Return the target codes reachable from ``source_lang``."""
        targets = []
        for direction in self.directions:
            source, target = parse_direction(direction)
            if source == source_lang:
                targets.append(target)
        return targets


@dataclass
class TranslateRequest:
    """Parameters of a single translation.

    Attributes:
        text: Text to translate.
        target_lang: Target language code.
        source_lang: Source language code; UNKNOWN lets the service detect it.
    """

    text: str
    target_lang: str
    source_lang: str = UNKNOWN

    def to_form(self) -> dict[str, str]:
        return {
            "text": self.text,
            "lang": format_direction(self.source_lang, self.target_lang),
        }


def _field(raw: dict[str, Any], name: str, default: Any) -> Any:
    # Only a missing key or null is absent; other falsy values are type-checked
    value = raw.get(name)
    return default if value is None else value


def _string_list(value: Any, name: str) -> list[str]:
    if not isinstance(value, list) or not all(isinstance(v, str) for v in value):
        raise TypeError(f"field {name!r} must be an array of strings")
    return value


def decode_envelope(body: bytes) -> Envelope:
    """Parse a response body into an Envelope.

    Args:
        body: Raw response body.

    Returns:
        The decoded Envelope.

    Raises:
        MalformedResponseError: If the body is not a JSON object of the
            expected shape.
        ApiError: If the envelope carries a code other than 200.
    """
    try:
        raw = json.loads(body)
        if not isinstance(raw, dict):
            raise TypeError(f"expected a JSON object, got {type(raw).__name__}")

        code = raw.get("code")
        if code is not None and (isinstance(code, bool) or not isinstance(code, int)):
            raise TypeError("field 'code' must be an integer")

        message = _field(raw, "message", "")
        lang = _field(raw, "lang", "")
        if not isinstance(message, str):
            raise TypeError("field 'message' must be a string")
        if not isinstance(lang, str):
            raise TypeError("field 'lang' must be a string")

        langs = _field(raw, "langs", {})
        if not isinstance(langs, dict) or not all(
            isinstance(v, str) for v in langs.values()
        ):
            raise TypeError("field 'langs' must be an object of strings")

        envelope = Envelope(
            code=code,
            message=message,
            dirs=_string_list(_field(raw, "dirs", []), "dirs"),
            langs=langs,
            lang=lang,
            text=_string_list(_field(raw, "text", []), "text"),
        )
    except (ValueError, TypeError) as e:
        # json.JSONDecodeError and UnicodeDecodeError are both ValueErrors
        logger.debug("Could not decode response body: %s", e)
        raise MalformedResponseError(e, body) from e

    if envelope.code is not None and envelope.code != CODE_OK:
        raise ApiError(envelope.code, envelope.message)
    return envelope


class Client:
    """Client for the Yandex Translate JSON API.

    Every call sends one form-encoded POST carrying the API key and
    decodes one JSON envelope. The client keeps no state between calls.

    Attributes:
        base_url: Root of the API endpoints.
        transport: Transport the requests are sent through.
    """

    def __init__(
        self,
        config: ClientConfig,
        transport: Transport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            config: API key and optional endpoint root.
            transport: HTTP transport. Defaults to RequestsTransport.

        Raises:
            MissingKeyError: If ``config.api_key`` is empty.
        """
        if not config.api_key:
            raise MissingKeyError()

        self._key = config.api_key
        self.base_url = (config.base_url or DEFAULT_URL).rstrip("/")
        self.transport = transport or RequestsTransport()

    def __repr__(self) -> str:
        return f"Client(base_url={self.base_url!r})"

    def list_languages(self) -> LanguageList:
        """Return the supported translation directions and language names.

        Names are always unlocalized; no ``ui`` parameter is sent.

        Raises:
            MalformedResponseError: If the response cannot be decoded.
            ApiError: If the service reports an error.
        """
        envelope = self._post(GET_LANGS_PATH, {})
        return LanguageList(directions=envelope.dirs, languages=envelope.langs)

    def detect_language(self, text: str, hints: Iterable[str] = ()) -> str:
        """Detect the language of ``text``.

        Args:
            text: Text to inspect.
            hints: Likely source languages, sent comma-joined.

        Returns:
            The detected language code.

        Raises:
            MalformedResponseError: If the response cannot be decoded.
            ApiError: If the service reports an error.
        """
        form = {"text": text}
        hint = ",".join(hints)
        if hint:
            form["hint"] = hint

        return self._post(DETECT_PATH, form).lang

    def translate(
        self,
        text: str,
        target_lang: str,
        *,
        source_lang: str = UNKNOWN,
    ) -> list[str]:
        """Translate ``text`` into ``target_lang``.

        Args:
            text: Text to translate.
            target_lang: Target language code.
            source_lang: Source language code. Auto-detected when empty.

        Returns:
            The translated segments, normally exactly one.

        Raises:
            MalformedResponseError: If the response cannot be decoded.
            ApiError: If the service reports an error.
        """
        request = TranslateRequest(text=text, target_lang=target_lang, source_lang=source_lang)
        return self._post(TRANSLATE_PATH, request.to_form()).text

    def _post(self, path: str, form: dict[str, str]) -> Envelope:
        form["key"] = self._key
        logger.debug("POST %s%s", self.base_url, path)
        body = self.transport.post_form(self.base_url + path, form)
        return decode_envelope(body)
