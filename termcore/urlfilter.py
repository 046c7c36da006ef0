"""A filter that finds web addresses and e-mail addresses in terminal text."""

from __future__ import annotations

import enum
import re
from collections.abc import Callable

from termcore.filter import HotSpotType, RegExpFilter, RegExpHotSpot

# Protocol name followed by :// or "www.", then anything but whitespace,
# <, >, ' or ", not ending in whitespace, <, >, ', ", ], !, comma or dot.
FULL_URL_PATTERN = r"(www\.(?!\.)|[a-z][a-z0-9+.-]*://)[^\s<>'\"]+[^!,\.\s<>'\"\]]"
EMAIL_ADDRESS_PATTERN = r"\b(\w|\.|-)+@(\w|\.|-)+\.\w+\b"
COMPLETE_URL_PATTERN = "(" + FULL_URL_PATTERN + "|" + EMAIL_ADDRESS_PATTERN + ")"

_FULL_URL = re.compile(FULL_URL_PATTERN)
_EMAIL_ADDRESS = re.compile(EMAIL_ADDRESS_PATTERN)
_COMPLETE_URL = re.compile(COMPLETE_URL_PATTERN)

OPEN_ACTION = "open-action"
COPY_ACTION = "copy-action"

UrlCallback = Callable[[str], None]


class UrlType(enum.Enum):
    STANDARD_URL = "standard-url"
    EMAIL = "email"
    UNKNOWN = "unknown"


def classify_url(url: str) -> UrlType:
    """Tell whether the whole text is a web address, an e-mail address or neither."""
    if _FULL_URL.fullmatch(url):
        return UrlType.STANDARD_URL
    if _EMAIL_ADDRESS.fullmatch(url):
        return UrlType.EMAIL
    return UrlType.UNKNOWN


class UrlHotSpot(RegExpHotSpot):
    """A link hotspot; activating it opens or copies its address."""

    def __init__(
        self,
        start_line: int,
        start_column: int,
        end_line: int,
        end_column: int,
        on_activated: UrlCallback | None = None,
        on_copy: UrlCallback | None = None,
    ) -> None:
        super().__init__(start_line, start_column, end_line, end_column)
        self.type = HotSpotType.LINK
        self.on_activated = on_activated
        self.on_copy = on_copy

    @property
    def url(self) -> str:
        if not self.captured_texts:
            raise ValueError("hotspot has no captured text")
        return self.captured_texts[0]

    def url_type(self) -> UrlType:
        return classify_url(self.url)

    def activate(self, action: str = "") -> None:
        """Copy the address for ``copy-action``; open it for ``open-action`` or no action.

        Opening hands the address to ``on_activated``, with ``http://`` added
        to web addresses lacking a protocol and ``mailto:`` to e-mail addresses.
        """
        url = self.url
        kind = classify_url(url)
        if action == COPY_ACTION:
            if self.on_copy is not None:
                self.on_copy(url)
            return
        if action in ("", OPEN_ACTION):
            if kind is UrlType.STANDARD_URL:
                if "://" not in url:
                    url = "http://" + url
            elif kind is UrlType.EMAIL:
                url = "mailto:" + url
            if self.on_activated is not None:
                self.on_activated(url)

    def actions(self) -> list[tuple[str, str]]:
        """The (action name, label) pairs offered for this address."""
        kind = self.url_type()
        if kind is UrlType.STANDARD_URL:
            return [(OPEN_ACTION, "Open Link"), (COPY_ACTION, "Copy Link Address")]
        if kind is UrlType.EMAIL:
            return [(OPEN_ACTION, "Send Email To..."), (COPY_ACTION, "Copy Email Address")]
        raise ValueError(f"no actions for unrecognised address {self.url!r}")

    def tooltip(self) -> str:
        return ""


class UrlFilter(RegExpFilter):
    """Marks web addresses and e-mail addresses as link hotspots."""

    def __init__(
        self, on_activated: UrlCallback | None = None, on_copy: UrlCallback | None = None
    ) -> None:
        super().__init__(_COMPLETE_URL)
        self.on_activated = on_activated
        self.on_copy = on_copy

    def new_hot_spot(
        self, start_line: int, start_column: int, end_line: int, end_column: int
    ) -> UrlHotSpot:
        return UrlHotSpot(
            start_line,
            start_column,
            end_line,
            end_column,
            on_activated=self.on_activated,
            on_copy=self.on_copy,
        )