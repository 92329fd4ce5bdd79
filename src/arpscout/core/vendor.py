from __future__ import annotations

import logging
import string
from concurrent.futures import Executor

import requests

from arpscout.config import VendorConfig
from arpscout.errors import FormatError
from arpscout.models import VENDOR_FALLBACK

from .executor import run_blocking

logger = logging.getLogger(__name__)

OUI_LENGTH = 6

# startHex|endHex|startDec|endDec|company|addressL1|addressL2|addressL3|country|type
RESPONSE_FIELDS = 10
COMPANY_FIELD = 4


def _is_hex(value: str) -> bool:
    return all(ch in string.hexdigits for ch in value)


def normalize_mac(mac: str) -> str:
    return mac.replace("-", "").lower()


def extract_oui(mac: str) -> str | None:
    """Return the 6 character OUI of ``mac``.

    Raises FormatError for a non-empty all-hex string that is too short.
    Other unusable input (empty, or short with non-hex characters) gives None.
    """
    normalized = normalize_mac(mac)
    if normalized and len(normalized) < OUI_LENGTH and _is_hex(normalized):
        raise FormatError(f"MAC address has an incorrect format: {mac!r}")
    # colon-delimited addresses are accepted but never trip the length guard
    digits = normalized.replace(":", "")
    if len(digits) < OUI_LENGTH:
        return None
    return digits[:OUI_LENGTH]


def parse_vendor_response(body: str) -> str | None:
    fields = body.strip().split("|")
    if len(fields) != RESPONSE_FIELDS:
        logger.debug(
            "Vendor response has %d fields, expected %d", len(fields), RESPONSE_FIELDS
        )
        return None
    return fields[COMPANY_FIELD]


class VendorLookupClient:
    """Resolves a MAC address to its vendor through a remote OUI database."""

    def __init__(
        self,
        base_url: str = "http://www.macvendorlookup.com/api/v2",
        response_format: str = "pipe",
        timeout: float = 5.0,
        session: requests.Session | None = None,
        executor: Executor | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.response_format = response_format
        self.timeout = timeout
        self._session = session or requests.Session()
        self.executor = executor

    @classmethod
    def from_config(
        cls, config: VendorConfig, executor: Executor | None = None
    ) -> VendorLookupClient:
        return cls(
            config.base_url, config.response_format, config.timeout, executor=executor
        )

    def url_for(self, oui: str) -> str:
        return f"{self.base_url}/{oui}/{self.response_format}"

    def _fetch(self, oui: str) -> str:
        try:
            response = self._session.get(self.url_for(oui), timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            logger.debug("Vendor lookup for %s failed: %s", oui, exc)
            return VENDOR_FALLBACK
        return parse_vendor_response(response.text) or VENDOR_FALLBACK

    async def lookup_vendor(self, mac: str) -> str:
        oui = extract_oui(mac)
        if oui is None:
            logger.debug("No usable OUI in %r", mac)
            return VENDOR_FALLBACK
        return await run_blocking(self._fetch, oui, executor=self.executor)

    def close(self) -> None:
        self._session.close()
