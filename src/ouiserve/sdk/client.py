from __future__ import annotations

from typing import Any
from urllib.parse import quote

from ..core.entries import OuiEntry


class OuiClient:
    """HTTP client for querying a running ouiserve server.

    Contract:
    - GET /oui                 -> list of {oui, vendor_name, vendor_alternate_name}
    - GET /oui/{oui}           -> one object, 404 when unknown
    - GET /mac/{address}       -> vendor name as text/plain, 404 when unknown
    - GET /mac/{address}/entry -> full object for the address prefix

    "Not found" is returned as None; any other error status raises RuntimeError.
    """

    def __init__(self, base_url: str = "http://127.0.0.1:3000") -> None:
        self.base_url = base_url.rstrip("/")

    def _get(self, path: str, *, timeout_s: float) -> Any:
        # httpx is a lightweight dependency used for requests.
        import httpx

        with httpx.Client(base_url=self.base_url, timeout=timeout_s) as client:
            res = client.get(path)
        if res.status_code == 404:
            return None
        if res.status_code >= 400:
            raise RuntimeError(f"Request to {path} failed: {res.status_code} {res.text}")
        return res

    def health(self, *, timeout_s: float = 10.0) -> dict[str, Any]:
        res = self._get("/healthz", timeout_s=timeout_s)
        if res is None:
            raise RuntimeError("Health endpoint not found")
        return dict(res.json())

    def list_entries(self, *, timeout_s: float = 60.0) -> list[OuiEntry]:
        res = self._get("/oui", timeout_s=timeout_s)
        if res is None:
            return []
        return [OuiEntry.from_dict(item) for item in res.json()]

    def get_entry(self, prefix: str, *, timeout_s: float = 10.0) -> OuiEntry | None:
        p = str(prefix).strip()
        if not p:
            return None
        res = self._get(f"/oui/{quote(p, safe='')}", timeout_s=timeout_s)
        if res is None:
            return None
        return OuiEntry.from_dict(res.json())

    def resolve_vendor(self, address: str, *, timeout_s: float = 10.0) -> str | None:
        """Return the vendor name owning `address`, or None."""
        addr = str(address).strip()
        if not addr:
            return None
        res = self._get(f"/mac/{quote(addr, safe='')}", timeout_s=timeout_s)
        if res is None:
            return None
        return res.text

    def lookup(self, address: str, *, timeout_s: float = 10.0) -> OuiEntry | None:
        addr = str(address).strip()
        if not addr:
            return None
        res = self._get(f"/mac/{quote(addr, safe='')}/entry", timeout_s=timeout_s)
        if res is None:
            return None
        return OuiEntry.from_dict(res.json())
