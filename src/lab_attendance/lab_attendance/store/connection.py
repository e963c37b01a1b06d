from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional
from urllib.parse import urljoin

import requests


@dataclass(frozen=True)
class StoreConfig:
    url: str
    key: str
    table: str = "attendance"
    timeout_seconds: float = 10

    @classmethod
    def from_mapping(cls, data: dict) -> "StoreConfig":
        return cls(
            url=str(data["url"]).strip(),
            key=str(data["key"]),
            table=str(data.get("table") or "attendance"),
            timeout_seconds=float(data.get("timeout_seconds", 10)),
        )


class StoreConnection:
    """HTTP connection factory for the hosted attendance store.

    Note: We issue one short-lived request per operation (no shared Session),
    so concurrent checkout writers never share a connection.
    """

    def __init__(self, config: StoreConfig):
        self._config = config
        self._base_url = config.url.rstrip("/") + "/rest/v1/"

    @property
    def config(self) -> StoreConfig:
        return self._config

    def headers(self) -> dict[str, str]:
        return {
            "apikey": self._config.key,
            "Authorization": f"Bearer {self._config.key}",
            "Content-Type": "application/json",
        }

    def table_url(self, table: Optional[str] = None) -> str:
        return urljoin(self._base_url, table or self._config.table)

    def request(
        self,
        method: str,
        *,
        table: Optional[str] = None,
        params: Any = None,
        json: Any = None,
        extra_headers: Optional[dict[str, str]] = None,
        timeout: Optional[float] = None,
    ) -> requests.Response:
        headers = self.headers()
        if extra_headers:
            headers.update(extra_headers)
        return requests.request(
            method,
            self.table_url(table),
            params=params,
            json=json,
            headers=headers,
            timeout=timeout or self._config.timeout_seconds,
        )
