"""Pig Farm Records API client.

A thin wrapper around the HTTP API using the ``requests`` library.
Every resource has a ``create_*`` and a ``list_*`` method:

* :meth:`PigFarmAPI.create_pig` / :meth:`PigFarmAPI.list_pigs`
* :meth:`PigFarmAPI.create_feed` / :meth:`PigFarmAPI.list_feeds`
* :meth:`PigFarmAPI.create_health_record` / :meth:`PigFarmAPI.list_health_records`
* :meth:`PigFarmAPI.create_inventory_item` / :meth:`PigFarmAPI.list_inventory`
* :meth:`PigFarmAPI.create_invoice` / :meth:`PigFarmAPI.list_invoices`

Methods never raise on HTTP or network errors.  They return a tuple
``(data, error)`` where ``error`` is ``None`` on success and otherwise
a dictionary with ``status_code`` and ``message`` keys.  The message is
taken from the ``error`` field of the server's JSON body when present.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class PigFarmAPI:
    """Client for the Pig Farm Records API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8000``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request and decode the JSON response.

        Returns ``(data, None)`` on success and ``(None, error)`` on
        failure.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
            if response.content:
                return response.json(), None
            return None, None
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = ""
            if exc.response is not None:
                try:
                    err_json = exc.response.json()
                    message = err_json.get("error") or err_json.get("detail") or str(err_json)
                except ValueError:
                    message = exc.response.text
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

    def _create(self, path: str, key: str, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("POST", path, json_body=payload)
        if error:
            return None, error
        return (data or {}).get(key), None

    def _list(self, path: str, key: str) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        data, error = self._request("GET", path)
        if error:
            return [], error
        records = (data or {}).get(key)
        return records if isinstance(records, list) else [], None

    # ------------------------------------------------------------------
    # Pigs
    # ------------------------------------------------------------------
    def create_pig(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Register a pig.

        Args:
            payload: ``name``, ``breed``, ``birthDate``, ``weight`` and
                ``healthStatus``.
        Returns:
            A tuple ``(pig, error)``.
        """
        return self._create("/pigs", "pig", payload)

    def list_pigs(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/pigs", "pigs")

    # ------------------------------------------------------------------
    # Feed records
    # ------------------------------------------------------------------
    def create_feed(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Log a feeding (``pigId``, ``feedType``, ``quantity``, ``date``)."""
        return self._create("/feeds", "feed", payload)

    def list_feeds(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/feeds", "feeds")

    # ------------------------------------------------------------------
    # Health records
    # ------------------------------------------------------------------
    def create_health_record(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Record a health event (``pigId``, ``description``, ``date``, ``veterinarian``)."""
        return self._create("/healthRecords", "healthRecord", payload)

    def list_health_records(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/healthRecords", "healthRecords")

    # ------------------------------------------------------------------
    # Inventory
    # ------------------------------------------------------------------
    def create_inventory_item(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Add an inventory item (``itemName``, ``quantity``, ``cost``)."""
        return self._create("/inventory", "inventory", payload)

    def list_inventory(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/inventory", "inventory")

    # ------------------------------------------------------------------
    # Invoices
    # ------------------------------------------------------------------
    def create_invoice(self, payload: Dict[str, Any]) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Issue an invoice (``customerId``, ``amount``, ``date``)."""
        return self._create("/invoices", "invoice", payload)

    def list_invoices(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        return self._list("/invoices", "invoices")
