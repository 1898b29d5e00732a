"""HTTP klient validačného servera.

`GET {host}/api/?gameBoard=<tokeny spojené pomlčkou>` vráti riedky JSON
objekt (`ValidationResponse`), ktorý sa vykreslí do plochy správ.
"""

from __future__ import annotations

import logging
import threading
import time
from collections.abc import Callable
from itertools import count

import httpx

from .. import config
from ..logging_setup import TRACE_ID_VAR
from .schema import ValidationResponse

log = logging.getLogger("sizetac.remote.client")

API_PATH = "/api/"
BOARD_PARAM = "gameBoard"


class ValidationTransportError(Exception):
    """Volanie servera zlyhalo (sieť, HTTP status alebo neplatný JSON)."""


class ValidationClient:
    """Tenký klient s logovaním a poradovými číslami požiadaviek.

    Odpoveď s nižším poradovým číslom než posledná vykreslená sa zahodí,
    takže neskorá odpoveď na starší ťah neprepíše novší výsledok.
    """

    def __init__(
        self,
        host: str,
        display: Callable[[str], None],
        *,
        timeout_seconds: float | None = None,
        sequence_responses: bool | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.host = host.strip().rstrip("/")
        self._display = display
        self.timeout_seconds = timeout_seconds if timeout_seconds is not None else config.request_timeout()
        self.sequence_responses = (
            sequence_responses if sequence_responses is not None else config.sequence_responses()
        )
        self._transport = transport
        self._counter = count(1)
        self._lock = threading.Lock()
        self._latest_delivered = 0
        # odpovede s nižším číslom patria do predchádzajúcej hry
        self._floor = 0

    @property
    def endpoint(self) -> str:
        return f"{self.host}{API_PATH}"

    def build_url(self, encoded_board: str) -> str:
        """Úplná URL požiadavky; hodnotu zakóduje httpx."""
        return str(httpx.URL(self.endpoint, params={BOARD_PARAM: encoded_board}))

    def next_sequence(self) -> int:
        with self._lock:
            return next(self._counter)

    def invalidate(self) -> None:
        """Zahodí odpovede na všetky doteraz odoslané požiadavky (reštart hry)."""
        with self._lock:
            self._floor = next(self._counter)
        log.debug("pending_responses invalidated floor=%d", self._floor)

    def fetch(self, encoded_board: str) -> ValidationResponse:
        """Synchrónne volanie servera; chyby zabalí do `ValidationTransportError`."""
        url = self.build_url(encoded_board)
        trace_id = TRACE_ID_VAR.get()
        log.info("[%s] GET %s", trace_id, url)
        start = time.perf_counter()
        try:
            with httpx.Client(timeout=self.timeout_seconds, transport=self._transport) as client:
                response = client.get(self.endpoint, params={BOARD_PARAM: encoded_board})
                response.raise_for_status()
                payload = response.json()
        except httpx.HTTPError as e:
            raise ValidationTransportError(f"Volanie {url} zlyhalo: {e}") from e
        except ValueError as e:
            raise ValidationTransportError(f"Neplatný JSON z {url}: {e}") from e

        try:
            result = ValidationResponse.from_payload(payload)
        except ValueError as e:
            raise ValidationTransportError(f"Neplatná odpoveď z {url}: {e}") from e

        elapsed_ms = (time.perf_counter() - start) * 1000
        log.info(
            "[%s] validation_ok status=%d elapsed_ms=%.0f fields=%s",
            trace_id,
            response.status_code,
            elapsed_ms,
            [name for name, _ in result.present_fields()],
        )
        return result

    def deliver(self, sequence: int, response: ValidationResponse) -> bool:
        """Vykreslí odpoveď, ak nie je staršia než posledná vykreslená."""
        with self._lock:
            if sequence < self._floor:
                log.debug("stale_response dropped seq=%d floor=%d", sequence, self._floor)
                return False
            if self.sequence_responses:
                if sequence < self._latest_delivered:
                    log.debug(
                        "stale_response dropped seq=%d latest=%d", sequence, self._latest_delivered
                    )
                    return False
                self._latest_delivered = sequence
        self._display(response.render())
        return True

    def submit(self, encoded_board: str) -> None:
        """Fire-and-forget: chyba sa iba zaloguje, plocha ostane nezmenená."""
        sequence = self.next_sequence()
        try:
            response = self.fetch(encoded_board)
        except ValidationTransportError as e:
            log.error("Validácia zlyhala: %s", e)
            return
        self.deliver(sequence, response)
