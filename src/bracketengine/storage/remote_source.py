"""Remote baseline snapshot of the tournament document."""

# Bracket Engine
# Copyright (C) 2025  Bracket Engine developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

import time
from typing import Optional

import httpx

from bracketengine.constants import (
    CACHE_BUSTING_PARAM,
    DEFAULT_REMOTE_TIMEOUT,
    DEFAULT_REMOTE_URL,
)
from bracketengine.exceptions import RemoteSourceException
from bracketengine.type_hints import RawState
from bracketengine.utils import setup_logger

logger = setup_logger(__name__)


class RemoteSource:
    """Fetches the published tournament snapshot over HTTP.

    Each request carries a ``ts=<epoch millis>`` query parameter and a
    ``no-store`` cache directive so intermediaries never serve a stale copy.
    A custom ``httpx.Client`` can be injected, e.g. one built on
    ``httpx.MockTransport`` in tests.
    """

    def __init__(
        self,
        url: str = DEFAULT_REMOTE_URL,
        timeout: float = DEFAULT_REMOTE_TIMEOUT,
        client: Optional[httpx.Client] = None,
    ):
        self.url = url
        self.timeout = timeout
        self._client = client

    def _cache_busting_params(self) -> dict:
        return {CACHE_BUSTING_PARAM: str(int(time.time() * 1000))}

    def fetch(self) -> RawState:
        """Download the snapshot.

        Returns:
            The raw, not yet normalized, document

        Raises:
            RemoteSourceException: On transport errors, non-success
                responses, or a body that is not a JSON object
        """
        client = self._client or httpx.Client(timeout=self.timeout)
        try:
            response = client.get(
                self.url,
                params=self._cache_busting_params(),
                headers={"Cache-Control": "no-store"},
            )
        except httpx.HTTPError as e:
            raise RemoteSourceException(
                f"Impossible de charger {self.url} : {e}"
            ) from e
        finally:
            if self._client is None:
                client.close()

        if not response.is_success:
            raise RemoteSourceException(
                f"Impossible de charger data.json : {response.status_code}"
            )

        try:
            data = response.json()
        except ValueError as e:
            raise RemoteSourceException(
                f"Réponse invalide depuis {self.url} : {e}"
            ) from e

        if not isinstance(data, dict):
            raise RemoteSourceException(
                f"Réponse invalide depuis {self.url} : objet JSON attendu"
            )

        logger.info(f"Fetched tournament snapshot from {self.url}")
        return data
