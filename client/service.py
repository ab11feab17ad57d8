# client/service.py

import logging
from typing import List, Optional

import httpx

from client.models import User

logger = logging.getLogger(__name__)


class UserService:
    """
    Issues GET requests against the users endpoint of the API.

    No retries and no caching: network errors and non-2xx responses are raised
    to the caller as httpx errors.
    """

    def __init__(self, base_url: str, client: Optional[httpx.AsyncClient] = None):
        self.users_url = base_url.rstrip("/") + "/users"
        self._client = client

    async def get_users(self) -> List[User]:
        # Nothing is sent until the coroutine is awaited
        if self._client is not None:
            return await self._fetch(self._client)

        async with httpx.AsyncClient() as client:
            return await self._fetch(client)

    async def _fetch(self, client: httpx.AsyncClient) -> List[User]:
        try:
            resp = await client.get(self.users_url)
            resp.raise_for_status()
        except httpx.HTTPError as e:
            logger.error("GET %s failed: %s", self.users_url, e)
            raise

        return [User.model_validate(item) for item in resp.json()]
