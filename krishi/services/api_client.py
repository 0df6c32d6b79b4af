"""Generic JSON CRUD access to the backing service."""

from typing import Any, Dict, Optional

from krishi.services.base_client import BaseServiceClient


class CoreAPIClient(BaseServiceClient):
    """JSON in, JSON out; same error taxonomy as the generation client."""

    async def get(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Any:
        response = await self.send("GET", endpoint, params=params)
        return self.parse_json(response)

    async def post(self, endpoint: str, data: Any) -> Any:
        response = await self.send("POST", endpoint, json_body=data)
        return self.parse_json(response)

    async def put(self, endpoint: str, data: Any) -> Any:
        response = await self.send("PUT", endpoint, json_body=data)
        return self.parse_json(response)

    async def delete(self, endpoint: str) -> Any:
        response = await self.send("DELETE", endpoint)
        if not response.content:
            return None
        return self.parse_json(response)
