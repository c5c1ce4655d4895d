import logging

from httpx import AsyncClient, Response

logger = logging.getLogger(__name__)


class EchoreadClient:
    """Calls the Echoread API in-process and turns each response into a
    value an MCP tool can return as-is.

    4xx responses become ``{"error": True, "status": ..., "detail": ...}``
    so the model sees why a call was refused; 5xx responses raise.
    """

    def __init__(self, http: AsyncClient) -> None:
        self.http = http

    async def request(self, method: str, path: str, **kwargs) -> dict | list:
        resp = await self.http.request(method, path, **kwargs)
        return self._handle(method, path, resp)

    async def get(self, path: str, **kwargs) -> dict | list:
        return await self.request("GET", path, **kwargs)

    async def post(self, path: str, **kwargs) -> dict | list:
        return await self.request("POST", path, **kwargs)

    async def put(self, path: str, **kwargs) -> dict | list:
        return await self.request("PUT", path, **kwargs)

    async def delete(self, path: str, **kwargs) -> dict | list:
        return await self.request("DELETE", path, **kwargs)

    def _handle(self, method: str, path: str, resp: Response) -> dict | list:
        if resp.status_code == 204:
            return {"ok": True}
        if resp.status_code >= 500:
            logger.error("%s %s failed with %d", method, path, resp.status_code)
            raise RuntimeError(f"Server error {resp.status_code}: {resp.text}")
        if resp.status_code >= 400:
            detail = resp.json().get("detail", resp.text)
            logger.debug("%s %s refused (%d): %s", method, path, resp.status_code, detail)
            return {"error": True, "status": resp.status_code, "detail": detail}
        return resp.json()


def is_error(result: dict | list) -> bool:
    return isinstance(result, dict) and bool(result.get("error"))
