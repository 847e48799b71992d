import requests
from src import config
from src.logger import logger


class DoorClientError(Exception):
    def __init__(self, message: str, status_code: int = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class DoorClient:
    """Thin HTTP client for the door status endpoints."""

    def __init__(self, base_url: str = config.DOOR_API_URL, timeout: float = 2, session=None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def get_status(self) -> dict:
        return self._request("GET", "/status")

    def set_status(self, is_open: bool) -> dict:
        return self._request("POST", "/set-status", json={"isOpen": is_open})

    def open(self) -> dict:
        return self.set_status(True)

    def close(self) -> dict:
        return self.set_status(False)

    def _request(self, method: str, path: str, **kwargs) -> dict:
        url = f"{self.base_url}{path}"
        try:
            resp = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            logger.error(f"Door API unreachable at {url}: {e}")
            raise DoorClientError(f"Could not reach door API at {url}") from e

        try:
            data = resp.json()
        except ValueError:
            data = {}

        if not resp.ok:
            message = data.get("message") if isinstance(data, dict) else None
            raise DoorClientError(
                message or f"Door API returned HTTP {resp.status_code}",
                status_code=resp.status_code,
            )
        return data
