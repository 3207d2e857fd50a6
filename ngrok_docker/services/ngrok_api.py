"""
ngrok inspection API client for fetching tunnel status
"""
import json
import logging
from typing import Any, Dict, Optional

import requests
from pydantic import ValidationError

from ..config import (
    API_TIMEOUT,
    CONTAINER_NAME,
    DOCKER_BIN,
    INTERNAL_API_ADDRESS,
    TUNNELS_ENDPOINT,
)
from ..exceptions import CommandError, TunnelStatusError
from ..models.schemas import TunnelStatus
from .commands import CommandRunner, SubprocessRunner

logger = logging.getLogger(__name__)


class NgrokApiClient:
    """
    Client for querying the ngrok inspection API.

    By default the API is reached through `docker exec <container> curl`, since
    the container does not publish port 4040. Passing api_url queries a
    published endpoint over HTTP instead.
    """

    def __init__(
        self,
        container_name: str = CONTAINER_NAME,
        api_url: Optional[str] = None,
        runner: Optional[CommandRunner] = None,
        docker_bin: str = DOCKER_BIN,
        timeout: int = API_TIMEOUT
    ):
        self.container_name = container_name
        self.base_url = api_url.rstrip("/") if api_url else None
        self.runner = runner or SubprocessRunner()
        self.docker_bin = docker_bin
        self.timeout = timeout

    def _exec_request(self, endpoint: str) -> Dict[str, Any]:
        """Fetch an endpoint with curl inside the container"""
        args = [
            self.docker_bin, "exec", "-i", self.container_name,
            "curl", "-s", f"{INTERNAL_API_ADDRESS}{endpoint}",
        ]
        try:
            content = self.runner.run(args)
        except CommandError as e:
            raise TunnelStatusError(f"Could not query ngrok inside {self.container_name}: {e}") from e
        try:
            return json.loads(content)
        except ValueError as e:
            raise TunnelStatusError(f"ngrok API returned invalid JSON: {content[:80]!r}") from e

    def _http_request(self, endpoint: str) -> Dict[str, Any]:
        """Fetch an endpoint from a published ngrok API"""
        try:
            response = requests.get(f"{self.base_url}{endpoint}", timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.ConnectionError as e:
            raise TunnelStatusError(f"Could not connect to ngrok API at {self.base_url}") from e
        except requests.exceptions.Timeout as e:
            raise TunnelStatusError("Timeout connecting to ngrok API") from e
        except requests.exceptions.HTTPError as e:
            raise TunnelStatusError(f"HTTP error from ngrok API: {e}") from e
        except requests.exceptions.RequestException as e:
            raise TunnelStatusError(f"Request to ngrok API failed: {e}") from e
        try:
            return response.json()
        except ValueError as e:
            raise TunnelStatusError("ngrok API returned invalid JSON") from e

    def _request(self, endpoint: str) -> Dict[str, Any]:
        if self.base_url:
            return self._http_request(endpoint)
        return self._exec_request(endpoint)

    def get_status(self) -> TunnelStatus:
        """
        Get the list of active tunnels.

        Returns TunnelStatus with one TunnelInfo per tunnel, each carrying at
        least public_url. Raises TunnelStatusError if the payload does not
        match that shape.
        """
        data = self._request(TUNNELS_ENDPOINT)
        try:
            return TunnelStatus.model_validate(data)
        except ValidationError as e:
            raise TunnelStatusError(f"Unexpected ngrok API payload: {e}") from e

    def get_public_url(self) -> str:
        """Public URL of the first tunnel"""
        status = self.get_status()
        if not status.tunnels:
            raise TunnelStatusError("ngrok is running but reports no tunnels yet")
        return status.tunnels[0].public_url
