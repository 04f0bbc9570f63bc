from __future__ import annotations
from typing import Any, Dict, Optional

import requests

from featureflow_mcp import __version__
from featureflow_mcp.core.request import ApiRequest


class FeatureflowAPIError(RuntimeError):
    def __init__(self, status: int, payload: Any) -> None:
        super().__init__(f"Request failed with status code {status}")
        self.status = status
        self.payload = payload


def read_payload(resp: requests.Response) -> Any:
    if not resp.content:
        return ""
    try:
        return resp.json()
    except ValueError:
        return resp.text


def encode_params(params: Optional[Dict[str, Any]]) -> Optional[Dict[str, Any]]:
    # requests would send True as "True"
    if params is None:
        return None
    return {
        k: ("true" if v else "false") if isinstance(v, bool) else v
        for k, v in params.items()
    }


class FeatureflowAPI:
    def __init__(self, base_url: str, token: str, timeout: float = 30) -> None:
        self.base = base_url.rstrip("/")
        self.token = (token or "").strip()
        self.timeout = timeout
        self.headers = {
            "Authorization": f"Bearer {self.token}",
            "Content-Type": "application/json",
            "Accept": "application/json",
            "User-Agent": f"featureflow-mcp/{__version__}",
        }

    def url(self, path: str) -> str:
        return f"{self.base}/{path.lstrip('/')}"

    def _req(self, method: str, path: str, **kwargs) -> requests.Response:
        r = requests.request(method, self.url(path), headers=self.headers, timeout=self.timeout, **kwargs)
        if r.status_code >= 400:
            raise FeatureflowAPIError(r.status_code, read_payload(r))
        return r

    def send(self, req: ApiRequest) -> Any:
        kwargs: Dict[str, Any] = {}
        if req.params is not None:
            kwargs["params"] = encode_params(req.params)
        if req.body is not None:
            kwargs["json"] = req.body
        r = self._req(req.method, req.path, **kwargs)
        return read_payload(r)
