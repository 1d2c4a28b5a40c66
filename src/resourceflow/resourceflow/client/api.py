from __future__ import annotations

import logging
import time
from typing import Any, Dict, Optional

import requests

from .errors import ApiError
from .retry import RetryPolicy

logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://localhost:3001/api"
DEFAULT_TIMEOUT = 10.0


class ApiClient:
    """requests-based client for the ResourceFlow REST API."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        retry: Optional[RetryPolicy] = None,
    ):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self._session = session or requests.Session()
        self._retry = retry or RetryPolicy()

        self.team_members = Resource(self, "/team-members")
        self.projects = Resource(self, "/projects")
        self.holidays = Resource(self, "/holidays")
        self.vacations = Resource(self, "/vacations")
        self.allocations = Resource(self, "/project-allocations")
        self.settings = SettingsApi(self)
        self.data = DataApi(self)
        self.planner = PlannerApi(self)
        self.utilization = UtilizationApi(self)

    def _url(self, path: str) -> str:
        return f"{self.base_url}/{path.lstrip('/')}"

    def _send(self, method: str, path: str, *, params=None, json=None, timeout=None) -> requests.Response:
        url = self._url(path)
        try:
            response = self._session.request(method, url, params=params, json=json, timeout=timeout or self.timeout)
        except requests.exceptions.Timeout:
            raise ApiError("Request timeout", url=url)
        except requests.exceptions.RequestException as e:
            raise ApiError(f"Failed to connect to server: {e}", url=url)

        if not response.ok:
            raise _error_from_response(response, url)
        return response

    def request(self, method: str, path: str, *, params: Optional[Dict[str, Any]] = None, json: Any = None) -> Any:
        """Send with retry and return the decoded JSON body (None for an empty body)."""
        clean_params = {k: v for k, v in (params or {}).items() if v is not None} or None
        response = self._retry.run(lambda: self._send(method, path, params=clean_params, json=json))
        if not response.content:
            return None
        return response.json()

    def request_bytes(self, path: str, *, params: Optional[Dict[str, Any]] = None) -> bytes:
        return self._retry.run(lambda: self._send("GET", path, params=params)).content

    def health_check(self) -> bool:
        try:
            self._send("GET", "/hello")
            return True
        except ApiError as e:
            logger.warning("Health check failed: %s", e.message)
            return False

    def test_connection(self, timeout: float = 5.0) -> Dict[str, Any]:
        started = time.perf_counter()
        try:
            self._send("GET", "/hello", timeout=timeout)
            connected = True
        except ApiError:
            connected = False
        latency_ms = round((time.perf_counter() - started) * 1000)
        return {"connected": connected, "latency": latency_ms}


def _error_from_response(response: requests.Response, url: str) -> ApiError:
    body: Dict[str, Any] = {}
    try:
        parsed = response.json()
        if isinstance(parsed, dict):
            body = parsed
    except ValueError:
        pass
    message = body.get("message") or body.get("error") or f"HTTP {response.status_code}"
    return ApiError(
        message,
        status=response.status_code,
        error=body.get("error"),
        details=body.get("details"),
        url=url,
    )


class Resource:
    """CRUD wrapper for one collection endpoint."""

    def __init__(self, client: ApiClient, path: str):
        self._client = client
        self._path = path

    def list(self, **params) -> list:
        return self._client.request("GET", self._path, params=params)

    def get(self, item_id: int) -> dict:
        return self._client.request("GET", f"{self._path}/{int(item_id)}")

    def create(self, data: dict) -> dict:
        return self._client.request("POST", self._path, json=data)

    def update(self, item_id: int, data: dict) -> dict:
        return self._client.request("PUT", f"{self._path}/{int(item_id)}", json=data)

    def delete(self, item_id: int) -> dict:
        return self._client.request("DELETE", f"{self._path}/{int(item_id)}")


class SettingsApi:
    def __init__(self, client: ApiClient):
        self._client = client

    def get(self) -> dict:
        return self._client.request("GET", "/settings")

    def update(self, data: dict) -> dict:
        return self._client.request("PUT", "/settings", json=data)


class DataApi:
    def __init__(self, client: ApiClient):
        self._client = client

    def export(self) -> dict:
        return self._client.request("GET", "/export")

    def export_excel(self) -> bytes:
        return self._client.request_bytes("/export", params={"format": "xlsx"})

    def import_data(self, envelope: dict, *, mode: str = "append") -> dict:
        return self._client.request("POST", "/import", params={"mode": mode}, json=envelope)

    def stats(self) -> dict:
        return self._client.request("GET", "/data/stats")


class PlannerApi:
    def __init__(self, client: ApiClient):
        self._client = client

    def drop(self, *, employee_id: int, project_id: int, day: str, hours_per_day: Optional[float] = None) -> dict:
        body: Dict[str, Any] = {"employeeId": employee_id, "projectId": project_id, "date": day}
        if hours_per_day is not None:
            body["hoursPerDay"] = hours_per_day
        return self._client.request("POST", "/planner/drop", json=body)

    def move(self, allocation_id: int, day_offset: int) -> dict:
        return self._client.request("POST", f"/planner/allocations/{int(allocation_id)}/move", json={"dayOffset": day_offset})

    def resize(self, allocation_id: int, *, edge: str, day: str) -> dict:
        return self._client.request(
            "POST", f"/planner/allocations/{int(allocation_id)}/resize", json={"edge": edge, "date": day}
        )

    def cell(self, *, employee_id: int, day: str) -> dict:
        return self._client.request("GET", "/planner/cell", params={"employeeId": employee_id, "date": day})


class UtilizationApi:
    def __init__(self, client: ApiClient):
        self._client = client

    def team(self, month: Optional[str] = None) -> list:
        return self._client.request("GET", "/utilization", params={"month": month})

    def member(self, member_id: int, month: Optional[str] = None) -> dict:
        return self._client.request("GET", f"/utilization/members/{int(member_id)}", params={"month": month})

    def timeline(self, member_id: int, *, start: str, months: int = 6) -> list:
        return self._client.request(
            "GET", f"/utilization/members/{int(member_id)}", params={"start": start, "months": months}
        )

    def projects(self, month: Optional[str] = None) -> list:
        return self._client.request("GET", "/utilization/projects", params={"month": month})

    def daily(self, *, start: str, end: str, employee_id: Optional[int] = None) -> dict:
        return self._client.request(
            "GET", "/utilization/daily", params={"start": start, "end": end, "employeeId": employee_id}
        )

    def dashboard(self, month: Optional[str] = None) -> dict:
        return self._client.request("GET", "/dashboard", params={"month": month})
