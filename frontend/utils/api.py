from typing import Optional
from urllib.parse import quote

import requests


class APIClient:
    """Simple API client for backend requests."""

    def __init__(self, base_url: str, timeout: int = 30):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    def _parse_json(self, resp) -> Optional[dict]:
        """Safely parse JSON, return None or text on failure."""
        if resp is None or not resp.text:
            return None
        try:
            return resp.json()
        except ValueError:
            # Non-JSON response
            return {"raw": resp.text}

    def _get(self, endpoint: str) -> dict:
        """Make GET request."""
        try:
            resp = requests.get(f"{self.base_url}{endpoint}", timeout=self.timeout)
            return {"status": resp.status_code, "data": self._parse_json(resp)}
        except requests.exceptions.ConnectionError:
            return {"status": 0, "error": "Cannot connect to backend"}
        except requests.exceptions.RequestException as e:
            return {"status": 0, "error": str(e)}

    def _post(self, endpoint: str, data: dict) -> dict:
        """Make POST request with a JSON body."""
        try:
            resp = requests.post(
                f"{self.base_url}{endpoint}",
                json=data,
                timeout=self.timeout,
            )
            return {"status": resp.status_code, "data": self._parse_json(resp)}
        except requests.exceptions.ConnectionError:
            return {"status": 0, "error": "Cannot connect to backend"}
        except requests.exceptions.RequestException as e:
            return {"status": 0, "error": str(e)}

    @staticmethod
    def _user_path(action: str, username: str) -> str:
        return f"/control/{action}/{quote(username, safe='')}"

    # Auth endpoints
    def login(self, username: str, password: str) -> dict:
        """Check credentials."""
        return self._post("/login", {"username": username, "password": password})

    def register(self, username: str, password: str) -> dict:
        """Register new user."""
        return self._post("/register", {"username": username, "password": password})

    # Control panel endpoints
    def open_control_panel(self, admin_password: str) -> dict:
        """List users (requires admin password)."""
        return self._post("/control", {"admin_password": admin_password})

    def get_user(self, admin_password: str, username: str) -> dict:
        """Fetch one user for the edit form."""
        return self._post(self._user_path("users", username), {"admin_password": admin_password})

    def edit_user(
        self,
        admin_password: str,
        username: str,
        new_username: Optional[str] = None,
        new_password: Optional[str] = None,
    ) -> dict:
        """Rename a user and/or change their password."""
        return self._post(self._user_path("edit", username), {
            "admin_password": admin_password,
            "username": new_username or None,
            "password": new_password or None,
        })

    def delete_user(self, admin_password: str, username: str) -> dict:
        """Delete a user."""
        return self._post(self._user_path("delete", username), {"admin_password": admin_password})

    # Health endpoint
    def health(self) -> dict:
        """Check API health."""
        return self._get("/health")


def error_message(result: dict, default: str) -> str:
    """Extract a readable error from an APIClient result."""
    data = result.get("data") or {}
    detail = data.get("detail")
    if isinstance(detail, list):
        # Validation errors: [{"loc": [...], "msg": "...", ...}, ...]
        detail = "; ".join(
            str(item.get("msg", item)) if isinstance(item, dict) else str(item)
            for item in detail
        )
    return detail or result.get("error") or default
