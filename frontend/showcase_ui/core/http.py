# showcase_ui/core/http.py
from __future__ import annotations
from typing import Any, Dict, Optional, Tuple
import requests


# ========================
# Helpers
# ========================

def _api(base_url: str, path: str) -> str:
    return f"{base_url.rstrip('/')}/{path.lstrip('/')}"


# ========================
# Health Check
# ========================

def health(base_url: str, path: str = "/health", timeout: int = 5) -> Tuple[bool, str]:
    """
    Checks /health and returns (is_ok, message).
    """
    url = _api(base_url, path)
    try:
        r = requests.get(url, timeout=timeout)
        if r.ok:
            try:
                j = r.json()
                msg = str(j.get("status") or j.get("message") or j)
            except Exception:
                msg = (r.text or "ok")[:200]
            return True, msg
        else:
            return False, f"{r.status_code} {r.text[:200]}"
    except requests.RequestException as e:
        return False, str(e)


# ========================
# Generic Request Helpers
# ========================

def request(
    method: str,
    base_url: str,
    path: str,
    *,
    headers: Optional[Dict[str, str]] = None,
    params: Optional[Dict[str, Any]] = None,
    json: Any = None,
    data: Any = None,
    files: Any = None,
    timeout: float = 30,
) -> requests.Response:
    """
    Builds the URL and calls requests.request.
    Returns the Response as-is (no raise_for_status here).
    """
    url = _api(base_url, path)
    m = method.upper().strip()
    return requests.request(
        method=m,
        url=url,
        headers=headers,
        params=params,
        json=json,
        data=data,
        files=files,
        timeout=timeout,
    )


def error_message(resp: requests.Response) -> str:
    """Extracts the API's {"error": ...} message, falling back to the raw body."""
    try:
        body = resp.json()
    except ValueError:
        return f"HTTP {resp.status_code}: {(resp.text or '')[:200]}"
    if isinstance(body, dict):
        msg = body.get("error") or body.get("detail")
        if msg:
            return f"HTTP {resp.status_code}: {msg}"
    return f"HTTP {resp.status_code}"
