from __future__ import annotations
import json
import requests
from typing import Any, Dict, Iterable, Optional, Tuple
from ..config import REQUEST_TIMEOUT, RELAY_URL
from ..session import PendingFile

SUBMIT_PATH = "/api/submit-brief"

def submit_brief(payload: Dict[str, Any], destination: Optional[str],
                 files: Iterable[PendingFile] = ()) -> Tuple[bool, Optional[str]]:
    data = {"formData": json.dumps(payload, ensure_ascii=False), "driveLink": destination or ""}
    parts = [("files", (f.name, f.data, f.mime)) for f in files]
    try:
        url = RELAY_URL.rstrip("/") + SUBMIT_PATH
        resp = requests.post(url, data=data, files=parts or None, timeout=REQUEST_TIMEOUT)
    except requests.RequestException as e:
        return False, f"Relay unreachable: {e}"
    if resp.status_code >= 400:
        try:
            body = resp.json()
        except ValueError:
            body = None
        if isinstance(body, dict) and body.get("message"):
            return False, f"{body.get('error', resp.status_code)}: {body['message']}"
        return False, f"{resp.status_code} {resp.text[:200]}"
    return True, None
