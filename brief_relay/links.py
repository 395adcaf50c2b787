"""Reversible share-link tokens for the storage-folder reference.

A token is plain URL-safe base64 of the UTF-8 reference. It is not signed and
does not expire; anyone holding the link can read the reference back.
"""
import base64, binascii
from typing import Mapping, Optional
from urllib.parse import urlencode

QUERY_PARAM = "d"
FORM_PATH = "/form"

def encode(reference: str) -> str:
    raw = base64.urlsafe_b64encode(reference.encode("utf-8"))
    return raw.decode("ascii").rstrip("=")

def decode(token: Optional[str]) -> Optional[str]:
    if token is None:
        return None
    # links built by btoa() use the standard alphabet, and "+" turns into a
    # space once the query string is parsed
    cleaned = token.strip().replace(" ", "+").replace("+", "-").replace("/", "_").rstrip("=")
    cleaned += "=" * (-len(cleaned) % 4)
    try:
        data = base64.b64decode(cleaned, altchars=b"-_", validate=True)
        return data.decode("utf-8")
    except (binascii.Error, ValueError):
        return None

def build_share_link(base_url: str, reference: str) -> str:
    query = urlencode({QUERY_PARAM: encode(reference)})
    return f"{base_url.rstrip('/')}{FORM_PATH}?{query}"

def reference_from_query(params: Mapping[str, str]) -> Optional[str]:
    return decode(params.get(QUERY_PARAM))
