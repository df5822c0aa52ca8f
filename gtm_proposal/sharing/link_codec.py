"""
Link Codec

Packs a whole ProposalDocument into a token that can be embedded verbatim in
a URL fragment (`#state=<token>`):

    canonical JSON -> percent-escaping (encodeURIComponent rules)
                   -> URL-safe base64 without padding

The percent-escaping step turns arbitrary Unicode into ASCII before the
base64 step, so user text in any script survives the round trip.
Decoding never raises: a bad token yields None and the caller falls back to
the next document source.
"""

import base64
import binascii
import logging
from typing import Optional
from urllib.parse import quote, unquote, urldefrag, urlsplit

from ..core.document import ProposalDocument
from .serialization import dumps_canonical, parse_document_or_none

logger = logging.getLogger(__name__)

FRAGMENT_KEY = "state"

# Characters encodeURIComponent leaves alone, beyond quote()'s own "_.-~"
_URI_COMPONENT_SAFE = "!*'()"


def encode_document(document: ProposalDocument) -> str:
    """Serialize a document into a URL-safe token."""
    escaped = quote(dumps_canonical(document), safe=_URI_COMPONENT_SAFE)
    token = base64.urlsafe_b64encode(escaped.encode("ascii")).decode("ascii")
    return token.rstrip("=")


def decode_token(token: str) -> Optional[ProposalDocument]:
    """
    Invert `encode_document`.

    Returns None for malformed tokens, unparseable content, structural
    mismatches and version mismatches. Tokens in the standard base64
    alphabet are accepted too.
    """
    token = (token or "").strip()
    if not token:
        return None

    try:
        padded = token + "=" * (-len(token) % 4)
        escaped = base64.urlsafe_b64decode(padded).decode("ascii")
        text = unquote(escaped, errors="strict")
    except (binascii.Error, ValueError) as e:
        logger.warning(f"Failed to decode shared state: {e}")
        return None

    return parse_document_or_none(text, source="shared link")


def build_share_url(
    base_url: str,
    document: ProposalDocument,
    fragment_key: str = FRAGMENT_KEY
) -> str:
    """Build `origin + path + "#state=" + token`, replacing any existing fragment."""
    return f"{urldefrag(base_url).url}#{fragment_key}={encode_document(document)}"


def token_from_location(location: Optional[str], fragment_key: str = FRAGMENT_KEY) -> Optional[str]:
    """
    Extract the state token from a full URL, a `#state=...` fragment or a
    bare `state=...` string. Returns None when there is no state fragment.
    """
    if not location:
        return None

    if "#" in location:
        fragment = urlsplit(location).fragment
    else:
        fragment = location

    prefix = f"{fragment_key}="
    if not fragment.startswith(prefix):
        return None
    return fragment[len(prefix):] or None
