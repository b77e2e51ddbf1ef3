"""
Share link encoding.

A configuration travels in a single query parameter: compact JSON,
percent-encoded like JavaScript's ``encodeURIComponent``, then URL-safe
base64 without padding. Decoding also accepts links produced with the
standard base64 alphabet, including ones where ``+`` was turned into a space
by query-string parsing.

None of the public functions raise; failures come back as ``""`` or None.
"""

import base64
import binascii
import json
import logging
from typing import Optional
from urllib.parse import quote, unquote

import httpx

from ..constants import MAX_LINK_LENGTH, SHARE_PARAM
from .config import PromptConfig, parse_json


logger = logging.getLogger(__name__)


# Characters encodeURIComponent leaves unescaped besides alphanumerics
URI_COMPONENT_SAFE = "-_.!~*'()"


def encode_payload(config: PromptConfig) -> str:
    """Encode a configuration as a share-link parameter value.

    Raises:
        TypeError: If the configuration holds values JSON cannot represent.
        UnicodeError: If the text contains unpaired surrogates.
    """
    text = json.dumps(config.to_dict(), ensure_ascii=False, separators=(",", ":"))
    percent_encoded = quote(text, safe=URI_COMPONENT_SAFE)
    token = base64.urlsafe_b64encode(percent_encoded.encode("ascii"))
    return token.decode("ascii").rstrip("=")


def decode_payload(value: str) -> str:
    """Reverse encode_payload, returning the JSON text.

    Raises:
        binascii.Error: If value is not base64.
        UnicodeDecodeError: If the decoded bytes are not percent-encoded UTF-8.
    """
    token = value.strip().replace(" ", "+").rstrip("=")
    token += "=" * (-len(token) % 4)
    percent_encoded = base64.urlsafe_b64decode(token).decode("ascii")
    return unquote(percent_encoded, errors="strict")


def encode_to_link(config: PromptConfig, base_url: str) -> str:
    """Build a share link carrying the configuration.

    Args:
        config: The configuration to share.
        base_url: Origin and path of the tool; an existing ``c`` parameter
            is replaced.

    Returns:
        The link, or an empty string if encoding failed.
    """
    try:
        payload = encode_payload(config)
        url = httpx.URL(base_url).copy_set_param(SHARE_PARAM, payload)
    except (TypeError, ValueError, UnicodeError, httpx.InvalidURL) as e:
        logger.debug(f"Could not encode share link: {e}")
        return ""
    return str(url)


def decode_from_link(url: str) -> Optional[PromptConfig]:
    """Read a configuration back from a share link.

    Args:
        url: A link produced by encode_to_link (or by the browser tool).

    Returns:
        The configuration, or None if the URL, the parameter, its encoding
        or the JSON inside is invalid.
    """
    try:
        value = httpx.URL(url).params.get(SHARE_PARAM)
        if not value:
            logger.debug(f"Share link has no '{SHARE_PARAM}' parameter")
            return None
        text = decode_payload(value)
    except (TypeError, ValueError, UnicodeError, binascii.Error, httpx.InvalidURL) as e:
        logger.debug(f"Could not decode share link: {e}")
        return None
    return parse_json(text)


def is_link_too_long(config: PromptConfig, base_url: str) -> bool:
    """Whether the share link exceeds the cross-browser length budget.

    A configuration that cannot be encoded has no link and is reported as
    not too long; callers see the failure from encode_to_link.
    """
    return len(encode_to_link(config, base_url)) > MAX_LINK_LENGTH
