# src/etag/core/generator.py
"""Tag body generation.

Two paths:
1. Metadata: hex(size)-hex(mtime_ms). O(1), no hashing. Trusts the
   filesystem: same size and mtime means same body, even if bytes differ.
2. Content: hex(byte_length)-base64(sha1)[:27]. Empty content short-circuits
   to a precomputed constant.

The body is unquoted and carries no weak prefix; see formatter.py.
"""

from __future__ import annotations

import base64
import hashlib

from etag.contracts.entities import Content, MetadataDescriptor

# First 27 base64 characters of a 20-byte SHA-1 digest (the unpadded prefix)
DIGEST_LENGTH = 27

# generate_body(Content(b"")), precomputed
EMPTY_BODY = "0-2jmj7l5rSw0yVb/vlWAYkK/YBwk"

if "sha1" not in hashlib.algorithms_available:
    raise ImportError("etag requires the SHA-1 digest, which this Python build does not provide")


def _hex(value: int) -> str:
    return format(value, "x")


def metadata_body(descriptor: MetadataDescriptor) -> str:
    """Body for a stat descriptor. ino and ctime are ignored."""
    return f"{_hex(descriptor.size)}-{_hex(descriptor.mtime_ms)}"


def content_body(content: Content) -> str:
    """Body for raw content: hex byte length plus truncated SHA-1.

    SHA-1 here is a fast fingerprint, not an integrity check, so it is
    requested with usedforsecurity=False (keeps FIPS builds working).
    """
    if len(content) == 0:
        return EMPTY_BODY

    digest = hashlib.sha1(content.data, usedforsecurity=False).digest()
    encoded = base64.b64encode(digest).decode("ascii")[:DIGEST_LENGTH]
    return f"{_hex(len(content))}-{encoded}"


def generate_body(entity: Content | MetadataDescriptor) -> str:
    """Compute the unquoted validator body for a classified entity."""
    if isinstance(entity, MetadataDescriptor):
        return metadata_body(entity)
    return content_body(entity)
