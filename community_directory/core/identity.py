"""
Deterministic profile ids derived from Clerk user ids.

Clerk ids (``user_2a...``) are not UUIDs, but the profiles table keys on a
uuid column. The id is the first 16 bytes of SHA-1 over the DNS namespace
UUID followed by the Clerk id, stamped as a version 4 / RFC 4122 UUID. The
same Clerk id always maps to the same row.
"""

import hashlib
import uuid

PROFILE_NAMESPACE = uuid.UUID("6ba7b810-9dad-11d1-80b4-00c04fd430c8")


def profile_id_for(clerk_user_id: str) -> str:
    if not clerk_user_id:
        raise ValueError("clerk_user_id must be a non-empty string")
    digest = hashlib.sha1(PROFILE_NAMESPACE.bytes + clerk_user_id.encode("utf-8")).digest()
    return str(uuid.UUID(bytes=digest[:16], version=4))
