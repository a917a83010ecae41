# onesky/api/signer.py
# Created: 2026-10-19 10:12:41

import hashlib
import time
from typing import Optional, Tuple

def sign(secret: str, current_time: Optional[float] = None) -> Tuple[str, str]:
    """
    Compute the request signature expected by the service.

    The digest is md5 over the decimal Unix timestamp followed by the
    shared secret. Returns the lowercase hex digest and the timestamp string
    so both can be sent with the same request.
    """
    if current_time is None:
        current_time = time.time()
    timestamp = str(int(current_time))
    digest = hashlib.md5((timestamp + secret).encode("utf-8")).hexdigest()
    return digest, timestamp
