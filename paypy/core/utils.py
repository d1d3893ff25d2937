import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

# Asia/Tokyo has no daylight saving time.
TOKYO = timezone(timedelta(hours=9), 'Asia/Tokyo')


def generate_uuid() -> str:
    """Returns a random upper-case UUID4 string."""
    return str(uuid.uuid4()).upper()


def tokyo_timestamp(now: Optional[datetime] = None) -> str:
    """Formats a moment as YYYY-MM-DDTHH:mm:ss+0900 in Tokyo time."""
    if now is None:
        now = datetime.now(timezone.utc)
    elif now.tzinfo is None:
        now = now.replace(tzinfo=timezone.utc)
    return now.astimezone(TOKYO).strftime('%Y-%m-%dT%H:%M:%S+0900')


def extract_link_code(code: str) -> str:
    """Strips the pay.paypay.ne.jp prefix from a share link, if present."""
    code = code.strip()
    if '://' in code:
        code = code.rstrip('/').rsplit('/', 1)[-1]
    return code
