"""Phone number utilities"""

import re
from typing import Optional

# +7 / 8 prefix, then 3-3-2-2 digits with optional spaces, dashes or parentheses
RU_PHONE_PATTERN = re.compile(r"(\+7|8)[\s(-]*\d{3}[\s)-]*\d{3}[\s-]*\d{2}[\s-]*\d{2}")


def extract_phone(text: str) -> Optional[str]:
    """Return the first Russian-format phone number in text, as written"""
    match = RU_PHONE_PATTERN.search(text)
    return match.group(0) if match else None
