from __future__ import annotations

import re

from ..core.constants import DEFAULT_STUDENT_IMAGES, EMAIL_DOMAIN

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def email_local_part(name: str) -> str:
    """Given-name part of a display name, lowercased with non-alphanumerics removed.

    "Mary Ann O'Brien" -> "maryann", "John Doe" -> "john", "Cher" -> "cher".
    """

    words = name.split()
    given = words[:-1] if len(words) > 1 else words
    return _NON_ALNUM.sub("", "".join(given).lower())


def email_from_name(name: str, *, domain: str = EMAIL_DOMAIN, fallback: str = "") -> str:
    local = email_local_part(name) or _NON_ALNUM.sub("", fallback.lower())
    return f"{local}@{domain}"


def default_image(count: int, images: tuple[str, ...] = DEFAULT_STUDENT_IMAGES) -> str:
    return images[count % len(images)]
