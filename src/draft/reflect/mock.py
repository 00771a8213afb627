"""Mock synthesis from catalogued items.

``prepare_mock`` rebuilds a representative instance of an ``Item`` tree.
With the default ``example`` strategy the observed values are replayed, so
the same catalogue always yields the same mock. The ``smart`` strategy
generates fresh values from field-name heuristics (emails, names, ids,
dates ...) using a seeded generator, which keeps it reproducible too.
"""

import random
import string
from datetime import datetime, timedelta, timezone
from typing import Any
from uuid import UUID

from draft.config import MockStrategy
from draft.reflect.item import Item, Options

# ──────────────────────────────────────────────────────
# FIELD-NAME HEURISTIC PATTERNS
# First match wins. Each semantic type lists the item types it may replace.
# ──────────────────────────────────────────────────────

_FIELD_PATTERNS = [
    (["uuid", "guid"],                                  "uuid"),
    (["id"],                                            "id"),
    (["email", "e_mail", "mail"],                       "email"),
    (["phone", "mobile", "tel"],                        "phone"),
    (["first_name", "firstname"],                       "first_name"),
    (["last_name", "lastname", "surname"],              "last_name"),
    (["full_name", "display_name", "username",
      "user_name", "author", "owner", "name"],          "full_name"),
    (["avatar", "photo", "image", "thumbnail",
      "picture", "logo", "icon"],                       "image_url"),
    (["url", "link", "href", "website", "uri"],         "url"),
    (["created_at", "created", "registered"],           "datetime_past"),
    (["updated_at", "modified", "modified_at",
      "last_seen", "last_login"],                       "datetime_recent"),
    (["expires", "expires_at", "expiry",
      "valid_until", "deadline"],                       "datetime_future"),
    (["date", "time", "timestamp", "datetime"],         "datetime_past"),
    (["price", "cost", "amount", "total",
      "fee", "balance", "discount"],                    "money"),
    (["currency", "currency_code"],                     "currency"),
    (["count", "quantity", "qty", "size",
      "limit", "offset", "page", "age"],                "positive_int"),
    (["title", "subject", "headline"],                  "title"),
    (["description", "summary", "bio", "about"],        "description"),
    (["status", "state"],                               "status"),
    (["city"],                                          "city"),
    (["country", "country_code"],                       "country"),
    (["token", "access_token", "refresh_token",
      "api_key", "secret", "session_id"],               "token"),
    (["ip", "ip_address", "client_ip"],                 "ipv4"),
]

_SEMANTIC_TYPES = {
    "uuid": ("string",),
    "id": ("integer", "string"),
    "email": ("string",),
    "phone": ("string",),
    "first_name": ("string",),
    "last_name": ("string",),
    "full_name": ("string",),
    "image_url": ("string",),
    "url": ("string",),
    "datetime_past": ("string",),
    "datetime_recent": ("string",),
    "datetime_future": ("string",),
    "money": ("number", "integer"),
    "currency": ("string",),
    "positive_int": ("integer",),
    "title": ("string",),
    "description": ("string",),
    "status": ("string",),
    "city": ("string",),
    "country": ("string",),
    "token": ("string",),
    "ipv4": ("string",),
}

_FIRST_NAMES = ["Aarav", "Sophia", "Liam", "Aisha", "Mateo", "Yuki", "Oliver", "Mei", "Noah", "Zara"]
_LAST_NAMES = ["Patel", "Kim", "Garcia", "Chen", "Smith", "Tanaka", "Singh", "Johnson", "Ali", "Lee"]
_DOMAINS = ["example.com", "example.org", "mail.dev", "company.io"]
_CITIES = ["London", "Tokyo", "Berlin", "Toronto", "Sydney", "Seoul", "Paris", "Austin"]
_COUNTRIES = ["US", "GB", "JP", "IN", "DE", "CA", "AU", "FR"]
_CURRENCIES = ["USD", "EUR", "GBP", "JPY", "INR"]
_STATUSES = ["active", "pending", "inactive", "completed"]
_TITLES = ["Getting Started", "Quarterly Report", "Release Notes", "Project Update"]
_DESCRIPTIONS = [
    "A short description of the resource.",
    "Generated from the recorded example.",
    "Details about this entity.",
]

_ANCHOR = datetime(2024, 1, 1, tzinfo=timezone.utc)

_DEFAULTS = {
    "string": "",
    "integer": 0,
    "number": 0.0,
    "boolean": False,
}


def prepare_mock(item: Item, options: Options | None = None) -> Any:
    """Build a fresh value shaped like ``item``."""
    options = options or Options()
    rng = random.Random(options.mock_seed)
    smart = options.mock_strategy == MockStrategy.SMART
    return _build(item, rng, smart)


def _build(item: Item, rng: random.Random, smart: bool) -> Any:
    if item.type == "object":
        return {child.name: _build(child, rng, smart) for child in item.nested}

    if item.type == "array":
        if not item.nested:
            return []
        element = item.nested[0]
        if smart and not element.name:
            element = element.model_copy(update={"name": item.name})
        return [_build(element, rng, smart)]

    if smart and item.name:
        value = _smart_value(item, rng)
        if value is not None:
            return value

    if item.example is not None:
        return item.example
    return _DEFAULTS.get(item.type)


def detect_semantic_type(field_name: str) -> str:
    """Return the semantic type for a field name, or ``"unknown"``."""
    lower = field_name.lower().strip()
    for patterns, semantic_type in _FIELD_PATTERNS:
        for pattern in patterns:
            if lower == pattern:
                return semantic_type
            if lower.endswith(f"_{pattern}") or lower.startswith(f"{pattern}_") or f"_{pattern}_" in lower:
                return semantic_type
    return "unknown"


def _smart_value(item: Item, rng: random.Random) -> Any:
    sem_type = detect_semantic_type(item.name)
    if item.type not in _SEMANTIC_TYPES.get(sem_type, ()):
        return None

    if sem_type == "uuid":
        return str(UUID(int=rng.getrandbits(128), version=4))

    elif sem_type == "id":
        if item.type == "string":
            return str(UUID(int=rng.getrandbits(128), version=4))
        return rng.randint(1000, 9999)

    elif sem_type == "email":
        first = rng.choice(_FIRST_NAMES).lower()
        last = rng.choice(_LAST_NAMES).lower()
        return f"{first}.{last}@{rng.choice(_DOMAINS)}"

    elif sem_type == "phone":
        return f"+1-{rng.randint(200, 999)}-{rng.randint(100, 999)}-{rng.randint(1000, 9999)}"

    elif sem_type == "first_name":
        return rng.choice(_FIRST_NAMES)

    elif sem_type == "last_name":
        return rng.choice(_LAST_NAMES)

    elif sem_type == "full_name":
        return f"{rng.choice(_FIRST_NAMES)} {rng.choice(_LAST_NAMES)}"

    elif sem_type == "image_url":
        return f"https://picsum.photos/seed/{rng.randint(1, 1000)}/200/200"

    elif sem_type == "url":
        slug = "".join(rng.choices(string.ascii_lowercase, k=8))
        return f"https://example.com/{slug}"

    elif sem_type == "datetime_past":
        dt = _ANCHOR - timedelta(days=rng.randint(1, 365), seconds=rng.randint(0, 86400))
        return dt.strftime("%Y-%m-%dT%H:%M:%SZ")

    elif sem_type == "datetime_recent":
        dt = _ANCHOR - timedelta(hours=rng.randint(1, 72), seconds=rng.randint(0, 3600))
        return dt.strftime("%Y-%m-%dT%H:%M:%SZ")

    elif sem_type == "datetime_future":
        dt = _ANCHOR + timedelta(days=rng.randint(1, 90), seconds=rng.randint(0, 86400))
        return dt.strftime("%Y-%m-%dT%H:%M:%SZ")

    elif sem_type == "money":
        sample = item.example
        if isinstance(sample, (int, float)) and not isinstance(sample, bool):
            magnitude = max(1.0, abs(sample))
            value = round(rng.uniform(magnitude * 0.5, magnitude * 1.5), 2)
        else:
            value = round(rng.uniform(9.99, 499.99), 2)
        return int(value) if item.type == "integer" else value

    elif sem_type == "currency":
        return rng.choice(_CURRENCIES)

    elif sem_type == "positive_int":
        sample = item.example
        if isinstance(sample, int) and not isinstance(sample, bool) and sample > 0:
            return rng.randint(max(0, sample // 2), sample * 2)
        return rng.randint(0, 100)

    elif sem_type == "title":
        return rng.choice(_TITLES)

    elif sem_type == "description":
        return rng.choice(_DESCRIPTIONS)

    elif sem_type == "status":
        return rng.choice(_STATUSES)

    elif sem_type == "city":
        return rng.choice(_CITIES)

    elif sem_type == "country":
        return rng.choice(_COUNTRIES)

    elif sem_type == "token":
        return "".join(rng.choices(string.ascii_letters + string.digits, k=64))

    elif sem_type == "ipv4":
        return f"{rng.randint(10, 192)}.{rng.randint(0, 255)}.{rng.randint(0, 255)}.{rng.randint(1, 254)}"

    return None
