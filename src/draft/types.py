"""Closed value sets used to describe an endpoint.

Statuses are plain HTTP status codes; ``http.HTTPStatus`` members work
anywhere an ``int`` is expected.
"""

from enum import Enum


class Access(str, Enum):
    """Who is allowed to call the endpoint."""

    PUBLIC = "public"
    PROTECTED = "protected"
    PRIVATE = "private"
    ADMIN = "admin"


class Method(str, Enum):
    GET = "GET"
    HEAD = "HEAD"
    POST = "POST"
    PUT = "PUT"
    PATCH = "PATCH"
    DELETE = "DELETE"
    OPTIONS = "OPTIONS"


class Mime(str, Enum):
    """Media types an endpoint can consume."""

    JSON = "application/json"
    FORM = "application/x-www-form-urlencoded"
    MULTIPART = "multipart/form-data"
    TEXT = "text/plain"
    XML = "application/xml"
