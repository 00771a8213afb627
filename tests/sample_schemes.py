"""Schemes used by the CLI and loader tests (importable as ``sample_schemes``)."""

from dataclasses import dataclass

from draft.scheme import Scheme
from draft.types import Access, Method


@dataclass
class User:
    Id: int
    Name: str


def make_users_scheme() -> Scheme:
    scheme = (
        Scheme()
        .url("/users")
        .name("Get user")
        .project("accounts")
        .description("Fetch a single user")
        .method(Method.GET)
        .access(Access.PUBLIC)
    )
    scheme.case(200, "ok", lambda c: c.body(User(Id=1, Name="a")))
    scheme.case(404, "missing", lambda c: c.access(Access.ADMIN))
    return scheme


users = make_users_scheme()

not_a_scheme = {"url": "/users"}
