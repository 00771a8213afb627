"""Endpoint schemes and their recorded cases.

A ``Scheme`` holds the endpoint-level defaults. Each case is configured on
its own ``CaseBuilder``, which starts as a snapshot of those defaults, and
is then committed to the scheme:

    scheme = Scheme().url("/users").method(Method.GET).access(Access.PUBLIC)
    scheme.case(200, "ok", lambda c: c.body({"id": 1, "name": "a"}))
    scheme.case(404, "missing", lambda c: c.access(Access.ADMIN))

A scheme is meant to be built by one thread; committing cases is the only
operation that is safe to run concurrently.
"""

import threading
from typing import Any, Callable

from pydantic import BaseModel, ConfigDict

from draft.log import get_logger
from draft.types import Access, Method, Mime

logger = get_logger(__name__)


class SchemeCaseHeaders(BaseModel):
    """Example request/response headers. ``None`` means no example."""

    model_config = ConfigDict(frozen=True)

    request: Any = None
    response: Any = None


class SchemeCase(BaseModel):
    """One named, status-tagged example of using the endpoint."""

    model_config = ConfigDict(frozen=True)

    name: str
    description: str = ""
    access: Access = Access.PUBLIC
    status: int
    method: Method = Method.GET
    consumes: Mime = Mime.JSON
    params: Any = None
    headers: SchemeCaseHeaders = SchemeCaseHeaders()
    body: Any = None


class CaseBuilder:
    """A case under construction. Every setter writes to this case only."""

    def __init__(
        self,
        status: int,
        name: str,
        access: Access,
        method: Method,
        consumes: Mime,
        params: Any = None,
        request_headers: Any = None,
        response_headers: Any = None,
        body: Any = None,
    ):
        self.status = status
        self.name = name
        self._description = ""
        self._access = access
        self._method = method
        self._consumes = consumes
        self._params = params
        self._request_headers = request_headers
        self._response_headers = response_headers
        self._body = body

    def access(self, v: Access) -> "CaseBuilder":
        self._access = v
        return self

    def method(self, v: Method) -> "CaseBuilder":
        self._method = v
        return self

    def consumes(self, v: Mime) -> "CaseBuilder":
        self._consumes = v
        return self

    def description(self, v: str) -> "CaseBuilder":
        self._description = v
        return self

    def params(self, v: Any) -> "CaseBuilder":
        self._params = v
        return self

    def request_headers(self, v: Any) -> "CaseBuilder":
        self._request_headers = v
        return self

    def response_headers(self, v: Any) -> "CaseBuilder":
        self._response_headers = v
        return self

    def body(self, v: Any) -> "CaseBuilder":
        self._body = v
        return self

    def build(self) -> SchemeCase:
        return SchemeCase(
            name=self.name,
            description=self._description,
            access=self._access,
            status=self.status,
            method=self._method,
            consumes=self._consumes,
            params=self._params,
            headers=SchemeCaseHeaders(
                request=self._request_headers,
                response=self._response_headers,
            ),
            body=self._body,
        )


class Scheme:
    """Description of one API endpoint and the cases recorded for it.

    Setters configure the endpoint defaults and return the scheme, so
    calls can be chained. They never affect cases already recorded.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._url = ""
        self._name = ""
        self._descr = ""
        self._project = ""
        self._cases: list[SchemeCase] = []
        self._def_access = Access.PUBLIC
        self._def_method = Method.GET
        self._def_consumes = Mime.JSON
        self._def_params: Any = None
        self._def_body: Any = None
        self._def_request_headers: Any = None
        self._def_response_headers: Any = None

    def url(self, v: str) -> "Scheme":
        """Relative url of the endpoint."""
        self._url = v
        return self

    def name(self, v: str) -> "Scheme":
        self._name = v
        return self

    def project(self, v: str) -> "Scheme":
        self._project = v
        return self

    def description(self, v: str) -> "Scheme":
        self._descr = v
        return self

    def access(self, v: Access) -> "Scheme":
        self._def_access = v
        return self

    def method(self, v: Method) -> "Scheme":
        self._def_method = v
        return self

    def consumes(self, v: Mime) -> "Scheme":
        """Content-Type the endpoint accepts."""
        self._def_consumes = v
        return self

    def params(self, v: Any) -> "Scheme":
        self._def_params = v
        return self

    def request_headers(self, v: Any) -> "Scheme":
        self._def_request_headers = v
        return self

    def response_headers(self, v: Any) -> "Scheme":
        self._def_response_headers = v
        return self

    def body(self, v: Any) -> "Scheme":
        self._def_body = v
        return self

    def get_url(self) -> str:
        return self._url

    def get_name(self) -> str:
        return self._name

    def get_project(self) -> str:
        return self._project

    def get_description(self) -> str:
        return self._descr

    def new_case(self, status: int, name: str) -> CaseBuilder:
        """Start a case from a snapshot of the current defaults."""
        return CaseBuilder(
            status=status,
            name=name,
            access=self._def_access,
            method=self._def_method,
            consumes=self._def_consumes,
            params=self._def_params,
            request_headers=self._def_request_headers,
            response_headers=self._def_response_headers,
            body=self._def_body,
        )

    def commit(self, builder: CaseBuilder) -> SchemeCase:
        """Freeze the builder into a case and append it."""
        case = builder.build()
        with self._lock:
            self._cases.append(case)
        logger.debug("Recorded case %r (status %s) for %s", case.name, case.status, self._url)
        return case

    def case(self, status: int, name: str, fn: Callable[[CaseBuilder], None] | None = None) -> SchemeCase:
        """Record a case: snapshot defaults, let ``fn`` refine it, commit.

        No lock is held while ``fn`` runs, so it may record further cases;
        those are committed before this one.
        """
        builder = self.new_case(status, name)
        if fn is not None:
            fn(builder)
        return self.commit(builder)

    def cases(self) -> list[SchemeCase]:
        """All cases in recording order."""
        return list(self._cases)

    def get_case_by_status(self, status: int) -> SchemeCase | None:
        """First case recorded with ``status``, or None."""
        for c in self._cases:
            if c.status == status:
                return c
        return None

    def to_json(self, options=None):
        """Export the scheme; see ``draft.export.build``."""
        from draft.export import build

        return build(self, options)

    def to_json_str(self, indent: int | None = 2, options=None) -> str:
        return self.to_json(options).model_dump_json(indent=indent)
