"""Export of a scheme into one JSON document.

Cases are grouped by status. For every status the example values of all
its cases are catalogued and folded into one set of field descriptors per
slot (request headers, params, response headers, body). Exported cases
carry mocks rebuilt from those catalogues instead of the raw examples.
"""

from typing import Any

from pydantic import BaseModel

from draft.log import get_logger
from draft.reflect.item import Item, Options, get
from draft.reflect.mock import prepare_mock
from draft.scheme import Scheme, SchemeCase, SchemeCaseHeaders
from draft.types import Access, Method, Mime

logger = get_logger(__name__)


class JSONSchemeRequest(BaseModel):
    method: Method
    consumes: Mime
    headers: dict[str, Item] = {}
    params: dict[str, Item] = {}


class JSONSchemeResponse(BaseModel):
    headers: dict[str, Item] = {}
    body: dict[str, Item] = {}


class JSONSchemeDetail(BaseModel):
    """Everything known about the endpoint for one status code."""

    access: Access
    request: JSONSchemeRequest
    response: JSONSchemeResponse


class JSONScheme(BaseModel):
    url: str
    name: str
    project: str
    description: str
    detail: dict[int, JSONSchemeDetail]
    cases: list[SchemeCase]

    def dump(self) -> dict:
        """Plain JSON-compatible dict (enum values as text, status keys as strings)."""
        return self.model_dump(mode="json")


def build(scheme: Scheme, options: Options | None = None) -> JSONScheme:
    """Build the exported document for ``scheme``.

    Reads the recorded cases without modifying them. Must not run while
    another thread is still recording cases on the same scheme.
    """
    options = options or Options.from_settings()
    detail: dict[int, JSONSchemeDetail] = {}
    cases = []

    for c in scheme.cases():
        d = detail.get(c.status)
        if d is None:
            d = JSONSchemeDetail(
                access=c.access,
                request=JSONSchemeRequest(method=c.method, consumes=c.consumes),
                response=JSONSchemeResponse(),
            )
            detail[c.status] = d

        d.access = c.access

        cases.append(
            SchemeCase(
                name=c.name,
                description=c.description,
                access=c.access,
                status=c.status,
                method=c.method,
                consumes=c.consumes,
                params=_fold(d.request.params, c.params, options),
                headers=SchemeCaseHeaders(
                    request=_fold(d.request.headers, c.headers.request, options),
                    response=_fold(d.response.headers, c.headers.response, options),
                ),
                body=_fold(d.response.body, c.body, options),
            )
        )

    logger.debug("Exported %s: %d cases over %d statuses", scheme.get_url(), len(cases), len(detail))

    return JSONScheme(
        url=scheme.get_url(),
        name=scheme.get_name(),
        project=scheme.get_project(),
        description=scheme.get_description(),
        detail=detail,
        cases=cases,
    )


def _fold(catalogue: dict[str, Item], value: Any, options: Options) -> Any:
    """Add the fields of ``value`` to ``catalogue`` and return its mock."""
    if value is None:
        return None

    ref = get(value, options)
    for item in ref.nested:
        catalogue[item.name] = item

    return prepare_mock(ref, options)
