import threading

import pytest
from pydantic import ValidationError

from draft.scheme import CaseBuilder, Scheme, SchemeCase
from draft.types import Access, Method, Mime


def _make_scheme() -> Scheme:
    return (
        Scheme()
        .url("/users")
        .method(Method.GET)
        .access(Access.PUBLIC)
        .consumes(Mime.JSON)
        .params({"page": 1})
        .request_headers({"Authorization": "Bearer x"})
        .response_headers({"X-Total": 10})
        .body({"id": 1})
    )


class TestDefaults:
    def test_new_scheme_defaults(self):
        case = Scheme().case(200, "ok")
        assert case.access == Access.PUBLIC
        assert case.method == Method.GET
        assert case.consumes == Mime.JSON
        assert case.params is None
        assert case.body is None
        assert case.headers.request is None
        assert case.headers.response is None

    def test_case_snapshots_defaults(self):
        scheme = _make_scheme()
        case = scheme.case(200, "ok")
        assert case.name == "ok"
        assert case.status == 200
        assert case.method == Method.GET
        assert case.access == Access.PUBLIC
        assert case.params == {"page": 1}
        assert case.headers.request == {"Authorization": "Bearer x"}
        assert case.headers.response == {"X-Total": 10}
        assert case.body == {"id": 1}

    def test_snapshot_uses_defaults_at_call_time(self):
        scheme = Scheme().method(Method.GET)
        first = scheme.case(200, "before")
        scheme.method(Method.POST)
        second = scheme.case(201, "after")
        scheme.method(Method.PUT)

        assert first.method == Method.GET
        assert second.method == Method.POST

    def test_description_is_not_inherited(self):
        scheme = Scheme().description("Endpoint description")
        case = scheme.case(200, "ok")
        assert case.description == ""
        assert scheme.get_description() == "Endpoint description"

    def test_setters_chain(self):
        scheme = Scheme().url("/a").name("A").project("p")
        assert scheme.get_url() == "/a"
        assert scheme.get_name() == "A"
        assert scheme.get_project() == "p"


class TestOverrides:
    def test_override_only_touches_case(self):
        scheme = _make_scheme()

        def fn(c: CaseBuilder):
            c.access(Access.ADMIN).method(Method.DELETE).body({"error": "nope"})

        overridden = scheme.case(403, "forbidden", fn)
        later = scheme.case(200, "ok")

        assert overridden.access == Access.ADMIN
        assert overridden.method == Method.DELETE
        assert overridden.body == {"error": "nope"}
        assert later.access == Access.PUBLIC
        assert later.method == Method.GET
        assert later.body == {"id": 1}

    def test_override_replaces_instead_of_merging(self):
        scheme = _make_scheme()
        case = scheme.case(200, "ok", lambda c: c.params({"limit": 5}))
        assert case.params == {"limit": 5}

    def test_override_with_none_clears_example(self):
        scheme = _make_scheme()
        case = scheme.case(204, "empty", lambda c: c.body(None).response_headers(None))
        assert case.body is None
        assert case.headers.response is None
        assert case.headers.request == {"Authorization": "Bearer x"}

    def test_case_description(self):
        case = Scheme().case(200, "ok", lambda c: c.description("Happy path"))
        assert case.description == "Happy path"

    def test_recorded_case_is_frozen(self):
        case = Scheme().case(200, "ok")
        with pytest.raises(ValidationError):
            case.name = "changed"
        assert case.name == "ok"


class TestCaseRecording:
    def test_cases_keep_recording_order(self):
        scheme = Scheme()
        scheme.case(404, "missing")
        scheme.case(200, "ok")
        scheme.case(200, "ok again")
        assert [c.name for c in scheme.cases()] == ["missing", "ok", "ok again"]

    def test_cases_returns_copy(self):
        scheme = Scheme()
        scheme.case(200, "ok")
        scheme.cases().clear()
        assert len(scheme.cases()) == 1

    def test_case_returns_recorded_case(self):
        scheme = Scheme()
        case = scheme.case(200, "ok")
        assert isinstance(case, SchemeCase)
        assert scheme.cases()[0] is case

    def test_new_case_and_commit(self):
        scheme = Scheme().access(Access.PRIVATE)
        builder = scheme.new_case(201, "created")
        builder.body({"id": 7})
        assert scheme.cases() == []

        case = scheme.commit(builder)
        assert case.access == Access.PRIVATE
        assert case.body == {"id": 7}
        assert scheme.cases() == [case]

    def test_nested_case_does_not_deadlock(self):
        scheme = Scheme()

        def outer(c: CaseBuilder):
            scheme.case(500, "inner")
            c.access(Access.ADMIN)

        done = threading.Event()

        def record():
            scheme.case(200, "outer", outer)
            done.set()

        t = threading.Thread(target=record)
        t.start()
        t.join(timeout=5)

        assert done.is_set()
        assert [c.name for c in scheme.cases()] == ["inner", "outer"]
        assert scheme.cases()[1].access == Access.ADMIN

    def test_concurrent_cases_do_not_interleave(self):
        scheme = Scheme()

        def record(i: int):
            scheme.case(200 + i, f"case-{i}", lambda c: c.body({"n": i}))

        threads = [threading.Thread(target=record, args=(i,)) for i in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        cases = scheme.cases()
        assert len(cases) == 20
        for c in cases:
            assert c.body == {"n": c.status - 200}
            assert c.name == f"case-{c.status - 200}"


class TestGetCaseByStatus:
    def test_returns_first_match(self):
        scheme = Scheme()
        scheme.case(200, "first")
        scheme.case(200, "second")
        assert scheme.get_case_by_status(200).name == "first"

    def test_not_found_returns_none(self):
        scheme = Scheme()
        scheme.case(200, "ok")
        assert scheme.get_case_by_status(404) is None

    def test_accepts_http_status(self):
        from http import HTTPStatus

        scheme = Scheme()
        scheme.case(HTTPStatus.NOT_FOUND, "missing")
        assert scheme.get_case_by_status(404).name == "missing"
