"""Unit tests for marker.api.check.check_documents (scan, classify, validate)."""

import pytest

from marker.api.check.check_documents import check_documents
from marker.api.check.LinkErrorKind import LinkErrorKind

pytestmark = pytest.mark.check


@pytest.fixture
def root(tmp_path):
    (tmp_path / "exists.md").write_text("# here\n")
    return tmp_path


def test_fragment_insensitive_dedup_across_files(root, checker_factory):
    checker = checker_factory(default=404)
    documents = {
        root / "a.md": "[one](http://x/a#1)",
        root / "b.md": "[two](http://x/a#2)",
    }

    run = check_documents(documents, root, checker)

    assert checker.calls == ["http://x/a"]
    assert run.urls_checked == 1
    assert run.links_checked == 2
    errors = run.report.errors
    assert [(e.location.path.name, e.location.line, e.text) for e in errors] == [("a.md", 1, "one"), ("b.md", 1, "two")]
    assert {e.error.status for e in errors} == {404}


def test_mixed_errors_in_report_order(root, checker_factory):
    checker = checker_factory(statuses={"https://gone.example/": 410})
    documents = {
        root / "b.md": "[ok](exists.md)\n[gone](https://gone.example/)\n",
        root / "a.md": "[abs](/exists.md)\n\n[ref][nowhere]\n\n[bad](http://[::1/)\n",
    }

    report = check_documents(documents, root, checker).report

    assert [(e.location.path.name, e.location.line, e.error.kind) for e in report.errors] == [
        ("a.md", 1, LinkErrorKind.PATH_ABSOLUTE),
        ("a.md", 3, LinkErrorKind.REFERENCE_BROKEN),
        ("a.md", 5, LinkErrorKind.URL_MALFORMED),
        ("b.md", 2, LinkErrorKind.HTTP_STATUS),
    ]


def test_absolute_paths_allowed(root, fake_checker):
    documents = {root / "a.md": "[abs](/exists.md) [missing](/missing.md)"}

    report = check_documents(documents, root, fake_checker, allow_absolute_paths=True).report

    assert [(e.target, e.error.kind) for e in report.errors] == [("/missing.md", LinkErrorKind.PATH_NON_EXISTENT)]


def test_skip_http_accepts_urls_without_checking(root, fake_checker):
    documents = {root / "a.md": "[site](https://example.com/) [local](missing.md)"}

    run = check_documents(documents, root, fake_checker, skip_http=True)

    assert fake_checker.calls == []
    assert run.urls_checked == 0
    assert [e.target for e in run.report.errors] == ["missing.md"]


def test_skip_http_still_reports_malformed(root, fake_checker):
    documents = {root / "a.md": "[bad](http://example.com:99999/)"}
    report = check_documents(documents, root, fake_checker, skip_http=True).report
    assert [e.error.message for e in report.errors] == ["invalid port number"]


def test_non_http_urls_are_valid(root, fake_checker):
    documents = {root / "a.md": "[mail](mailto:someone@example.com)"}
    run = check_documents(documents, root, fake_checker)
    assert not run.report.failed
    assert fake_checker.calls == []


def test_idempotent(root, checker_factory):
    documents = {
        root / "a.md": "[one](http://x/a#1) [missing](nope.md)\n[broken]",
        root / "b.md": "[two](http://x/a#2)",
    }

    first = check_documents(documents, root, checker_factory(default=500)).report.render()
    second = check_documents(documents, root, checker_factory(default=500)).report.render()

    assert first == second
    assert len(first) == 4


def test_clean_documents(root, fake_checker):
    run = check_documents({root / "a.md": "[here](exists.md)\n\n```\n[no](where.md)\n```\n"}, root, fake_checker)
    assert not run.report.failed
    assert run.files_checked == 1
    assert run.links_checked == 1


def test_special_scheme_spellings_share_one_check(root, fake_checker):
    documents = {root / "a.md": "[short](http:foo) [long](http://foo/)"}

    run = check_documents(documents, root, fake_checker)

    assert fake_checker.calls == ["http://foo/"]
    assert not run.report.failed
