# tests/test_cli.py
import pytest

from solr_subquery.cli import join
from solr_subquery.query import SolrQuery

BASE = "http://localhost:8983/solr/collection/select"


def test_join_prints_every_step(capsys):
    join([f"{BASE}?q=1:*", f"{BASE}?q=2:*", f"{BASE}?q=3:*"], decode=True)

    out, err = capsys.readouterr()
    assert out.splitlines() == [
        f"{BASE}?q=1:*",
        f"{BASE}?q=(1:*) AND (2:*)",
        f"{BASE}?q=((1:*) AND (2:*)) AND (3:*)",
    ]
    assert "Steps: 3" in err


def test_join_prints_encoded_urls_by_default(capsys):
    join([f"{BASE}?q=1:*", f"{BASE}?q=2:*"])

    out, _ = capsys.readouterr()
    assert out.splitlines()[1] == f"{BASE}?q=%281%3A%2A%29+AND+%282%3A%2A%29"


def test_join_with_inverse(capsys):
    join([f"{BASE}?q=1:*", f"{BASE}?q=2:*"], inverse=True, decode=True)

    out, _ = capsys.readouterr()
    assert out.splitlines() == [
        f"{BASE}?q=1:*",
        f"{BASE}?q=(1:*) AND (2:*)",
        f"  inverse: {BASE}?q=(1:*) NOT (2:*)",
    ]


def test_join_rejects_invalid_url(capsys):
    with pytest.raises(SystemExit) as exc:
        join([f"{BASE}?q=1:*", BASE])

    assert exc.value.code == 1
    _, err = capsys.readouterr()
    assert "Request has no `q` query parameter" in err


def test_join_reports_mismatched_endpoints(capsys):
    with pytest.raises(SystemExit) as exc:
        join([f"{BASE}?q=1", "http://other:8983/solr/collection/select?q=2"])

    assert exc.value.code == 1
    out, err = capsys.readouterr()
    assert out.splitlines() == [f"{BASE}?q=1"]
    assert "different hosts" in err


def test_join_skips_inverse_unless_requested(capsys, monkeypatch):
    def fail(self):
        raise AssertionError("inverse should not be built")

    monkeypatch.setattr(SolrQuery, "inverse", fail)
    join([f"{BASE}?q=1:*", f"{BASE}?q=2:*"], decode=True)

    out, _ = capsys.readouterr()
    assert len(out.splitlines()) == 2
