"""Command-line client."""

import json

import httpx

import usersearch.client.__main__ as cli
from usersearch.client import SearchClient


def patch_transport(monkeypatch, handler):
    def factory(token, url, timeout):
        return SearchClient(token, url=url, timeout=timeout, transport=httpx.MockTransport(handler))

    monkeypatch.setattr(cli, "SearchClient", factory)


def test_prints_result(monkeypatch, capsys):
    seen = {}

    def handler(request):
        seen.update(request.url.params)
        body = [{"Id": 3, "Name": "Ann Lee", "Age": 30, "About": "", "Gender": "female"}]
        return httpx.Response(200, json=body, headers={"X-Has-More": "false"})

    patch_transport(monkeypatch, handler)

    code = cli.main(["--url", "http://search.test/", "--limit", "5", "--query", "Ann", "--order-field", "Age", "--order-by", "1"])

    assert code == 0
    assert seen["limit"] == "5"
    assert seen["order_field"] == "Age"
    output = json.loads(capsys.readouterr().out)
    assert output["has_more"] is False
    assert output["users"][0]["name"] == "Ann Lee"


def test_reports_classified_error(monkeypatch, capsys):
    patch_transport(monkeypatch, lambda request: httpx.Response(500))

    code = cli.main(["--url", "http://search.test/"])

    assert code == 1
    assert "SearchServer fatal error" in capsys.readouterr().err


def test_local_rejection(capsys):
    code = cli.main(["--limit", "0"])

    assert code == 1
    assert "limit must be > 0" in capsys.readouterr().err
