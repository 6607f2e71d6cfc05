from __future__ import annotations

from pathlib import Path

ASSETS = Path(__file__).parent / "assets"


def _skip(msg: str) -> None:  # pragma: no cover
    try:
        import pytest  # type: ignore

        pytest.skip(msg)
    except Exception:
        raise RuntimeError(msg)


def _client():
    from ouiserve.runtime.app import create_app
    from ouiserve.runtime.config import ServiceConfig

    try:
        from fastapi.testclient import TestClient
    except Exception as e:  # pragma: no cover
        _skip(f"TestClient not available ({e!r}); install test extras to run this test")
        return None

    return TestClient(create_app(ServiceConfig(source=str(ASSETS / "oui_sample.txt"))))


def test_root_and_health() -> None:
    client = _client()

    root = client.get("/")
    assert root.status_code == 200
    assert root.text == "app is ok!"

    health = client.get("/healthz")
    assert health.status_code == 200
    assert health.json() == {"ok": True, "entries": 5}


def test_list_ouis_in_load_order() -> None:
    client = _client()

    for path in ("/oui", "/oui/"):
        res = client.get(path)
        assert res.status_code == 200
        data = res.json()
        assert [e["oui"] for e in data] == ["286FB9", "08EA44", "ACDE48", "F4F5D8", "00000C"]
        assert set(data[0]) == {"oui", "vendor_name", "vendor_alternate_name"}


def test_get_oui_normalizes_path_param() -> None:
    client = _client()

    for raw in ("ACDE48", "acde48", "AC-DE-48", "ac:de:48", "AC DE48"):
        res = client.get(f"/oui/{raw}")
        assert res.status_code == 200, raw
        assert res.json() == {"oui": "ACDE48", "vendor_name": "Private", "vendor_alternate_name": "Private"}


def test_get_unknown_oui_is_404() -> None:
    client = _client()

    res = client.get("/oui/FFFFFF")
    assert res.status_code == 404
    assert res.json()["detail"] == "OUI not found"

    assert client.get("/oui/GGGGGG").status_code == 404


def test_resolve_mac_returns_bare_vendor_name() -> None:
    client = _client()

    for addr in ("F4-F5-D8-11-22-33", "f4:f5:d8:11:22:33", "F4F5D8112233"):
        res = client.get(f"/mac/{addr}")
        assert res.status_code == 200
        assert res.headers["content-type"].startswith("text/plain")
        assert res.text == "Google, Inc."


def test_resolve_mac_malformed_or_unknown_is_404() -> None:
    client = _client()

    for addr in ("AC-DE-48", "zz-zz-zz-zz-zz-zz", "FF-FF-FF-11-22-33", "AC-DE-48-11-22-33-44"):
        assert client.get(f"/mac/{addr}").status_code == 404, addr


def test_resolve_mac_entry() -> None:
    client = _client()

    res = client.get("/mac/00:00:0c:12:34:56/entry")
    assert res.status_code == 200
    assert res.json()["oui"] == "00000C"

    assert client.get("/mac/00:00:0c/entry").status_code == 404


def test_cors_is_opt_in() -> None:
    from ouiserve.api import create_api_app
    from ouiserve.io.oui_txt import load_oui_file

    try:
        from fastapi.testclient import TestClient
    except Exception as e:  # pragma: no cover
        _skip(f"TestClient not available ({e!r}); install test extras to run this test")
        return

    registry = load_oui_file(ASSETS / "oui_sample.txt")

    plain = TestClient(create_api_app(registry))
    res = plain.get("/oui/ACDE48", headers={"Origin": "http://example.test"})
    assert "access-control-allow-origin" not in res.headers

    cors = TestClient(create_api_app(registry, cors_origins=["http://example.test"]))
    res = cors.get("/oui/ACDE48", headers={"Origin": "http://example.test"})
    assert res.headers.get("access-control-allow-origin") == "http://example.test"
