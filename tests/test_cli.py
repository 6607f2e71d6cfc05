from __future__ import annotations

from pathlib import Path

import pytest

from ouiserve.__main__ import build_parser, main


def test_parser_flags() -> None:
    args = build_parser().parse_args(["--source", "x.txt", "--port", "8081", "--no-access-log"])

    assert args.source == "x.txt"
    assert args.port == 8081
    assert args.no_access_log is True
    assert args.host is None


def test_missing_source_exits_with_status_1(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--source", str(tmp_path / "missing.txt"), "--log-level", "error"])

    assert exc_info.value.code == 1


def test_bad_log_level_exits_with_status_2(tmp_path: Path) -> None:
    with pytest.raises(SystemExit) as exc_info:
        main(["--source", str(tmp_path / "missing.txt"), "--log-level", "loud"])

    assert exc_info.value.code == 2


@pytest.mark.parametrize("level", ["WARN", "fatal", "notset"])
def test_log_level_unknown_to_uvicorn_exits_with_status_2(level: str) -> None:
    sample = Path(__file__).parent / "assets" / "oui_sample.txt"

    with pytest.raises(SystemExit) as exc_info:
        main(["--source", str(sample), "--port", "0", "--log-level", level])

    assert exc_info.value.code == 2


def test_trace_log_level_is_accepted(tmp_path: Path) -> None:
    # Gets past level validation and fails on the missing source instead.
    with pytest.raises(SystemExit) as exc_info:
        main(["--source", str(tmp_path / "missing.txt"), "--log-level", "TRACE"])

    assert exc_info.value.code == 1
