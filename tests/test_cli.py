from __future__ import annotations

import pytest

from shooter.__main__ import parse_args


def test_defaults_match_window_config() -> None:
    args = parse_args([])
    assert (args.width, args.height) == (800, 600)
    assert args.assets == "."
    assert args.log_level == "INFO"


def test_overrides() -> None:
    args = parse_args(["--width", "1024", "--height", "768", "--assets", "/tmp/game", "--log-level", "DEBUG"])
    assert (args.width, args.height, args.assets, args.log_level) == (1024, 768, "/tmp/game", "DEBUG")


def test_rejects_unknown_log_level() -> None:
    with pytest.raises(SystemExit):
        parse_args(["--log-level", "LOUD"])
