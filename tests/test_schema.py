from __future__ import annotations

import pytest

from sizetac.remote.schema import ValidationResponse


def test_only_known_fields_are_copied() -> None:
    resp = ValidationResponse.from_payload({"Message": "ok", "Debug": "ignored", "score": 3})
    assert resp.Message == "ok"
    assert not hasattr(resp, "Debug")
    assert resp.render() == "Message: ok"


def test_render_uses_declared_order() -> None:
    resp = ValidationResponse.from_payload(
        {"Error": "late", "Winner": "X", "xPosition": [1, 5, 9], "Message": "Game over"}
    )
    assert resp.render() == "Message: Game over\nWinner: X\nxPosition: 1,5,9\nError: late"


def test_absent_and_empty_fields_are_omitted() -> None:
    resp = ValidationResponse.from_payload({"Message": "", "Winner": None, "Winnings": 0})
    assert resp.render() == "Winnings: 0"


def test_empty_payload_renders_nothing() -> None:
    assert ValidationResponse.from_payload({}).render() == ""


def test_non_object_payload_is_rejected() -> None:
    with pytest.raises(ValueError):
        ValidationResponse.from_payload(["Message", "ok"])


def test_values_render_like_the_web_client() -> None:
    resp = ValidationResponse.from_payload(
        {
            "Winner": True,
            "Winnings": 150.0,
            "xPosition": [1, 5, 9],
            "xValues": [[1, 2], None, 2.5, False],
            "yValues": {"a": 1},
        }
    )
    assert resp.render() == (
        "Winner: true\n"
        "Winnings: 150\n"
        "xPosition: 1,5,9\n"
        "xValues: 1,2,,2.5,false\n"
        "yValues: [object Object]"
    )


def test_false_is_shown_not_omitted() -> None:
    assert ValidationResponse.from_payload({"Winner": False}).render() == "Winner: false"
