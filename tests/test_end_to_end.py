from __future__ import annotations

import httpx

from sizetac.core.selection import SelectionStateMachine
from sizetac.core.types import AwaitingDestination, Idle, SizeClass
from sizetac.remote.client import ValidationClient


def test_single_move_reaches_validator(tiny_board) -> None:
    requests: list[httpx.Request] = []

    def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"Message": "Your move", "Winner": None})

    client = ValidationClient(
        "https://validator.test",
        tiny_board.show_message,
        transport=httpx.MockTransport(handler),
    )
    machine = SelectionStateMachine(
        tiny_board, source_ids=["XS1"], destination_ids=["1"], submit=client.submit
    )

    assert machine.handle_click("XS1") == AwaitingDestination("XS1")
    assert tiny_board.highlighted_ids() == ["XS1"]

    assert machine.handle_click("1") == Idle()
    cell = tiny_board.get("1")
    assert (cell.text, cell.size) == ("X", SizeClass.SMALL)
    assert tiny_board.get("XS1").text == ""

    assert len(requests) == 1
    assert str(requests[0].url) == "https://validator.test/api/?gameBoard=1SX"
    assert tiny_board.message == "Message: Your move"


def test_server_down_keeps_last_message(tiny_board) -> None:
    def handler(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("down", request=request)

    client = ValidationClient(
        "https://validator.test", tiny_board.show_message, transport=httpx.MockTransport(handler)
    )
    machine = SelectionStateMachine(
        tiny_board, source_ids=["XS1"], destination_ids=["1"], submit=client.submit
    )
    tiny_board.show_message("Message: previous")

    machine.handle_click("XS1")
    machine.handle_click("1")

    assert tiny_board.message == "Message: previous"
    assert tiny_board.get("1").text == "X"
    assert machine.state == Idle()
