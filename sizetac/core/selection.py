"""Dvojfázový výber: najprv figúrka z palety, potom políčko na doske.

Stavový automat drží jediný `SelectionState` (Idle / AwaitingDestination),
kontroluje legálnosť kliku voči dvom množinám id a po dokončenom výbere
presunie figúrku a odošle zakódovanú dosku cez `submit`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence

from .board import BoardSurface
from .codec import encode_board, size_label
from .types import AwaitingDestination, Idle, SelectionState

log = logging.getLogger("sizetac.core.selection")

MSG_SELECT_SOURCE_FIRST = "You need to select from players first"
MSG_RESELECT = "Reselect from player"

Submitter = Callable[[str], None]


class SelectionStateMachine:
    def __init__(
        self,
        board: BoardSurface,
        *,
        source_ids: Sequence[str],
        destination_ids: Sequence[str],
        submit: Submitter,
    ) -> None:
        self.board = board
        self.source_ids: tuple[str, ...] = tuple(source_ids)
        # poradie určuje poradie tokenov v požiadavke
        self.destination_ids: tuple[str, ...] = tuple(destination_ids)
        self._submit = submit
        self.state: SelectionState = Idle()

    def reset(self) -> None:
        """Návrat do Idle (reštart hry)."""
        self.state = Idle()

    def handle_click(self, target_id: str) -> SelectionState:
        """Spracuje klik na bunku a vráti nový stav."""
        state = self.state

        if isinstance(state, Idle) and target_id not in self.source_ids:
            log.info("illegal_click state=idle target=%s", target_id)
            self.board.clear_all_highlights()
            self.board.show_message(MSG_SELECT_SOURCE_FIRST)
            return self.state

        if isinstance(state, AwaitingDestination) and target_id not in self.destination_ids:
            log.info("illegal_click state=awaiting source=%s target=%s", state.source_id, target_id)
            self.board.clear_all_highlights()
            self.board.show_message(MSG_RESELECT)
            self.state = Idle()
            return self.state

        self.board.clear_all_highlights()
        self.board.set_highlighted(target_id, True)

        if isinstance(state, AwaitingDestination):
            self.swap(state.source_id, target_id)
            self.validate_and_send()
            self.state = Idle()
        else:
            self.state = AwaitingDestination(target_id)
        return self.state

    def swap(self, source_id: str, destination_id: str) -> None:
        """Presunie obsah zdroja do cieľa a nastaví cieľu veľkosť podľa id zdroja."""
        source = self.board.get(source_id)
        text = source.text
        self.board.set_text(destination_id, text)
        size = size_label(source_id)
        if size is not None:
            self.board.set_size(destination_id, size)
        self.board.set_text(source_id, "")
        self.board.set_highlighted(source_id, False)
        log.info("move source=%s destination=%s text=%r size=%s", source_id, destination_id, text, size)

    def validate_and_send(self) -> str:
        encoded = encode_board(self.board, self.destination_ids)
        log.debug("validate board=%s", encoded)
        self._submit(encoded)
        return encoded
