"""
Wire format for game states.

States travel as JSON objects with named fields so that older clients ignore
anything they do not know about:

    {"board": [[null, "first", ...], ...],   # column-major, row 0 on top
     "current_player": "second",
     "winner": null,
     "is_game_over": false}

For hyperlinks the JSON is URL-safe base64 encoded with the padding stripped.
A session adds the last columns played and the chosen difficulty, flattened
into the same object.
"""

from __future__ import annotations

import base64
import binascii
import logging
from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, ConfigDict, ValidationError, model_validator

from connectn.config import DEFAULT_CONFIG, EngineConfig
from connectn.core.board import Board
from connectn.core.rules import create_initial_state
from connectn.game.state import GameState
from connectn.types import Difficulty, Player

logger = logging.getLogger(__name__)

_DIFFICULTY_ALIASES = {
    "weak": Difficulty.WEAK,
    "bad": Difficulty.WEAK,
    "moderate": Difficulty.MODERATE,
    "medium": Difficulty.MODERATE,
    "strong": Difficulty.STRONG,
    "best": Difficulty.STRONG,
}

_KEY_SYMBOLS = {None: "0", Player.FIRST: "X", Player.SECOND: "O"}


class StateDecodeError(ValueError):
    pass


class StateModel(BaseModel):
    # Allow extra fields so newer producers don't break older consumers
    model_config = ConfigDict(extra="ignore")

    board: List[List[Optional[Player]]]
    current_player: Player = Player.FIRST
    winner: Optional[Player] = None
    is_game_over: bool = False

    @model_validator(mode="after")
    def _winner_implies_game_over(self) -> "StateModel":
        if self.winner is not None and not self.is_game_over:
            raise ValueError("winner is set but is_game_over is false")
        return self


class SessionModel(StateModel):
    newest_piece_column: Optional[int] = None
    newest_computer_piece_column: Optional[int] = None
    difficulty: Difficulty = Difficulty.STRONG


@dataclass(frozen=True, slots=True)
class Session:
    state: GameState
    newest_piece_column: Optional[int] = None
    newest_computer_piece_column: Optional[int] = None
    difficulty: Difficulty = Difficulty.STRONG


def parse_difficulty(text: Optional[str]) -> Difficulty:
    """Map a tier name (current or legacy bad/medium/best) to a Difficulty; unknown means STRONG."""
    if not text:
        return Difficulty.STRONG
    return _DIFFICULTY_ALIASES.get(text.strip().lower(), Difficulty.STRONG)


def state_key(state: GameState) -> str:
    """Compact board key: one string per column, top to bottom, columns joined by '|'."""
    return "|".join("".join(_KEY_SYMBOLS[cell] for cell in col) for col in state.board.grid)


def _to_model(state: GameState) -> StateModel:
    return StateModel(
        board=[list(col) for col in state.board.grid],
        current_player=state.current,
        winner=state.winner,
        is_game_over=state.terminal,
    )


def _from_model(model: StateModel, config: EngineConfig) -> GameState:
    if len(model.board) != config.columns or any(len(col) != config.rows for col in model.board):
        raise StateDecodeError(
            f"Board shape does not match a {config.columns}x{config.rows} game."
        )
    return GameState(
        board=Board.from_columns(model.board),
        current=model.current_player,
        winner=model.winner,
        terminal=model.is_game_over,
    )


def state_to_dict(state: GameState) -> dict:
    return _to_model(state).model_dump(mode="json")


def state_from_dict(data: dict, config: EngineConfig = DEFAULT_CONFIG) -> GameState:
    try:
        model = StateModel.model_validate(data)
    except ValidationError as e:
        raise StateDecodeError(f"Invalid state: {e}") from e
    return _from_model(model, config)


def _b64encode(raw: str) -> str:
    return base64.urlsafe_b64encode(raw.encode("utf-8")).decode("ascii").rstrip("=")


def _b64decode(token: str) -> bytes:
    padded = token + "=" * (-len(token) % 4)
    try:
        return base64.urlsafe_b64decode(padded.encode("ascii"))
    except (binascii.Error, UnicodeEncodeError) as e:
        raise StateDecodeError(f"Token is not URL-safe base64: {e}") from e


def encode_state(state: GameState) -> str:
    return _b64encode(_to_model(state).model_dump_json())


def decode_state(token: str, config: EngineConfig = DEFAULT_CONFIG) -> GameState:
    raw = _b64decode(token)
    try:
        model = StateModel.model_validate_json(raw)
    except ValidationError as e:
        raise StateDecodeError(f"Invalid state: {e}") from e
    return _from_model(model, config)


def new_session(config: EngineConfig = DEFAULT_CONFIG, difficulty: Difficulty = Difficulty.STRONG) -> Session:
    return Session(state=create_initial_state(config), difficulty=difficulty)


def _session_model(session: Session) -> SessionModel:
    return SessionModel(
        **_to_model(session.state).model_dump(),
        newest_piece_column=session.newest_piece_column,
        newest_computer_piece_column=session.newest_computer_piece_column,
        difficulty=session.difficulty,
    )


def session_to_dict(session: Session) -> dict:
    return _session_model(session).model_dump(mode="json")


def encode_session(session: Session) -> str:
    return _b64encode(_session_model(session).model_dump_json())


def decode_session(token: str, config: EngineConfig = DEFAULT_CONFIG) -> Session:
    raw = _b64decode(token)
    try:
        model = SessionModel.model_validate_json(raw)
    except ValidationError as e:
        raise StateDecodeError(f"Invalid session: {e}") from e
    return Session(
        state=_from_model(model, config),
        newest_piece_column=model.newest_piece_column,
        newest_computer_piece_column=model.newest_computer_piece_column,
        difficulty=model.difficulty,
    )


def decode_session_or_new(token: Optional[str], config: EngineConfig = DEFAULT_CONFIG) -> Session:
    """Transport boundary: undecodable input starts a fresh game instead of failing."""
    if not token:
        return new_session(config)
    try:
        return decode_session(token, config)
    except StateDecodeError as e:
        logger.warning("Error decoding session, starting a new game: %s", e)
        return new_session(config)
