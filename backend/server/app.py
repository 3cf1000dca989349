from __future__ import annotations

from typing import Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from .logging_middleware import RequestIDLoggingMiddleware
from .schemas import MoveRequest
from .serializers import serialize_outcome
from .session import GameSession


def create_app(session: Optional[GameSession] = None, *, require_empty_landing: bool = True) -> FastAPI:
    app = FastAPI(title="Checkers Rules Engine", version="1.0.0")
    app.add_middleware(RequestIDLoggingMiddleware)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
        allow_credentials=True,
    )

    if session is None:
        session = GameSession(require_empty_landing=require_empty_landing)
    app.state.session = session

    def get_session() -> GameSession:
        return session

    @app.get("/health")
    def healthcheck() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/board")
    def read_board(session: GameSession = Depends(get_session)):
        return session.serialize()

    @app.get("/piece")
    def read_piece(
        x: int = Query(...),
        y: int = Query(...),
        session: GameSession = Depends(get_session),
    ):
        try:
            return session.describe_square(x, y)
        except ValueError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

    @app.get("/turn")
    def read_turn(session: GameSession = Depends(get_session)):
        return {
            "turn": session.current_turn().value,
            "flags": session.get_current_turn_flags(),
            "moveCount": session.move_count(),
        }

    @app.get("/legal-moves")
    def read_legal_moves(session: GameSession = Depends(get_session)):
        return {"moves": session.legal_moves()}

    @app.post("/move")
    def play_move(payload: MoveRequest, session: GameSession = Depends(get_session)):
        outcome = session.attempt_move(payload.fromX, payload.fromY, payload.toX, payload.toY)
        return serialize_outcome(outcome)

    @app.post("/reset")
    def reset_game(session: GameSession = Depends(get_session)):
        return session.reset()

    return app
