import httpx
from fastapi import Depends, HTTPException, Request

from gamedeals.core.session import SessionRegistry, SessionState


def get_http_client(request: Request) -> httpx.AsyncClient:
    return request.app.state.http_client


def get_sessions(request: Request) -> SessionRegistry:
    return request.app.state.sessions


def require_session(session_id: str, sessions: SessionRegistry = Depends(get_sessions)) -> SessionState:
    state = sessions.get(session_id)
    if state is None:
        raise HTTPException(status_code=404, detail=f"Unknown session: {session_id}")
    return state
