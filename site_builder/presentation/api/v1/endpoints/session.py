"""Admin session endpoints — login, logout and the edit-mode toggle."""

from fastapi import APIRouter, Depends, HTTPException, status

from site_builder.application.schemas import LoginRequest, SessionResponse
from site_builder.application.services import SessionGate
from site_builder.domain.entities import EditCapability
from site_builder.infrastructure.dependencies import get_capability, get_session_gate

router = APIRouter(prefix="/session", tags=["Session"])


@router.get("", response_model=SessionResponse)
async def get_session(gate: SessionGate = Depends(get_session_gate)) -> SessionResponse:
    """Return whether an admin is logged in and whether edit mode is on."""
    return SessionResponse(authenticated=gate.is_authenticated, edit_mode=gate.is_edit_mode)


@router.post("/login", response_model=SessionResponse)
async def login(
    body: LoginRequest,
    gate: SessionGate = Depends(get_session_gate),
) -> SessionResponse:
    """Exchange the admin password for an edit token."""
    capability = gate.login(body.password)
    if capability is None:
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid password")
    return SessionResponse(
        authenticated=True,
        edit_mode=gate.is_edit_mode,
        token=capability.token,
    )


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(
    gate: SessionGate = Depends(get_session_gate),
    capability: EditCapability | None = Depends(get_capability),
) -> None:
    """End the admin session. Requires the token returned by login."""
    gate.logout(capability)


@router.post("/edit-mode", response_model=SessionResponse)
async def toggle_edit_mode(
    gate: SessionGate = Depends(get_session_gate),
    capability: EditCapability | None = Depends(get_capability),
) -> SessionResponse:
    """Flip edit mode. Requires the token returned by login."""
    edit_mode = gate.toggle_edit_mode(capability)
    return SessionResponse(authenticated=True, edit_mode=edit_mode)
