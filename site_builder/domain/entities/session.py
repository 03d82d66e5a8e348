"""Domain entity for the admin edit capability."""

from dataclasses import dataclass


@dataclass(frozen=True)
class EditCapability:
    """Opaque token proving the holder logged in as admin.

    Issued by the session gate; stores check it on every mutation.
    """

    token: str

    def __repr__(self) -> str:
        return "EditCapability(token='***')"
