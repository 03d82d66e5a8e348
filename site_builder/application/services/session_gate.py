"""Admin session gate — issues and checks the edit capability.

Only the ``admin_authenticated`` flag is persisted. A process that starts
with the flag set is considered logged in and mints a fresh capability.
"""

import hmac
import logging
import secrets
from collections.abc import Callable

from site_builder.application.interfaces import KeyValueStorage
from site_builder.domain.entities import EditCapability
from site_builder.domain.exceptions import UnauthorizedError

logger = logging.getLogger(__name__)

AUTH_FLAG_KEY = "admin_authenticated"


class SessionGate:
    """Tracks authentication and edit mode, and authorizes store mutations."""

    def __init__(
        self,
        storage: KeyValueStorage,
        admin_password: str,
        token_factory: Callable[[], str] = lambda: secrets.token_urlsafe(32),
    ):
        self._storage = storage
        self._admin_password = admin_password
        self._token_factory = token_factory
        self._edit_mode = False
        self._capability: EditCapability | None = None

        if self._storage.load(AUTH_FLAG_KEY) == "true":
            self._capability = EditCapability(token=self._token_factory())
            logger.info("Restored authenticated admin session")

    # ── State ───────────────────────────────────────────────────────

    @property
    def is_authenticated(self) -> bool:
        return self._capability is not None

    @property
    def is_edit_mode(self) -> bool:
        return self._edit_mode

    def current_capability(self) -> EditCapability | None:
        return self._capability

    # ── Transitions ─────────────────────────────────────────────────

    def login(self, password: str) -> EditCapability | None:
        """Check the admin password. Returns a capability, or None on failure."""
        if not hmac.compare_digest(password.encode("utf-8"), self._admin_password.encode("utf-8")):
            logger.warning("Admin login rejected")
            return None

        if self._capability is None:
            self._capability = EditCapability(token=self._token_factory())
        self._storage.save(AUTH_FLAG_KEY, "true")
        logger.info("Admin logged in")
        return self._capability

    def logout(self, capability: EditCapability | None) -> None:
        """Revoke the capability, leave edit mode and forget the persisted flag."""
        self.authorize(capability)
        self._capability = None
        self._edit_mode = False
        self._storage.remove(AUTH_FLAG_KEY)
        logger.info("Admin logged out")

    def toggle_edit_mode(self, capability: EditCapability | None) -> bool:
        """Flip edit mode for an authenticated admin and return the new state."""
        self.authorize(capability)
        self._edit_mode = not self._edit_mode
        logger.info("Edit mode %s", "enabled" if self._edit_mode else "disabled")
        return self._edit_mode

    # ── Authorization ───────────────────────────────────────────────

    def authorize(
        self, capability: EditCapability | None, *, require_edit_mode: bool = False
    ) -> None:
        """Raise UnauthorizedError unless ``capability`` is the live one.

        ``require_edit_mode`` additionally demands that edit mode is on.
        """
        if capability is None or self._capability is None:
            raise UnauthorizedError("Admin login required")
        if not hmac.compare_digest(
            capability.token.encode("utf-8"), self._capability.token.encode("utf-8")
        ):
            raise UnauthorizedError("Edit capability is invalid or revoked")
        if require_edit_mode and not self._edit_mode:
            raise UnauthorizedError("Edit mode must be enabled")
