"""
Flow Controller
===============
Moves a client between awaiting-email, awaiting-code and authenticated,
and rebuilds that position from storage after a restart.
"""

from typing import Optional

import structlog

from ..exceptions import StorageUnavailable
from ..otp.engine import MSG_NO_DATA, OtpEngine
from ..otp.models import OtpRecord
from ..session.manager import SessionManager
from .models import FlowState, FlowStep
from .validation import is_valid_email, is_well_formed_code

logger = structlog.get_logger(__name__)

MSG_INVALID_EMAIL = "Please enter a valid email address."
MSG_INVALID_CODE = "OTP must be 6 digits."
MSG_STORAGE = "Something went wrong. Please try again."


class FlowController:
    """
    Orchestrates the OTP engine and session manager for one client.

    The pending-identity marker records which email has a code in flight
    so the awaiting-code step survives a restart.
    """

    def __init__(self, engine: OtpEngine, sessions: SessionManager):
        self.engine = engine
        self.sessions = sessions
        self.store = engine.store
        self.state = FlowState()

    def _awaiting_code(self, record: OtpRecord) -> FlowState:
        self.state = FlowState(
            step=FlowStep.AWAITING_CODE,
            identity=record.identity,
            expires_at=record.expires_at,
            attempts=record.attempts,
        )
        return self.state

    def _awaiting_email(self, error: Optional[str] = None) -> FlowState:
        self.state = FlowState(step=FlowStep.AWAITING_EMAIL, error=error)
        return self.state

    async def restore(self) -> FlowState:
        """Work out the starting step from what is persisted."""
        try:
            session = await self.sessions.current()
            if session is not None:
                self.state = FlowState(
                    step=FlowStep.AUTHENTICATED,
                    identity=session.identity,
                    session=session,
                )
                return self.state

            pending = await self.store.get_pending_identity()
            if pending:
                record = await self.engine.live_record(pending)
                if record is not None:
                    logger.info("Restored pending OTP", identity=pending)
                    return self._awaiting_code(record)
                await self.store.clear_pending_identity()
        except StorageUnavailable as e:
            logger.error("Failed to restore flow state", error=str(e))
        return self._awaiting_email()

    async def submit_email(self, email: str) -> FlowState:
        if not is_valid_email(email):
            self.state.error = MSG_INVALID_EMAIL
            return self.state

        try:
            await self.store.set_pending_identity(email)
            record = await self.engine.generate(email)
        except StorageUnavailable as e:
            logger.error("Failed to start OTP login", identity=email, error=str(e))
            self.state.error = MSG_STORAGE
            return self.state
        return self._awaiting_code(record)

    async def submit_code(self, code: str) -> FlowState:
        identity = self.state.identity
        if self.state.step != FlowStep.AWAITING_CODE or not identity:
            return self._awaiting_email(MSG_NO_DATA)

        if not is_well_formed_code(code):
            self.state.error = MSG_INVALID_CODE
            return self.state

        try:
            result = await self.engine.validate(identity, code)
            if not result.success:
                record = await self.engine.peek(identity)
                if record is not None:
                    self.state.attempts = record.attempts
                    self.state.expires_at = record.expires_at
                self.state.error = result.message
                self.state.last_result = result
                return self.state

            session = await self.sessions.create(identity)
            await self.store.clear_pending_identity()
        except StorageUnavailable as e:
            logger.error("Failed to verify OTP", identity=identity, error=str(e))
            self.state.error = MSG_STORAGE
            return self.state

        self.state = FlowState(
            step=FlowStep.AUTHENTICATED,
            identity=identity,
            session=session,
            last_result=result,
        )
        return self.state

    async def resend(self) -> FlowState:
        identity = self.state.identity
        if self.state.step != FlowStep.AWAITING_CODE or not identity:
            return self._awaiting_email()
        try:
            record = await self.engine.resend(identity)
        except StorageUnavailable as e:
            logger.error("Failed to resend OTP", identity=identity, error=str(e))
            self.state.error = MSG_STORAGE
            return self.state
        return self._awaiting_code(record)

    async def logout(self) -> FlowState:
        try:
            await self.sessions.destroy()
            await self.store.clear_pending_identity()
        except StorageUnavailable as e:
            logger.error("Failed to clear session on logout", error=str(e))
        return self._awaiting_email()
