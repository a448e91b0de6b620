"""
OTP Engine
==========
Issues codes and runs the per-identity validation state machine.

Per identity: NONE -> PENDING on generate; PENDING -> PENDING on a wrong
code (attempts + 1); PENDING -> NONE on success or resend. Expiry is only
evaluated when a code is validated; nothing sweeps records in the background.
"""

from datetime import timedelta
from typing import Optional

import structlog

from ..audit import EventLog, EventName
from ..clock import Clock, system_clock
from ..config import AuthFlowConfig
from ..exceptions import InvalidIdentity
from ..locking import KeyedLock
from ..storage.store import AuthStore
from .codes import RandomSource, generate_code
from .models import FailureReason, OtpRecord, ValidationResult

logger = structlog.get_logger(__name__)

MSG_NO_DATA = "OTP expired or not requested."
MSG_EXPIRED = "OTP has expired. Please request a new one."
MSG_MAX_ATTEMPTS = "Too many failed attempts. Please request a new OTP."
MSG_INCORRECT = "Incorrect OTP. {remaining} attempts remaining."


class OtpEngine:
    """Generation, validation and single-use consumption of OTP codes."""

    def __init__(
        self,
        store: AuthStore,
        events: EventLog,
        config: Optional[AuthFlowConfig] = None,
        clock: Clock = system_clock,
        rng: Optional[RandomSource] = None,
        lock: Optional[KeyedLock] = None,
    ):
        self.store = store
        self.events = events
        self.config = config or store.config
        self.clock = clock
        self.rng = rng
        self._lock = lock or KeyedLock()

    async def _load(self, identity: str) -> Optional[OtpRecord]:
        data = await self.store.get_otp(identity)
        if data is None:
            return None
        try:
            return OtpRecord.from_dict(data)
        except (KeyError, TypeError, ValueError, OverflowError):
            logger.warning("Malformed OTP record, treating as absent", identity=identity)
            return None

    async def _issue(self, identity: str) -> OtpRecord:
        record = OtpRecord(
            identity=identity,
            code=generate_code(self.rng),
            expires_at=self.clock() + timedelta(seconds=self.config.otp_validity_seconds),
        )
        await self.store.put_otp(identity, record.to_dict())
        await self.events.log(EventName.OTP_GENERATED, identity=identity)

        # Stands in for delivery; codes are never sent anywhere.
        logger.info(
            "OTP generated",
            identity=identity,
            code=record.code,
            expires_in=self.config.otp_validity_seconds,
        )
        return record

    async def generate(self, identity: str) -> OtpRecord:
        """
        Issue a fresh code, replacing any previous one for identity.

        Args:
            identity: Email address, used as given

        Returns:
            The new OtpRecord (attempts reset to 0)

        Raises:
            InvalidIdentity: identity is empty
            StorageUnavailable: the record could not be persisted
        """
        if not identity:
            raise InvalidIdentity("identity must be a non-empty string")
        async with self._lock.hold(identity):
            return await self._issue(identity)

    async def resend(self, identity: str) -> OtpRecord:
        """Discard any pending code and issue a new one."""
        if not identity:
            raise InvalidIdentity("identity must be a non-empty string")
        async with self._lock.hold(identity):
            await self.store.delete_otp(identity)
            return await self._issue(identity)

    async def _fail(
        self,
        identity: str,
        reason: FailureReason,
        message: str,
        attempts_remaining: Optional[int] = None,
        **details,
    ) -> ValidationResult:
        await self.events.log(
            EventName.OTP_VALIDATION_FAILED,
            identity=identity,
            reason=reason.value,
            **details,
        )
        return ValidationResult.failure(reason, message, attempts_remaining)

    async def validate(self, identity: str, submitted_code: str) -> ValidationResult:
        """
        Check a submitted code.

        Checks run in a fixed order: missing record, expiry, attempt cap,
        code comparison. The first one that fails decides the result.

        Args:
            identity: Email address the code was issued for
            submitted_code: Code entered by the user

        Returns:
            ValidationResult; failures carry a reason and user-facing message

        Raises:
            StorageUnavailable: the attempt count or the burn could not be persisted
        """
        async with self._lock.hold(identity):
            record = await self._load(identity)

            if record is None:
                return await self._fail(identity, FailureReason.NO_DATA, MSG_NO_DATA)

            if record.is_expired(self.clock()):
                return await self._fail(identity, FailureReason.EXPIRED, MSG_EXPIRED)

            if record.attempts >= self.config.max_attempts:
                logger.warning("OTP attempts exhausted", identity=identity)
                return await self._fail(
                    identity,
                    FailureReason.MAX_ATTEMPTS_EXCEEDED,
                    MSG_MAX_ATTEMPTS,
                    attempts_remaining=0,
                )

            if submitted_code != record.code:
                record.attempts += 1
                await self.store.put_otp(identity, record.to_dict())
                remaining = self.config.max_attempts - record.attempts
                logger.warning("Invalid OTP attempt", identity=identity, remaining=remaining)
                return await self._fail(
                    identity,
                    FailureReason.INCORRECT_VALUE,
                    MSG_INCORRECT.format(remaining=remaining),
                    attempts_remaining=remaining,
                    attempts=record.attempts,
                )

            # Burn after use
            await self.store.delete_otp(identity)
            await self.events.log(EventName.OTP_VALIDATED, identity=identity)
            return ValidationResult.ok()

    async def peek(self, identity: str) -> Optional[OtpRecord]:
        """Stored record for identity, expired or not."""
        return await self._load(identity)

    async def live_record(self, identity: str) -> Optional[OtpRecord]:
        """Stored record for identity if it has not expired."""
        record = await self._load(identity)
        if record is None or record.is_expired(self.clock()):
            return None
        return record

    async def invalidate(self, identity: str) -> None:
        """Drop any pending code for identity."""
        async with self._lock.hold(identity):
            if await self.store.delete_otp(identity):
                logger.info("OTP invalidated", identity=identity)

    async def purge_expired(self) -> int:
        """
        Remove expired and unreadable records from the OTP map.

        Returns:
            Number of records removed
        """
        now = self.clock()

        def keep(data) -> bool:
            try:
                record = OtpRecord.from_dict(data)
            except (KeyError, TypeError, ValueError, OverflowError, AttributeError):
                return False
            return not record.is_expired(now)

        removed = await self.store.prune_otp_map(keep)
        if removed:
            logger.info("Expired OTP records purged", removed=removed)
        return removed
