"""
Factory
=======
Wires storage, audit log, OTP engine, session manager and flow controller.
"""

from dataclasses import dataclass
from typing import Optional

from .audit import EventLog
from .clock import Clock, system_clock
from .config import AuthFlowConfig
from .flow import FlowController
from .otp import OtpEngine
from .otp.codes import RandomSource
from .session import SessionManager
from .storage import AuthStore, InMemoryStorage, StorageAdapter


@dataclass
class AuthFlow:
    """All components of one client's login flow."""
    config: AuthFlowConfig
    store: AuthStore
    events: EventLog
    engine: OtpEngine
    sessions: SessionManager
    controller: FlowController


def create_auth_flow(
    adapter: Optional[StorageAdapter] = None,
    config: Optional[AuthFlowConfig] = None,
    clock: Clock = system_clock,
    rng: Optional[RandomSource] = None,
) -> AuthFlow:
    """
    Build a ready-to-use login flow.

    Args:
        adapter: Backing key-value store (in-memory if omitted)
        config: Flow configuration (read from environment if omitted)
        clock: Time source shared by every component
        rng: Random source for codes

    Returns:
        AuthFlow bundle
    """
    config = config or AuthFlowConfig()
    store = AuthStore(adapter or InMemoryStorage(), config)
    events = EventLog(store, clock)
    engine = OtpEngine(store, events, config=config, clock=clock, rng=rng)
    sessions = SessionManager(store, events, clock=clock)
    return AuthFlow(
        config=config,
        store=store,
        events=events,
        engine=engine,
        sessions=sessions,
        controller=FlowController(engine, sessions),
    )
