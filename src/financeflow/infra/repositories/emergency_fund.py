"""SQLModel implementation of EmergencyFund repository."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable, Optional

from sqlmodel import Session, select

from ...models.emergency_fund import EmergencyFund


class SQLModelEmergencyFundRepository:
    """Stores at most one fund per user (unique ``user_id`` column)."""

    def __init__(self, session_factory: Callable[[], Session]):
        self.session_factory = session_factory

    def get_for_user(self, *, user_id: int) -> Optional[EmergencyFund]:
        with self.session_factory() as session:
            return session.exec(
                select(EmergencyFund).where(EmergencyFund.user_id == user_id)
            ).first()

    def create(self, fund: EmergencyFund, *, user_id: int) -> EmergencyFund:
        with self.session_factory() as session:
            fund.user_id = user_id
            session.add(fund)
            session.commit()
            session.refresh(fund)
            session.expunge(fund)
            return fund

    def update(self, fund: EmergencyFund, *, user_id: int) -> EmergencyFund:
        with self.session_factory() as session:
            fund.user_id = user_id
            fund.updated_at = datetime.now(timezone.utc)
            session.add(fund)
            session.commit()
            session.refresh(fund)
            session.expunge(fund)
            return fund

    def delete(self, *, user_id: int) -> None:
        with self.session_factory() as session:
            fund = session.exec(
                select(EmergencyFund).where(EmergencyFund.user_id == user_id)
            ).first()
            if fund:
                session.delete(fund)
                session.commit()
