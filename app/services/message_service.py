"""Message service: outreach records tied to a lead and optionally a campaign."""

from __future__ import annotations

from typing import Any

from app.auth.caller_context import CallerContext
from app.models.base import utcnow
from app.models.enums import MessageStatus
from app.models.message import Message
from app.repositories.message_repository import MessageRepository
from app.services.base_service import BaseService, Page


def _status_value(status: Any) -> Any:
    return getattr(status, "value", status)


class MessageService(BaseService):
    def __init__(self, caller: CallerContext | None, db=None) -> None:
        super().__init__(db)
        self.repo = MessageRepository(self.db, caller)

    def create_message(self, data: dict[str, Any]) -> Message:
        payload = dict(data)
        if _status_value(payload.get("status")) == MessageStatus.SENT.value and not payload.get("sent_at"):
            payload["sent_at"] = utcnow()
        message = self.repo.create(**payload)
        self.commit()
        self.db.refresh(message)
        return message

    def get_message(self, message_id: str) -> Message | None:
        return self.repo.get(message_id)

    def list_messages(
        self,
        lead_id: str | None = None,
        campaign_id: str | None = None,
        message_type: str | None = None,
        status: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> Page[Message]:
        criteria = []
        if lead_id:
            criteria.append(Message.lead_id == lead_id)
        if campaign_id:
            criteria.append(Message.campaign_id == campaign_id)
        if message_type:
            criteria.append(Message.type == message_type)
        if status:
            criteria.append(Message.status == status)
        items = self.repo.list(*criteria, order_by=(Message.created_at.desc(), Message.id), limit=limit, offset=offset)
        return Page(items=items, total=self.repo.count(*criteria), limit=limit, offset=offset)

    def update_message(self, message_id: str, changes: dict[str, Any]) -> Message | None:
        payload = dict(changes)
        if _status_value(payload.get("status")) == MessageStatus.SENT.value and not payload.get("sent_at"):
            current = self.repo.get(message_id)
            if current is not None and current.sent_at is None:
                payload["sent_at"] = utcnow()
        message = self.repo.update(message_id, **payload)
        if message is None:
            return None
        self.commit()
        self.db.refresh(message)
        return message

    def delete_message(self, message_id: str) -> bool:
        deleted = self.repo.delete(message_id)
        self.commit()
        return deleted
