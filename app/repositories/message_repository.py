"""Message repository."""

from __future__ import annotations

from typing import Any

from app.core.exceptions import ConstraintViolationError
from app.models.message import Message
from app.repositories.base_repository import AuthorizedRepository
from app.repositories.campaign_repository import CampaignRepository
from app.repositories.lead_repository import LeadRepository


class MessageRepository(AuthorizedRepository[Message]):
    model = Message

    def _check_references(self, values: dict[str, Any]) -> None:
        # A lead or campaign the caller cannot read is reported as missing.
        lead_id = values.get("lead_id")
        if "lead_id" in values and (
            lead_id is None or LeadRepository(self.session, self.caller).get(lead_id) is None
        ):
            self._log_denied("reference", "lead_not_visible")
            raise ConstraintViolationError("messages.lead_id does not reference an existing lead.")

        campaign_id = values.get("campaign_id")
        if campaign_id is not None and CampaignRepository(self.session, self.caller).get(campaign_id) is None:
            self._log_denied("reference", "campaign_not_visible")
            raise ConstraintViolationError("messages.campaign_id does not reference an existing campaign.")
