"""Support ticket endpoints, keyed by referrer rather than chain."""

from openocean.api.base import ApiNamespace
from openocean.models.ticket import SubmitTicketParams, SubmitTicketResponse, TicketResponse
from openocean.request import path_segment


class TicketApi(ApiNamespace):
    async def submit(self, referer: str, params: SubmitTicketParams) -> SubmitTicketResponse:
        """Open a ticket for a failed swap."""
        return await self.client.post_json(
            f"/{path_segment(referer)}/ticket", SubmitTicketResponse, params
        )

    async def get(self, referer: str) -> TicketResponse:
        return await self.client.get_json(f"/{path_segment(referer)}/ticket", TicketResponse)
