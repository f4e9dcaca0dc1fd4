"""Abstract base class for ticket providers."""

from abc import ABC, abstractmethod

from fjc.models import TicketSummary


class TicketProvider(ABC):
    @abstractmethod
    def get_ticket(self, project: str, issue_id: str) -> TicketSummary: ...
