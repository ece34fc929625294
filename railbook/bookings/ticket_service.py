from typing import List

from railbook.bookings.schemas import Ticket
from railbook.exceptions import NotFoundError
from railbook.storage.record_store import RecordStore

class TicketService:
    """Read-only access to issued tickets"""
    
    def __init__(self, store: RecordStore):
        self.store = store
    
    def get_ticket(self, ticket_id: int) -> Ticket:
        # Tickets outlive their train when it is closed, so no train lookup here
        ticket = self.store.tickets.get(ticket_id)
        if ticket is None:
            raise NotFoundError("Ticket not found")
        return ticket
    
    def get_tickets_for_train(self, train_id: int) -> List[Ticket]:
        return [ticket for _, ticket in self.store.tickets.iterate() if ticket.train_id == train_id]
