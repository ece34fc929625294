"""
Booking & Ticketing Module

Key Components:
- booking_service.py: the booking engine (system init, train lifecycle,
  ticket purchase and refund)
- ticket_service.py: ticket lookups
- router.py: FastAPI endpoints for tickets
- schemas.py: Pydantic models for ticket data
"""
