"""
Rail Booking Engine

Booking and inventory service for a rail network. It tracks stations, trains,
seat availability and issued tickets over a persistent record store.

Key Components:
- storage: ID-keyed record tables and the shared identifier allocator
- admin: system initialization and admin authorization
- stations / trains: read-only lookups and train management endpoints
- bookings: the booking engine (ticket purchase, refund, train lifecycle)
"""

__version__ = "1.0.0"
