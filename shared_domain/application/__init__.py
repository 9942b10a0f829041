"""
Application layer.

The application layer orchestrates domain objects and defines the boundaries
of the system. This package only carries the ports that infrastructure
implements:

- UnitOfWork: Transaction boundary that drains aggregate events
- Protocols: Repositories, session context providers, event idempotency
"""
