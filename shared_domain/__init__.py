"""
Building blocks for a Domain-Driven Design domain layer.

Typed entity identity, structural value equality, aggregate domain-event
queues and guard clauses, plus the ports that persistence layers implement.
"""

__version__ = "0.1.0"
