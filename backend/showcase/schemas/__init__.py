"""Pydantic Schemas — persisted records, patch types, and API request/response shapes.

Invariants:
    - Records are validated when loaded from documents and before every save
    - Domain types from core/ used for enum fields

Design Decisions:
    - Records and API contracts share one module per entity: the persisted
      document IS the record's JSON dump, no ORM mapping in between
"""
