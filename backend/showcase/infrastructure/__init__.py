"""Infrastructure Layer — storage medium, session management, and cross-cutting concerns.

Invariants:
    - Infrastructure never imports from services/ or api/
    - All driver exceptions mapped to DatabaseError before leaving this layer

Design Decisions:
    - SqlDocumentPersistence is the only class that touches the documents table
"""
