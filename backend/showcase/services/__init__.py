"""Services Layer — stores and orchestration over DocumentPersistence.

Invariants:
    - Services depend on core/ rules and the DocumentPersistence protocol only
    - Every mutation is a locked read-modify-write followed by a whole-document save

Design Decisions:
    - One class per component: UserStore, PortfolioStore, SessionManager,
      PortfolioAggregationEngine; bootstrap.py wires them
"""
