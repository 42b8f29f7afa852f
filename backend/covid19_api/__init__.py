"""
COVID-19 India API — Application Package Initializer
=====================================================

What: Marks the `covid19_api` directory as a Python package.
Why:  Enables module imports like `from covid19_api.config import settings`.
Who:  Used implicitly by Python's import system and explicitly by pytest and uvicorn.

Architecture Note:
    The backend follows the same layered split for every endpoint:

    ┌─────────────────────────────────────┐
    │           Routes (API Layer)        │  ← HTTP concerns only
    ├─────────────────────────────────────┤
    │         Services (Query Logic)      │  ← One SQL statement per call
    ├─────────────────────────────────────┤
    │       Models & Schemas (Data)       │  ← SQLAlchemy ORM + Pydantic
    ├─────────────────────────────────────┤
    │      Storage Handle (Persistence)   │  ← One async SQLite connection
    └─────────────────────────────────────┘

    Routes never see SQL; services never see HTTP. The storage handle is
    constructed once and handed to the app at composition time.
"""

__version__ = "1.0.0"
