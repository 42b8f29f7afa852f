# Services package init
"""
COVID-19 India API — Services Layer
=====================================

What:  Query layer sitting between routes (HTTP) and the storage handle.
Why:   Routes handle HTTP, services build and run SQL.
How:   Each public method issues exactly one parameterized statement through
       the AsyncSession it is given and returns Pydantic response models.

Service Inventory:
    - StateService: list/get states, per-state aggregated stats
    - DistrictService: district create/read/update/delete and state lookup

Error Handling:
    SQLAlchemy errors are logged with the failing operation and re-raised as
    DatabaseError, which the global handler answers with a generic 500.
"""
