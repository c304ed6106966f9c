"""
Service layer: generic CRUD engine (base_service), data-access primitives
(crud) and per-collection business rules (domain).
"""
