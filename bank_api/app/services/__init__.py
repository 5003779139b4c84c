"""
Service layer abstraction.

``record_store`` wraps a database connection for one entity kind,
``resource_controller`` implements the CRUD and lookup contract on top
of it and ``lookup_adapter`` narrows a controller to lookups only.
Entity kinds are described in ``entity_kinds``.
"""
