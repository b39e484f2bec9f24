"""
Service layer.

``pet_provider`` holds the content provider (routing, validation and
CRUD dispatch); ``catalog_service`` builds the catalog screen's
operations on top of it.
"""
