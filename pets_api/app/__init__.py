"""
Application package initializer.

The pets application is organised around a content provider: a URI
router, a field validator and a CRUD dispatcher sitting on top of an
embedded SQLite table.  The HTTP routes in ``api/v1/endpoints`` are a
thin surface over that provider.
"""
