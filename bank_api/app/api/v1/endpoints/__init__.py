"""
Endpoint subpackage for API v1.

``resources`` builds the CRUD and lookup routers for each entity kind;
``index`` serves the combined table dump used by the grid page.  The
routers are aggregated in ``router.py`` at the package level.
"""
