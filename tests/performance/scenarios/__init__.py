"""
Locust scenario user classes.

Each module in this package defines one Locust ``HttpUser`` subclass
that models a specific traffic pattern:

- :mod:`.mixed`: read-heavy blend of task and user reads with writes
- :mod:`.task_crud`: full CRUD cycle including deletes

All concrete scenarios inherit from the abstract base class in
:mod:`.base`, which creates the owning user and the shared task pool.
"""
