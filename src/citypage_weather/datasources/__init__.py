"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # URLs and constants
    ├── models.py         # Dataclasses for feed elements
    └── {feature}.py      # Fetch / parse functions

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``envcanada/`` for the citypage XML source.

2. Fetch through the shared session::

       from citypage_weather.services.http import session

       resp = session.get(URL)
       resp.raise_for_status()

3. Expose a document view with the same accessors as
   ``CitypageDocument`` so the engine in ``normalize/`` can consume it.

4. Add tests in ``tests/test_{name}.py``.
"""
