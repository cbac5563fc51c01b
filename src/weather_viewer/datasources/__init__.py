"""External data source integrations.

Each subdirectory is one data source with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports
    ├── client.py         # API URLs, constants
    ├── models.py         # Dataclasses for API responses (optional)
    └── {feature}.py      # Fetch functions (one per endpoint/concept)

Adding a new datasource
-----------------------
1. Create ``datasources/{name}/`` with files above.
   See ``visualcrossing/`` for a minimal example, ``openweather/`` for one
   that parses its responses into models.

2. Write fetch functions that return dicts or dataclasses::

       from weather_viewer.services.http import session

       def fetch_something(city: str, api_key: str) -> dict[str, Any]:
           resp = session.get(API_URL, params={...})
           resp.raise_for_status()
           return resp.json()

   Let ``requests.HTTPError`` propagate; the CLI turns it into a message.

3. Re-export public API in ``__init__.py`` with ``__all__``.

4. Wire into a flow (see ``flows/``) as a ``@task``.

5. Add tests in ``tests/test_{name}.py``.
"""
