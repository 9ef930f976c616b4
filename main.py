"""WSGI entrypoint for the recipe catalog service.

The Flask development server is not started from this module. Local
development can use ``flask --app main run`` which imports the ``app`` object
defined below; deployments point a WSGI server such as Gunicorn at
``main:app``.
"""

from recipe_catalog import create_app

app = create_app()


__all__ = ["app"]
