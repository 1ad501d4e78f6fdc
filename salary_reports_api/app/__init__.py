"""
Application package initializer.

This package contains the main entrypoint for the API and all of its
submodules.  Record sources and the aggregation engine live in
``services``, response models in ``schemas`` and the HTTP routes in
``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
