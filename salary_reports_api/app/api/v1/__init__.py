"""
Version 1 of the API.

The reports and insights routes keep the paths of the original
service (``/reports``, ``/reports/{year}``, ``/insights``), so this
router is mounted at the application root.
"""
