"""
Application package initializer.

The application is split into three layers: ``core.store`` keeps the
user records in memory, ``services`` forwards requests to the store
and ``api`` exposes the services over HTTP.  Versioning is handled by
grouping routers under the ``api/<version>/`` hierarchy.
"""
