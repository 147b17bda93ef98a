"""Catalog Gateway.

REST access to the DataHub metadata catalog, served through DataHub's
GraphQL API.
"""

__version__ = "0.1.0"
