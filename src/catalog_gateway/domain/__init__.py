"""Catalog pipelines: parameter selection, normalization and mutation decisions."""

from catalog_gateway.domain.catalog_service import CatalogService
from catalog_gateway.domain.params import SearchParams

__all__ = ["CatalogService", "SearchParams"]
