from catalog.services.catalog_service import CatalogService
from catalog.services.reservation_service import ReservationService

__all__ = ["CatalogService", "ReservationService"]
