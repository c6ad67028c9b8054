"""Module including value objects used across the domain layer."""

from enum import Enum


class City(str, Enum):
    """Cities in which a PVZ may be registered."""

    MOSCOW = "Москва"
    SAINT_PETERSBURG = "Санкт-Петербург"
    KAZAN = "Казань"


class ProductCategory(str, Enum):
    """Categories a product may be recorded under."""

    ELECTRONICS = "электроника"
    CLOTHING = "одежда"
    SHOES = "обувь"


class UserRole(str, Enum):
    """Roles a user may hold."""

    CLIENT = "client"
    EMPLOYEE = "employee"
    MODERATOR = "moderator"


class ReceptionStatus(str, Enum):
    """Lifecycle state of a reception. CLOSED is terminal."""

    IN_PROGRESS = "in_progress"
    CLOSED = "close"
