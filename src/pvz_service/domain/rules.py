"""Validation rules: exact membership checks over the domain enumerations.

No partial matching and no case normalization; a value is valid only if it is
exactly one of the enumeration's values.
"""

from __future__ import annotations

from enum import Enum
from typing import TypeVar

from .errors import InvalidCity, InvalidPassword, InvalidProductType, InvalidUserRole
from .value_objects import City, ProductCategory, UserRole

E = TypeVar("E", bound=Enum)

# bcrypt ignores everything past 72 bytes
MAX_PASSWORD_BYTES = 72


def _member(enum_type: type[E], value: object) -> E | None:
    if isinstance(value, enum_type):
        return value
    for member in enum_type:
        if member.value == value:
            return member
    return None


def is_valid_city(city: object) -> bool:
    """Return True if `city` is one of the supported cities."""
    return _member(City, city) is not None


def is_valid_product_category(category: object) -> bool:
    """Return True if `category` is one of the supported product categories."""
    return _member(ProductCategory, category) is not None


def is_valid_user_role(role: object) -> bool:
    """Return True if `role` is one of the supported user roles."""
    return _member(UserRole, role) is not None


def validate_city(city: object) -> City:
    """Return the `City` for `city`.

    Raises:
        InvalidCity: If `city` is not one of the supported cities.
    """
    if (member := _member(City, city)) is None:
        raise InvalidCity(str(city))
    return member


def validate_product_category(category: object) -> ProductCategory:
    """Return the `ProductCategory` for `category`.

    Raises:
        InvalidProductType: If `category` is not a supported category.
    """
    if (member := _member(ProductCategory, category)) is None:
        raise InvalidProductType(str(category))
    return member


def validate_user_role(role: object) -> UserRole:
    """Return the `UserRole` for `role`.

    Raises:
        InvalidUserRole: If `role` is not a supported role.
    """
    if (member := _member(UserRole, role)) is None:
        raise InvalidUserRole(str(role))
    return member


def validate_password(password: str) -> str:
    """Return `password` if it is non-empty and fits in MAX_PASSWORD_BYTES.

    Length is measured on the UTF-8 encoding.

    Raises:
        InvalidPassword: If the password is empty or too long.
    """
    if not password or len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise InvalidPassword(MAX_PASSWORD_BYTES)
    return password
