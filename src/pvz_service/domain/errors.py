"""Domain-layer error definitions."""

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class ValidationError(DomainError):
    """Raised when an input value falls outside its allowed set."""


class NotFoundError(DomainError):
    """Raised when a referenced entity does not exist."""


class InvalidTransitionError(DomainError):
    """Raised when an aggregate is in an invalid state for the attempted action."""


# ============================================================================
#                           Validation errors
# ============================================================================


class InvalidCity(ValidationError):
    """Raised when a PVZ is registered in an unsupported city."""

    def __init__(self, city: str) -> None:
        super().__init__(f"Invalid city: {city!r}.")
        self.city = city


class InvalidProductType(ValidationError):
    """Raised when a product category is not one of the supported categories."""

    def __init__(self, category: str) -> None:
        super().__init__(f"Invalid product type: {category!r}.")
        self.category = category


class InvalidUserRole(ValidationError):
    """Raised when a user role is not one of the supported roles."""

    def __init__(self, role: str) -> None:
        super().__init__(f"Invalid user role: {role!r}.")
        self.role = role


class InvalidPassword(ValidationError):
    """Raised when a password is empty or longer than the hasher accepts."""

    def __init__(self, max_bytes: int) -> None:
        super().__init__(f"Password must be 1 to {max_bytes} bytes long.")
        self.max_bytes = max_bytes


class InvalidPagination(ValidationError):
    """Raised when a page number or page size is not a positive integer."""

    def __init__(self, page: int, limit: int) -> None:
        super().__init__(
            f"Invalid pagination: page={page}, limit={limit} (both must be >= 1)."
        )
        self.page = page
        self.limit = limit


# ============================================================================
#                           PVZ related errors
# ============================================================================


class PVZNotFound(NotFoundError):
    """Raised when the referenced PVZ does not exist."""

    def __init__(self, pvz_id: str) -> None:
        super().__init__(f"PVZ {pvz_id} not found.")
        self.pvz_id = pvz_id


# ============================================================================
#                   Reception / product lifecycle errors
# ============================================================================


class ReceptionAlreadyOpen(InvalidTransitionError):
    """Raised when a PVZ already has a reception in progress."""

    def __init__(self, pvz_id: str) -> None:
        super().__init__(f"PVZ {pvz_id} already has an open reception.")
        self.pvz_id = pvz_id


class NoOpenReception(InvalidTransitionError):
    """Raised when closing or editing a reception but none is open for the PVZ."""

    def __init__(self, pvz_id: str) -> None:
        super().__init__(f"PVZ {pvz_id} has no open reception.")
        self.pvz_id = pvz_id


class NoActiveReception(InvalidTransitionError):
    """Raised when adding a product to a PVZ without a reception in progress."""

    def __init__(self, pvz_id: str) -> None:
        super().__init__(f"No active reception for PVZ {pvz_id}.")
        self.pvz_id = pvz_id


class ReceptionAlreadyClosed(InvalidTransitionError):
    """Raised when the conditional close finds the reception no longer open."""

    def __init__(self, reception_id: str) -> None:
        super().__init__(f"Reception {reception_id} is already closed.")
        self.reception_id = reception_id


class NoProductsToDelete(InvalidTransitionError):
    """Raised when removing the last product of a reception that holds none."""

    def __init__(self, reception_id: str) -> None:
        super().__init__(f"Reception {reception_id} has no products to delete.")
        self.reception_id = reception_id


# ============================================================================
#                           User related errors
# ============================================================================


class EmailTaken(DomainError):
    """Raised when registering a user with an email that is already in use."""

    def __init__(self, email: str) -> None:
        super().__init__(f"Email {email!r} is already taken.")
        self.email = email


class InvalidCredentials(DomainError):
    """Raised when an email/password pair does not match a registered user."""

    def __init__(self) -> None:
        super().__init__("Invalid credentials.")
