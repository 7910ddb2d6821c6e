"""
Application-level constants for hardcoded business logic.

These values represent core application behavior and should NEVER be changed
via environment variables or configuration.

For configurable values (connection pools, token lifetime, hashing cost,
etc.), see bookstore/settings.py.
"""

# ============================================================================
# Roles
# ============================================================================

ADMINISTRATOR_ROLE = "Administrator"
CUSTOMER_ROLE = "Customer"

# Roles created at startup, in this order
DEFAULT_ROLES = (ADMINISTRATOR_ROLE, CUSTOMER_ROLE)

# Role assigned to every newly registered user
DEFAULT_USER_ROLE = CUSTOMER_ROLE

# Role sets used by the HTTP authorization dependencies
READ_ROLES = (ADMINISTRATOR_ROLE, CUSTOMER_ROLE)
WRITE_ROLES = (ADMINISTRATOR_ROLE,)


# ============================================================================
# Error responses
# ============================================================================

# Message returned to clients for every unexpected server error.
# Details are only written to the server log.
INTERNAL_ERROR_MESSAGE = "Something went wrong. Please contact the Administrator"


# ============================================================================
# Field limits
# ============================================================================

AUTHOR_NAME_MAX_LENGTH = 50
AUTHOR_BIO_MAX_LENGTH = 250

BOOK_TITLE_MAX_LENGTH = 100
BOOK_ISBN_MAX_LENGTH = 20
BOOK_SUMMARY_MAX_LENGTH = 500
BOOK_IMAGE_MAX_LENGTH = 250
BOOK_YEAR_MAX = 9999
BOOK_PRICE_MAX_DIGITS = 10
BOOK_PRICE_DECIMAL_PLACES = 2

EMAIL_MAX_LENGTH = 256

# Password policy
PASSWORD_MIN_LENGTH = 6
# bcrypt only uses the first 72 bytes of its input
PASSWORD_MAX_BYTES = 72


# ============================================================================
# Logging
# ============================================================================

# Maximum size of a single JSON log line written by the structured formatter
MAX_LOG_SIZE_BYTES = 250000
