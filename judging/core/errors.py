"""
Error taxonomy for the judging server

Raised by core/services, translated to HTTP status codes by the routers:
  - ValidationError  -> 400
  - NotFoundError    -> 404
  - ConstraintError  -> 400
"""


class ValidationError(ValueError):
    """Malformed or out-of-range input (score outside [0, 10], bad ids)"""


class NotFoundError(LookupError):
    """Referenced team, expert or category does not exist"""


class ConstraintError(Exception):
    """Operation would break a store invariant (e.g. deleting the last category)"""
