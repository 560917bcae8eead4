from typing import Optional


class OrderKeyError(ValueError):
    """Base class for every order key failure."""

    code = "order_key_error"


class InvalidKey(OrderKeyError):
    """A key string that does not follow the integer + fraction format."""

    code = "invalid_key"

    def __init__(self, key: str, message: Optional[str] = None) -> None:
        super().__init__(message or f"invalid order key: {key}")
        self.key = key


class InvalidHead(InvalidKey):
    code = "invalid_head"

    def __init__(self, head: str) -> None:
        super().__init__(head, f"invalid order key head: {head}")
        self.head = head


class OrderViolation(OrderKeyError):
    """The lower bound does not sort before the upper bound."""

    code = "order_violation"

    def __init__(self, a: str, b: str) -> None:
        super().__init__(f"{a} >= {b}")
        self.a = a
        self.b = b


class Exhausted(OrderKeyError):
    """No integer part is left in the requested direction."""

    code = "exhausted"

    def __init__(self, direction: str) -> None:
        super().__init__(f"cannot {direction} any more")
        self.direction = direction
