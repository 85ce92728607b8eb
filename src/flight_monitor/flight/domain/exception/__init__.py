from .exceptions import (
    InvalidStatusTransitionException as InvalidStatusTransitionException,
)
