from .factory import (
    build_expiration_sweeper,
    build_lifecycle_manager,
    get_quiz_catalog,
)

__all__ = [
    "build_expiration_sweeper",
    "build_lifecycle_manager",
    "get_quiz_catalog",
]
