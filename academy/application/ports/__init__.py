from academy.application.ports.repositories import AttemptStore
from academy.application.ports.catalog import QuizCatalog
from academy.application.ports.locks import RunLock

__all__ = [
    "AttemptStore",
    "QuizCatalog",
    "RunLock",
]
