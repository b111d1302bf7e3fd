from academy.application.use_cases.quiz.attempt_lifecycle import AttemptLifecycleManager
from academy.application.use_cases.quiz.expire_attempts import ExpirationSweeper, SweepReport

__all__ = [
    "AttemptLifecycleManager",
    "ExpirationSweeper",
    "SweepReport",
]
