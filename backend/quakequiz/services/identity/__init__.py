"""Identity services: nickname+PIN sessions, best-score updates, leaderboard.

Routes import from here; everything below talks to the database through
`db.session` and leaves cross-request correctness to the store's unique and
check constraints rather than application locks.
"""

from .errors import (
    IdentityError,
    ValidationError,
    InvalidCredentials,
    UnknownIdentity,
    InternalInconsistency,
    StorageError,
)
from .resolver import Resolution, resolve_identity
from .scores import submit_score
from .leaderboard import list_leaderboard, leaderboard_position

__all__ = [
    'IdentityError',
    'ValidationError',
    'InvalidCredentials',
    'UnknownIdentity',
    'InternalInconsistency',
    'StorageError',
    'Resolution',
    'resolve_identity',
    'submit_score',
    'list_leaderboard',
    'leaderboard_position',
]
