from typing import NamedTuple, Optional

from flask import current_app
from sqlalchemy.exc import IntegrityError, SQLAlchemyError

from quakequiz import db
from quakequiz.models import Score
from .errors import InvalidCredentials, InternalInconsistency, StorageError
from .hashing import hash_pin, verify_pin
from .validation import clean_nickname, clean_pin

UNIQUE_VIOLATION = '23505'


class Resolution(NamedTuple):
    created: bool
    identity: Score


def _find_identity(nickname: str) -> Optional[Score]:
    try:
        return Score.query.filter_by(nickname=nickname).first()
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error(f"[session-lookup] nickname={nickname!r} failed: {exc}")
        raise StorageError('Error looking up player.') from exc


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    sqlstate = getattr(orig, 'pgcode', None) or getattr(orig, 'sqlstate', None)
    if sqlstate:
        return sqlstate == UNIQUE_VIOLATION
    # Drivers without SQLSTATE (sqlite) only describe the constraint in text
    return 'unique' in str(orig).lower()


def _authenticate(identity: Score, pin: str) -> Score:
    if not verify_pin(pin, identity.pin_hash):
        current_app.logger.info(f"[session-deny] nickname={identity.nickname!r} incorrect pin")
        raise InvalidCredentials('Incorrect PIN provided.')
    return identity


def resolve_identity(nickname, pin) -> Resolution:
    """Authenticate an existing nickname or create it on first use.

    First write wins: if two first logins race, the loser's insert trips the
    unique constraint, and it falls back to verifying against the winner's
    row exactly once.
    """
    nickname = clean_nickname(nickname)
    pin = clean_pin(pin)

    existing = _find_identity(nickname)
    if existing is not None:
        identity = _authenticate(existing, pin)
        current_app.logger.info(f"[session-auth] nickname={nickname!r} id={identity.id}")
        return Resolution(created=False, identity=identity)

    new_identity = Score(nickname=nickname, pin_hash=hash_pin(pin), score=0)
    db.session.add(new_identity)
    try:
        db.session.commit()
    except IntegrityError as exc:
        db.session.rollback()
        if not _is_unique_violation(exc):
            current_app.logger.error(f"[session-create] nickname={nickname!r} insert failed: {exc}")
            raise StorageError('Error creating user.') from exc
        current_app.logger.warning(f"[session-race] nickname={nickname!r} created concurrently, retrying lookup")
        winner = _find_identity(nickname)
        if winner is None:
            raise InternalInconsistency(
                'Race condition resolution failed - user not found after insert conflict.'
            ) from exc
        identity = _authenticate(winner, pin)
        current_app.logger.info(f"[session-auth] nickname={nickname!r} id={identity.id} after race")
        return Resolution(created=False, identity=identity)
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error(f"[session-create] nickname={nickname!r} insert failed: {exc}")
        raise StorageError('Error creating user.') from exc

    current_app.logger.info(f"[session-create] nickname={nickname!r} id={new_identity.id}")
    return Resolution(created=True, identity=new_identity)
