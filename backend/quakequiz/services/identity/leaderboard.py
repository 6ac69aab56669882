from flask import current_app
from sqlalchemy import and_, or_
from sqlalchemy.exc import SQLAlchemyError

from quakequiz import db
from quakequiz.models import Score
from .errors import StorageError, UnknownIdentity
from .validation import clean_nickname


def _ranked():
    # id breaks ties so equal scores keep a stable order
    return Score.query.order_by(Score.score.desc(), Score.id.asc())


def list_leaderboard():
    """All players, best score first."""
    try:
        return _ranked().all()
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error(f"[leaderboard] fetch failed: {exc}")
        raise StorageError('Error fetching scores.') from exc


def leaderboard_position(nickname) -> dict:
    """1-based rank of a player under the leaderboard ordering, plus the player count."""
    nickname = clean_nickname(nickname)
    try:
        identity = Score.query.filter_by(nickname=nickname).first()
        if identity is None:
            raise UnknownIdentity('Nickname not found.')
        ahead = Score.query.filter(
            or_(
                Score.score > identity.score,
                and_(Score.score == identity.score, Score.id < identity.id),
            )
        ).count()
        total = Score.query.count()
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error(f"[leaderboard-position] nickname={nickname!r} failed: {exc}")
        raise StorageError('Error fetching player position.') from exc
    return {'position': ahead + 1, 'total': total}
