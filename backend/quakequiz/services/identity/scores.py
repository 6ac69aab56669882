from flask import current_app
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.sql import func

from quakequiz import db
from quakequiz.models import Score
from .errors import StorageError, UnknownIdentity
from .validation import clean_nickname, clean_score


def submit_score(nickname, score) -> Score:
    """Record a game result, keeping only the best score per player.

    The improvement check lives in the UPDATE's WHERE clause so the store
    evaluates it atomically: of two concurrent submissions the higher wins,
    and resubmitting the same or a lower score writes nothing.
    """
    nickname = clean_nickname(nickname)
    score = clean_score(score)

    try:
        updated = (
            Score.query
            .filter(Score.nickname == nickname, Score.score < score)
            .update({Score.score: score, Score.created_at: func.now()}, synchronize_session=False)
        )
        db.session.commit()
        identity = Score.query.filter_by(nickname=nickname).first()
    except SQLAlchemyError as exc:
        db.session.rollback()
        current_app.logger.error(f"[score-update] nickname={nickname!r} failed: {exc}")
        raise StorageError('Error processing score update.') from exc

    if identity is None:
        current_app.logger.warning(f"[score-unknown] nickname={nickname!r} has no session")
        raise UnknownIdentity('Nickname not found for score update.')

    if updated:
        current_app.logger.info(f"[score-update] nickname={nickname!r} best={identity.score}")
    else:
        current_app.logger.info(f"[score-keep] nickname={nickname!r} submitted={score} best={identity.score}")
    return identity
