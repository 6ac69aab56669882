from quakequiz import db
from sqlalchemy import CheckConstraint, UniqueConstraint
from sqlalchemy.sql import func


class Score(db.Model):
    """One row per player: nickname, bcrypt PIN hash and best score so far."""
    __tablename__ = 'scores'
    __table_args__ = (
        UniqueConstraint('nickname', name='scores_nickname_unique'),
        CheckConstraint('score >= 0 AND score <= 100', name='scores_score_range'),
    )

    id = db.Column(db.Integer, primary_key=True)
    nickname = db.Column(db.String(20), nullable=False, index=True)
    # bcrypt digests are always 60 characters
    pin_hash = db.Column(db.String(60), nullable=False)
    score = db.Column(db.Integer, nullable=False, default=0)
    # Refreshed whenever the best score improves
    created_at = db.Column(db.DateTime(timezone=True), nullable=False, server_default=func.now())

    def to_dict(self):
        return {
            'id': self.id,
            'nickname': self.nickname,
            'score': self.score,
            'created_at': self.created_at.isoformat() if self.created_at else None,
        }

    def __repr__(self):
        return f'<Score {self.nickname!r} score={self.score}>'
