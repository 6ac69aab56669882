"""create scores table

Revision ID: 1a7c3e9d2b40
Revises:
Create Date: 2025-04-12 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '1a7c3e9d2b40'
down_revision = None
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)

    # Databases from before migrations already have a scores table; the next revision fixes it up.
    if 'scores' in set(insp.get_table_names()):
        return

    op.create_table(
        'scores',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('nickname', sa.String(length=20), nullable=False),
        sa.Column('pin_hash', sa.String(length=60), nullable=False),
        sa.Column('score', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.func.now()),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('nickname', name='scores_nickname_unique'),
        sa.CheckConstraint('score >= 0 AND score <= 100', name='scores_score_range'),
    )
    op.create_index('ix_scores_nickname', 'scores', ['nickname'])


def downgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    if 'scores' not in set(insp.get_table_names()):
        return
    # Tables upgraded from before migrations may lack the index
    if 'ix_scores_nickname' in {i['name'] for i in insp.get_indexes('scores')}:
        op.drop_index('ix_scores_nickname', table_name='scores')
    op.drop_table('scores')
