"""migrate legacy plaintext pin column to pin_hash

Revision ID: 5d2e8f417c93
Revises: 1a7c3e9d2b40
Create Date: 2025-04-19 18:30:00.000000

Old deployments stored the PIN as plaintext in a `pin` column. The values
are carried over untouched; they are not bcrypt digests, so those players
fail verification until an operator resets them.
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision = '5d2e8f417c93'
down_revision = '1a7c3e9d2b40'
branch_labels = None
depends_on = None


def upgrade():
    bind = op.get_bind()
    insp = sa.inspect(bind)
    cols = {c['name'] for c in insp.get_columns('scores')}
    uniques = {u['name'] for u in insp.get_unique_constraints('scores')}
    checks = {c['name'] for c in insp.get_check_constraints('scores')}

    with op.batch_alter_table('scores') as batch_op:
        if 'pin' in cols and 'pin_hash' in cols:
            batch_op.drop_column('pin')
        elif 'pin' in cols:
            batch_op.alter_column('pin', new_column_name='pin_hash', type_=sa.String(length=60))
        elif 'pin_hash' not in cols:
            batch_op.add_column(sa.Column('pin_hash', sa.String(length=60), nullable=True))
        if 'scores_nickname_unique' not in uniques:
            batch_op.create_unique_constraint('scores_nickname_unique', ['nickname'])
        # SQLite's table rebuild drops unnamed CHECKs, so the range check always gets a name
        if 'scores_score_range' not in checks:
            batch_op.create_check_constraint('scores_score_range', 'score >= 0 AND score <= 100')

    indexes = {i['name'] for i in sa.inspect(bind).get_indexes('scores')}
    if 'ix_scores_nickname' not in indexes:
        op.create_index('ix_scores_nickname', 'scores', ['nickname'])


def downgrade():
    # The rename is one-way: hashed values cannot be turned back into PINs.
    pass
