"""create mcq, choice and attempt tables

Revision ID: 7c2e91a4d0f3
Revises:
Create Date: 2026-10-19 09:12:40.118203

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '7c2e91a4d0f3'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    # Parent table first
    op.create_table('mcqs',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('title', sa.String(length=200), nullable=False),
        sa.Column('description', sa.String(length=500), nullable=True),
        sa.Column('question', sa.Text(), nullable=False),
        sa.Column('created_by', sa.String(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True
    )
    op.create_index(op.f('ix_mcqs_id'), 'mcqs', ['id'], unique=False)
    op.create_index(op.f('ix_mcqs_created_by'), 'mcqs', ['created_by'], unique=False)
    op.create_index(op.f('ix_mcqs_created_at'), 'mcqs', ['created_at'], unique=False)

    # Choices are owned by their MCQ
    op.create_table('choices',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('mcq_id', sa.Integer(), nullable=False),
        sa.Column('choice_text', sa.Text(), nullable=False),
        sa.Column('is_correct', sa.Integer(), nullable=False),
        sa.Column('order_index', sa.Integer(), nullable=False),
        sa.ForeignKeyConstraint(['mcq_id'], ['mcqs.id'], ondelete='CASCADE'),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('mcq_id', 'order_index', name='uq_choices_mcq_order'),
        sqlite_autoincrement=True
    )
    op.create_index(op.f('ix_choices_id'), 'choices', ['id'], unique=False)
    op.create_index(op.f('ix_choices_mcq_id'), 'choices', ['mcq_id'], unique=False)

    # Attempts go with their MCQ; a replaced choice only nulls the reference
    op.create_table('attempts',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('mcq_id', sa.Integer(), nullable=False),
        sa.Column('user_id', sa.String(), nullable=False),
        sa.Column('selected_choice_id', sa.Integer(), nullable=True),
        sa.Column('selected_choice_text', sa.Text(), nullable=False),
        sa.Column('is_correct', sa.Integer(), nullable=False),
        sa.Column('attempted_at', sa.DateTime(timezone=True), nullable=False),
        sa.ForeignKeyConstraint(['mcq_id'], ['mcqs.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['selected_choice_id'], ['choices.id'], ondelete='SET NULL'),
        sa.PrimaryKeyConstraint('id'),
        sqlite_autoincrement=True
    )
    op.create_index(op.f('ix_attempts_id'), 'attempts', ['id'], unique=False)
    op.create_index(op.f('ix_attempts_mcq_id'), 'attempts', ['mcq_id'], unique=False)
    op.create_index(op.f('ix_attempts_user_id'), 'attempts', ['user_id'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    # Drop child tables first
    op.drop_index(op.f('ix_attempts_user_id'), table_name='attempts')
    op.drop_index(op.f('ix_attempts_mcq_id'), table_name='attempts')
    op.drop_index(op.f('ix_attempts_id'), table_name='attempts')
    op.drop_table('attempts')

    op.drop_index(op.f('ix_choices_mcq_id'), table_name='choices')
    op.drop_index(op.f('ix_choices_id'), table_name='choices')
    op.drop_table('choices')

    op.drop_index(op.f('ix_mcqs_created_at'), table_name='mcqs')
    op.drop_index(op.f('ix_mcqs_created_by'), table_name='mcqs')
    op.drop_index(op.f('ix_mcqs_id'), table_name='mcqs')
    op.drop_table('mcqs')
