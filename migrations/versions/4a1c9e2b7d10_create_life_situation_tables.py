"""create survivors, life situation documents and records tables

Revision ID: 4a1c9e2b7d10
Revises:
Create Date: 2026-10-18 12:00:00.000000

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '4a1c9e2b7d10'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'survivors',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('num', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(length=255), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('num'),
    )
    op.create_table(
        'life_situation_documents',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('survivor_id', sa.Uuid(), sa.ForeignKey('survivors.id'), nullable=False),
        sa.Column('discriminator', sa.String(length=32), nullable=False),
        sa.Column('created', sa.DateTime(timezone=True), nullable=False),
        sa.Column('last_edit', sa.DateTime(timezone=True), nullable=False),
        sa.Column('document_date', sa.DateTime(timezone=True), nullable=True),
        sa.Column('is_deleted', sa.Boolean(), nullable=False, server_default=sa.false()),
        # Inquiry variant
        sa.Column('working_experience', sa.Text(), nullable=True),
        sa.Column('is_forwarded_by_organization', sa.Boolean(), nullable=True),
        sa.Column('forwarded_by_organization', sa.Text(), nullable=True),
        sa.Column('is_forwarded_by_person', sa.Boolean(), nullable=True),
        sa.Column('forwarded_by_person', sa.Text(), nullable=True),
        sa.Column('is_forwarded_by_survivor', sa.Boolean(), nullable=True),
        sa.Column('forwarded_by_survivor', sa.Text(), nullable=True),
        sa.Column('is_self_inquiry', sa.Boolean(), nullable=True),
        sa.Column('self_inquiry_sources_mask', sa.Integer(), nullable=True),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_life_situation_documents_survivor_id', 'life_situation_documents', ['survivor_id'], unique=False)
    op.create_index('idx_life_situation_documents_discriminator', 'life_situation_documents', ['discriminator'], unique=False)
    op.create_table(
        'records',
        sa.Column('id', sa.Uuid(), nullable=False),
        sa.Column('document_id', sa.Uuid(), sa.ForeignKey('life_situation_documents.id'), nullable=False),
        sa.Column('discriminator', sa.String(length=32), nullable=False),
        sa.Column('content', sa.Text(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('idx_records_document_id', 'records', ['document_id'], unique=False)
    op.create_index('idx_records_discriminator', 'records', ['discriminator'], unique=False)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index('idx_records_discriminator', table_name='records')
    op.drop_index('idx_records_document_id', table_name='records')
    op.drop_table('records')
    op.drop_index('idx_life_situation_documents_discriminator', table_name='life_situation_documents')
    op.drop_index('idx_life_situation_documents_survivor_id', table_name='life_situation_documents')
    op.drop_table('life_situation_documents')
    op.drop_table('survivors')
