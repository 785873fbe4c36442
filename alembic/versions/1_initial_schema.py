"""Alembic migration: Initial schema for politicians, affairs and press."""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '1_initial_schema'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create core tables."""
    op.create_table(
        'politicians',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('slug', sa.String(200), nullable=False),
        sa.Column('full_name', sa.String(200), nullable=False),
        sa.Column('first_name', sa.String(100), nullable=True),
        sa.Column('last_name', sa.String(100), nullable=True),
        sa.Column('current_party', sa.String(100), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_politicians_slug', 'politicians', ['slug'], unique=True)
    op.create_index('ix_politicians_full_name', 'politicians', ['full_name'])
    op.create_index('ix_politicians_last_name', 'politicians', ['last_name'])
    op.create_index('ix_politicians_current_party', 'politicians', ['current_party'])

    op.create_table(
        'affairs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('politician_id', sa.Integer(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=False, server_default=''),
        sa.Column('status', sa.String(50), nullable=False),
        sa.Column('category', sa.String(50), nullable=False),
        sa.Column('involvement', sa.String(30), nullable=False, server_default='DIRECT'),
        sa.Column('publication_status', sa.String(20), nullable=False, server_default='DRAFT'),
        sa.Column('ecli', sa.String(100), nullable=True),
        sa.Column('pourvoi_number', sa.String(50), nullable=True),
        sa.Column('case_numbers', sa.JSON(), nullable=False, server_default='[]'),
        sa.Column('court', sa.String(200), nullable=True),
        sa.Column('chamber', sa.String(200), nullable=True),
        sa.Column('case_number', sa.String(100), nullable=True),
        sa.Column('facts_date', sa.Date(), nullable=True),
        sa.Column('start_date', sa.Date(), nullable=True),
        sa.Column('verdict_date', sa.Date(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.Column('updated_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['politician_id'], ['politicians.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_affairs_politician_id', 'affairs', ['politician_id'])
    op.create_index('ix_affairs_status', 'affairs', ['status'])
    op.create_index('ix_affairs_category', 'affairs', ['category'])
    op.create_index('ix_affairs_publication_status', 'affairs', ['publication_status'])
    op.create_index('ix_affairs_ecli', 'affairs', ['ecli'])
    op.create_index('ix_affairs_pourvoi_number', 'affairs', ['pourvoi_number'])
    op.create_index('ix_affairs_created_at', 'affairs', ['created_at'])
    op.create_index('idx_affair_politician_created', 'affairs', ['politician_id', 'created_at'])

    op.create_table(
        'sources',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('affair_id', sa.Integer(), nullable=False),
        sa.Column('url', sa.String(1000), nullable=False),
        sa.Column('title', sa.Text(), nullable=False, server_default=''),
        sa.Column('publisher', sa.String(200), nullable=False, server_default=''),
        sa.Column('source_type', sa.String(30), nullable=False, server_default='PRESSE'),
        sa.Column('published_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['affair_id'], ['affairs.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_sources_affair_id', 'sources', ['affair_id'])
    op.create_index('idx_source_affair_url', 'sources', ['affair_id', 'url'])

    op.create_table(
        'affair_events',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('affair_id', sa.Integer(), nullable=False),
        sa.Column('event_date', sa.Date(), nullable=False),
        sa.Column('event_type', sa.String(50), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.ForeignKeyConstraint(['affair_id'], ['affairs.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_affair_events_affair_id', 'affair_events', ['affair_id'])

    op.create_table(
        'press_articles',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('feed_source', sa.String(50), nullable=False),
        sa.Column('url', sa.String(1000), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('description', sa.Text(), nullable=True),
        sa.Column('published_at', sa.DateTime(), nullable=False),
        sa.Column('tier', sa.String(20), nullable=True),
        sa.Column('matched_keyword', sa.String(100), nullable=True),
        sa.Column('ai_analyzed_at', sa.DateTime(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('url', name='uq_press_articles_url'),
    )
    op.create_index('ix_press_articles_feed_source', 'press_articles', ['feed_source'])
    op.create_index('ix_press_articles_published_at', 'press_articles', ['published_at'])
    op.create_index('ix_press_articles_tier', 'press_articles', ['tier'])
    op.create_index('ix_press_articles_ai_analyzed_at', 'press_articles', ['ai_analyzed_at'])
    op.create_index('idx_press_tier_published', 'press_articles', ['tier', 'published_at'])

    op.create_table(
        'press_article_affairs',
        sa.Column('article_id', sa.Integer(), nullable=False),
        sa.Column('affair_id', sa.Integer(), nullable=False),
        sa.PrimaryKeyConstraint('article_id', 'affair_id', name='pk_press_article_affairs'),
        sa.ForeignKeyConstraint(['article_id'], ['press_articles.id'], ondelete='CASCADE'),
        sa.ForeignKeyConstraint(['affair_id'], ['affairs.id'], ondelete='CASCADE'),
    )
    op.create_index('ix_press_article_affairs_affair_id', 'press_article_affairs', ['affair_id'])

    op.create_table(
        'audit_logs',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('action', sa.String(20), nullable=False),
        sa.Column('entity_type', sa.String(50), nullable=False),
        sa.Column('entity_id', sa.Integer(), nullable=False),
        sa.Column('changes', sa.JSON(), nullable=True),
        sa.Column('created_at', sa.DateTime(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index('ix_audit_logs_action', 'audit_logs', ['action'])
    op.create_index('ix_audit_logs_created_at', 'audit_logs', ['created_at'])
    op.create_index('idx_audit_entity', 'audit_logs', ['entity_type', 'entity_id'])


def downgrade() -> None:
    """Drop core tables."""
    op.drop_table('audit_logs', if_exists=True)
    op.drop_table('press_article_affairs', if_exists=True)
    op.drop_table('press_articles', if_exists=True)
    op.drop_table('affair_events', if_exists=True)
    op.drop_table('sources', if_exists=True)
    op.drop_table('affairs', if_exists=True)
    op.drop_table('politicians', if_exists=True)
