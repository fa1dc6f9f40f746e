"""003: create books table

Revision ID: 003
Revises: 002
Create Date: 2026-10-17
"""
from typing import Sequence, Union
from alembic import op

revision: str = "003"
down_revision: Union[str, None] = "002"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE books (
            id              BIGSERIAL       PRIMARY KEY,
            title           VARCHAR(255)    NOT NULL,
            description     TEXT            NOT NULL,
            publish_date    DATE            NOT NULL,
            author_id       BIGINT          NOT NULL,
            created_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            updated_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT fk_books_author FOREIGN KEY (author_id)
                REFERENCES authors (id) ON DELETE CASCADE
        );
    """)
    op.execute("CREATE INDEX idx_books_author_id ON books (author_id);")
    op.execute("""
        CREATE TRIGGER trg_books_updated_at
            BEFORE UPDATE ON books
            FOR EACH ROW EXECUTE FUNCTION fn_update_timestamp();
    """)
    op.execute("COMMENT ON TABLE books IS 'Catalog books; author_id cascades on author delete';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS books CASCADE;")
