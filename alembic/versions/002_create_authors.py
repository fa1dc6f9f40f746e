"""002: create authors table

Revision ID: 002
Revises: 001
Create Date: 2026-10-17
"""
from typing import Sequence, Union
from alembic import op

revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.execute("""
        CREATE TABLE authors (
            id              BIGSERIAL       PRIMARY KEY,
            name            VARCHAR(100)    NOT NULL,
            bio             TEXT            NOT NULL,
            birth_date      DATE            NOT NULL,
            created_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            updated_at      TIMESTAMPTZ     NOT NULL DEFAULT NOW(),
            CONSTRAINT ck_authors_name_len CHECK (LENGTH(name) >= 1)
        );
    """)
    op.execute("""
        CREATE TRIGGER trg_authors_updated_at
            BEFORE UPDATE ON authors
            FOR EACH ROW EXECUTE FUNCTION fn_update_timestamp();
    """)
    op.execute("COMMENT ON TABLE authors IS 'Catalog authors; owns books via books.author_id';")


def downgrade() -> None:
    op.execute("DROP TABLE IF EXISTS authors CASCADE;")
