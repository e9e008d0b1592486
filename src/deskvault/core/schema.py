"""
Schema store: DDL for every table deskvault owns.

Each statement is individually idempotent (IF NOT EXISTS), so the whole batch
may be applied any number of times. Statements are kept separate because the
asyncpg driver executes one prepared statement per call.

Tables:
- accounts: user accounts with Argon2id password hashes
- account_settings: per-account preferences (one-to-one, cascade delete)
- audit_logs: append-only application log entries
"""

EXTENSIONS: tuple[str, ...] = (
    'CREATE EXTENSION IF NOT EXISTS "uuid-ossp"',
)

TABLES: tuple[str, ...] = (
    """
    CREATE TABLE IF NOT EXISTS accounts (
        id UUID PRIMARY KEY DEFAULT uuid_generate_v4(),
        email VARCHAR(255) UNIQUE NOT NULL,
        username VARCHAR(100) UNIQUE NOT NULL,
        password_hash VARCHAR(255) NOT NULL,
        first_name VARCHAR(100),
        last_name VARCHAR(100),
        is_active BOOLEAN NOT NULL DEFAULT TRUE,
        created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP,
        updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS account_settings (
        id UUID PRIMARY KEY DEFAULT uuid_generate_v4(),
        account_id UUID NOT NULL UNIQUE REFERENCES accounts(id) ON DELETE CASCADE,
        theme VARCHAR(20) NOT NULL DEFAULT 'light',
        language VARCHAR(10) NOT NULL DEFAULT 'en',
        notifications_enabled BOOLEAN NOT NULL DEFAULT TRUE,
        settings_data JSONB NOT NULL DEFAULT '{}',
        created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP,
        updated_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """,
    """
    CREATE TABLE IF NOT EXISTS audit_logs (
        id UUID PRIMARY KEY DEFAULT uuid_generate_v4(),
        level VARCHAR(20) NOT NULL,
        message TEXT NOT NULL,
        metadata JSONB NOT NULL DEFAULT '{}',
        account_id UUID REFERENCES accounts(id) ON DELETE SET NULL,
        created_at TIMESTAMP WITH TIME ZONE NOT NULL DEFAULT CURRENT_TIMESTAMP
    )
    """,
)

INDEXES: tuple[str, ...] = (
    "CREATE INDEX IF NOT EXISTS idx_accounts_email ON accounts(email)",
    "CREATE INDEX IF NOT EXISTS idx_accounts_username ON accounts(username)",
    "CREATE INDEX IF NOT EXISTS idx_accounts_created_at ON accounts(created_at)",
    "CREATE INDEX IF NOT EXISTS idx_account_settings_account_id ON account_settings(account_id)",
    "CREATE INDEX IF NOT EXISTS idx_audit_logs_level ON audit_logs(level)",
    "CREATE INDEX IF NOT EXISTS idx_audit_logs_created_at ON audit_logs(created_at)",
    "CREATE INDEX IF NOT EXISTS idx_audit_logs_account_id ON audit_logs(account_id)",
)

# Order matters: extension before tables (uuid_generate_v4), tables before indexes
SCHEMA_STATEMENTS: tuple[str, ...] = EXTENSIONS + TABLES + INDEXES
