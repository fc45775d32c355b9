from tortoise import BaseDBAsyncClient

RUN_IN_TRANSACTION = True


async def upgrade(db: BaseDBAsyncClient) -> str:
    return """
        CREATE TABLE IF NOT EXISTS "users" (
    "id" SERIAL NOT NULL PRIMARY KEY,
    "telegram_id" BIGINT NOT NULL UNIQUE,
    "username" VARCHAR(255),
    "first_name" VARCHAR(255),
    "prayer_language" VARCHAR(32) NOT NULL DEFAULT 'Latin & English',
    "text_size_scale" DOUBLE PRECISION NOT NULL DEFAULT 0.5,
    "reminder_time" VARCHAR(5) NOT NULL DEFAULT '06:00',
    "timezone_offset" INT NOT NULL DEFAULT 0,
    "reminders_enabled" BOOL NOT NULL DEFAULT True,
    "next_reminder_at" TIMESTAMPTZ,
    "created_at" TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP
);
CREATE INDEX IF NOT EXISTS "idx_users_telegra_ab91e9" ON "users" ("telegram_id");
COMMENT ON TABLE "users" IS 'Bot user.';
CREATE TABLE IF NOT EXISTS "prayer_sessions" (
    "id" SERIAL NOT NULL PRIMARY KEY,
    "category" VARCHAR(20) NOT NULL,
    "completed_at" TIMESTAMPTZ NOT NULL,
    "duration_seconds" INT,
    "meditation_type" VARCHAR(100),
    "user_id" INT NOT NULL REFERENCES "users" ("id") ON DELETE CASCADE
);
CREATE INDEX IF NOT EXISTS "idx_prayer_sess_complet_5c1e2a" ON "prayer_sessions" ("completed_at");
COMMENT ON COLUMN "prayer_sessions"."category" IS 'joyful: joyful\nsorrowful: sorrowful\nglorious: glorious\nluminous: luminous\nseven_sorrows: seven_sorrows';
COMMENT ON TABLE "prayer_sessions" IS 'A completed Rosary.';
CREATE TABLE IF NOT EXISTS "journal_entries" (
    "id" SERIAL NOT NULL PRIMARY KEY,
    "text" TEXT NOT NULL,
    "entry_type" VARCHAR(20) NOT NULL DEFAULT 'rosary',
    "category" VARCHAR(20),
    "mystery_title" VARCHAR(255),
    "mystery_index" INT,
    "is_mid_prayer" BOOL NOT NULL DEFAULT False,
    "consecration_day" INT,
    "consecration_phase" VARCHAR(30),
    "created_at" TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP,
    "user_id" INT NOT NULL REFERENCES "users" ("id") ON DELETE CASCADE
);
COMMENT ON TABLE "journal_entries" IS 'Personal reflection tied to a Rosary or a consecration day.';
CREATE TABLE IF NOT EXISTS "consecration_progress" (
    "id" SERIAL NOT NULL PRIMARY KEY,
    "start_date" DATE NOT NULL,
    "completed_days" JSONB NOT NULL,
    "feast_id" VARCHAR(50),
    "is_completed" BOOL NOT NULL DEFAULT False,
    "completed_at" TIMESTAMPTZ,
    "created_at" TIMESTAMPTZ NOT NULL DEFAULT CURRENT_TIMESTAMP,
    "user_id" INT NOT NULL REFERENCES "users" ("id") ON DELETE CASCADE
);
COMMENT ON TABLE "consecration_progress" IS 'One attempt at the 33-day consecration.';
CREATE TABLE IF NOT EXISTS "aerich" (
    "id" SERIAL NOT NULL PRIMARY KEY,
    "version" VARCHAR(255) NOT NULL,
    "app" VARCHAR(100) NOT NULL,
    "content" JSONB NOT NULL
);"""


async def downgrade(db: BaseDBAsyncClient) -> str:
    return """
        DROP TABLE IF EXISTS "consecration_progress";
        DROP TABLE IF EXISTS "journal_entries";
        DROP TABLE IF EXISTS "prayer_sessions";
        DROP TABLE IF EXISTS "users";"""
