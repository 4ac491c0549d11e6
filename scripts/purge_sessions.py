"""
scripts/purge_sessions.py

Delete expired sessions. Expired rows are already rejected (and removed)
when presented, so this only reclaims rows nobody came back for.

    python -m scripts.purge_sessions
"""

import asyncio
import sys

from onboarding.core.config import get_settings
from onboarding.core.database import build_engine, build_session_factory, init_db
from onboarding.repositories.sessions import SessionStore
from onboarding.services.auth_service import current_millis


async def purge() -> int:
    settings = get_settings()
    engine = build_engine(settings)
    init_db(engine)

    db = build_session_factory(engine)()
    try:
        return await SessionStore(db).delete_expired(current_millis())
    finally:
        db.close()
        engine.dispose()


def main():
    try:
        removed = asyncio.run(purge())
    except Exception as e:
        print(f"Failed: {e}")
        sys.exit(1)
    print(f"Removed {removed} expired session(s).")


if __name__ == "__main__":
    main()
