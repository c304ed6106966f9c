"""
Shared module for code used across the portfolio API.

STRUCTURE:
- shared.security: Token verification
  - auth.py: JWT verification, current_owner_id dependency

- shared.infrastructure: Database and request plumbing
  - db.py: SQLAlchemy sessions, safe_commit(), translate_db_errors()
  - correlation.py: Request correlation IDs

- shared.config: Configuration
  - settings.py: Environment config (pydantic-settings)
  - logging.py: Structured logging, security audit logger
  - constants.py: Collections, SkillCategory, Limits

- shared.utils: Utilities
  - exceptions.py: Domain exceptions with auto-logging
  - validators.py: URL checks and business-rule validators

IMPORT EXAMPLES:
    from shared.security.auth import current_owner_id
    from shared.infrastructure.db import get_db, safe_commit
    from shared.config.settings import settings
    from shared.config.constants import SkillCategory
    from shared.utils.exceptions import NotFoundError, ForbiddenError
"""
