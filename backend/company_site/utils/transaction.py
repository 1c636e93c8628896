from contextlib import contextmanager
from flask import current_app
from company_site.extensions import db

@contextmanager
def transactional():
    """Yields the session; commits on success, rolls back and re-raises on error."""
    try:
        yield db.session
        db.session.commit()
    except Exception:
        db.session.rollback()
        current_app.logger.debug("Transaction rolled back", exc_info=True)
        raise
