from contextlib import contextmanager
import logging
from sqlalchemy.exc import SQLAlchemyError
from models import db

logger = logging.getLogger(__name__)


@contextmanager
def transactional(message="DB transaction failed", reraise_as=None):
    """Commit the session on success, roll back and re-raise on failure.

    With ``reraise_as`` set, database errors are re-raised as that exception
    type (the original is chained) so callers above the persistence layer do
    not need to know about SQLAlchemy.
    """
    try:
        yield
        db.session.commit()
    except SQLAlchemyError as e:
        logger.error(f"{message}: %s", e, exc_info=True)
        db.session.rollback()
        if reraise_as is not None:
            raise reraise_as(message) from e
        raise
    except Exception as e:
        logger.error(f"{message}: %s", e, exc_info=True)
        db.session.rollback()
        raise
