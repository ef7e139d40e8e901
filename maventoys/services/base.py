import logging
from functools import wraps

from maventoys.exceptions import GeneralException, IdNotFound, InvalidRequest

logger = logging.getLogger(__name__)


def service_operation(error_message: str):
    """Wrap a service method in the domain error taxonomy.

    ``IdNotFound`` and ``InvalidRequest`` pass through untouched; anything
    else is logged and re-raised as ``GeneralException`` carrying ``error_message``.
    """
    def decorator(func):
        @wraps(func)
        def wrapper(*args, **kwargs):
            try:
                return func(*args, **kwargs)
            except (IdNotFound, InvalidRequest):
                raise
            except GeneralException:
                raise
            except Exception as error:
                logger.exception("%s: %s", error_message, error)
                raise GeneralException(error_message, cause=error) from error
        return wrapper
    return decorator


def require(entity, message: str):
    if entity is None:
        raise IdNotFound(message)
    return entity
