"""Translate service exceptions into HTTP responses."""

import logging
from contextlib import contextmanager

from fastapi import HTTPException

from ..exceptions import (
    ParentNotFoundError,
    RecordNotFoundError,
    RecordValidationError,
)

logger = logging.getLogger("central_api.api")


@contextmanager
def translate_errors(action: str):
    """Map exceptions raised inside the block to `HTTPException`.

    Anything unexpected becomes a 500 carrying the exception message,
    e.g. a delete rejected by a restrict-on-delete foreign key.
    """
    try:
        yield
    except HTTPException:
        raise
    except RecordNotFoundError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except ParentNotFoundError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except RecordValidationError as e:
        raise HTTPException(status_code=400, detail=f"Validation error: {e}")
    except Exception as e:
        logger.exception("request_failed action=%s", action)
        raise HTTPException(status_code=500, detail=f"Error while trying to {action}. {e}")
