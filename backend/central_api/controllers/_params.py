"""Path parameters shared by the resource routers."""

from typing import Annotated

from fastapi import Path

from ..schemas import MAX_RECORD_ID

# Ids outside the database integer range can never exist; reject them as 400.
RecordId = Annotated[int, Path(ge=1, le=MAX_RECORD_ID)]
