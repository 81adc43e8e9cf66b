"""
Shared field types for the auth models.
"""
from datetime import datetime
from typing import Annotated

from pydantic import AfterValidator

from docauth.core.clock import to_model_time

# Aware UTC at millisecond precision, exactly as it reads back from the store
StoreTime = Annotated[datetime, AfterValidator(to_model_time)]
