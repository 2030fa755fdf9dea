# vanfleet/schemas/common.py
from pydantic import BaseModel


class SuccessOut(BaseModel):
    success: bool = True


class CreatedOut(SuccessOut):
    id: int
