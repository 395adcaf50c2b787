from pydantic import BaseModel, Field
from typing import Optional

class SubmitOk(BaseModel):
    success: bool = True

class SubmitFailed(BaseModel):
    success: bool = False
    error: str
    message: str

class ShareLinkCreate(BaseModel):
    reference: str = Field(..., min_length=1)
    base_url: Optional[str] = None

class ShareLinkOut(BaseModel):
    token: str
    link: str

class ShareLinkResolved(BaseModel):
    reference: Optional[str] = None
