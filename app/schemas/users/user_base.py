from pydantic import BaseModel
from typing import Optional


class UserBase(BaseModel):
    name: str
    age: Optional[int] = None


class UserCreateRequest(UserBase):
    pass
