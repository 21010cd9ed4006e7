from typing import Optional

from .base import CamelModel, ReadModel


class SkillWrite(CamelModel):
    id: Optional[int] = None
    name: Optional[str] = None
    level: Optional[str] = None
    portfolio_user_id: Optional[int] = None
    version: Optional[int] = None


class SkillRead(ReadModel):
    id: int
    name: str
    level: str
    portfolio_user_id: int
    version: int
