from typing import List, Optional

from .base import CamelModel, ReadModel
from .project import ProjectRead
from .skill import SkillRead


class PortfolioUserWrite(CamelModel):
    id: Optional[int] = None
    name: Optional[str] = None
    bio: Optional[str] = None
    profile_image_url: Optional[str] = None
    version: Optional[int] = None


class PortfolioUserRead(ReadModel):
    id: int
    name: str
    bio: str
    profile_image_url: Optional[str] = None
    account_id: Optional[int] = None
    version: int
    projects: List[ProjectRead] = []
    skills: List[SkillRead] = []
