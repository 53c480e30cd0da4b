"""資料庫模型 (Database Models)"""

from era_admin.core.database import Base
from era_admin.models.era_row import EraRow
from era_admin.models.comment import CommentType, GeneralComment, PersonnelComment
from era_admin.models.activity import Activity, ActivityType

__all__ = [
    "Base",
    "EraRow",
    "CommentType",
    "GeneralComment",
    "PersonnelComment",
    "Activity",
    "ActivityType",
]
