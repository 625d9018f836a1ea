# Import every model here so SQLAlchemy sees them when creating tables
from app.models.user import User  # noqa: F401
from app.models.moderator_schedule import ModeratorSchedule  # noqa: F401
from app.models.prayer_team import PrayerTeam  # noqa: F401
from app.models.prayer_subject import PrayerSubject  # noqa: F401
from app.models.news import News  # noqa: F401
from app.models.family_board import FamilyBoardPost  # noqa: F401
from app.models.prayer_request import PrayerRequest  # noqa: F401
from app.models.write_lock import WriteLock  # noqa: F401
