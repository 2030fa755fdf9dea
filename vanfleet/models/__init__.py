# Van fleet database models
# Import all models here for SQLAlchemy discovery

from vanfleet.models.van import Van               # noqa
from vanfleet.models.breakdown import Breakdown   # noqa
from vanfleet.models.user import User             # noqa
