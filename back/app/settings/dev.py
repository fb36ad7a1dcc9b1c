# Local application imports
from app.settings.common import CommonSettings


class DevSettings(CommonSettings):
    DEBUG_MODE: bool = True
