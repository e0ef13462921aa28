from typing import Annotated

from fastapi import Depends

from passpal.core.config import Settings, get_settings


# Settings dependency
SettingsDep = Annotated[Settings, Depends(get_settings)]
