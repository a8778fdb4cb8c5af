import os
from pydantic import BaseModel, ConfigDict, field_validator

class StoreModel(BaseModel):
    db_dir: str = '~/.config/wakectl'
    db_name: str = 'aliases.db'

    model_config = ConfigDict(extra='forbid', validate_default=True)

    @field_validator('db_dir', mode='after')
    @classmethod
    def validate_db_dir(cls, value: str) -> str:
        if not value:
            raise ValueError("'db_dir' must not be empty")

        return os.path.expanduser(value)

    @field_validator('db_name', mode='after')
    @classmethod
    def validate_db_name(cls, value: str) -> str:
        # the store file must live directly inside db_dir
        if not value or os.path.basename(value) != value or value in ('.', '..'):
            raise ValueError("'db_name' must be a plain file name")

        return value

    @property
    def filepath(self) -> str:
        return os.path.join(self.db_dir, self.db_name)
