from pydantic import BaseModel, ConfigDict, Field

class AliasModel(BaseModel):
    name: str = Field(min_length=1)
    mac: str = Field(min_length=1)
    iface: str = ''

    model_config = ConfigDict(extra='forbid', frozen=True)
