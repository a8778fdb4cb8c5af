from pydantic import BaseModel, ConfigDict

class WakeModel(BaseModel):
    interface: str = ''
    broadcast: str = '255.255.255.255'
    port: int | str = 9

    model_config = ConfigDict(extra='forbid')
