from pydantic import BaseModel, ConfigDict

class InterfaceModel(BaseModel):
    name: str
    ipv4: str
    mac: str = ''

    model_config = ConfigDict(extra='forbid')

    def __str__(self) -> str:
        return f'{self.name}: {self.ipv4} (MAC: {self.mac})'
