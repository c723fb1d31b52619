'''
This module is the data model of the Discord
webhook messages we send.
'''

from pydantic import BaseModel, ConfigDict


class EmbedField(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    value: str
    inline: bool = False


class Embed(BaseModel):
    '''
    A single embed block. color is 0xRRGGBB.
    '''
    model_config = ConfigDict(frozen=True)

    title: str
    description: str
    color: int
    url: str = ""
    fields: tuple[EmbedField, ...] = ()


class DiscordMessage(BaseModel):
    '''
    DiscordMessage is the body posted to a Discord channel webhook.
    '''
    model_config = ConfigDict(frozen=True)

    content: str = ""
    embeds: tuple[Embed, ...] = ()

    def to_json(self) -> str:
        '''
        Serializes the message, leaving out empty optional values.
        '''
        return self.model_dump_json(exclude_defaults=True)
