from pydantic import BaseModel


class Chat(BaseModel):
    """https://core.telegram.org/bots/api#chat"""
    id: int
    type: str
    title: str | None = None
    username: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    is_forum: bool | None = None

    @property
    def is_private(self) -> bool:
        return self.type == "private"

    @property
    def is_group(self) -> bool:
        return self.type in ["group", "supergroup"]
