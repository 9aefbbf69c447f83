from pydantic import BaseModel

from features.chat.telegram.model.attachment.media import Animation, PhotoSize


class Contact(BaseModel):
    """https://core.telegram.org/bots/api#contact"""
    phone_number: str
    first_name: str
    last_name: str | None = None
    user_id: int | None = None
    vcard: str | None = None


class Location(BaseModel):
    """https://core.telegram.org/bots/api#location"""
    latitude: float
    longitude: float
    horizontal_accuracy: float | None = None
    live_period: int | None = None
    heading: int | None = None
    proximity_alert_radius: int | None = None


class Venue(BaseModel):
    """https://core.telegram.org/bots/api#venue"""
    location: Location
    title: str
    address: str
    foursquare_id: str | None = None
    google_place_id: str | None = None


class Game(BaseModel):
    """https://core.telegram.org/bots/api#game"""
    title: str
    description: str
    photo: list[PhotoSize] = []
    text: str | None = None
    animation: Animation | None = None


class Dice(BaseModel):
    """https://core.telegram.org/bots/api#dice"""
    emoji: str
    value: int


class WebAppData(BaseModel):
    """https://core.telegram.org/bots/api#webappdata"""
    data: str
    button_text: str


class ProximityAlertTriggered(BaseModel):
    """https://core.telegram.org/bots/api#proximityalerttriggered"""
    traveler: dict
    watcher: dict
    distance: int


class MessageAutoDeleteTimerChanged(BaseModel):
    """https://core.telegram.org/bots/api#messageautodeletetimerchanged"""
    message_auto_delete_time: int
