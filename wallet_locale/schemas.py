from pydantic import BaseModel


class LocalesResponse(BaseModel):
    active: str | None
    available: list[str]


class ActivateLocaleRequest(BaseModel):
    lang: str


class ActivateLocaleResponse(BaseModel):
    locale: str
    key_count: int


class ResolveRequest(BaseModel):
    key: str | list[str]
    context: dict[str, str | int | float] | None = None
    fallback: str | None = None


class ResolveResponse(BaseModel):
    key: str
    text: str
    locale: str


class KeysResponse(BaseModel):
    locale: str
    keys: list[str]
