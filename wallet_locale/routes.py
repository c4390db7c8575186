from typing import Any

from fastapi import APIRouter

from wallet_locale.config import settings
from wallet_locale.errors import LocaleNotFoundError
from wallet_locale.loader import available_locales, load_locale
from wallet_locale.registry import registry
from wallet_locale.resolver import resolve, split_key
from wallet_locale.schemas import (
    ActivateLocaleRequest,
    ActivateLocaleResponse,
    KeysResponse,
    LocalesResponse,
    ResolveRequest,
    ResolveResponse,
)

router = APIRouter()


@router.get("/api/locales", response_model=LocalesResponse)
async def get_locales() -> LocalesResponse:
    return LocalesResponse(
        active=registry.locale,
        available=available_locales(settings.locales_dir),
    )


@router.get("/api/locales/{lang}")
def get_locale_table(lang: str) -> dict[str, Any]:
    if lang not in available_locales(settings.locales_dir):
        raise LocaleNotFoundError(lang)
    tree = load_locale(lang, fallback=settings.fallback_locale, locales_dir=settings.locales_dir)
    return tree.to_dict()


@router.post("/api/locale", response_model=ActivateLocaleResponse)
def activate_locale(payload: ActivateLocaleRequest) -> ActivateLocaleResponse:
    lang = payload.lang.strip()
    if lang not in available_locales(settings.locales_dir):
        raise LocaleNotFoundError(lang)
    tree = registry.activate(lang, fallback=settings.fallback_locale, locales_dir=settings.locales_dir)
    return ActivateLocaleResponse(locale=tree.locale, key_count=len(tree.keys()))


@router.post("/api/resolve", response_model=ResolveResponse)
async def resolve_key(payload: ResolveRequest) -> ResolveResponse:
    tree = registry.tree
    text = resolve(tree, payload.key, payload.context, payload.fallback)
    return ResolveResponse(
        key=".".join(split_key(payload.key)),
        text=text,
        locale=tree.locale,
    )


@router.get("/api/keys", response_model=KeysResponse)
async def get_keys() -> KeysResponse:
    tree = registry.tree
    return KeysResponse(locale=tree.locale, keys=tree.keys())
