import logging

import httpx

from .classifier import BreakpointProfile, classify, get_profile
from .client import fetch_reading
from .config import PM25_API_URL, PM25_LOCALE, PM25_PROFILE, REQUEST_TIMEOUT
from .errors import DataError, LocationFailure, NetworkError, PM25Error
from .locales import Locale, LocaleText, get_text
from .location import CoordinateProvider
from .normalizer import normalize

logger = logging.getLogger(__name__)


def format_reading(value: float, label: str, text: LocaleText) -> str:
    return text.reading.format(value=value, label=label)


def format_error(exc: PM25Error, text: LocaleText) -> str:
    if isinstance(exc, LocationFailure):
        return text.location_failure
    message = text.reasons.get(exc.reason, str(exc))
    kind = text.error_kinds.get(exc.kind, exc.kind)
    return text.error.format(kind=kind, message=message)


async def run(
    locale: Locale | str = PM25_LOCALE,
    *,
    provider: CoordinateProvider,
    profile: BreakpointProfile | None = None,
    base_url: str = PM25_API_URL,
    timeout: float = REQUEST_TIMEOUT,
    client: httpx.AsyncClient | None = None,
) -> str:
    """Perform the PM2.5 action and return the sentence to show or speak.

    Never raises for expected failures: location, network and data errors
    are turned into a localized sentence. Cancellation still propagates.
    """
    try:
        text = get_text(locale)
    except ValueError:
        logger.error("Unknown locale %r; replying in English", locale)
        return get_text(Locale.english).unexpected

    try:
        if profile is None:
            profile = get_profile(PM25_PROFILE)
        logger.info(
            "PM2.5 intent invoked: locale=%s profile=%s", Locale(locale).value, profile.name
        )
        coordinate = await provider.get_coordinate()
        reading = await fetch_reading(
            coordinate.latitude,
            coordinate.longitude,
            base_url=base_url,
            timeout=timeout,
            client=client,
        )
    except (LocationFailure, NetworkError, DataError) as exc:
        logger.error("PM2.5 intent failed (%s): %s", exc.kind, exc)
        return format_error(exc, text)
    except Exception:
        logger.error("Unexpected exception in PM2.5 intent", exc_info=True)
        return text.unexpected

    value = normalize(reading.pm25)
    category = classify(value, profile)
    dialog = format_reading(value, profile.label(category, locale), text)

    logger.info("PM2.5 intent reply: value=%.1f category=%s", value, category.value)
    return dialog
