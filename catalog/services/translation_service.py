"""Locale-aware lookup of translatable entity fields.

The stored column always holds the default-locale value. A provider may
substitute a translation for a given (entity, field, locale); when it has
none, the stored value is returned unchanged.
"""
import logging
from flask import current_app, has_app_context

logger = logging.getLogger(__name__)


class TranslationProvider:
    """Pass-through provider: every lookup yields the stored default."""

    def get_value(self, entity, field_name, default_value, locale=None):
        return default_value


class StaticTranslationProvider(TranslationProvider):
    """Provider backed by a nested mapping loaded from configuration.

    ``translations`` is keyed ``entity type -> entity id -> field -> locale``,
    e.g. ``{"ProductOption": {"1": {"label": {"fr": "Couleur"}}}}``.
    A regional locale such as ``fr_CA`` falls back to its language ``fr``.
    """

    def __init__(self, translations=None, default_locale="en_US"):
        self.translations = translations or {}
        self.default_locale = default_locale

    def get_value(self, entity, field_name, default_value, locale=None):
        if not locale or locale == self.default_locale:
            return default_value
        entity_id = getattr(entity, "id", None)
        if entity_id is None:
            return default_value

        by_locale = (
            self.translations.get(type(entity).__name__, {})
            .get(str(entity_id), {})
            .get(field_name, {})
        )
        for candidate in _locale_candidates(locale):
            if candidate in by_locale:
                return by_locale[candidate]
        return default_value


def _locale_candidates(locale):
    candidates = [locale]
    language = locale.replace("-", "_").split("_", 1)[0]
    if language and language != locale:
        candidates.append(language)
    return candidates


_passthrough = TranslationProvider()


def init_translations(app, provider=None):
    """Register the translation provider for ``app``."""
    if provider is None:
        translations = app.config.get("TRANSLATIONS") or {}
        if translations:
            provider = StaticTranslationProvider(
                translations, app.config.get("DEFAULT_LOCALE", "en_US")
            )
        else:
            logger.info("No TRANSLATIONS configured, labels use stored defaults")
            provider = _passthrough
    app.extensions["translation_provider"] = provider
    return provider


def get_provider():
    if has_app_context():
        return current_app.extensions.get("translation_provider", _passthrough)
    return _passthrough


def get_value(entity, field_name, default_value, locale=None):
    return get_provider().get_value(entity, field_name, default_value, locale)
