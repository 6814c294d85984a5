"""
RearrangePdf - Internationalization Module

This module initializes gettext for internationalization support.
"""

import gettext
import os
import sys
from collections.abc import Callable

TEXT_DOMAIN = "rearrangepdf"


def _dummy_translate(text: str) -> str:
    """Fallback translation function that returns the original text.

    Args:
        text: The text to translate.

    Returns:
        The original text unchanged.
    """
    return text


# Initialize _ with the fallback function
_: Callable[[str], str] = _dummy_translate

# Configure gettext
try:
    # Check multiple locations where translation files might be
    locale_dirs = [
        "/usr/share/locale",
        os.path.join(sys.prefix, "share", "locale"),
        os.path.join(os.path.dirname(os.path.dirname(os.path.abspath(__file__))), "locale"),
    ]

    for locale_dir in locale_dirs:
        if os.path.exists(locale_dir):
            translation = gettext.translation(TEXT_DOMAIN, locale_dir, fallback=True)
            # NullTranslations means no catalog in this directory
            if type(translation) is not gettext.NullTranslations:
                _ = translation.gettext
                break

except OSError:
    # Keep using the dummy function if the catalogs cannot be read
    pass


def setup_i18n() -> Callable[[str], str]:
    """Return the active translation function.

    Returns:
        The translation function.
    """
    return _
