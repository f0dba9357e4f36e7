import logging
import webbrowser

from .errors import BrowserLaunchError

logger = logging.getLogger(__name__)


def open_url_in_browser(url: str) -> None:
    """Opens `url` in the default web browser, raising BrowserLaunchError if none could be started."""
    logger.info(f"🌐 Opening {url}")
    try:
        opened = webbrowser.open(url)
    except webbrowser.Error as e:  # webbrowser.Error is the base class for errors from this module
        raise BrowserLaunchError(f"Could not open '{url}' in a browser: {e}") from e
    if not opened:
        raise BrowserLaunchError(f"No web browser available to open '{url}'. Please open it manually.")
