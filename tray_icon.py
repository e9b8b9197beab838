"""System-tray icon setup via pystray."""

from typing import Callable

import pystray
from PIL import Image
from pystray import MenuItem, Menu

from icon_gen import tray_title


def create_tray(
    icon_image: Image.Image,
    on_show: Callable[[], None],
    on_today: Callable[[], None],
    on_exit: Callable[[], None],
) -> pystray.Icon:
    """Build and return a pystray Icon (not yet started)."""
    menu = Menu(
        MenuItem("Show Calendar", lambda _icon, _item: on_show(), default=True),
        MenuItem("Today", lambda _icon, _item: on_today()),
        Menu.SEPARATOR,
        MenuItem("Exit", lambda _icon, _item: on_exit()),
    )
    return pystray.Icon("prayer-calendar", icon_image, tray_title(), menu)
