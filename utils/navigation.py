"""
Navigation Module - Location state, in-page scrolling and nav active state

The current location (pathname + hash) is the only reactive state in the site.
``LocationSource`` publishes location changes, ``LocationSync`` subscribes to
them and derives two things on every change:

- which nav items are active
- whether an in-page anchor should be scrolled into view on the next frame

Scrolling is deferred through ``FrameScheduler`` so the target element has been
laid out before anything asks for its position. The browser counterpart of
this module lives in ``static/js/navigation.js`` and follows the same rules.
"""

from collections import deque
from dataclasses import dataclass
from typing import Callable, Dict, Iterable, List, Optional
from urllib.parse import urlsplit


HOME_PATH = '/'


@dataclass(frozen=True)
class Location:
    pathname: str = HOME_PATH
    hash: str = ''

    @classmethod
    def from_url(cls, url):
        """
        Build a Location from a URL or a bare path.

        Example:
            >>> Location.from_url('/#projects')
            Location(pathname='/', hash='#projects')
        """
        parts = urlsplit(url or '')
        return cls(
            pathname=parts.path or HOME_PATH,
            hash=f'#{parts.fragment}' if parts.fragment else '',
        )

    @property
    def target_id(self) -> str:
        """Element id named by the hash, or '' when there is none"""
        value = self.hash or ''
        if value.startswith('#'):
            value = value[1:]
        return value

    @property
    def is_home(self) -> bool:
        return self.pathname == HOME_PATH


@dataclass(frozen=True)
class NavItem:
    label: str
    href: str
    match_path: str
    anchor: Optional[str] = None  # section id on the home page
    active_on_hash: bool = False


NAV_ITEMS = (
    NavItem(label='Home', href='/', match_path='/', anchor='home'),
    NavItem(label='Projects', href='/#projects', match_path='/project',
            anchor='projects', active_on_hash=True),
    NavItem(label='About', href='/about', match_path='/about'),
)


def is_path_active(location: Location, path: str) -> bool:
    """
    Whether a nav link for ``path`` matches the current pathname.

    ``/`` only matches the home page itself. Any other path matches itself
    and everything below it, so ``/project`` is active for
    ``/project/genezippers`` but not for ``/projects-other``.
    """
    if not path:
        return False
    if path == HOME_PATH:
        return location.pathname == HOME_PATH
    prefix = path if path.endswith('/') else f'{path}/'
    return location.pathname == path or location.pathname.startswith(prefix)


def is_item_active(location: Location, item: NavItem) -> bool:
    if is_path_active(location, item.match_path):
        return True
    return bool(item.active_on_hash and item.anchor and location.target_id == item.anchor)


def nav_links(location: Location, items: Iterable[NavItem] = NAV_ITEMS) -> List[dict]:
    """Template-ready nav entries with their active flag"""
    return [
        {
            'label': item.label,
            'href': item.href,
            'anchor': item.anchor,
            'match_path': item.match_path,
            'active_on_hash': item.active_on_hash,
            'active': is_item_active(location, item),
        }
        for item in items
    ]


class LocationSource:
    """
    Observable current location.

    Subscribers are called in subscription order with the new Location.
    Setting the location it already holds notifies nobody.
    """

    def __init__(self, location: Optional[Location] = None):
        self._location = location or Location()
        self._subscribers: List[Callable[[Location], None]] = []

    @property
    def location(self) -> Location:
        return self._location

    def subscribe(self, callback):
        self._subscribers.append(callback)

        def unsubscribe():
            if callback in self._subscribers:
                self._subscribers.remove(callback)

        return unsubscribe

    def set_location(self, location: Location) -> Location:
        if location == self._location:
            return self._location
        self._location = location
        for callback in list(self._subscribers):
            callback(location)
        return location

    def navigate(self, pathname: str, hash: str = '') -> Location:
        return self.set_location(Location(pathname=pathname or HOME_PATH, hash=hash or ''))

    def navigate_url(self, url: str) -> Location:
        return self.set_location(Location.from_url(url))


class FrameScheduler:
    """
    Queue of callbacks to run after the next layout.

    ``run_frame`` runs everything queued before it was called, oldest first.
    Callbacks queued while a frame runs wait for the following frame.
    """

    def __init__(self):
        self._pending = deque()

    def request_frame(self, callback):
        self._pending.append(callback)

    @property
    def pending(self) -> int:
        return len(self._pending)

    def run_frame(self, document) -> int:
        callbacks = list(self._pending)
        self._pending.clear()
        for callback in callbacks:
            callback(document)
        return len(callbacks)


class PageElement:
    def __init__(self, document, element_id):
        self.document = document
        self.id = element_id

    def scroll_into_view(self):
        self.document.scroll_history.append(self.id)


class PageDocument:
    """Rendered page reduced to the set of element ids it contains"""

    def __init__(self, element_ids: Iterable[str] = ()):
        self.element_ids = set(element_ids)
        self.scroll_history: List[str] = []

    def get_element_by_id(self, element_id) -> Optional[PageElement]:
        if element_id in self.element_ids:
            return PageElement(self, element_id)
        return None


def scroll_element_into_view(document, target_id):
    """Scroll ``target_id`` into view; a missing element is a no-op"""
    element = document.get_element_by_id(target_id) if target_id else None
    if element is not None:
        element.scroll_into_view()


class LocationSync:
    """
    Keeps nav active state and anchor scrolling in step with a LocationSource.

    Args:
        source: LocationSource to follow
        scheduler: FrameScheduler used to defer scrolls until after layout
        nav_items: Nav items whose active flags are tracked
    """

    def __init__(self, source: LocationSource, scheduler: FrameScheduler, nav_items=NAV_ITEMS):
        self._source = source
        self._scheduler = scheduler
        self._nav_items = tuple(nav_items)
        self.active: Dict[str, bool] = {}
        self._on_location_change(source.location)
        self._unsubscribe = source.subscribe(self._on_location_change)

    @property
    def location(self) -> Location:
        return self._source.location

    def _on_location_change(self, location: Location):
        self.active = {item.label: is_item_active(location, item) for item in self._nav_items}
        if location.is_home and location.target_id:
            self._schedule_scroll(location.target_id)

    def _schedule_scroll(self, target_id):
        self._scheduler.request_frame(lambda document: scroll_element_into_view(document, target_id))

    def scroll_to(self, target_id: str) -> bool:
        """
        Scroll to an in-page section on the home page.

        Returns:
            bool: True if a scroll was scheduled. Off the home page this does
            nothing and returns False so the link navigates normally.
        """
        if not self.location.is_home or not target_id:
            return False
        self._schedule_scroll(target_id)
        return True

    def is_active(self, path: str) -> bool:
        return is_path_active(self.location, path)

    def close(self):
        self._unsubscribe()
