"""
Location sync tests: active state, deferred scrolling, subscription order.
"""

import pytest

from utils.navigation import (
    FrameScheduler,
    Location,
    LocationSource,
    LocationSync,
    PageDocument,
    is_path_active,
    nav_links,
)

pytestmark = pytest.mark.navigation

HOME_SECTIONS = ['home', 'projects', 'photos', 'contact']


@pytest.fixture()
def source():
    return LocationSource()


@pytest.fixture()
def scheduler():
    return FrameScheduler()


@pytest.fixture()
def sync(source, scheduler):
    sync = LocationSync(source, scheduler)
    yield sync
    sync.close()


def test_location_from_url():
    assert Location.from_url('/#projects') == Location('/', '#projects')
    assert Location.from_url('/about') == Location('/about', '')
    assert Location.from_url('') == Location('/', '')
    assert Location.from_url('https://example.com/project/genezippers').pathname == '/project/genezippers'


@pytest.mark.parametrize('hash_value, expected', [
    ('#projects', 'projects'),
    ('projects', 'projects'),
    ('#', ''),
    ('', ''),
])
def test_target_id_strips_one_leading_hash(hash_value, expected):
    assert Location('/', hash_value).target_id == expected


def test_root_is_active_only_on_exact_root():
    assert is_path_active(Location('/'), '/') is True
    assert is_path_active(Location('/', '#projects'), '/') is True
    assert is_path_active(Location('/about'), '/') is False
    assert is_path_active(Location('/project/genezippers'), '/') is False


def test_prefix_paths_match_on_segment_boundary():
    assert is_path_active(Location('/project/genezippers'), '/project') is True
    assert is_path_active(Location('/project'), '/project') is True
    assert is_path_active(Location('/projects-other'), '/project') is False
    assert is_path_active(Location('/about'), '') is False


def test_projects_link_active_on_projects_hash(source, sync):
    source.navigate('/', '#projects')
    assert sync.active['Projects'] is True
    assert sync.active['Home'] is True
    assert sync.active['About'] is False


def test_about_page_activates_only_about(source, sync):
    source.navigate('/about')
    assert sync.active == {'Home': False, 'Projects': False, 'About': True}


def test_project_detail_activates_projects(source, sync):
    source.navigate('/project/genezippers')
    assert sync.active == {'Home': False, 'Projects': True, 'About': False}
    assert sync.is_active('/project') is True


def test_hash_scroll_waits_for_next_frame(source, scheduler, sync):
    document = PageDocument(HOME_SECTIONS)

    source.navigate('/', '#photos')
    assert document.scroll_history == []
    assert scheduler.pending == 1

    scheduler.run_frame(document)
    assert document.scroll_history == ['photos']
    assert scheduler.pending == 0


def test_missing_anchor_is_silent_no_op(source, scheduler, sync):
    document = PageDocument(HOME_SECTIONS)
    source.navigate('/', '#does-not-exist')
    assert scheduler.run_frame(document) == 1
    assert document.scroll_history == []


def test_hash_on_other_pages_does_not_scroll(source, scheduler, sync):
    source.navigate('/about', '#projects')
    assert scheduler.pending == 0


def test_initial_location_with_hash_schedules_scroll(scheduler):
    source = LocationSource(Location('/', '#projects'))
    sync = LocationSync(source, scheduler)
    document = PageDocument(HOME_SECTIONS)
    scheduler.run_frame(document)
    assert document.scroll_history == ['projects']
    assert sync.active['Projects'] is True


def test_scroll_to_only_on_home(source, scheduler, sync):
    assert sync.scroll_to('projects') is True
    source.navigate('/about')
    assert sync.scroll_to('projects') is False
    assert scheduler.pending == 1


def test_scroll_to_empty_target_is_ignored(sync, scheduler):
    assert sync.scroll_to('') is False
    assert scheduler.pending == 0


def test_successive_changes_scroll_in_order(source, scheduler, sync):
    document = PageDocument(HOME_SECTIONS)
    source.navigate('/', '#projects')
    source.navigate('/', '#photos')
    scheduler.run_frame(document)
    assert document.scroll_history == ['projects', 'photos']


def test_same_location_notifies_once(source):
    calls = []
    source.subscribe(calls.append)
    source.navigate('/about')
    source.navigate('/about')
    assert calls == [Location('/about')]


def test_subscribers_called_in_order_and_unsubscribe(source):
    calls = []
    unsubscribe = source.subscribe(lambda loc: calls.append(('first', loc.pathname)))
    source.subscribe(lambda loc: calls.append(('second', loc.pathname)))
    source.navigate('/about')
    unsubscribe()
    source.navigate('/')
    assert calls == [('first', '/about'), ('second', '/about'), ('second', '/')]


def test_callbacks_requested_during_frame_wait_for_next_frame(scheduler):
    document = PageDocument()
    ran = []

    def outer(doc):
        ran.append('outer')
        scheduler.request_frame(lambda d: ran.append('inner'))

    scheduler.request_frame(outer)
    assert scheduler.run_frame(document) == 1
    assert ran == ['outer']
    scheduler.run_frame(document)
    assert ran == ['outer', 'inner']


def test_close_stops_following_source(source, scheduler):
    sync = LocationSync(source, scheduler)
    sync.close()
    source.navigate('/about')
    assert sync.active['Home'] is True


def test_nav_links_for_template():
    links = nav_links(Location('/about'))
    assert [link['label'] for link in links] == ['Home', 'Projects', 'About']
    assert [link['active'] for link in links] == [False, False, True]
    assert links[1]['href'] == '/#projects'


def test_hash_without_leading_marker_scrolls_and_activates(source, scheduler, sync):
    document = PageDocument(HOME_SECTIONS)
    source.navigate('/', 'projects')
    scheduler.run_frame(document)
    assert document.scroll_history == ['projects']
    assert sync.active['Projects'] is True


def test_navigate_url_splits_path_and_hash(source, sync):
    location = source.navigate_url('/#projects')
    assert location == Location('/', '#projects')
    assert sync.active['Projects'] is True
    source.navigate_url('/about')
    assert sync.active == {'Home': False, 'Projects': False, 'About': True}
