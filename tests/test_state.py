import pygame
import pytest

from zombiefield.camera import Camera
from zombiefield.game_object import Component, GameObject
from zombiefield.input_manager import InputManager
from zombiefield.state import State


class _Recorder(Component):
    def __init__(self, associated):
        super().__init__(associated)
        self.calls = []

    def start(self):
        self.calls.append("start")

    def update(self, dt):
        self.calls.append(("update", dt))

    def render(self):
        self.calls.append("render")

    def is_type(self, type_name):
        return type_name == "Recorder"


@pytest.fixture
def empty_dir(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)
    return tmp_path


@pytest.fixture
def state(empty_dir):
    scene = State(1200, 900)
    scene.input_manager = InputManager()
    scene.camera = Camera()
    return scene


@pytest.fixture
def resource_dir(tmp_path, monkeypatch):
    (tmp_path / "resources" / "img").mkdir(parents=True)
    (tmp_path / "resources" / "map").mkdir(parents=True)
    pygame.image.save(pygame.Surface((32, 24)), str(tmp_path / "resources/img/Background.png"))
    pygame.image.save(pygame.Surface((128, 64)), str(tmp_path / "resources/img/Tileset.png"))
    (tmp_path / "resources/map/mapf.txt").write_text("2 1 1\n0 1\n")
    monkeypatch.chdir(tmp_path)
    return tmp_path


def test_missing_resources_leave_only_background(state):
    assert len(state.objects) == 1
    assert state.objects[0].get_component("SpriteRenderer") is not None


def test_scene_built_from_resources(resource_dir):
    scene = State(1200, 900)
    assert len(scene.objects) == 2
    background, map_object = scene.objects
    assert background.box.w == 32
    assert background.box.h == 24
    tile_map = map_object.get_component("TileMap")
    assert tile_map.width == 2
    assert tile_map[1, 0, 0] == 1


def test_escape_requests_quit(state):
    state.input_manager.update([pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE)])
    state.update(0.1)
    assert state.quit_requested is True


def test_quit_event_requests_quit(state):
    state.input_manager.update([pygame.event.Event(pygame.QUIT)])
    state.update(0.1)
    assert state.quit_requested is True


def test_no_input_keeps_running(state):
    state.input_manager.update([])
    state.update(0.1)
    assert state.quit_requested is False


def test_space_spawns_zombie_at_mouse_plus_camera(state):
    state.camera.pos.x = 5
    state.camera.pos.y = 7
    state.input_manager.update(
        [
            pygame.event.Event(pygame.MOUSEMOTION, pos=(10, 20)),
            pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE),
        ]
    )
    before = len(state.objects)
    state.update(0.0)
    assert len(state.objects) == before + 1
    zombie = state.objects[-1]
    assert zombie.box.x == 15
    assert zombie.box.y == 27
    assert zombie.get_component("Zombie") is not None
    assert zombie.get_component("Animator").current_animation == "walking"


def test_dead_objects_are_removed(state):
    doomed = GameObject()
    state.add_object(doomed)
    doomed.request_delete()
    state.input_manager.update([])
    state.update(0.1)
    assert doomed not in state.objects
    assert state.find_object(doomed) is None


def test_update_reaches_components(state):
    obj = GameObject()
    recorder = _Recorder(obj)
    obj.add_component(recorder)
    state.add_object(obj)
    state.input_manager.update([])
    state.update(0.25)
    assert ("update", 0.25) in recorder.calls


def test_add_object_returns_reference(state):
    obj = GameObject()
    ref = state.add_object(obj)
    assert ref() is obj
    assert state.find_object(obj)() is obj


def test_objects_added_after_start_are_started(state):
    state.start()
    obj = GameObject()
    recorder = _Recorder(obj)
    obj.add_component(recorder)
    state.add_object(obj)
    assert obj.started is True
    assert recorder.calls == ["start"]


def test_start_starts_existing_objects(state):
    obj = GameObject()
    state.add_object(obj)
    assert obj.started is False
    state.start()
    assert obj.started is True
    assert state.started is True


def test_render_reaches_components(state):
    obj = GameObject()
    recorder = _Recorder(obj)
    obj.add_component(recorder)
    state.add_object(obj)
    state.render()
    assert recorder.calls == ["render"]


def test_find_unknown_object(state):
    assert state.find_object(GameObject()) is None