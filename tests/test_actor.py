import pytest

from sceneforge.actor import Actor, StaticMeshActor
from sceneforge.components import ActorComponent, EndPlayReason, SceneComponent
from sceneforge.geometry import FORWARD_VECTOR, ZERO_VECTOR, Vector
from sceneforge.mesh_components import SKY_SCROLL_STEP, SkySphereComponent, StaticMeshComponent
from sceneforge.text import UUIDRenderComponent


def test_first_scene_component_becomes_root():
    actor = Actor()
    first = actor.add_component(SceneComponent)
    second = actor.add_component(SceneComponent)
    assert actor.root_component is first
    assert second.attach_parent is first
    assert first.owner is actor


def test_add_component_initializes():
    actor = Actor()
    component = actor.add_component(SceneComponent)
    assert component.has_been_initialized
    assert actor.components == (component,)


def test_plain_component_is_not_root():
    actor = Actor()
    actor.add_component(ActorComponent)
    assert actor.root_component is None


def test_component_by_class():
    actor = Actor()
    actor.add_component(ActorComponent)
    sky = actor.add_component(SkySphereComponent)
    assert actor.component_by_class(SkySphereComponent) is sky
    assert actor.component_by_class(UUIDRenderComponent) is None


def test_begin_play_adds_uuid_label():
    actor = Actor()
    actor.add_component(SceneComponent)
    actor.begin_play()
    label = actor.component_by_class(UUIDRenderComponent)
    assert label.text == f"UUID {actor.uuid}"
    assert label.attach_parent is actor.root_component
    assert all(component.has_begun_play for component in actor.components)


def test_tick_reaches_components():
    actor = Actor()
    sky = actor.add_component(SkySphereComponent)
    actor.tick(0.016)
    actor.tick(0.016)
    assert sky.u_offset == pytest.approx(2 * SKY_SCROLL_STEP)


def test_destroyed_ends_play_and_uninitializes():
    actor = Actor()
    component = actor.add_component(SceneComponent)
    component.begin_play()
    actor.destroyed()
    assert not component.has_begun_play
    assert not component.has_been_initialized


def test_end_play_skips_components_not_playing():
    actor = Actor()
    component = actor.add_component(SceneComponent)
    actor.end_play(EndPlayReason.QUIT)
    assert not component.has_been_initialized


def test_destroy_without_world_returns_false():
    actor = Actor()
    assert actor.destroy() is False
    assert not actor.is_being_destroyed


def test_set_root_component_rejects_foreign():
    actor = Actor()
    other = Actor()
    foreign = other.add_component(SceneComponent)
    assert actor.set_root_component(foreign) is False


def test_set_root_component_reattaches_old_root():
    actor = Actor()
    old_root = actor.add_component(SceneComponent)
    new_root = SceneComponent()
    new_root.owner = actor
    assert actor.set_root_component(new_root) is True
    assert actor.root_component is new_root
    assert old_root.attach_parent is new_root


def test_remove_owned_component():
    actor = Actor()
    component = actor.add_component(ActorComponent)
    actor.remove_owned_component(component)
    assert actor.components == ()


def test_destroy_component_clears_root():
    actor = Actor()
    root = actor.add_component(SceneComponent)
    root.destroy_component()
    assert actor.root_component is None
    assert actor.components == ()


def test_transform_without_root():
    actor = Actor()
    assert actor.actor_location() == ZERO_VECTOR
    assert actor.actor_forward_vector() == FORWARD_VECTOR
    assert actor.set_actor_location(Vector(1.0, 2.0, 3.0)) is False


def test_transform_with_root():
    actor = Actor()
    actor.add_component(SceneComponent)
    location = Vector(1.0, 2.0, 3.0)
    scale = Vector(2.0, 2.0, 2.0)
    assert actor.set_actor_location(location)
    assert actor.set_actor_scale(scale)
    assert actor.set_actor_rotation(Vector(0.0, 0.0, 0.0))
    assert actor.actor_location() == location
    assert actor.actor_scale() == scale


def test_labels():
    actor = Actor()
    assert actor.default_actor_label() == "Actor"
    assert actor.actor_label == f"Actor{actor.uuid}"
    actor.actor_label = "Hero"
    assert actor.actor_label == f"Hero_{actor.uuid}"
    current = actor.actor_label
    actor.actor_label = current
    assert actor.actor_label == current


def test_uuids_are_unique():
    assert Actor().uuid != Actor().uuid or False
    first, second = Actor(), Actor()
    assert second.uuid > first.uuid


def test_initialize_components_activates_auto_active():
    actor = Actor()
    component = actor.add_component(ActorComponent)
    component.uninitialize_component()
    component.auto_activate = True
    actor.initialize_components()
    assert component.is_active
    assert component.has_been_initialized


def test_static_mesh_actor_root():
    actor = StaticMeshActor()
    assert isinstance(actor.static_mesh_component, StaticMeshComponent)
    assert actor.root_component is actor.static_mesh_component
    assert actor.default_actor_label() == "StaticMeshActor"