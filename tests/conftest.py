"""Shared builders for scene fixtures."""

import pytest

from map_metrics.core.host import InMemoryLevelProvider
from map_metrics.models import (
    Actor,
    ActorClass,
    Level,
    LightComponent,
    Mobility,
    NiagaraComponent,
    NiagaraSystem,
    SkeletalMeshComponent,
    StaticMeshComponent,
    World,
)

STATIC_MESH_ACTOR = ActorClass("StaticMeshActor", "/Script/Engine.StaticMeshActor")
POINT_LIGHT = ActorClass("PointLight", "/Script/Engine.PointLight")
SKELETAL_MESH_ACTOR = ActorClass("SkeletalMeshActor", "/Script/Engine.SkeletalMeshActor")
NIAGARA_ACTOR = ActorClass("NiagaraActor", "/Script/Niagara.NiagaraActor")
EMPTY_ACTOR = ActorClass("Actor", "/Script/Engine.Actor")


def make_world(*actors, name="TestWorld", streaming=()):
    return World(
        name=name,
        persistent_level=Level(name="PersistentLevel", actors=list(actors)),
        streaming_levels=list(streaming),
    )


@pytest.fixture
def scenario_actors():
    """A has a static and a movable light, B one LOD-less mesh, C nothing."""

    actor_a = Actor(
        "A",
        POINT_LIGHT,
        [
            LightComponent("LightA0", Mobility.STATIC),
            LightComponent("LightA1", Mobility.MOVABLE),
        ],
    )
    actor_b = Actor("B", STATIC_MESH_ACTOR, [StaticMeshComponent("Mesh", lod_count=1, material_count=0)])
    actor_c = Actor("C", EMPTY_ACTOR)
    return [actor_a, actor_b, actor_c]


@pytest.fixture
def mixed_actors():
    return [
        Actor(
            "Lamp_1",
            POINT_LIGHT,
            [
                LightComponent("Bulb", Mobility.STATIONARY),
                LightComponent("Fill", "Stationary"),
                LightComponent("Key", Mobility.STATIC, light_type="SpotLight"),
            ],
        ),
        Actor(
            "Rock_1",
            STATIC_MESH_ACTOR,
            [
                StaticMeshComponent("Rock", lod_count=4, material_count=2),
                StaticMeshComponent("Moss", lod_count=1, material_count=2),
            ],
        ),
        Actor("Rock_2", STATIC_MESH_ACTOR, [StaticMeshComponent("Rock", lod_count=3, material_count=1)]),
        Actor(
            "Guard_1",
            SKELETAL_MESH_ACTOR,
            [
                SkeletalMeshComponent("Body", lod_count=5, material_count=3),
                StaticMeshComponent("Helmet", lod_count=1, material_count=0),
            ],
        ),
        Actor(
            "Fire_1",
            NIAGARA_ACTOR,
            [
                NiagaraComponent("Flames", NiagaraSystem("NS_Fire", has_gpu_emitters=True, emitter_count=2)),
                NiagaraComponent("Smoke", NiagaraSystem("NS_Smoke", has_gpu_emitters=False, emitter_count=2)),
                NiagaraComponent("Broken", None),
                LightComponent("Glow", Mobility.MOVABLE),
            ],
        ),
    ]


@pytest.fixture
def provider(mixed_actors, scenario_actors):
    return InMemoryLevelProvider(
        {
            "/Game/Maps/Mixed": make_world(*mixed_actors, name="Mixed"),
            "/Game/Maps/Scenario": make_world(*scenario_actors, name="Scenario"),
        }
    )
