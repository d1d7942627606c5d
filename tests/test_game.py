import pytest

from conftest import DT, start_game, step, ticks

from pixelbird.entities.core import TAG_PILLAR, TAG_SCORE_ZONE
from pixelbird.internal.math import Vector2D
from pixelbird.scenes import GameOverScene, MenuScene, PlayScene, SceneName


def kill_on_floor(game):
    """Put the bird into the floor so the next tick kills it."""
    bird = game.scene.bird
    bird.transform.set_position(Vector2D(bird.position.x, 205.0))
    game.step(DT)
    assert not bird.is_alive


def test_starts_on_the_menu(game):
    assert game.scene_name is SceneName.MENU
    assert isinstance(game.scene, MenuScene)
    assert game.machine.is_state(SceneName.MENU)


def test_space_before_arm_delay_is_ignored(game):
    step(game, ticks(0.5) - 1)
    game.key_press("space")
    assert game.scene_name is SceneName.MENU

    game.step(DT)
    game.key_press("space")
    assert game.scene_name is SceneName.GAME
    assert isinstance(game.scene, PlayScene)


def test_other_keys_do_not_leave_the_menu(game):
    step(game, ticks(1.0))
    game.key_press("up")
    game.click()
    assert game.scene_name is SceneName.MENU


def test_game_entry_resets_score_and_starts_music(game):
    start_game(game)

    assert game.scene.score.count == 0
    assert game.scene.bird.is_alive
    assert game.audio.is_playing
    assert game.audio.track.endswith("music.wav")
    assert game.games_played == 1


@pytest.mark.parametrize("press", [
    lambda game: game.key_press("space"),
    lambda game: game.key_press("up"),
    lambda game: game.click(),
])
def test_each_input_event_jumps_once(game, press):
    start_game(game)
    body = game.scene.bird.rigidbody
    body.set_velocity(Vector2D(0.0, 60.0))

    press(game)

    assert body.velocity.y == -300.0


def test_unbound_key_does_not_jump(game):
    start_game(game)
    body = game.scene.bird.rigidbody
    body.set_velocity(Vector2D(0.0, 60.0))

    game.key_press("left")

    assert body.velocity.y == 60.0


def test_single_jump_ends_on_the_floor_then_game_over(game):
    start_game(game)
    bird = game.scene.bird
    game.key_press("space")

    died_at = None
    for _ in range(ticks(2.5)):
        game.step(DT)
        if not bird.is_alive:
            died_at = game.time
            break

    assert died_at is not None
    assert game.scene.spawner.spawned == 0
    assert bird.rigidbody.is_grounded
    assert bird.bounds.bottom == pytest.approx(210.0)

    step(game, ticks(1.0))
    assert game.scene_name is SceneName.GAME_OVER
    assert game.time - died_at == 1.0


def test_game_over_waits_exactly_one_second(game):
    start_game(game)
    kill_on_floor(game)

    assert not game.audio.is_playing
    assert game.last_score == 0

    step(game, ticks(1.0) - 1)
    assert game.scene_name is SceneName.GAME

    game.step(DT)
    assert game.scene_name is SceneName.GAME_OVER
    assert isinstance(game.scene, GameOverScene)


def test_dead_bird_ignores_input(game):
    start_game(game)
    kill_on_floor(game)
    body = game.scene.bird.rigidbody
    body.set_velocity(Vector2D(0.0, 10.0))

    game.key_press("space")
    game.click()

    assert body.velocity.y == 10.0
    assert game.scene_name is SceneName.GAME


def test_scoring_bumps_every_live_scroller(floating_game):
    game = floating_game
    start_game(game)
    scene = game.scene
    bird = scene.bird
    first = scene.spawner.spawn()
    second = scene.spawner.spawn()
    # One tick of scrolling carries the zone onto the bird
    first.zone.transform.set_position(Vector2D(bird.position.x + 1.0, first.zone.position.y))

    game.step(DT)

    assert scene.score.count == 1
    assert bird.is_alive
    scrollers = scene.world.get(TAG_PILLAR) + scene.world.get(TAG_SCORE_ZONE)
    assert len(scrollers) == 6
    assert all(entity.speed == 90.5 for entity in scrollers)
    assert second.upper.speed == 90.5

    game.step(DT)
    assert scene.score.text == "Score: 1"


def test_score_resets_on_every_new_game(floating_game):
    game = floating_game
    start_game(game)
    pair = game.scene.spawner.spawn()
    pair.zone.transform.set_position(Vector2D(game.scene.bird.position.x + 1.0, pair.zone.position.y))
    game.step(DT)
    assert game.scene.score.count == 1

    kill_on_floor(game)
    step(game, ticks(1.0))
    assert game.scene_name is SceneName.GAME_OVER
    assert (game.last_score, game.best_score) == (1, 1)

    game.key_press("space")
    assert game.scene_name is SceneName.GAME
    assert game.scene.score.count == 0
    assert game.games_played == 2


def test_game_over_restarts_without_arm_delay(game):
    start_game(game)
    kill_on_floor(game)
    step(game, ticks(1.0))

    game.key_press("up")
    assert game.scene_name is SceneName.GAME_OVER

    game.key_press("space")
    assert game.scene_name is SceneName.GAME


def test_scene_exit_tears_down_the_world(game):
    menu_world = game.scene.world
    start_game(game)

    assert menu_world.entities == []
    assert menu_world.physics.colliders() == ()
    assert len(menu_world.scheduler) == 0


def test_leaving_the_game_stops_its_timers(game):
    start_game(game)
    play_world = game.scene.world
    kill_on_floor(game)
    step(game, ticks(1.0))

    assert game.scene_name is SceneName.GAME_OVER
    assert len(play_world.scheduler) == 0
    assert play_world.updaters == []


def test_invalid_triggers_are_no_ops(game):
    assert game.machine.crash() is False
    assert game.scene_name is SceneName.MENU

    start_game(game)
    assert game.machine.play() is False
    assert game.scene_name is SceneName.GAME


def test_pillar_pairs_spawn_every_interval_during_play(floating_game):
    game = floating_game
    start_game(game)
    game.scene.bird.collider.set_enabled(False)

    step(game, ticks(2.5) - 1)
    assert game.scene.spawner.spawned == 0
    game.step(DT)
    assert game.scene.spawner.spawned == 1
    assert len(game.scene.world.get(TAG_PILLAR)) == 2


def test_state_diagram_names_every_scene(game):
    source = game.machine.to_graphviz().source

    for name in ("menu", "game", "game-over", "play", "crash"):
        assert name in source


def test_flying_through_a_gap_scores_once(floating_game):
    game = floating_game
    start_game(game)
    bird = game.scene.bird
    pair = game.scene.spawner.spawn()
    gap_center = (pair.upper.bounds.bottom + pair.lower.bounds.top) / 2
    bird.transform.set_position(Vector2D(bird.position.x, gap_center))

    # Pillars reach the bird after 1.56 s, the zone after 2.22 s
    step(game, ticks(2.4))

    assert bird.is_alive
    assert game.scene.score.count == 1
    assert game.scene.spawner.spawned == 1
