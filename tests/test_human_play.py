import pygame

from falling_blocks.game import Command, FallingBlockGame, GameConfig, Position, ShapeFactory, Square
from falling_blocks.visualization import human_play


def _square_game(width=8, height=8):
    config = GameConfig(width=width, height=height, gravity_interval=60.0)
    return FallingBlockGame(config, factory=ShapeFactory(width, variants=(Square,)))


def _key(key):
    return pygame.event.Event(pygame.KEYDOWN, key=key)


def test_keys_map_to_commands():
    game = _square_game()
    for key, command in human_play.KEY_TO_COMMAND.items():
        assert human_play.handle_event(game, _key(key))
        assert game.slot.take() == command


def test_unknown_key_leaves_slot_idle():
    game = _square_game()
    assert human_play.handle_event(game, _key(pygame.K_q))
    assert game.slot.peek() == Command.IDLE


def test_quit_and_escape_close_window():
    game = _square_game()
    assert not human_play.handle_event(game, pygame.event.Event(pygame.QUIT))
    assert not human_play.handle_event(game, _key(pygame.K_ESCAPE))


def test_restart_only_after_game_over():
    game = _square_game(width=4, height=4)
    assert human_play.handle_event(game, _key(pygame.K_r))
    assert game.slot.peek() == Command.IDLE

    game.grid.fill([Position(1, 1), Position(2, 1), Position(3, 1)])
    game.input(Command.MOVE_DOWN)
    assert game.tick().game_over

    assert human_play.handle_event(game, _key(pygame.K_r))
    assert not game.game_over
    assert game.grid.filled_positions() == [Position(0, 1)]


def test_run_applies_key_then_closes(monkeypatch):
    game = _square_game()
    frames = [[_key(pygame.K_LEFT), pygame.event.Event(pygame.QUIT)]]
    monkeypatch.setattr(pygame.event, "get", lambda *args, **kwargs: frames.pop(0) if frames else [])

    result = human_play.run(game=game, cell_size=4)

    assert result is game
    assert game.shape.position == Position(0, 2)
    assert game.ticks == 1
    assert game.slot.peek() == Command.IDLE
