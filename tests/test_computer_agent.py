"""
Tests for ComputerAgent class.
"""
import pytest
from pente.core.game import Game
from pente.core.board import WHITE, BLACK
from pente.core.codes import ReturnCode
from pente.ai.config import EvaluatorConfig
from pente.ai.evaluator import MoveReason, ring_positions
from pente.ai.agents.computer_agent import ComputerAgent


def test_computer_agent_initialization():
    """Test that ComputerAgent initializes correctly."""
    agent = ComputerAgent()
    assert agent.rng is not None
    assert isinstance(agent.config, EvaluatorConfig)
    assert agent.last_move is None

    config = EvaluatorConfig(build_weight=10)
    agent_seeded = ComputerAgent(seed=42, config=config)
    assert agent_seeded.config is config


def test_computer_agent_opens_at_center():
    """Test that the first move is the center."""
    game = Game()
    agent = ComputerAgent(seed=42)

    move = agent.select_action(game)

    assert move == (9, 9)
    assert agent.last_move.position == move
    assert agent.last_move.reason == MoveReason.BOARD_RESTRICTION


def test_computer_agent_second_white_move():
    """Test that white's second stone lands on the ring."""
    game = Game()
    game.make_move("J10")
    game.make_move("A1")
    agent = ComputerAgent(seed=7)

    move = agent.select_action(game)

    assert move in ring_positions(19)
    assert game.make_move(move) == ReturnCode.SUCCESS


def test_computer_agent_immediate_win_detection():
    """Test that ComputerAgent takes immediate wins."""
    game = Game()
    for position in ["J10", "A1", "M10", "A2", "K10", "A3", "L10", "B5"]:
        game.make_move(position)
    agent = ComputerAgent(seed=0)

    # White J10 K10 L10 M10 can win at I10 or N10
    move = agent.select_action(game)

    assert move in [(9, 8), (9, 13)]
    assert game.make_move(move) == ReturnCode.SUCCESS
    assert game.winner == WHITE


def test_computer_agent_immediate_block_detection():
    """Test that ComputerAgent blocks the opponent's four."""
    game = Game()
    for position in ["J10", "A1", "M10", "A2", "S19", "A3", "S17", "A4"]:
        game.make_move(position)
    agent = ComputerAgent(seed=0)

    # Black A1-A4 can only be extended upwards to A5
    move = agent.select_action(game)

    assert move == (4, 0)
    assert agent.last_move.color == BLACK
    assert agent.last_move.reason == MoveReason.WIN


def test_computer_agent_recommends_for_either_color():
    """Test that hints can be produced for the player not to move."""
    game = Game()
    game.make_move("J10")
    agent = ComputerAgent(seed=3)

    hint = agent.recommend(game, WHITE)

    assert hint is not None
    assert game.board.state[hint.position] == 0
    # Hints do not change the board or the turn
    assert game.current_player == BLACK
    assert game.board.history_depth == 1


def test_computer_agent_no_moves_after_win():
    """Test that ComputerAgent returns None once the round is won."""
    game = Game()
    for position in ["J10", "A1", "M10", "A2", "K10", "A3", "L10", "A5", "N10"]:
        game.make_move(position)
    agent = ComputerAgent()

    assert agent.select_action(game) is None
    assert agent.last_move is None


@pytest.mark.parametrize("seed", [1, 2])
def test_computer_agent_same_seed_reproducible(seed):
    """Test that the same seed produces the same game."""
    moves = []
    for _ in range(2):
        game = Game()
        white, black = ComputerAgent(seed=seed), ComputerAgent(seed=seed + 100)
        played = []
        for _ in range(4):
            agent = white if game.current_player == WHITE else black
            move = agent.select_action(game)
            assert game.make_move(move) == ReturnCode.SUCCESS
            played.append(move)
        moves.append(played)

    assert moves[0] == moves[1]
    assert moves[0][0] == (9, 9)
