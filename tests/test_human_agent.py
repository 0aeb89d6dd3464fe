"""
Tests for HumanAgent class.
"""
from pente.core.game import Game
from pente.ai.agents.human_agent import HumanAgent


def test_human_agent_returns_typed_label():
    """Test that HumanAgent passes the typed label through, stripped."""
    prompts = []

    def fake_input(prompt):
        prompts.append(prompt)
        return "  j10 \n"

    agent = HumanAgent(input_fn=fake_input, prompt="Move: ")

    assert agent.select_action(Game()) == "j10"
    assert prompts == ["Move: "]


def test_human_agent_does_not_validate():
    """Test that HumanAgent leaves validation to the game."""
    game = Game()
    agent = HumanAgent(input_fn=lambda prompt: "nonsense")

    move = agent.select_action(game)

    assert move == "nonsense"
    assert game.board.history_depth == 0


def test_human_agent_label_is_playable():
    """Test that a typed label can be played directly."""
    game = Game()
    agent = HumanAgent(input_fn=lambda prompt: "J10")

    game.make_move(agent.select_action(game))

    assert game.board.state[9, 9] == 1
