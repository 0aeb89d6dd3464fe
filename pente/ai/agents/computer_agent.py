"""
Computer agent for Pente.
"""
import random

from ..config import EvaluatorConfig
from ..evaluator import recommend_move


class ComputerAgent:
    """
    An agent that plays the best move found by one-ply evaluation.
    
    Every open intersection is scored both for the agent and for its
    opponent, so the agent either builds toward its own win or blocks
    the opponent's strongest move, whichever scores higher.
    """
    
    def __init__(self, seed=None, config=None):
        """
        Initialize the computer agent.
        
        Args:
            seed (int, optional): Random seed for tie-breaking reproducibility
            config (EvaluatorConfig, optional): Scoring weights
        """
        self.rng = random.Random(seed)
        self.config = config or EvaluatorConfig()
        self.last_move = None
        
    def select_action(self, game):
        """
        Select the recommended move for the player to move.
        
        Args:
            game: Game instance with current board state
            
        Returns:
            tuple: (row, col) coordinates of selected move, or None if no legal moves
        """
        self.last_move = self.recommend(game, game.current_player)
        if self.last_move is None:
            return None
        return self.last_move.position
        
    def recommend(self, game, color):
        """
        Recommend a move for either color, e.g. as a hint for a human player.
        
        Args:
            game: Game instance with current board state
            color (int): Color to recommend a move for
            
        Returns:
            EvaluatedMove or None: Recommended move with its score and reason
        """
        return recommend_move(game.board, color, -color, self.rng, self.config)
