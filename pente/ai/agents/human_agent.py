"""
Human agent for Pente.
"""


class HumanAgent:
    """
    An agent whose moves come from a person, one label per turn.
    
    The agent only collects input; the board decides whether the label
    parses and whether the move is legal.
    """
    
    def __init__(self, input_fn=input, prompt="Enter your move (e.g. J10): "):
        """
        Initialize the human agent.
        
        Args:
            input_fn (callable): Reads one line of text given a prompt
            prompt (str): Prompt shown before each move
        """
        self.input_fn = input_fn
        self.prompt = prompt
        
    def select_action(self, game):
        """
        Ask for the next move.
        
        Args:
            game: Game instance with current board state
            
        Returns:
            str: Position label as typed, without surrounding whitespace
        """
        return self.input_fn(self.prompt).strip()
