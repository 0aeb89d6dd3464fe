#!/usr/bin/env python3
"""
CLI interface for playing Pente against humans or the computer.
"""
import argparse
import logging
import os
import sys

# Add the parent directory to Python path so we can import pente
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from pente.core.board import WHITE, BLACK, PIECE_SYMBOLS
from pente.core.codes import ReturnCode, get_message
from pente.core.game import Game, CAPTURE_WIN_PAIRS
from pente.core.position import CENTER_POSITION, format_position
from pente.ai.agents.computer_agent import ComputerAgent
from pente.ai.agents.human_agent import HumanAgent
from pente.ai.evaluator import reason_message


QUIT_COMMANDS = ('quit', 'exit', 'q')
HELP_COMMANDS = ('help', 'hint', 'h')


def display_board(game):
    """Display the current board state with column letters and row numbers."""
    size = game.board.size
    letters = "   " + " ".join(format_position(0, col)[0] for col in range(size))
    print()
    print(letters)
    # Highest row first so "up" on screen is north on the board
    for row in range(size - 1, -1, -1):
        cells = " ".join(
            '.' if cell == 0 else PIECE_SYMBOLS[int(cell)]
            for cell in game.board.state[row]
        )
        print(f"{row + 1:2d} {cells} {row + 1:2d}")
    print(letters)


def get_player_name(player):
    """Get display name for player."""
    return "White (W)" if player == WHITE else "Black (B)"


def select_game_mode(seed):
    """
    Let user select game mode.

    Returns:
        tuple: (white_agent, black_agent)
    """
    print("\nSelect Game Mode:")
    print("1. Player vs Player")
    print("2. Player (White) vs Computer")
    print("3. Computer vs Player (Black)")
    print("4. Computer vs Computer")

    while True:
        choice = input("\nEnter your choice (1-4): ").strip()
        if choice == '1':
            return (HumanAgent(), HumanAgent())
        elif choice == '2':
            return (HumanAgent(), ComputerAgent(seed=seed))
        elif choice == '3':
            return (ComputerAgent(seed=seed), HumanAgent())
        elif choice == '4':
            return (ComputerAgent(seed=seed), ComputerAgent(seed=None if seed is None else seed + 1))
        else:
            print("Invalid choice! Please enter 1, 2, 3 or 4.")


def play_human_turn(game, agent, helper):
    """
    Read moves until one is accepted or the player quits.

    Returns:
        bool: False if the player quit
    """
    player_name = get_player_name(game.current_player)
    while True:
        print(f"{player_name}, enter a move, 'help' for a hint or 'quit'.")
        move_input = agent.select_action(game)

        if move_input.lower() in QUIT_COMMANDS:
            return False
        if move_input.lower() in HELP_COMMANDS:
            hint = helper.recommend(game, game.current_player)
            if hint is not None:
                print(f"The computer recommends you play at {format_position(*hint.position)} "
                      f"{reason_message(hint, game.current_player)}!")
            continue

        status = game.make_move(move_input)
        if status == ReturnCode.SUCCESS:
            return True
        print(get_message(status))


def play_computer_turn(game, agent):
    """
    Let the computer place a stone.

    Returns:
        bool: False if the computer could not move
    """
    player = game.current_player
    print(f"{get_player_name(player)} (Computer) is thinking...")

    move = agent.select_action(game)
    if move is None:
        print("Computer could not find a move!")
        return False

    status = game.make_move(move)
    if status != ReturnCode.SUCCESS:
        print(f"ERROR: {get_message(status)}")
        return False

    print(f"{get_player_name(player)} (Computer) plays {format_position(*move)} "
          f"{reason_message(agent.last_move, player)}!")
    return True


def report_captures(game, player):
    pairs = game.board.captured_pairs
    if pairs > 0:
        print(f"{get_player_name(player)} captured {pairs} pair(s)!")
    print(f"Captured pairs - White: {game.captured_pairs[WHITE]}, Black: {game.captured_pairs[BLACK]}")


def parse_args():
    parser = argparse.ArgumentParser(description="Play Pente in the terminal")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for the computer's tie-breaks")
    parser.add_argument("--verbose", action="store_true", help="Log engine decisions")
    return parser.parse_args()


def main():
    """Main game loop."""
    args = parse_args()
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    print("=" * 60)
    print("                       PENTE")
    print("=" * 60)
    print("Rules: Get 5 stones in a row or capture "
          f"{CAPTURE_WIN_PAIRS} pairs to win.")
    print("Capture a pair by bracketing two enemy stones: W B B W.")
    print(f"White goes first, and must play the center ({CENTER_POSITION}).")
    print("White's second stone must be at least 3 away from the center.")
    print("=" * 60)

    try:
        white_agent, black_agent = select_game_mode(args.seed)
    except (KeyboardInterrupt, EOFError):
        print("\nExiting...")
        return

    helper = ComputerAgent(seed=args.seed)
    game = Game()

    try:
        while game.game_state == 'ongoing':
            display_board(game)
            player = game.current_player
            print(f"\nMove #{game.board.history_depth + 1} - {get_player_name(player)}")

            current_agent = white_agent if player == WHITE else black_agent
            if isinstance(current_agent, ComputerAgent):
                moved = play_computer_turn(game, current_agent)
            else:
                moved = play_human_turn(game, current_agent, helper)

            if not moved:
                print("\nThanks for playing!")
                return
            report_captures(game, player)

    except (KeyboardInterrupt, EOFError):
        print("\nThanks for playing!")
        return

    # Round ended - show final state
    display_board(game)
    print("\n" + "=" * 60)
    if game.game_state == 'win':
        print(f"GAME OVER - {get_player_name(game.winner)} wins!")
    else:
        print("GAME OVER - The board is full, it's a draw!")

    scores = game.round_scores()
    print(f"Round score - White: {scores[WHITE]}, Black: {scores[BLACK]}")
    print("=" * 60)


if __name__ == "__main__":
    main()
