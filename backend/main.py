import argparse
import json
import logging
import random
from typing import Any, Dict, List, Optional

from domain.config import GameConfig
from domain.constants import VALID_MOVES
from domain.game_state import GameState
from players import get_player_class, list_variants


# -------------------------------
# Headless Simulation
# -------------------------------

def run_headless(
    config: GameConfig,
    ticks: int,
    seed: Optional[int] = None,
    direction: Optional[str] = None,
    autopilot: Optional[str] = None,
    snapshot: Optional[str] = None
) -> Dict[str, Any]:
    """
    Runs a game without a window.

    Args:
        config: Game settings.
        ticks: Maximum number of ticks to simulate; stops early on game over.
        seed: Optional seed for food placement (and the random autopilot).
        direction: Initial direction intent.
        autopilot: Name of a player variant that steers every tick.
        snapshot: Optional PNG path for the final frame.

    Returns:
        A dictionary summarizing the run (ticks_run, score, length, game_over, state).
    """
    rng = random.Random(seed)
    state = GameState(config, rng=rng)

    player = None
    if autopilot:
        player_cls = get_player_class(autopilot)
        # Autopilot draws from its own stream, offset from the food seed
        player_seed = None if seed is None else seed + 1
        player = player_cls(rng=random.Random(player_seed))

    if direction:
        state.apply_input(direction)

    ticks_run = 0
    for _ in range(ticks):
        if state.game_over:
            break
        if player is not None:
            state.apply_input(player.get_move(state))
        state.tick(config.tick_interval)
        ticks_run += 1

    if snapshot:
        # Pillow is only needed when a frame is written
        from services.frame_renderer import FrameRenderer
        FrameRenderer(config).save_snapshot(state, snapshot)

    return {
        "ticks_run": ticks_run,
        "score": state.score,
        "length": len(state.snake),
        "game_over": state.game_over,
        "state": state.snapshot(),
        "board": state.print_board(),
    }


def non_negative_int(value: str) -> int:
    """argparse type for counts that cannot go below zero"""
    number = int(value)
    if number < 0:
        raise argparse.ArgumentTypeError(f"must be zero or more, got {number}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Play arcade Snake in a window, or simulate it headless."
    )
    parser.add_argument("--headless", action="store_true",
                        help="Run without a window and print the final board")
    parser.add_argument("--ticks", type=non_negative_int, default=100,
                        help="Number of ticks to simulate in headless mode")
    parser.add_argument("--seed", type=int, default=None,
                        help="Random seed for food placement")
    parser.add_argument("--direction", type=str.upper, choices=sorted(VALID_MOVES), default=None,
                        help="Initial direction in headless mode")
    parser.add_argument("--autopilot", choices=list_variants(), default=None,
                        help="Player variant that steers in headless mode")
    parser.add_argument("--snapshot", type=str, default=None,
                        help="Write the final frame to this PNG path")
    parser.add_argument("--json", action="store_true",
                        help="Print the headless summary as JSON")
    parser.add_argument("--width", type=int, default=None,
                        help="Grid width in cells")
    parser.add_argument("--height", type=int, default=None,
                        help="Grid height in cells")
    return parser


# -------------------------------
# Main Entry Point
# -------------------------------
def main(argv: Optional[List[str]] = None):
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    args = build_parser().parse_args(argv)

    config = GameConfig.from_env(grid_width=args.width, grid_height=args.height)

    if args.headless:
        result = run_headless(
            config,
            ticks=args.ticks,
            seed=args.seed,
            direction=args.direction,
            autopilot=args.autopilot,
            snapshot=args.snapshot
        )
        if args.json:
            print(json.dumps({k: v for k, v in result.items() if k != "board"}, indent=2))
        else:
            print("\n" + result["board"] + "\n")
            print(f"Ticks: {result['ticks_run']}, Score: {result['score']}, "
                  f"Length: {result['length']}, Game over: {result['game_over']}")
        return result

    # pygame is only imported when a window is opened
    from frontend.window import ArcadeWindow

    final_state = ArcadeWindow(config, GameState(config, rng=random.Random(args.seed))).run()
    print(f"Final score: {final_state.score}")
    return None


if __name__ == "__main__":
    main()
