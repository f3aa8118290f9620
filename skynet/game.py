import os
import sys
import json

from skynet.levels import LevelFormatError, load_level, read_positions, read_setup
from skynet.policy import NO_LINK, find_sever_link

"""
THIS FILE IS TO BE USED THE FOLLOWING WAY:
    python -m skynet.game [--record game.json] < level_input
    python -m skynet.game --level <level_file> [--record game.json]

Reads the setup block, then one agent position per line, and answers each
position with the link to sever ("a b") on stdout. Diagnostics go to stderr.
"""

# --- CONFIGURATION ---
CACHE_DIR = "cached_games"


class SkynetGame:
    def __init__(self, level):
        self.level = level
        self.graph = level.build_graph()
        self.exits = level.exits
        self.history = []
        print(f"Graph loaded: {len(self.graph)} nodes, {len(level.links)} links, exits {list(self.exits)}.",
              file=sys.stderr)

    def play_turn(self, agent):
        """Runs the policy for one agent position and records the outcome."""
        link = find_sever_link(self.graph, agent, self.exits)
        self.history.append({
            'turn': len(self.history) + 1,
            'agent': agent,
            'severed': list(link) if link is not NO_LINK else None,
        })
        return link

    def to_record(self):
        return {
            'links': [list(pair) for pair in self.level.links],
            'exits': list(self.exits),
            'turns': self.history,
        }

    def export_game_to_json(self, filepath=None, graph_name="game"):
        """Saves the played turns to a JSON file for replay."""
        if filepath is None:
            os.makedirs(CACHE_DIR, exist_ok=True)
            base_name = os.path.basename(graph_name).split('.')[0]
            filepath = os.path.join(CACHE_DIR, f"{base_name}_{len(self.history)}turns.json")

        with open(filepath, 'w') as f:
            json.dump(self.to_record(), f, indent=4)

        print(f"Success! Game record saved to: {filepath}", file=sys.stderr)
        return filepath


def play_positions(game, positions, out):
    for agent in positions:
        link = game.play_turn(agent)
        if link is NO_LINK:
            # No valid pair to report this turn
            continue
        print(f"{link[0]} {link[1]}", file=out, flush=True)


def run(stream_in, stream_out):
    """
    Plays a full game over text streams. Returns the finished SkynetGame.
    The loop ends when the input stream closes.
    """
    lines = enumerate(stream_in, 1)
    game = SkynetGame(read_setup(lines))
    play_positions(game, read_positions(lines), stream_out)
    return game


def main(argv):
    record_path = None
    level_path = None

    args = list(argv)
    while args:
        flag = args.pop(0)
        if flag in ("--record", "--level") and args:
            value = args.pop(0)
            if flag == "--record":
                record_path = value
            else:
                level_path = value
        else:
            print("Usage: python -m skynet.game [--level <level_file>] [--record <out.json>]")
            return 1

    try:
        if level_path:
            level = load_level(level_path)
            game = SkynetGame(level)
            play_positions(game, level.turns, sys.stdout)
        else:
            game = run(sys.stdin, sys.stdout)
    except FileNotFoundError:
        print(f"Error: The file '{level_path}' was not found.", file=sys.stderr)
        return 1
    except LevelFormatError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1

    if record_path:
        try:
            game.export_game_to_json(record_path)
        except OSError as e:
            print(f"Error: Could not write game record: {e}", file=sys.stderr)
            return 1
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
