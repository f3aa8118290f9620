import sys
import networkx as nx

from skynet.levels import Level, format_level

# --- CONFIGURATION ---
# Format: "kind": short description shown in the usage text
LEVEL_KINDS = {
    "line": "path 0..n-1, exit at the far end",
    "grid": "n x n grid, exits on the four corners",
    "star": "hub 0 with n spokes, every other spoke is an exit",
}

# Smallest size where the start is not an exit
MIN_SIZE = {
    "line": 2,
    "grid": 3,
    "star": 2,
}


def build_level(kind, size):
    """
    Returns (Level, start) for one of the LEVEL_KINDS.
    The agent's start position is written as the level's first turn.
    """
    if kind not in LEVEL_KINDS:
        raise ValueError(f"Unknown level kind '{kind}'. Choose from: {', '.join(LEVEL_KINDS)}")
    if size < MIN_SIZE[kind]:
        raise ValueError(f"Level size for '{kind}' must be at least {MIN_SIZE[kind]}.")

    if kind == "line":
        G = nx.path_graph(size)
        exits = [size - 1]
        start = 0
    elif kind == "grid":
        G = nx.convert_node_labels_to_integers(nx.grid_2d_graph(size, size), ordering="sorted")
        # Sorted ordering puts (r, c) at r * size + c
        exits = [0, size - 1, size * (size - 1), size * size - 1]
        start = (size // 2) * size + size // 2
    else:
        G = nx.star_graph(size)
        exits = list(range(1, size + 1, 2))
        start = 0

    links = sorted((min(a, b), max(a, b)) for a, b in G.edges())
    level = Level(G.number_of_nodes(), links, exits, turns=[start])
    return level, start


def generate(kind, size, filename=None):
    level, _ = build_level(kind, size)
    if filename is None:
        filename = f"{kind}_{size}.txt"

    with open(filename, "w") as f:
        f.write(format_level(level))

    print(f"Successfully generated {filename}")
    return filename


if __name__ == "__main__":
    if len(sys.argv) < 3:
        print("Usage: python -m skynet.generator <kind> <size> [out_file]")
        for name, desc in LEVEL_KINDS.items():
            print(f"  {name:<6} {desc}")
        sys.exit(1)

    try:
        generate(sys.argv[1], int(sys.argv[2]), sys.argv[3] if len(sys.argv) > 3 else None)
    except ValueError as e:
        print(f"Error: {e}")
        sys.exit(1)
