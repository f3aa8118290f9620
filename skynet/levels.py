"""
Level file helpers.

A level file holds the same setup block the game reads on stdin:

    N L E          node count, link count, exit count
    a b            (L lines) one link each
    e              (E lines) one exit each

Any lines after the setup block are agent positions, one per turn, used to
play a level offline. Blank lines and lines starting with '#' are ignored
anywhere, in files and on stdin alike.
"""
import os
import sys
import numpy as np

from skynet.graph import Graph

# --- CONFIGURATION ---
MATRIX_OUT_DIR = "out"


class LevelFormatError(ValueError):
    """Raised when a level or matrix file does not match the expected layout."""


class Level:
    def __init__(self, node_count, links, exits, turns=None):
        self.node_count = node_count
        self.links = list(links)
        self.exits = tuple(exits)
        self.turns = list(turns or [])

    def build_graph(self):
        graph = Graph.from_edges(self.links)
        if len(graph) > self.node_count:
            print(f"Warning: links reference {len(graph)} nodes, header declares {self.node_count}.",
                  file=sys.stderr)
        return graph

    def __repr__(self):
        return f"Level({self.node_count} nodes, {len(self.links)} links, exits={list(self.exits)})"


def _skip_line(line):
    # Blank lines and '#' comments carry no data
    return not line or line.startswith('#')


def _read_ints(lines, count, what):
    """Pulls the next data line and parses exactly `count` integers from it."""
    for line_num, line in lines:
        line = line.strip()
        if _skip_line(line):
            continue
        parts = line.split()
        if len(parts) != count:
            raise LevelFormatError(f"Line {line_num}: expected {count} value(s) for {what}, got '{line}'")
        try:
            return [int(p) for p in parts]
        except ValueError:
            raise LevelFormatError(f"Line {line_num}: {what} must be integers, got '{line}'") from None
    raise LevelFormatError(f"Unexpected end of input while reading {what}")


def read_setup(lines):
    """
    Reads the setup block from an iterator of (line_number, text) pairs.
    Lines after the block are left in the iterator.
    """
    node_count, link_count, exit_count = _read_ints(lines, 3, "the header")

    links = []
    for _ in range(link_count):
        a, b = _read_ints(lines, 2, "a link")
        links.append((a, b))

    exits = []
    for _ in range(exit_count):
        exits.append(_read_ints(lines, 1, "an exit")[0])

    return Level(node_count, links, exits)


def read_positions(lines):
    """Yields one agent position per data line until the iterator runs out."""
    for line_num, line in lines:
        line = line.strip()
        if _skip_line(line):
            continue
        try:
            yield int(line)
        except ValueError:
            raise LevelFormatError(f"Line {line_num}: agent position must be an integer, got '{line}'") from None


def parse_level(text):
    lines = enumerate(text.splitlines(), 1)
    level = read_setup(lines)
    level.turns.extend(read_positions(lines))
    return level


def load_level(filepath):
    with open(filepath, 'r') as f:
        return parse_level(f.read())


def format_level(level, include_turns=True):
    """Inverse of parse_level."""
    out = [f"{level.node_count} {len(level.links)} {len(level.exits)}"]
    out += [f"{a} {b}" for a, b in level.links]
    out += [str(e) for e in level.exits]
    if include_turns:
        out += [str(t) for t in level.turns]
    return "\n".join(out) + "\n"


# --- ADJACENCY MATRICES ---

def parse_matrix(filepath):
    """
    Reads a text file of adjacency matrix rows (e.g. "0101...") and returns a numpy array.
    Stops at a '-' line.
    """
    matrix_rows = []
    with open(filepath, 'r') as f:
        for line in f:
            line = line.strip()
            if line == '-':
                break
            if not line:
                continue
            row = [int(char) for char in line if char in '01']
            if row:
                matrix_rows.append(row)

    matrix = np.array(matrix_rows, dtype=np.int8)
    if matrix.ndim != 2 or matrix.shape[0] != matrix.shape[1]:
        raise LevelFormatError(f"Matrix in '{filepath}' is not square.")
    return matrix


def graph_from_matrix(matrix):
    """Builds a Graph from a square 0/1 matrix. Row i is node i."""
    graph = Graph()
    rows, cols = np.nonzero(np.triu(matrix, k=1))
    for r, c in zip(rows.tolist(), cols.tolist()):
        graph.insert_edge(r, c)
    return graph


def graph_to_matrix(graph, size=None):
    """Dense symmetric 0/1 matrix of the graph. Labels must be 0..size-1."""
    if size is None:
        size = max(graph.nodes(), default=-1) + 1
    matrix = np.zeros((size, size), dtype=np.int8)
    for a, b in graph.edges():
        if a >= size or b >= size or a < 0 or b < 0:
            raise LevelFormatError(f"Link {a}-{b} does not fit a {size}x{size} matrix.")
        matrix[a, b] = 1
        matrix[b, a] = 1
    return matrix


def write_matrix(matrix, output_path):
    with open(output_path, 'w') as f:
        for row in matrix:
            f.write("".join(map(str, row.tolist())) + "\n")
        f.write("-\n")


def parse_positions(filepath):
    """
    Reads a text file containing coordinates "x,y".
    Returns a dict {node_id: (x, y)} suitable for NetworkX.
    """
    coords = []
    with open(filepath, 'r') as f:
        for line_num, line in enumerate(f, 1):
            line = line.strip()
            if not line or line.startswith('-'):
                continue
            parts = line.split(',')
            if len(parts) >= 2:
                try:
                    coords.append((float(parts[0]), float(parts[1])))
                except ValueError:
                    raise LevelFormatError(f"Line {line_num}: position must be 'x,y' numbers, got '{line}'") from None

    # Image coordinates start top-left, matplotlib starts bottom-left
    pos_dict = {}
    if coords:
        max_y = max(c[1] for c in coords)
        for i, (x, y) in enumerate(coords):
            pos_dict[i] = (x, max_y - y)
    return pos_dict


def export_level_matrix(level_path, output_path=None):
    level = load_level(level_path)
    matrix = graph_to_matrix(level.build_graph(), size=level.node_count)

    if output_path is None:
        os.makedirs(MATRIX_OUT_DIR, exist_ok=True)
        base, ext = os.path.splitext(os.path.basename(level_path))
        output_path = os.path.join(MATRIX_OUT_DIR, f"{base}_matrix{ext or '.txt'}")

    write_matrix(matrix, output_path)
    print(f"Success! Matrix saved to: {output_path}")
    return output_path


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python -m skynet.levels <level_file> [out_matrix]")
        sys.exit(1)

    try:
        export_level_matrix(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else None)
    except FileNotFoundError:
        print(f"Error: The file '{sys.argv[1]}' was not found.")
        sys.exit(1)
    except LevelFormatError as e:
        print(f"Error: {e}")
        sys.exit(1)
