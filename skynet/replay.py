import sys
import json
import networkx as nx
import matplotlib.pyplot as plt
from matplotlib.widgets import Button

from skynet.graph import Graph
from skynet.levels import LevelFormatError, parse_positions

# --- CONFIGURATION ---
FIG_SIZE = (12, 9)
NODE_COLOR = 'lightgray'
EXIT_COLOR = 'green'
AGENT_COLOR = 'red'
SEVERED_COLOR = 'red'


def load_record(json_filepath):
    with open(json_filepath, 'r') as f:
        return json.load(f)


def replay_steps(record):
    """
    Walks a game record and returns one entry per turn:
    {'turn', 'agent', 'severed', 'cut_so_far', 'graph'}.
    'graph' is the Graph after that turn's cut.
    """
    graph = Graph.from_edges(tuple(pair) for pair in record['links'])
    cut_so_far = []
    steps = []

    for entry in record['turns']:
        severed = entry.get('severed')
        if severed is not None:
            graph.remove_edge(severed[0], severed[1])
            cut_so_far.append(tuple(severed))

        snapshot = graph.copy()
        steps.append({
            'turn': entry['turn'],
            'agent': entry['agent'],
            'severed': tuple(severed) if severed is not None else None,
            'cut_so_far': list(cut_so_far),
            'graph': snapshot,
        })
    return steps


def draw_step(ax, full_graph, pos, step, exits, total_steps):
    ax.clear()
    G = full_graph

    remaining = [e for e in G.edges() if step['graph'].has_edge(*e)]
    nx.draw_networkx_edges(G, pos, edgelist=remaining, ax=ax, edge_color='gray')
    nx.draw_networkx_edges(G, pos, edgelist=step['cut_so_far'], ax=ax,
                           edge_color=SEVERED_COLOR, style='dashed', alpha=0.5)
    nx.draw_networkx_nodes(G, pos, ax=ax, node_color=NODE_COLOR, node_size=200)
    nx.draw_networkx_labels(G, pos, ax=ax, font_size=7, font_weight='bold')

    exit_nodes = [e for e in exits if e in G]
    nx.draw_networkx_nodes(G, pos, nodelist=exit_nodes, ax=ax, node_color=EXIT_COLOR, node_size=350, label='Exit')
    if step['agent'] in G:
        nx.draw_networkx_nodes(G, pos, nodelist=[step['agent']], ax=ax, node_color=AGENT_COLOR,
                               node_size=350, label='Agent')

    if step['severed'] is not None:
        turn_text = f"Severed {step['severed'][0]}-{step['severed'][1]}"
    else:
        turn_text = "No link to sever"

    ax.set_title(f"Turn {step['turn']}/{total_steps}: {turn_text}", fontsize=14, fontweight='bold')
    ax.legend(loc="upper right")
    ax.axis('off')


def visualize_interactive(record, pos_dict=None):
    """Self-contained interactive Matplotlib UI for the game replay."""
    steps = replay_steps(record)
    if not steps:
        print("Error: The record contains no turns.")
        sys.exit(1)

    full_graph = Graph.from_edges(tuple(pair) for pair in record['links']).to_networkx()
    exits = record['exits']

    if pos_dict is None:
        print("No position file provided. Using auto-generated Spring Layout.")
        pos = nx.spring_layout(full_graph, seed=42)
    else:
        if len(pos_dict) != full_graph.number_of_nodes():
            print(f"Warning: Position count ({len(pos_dict)}) does not match Node count "
                  f"({full_graph.number_of_nodes()}).")
        pos = pos_dict

    fig, ax = plt.subplots(figsize=FIG_SIZE)
    plt.subplots_adjust(bottom=0.2)

    current_step = [0]

    def redraw():
        draw_step(ax, full_graph, pos, steps[current_step[0]], exits, len(steps))
        fig.canvas.draw_idle()

    redraw()

    axprev = plt.axes([0.35, 0.05, 0.1, 0.075])
    axnext = plt.axes([0.55, 0.05, 0.1, 0.075])
    bnext = Button(axnext, 'Next Turn')
    bprev = Button(axprev, 'Previous')

    def next_step(event):
        if current_step[0] < len(steps) - 1:
            current_step[0] += 1
            redraw()

    def prev_step(event):
        if current_step[0] > 0:
            current_step[0] -= 1
            redraw()

    bnext.on_clicked(next_step)
    bprev.on_clicked(prev_step)

    plt.show()


def replay(json_filepath, pos_filepath=None):
    print(f"Loading game record from: {json_filepath}")
    try:
        record = load_record(json_filepath)
    except FileNotFoundError:
        print("Error: JSON file not found. Did you run the game with --record first?")
        sys.exit(1)

    positions = None
    if pos_filepath:
        print(f"Loading positions from: {pos_filepath}")
        try:
            positions = parse_positions(pos_filepath)
        except FileNotFoundError:
            print(f"Warning: Position file '{pos_filepath}' not found. Using auto-layout.")
        except LevelFormatError as e:
            print(f"Warning: {e}. Using auto-layout.")

    print("Launching interactive replay...")
    visualize_interactive(record, pos_dict=positions or None)


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python -m skynet.replay <record.json> [positions_file]")
        sys.exit(1)

    replay(sys.argv[1], sys.argv[2] if len(sys.argv) > 2 else None)
