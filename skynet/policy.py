import sys

# Returned when there is nothing the defender can cut this turn.
NO_LINK = None


def find_sever_link(graph, agent, exits):
    """
    Picks and removes the link to sever this turn.

    1. If the agent sits next to an exit, cut that link (exits are checked in
       the order given, first match wins).
    2. Otherwise cut the link to the agent's lowest-labelled neighbor.

    Returns (agent, other_endpoint), or NO_LINK if the agent's node is unknown
    or has no links left. The graph is only modified when a link is returned.
    """
    if not graph.find_node(agent):
        print(f"Warning: agent position {agent} is not in the graph.", file=sys.stderr)
        return NO_LINK

    # --- PRIORITY: direct link to an exit ---
    for exit_node in exits:
        if graph.has_edge(agent, exit_node):
            print(f"Skynet agent adjacent to exit: {exit_node}", file=sys.stderr)
            graph.remove_edge(agent, exit_node)
            return (agent, exit_node)

    # --- FALLBACK: any link touching the agent ---
    candidates = graph.neighbors(agent)
    if not candidates:
        print(f"Warning: agent at {agent} has no links left to sever.", file=sys.stderr)
        return NO_LINK

    neighbor = candidates[0]
    graph.remove_edge(agent, neighbor)
    return (agent, neighbor)
