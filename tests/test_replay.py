import json

import matplotlib.pyplot as plt
import networkx as nx

from skynet import replay as replay_module
from skynet.replay import draw_step, replay, replay_steps

RECORD = {
    'links': [[0, 1], [1, 2], [2, 3]],
    'exits': [3],
    'turns': [
        {'turn': 1, 'agent': 2, 'severed': [2, 3]},
        {'turn': 2, 'agent': 1, 'severed': [1, 0]},
        {'turn': 3, 'agent': 5, 'severed': None},
    ],
}


def test_replay_steps_applies_cuts_in_order():
    steps = replay_steps(RECORD)
    assert len(steps) == 3
    assert not steps[0]['graph'].has_edge(2, 3)
    assert steps[0]['graph'].has_edge(0, 1)
    assert steps[1]['graph'].edges() == [(1, 2)]
    assert steps[1]['cut_so_far'] == [(2, 3), (1, 0)]
    assert steps[2]['severed'] is None
    assert steps[2]['graph'].find_node(3)


def test_draw_step_sets_title():
    steps = replay_steps(RECORD)
    G = nx.path_graph(4)
    pos = nx.circular_layout(G)
    fig, ax = plt.subplots()
    draw_step(ax, G, pos, steps[0], RECORD['exits'], len(steps))
    assert ax.get_title() == "Turn 1/3: Severed 2-3"
    draw_step(ax, G, pos, steps[2], RECORD['exits'], len(steps))
    assert ax.get_title() == "Turn 3/3: No link to sever"
    plt.close(fig)


def test_bad_positions_fall_back_to_layout(tmp_path, monkeypatch, capsys):
    record_file = tmp_path / "game.json"
    record_file.write_text(json.dumps(RECORD))
    pos_file = tmp_path / "pos.txt"
    pos_file.write_text("1,2\nfoo,bar\n")

    shown = {}
    monkeypatch.setattr(replay_module, "visualize_interactive",
                        lambda record, pos_dict=None: shown.update(record=record, pos=pos_dict))

    replay(str(record_file), str(pos_file))
    assert shown['record'] == RECORD
    assert shown['pos'] is None
    assert "Line 2" in capsys.readouterr().out
