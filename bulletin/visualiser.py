import os
import tempfile
from subprocess import call

import pygraphviz as pgv

from bulletin.config import GRAPH_FOLDER, GRAPH_LAYOUT
from bulletin.observer import ThreadSafeRememberingObserver


def build_subject_graph(subjects):
    """ One edge per registered observer

        solid : the observer is bound back to the subject
        dashed : registered, but pulls from elsewhere (or nowhere)
        red : the observer pulls on its own thread

        Nodes are keyed by node_id, names only go into the labels
    """
    if not isinstance(subjects, (list, tuple, set)):
        subjects = (subjects,)

    A = pgv.AGraph(directed=True)

    for s in subjects:
        src = node_id(s)
        A.add_node(src, label=_label(s), shape='box')

        for obs in s.observers:
            tgt = node_id(obs)
            A.add_node(tgt, label=_label(obs))

            style = 'solid' if getattr(obs, 'subject', None) is s else 'dashed'
            if isinstance(obs, ThreadSafeRememberingObserver):
                color = 'red'
            else:
                color = 'gray'
            A.add_edge(src, tgt, color=color, style=style)

    return A


def display_subject_graph(subjects, layout=GRAPH_LAYOUT):
    return display_graph(build_subject_graph(subjects), layout=layout)


def display_graph(g, layout=GRAPH_LAYOUT, folder=None):
    """ Display the graph locally
        Currently only works where xdg-open exists
    """
    folder = folder or GRAPH_FOLDER
    fd, path = tempfile.mkstemp(suffix='.png', dir=folder)
    os.close(fd)

    gg = g.copy()
    gg.layout(layout)
    gg.draw(path)

    call(['xdg-open', path])
    return path


def node_id(x):
    return '%s@%x' % (x.__class__.__name__, id(x))


def _label(x):
    return getattr(x, 'name', None) or x.__class__.__name__


if __name__ == '__main__':
    from bulletin.topic import Topic, TopicSubscriber

    topic = Topic()
    for i in range(3):
        sub = TopicSubscriber('Observer %i' % (i + 1))
        topic.register(sub)
        if i:
            sub.bind(topic)

    display_subject_graph(topic)
