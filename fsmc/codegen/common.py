def enum_name(name):
    return f"STATE_{name}"


def event_list(node, separator=", "):
    return separator.join(t.event for t in node.transitions)


def target_name(graph, edge):
    return graph.states[edge.target].name
