from .common import target_name


def generate_dot(graph):
    lines = ["digraph {"]
    for source, edge in graph.edges():
        lines.append(f"    {graph.states[source].name} -> {target_name(graph, edge)} [label=\"{edge.event}\"];")
    lines.append("}")
    return "\n".join(lines) + "\n"
