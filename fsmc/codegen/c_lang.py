import logging

from ..parser import MAX_EVENT_LENGTH
from .common import enum_name, event_list, target_name

logger = logging.getLogger(__name__)

HEADER = """#include <stdio.h>
#include <string.h>

typedef enum{
%s
} State;

"""

EVENTS_TEMPLATE = """void print_available_events(State s) {
     printf("   [Options: ");
     switch (s) {
%s
    }
    printf("]\\n");
}

"""

TERMINAL_TEMPLATE = """int is_terminal(State s) {
    switch (s) {
%s
        default: return 0;
    }
    return 0;
}

"""

NEXT_STATE_TEMPLATE = """State next_state(State current, const char* event) {
    switch (current) {
%s
    }
    return (State)-1;
}

"""

STATE_NAME_TEMPLATE = """const char* state_name(State s) {
     switch (s) {
%s
    }
    return "Unknown";
}"""

BOILERPLATE = """

int main() {
    State current = 0; // Assuming 0 is initial
    char buffer[%(buffer_size)d];

    printf("FSM Started...\\n");

    while(1) {
        printf("   Current State: %%s\\n", state_name(current));

        if (is_terminal(current)) {
            printf(">> Final state reached. Terminating.\\n");
            break;
        }

        print_available_events(current);

        printf(">> ");
        if (scanf("%%%(width)ds", buffer) != 1) break;

        State next = next_state(current, buffer);
        if (next != (State)-1) {
            printf(">> Transitioned: %%s -> %%s\\n", state_name(current), state_name(next));
            current = next;
        } else {
            printf(">> Invalid event. Stayed in %%s.\\n", state_name(current));
        }
    }
    return 0;
}
"""


class CGenerator:
    """Renders a resolved graph as one freestanding C translation unit."""

    def __init__(self, graph):
        self.graph = graph
        self.outputs = {'enum': [], 'events': [], 'terminals': [], 'cases': [], 'names': []}

    def generate(self):
        for node in self.graph.states:
            self.emit_state(node)

        source = HEADER % "\n".join(self.outputs['enum'])
        source += EVENTS_TEMPLATE % "\n".join(self.outputs['events'])
        source += TERMINAL_TEMPLATE % "\n".join(self.outputs['terminals'])
        source += NEXT_STATE_TEMPLATE % "\n".join(self.outputs['cases'])
        source += STATE_NAME_TEMPLATE % "\n".join(self.outputs['names'])
        source += BOILERPLATE % {'buffer_size': MAX_EVENT_LENGTH + 1, 'width': MAX_EVENT_LENGTH}

        logger.debug("Generated C for %d states", len(self.graph.states))
        return source

    def emit_state(self, node):
        label = enum_name(node.name)

        self.outputs['enum'].append(f"    {label},")

        self.outputs['events'].append(f"        case {label}:\n"
                                      f"            printf(\"{event_list(node)}\");\n"
                                      f"            break;")

        # No outgoing transitions means terminal
        if not node.transitions:
            self.outputs['terminals'].append(f"        case {label}: return 1;")

        case = f"        case {label}:\n"
        for t in node.transitions:
            case += (f"            if (strcmp(event, \"{t.event}\") == 0) "
                     f"return {enum_name(target_name(self.graph, t))};\n")
        case += "            break;"
        self.outputs['cases'].append(case)

        self.outputs['names'].append(f"        case {label}: return \"{node.name}\";")


def generate_c(graph):
    return CGenerator(graph).generate()
