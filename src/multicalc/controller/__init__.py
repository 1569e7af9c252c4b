"""
The CONTROLLER layer turns input events into new model states.
It is the only place that holds mutable calculator state.
"""
