"""
The MODEL layer contains pure data structures: calculator state, input
events and emitted history records.
It has NO knowledge of any UI and performs no arithmetic itself.
"""
