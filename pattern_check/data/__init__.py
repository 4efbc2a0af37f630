"""
Invocation data models.

Execution context, flow definition and step identity as supplied by the
flow runner, plus the result handed back to it.
"""
