"""
Tests for the decision tree core.

Test organization:
- test_node.py: Node construction and inspection
- test_traversal.py: traverse(), add_child() and the effects trace on nodes
- test_trace.py: trace() results and tree inspection helpers
"""
