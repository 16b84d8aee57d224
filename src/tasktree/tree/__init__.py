"""
Task tree subsystem.

Components:
- task_models.py: data structures (TaskNode, IndexOutOfRange)
- task_tree.py: function-style operations used by the presentation layer
"""
