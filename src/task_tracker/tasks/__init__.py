"""
Task subsystem.

Components:
- task_models.py: data structures (Task, CompletionFlag)
- task_store.py: in-memory ordered storage with binary-search lookup
"""
