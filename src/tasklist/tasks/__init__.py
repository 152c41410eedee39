"""
Task subsystem.

Components:
- task_models.py: the Task record and id parsing
- task_store.py: in-memory ordered store (add / complete / list)
- task_file.py: pipe-delimited text file backend
"""
