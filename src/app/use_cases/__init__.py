"""
Use Cases

Organized into domain folders:
- students/: Student accounts and credentials
"""
