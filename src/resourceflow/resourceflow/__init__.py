"""ResourceFlow package.

Organized by feature modules (team members, projects, allocations, capacity, ...)
with a thin Flask controller layer over service/repository layers.
"""
