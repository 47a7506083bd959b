"""
db/ - Storage Layer
===================
Handles the JSON files that hold all persisted bot state.
This layer is the lowest in the architecture and has no dependencies on other layers.
"""
