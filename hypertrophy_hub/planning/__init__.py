"""Plan generation engine.

Slot resolution, accessory selection, plan assembly and level progression.
"""
